"""
Comprehensions beyond lists.

Ordered clauses (generators, guards, assigns) terminated by a yield are
desugared into nested sequence / inject / empty_of calls, so any kind
implementing those capabilities can be comprehended.

Architecture:
- capability: Capabilities record, Registry keyed by kind, dispatch functions
- kinds: Maybe, list/tuple, LazySeq/iterators, kungfu Result
- comprehension: clauses, patterns, scope, desugaring engine, front end

Minimal complete definition for your kind: sequence + inject.
Add empty_of to enable guards and refutable patterns.
"""

# Core types
from ._types import Emptier, Expression, Injector, M, Predicate, Sequencer

# Internal helpers (for custom kinds)
from . import _helpers
from ._helpers import Const

# Capabilities
from . import capability
from .capability import (
    Capabilities,
    Registry,
    builtin_registry,
    empty_of,
    inject,
    sequence,
    supports,
)

# Built-in kinds
from . import kinds
from .kinds import NOTHING, Just, LazySeq, Maybe, Nothing, just, nothing, of_nullable

# Comprehension
from . import comprehension
from .comprehension import (
    # Clauses
    Assign,
    Comprehension,
    Generator,
    Guard,
    gen,
    guard,
    let,
    # Patterns
    ClassPattern,
    Literal,
    Name,
    Pattern,
    TuplePattern,
    Wildcard,
    # Scope
    Scope,
    # Engine
    Bind,
    DesugarPolicy,
    Program,
    Yield,
    desugar,
    # Analysis
    HoistableGuard,
    hoistable_guards,
    # Front end
    ForBuilder,
    bind,
    comprehend,
)

# Errors
from ._errors import (
    BindableError,
    HoistableGuardWarning,
    KindAlreadyRegisteredError,
    MalformedComprehensionError,
    MissingCapabilityError,
    PatternMismatch,
)

__all__ = (
    # Types
    "Expression",
    "Predicate",
    "M",
    "Sequencer",
    "Injector",
    "Emptier",
    # Internal helpers (for custom kinds)
    "_helpers",
    "Const",
    # Capabilities
    "capability",
    "Capabilities",
    "Registry",
    "builtin_registry",
    "sequence",
    "inject",
    "empty_of",
    "supports",
    # Kinds
    "kinds",
    "Maybe",
    "Just",
    "Nothing",
    "NOTHING",
    "just",
    "nothing",
    "of_nullable",
    "LazySeq",
    # Comprehension - clauses
    "comprehension",
    "Comprehension",
    "Generator",
    "Guard",
    "Assign",
    "gen",
    "guard",
    "let",
    # Comprehension - patterns
    "Pattern",
    "Name",
    "Wildcard",
    "Literal",
    "TuplePattern",
    "ClassPattern",
    # Comprehension - scope
    "Scope",
    # Comprehension - engine
    "Bind",
    "Yield",
    "Program",
    "DesugarPolicy",
    "desugar",
    # Comprehension - analysis
    "HoistableGuard",
    "hoistable_guards",
    # Comprehension - front end
    "ForBuilder",
    "bind",
    "comprehend",
    # Errors
    "BindableError",
    "HoistableGuardWarning",
    "KindAlreadyRegisteredError",
    "MalformedComprehensionError",
    "MissingCapabilityError",
    "PatternMismatch",
)
