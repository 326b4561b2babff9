"""
Comprehension
=============

Clauses, patterns and scope, the desugaring engine and its node tree,
plus the comprehend / bind front end.
"""

from .analysis import HoistableGuard, hoistable_guards
from .ast import Bind, Node, Program, Yield
from .clauses import Assign, Clause, Comprehension, Generator, Guard, gen, guard, let
from .desugar import DEFAULT_POLICY, DesugarPolicy, desugar
from .fluent import ForBuilder, bind, comprehend
from .patterns import WILDCARD, ClassPattern, Literal, Name, Pattern, TuplePattern, Wildcard, as_pattern
from .scope import EMPTY_SCOPE, Scope

__all__ = (
    # Clauses
    "Clause",
    "Generator",
    "Guard",
    "Assign",
    "Comprehension",
    "gen",
    "guard",
    "let",
    # Patterns
    "Pattern",
    "Name",
    "Wildcard",
    "WILDCARD",
    "Literal",
    "TuplePattern",
    "ClassPattern",
    "as_pattern",
    # Scope
    "Scope",
    "EMPTY_SCOPE",
    # Engine
    "Node",
    "Bind",
    "Yield",
    "Program",
    "DesugarPolicy",
    "DEFAULT_POLICY",
    "desugar",
    # Analysis
    "HoistableGuard",
    "hoistable_guards",
    # Front end
    "ForBuilder",
    "bind",
    "comprehend",
)
