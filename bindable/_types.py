"""
Core type definitions for bindable.

Type aliases shared by capabilities, kinds and the comprehension engine.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

if typing.TYPE_CHECKING:
    from .comprehension.scope import Scope

# ============================================================================
# Comprehension expressions
# ============================================================================

# Expression = user code evaluated against the names bound so far
type Expression[T] = Callable[[Scope], T]

# Predicate = guard expression
type Predicate = Callable[[Scope], bool]

# ============================================================================
# Capability signatures
# ============================================================================

# M = opaque monadic value; the registry decides what it means
type M = typing.Any

# Sequencer = flat-map: (m, f) -> m
type Sequencer = Callable[[M, Callable[[typing.Any], M]], M]

# Injector = pure: (example, value) -> m; example only selects the kind
type Injector = Callable[[M, typing.Any], M]

# Emptier = empty: example -> m; example only selects the kind
type Emptier = Callable[[M], M]

__all__ = (
    # Expressions
    "Expression",
    "Predicate",
    # Capabilities
    "M",
    "Sequencer",
    "Injector",
    "Emptier",
)
