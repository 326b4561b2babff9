"""
Comprehension clauses
=====================

Already-parsed input of the desugaring engine: an ordered tuple of
generators, guards and assigns plus a yield expression.

Order matters: later clauses see names bound by earlier ones, and a guard
only sees names bound before it.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable
from dataclasses import dataclass

from .._errors import MalformedComprehensionError
from .._helpers import as_expression
from .._types import Expression, M, Predicate
from .patterns import Pattern, as_pattern
from .scope import check_binding_name


@dataclass(frozen=True, slots=True)
class Generator:
    """Bind pattern to each element produced by source."""

    pattern: Pattern
    source: Expression[M]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", as_pattern(self.pattern))
        object.__setattr__(self, "source", as_expression(self.source))


@dataclass(frozen=True, slots=True)
class Guard:
    """Keep only the bindings for which predicate holds."""

    predicate: Predicate

    def __post_init__(self) -> None:
        object.__setattr__(self, "predicate", as_expression(self.predicate))


@dataclass(frozen=True, slots=True)
class Assign:
    """Bind name to the value of an expression in the current scope."""

    name: str
    value: Expression[typing.Any]

    def __post_init__(self) -> None:
        check_binding_name(self.name, "Assign")
        object.__setattr__(self, "value", as_expression(self.value))


type Clause = Generator | Guard | Assign


@dataclass(frozen=True, slots=True)
class Comprehension:
    """
    Ordered clauses terminated by a yield expression.

    Validated on construction: at least one clause, a generator first,
    and a callable yield.
    """

    clauses: tuple[Clause, ...]
    yields: Expression[typing.Any]

    def __post_init__(self) -> None:
        clauses = tuple(self.clauses)
        if not clauses:
            raise MalformedComprehensionError("Comprehension needs at least one generator")
        for clause in clauses:
            if not isinstance(clause, (Generator, Guard, Assign)):
                raise MalformedComprehensionError(f"Not a comprehension clause: {clause!r}")
        if not isinstance(clauses[0], Generator):
            raise MalformedComprehensionError(
                f"Comprehension must start with a generator, got {type(clauses[0]).__name__}"
            )
        if self.yields is None:
            raise MalformedComprehensionError("Comprehension has no yield expression")
        object.__setattr__(self, "clauses", clauses)
        object.__setattr__(self, "yields", as_expression(self.yields))

    @property
    def generators(self) -> tuple[Generator, ...]:
        return tuple(clause for clause in self.clauses if isinstance(clause, Generator))

    @staticmethod
    def of(clauses: Iterable[Clause], yields: Expression[typing.Any]) -> Comprehension:
        return Comprehension(tuple(clauses), yields)


# ============================================================================
# Clause constructors
# ============================================================================


def gen(pattern: Pattern | str | tuple[typing.Any, ...], source: Expression[M] | M) -> Generator:
    """
    Generator clause.

    Example:
        gen("x", [1, 2])                      # constant source
        gen("y", lambda e: e.x)               # source depends on x
        gen(("k", "v"), lambda e: e.pairs)    # refutable: filters non-pairs
    """
    return Generator(pattern, source)  # type: ignore[arg-type]


def guard(predicate: Predicate) -> Guard:
    """Guard clause: guard(lambda e: e.x > 1)."""
    return Guard(predicate)


def let(name: str, value: Expression[typing.Any] | typing.Any) -> Assign:
    """Assign clause: let("z", lambda e: e.y + 1)."""
    return Assign(name, value)


__all__ = (
    "Assign",
    "Clause",
    "Comprehension",
    "Generator",
    "Guard",
    "gen",
    "guard",
    "let",
)
