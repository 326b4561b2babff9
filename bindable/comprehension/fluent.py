"""
Front end: one-call and fluent ways to build and run comprehensions.

    comprehend(
        gen("x", just(1)),
        gen("y", just(2)),
        guard(lambda e: e.x + e.y > 4),
        gen("z", just(3)),
        yields=lambda e: e.x + e.y + e.z,
    )  # Nothing()

    (
        bind("x", [[10, 20], [30]])
        .where(lambda e: len(e.x) > 1)
        .bind("y", lambda e: e.x)
        .let("z", lambda e: e.y + 1)
        .where(lambda e: e.y + e.z > 21)
        .yields(lambda e: (e.y, e.z))
    )  # [(20, 21)]
"""

from __future__ import annotations

import typing
from collections.abc import Mapping
from dataclasses import dataclass

from .._types import Expression, M, Predicate
from ..capability.registry import Registry
from .clauses import Clause, Comprehension, gen, guard, let
from .desugar import DesugarPolicy, desugar
from .patterns import Pattern
from .scope import Scope

type PatternLike = Pattern | str | tuple[typing.Any, ...]


def comprehend(
    *clauses: Clause,
    yields: Expression[typing.Any],
    registry: Registry | None = None,
    scope: Scope | Mapping[str, typing.Any] | None = None,
    policy: DesugarPolicy | None = None,
) -> M:
    """Desugar and evaluate in one call."""
    program = desugar(Comprehension(clauses, yields), registry=registry, policy=policy)
    return program.evaluate(scope)


@dataclass(frozen=True, slots=True)
class ForBuilder:
    """
    Fluent builder for comprehensions.

    Each method returns a new builder; the receiver is never changed, so a
    partial builder can be reused as a prefix.
    """

    clauses: tuple[Clause, ...]

    def bind(self, pattern: PatternLike, source: Expression[M] | M) -> ForBuilder:
        return ForBuilder((*self.clauses, gen(pattern, source)))

    def where(self, predicate: Predicate) -> ForBuilder:
        return ForBuilder((*self.clauses, guard(predicate)))

    def let(self, name: str, value: Expression[typing.Any] | typing.Any) -> ForBuilder:
        return ForBuilder((*self.clauses, let(name, value)))

    def build(self, yields: Expression[typing.Any]) -> Comprehension:
        return Comprehension(self.clauses, yields)

    def yields(
        self,
        value: Expression[typing.Any],
        *,
        registry: Registry | None = None,
        scope: Scope | Mapping[str, typing.Any] | None = None,
        policy: DesugarPolicy | None = None,
    ) -> M:
        return desugar(self.build(value), registry=registry, policy=policy).evaluate(scope)


def bind(pattern: PatternLike, source: Expression[M] | M) -> ForBuilder:
    """Start a fluent comprehension with its first generator."""
    return ForBuilder((gen(pattern, source),))


__all__ = ("ForBuilder", "bind", "comprehend")
