"""
Desugared comprehension tree.

Architecture:
- Bind  - sequence(source, step); step matches, assigns, guards, then runs body
- Yield - inject(nearest generator's source value, yields)
- Program - root Bind paired with the Registry that evaluates it

Nodes are frozen dataclasses, so two desugarings of the same
comprehension compare equal. lower(registry) turns a node into plain
closures; nothing runs until the Program is evaluated.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Ok

from .._types import Expression, M
from ..capability.capabilities import EMPTY_OF, INJECT, SEQUENCE
from ..capability.registry import Registry
from .clauses import Assign, Guard
from .patterns import Pattern
from .scope import EMPTY_SCOPE, Scope

# Lowered node: (scope, example) -> monadic value; example is the source
# value of the enclosing generator, None at the root
type Lowered = Callable[[Scope, typing.Any], M]


class Node:
    """
    AST node that can be lowered into an executable closure.
    """

    def lower(self, registry: Registry) -> Lowered:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Yield(Node):
    value: Expression[typing.Any]

    def lower(self, registry: Registry) -> Lowered:
        value = self.value

        def run(scope: Scope, example: typing.Any) -> M:
            return registry.require(type(example), INJECT)(example, value(scope))

        return run


@dataclass(frozen=True, slots=True)
class Bind(Node):
    source: Expression[M]
    pattern: Pattern
    assigns: tuple[Assign, ...]
    guards: tuple[Guard, ...]
    body: Node

    @property
    def filters(self) -> bool:
        """Whether the step can drop an element, which needs empty_of."""
        return bool(self.guards) or self.pattern.refutable

    def lower(self, registry: Registry) -> Lowered:
        body = self.body.lower(registry)
        source, pattern, assigns, guards = self.source, self.pattern, self.assigns, self.guards
        filters = self.filters
        yields_here = isinstance(self.body, Yield)

        def run(scope: Scope, example: typing.Any) -> M:
            _ = example
            ma = source(scope)
            kind = type(ma)
            sequence = registry.require(kind, SEQUENCE)
            if yields_here:
                registry.require(kind, INJECT)
            empty_of = registry.require(kind, EMPTY_OF) if filters else None

            def step(value: typing.Any) -> M:
                match pattern.match(value):
                    case Ok(bindings):
                        inner = scope.extend(bindings)
                    case Error(_):
                        return empty_of(ma)  # type: ignore[misc]
                    case _ as unreachable:
                        assert_never(unreachable)

                for assign in assigns:
                    inner = inner.bind(assign.name, assign.value(inner))
                for clause in guards:
                    if not clause.predicate(inner):
                        return empty_of(ma)  # type: ignore[misc]
                return body(inner, ma)

            return sequence(ma, step)

        return run


@dataclass(frozen=True, slots=True)
class Program:
    """
    Desugared comprehension ready to run.

    Evaluation is as lazy as the first generator's kind: a LazySeq result
    does no work until iterated.

    Hashable when every constant source is, like a tuple.
    """

    root: Bind
    registry: Registry

    def lower(self) -> Callable[[Scope], M]:
        run = self.root.lower(self.registry)

        def evaluate(scope: Scope) -> M:
            return run(scope, None)

        return evaluate

    def evaluate(self, scope: Scope | Mapping[str, typing.Any] | None = None) -> M:
        """Run with optional outer names visible to every expression."""
        return self.lower()(as_scope(scope))


def as_scope(scope: Scope | Mapping[str, typing.Any] | None) -> Scope:
    if scope is None:
        return EMPTY_SCOPE
    if isinstance(scope, Scope):
        return scope
    return Scope(scope)


__all__ = ("Bind", "Lowered", "Node", "Program", "Yield", "as_scope")
