"""
Desugaring engine
=================

Rewrite (clauses, yields) into nested Bind / Yield nodes.

One recursion frame per generator. Within a frame, assigns and guards are
collected in order until the next generator (or the end of the clauses)
closes the frame:

    x <- xs, if p(x), y <- ys(x), z = f(y), if q(y, z)  => yield r

becomes

    sequence(xs, x ->
        if not p(x): empty_of(xs)
        else sequence(ys(x), y ->
            z = f(y)
            if not q(y, z): empty_of(ys(x))
            else inject(ys(x), r)))

Guards therefore run right after the generator that closes over them,
never after later generators.
"""

from __future__ import annotations

import logging
import typing
import warnings
from collections.abc import Sequence
from dataclasses import dataclass

from .._errors import HoistableGuardWarning, MalformedComprehensionError
from .._helpers import Const
from .._types import Expression
from ..capability.capabilities import EMPTY_OF, INJECT, SEQUENCE
from ..capability.dispatch import resolve
from ..capability.registry import Registry
from .analysis import hoistable_guards
from .ast import Bind, Node, Program, Yield
from .clauses import Assign, Clause, Comprehension, Generator, Guard

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DesugarPolicy:
    """
    Desugaring options.

    check_capabilities: check constant sources against the registry while
        desugaring instead of at evaluation time.
    warn_hoistable: emit HoistableGuardWarning for guards that could run
        before their generator.
    """

    check_capabilities: bool = True
    warn_hoistable: bool = False

    @staticmethod
    def strict() -> DesugarPolicy:
        return DesugarPolicy(check_capabilities=True, warn_hoistable=True)


DEFAULT_POLICY: typing.Final = DesugarPolicy()


def desugar(
    comprehension: Comprehension,
    *,
    registry: Registry | None = None,
    policy: DesugarPolicy | None = None,
) -> Program:
    """
    Desugar a comprehension into a Program bound to registry.

    Raises MissingCapabilityError right away for constant sources whose
    kind cannot serve the clauses attached to it; dynamic sources are
    checked when evaluated.
    """
    if not isinstance(comprehension, Comprehension):
        raise MalformedComprehensionError(f"Expected Comprehension, got {type(comprehension).__name__}")
    registry = resolve(registry)
    policy = policy if policy is not None else DEFAULT_POLICY

    if policy.warn_hoistable:
        for hoistable in hoistable_guards(comprehension):
            warnings.warn(str(hoistable), HoistableGuardWarning, stacklevel=2)

    first, *rest = comprehension.clauses
    root = _desugar_scope(typing.cast(Generator, first), rest, comprehension.yields, registry, policy)

    logger.debug(
        "desugared comprehension: %d clauses, %d generators",
        len(comprehension.clauses),
        len(comprehension.generators),
    )
    return Program(root, registry)


def _desugar_scope(
    generator: Generator,
    rest: Sequence[Clause],
    yields: Expression[typing.Any],
    registry: Registry,
    policy: DesugarPolicy,
) -> Bind:
    assigns: list[Assign] = []
    guards: list[Guard] = []

    for index, clause in enumerate(rest):
        match clause:
            case Assign():
                assigns.append(clause)
            case Guard():
                guards.append(clause)
            case Generator():
                body = _desugar_scope(clause, rest[index + 1 :], yields, registry, policy)
                return _bind(generator, assigns, guards, body, registry, policy)

    return _bind(generator, assigns, guards, Yield(yields), registry, policy)


def _bind(
    generator: Generator,
    assigns: list[Assign],
    guards: list[Guard],
    body: Node,
    registry: Registry,
    policy: DesugarPolicy,
) -> Bind:
    node = Bind(
        source=generator.source,
        pattern=generator.pattern,
        assigns=tuple(assigns),
        guards=tuple(guards),
        body=body,
    )
    if policy.check_capabilities and isinstance(node.source, Const):
        kind = type(node.source.value)
        registry.require(kind, SEQUENCE)
        if isinstance(body, Yield):
            registry.require(kind, INJECT)
        if node.filters:
            registry.require(kind, EMPTY_OF)
    return node


__all__ = ("DEFAULT_POLICY", "DesugarPolicy", "desugar")
