"""
Guard placement analysis.

A guard that reads none of the names introduced in its own generator
scope runs once per element of that generator even though its outcome
cannot depend on the element. Moving it before the generator gives the
same result with less work (for sequence kinds, often much less).

    gen("x", xs), gen("y", ys), guard(lambda e: e.x < 2)   # hoistable
    gen("x", xs), guard(lambda e: e.x < 2), gen("y", ys)   # fine
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._helpers import referenced_names
from .clauses import Assign, Comprehension, Generator, Guard
from .scope import RESERVED_NAMES


@dataclass(frozen=True, slots=True)
class HoistableGuard:
    guard: Guard
    generator: Generator
    position: int

    def __str__(self) -> str:
        names = ", ".join(sorted(self.generator.pattern.names)) or "_"
        return f"guard at clause {self.position} does not use {names} and could run before its generator"


def _scope_names(fn: typing.Any) -> frozenset[str] | None:
    names = referenced_names(fn)
    # e.get("y") and friends read bindings through Scope methods
    if names is None or names & RESERVED_NAMES:
        return None
    return names


def hoistable_guards(comprehension: Comprehension) -> tuple[HoistableGuard, ...]:
    """
    Guards that do not depend on their generator scope.

    Dependencies are attribute reads on the scope parameter of plain
    functions and lambdas. Any other use of the scope, and any other kind
    of callable, is assumed to depend on everything.
    """
    found: list[HoistableGuard] = []
    current: Generator | None = None
    local: set[str] = set()

    for position, clause in enumerate(comprehension.clauses):
        match clause:
            case Generator():
                current = clause
                local = set(clause.pattern.names)
            case Assign():
                names = _scope_names(clause.value)
                if names is None or names & local:
                    local.add(clause.name)
                else:
                    local.discard(clause.name)
            case Guard():
                names = _scope_names(clause.predicate)
                if names is not None and not names & local and current is not None:
                    found.append(HoistableGuard(clause, current, position))

    return tuple(found)


__all__ = ("HoistableGuard", "hoistable_guards")
