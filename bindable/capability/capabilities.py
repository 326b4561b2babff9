"""
Capability record
=================

The three capabilities a kind implements to take part in comprehensions.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._types import Emptier, Injector, Sequencer

SEQUENCE: typing.Final = "sequence"
INJECT: typing.Final = "inject"
EMPTY_OF: typing.Final = "empty_of"

CAPABILITY_NAMES: typing.Final[tuple[str, ...]] = (SEQUENCE, INJECT, EMPTY_OF)


@dataclass(frozen=True, slots=True)
class Capabilities:
    """
    Typeclass instance for one kind.

    - sequence(m, f): flat-map, required for every generator
    - inject(example, value): pure, required to yield
    - empty_of(example): empty, required only by guards and refutable patterns

    Laws (left/right identity, associativity) are assumed, not checked.
    Missing entries are reported when a comprehension needs them.
    """

    sequence: Sequencer | None = None
    inject: Injector | None = None
    empty_of: Emptier | None = None

    def get(self, capability: str) -> typing.Callable[..., typing.Any] | None:
        if capability not in CAPABILITY_NAMES:
            raise ValueError(f"Unknown capability {capability!r}, expected one of {CAPABILITY_NAMES}")
        return getattr(self, capability)

    def provides(self, capability: str) -> bool:
        return self.get(capability) is not None

    @property
    def complete(self) -> bool:
        """Minimal complete definition: sequence and inject."""
        return self.sequence is not None and self.inject is not None


__all__ = (
    "CAPABILITY_NAMES",
    "EMPTY_OF",
    "INJECT",
    "SEQUENCE",
    "Capabilities",
)
