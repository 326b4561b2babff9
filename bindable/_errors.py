from __future__ import annotations

import typing
from dataclasses import dataclass


def kind_name(kind: type) -> str:
    module = getattr(kind, "__module__", "")
    qualname = getattr(kind, "__qualname__", repr(kind))
    if module in ("builtins", ""):
        return qualname
    return f"{module}.{qualname}"


class BindableError(Exception):
    """Base class for every error raised by bindable."""


class MissingCapabilityError(BindableError, TypeError):
    """Kind has no implementation of a capability the comprehension needs."""

    kind: type
    capability: str

    def __init__(self, kind: type, capability: str) -> None:
        self.kind = kind
        self.capability = capability
        super().__init__(f"Kind {kind_name(kind)!r} has no {capability!r} capability")


class MalformedComprehensionError(BindableError, ValueError):
    """Clause list cannot be desugared."""


class KindAlreadyRegisteredError(BindableError, ValueError):
    """Registry already holds capabilities for this kind."""

    kind: type

    def __init__(self, kind: type) -> None:
        self.kind = kind
        super().__init__(f"Kind {kind_name(kind)!r} is already registered")


class HoistableGuardWarning(UserWarning):
    """Guard does not depend on its generator and could be evaluated earlier."""


@dataclass(frozen=True, slots=True)
class PatternMismatch:
    """
    Value did not fit a generator pattern.

    Never raised: carried inside kungfu Error and turned into empty_of
    by the step function, same as a failed guard.
    """

    pattern: typing.Any
    value: typing.Any

    def __str__(self) -> str:
        return f"{self.value!r} does not match {self.pattern!r}"


__all__ = (
    "BindableError",
    "HoistableGuardWarning",
    "KindAlreadyRegisteredError",
    "MalformedComprehensionError",
    "MissingCapabilityError",
    "PatternMismatch",
    "kind_name",
)
