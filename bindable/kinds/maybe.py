"""
Maybe
=====

Optional value that is either Just(value) or Nothing(), plus its
capabilities. Nothing is a singleton, available as NOTHING.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from ..capability.capabilities import Capabilities


class Maybe[T]:
    """Optional value that may contain ``Just`` data or ``Nothing``."""

    __slots__ = ()

    def is_just(self) -> bool:
        """Return ``True`` when the value is present."""
        return isinstance(self, Just)

    def is_nothing(self) -> bool:
        """Return ``True`` when no value is present."""
        return isinstance(self, Nothing)

    def unwrap(self) -> T:
        """Return the contained value or raise ``ValueError``."""
        if isinstance(self, Just):
            return self.value
        raise ValueError("Called unwrap on Nothing value")

    def unwrap_or[U](self, default: U) -> T | U:
        if isinstance(self, Just):
            return self.value
        return default

    def to_optional(self) -> T | None:
        """Convert to a Python optional value."""
        if isinstance(self, Just):
            return self.value
        return None

    @staticmethod
    def of_nullable[V](value: V | None) -> Maybe[V]:
        """None becomes Nothing, anything else Just."""
        if value is None:
            return NOTHING
        return Just(value)

    def __bool__(self) -> bool:
        return self.is_just()


@dataclass(frozen=True, slots=True)
class Just[T](Maybe[T]):
    """Presence of a value."""

    value: T


class Nothing(Maybe[typing.Never]):
    """Singleton representing the absence of a value."""

    __slots__ = ()
    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing()"


NOTHING: typing.Final[Nothing] = Nothing()


# Convenience constructors
def just[T](value: T) -> Maybe[T]:
    return Just(value)


def nothing() -> Maybe[typing.Never]:
    return NOTHING


def of_nullable[T](value: T | None) -> Maybe[T]:
    return Maybe.of_nullable(value)


# ============================================================================
# Capabilities
# ============================================================================


def _sequence[A, B](m: Maybe[A], f: Callable[[A], Maybe[B]]) -> Maybe[B]:
    match m:
        case Just(value):
            return f(value)
        case _:
            return NOTHING


def _inject[B](example: Maybe[typing.Any], value: B) -> Maybe[B]:
    _ = example
    return Just(value)


def _empty_of(example: Maybe[typing.Any]) -> Maybe[typing.Never]:
    _ = example
    return NOTHING


MAYBE: typing.Final = Capabilities(sequence=_sequence, inject=_inject, empty_of=_empty_of)

__all__ = (
    "MAYBE",
    "NOTHING",
    "Just",
    "Maybe",
    "Nothing",
    "just",
    "nothing",
    "of_nullable",
)
