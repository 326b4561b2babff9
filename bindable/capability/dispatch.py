"""
Capability dispatch
===================

Resolve a monadic value to its kind's implementation and call it.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._types import M
from .capabilities import EMPTY_OF, INJECT, SEQUENCE
from .registry import Registry, builtin_registry


def resolve(registry: Registry | None) -> Registry:
    """The given registry, or the built-in one."""
    return registry if registry is not None else builtin_registry()


def sequence(m: M, f: Callable[[typing.Any], M], *, registry: Registry | None = None) -> M:
    """Flat-map m with f using m's kind."""
    return resolve(registry).require(type(m), SEQUENCE)(m, f)


def inject(example: M, value: typing.Any, *, registry: Registry | None = None) -> M:
    """Smallest value of example's kind that yields value once."""
    return resolve(registry).require(type(example), INJECT)(example, value)


def empty_of(example: M, *, registry: Registry | None = None) -> M:
    """Zero value of example's kind."""
    return resolve(registry).require(type(example), EMPTY_OF)(example)


def supports(value_or_kind: typing.Any, capability: str, *, registry: Registry | None = None) -> bool:
    """
    Whether a value (or a kind, when given a type) provides capability.

    Example:
        supports([1], "empty_of")      # True
        supports(Ok(1), "empty_of")    # False
    """
    kind = value_or_kind if isinstance(value_or_kind, type) else type(value_or_kind)
    return resolve(registry).supports(kind, capability)


__all__ = ("empty_of", "inject", "resolve", "sequence", "supports")
