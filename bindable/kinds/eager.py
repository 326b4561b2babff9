"""
Eager sequences
===============

list and tuple as comprehension kinds. Everything is materialized right
away; results keep the concrete type of the sequence they came from.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from ..capability.capabilities import Capabilities


def _sequence_list[A, B](m: list[A], f: Callable[[A], Iterable[B]]) -> list[B]:
    return [b for a in m for b in f(a)]


def _inject_list[B](example: list[typing.Any], value: B) -> list[B]:
    _ = example
    return [value]


def _empty_list(example: list[typing.Any]) -> list[typing.Never]:
    _ = example
    return []


def _sequence_tuple[A, B](m: tuple[A, ...], f: Callable[[A], Iterable[B]]) -> tuple[B, ...]:
    return tuple(b for a in m for b in f(a))


def _inject_tuple[B](example: tuple[typing.Any, ...], value: B) -> tuple[B]:
    _ = example
    return (value,)


def _empty_tuple(example: tuple[typing.Any, ...]) -> tuple[()]:
    _ = example
    return ()


LIST: typing.Final = Capabilities(sequence=_sequence_list, inject=_inject_list, empty_of=_empty_list)
TUPLE: typing.Final = Capabilities(sequence=_sequence_tuple, inject=_inject_tuple, empty_of=_empty_tuple)

__all__ = ("LIST", "TUPLE")
