"""
kungfu Result
=============

Ok / Error as a comprehension kind. A generator over Error
short-circuits the whole comprehension, like Maybe's Nothing.

Result has no meaningful empty value, so there is no empty_of: guards
and refutable patterns over Result sources are rejected.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from ..capability.capabilities import Capabilities


def _sequence[A, B, E](m: Result[A, E], f: Callable[[A], Result[B, E]]) -> Result[B, E]:
    match m:
        case Ok(value):
            return f(value)
        case Error(_):
            return m
        case _ as unreachable:
            assert_never(unreachable)


def _inject[B](example: Result[typing.Any, typing.Any], value: B) -> Result[B, typing.Never]:
    _ = example
    return Ok(value)


RESULT: typing.Final = Capabilities(sequence=_sequence, inject=_inject)

__all__ = ("RESULT",)
