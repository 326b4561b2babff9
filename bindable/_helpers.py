"""Internal helpers for bindable.

Common functions used across kinds and the comprehension engine.
These are not part of the public API but can be used when writing custom kinds."""

from __future__ import annotations

import dis
import types
import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._types import Expression

if typing.TYPE_CHECKING:
    from .comprehension.scope import Scope


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


@dataclass(frozen=True, slots=True)
class Const[T]:
    """
    Expression that ignores the scope and returns a fixed value.

    Sources wrapped in Const are known before evaluation, so their kind
    can be checked while desugaring.
    """

    value: T

    def __call__(self, scope: Scope) -> T:
        _ = scope
        return self.value


def as_expression[T](obj: Expression[T] | T) -> Expression[T]:
    """
    Coerce obj into an expression.

    Callables are taken as expressions over the scope; anything else
    becomes Const. Wrap callable monadic values in Const yourself.
    """
    if callable(obj):
        return typing.cast(Expression[T], obj)
    return Const(obj)


def referenced_names(fn: Callable[..., typing.Any]) -> frozenset[str] | None:
    """
    Names an expression reads from its scope.

    Collected from attribute loads on the scope parameter, including
    inside nested lambdas and comprehensions. None when fn is opaque:
    no inspectable code (builtins, partials, callable objects, bound
    methods), or the scope is used other than by attribute access
    (e["y"], helper(e), ...).
    """
    if isinstance(fn, Const):
        return frozenset()
    code = getattr(fn, "__code__", None)
    if isinstance(fn, types.MethodType) or not isinstance(code, types.CodeType):
        return None
    if code.co_argcount == 0:
        return None
    return _scope_reads(code, code.co_varnames[0])


_FAST_LOADS: typing.Final = frozenset(
    ("LOAD_FAST", "LOAD_FAST_CHECK", "LOAD_FAST_BORROW", "LOAD_FAST_LOAD_FAST", "LOAD_FAST_BORROW_LOAD_FAST_BORROW")
)


def _scope_reads(code: types.CodeType, scope: str) -> frozenset[str] | None:
    # A captured scope lives in a cell: uses go through LOAD_DEREF, while
    # plain loads of the cell only build closures for nested code.
    if scope in code.co_cellvars or scope in code.co_freevars:
        uses = frozenset(("LOAD_DEREF",))
    else:
        uses = _FAST_LOADS

    names: set[str] = set()
    instructions = [i for i in dis.get_instructions(code) if i.opname != "EXTENDED_ARG"]
    for index, instruction in enumerate(instructions):
        if instruction.opname not in uses:
            continue
        loaded = instruction.argval if isinstance(instruction.argval, tuple) else (instruction.argval,)
        if scope not in loaded:
            continue
        following = instructions[index + 1] if index + 1 < len(instructions) else None
        if len(loaded) > 1 or following is None or following.opname != "LOAD_ATTR":
            return None
        names.add(following.argval)

    for const in code.co_consts:
        if isinstance(const, types.CodeType) and scope in const.co_freevars:
            nested = _scope_reads(const, scope)
            if nested is None:
                return None
            names |= nested
    return frozenset(names)


__all__ = (
    "Const",
    "as_expression",
    "identity",
    "referenced_names",
)
