"""
Generator patterns
==================

What a generator binds for each produced element. Matching is fallible:
match() returns kungfu Ok(bindings) or Error(PatternMismatch), and the
step function turns Error into empty_of, exactly like a failed guard.
"""

from __future__ import annotations

import typing
from collections.abc import Sequence
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .._errors import PatternMismatch
from .scope import check_binding_name

type Bindings = dict[str, typing.Any]


class Pattern:
    """Base pattern. Subclasses implement match, names and refutable."""

    __slots__ = ()

    def match(self, value: typing.Any) -> Result[Bindings, PatternMismatch]:
        raise NotImplementedError

    @property
    def names(self) -> frozenset[str]:
        """Names bound on a successful match."""
        raise NotImplementedError

    @property
    def refutable(self) -> bool:
        """Whether some value can fail to match."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Name(Pattern):
    """Bind the whole value to a name. Always matches."""

    name: str

    def __post_init__(self) -> None:
        check_binding_name(self.name, "Pattern")

    def match(self, value: typing.Any) -> Result[Bindings, PatternMismatch]:
        return Ok({self.name: value})

    @property
    def names(self) -> frozenset[str]:
        return frozenset((self.name,))

    @property
    def refutable(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Wildcard(Pattern):
    """Match anything, bind nothing."""

    def match(self, value: typing.Any) -> Result[Bindings, PatternMismatch]:
        _ = value
        return Ok({})

    @property
    def names(self) -> frozenset[str]:
        return frozenset()

    @property
    def refutable(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Literal(Pattern):
    """Match values equal to a constant."""

    value: typing.Any

    def match(self, value: typing.Any) -> Result[Bindings, PatternMismatch]:
        if value == self.value:
            return Ok({})
        return Error(PatternMismatch(self, value))

    @property
    def names(self) -> frozenset[str]:
        return frozenset()

    @property
    def refutable(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class TuplePattern(Pattern):
    """
    Destructure a sequence of exactly len(items) elements.

    Strings and bytes are not destructured.
    """

    items: tuple[Pattern, ...]

    def match(self, value: typing.Any) -> Result[Bindings, PatternMismatch]:
        if (
            not isinstance(value, Sequence)
            or isinstance(value, (str, bytes, bytearray))
            or len(value) != len(self.items)
        ):
            return Error(PatternMismatch(self, value))
        return _match_all(self, self.items, value)

    @property
    def names(self) -> frozenset[str]:
        return frozenset().union(*(item.names for item in self.items))

    @property
    def refutable(self) -> bool:
        # the shape itself can always fail
        return True


@dataclass(frozen=True, slots=True)
class ClassPattern(Pattern):
    """
    isinstance check plus positional sub-patterns, like `case Just(x):`.

    Positional arguments are taken from cls.__match_args__.
    """

    cls: type
    args: tuple[Pattern, ...] = ()

    def __post_init__(self) -> None:
        match_args = getattr(self.cls, "__match_args__", ())
        if len(self.args) > len(match_args):
            raise TypeError(
                f"{self.cls.__name__}() accepts {len(match_args)} positional sub-patterns ({len(self.args)} given)"
            )

    def match(self, value: typing.Any) -> Result[Bindings, PatternMismatch]:
        if not isinstance(value, self.cls):
            return Error(PatternMismatch(self, value))
        match_args = getattr(self.cls, "__match_args__", ())
        fields = [getattr(value, attr) for attr in match_args[: len(self.args)]]
        return _match_all(self, self.args, fields)

    @property
    def names(self) -> frozenset[str]:
        return frozenset().union(*(arg.names for arg in self.args))

    @property
    def refutable(self) -> bool:
        return True


def _match_all(
    whole: Pattern,
    patterns: Sequence[Pattern],
    values: Sequence[typing.Any],
) -> Result[Bindings, PatternMismatch]:
    bindings: Bindings = {}
    for pattern, item in zip(patterns, values, strict=True):
        match pattern.match(item):
            case Ok(found):
                bindings.update(found)
            case Error(_):
                return Error(PatternMismatch(whole, values))
    return Ok(bindings)


WILDCARD: typing.Final = Wildcard()


def as_pattern(obj: Pattern | str | tuple[typing.Any, ...]) -> Pattern:
    """
    Coerce shorthand into a Pattern.

    - "x"        -> Name("x")
    - "_"        -> Wildcard()
    - ("x", "y") -> TuplePattern((Name("x"), Name("y")))
    """
    match obj:
        case Pattern():
            return obj
        case "_":
            return WILDCARD
        case str(name):
            return Name(name)
        case tuple(items):
            return TuplePattern(tuple(as_pattern(item) for item in items))
        case _:
            raise TypeError(f"Cannot use {obj!r} as a pattern")


__all__ = (
    "WILDCARD",
    "Bindings",
    "ClassPattern",
    "Literal",
    "Name",
    "Pattern",
    "TuplePattern",
    "Wildcard",
    "as_pattern",
)
