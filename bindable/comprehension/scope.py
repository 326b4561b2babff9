from __future__ import annotations

import typing
from collections.abc import Iterator, Mapping
from types import MappingProxyType


class Scope(Mapping[str, typing.Any]):
    """
    Names bound at one point of a comprehension.

    Immutable: bind() and extend() return a new scope, and later
    bindings shadow earlier ones. Expressions read names as attributes:

        guard(lambda e: e.x + e.y > 4)

    Binding names may not collide with Scope members (keys, items, get,
    bind, ...); see RESERVED_NAMES.
    """

    __slots__ = ("_names",)

    def __init__(self, names: Mapping[str, typing.Any] | None = None, /, **bindings: typing.Any) -> None:
        merged = dict(names or {})
        merged.update(bindings)
        object.__setattr__(self, "_names", MappingProxyType(merged))

    def bind(self, name: str, value: typing.Any) -> Scope:
        return Scope(self._names, **{name: value})

    def extend(self, bindings: Mapping[str, typing.Any]) -> Scope:
        if not bindings:
            return self
        return Scope({**self._names, **bindings})

    def __getattr__(self, name: str) -> typing.Any:
        # _names is unset while copy and pickle rebuild the object
        if name == "_names" or name.startswith("__"):
            raise AttributeError(name)
        try:
            return self._names[name]
        except KeyError:
            raise AttributeError(f"Name {name!r} is not bound in this scope") from None

    def __setattr__(self, name: str, value: typing.Any) -> None:
        raise AttributeError("Scope is immutable, use bind()")

    def __getitem__(self, name: str) -> typing.Any:
        return self._names[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __reduce__(self) -> tuple[typing.Any, ...]:
        return (Scope, (dict(self._names),))

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._names.items())
        return f"Scope({inner})"


EMPTY_SCOPE: typing.Final = Scope()

# Names a binding cannot take: attribute reads would find these first
RESERVED_NAMES: typing.Final = frozenset(dir(Scope))


def check_binding_name(name: str, what: str) -> None:
    if not name.isidentifier():
        raise ValueError(f"{what} name must be an identifier, got {name!r}")
    if name in RESERVED_NAMES:
        raise ValueError(f"{what} name {name!r} is reserved by Scope, pick another name")


__all__ = ("EMPTY_SCOPE", "RESERVED_NAMES", "Scope", "check_binding_name")
