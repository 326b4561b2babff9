"""
Kind registry
=============

Immutable mapping from kind (a Python type) to its Capabilities.

Lookup follows the MRO and abstract base classes through
functools.singledispatch, so registering collections.abc.Iterator
covers every generator and itertools object.
"""

from __future__ import annotations

import functools
import logging
import typing
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .._errors import KindAlreadyRegisteredError, MissingCapabilityError, kind_name
from .._types import Emptier, Injector, Sequencer
from .capabilities import Capabilities

logger = logging.getLogger(__name__)


def _unregistered(value: typing.Any) -> Capabilities | None:
    _ = value
    return None


def _returning(capabilities: Capabilities) -> Callable[[typing.Any], Capabilities]:
    def lookup(value: typing.Any) -> Capabilities:
        _ = value
        return capabilities

    return lookup


@dataclass(frozen=True, slots=True)
class Registry:
    """
    Capabilities keyed by kind.

    Registries are values: extend() and merge() return new registries and
    never touch the receiver, so a registry can be shared freely.
    """

    kinds: Mapping[type, Capabilities] = field(default_factory=dict)
    _dispatch: typing.Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        kinds = MappingProxyType(dict(self.kinds))
        dispatch = functools.singledispatch(_unregistered)
        for kind, capabilities in kinds.items():
            dispatch.register(kind, _returning(capabilities))
        object.__setattr__(self, "kinds", kinds)
        object.__setattr__(self, "_dispatch", dispatch)

    # Construction

    def extend(
        self,
        kind: type,
        capabilities: Capabilities | None = None,
        *,
        sequence: Sequencer | None = None,
        inject: Injector | None = None,
        empty_of: Emptier | None = None,
    ) -> Registry:
        """
        Return a new registry that also knows kind.

        Pass a ready Capabilities record or the individual functions.
        """
        if capabilities is None:
            capabilities = Capabilities(sequence=sequence, inject=inject, empty_of=empty_of)
        elif sequence is not None or inject is not None or empty_of is not None:
            raise ValueError("extend(): pass either 'capabilities' or individual functions, not both")
        if kind in self.kinds:
            raise KindAlreadyRegisteredError(kind)

        logger.debug(
            "registering kind %s (sequence=%s, inject=%s, empty_of=%s)",
            kind_name(kind),
            capabilities.sequence is not None,
            capabilities.inject is not None,
            capabilities.empty_of is not None,
        )
        return Registry({**self.kinds, kind: capabilities})

    def merge(self, other: Registry) -> Registry:
        """Union of two registries. A kind present in both is an error."""
        for kind in other.kinds:
            if kind in self.kinds:
                raise KindAlreadyRegisteredError(kind)
        return Registry({**self.kinds, **other.kinds})

    # Lookup

    def find(self, kind: type) -> Capabilities | None:
        """Capabilities for kind or its nearest registered base, if any."""
        return self._dispatch.dispatch(kind)(None)

    def for_value(self, value: typing.Any) -> Capabilities | None:
        return self.find(type(value))

    def require(self, kind: type, capability: str) -> Callable[..., typing.Any]:
        """Implementation of capability for kind or MissingCapabilityError."""
        capabilities = self.find(kind)
        implementation = capabilities.get(capability) if capabilities is not None else None
        if implementation is None:
            raise MissingCapabilityError(kind, capability)
        return implementation

    def supports(self, kind: type, capability: str) -> bool:
        capabilities = self.find(kind)
        return capabilities is not None and capabilities.provides(capability)

    def __contains__(self, kind: object) -> bool:
        return isinstance(kind, type) and self.find(kind) is not None

    def __iter__(self) -> Iterator[type]:
        return iter(self.kinds)

    def __len__(self) -> int:
        return len(self.kinds)

    def __hash__(self) -> int:
        return hash(frozenset(self.kinds.items()))


@functools.cache
def builtin_registry() -> Registry:
    """
    Registry with every built-in kind.

    Built once and shared; extend() it to add your own kinds.
    """
    from ..kinds import BUILTIN_KINDS

    registry = Registry()
    for kind, capabilities in BUILTIN_KINDS:
        registry = registry.extend(kind, capabilities)
    return registry


__all__ = ("Registry", "builtin_registry")
