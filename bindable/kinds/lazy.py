"""
Lazy sequences
==============

Pull-based, possibly infinite sequences. Nothing is produced until a
consumer iterates; stopping iteration stops all further work.

Two kinds live here:
- LazySeq: wraps a factory of iterators, restartable when the factory is
- any one-shot Iterator (generators, itertools objects): results are
  again one-shot iterators
"""

from __future__ import annotations

import itertools
import typing
from collections.abc import Callable, Iterable, Iterator

from ..capability.capabilities import Capabilities


class LazySeq[T]:
    """
    Lazy sequence built from a zero-argument factory returning an iterator.

    Every iteration calls the factory again, so a LazySeq over a range or
    a list can be consumed many times. LazySeq.of(iterator) is one-shot.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Callable[[], Iterator[T]], /) -> None:
        self._source = source

    # Constructors

    @staticmethod
    def of[V](iterable: Iterable[V]) -> LazySeq[V]:
        """Wrap an iterable. Restartable only if the iterable is."""
        if isinstance(iterable, LazySeq):
            return iterable
        return LazySeq(lambda: iter(iterable))

    @staticmethod
    def empty() -> LazySeq[typing.Never]:
        return LazySeq(lambda: iter(()))

    @staticmethod
    def single[V](value: V) -> LazySeq[V]:
        return LazySeq(lambda: iter((value,)))

    @staticmethod
    def count(start: int = 0, step: int = 1) -> LazySeq[int]:
        """Infinite arithmetic progression."""
        return LazySeq(lambda: itertools.count(start, step))

    @staticmethod
    def repeat[V](value: V) -> LazySeq[V]:
        return LazySeq(lambda: itertools.repeat(value))

    # Operations

    def take(self, n: int) -> LazySeq[T]:
        """First n elements. Never pulls element n + 1 from the source."""
        if n < 0:
            raise ValueError("take(): n must be non-negative")
        return LazySeq(lambda: itertools.islice(iter(self), n))

    def map[U](self, f: Callable[[T], U], /) -> LazySeq[U]:
        return LazySeq(lambda: map(f, iter(self)))

    def then[U](self, f: Callable[[T], Iterable[U]], /) -> LazySeq[U]:
        """
        Monadic bind (>>=).

        f runs at most once per pulled element, only when pulled.
        """
        return LazySeq(lambda: itertools.chain.from_iterable(map(f, iter(self))))

    def to_list(self) -> list[T]:
        return list(self)

    # Protocol methods

    def __iter__(self) -> Iterator[T]:
        return self._source()

    def __repr__(self) -> str:
        return f"LazySeq({self._source!r})"


# ============================================================================
# Capabilities
# ============================================================================


def _sequence_lazy[A, B](m: LazySeq[A], f: Callable[[A], Iterable[B]]) -> LazySeq[B]:
    return m.then(f)


def _inject_lazy[B](example: LazySeq[typing.Any], value: B) -> LazySeq[B]:
    _ = example
    return LazySeq.single(value)


def _empty_lazy(example: LazySeq[typing.Any]) -> LazySeq[typing.Never]:
    _ = example
    return LazySeq.empty()


def _sequence_iterator[A, B](m: Iterator[A], f: Callable[[A], Iterable[B]]) -> Iterator[B]:
    return itertools.chain.from_iterable(map(f, m))


def _inject_iterator[B](example: Iterator[typing.Any], value: B) -> Iterator[B]:
    _ = example
    return iter((value,))


def _empty_iterator(example: Iterator[typing.Any]) -> Iterator[typing.Never]:
    _ = example
    return iter(())


LAZY: typing.Final = Capabilities(sequence=_sequence_lazy, inject=_inject_lazy, empty_of=_empty_lazy)
ITERATOR: typing.Final = Capabilities(
    sequence=_sequence_iterator,
    inject=_inject_iterator,
    empty_of=_empty_iterator,
)

__all__ = ("ITERATOR", "LAZY", "LazySeq")
