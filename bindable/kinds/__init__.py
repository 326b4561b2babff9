"""
Built-in kinds
==============

- Maybe (Just / Nothing)
- list, tuple (eager)
- LazySeq and one-shot iterators (lazy)
- kungfu Ok / Error (no empty_of)
"""

import collections.abc
import typing

from kungfu import Error, Ok

from ..capability.capabilities import Capabilities
from .eager import LIST, TUPLE
from .lazy import ITERATOR, LAZY, LazySeq
from .maybe import MAYBE, NOTHING, Just, Maybe, Nothing, just, nothing, of_nullable
from .result import RESULT

BUILTIN_KINDS: typing.Final[tuple[tuple[type, Capabilities], ...]] = (
    (Maybe, MAYBE),
    (list, LIST),
    (tuple, TUPLE),
    (LazySeq, LAZY),
    (collections.abc.Iterator, ITERATOR),
    (Ok, RESULT),
    (Error, RESULT),
)

__all__ = (
    # Registry seed
    "BUILTIN_KINDS",
    # Maybe
    "Maybe",
    "Just",
    "Nothing",
    "NOTHING",
    "just",
    "nothing",
    "of_nullable",
    "MAYBE",
    # Eager
    "LIST",
    "TUPLE",
    # Lazy
    "LazySeq",
    "LAZY",
    "ITERATOR",
    # Result
    "RESULT",
)
