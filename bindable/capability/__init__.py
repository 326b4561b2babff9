"""
Capability Dispatch
===================

Capabilities record, kind registry and the dispatch functions.
"""

from .capabilities import CAPABILITY_NAMES, EMPTY_OF, INJECT, SEQUENCE, Capabilities
from .dispatch import empty_of, inject, resolve, sequence, supports
from .registry import Registry, builtin_registry

__all__ = (
    # Record
    "Capabilities",
    "CAPABILITY_NAMES",
    "SEQUENCE",
    "INJECT",
    "EMPTY_OF",
    # Registry
    "Registry",
    "builtin_registry",
    # Dispatch
    "sequence",
    "inject",
    "empty_of",
    "supports",
    "resolve",
)
