from __future__ import annotations

import pytest

from bindable import Registry, builtin_registry

from fakes import BOX, Box


@pytest.fixture
def registry() -> Registry:
    """Built-in kinds plus Box, which has no empty_of."""
    return builtin_registry().extend(Box, BOX)
