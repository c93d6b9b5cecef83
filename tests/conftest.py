"""Pytest configuration and fixtures for quire tests."""

import pytest

from quire import ExtensionRegistry, HTMLRenderer, XMLRenderer


@pytest.fixture
def r() -> HTMLRenderer:
    """A bare HTML renderer with its own empty render context."""
    return HTMLRenderer(extensions={})


@pytest.fixture
def xr() -> XMLRenderer:
    """A bare XML renderer with its own empty render context."""
    return XMLRenderer(extensions={})


@pytest.fixture
def registry() -> ExtensionRegistry:
    """An empty extension registry, isolated from the default one."""
    return ExtensionRegistry()
