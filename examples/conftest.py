"""Pytest configuration for the quire examples.

Every example directory holds an ``app.py`` that renders its output at
import time. The ``app`` fixture runs the ``app.py`` next to the requesting
test and exposes its globals as attributes.
"""

import runpy
from pathlib import Path
from types import SimpleNamespace

import pytest


@pytest.fixture
def app(request: pytest.FixtureRequest) -> SimpleNamespace:
    """Run the sibling app.py in a fresh namespace and return its globals."""
    app_path = Path(request.path).parent / "app.py"
    return SimpleNamespace(**runpy.run_path(str(app_path)))
