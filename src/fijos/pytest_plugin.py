"""pytest fixtures exposing fixture discovery to test suites.

Enable from a ``conftest.py``::

    pytest_plugins = ["fijos.pytest_plugin"]
"""

from __future__ import annotations

import pytest

from fijos.config import FijosConfig, load_config
from fijos.coordinator import AccessCoordinator
from fijos.resolver import FixtureResolver


@pytest.fixture(scope="session")
def fijos_config(pytestconfig: pytest.Config) -> FijosConfig:
    """Config loaded from ``fijos.yaml`` next to the pytest rootdir, if present."""
    return load_config(pytestconfig.rootpath)


@pytest.fixture()
def fijos_resolver(request: pytest.FixtureRequest, fijos_config: FijosConfig) -> FixtureResolver:
    """Resolver that starts discovery from the requesting test module."""
    return FixtureResolver(request.path, config=fijos_config)


@pytest.fixture(scope="session")
def fijos_coordinator(pytestconfig: pytest.Config, fijos_config: FijosConfig) -> AccessCoordinator:
    """Session-wide coordinator rooted at the pytest rootdir."""
    return AccessCoordinator(FixtureResolver(pytestconfig.rootpath, config=fijos_config))
