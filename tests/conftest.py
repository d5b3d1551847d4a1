"""Shared fixtures."""

import pytest

from reckon.expressions import FunctionRegistry, register_all_builtins


@pytest.fixture(autouse=True)
def setup_functions():
    """Register built-in functions before each test."""
    FunctionRegistry.clear()
    register_all_builtins()
    yield
    FunctionRegistry.clear()
    register_all_builtins()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's real config directory."""
    monkeypatch.setenv("RECKON_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.delenv("RECKON_COMPAT", raising=False)
