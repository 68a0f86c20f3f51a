"""Pytest configuration and fixtures.

Provides environment isolation and config cache resets. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

import os

import pytest

from okerr.config import reset_config_cache

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr(
        "okerr.config.core.load_dotenv", lambda *_args, **_kwargs: False
    )


@pytest.fixture(autouse=True)
def isolate_okerr_env(monkeypatch, tmp_path):
    """Clear OKERR_* variables and point config at an empty project."""
    for key in list(os.environ):
        if key.startswith("OKERR_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("OKERR_PYPROJECT_PATH", str(tmp_path / "pyproject.toml"))


@pytest.fixture(autouse=True)
def fresh_config_cache():
    """Re-resolve the default config for every test."""
    reset_config_cache()
    yield
    reset_config_cache()


# =============================================================================
# Helpers (opt-in)
# =============================================================================


@pytest.fixture
def pyproject(tmp_path):
    """Return a writer for the isolated pyproject.toml used by config lookups."""

    def _write(body: str):
        path = tmp_path / "pyproject.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write
