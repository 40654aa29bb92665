"""
Pytest configuration for backend tests.

Why: Force AnyIO to use the asyncio backend and keep FORMATION_* settings
from the developer shell out of the test run.
"""
import os
import sys
from pathlib import Path
from typing import Any, Optional

import pytest

# Ensure the repo root is importable (backend.formation / backend.web)
REPO_ROOT = Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from backend.formation import FormBuilder, FormRequestData, FormState  # noqa: E402
from backend.formation.config import FormationSettings  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _clear_formation_env(monkeypatch: pytest.MonkeyPatch):
    """Tests start from default settings regardless of the caller's environment."""
    for key in list(os.environ):
        if key.startswith("FORMATION_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def make_builder():
    """Factory: builder over an optional submitted body with default settings."""

    def _make(body: Optional[Any] = None, *, csrf_token: str = "tok-123", **settings) -> FormBuilder:
        request = FormRequestData(body) if body is not None else None
        return FormBuilder(FormState(request), settings=FormationSettings(**settings), csrf_token=csrf_token)

    return _make
