"""
Pytest configuration and shared fixtures
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Backend/ on sys.path so `app.*`, `api.*`, `services.*` and `tests.*` import
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from app.config import Settings  # noqa: E402


@pytest.fixture
def posts_dir(tmp_path: Path) -> Path:
    """Empty content root inside a sandbox directory."""
    directory = tmp_path / "site" / "posts"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def settings(posts_dir: Path) -> Settings:
    return Settings(
        POSTS_DIR=posts_dir,
        POST_EXTENSION=".md",
        LOG_JSON=True,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(settings: Settings) -> TestClient:
    from app.main import create_app

    return TestClient(create_app(settings))
