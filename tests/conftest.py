"""
Pytest configuration and shared fixtures for Show Vote tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Time-dependent tests use FakeTimeAuthority, never the wall clock
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/ (marked `integration`)
"""

from collections.abc import Iterator
from datetime import datetime, timezone

import pytest

from showvote.api.dependencies.voting import reset_showvote_dependencies
from tests.helpers import FakeTimeAuthority


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from showvote import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Clock frozen at 10:00 UTC on a Monday, inside the voting window."""
    return FakeTimeAuthority(frozen_at=datetime(2026, 3, 2, 10, 0, tzinfo=timezone.utc))


@pytest.fixture(autouse=True)
def _reset_dependencies(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test fresh API singletons and a test environment."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    reset_showvote_dependencies()
    yield
    reset_showvote_dependencies()
