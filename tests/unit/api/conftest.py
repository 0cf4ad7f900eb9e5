"""Fixtures for API route tests.

Every test gets the full application wired to in-memory repositories, a
fixed identity secret and a controllable clock.
"""

from __future__ import annotations

import random
from collections.abc import Iterator
from datetime import datetime, timezone

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from showvote.api.dependencies.voting import (
    set_identity_config,
    set_repositories,
    set_slate_drawer,
    set_time_authority,
)
from showvote.api.main import create_app
from showvote.bootstrap.repositories import Repositories
from showvote.config.identity_config import IdentityConfig
from showvote.domain.models.show import Show
from showvote.domain.services.slate_drawer import SlateDrawer
from showvote.infrastructure.stubs import (
    DailySelectionRepositoryStub,
    ShowRepositoryStub,
    VoteRepositoryStub,
)
from tests.helpers import FakeTimeAuthority

API_SECRET = "api-test-secret-0123456789"


@pytest.fixture
def clock() -> FakeTimeAuthority:
    return FakeTimeAuthority(frozen_at=datetime(2026, 3, 2, 10, 0, tzinfo=timezone.utc))


@pytest.fixture
def catalog() -> list[Show]:
    return [
        Show.create(title=f"Show {i}", description=f"Description {i}", genre="Drama")
        for i in range(15)
    ]


@pytest.fixture
def repositories(catalog: list[Show]) -> Repositories:
    return Repositories(
        shows=ShowRepositoryStub(catalog),
        selections=DailySelectionRepositoryStub(),
        votes=VoteRepositoryStub(),
    )


@pytest.fixture
def app(clock: FakeTimeAuthority, repositories: Repositories) -> FastAPI:
    application = create_app()
    set_time_authority(clock)
    set_repositories(repositories)
    set_identity_config(IdentityConfig(secret=API_SECRET))
    set_slate_drawer(SlateDrawer(slate_size=10, rng=random.Random(3)))
    return application


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
