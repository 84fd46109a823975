"""Shared test fixtures.

Loads ``.env.test`` when present and forces in-memory persistence so no
test touches MongoDB unless it opts in explicitly.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, AsyncIterator, Generator, cast

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

os.environ["REPOSITORY_BACKEND"] = "inmemory"


@pytest.fixture(autouse=True)
def _reset_singletons() -> Generator[None, None, None]:
    """Fresh repositories and translators for every test."""
    from infrastructure.i18n.catalog_translator import reset_translators
    from infrastructure.persistence.factory import reset_repositories

    reset_repositories()
    reset_translators()
    yield
    reset_repositories()
    reset_translators()


@pytest.fixture
def translator():
    """English translator over the shipped catalog."""
    from infrastructure.i18n.catalog_translator import get_translator

    return get_translator("en")


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the ASGI app.

    Uses an explicit ASGITransport and a fake base_url so relative
    requests resolve.
    """
    from app import app

    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
