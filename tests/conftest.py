import os
import tempfile
from pathlib import Path
from typing import Generator

# Required settings must exist before notelinks.config is imported
os.environ.setdefault("AUTH_USERNAME", "admin")
os.environ.setdefault("AUTH_PASSWORD", "password")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from notelinks.api import create_app  # noqa: E402
from notelinks.links.index import LinkIndex  # noqa: E402
from notelinks.links.provider import LinkProvider  # noqa: E402
from tests.fakes import FakeNotifier, FakePathResolver  # noqa: E402


@pytest.fixture
def fake_notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def fake_resolver() -> FakePathResolver:
    return FakePathResolver(missing={"missing.md"})


@pytest.fixture
def link_index(fake_resolver: FakePathResolver, fake_notifier: FakeNotifier) -> LinkIndex:
    return LinkIndex(resolver=fake_resolver, notifier=fake_notifier)


@pytest.fixture
def provider(link_index: LinkIndex) -> LinkProvider:
    return LinkProvider(link_index)


@pytest.fixture(autouse=True)
def mock_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Override settings for testing."""
    monkeypatch.setattr("notelinks.config.settings.auth_username", "admin")
    monkeypatch.setattr("notelinks.config.settings.auth_password", "password")


@pytest.fixture
def test_client(provider: LinkProvider) -> TestClient:
    """Create test client with fake collaborators."""
    app = create_app(provider=provider)
    client = TestClient(app)
    client.auth = ("admin", "password")
    return client


@pytest.fixture
def notes_directory() -> Generator[Path, None, None]:
    """Create a temporary notes directory used when testing folder indexing."""
    with tempfile.TemporaryDirectory() as temp_dir:
        notes_dir = Path(temp_dir) / "notes"
        notes_dir.mkdir()
        yield notes_dir
