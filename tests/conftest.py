import pytest

from urlshortener.models import LinkRecord
from urlshortener.dao.base import LinkBaseDAO
from urlshortener.dao.exceptions import LinkNotFoundError


class InMemoryLinkDAO(LinkBaseDAO):
    """List-backed DAO: duplicates are kept and get() returns the first match."""

    def __init__(self):
        self.records: list[LinkRecord] = []

    def insert(self, record: LinkRecord, **kwargs) -> 'InMemoryLinkDAO':
        self.records.append(record)
        return self

    def get(self, short_key: str, **kwargs) -> LinkRecord:
        for record in self.records:
            if record.short_key == short_key:
                return record
        raise LinkNotFoundError(f"Link with short key '{short_key}' not found.")


@pytest.fixture
def memory_dao() -> InMemoryLinkDAO:
    return InMemoryLinkDAO()


@pytest.fixture(autouse=True)
def _app_env(monkeypatch):
    """Keep tests independent from the developer's environment."""
    for name in ('APP_ENV', 'APP_NAME', 'LOG_LEVEL', 'CONFIG_PATH', 'ACTIVE_BACKEND', 'HOST', 'PORT', 'BASE_URL', 'MONGO_URI'):
        monkeypatch.delenv(name, raising=False)
