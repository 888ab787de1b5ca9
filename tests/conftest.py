from dataclasses import replace
from typing import List
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from portfolio_api.config import Settings
from portfolio_api.contact.application import IContactRepository
from portfolio_api.contact.domain import ContactSubmission
from portfolio_api.contact.interfaces import get_contact_repository
from portfolio_api.downloads.application import IDownloadRepository
from portfolio_api.downloads.domain import DownloadRequest
from portfolio_api.downloads.interfaces import get_download_repository
from portfolio_api.infrastructure.database import ConnectionState
from portfolio_api.main import create_app
from portfolio_api.shared.api import SlidingWindowRateLimiter

_VALID_CONTACT = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "subject": "Project enquiry",
    "message": "I would like to talk about a backend project.",
}

_VALID_DOWNLOAD = {
    "email": "recruiter@example.com",
    "purpose": "Hiring for a Python role",
}


# -----------------------------------------------------------------------------
# In-memory collaborators
# -----------------------------------------------------------------------------


class StubConnector:
    """Stands in for DatabaseConnector; only state is observable."""

    def __init__(self, state: ConnectionState = ConnectionState.DISCONNECTED):
        self.state = state
        self.models_initialized = state is ConnectionState.CONNECTED

    @property
    def is_connected(self) -> bool:
        return self.state is ConnectionState.CONNECTED

    async def start(self) -> None:
        pass

    async def close(self) -> None:
        pass


class InMemoryContactRepository(IContactRepository):
    def __init__(self):
        self.items: List[ContactSubmission] = []
        self.error: Exception | None = None

    async def add(self, submission: ContactSubmission) -> ContactSubmission:
        if self.error is not None:
            raise self.error
        stored = replace(submission, id=uuid4().hex[:24])
        self.items.append(stored)
        return stored


class InMemoryDownloadRepository(IDownloadRepository):
    def __init__(self):
        self.items: List[DownloadRequest] = []
        self.error: Exception | None = None

    async def add(self, request: DownloadRequest) -> DownloadRequest:
        if self.error is not None:
            raise self.error
        stored = replace(request, id=uuid4().hex[:24])
        self.items.append(stored)
        return stored


# -----------------------------------------------------------------------------
# Application fixtures
# -----------------------------------------------------------------------------


@pytest.fixture()
def valid_contact() -> dict:
    return dict(_VALID_CONTACT)


@pytest.fixture()
def valid_download() -> dict:
    return dict(_VALID_DOWNLOAD)


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None, environment="test", frontend_url="http://localhost:3000")


@pytest.fixture()
def connector() -> StubConnector:
    return StubConnector()


@pytest.fixture()
def contact_repository() -> InMemoryContactRepository:
    return InMemoryContactRepository()


@pytest.fixture()
def download_repository() -> InMemoryDownloadRepository:
    return InMemoryDownloadRepository()


@pytest.fixture()
def rate_limiter(settings) -> SlidingWindowRateLimiter:
    return SlidingWindowRateLimiter(
        limit=settings.contact_rate_limit,
        window_seconds=settings.contact_rate_window_seconds,
    )


@pytest.fixture()
def app(settings, connector, contact_repository, download_repository, rate_limiter):
    application = create_app(
        settings=settings,
        database=connector,
        contact_rate_limiter=rate_limiter,
    )
    application.dependency_overrides[get_contact_repository] = lambda: contact_repository
    application.dependency_overrides[get_download_repository] = lambda: download_repository
    return application


@pytest.fixture()
def client(app):
    # Lifespan is not entered: no logging reconfiguration, no database
    return TestClient(app, raise_server_exceptions=False)
