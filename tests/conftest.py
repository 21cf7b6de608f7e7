from __future__ import annotations

import pytest

from stripe_api.adapters.credentials import StaticCredentials
from stripe_api.core.config import AppSettings
from stripe_api.core.services.client import StripeClient
from tests.support import SECRET_KEY, FakeTransport


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, secret_key=SECRET_KEY)


@pytest.fixture
def credentials() -> StaticCredentials:
    return StaticCredentials(SECRET_KEY)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport, credentials: StaticCredentials, settings: AppSettings) -> StripeClient:
    return StripeClient(transport=transport, credentials=credentials, settings=settings)
