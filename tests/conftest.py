import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, Mock
from httpx import AsyncClient, ASGITransport

from mfa_api.main import app
from mfa_api.modules.mfa_methods.router import get_mfa_methods_service
from mfa_api.modules.mfa_methods.service import MFAMethodsService


# 1. Graph collaborators (no network)
@pytest.fixture
def token_provider():
    provider = Mock()
    provider.acquire_token = AsyncMock(return_value="test-access-token")
    return provider


@pytest.fixture
def graph_repo():
    repo = Mock()
    repo.fetch_methods = AsyncMock(return_value={"value": []})
    repo.fetch_preferences = AsyncMock(
        return_value={"userPreferredMethodForSecondaryAuthentication": "unknown"}
    )
    return repo


@pytest.fixture
def mfa_service(token_provider, graph_repo):
    return MFAMethodsService(token_provider=token_provider, repo=graph_repo)


# 2. API Client, with the service wired to the mocked collaborators
@pytest_asyncio.fixture(scope="function")
async def async_client(mfa_service):
    app.dependency_overrides[get_mfa_methods_service] = lambda: mfa_service
    try:
        async with AsyncClient(
                transport=ASGITransport(app=app),
                base_url="http://test"
        ) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
