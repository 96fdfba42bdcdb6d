import pytest
from httpx import AsyncClient

GRAPH = "#microsoft.graph."
URL = "/api/mfa-methods"


@pytest.mark.asyncio
async def test_authenticator_default(async_client: AsyncClient, graph_repo):
    graph_repo.fetch_methods.return_value = {"value": [
        {"@odata.type": GRAPH + "microsoftAuthenticatorAuthenticationMethod", "displayName": "Alice's Phone"},
    ]}
    graph_repo.fetch_preferences.return_value = {
        "userPreferredMethodForSecondaryAuthentication": "microsoftAuthenticator",
    }

    response = await async_client.get(URL, params={"upn": "alice@example.com"})

    assert response.status_code == 200
    assert response.json() == {
        "upn": "alice@example.com",
        "preferredDefaultFromGraph": {
            "raw": "microsoftAuthenticator",
            "friendly": "Microsoft Authenticator",
        },
        "methods": [
            {"type": "Microsoft Authenticator", "device": "Alice's Phone", "isDefault": True},
        ],
    }


@pytest.mark.asyncio
async def test_user_not_found(async_client: AsyncClient, graph_repo):
    graph_repo.fetch_methods.return_value = {
        "error": {"code": "Request_ResourceNotFound", "message": "Resource 'ghost' does not exist"},
    }

    response = await async_client.get(URL, params={"upn": "ghost@example.com"})

    assert response.status_code == 404
    assert response.json() == {"error": "User ghost@example.com not found"}


@pytest.mark.asyncio
async def test_missing_upn(async_client: AsyncClient, graph_repo, token_provider):
    response = await async_client.get(URL)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing UPN"}
    assert token_provider.acquire_token.call_count == 0
    assert graph_repo.fetch_methods.call_count == 0
    assert graph_repo.fetch_preferences.call_count == 0


@pytest.mark.asyncio
async def test_upstream_rejection(async_client: AsyncClient, graph_repo):
    graph_repo.fetch_preferences.return_value = {
        "error": {"code": "Authorization_RequestDenied", "message": "Insufficient privileges to complete the operation."},
    }

    response = await async_client.get(URL, params={"upn": "alice@example.com"})

    assert response.status_code == 400
    assert response.json() == {"error": "Insufficient privileges to complete the operation."}


@pytest.mark.asyncio
async def test_unexpected_failure(async_client: AsyncClient, graph_repo):
    graph_repo.fetch_methods.side_effect = RuntimeError("socket hang up")

    response = await async_client.get(URL, params={"upn": "alice@example.com"})

    assert response.status_code == 500
    assert response.json() == {"error": "socket hang up"}


@pytest.mark.asyncio
async def test_post_body_upn(async_client: AsyncClient, graph_repo):
    graph_repo.fetch_methods.return_value = {"value": [
        {"@odata.type": GRAPH + "phoneAuthenticationMethod", "phoneNumber": "+1 5555550100",
         "phoneType": "mobile", "smsSignInState": "notEnabled"},
        {"@odata.type": GRAPH + "phoneAuthenticationMethod", "phoneType": "alternateMobile"},
        {"@odata.type": GRAPH + "passwordAuthenticationMethod"},
    ]}
    graph_repo.fetch_preferences.return_value = {
        "userPreferredMethodForSecondaryAuthentication": "voiceMobile",
    }

    response = await async_client.post(URL, json={"upn": "bob@example.com"})

    assert response.status_code == 200
    data = response.json()
    assert data["upn"] == "bob@example.com"
    assert data["preferredDefaultFromGraph"] == {"raw": "voiceMobile", "friendly": "Phone call (mobile)"}
    assert data["methods"] == [
        {"type": "Phone", "number": "+1 5555550100", "phoneType": "mobile",
         "smsSignInEnabled": False, "isDefault": True},
        {"type": "Phone", "number": "N/A", "phoneType": "alternateMobile",
         "smsSignInEnabled": False, "isDefault": True},
    ]
    graph_repo.fetch_methods.assert_awaited_once_with("bob@example.com", "test-access-token")


@pytest.mark.asyncio
async def test_post_query_upn_wins_over_body(async_client: AsyncClient, graph_repo):
    response = await async_client.post(URL, params={"upn": "query@example.com"}, json={"upn": "body@example.com"})

    assert response.status_code == 200
    assert response.json()["upn"] == "query@example.com"


@pytest.mark.asyncio
async def test_post_without_body(async_client: AsyncClient, graph_repo):
    response = await async_client.post(URL)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing UPN"}
    graph_repo.fetch_methods.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_method_kind_is_surfaced(async_client: AsyncClient, graph_repo):
    record = {"@odata.type": GRAPH + "temporaryAccessPassAuthenticationMethod", "id": "tap-1", "lifetimeInMinutes": 60}
    graph_repo.fetch_methods.return_value = {"value": [record]}

    response = await async_client.get(URL, params={"upn": "alice@example.com"})

    assert response.status_code == 200
    data = response.json()
    assert data["preferredDefaultFromGraph"]["friendly"] == "No default MFA method configured"
    assert data["methods"] == [{"type": "Unknown", "raw": record, "isDefault": False}]


@pytest.mark.asyncio
async def test_post_malformed_json_is_missing_upn(async_client: AsyncClient, graph_repo, token_provider):
    response = await async_client.post(
        URL,
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Missing UPN"}
    token_provider.acquire_token.assert_not_called()
    graph_repo.fetch_methods.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{"upn": 123}, {"upn": None}, ["alice@example.com"], "alice@example.com"])
async def test_post_unusable_upn_is_missing_upn(async_client: AsyncClient, graph_repo, body):
    response = await async_client.post(URL, json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing UPN"}
    graph_repo.fetch_methods.assert_not_called()
    graph_repo.fetch_preferences.assert_not_called()
