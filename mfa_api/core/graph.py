# mfa_api/core/graph.py

"""
Microsoft Graph plumbing shared by the MFA module:
- client-credentials token acquisition
- a JSON GET helper that returns Graph's body whatever the status code
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from mfa_api.core.config import Settings, settings as default_settings
from mfa_api.core.exceptions import TokenAcquisitionError


def new_http_client(settings: Optional[Settings] = None) -> httpx.AsyncClient:
    settings = settings or default_settings
    return httpx.AsyncClient(timeout=settings.GRAPH_TIMEOUT_SECONDS)


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    access_token: str,
) -> Dict[str, Any]:
    """
    GET a Graph resource and decode the body.

    Graph reports failures as {"error": {"code", "message"}} in the body,
    so the status code is not checked here; callers inspect the envelope.
    """
    response = await client.get(
        url,
        headers={
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
        },
    )
    payload = response.json()
    if not isinstance(payload, dict):
        raise ValueError(f"Unexpected Graph payload from {url}")
    return payload


class GraphTokenProvider:
    """
    OAuth2 client-credentials exchange against the Entra ID token endpoint.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Optional[Settings] = None):
        self.client = client
        self.settings = settings or default_settings

    async def acquire_token(self) -> str:
        s = self.settings
        if not s.graph_configured:
            raise TokenAcquisitionError(
                "Token request failed: TENANT_ID, CLIENT_ID and CLIENT_SECRET must be set"
            )

        try:
            response = await self.client.post(
                s.TOKEN_URL,
                data={
                    "client_id": s.CLIENT_ID,
                    "client_secret": s.CLIENT_SECRET,
                    "scope": s.GRAPH_SCOPE,
                    "grant_type": "client_credentials",
                },
            )
            token_data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise TokenAcquisitionError(f"Token request failed: {exc}") from exc

        access_token = token_data.get("access_token") if isinstance(token_data, dict) else None
        if not access_token:
            reason = "no access_token in response"
            if isinstance(token_data, dict):
                reason = token_data.get("error_description") or token_data.get("error") or reason
            raise TokenAcquisitionError(f"Token request failed: {reason}")

        return access_token
