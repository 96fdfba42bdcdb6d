# mfa_api/modules/mfa_methods/repository.py

from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from mfa_api.core.config import Settings, settings as default_settings
from mfa_api.core.graph import get_json


class GraphAuthMethodsRepository:
    """
    Read-only access to a user's authentication data in Microsoft Graph.
    Both calls return the raw envelope; error envelopes are not raised here.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Optional[Settings] = None):
        self.client = client
        self.settings = settings or default_settings

    def _user_url(self, api_version: str, upn: str, resource: str) -> str:
        base = self.settings.GRAPH_BASE_URL.rstrip("/")
        return f"{base}/{api_version}/users/{quote(upn, safe='@')}/authentication/{resource}"

    async def fetch_methods(self, upn: str, access_token: str) -> Dict[str, Any]:
        url = self._user_url(self.settings.GRAPH_METHODS_API_VERSION, upn, "methods")
        return await get_json(self.client, url, access_token)

    async def fetch_preferences(self, upn: str, access_token: str) -> Dict[str, Any]:
        url = self._user_url(
            self.settings.GRAPH_PREFERENCES_API_VERSION, upn, "signInPreferences"
        )
        return await get_json(self.client, url, access_token)
