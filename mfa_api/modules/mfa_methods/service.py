# mfa_api/modules/mfa_methods/service.py

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from mfa_api.core.exceptions import (
    MFALookupError,
    MissingUserIdentifierError,
    TokenAcquisitionError,
    UnexpectedFailureError,
    UpstreamNotFoundError,
    UpstreamRejectedError,
)
from mfa_api.modules.mfa_methods.classifier import classify_methods
from mfa_api.modules.mfa_methods.constants import PREFERRED_METHOD_KEY
from mfa_api.modules.mfa_methods.reconciler import reconcile_defaults
from mfa_api.modules.mfa_methods.schemas import MFAMethodsResponse

logger = logging.getLogger("uvicorn.mfa_api")

GRAPH_NOT_FOUND_CODE = "Request_ResourceNotFound"


def raise_for_upstream_error(upn: str, envelope: Dict[str, Any]) -> None:
    """
    Raise if a Graph response body is an error envelope.
    Applied to the methods and preferences responses independently.
    """
    error = envelope.get("error")
    if not error:
        return

    if not isinstance(error, dict):
        error = {"message": str(error)}

    code = error.get("code")
    if code == GRAPH_NOT_FOUND_CODE:
        raise UpstreamNotFoundError(upn)

    message = error.get("message") or code or "Microsoft Graph rejected the request"
    logger.warning("Graph rejected request for %s: %s (%s)", upn, message, code)
    raise UpstreamRejectedError(message)


class MFAMethodsService:
    """
    Builds the MFA methods report for one user:
    - token → methods + preferences (concurrently)
    - classify → reconcile default → response
    """

    def __init__(self, token_provider, repo):
        self.token_provider = token_provider
        self.repo = repo

    async def assemble(self, upn: Optional[str]) -> MFAMethodsResponse:
        upn = (upn or "").strip()
        if not upn:
            raise MissingUserIdentifierError()

        try:
            return await self._assemble(upn)
        except MFALookupError:
            raise
        except Exception as exc:
            logger.exception("MFA lookup failed for %s", upn)
            raise UnexpectedFailureError(str(exc) or exc.__class__.__name__) from exc

    async def _assemble(self, upn: str) -> MFAMethodsResponse:
        # 1) Access token
        try:
            access_token = await self.token_provider.acquire_token()
        except TokenAcquisitionError as exc:
            logger.error("Graph token acquisition failed: %s", exc.detail)
            raise
        except Exception as exc:
            logger.error("Graph token acquisition failed: %s", exc)
            raise TokenAcquisitionError(f"Token request failed: {exc}") from exc

        if not access_token:
            logger.error("Graph token acquisition returned no token")
            raise TokenAcquisitionError("Token request failed: no access token returned")

        # 2) Both fetches in flight before either is inspected, and both
        #    settle before a failure from either is raised
        results = await asyncio.gather(
            self.repo.fetch_methods(upn, access_token),
            self.repo.fetch_preferences(upn, access_token),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        methods_envelope, preferences_envelope = results

        # 3) Either error envelope short-circuits the whole response
        raise_for_upstream_error(upn, methods_envelope)
        raise_for_upstream_error(upn, preferences_envelope)

        # 4) Normalize
        methods = classify_methods(methods_envelope.get("value") or [])
        methods, preferred = reconcile_defaults(
            preferences_envelope.get(PREFERRED_METHOD_KEY),
            methods,
        )

        return MFAMethodsResponse(
            upn=upn,
            preferred_default_from_graph=preferred,
            methods=methods,
        )
