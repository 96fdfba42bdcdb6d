# mfa_api/modules/mfa_methods/router.py

from typing import AsyncIterator, Optional

import httpx
from fastapi import APIRouter, Depends, Query, Request

from mfa_api.core.graph import GraphTokenProvider, new_http_client
from mfa_api.modules.mfa_methods.repository import GraphAuthMethodsRepository
from mfa_api.modules.mfa_methods.schemas import (
    ErrorResponse,
    MFAMethodsRequest,
    MFAMethodsResponse,
)
from mfa_api.modules.mfa_methods.service import MFAMethodsService

router = APIRouter(
    prefix="/mfa-methods",
    tags=["MFA Methods"],
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


async def get_graph_client() -> AsyncIterator[httpx.AsyncClient]:
    """
    One HTTP client per request, shared by the token call and both fetches.
    """
    async with new_http_client() as client:
        yield client


def get_mfa_methods_service(
    client: httpx.AsyncClient = Depends(get_graph_client),
) -> MFAMethodsService:
    return MFAMethodsService(
        token_provider=GraphTokenProvider(client),
        repo=GraphAuthMethodsRepository(client),
    )


async def read_body_upn(request: Request) -> Optional[str]:
    """
    UPN from a JSON body, or None when the body is missing or unusable.
    """
    try:
        body = await request.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("upn"), str):
        return body["upn"]
    return None


# ---------------------------------------------------------
# GET /mfa-methods?upn=...
# ---------------------------------------------------------
@router.get(
    "",
    response_model=MFAMethodsResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_mfa_methods(
    upn: Optional[str] = Query(None, description="User principal name"),
    service: MFAMethodsService = Depends(get_mfa_methods_service),
):
    return await service.assemble(upn)


# ---------------------------------------------------------
# POST /mfa-methods  {"upn": "..."}
# ---------------------------------------------------------
@router.post(
    "",
    response_model=MFAMethodsResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": MFAMethodsRequest.model_json_schema()}},
        },
    },
)
async def post_mfa_methods(
    body_upn: Optional[str] = Depends(read_body_upn),
    upn: Optional[str] = Query(None, description="User principal name"),
    service: MFAMethodsService = Depends(get_mfa_methods_service),
):
    """
    Same lookup with the UPN in the JSON body.
    A `upn` query parameter takes precedence over the body.
    A body that is not JSON, or whose upn is not a string, counts as no UPN.
    """
    return await service.assemble(upn or body_upn)
