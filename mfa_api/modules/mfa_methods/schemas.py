# mfa_api/modules/mfa_methods/schemas.py

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for response models: snake_case in Python, camelCase on the wire.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NormalizedMethod(CamelModel):
    """
    One registered MFA method in canonical form.
    Only the fields relevant to `type` are populated; the rest stay None
    and are dropped from the response body.
    """
    type: str
    device: Optional[str] = None
    number: Optional[str] = None
    phone_type: Optional[str] = None
    sms_sign_in_enabled: Optional[bool] = None
    key_strength: Optional[str] = None
    model: Optional[str] = None
    raw: Optional[Dict[str, Any]] = None
    is_default: bool = False


class PreferredDefault(CamelModel):
    raw: str
    friendly: str


class MFAMethodsResponse(CamelModel):
    upn: str
    preferred_default_from_graph: PreferredDefault
    methods: List[NormalizedMethod] = Field(default_factory=list)


class MFAMethodsRequest(BaseModel):
    """
    POST body. Tests and the portal send {"upn": "alice@example.com"}.
    """
    upn: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
