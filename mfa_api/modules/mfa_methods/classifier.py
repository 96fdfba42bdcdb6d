# mfa_api/modules/mfa_methods/classifier.py

"""
Turns raw Graph authenticationMethod records into NormalizedMethod objects.

Password and email records are not second factors and are dropped.
Anything with an unrecognized @odata.type is kept as "Unknown" with the
original record attached, so new method kinds show up instead of vanishing.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional

from mfa_api.modules.mfa_methods import constants as c
from mfa_api.modules.mfa_methods.schemas import NormalizedMethod


def method_kind(record: Dict[str, Any]) -> Optional[str]:
    """Bare kind name of a record, e.g. 'phoneAuthenticationMethod'."""
    tag = record.get(c.ODATA_TYPE_KEY)
    if not isinstance(tag, str):
        return None
    if tag.startswith(c.ODATA_TYPE_PREFIX):
        return tag[len(c.ODATA_TYPE_PREFIX):]
    return tag


def _authenticator(record: Dict[str, Any]) -> NormalizedMethod:
    return NormalizedMethod(
        type=c.LABEL_AUTHENTICATOR,
        device=record.get("displayName") or c.DEFAULT_AUTHENTICATOR_DEVICE,
    )


def _phone(record: Dict[str, Any]) -> NormalizedMethod:
    # smsSignInState is an enum ("enabled", "notEnabled", "notSupported", ...)
    return NormalizedMethod(
        type=c.LABEL_PHONE,
        number=record.get("phoneNumber") or c.DEFAULT_PHONE_NUMBER,
        phone_type=record.get("phoneType"),
        sms_sign_in_enabled=record.get("smsSignInState") == c.SMS_SIGN_IN_ENABLED,
    )


def _fido2(record: Dict[str, Any]) -> NormalizedMethod:
    return NormalizedMethod(
        type=c.LABEL_FIDO2,
        model=record.get("model") or c.DEFAULT_FIDO2_MODEL,
    )


def _windows_hello(record: Dict[str, Any]) -> NormalizedMethod:
    return NormalizedMethod(
        type=c.LABEL_WINDOWS_HELLO,
        device=record.get("displayName") or c.DEFAULT_WINDOWS_HELLO_DEVICE,
        key_strength=record.get("keyStrength"),
    )


def _software_oath(record: Dict[str, Any]) -> NormalizedMethod:
    return NormalizedMethod(
        type=c.LABEL_SOFTWARE_OATH,
        device=record.get("displayName") or c.DEFAULT_SOFTWARE_OATH_DEVICE,
    )


_EXTRACTORS: Dict[str, Callable[[Dict[str, Any]], NormalizedMethod]] = {
    c.KIND_AUTHENTICATOR: _authenticator,
    c.KIND_PHONE: _phone,
    c.KIND_FIDO2: _fido2,
    c.KIND_WINDOWS_HELLO: _windows_hello,
    c.KIND_SOFTWARE_OATH: _software_oath,
}


def classify_method(record: Any) -> Optional[NormalizedMethod]:
    """
    Classify one raw record.

    Returns None for excluded (non-MFA) credentials. isDefault is always
    False here; DefaultReconciler owns that flag.
    """
    if not isinstance(record, dict):
        return NormalizedMethod(type=c.LABEL_UNKNOWN, raw={"value": record})

    kind = method_kind(record)
    if kind in c.EXCLUDED_KINDS:
        return None

    extractor = _EXTRACTORS.get(kind)
    if extractor is None:
        return NormalizedMethod(type=c.LABEL_UNKNOWN, raw=dict(record))
    return extractor(record)


def classify_methods(records: Iterable[Any]) -> List[NormalizedMethod]:
    """Classify every record, dropping excluded ones. Input order is kept."""
    methods = []
    for record in records:
        method = classify_method(record)
        if method is not None:
            methods.append(method)
    return methods
