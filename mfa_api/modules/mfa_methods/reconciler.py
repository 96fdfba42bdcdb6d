# mfa_api/modules/mfa_methods/reconciler.py

"""
Decides which classified methods are the user's default.

Graph reports the preferred method as a coarse code on a separate
signInPreferences record. A phone-family code cannot be tied to one
specific phone record, so every Phone method is flagged when one is used.
"""

from typing import List, Optional, Sequence, Tuple

from mfa_api.modules.mfa_methods import constants as c
from mfa_api.modules.mfa_methods.schemas import NormalizedMethod, PreferredDefault


def normalize_preference_code(code: Optional[str]) -> str:
    if not isinstance(code, str) or not code.strip():
        return c.NO_PREFERENCE_CODE
    return code.strip()


def friendly_name(code: Optional[str]) -> str:
    """Human label for a preference code. Unmapped codes pass through."""
    code = normalize_preference_code(code)
    if code == c.NO_PREFERENCE_CODE:
        return c.NO_PREFERENCE_LABEL
    return c.FRIENDLY_PREFERENCE_NAMES.get(code, code)


def is_default_for(method: NormalizedMethod, code: str) -> bool:
    return code in c.DEFAULT_CODES_BY_LABEL.get(method.type, frozenset())


def reconcile_defaults(
    preferred_code: Optional[str],
    methods: Sequence[NormalizedMethod],
) -> Tuple[List[NormalizedMethod], PreferredDefault]:
    """
    Returns copies of `methods` with is_default set, plus the response-level
    descriptor. Never raises; a missing code means "no default".
    """
    code = normalize_preference_code(preferred_code)

    reconciled = [
        method.model_copy(update={"is_default": is_default_for(method, code)})
        for method in methods
    ]
    descriptor = PreferredDefault(raw=code, friendly=friendly_name(code))
    return reconciled, descriptor
