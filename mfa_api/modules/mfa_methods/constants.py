# mfa_api/modules/mfa_methods/constants.py

"""
Graph discriminant tags, display labels and preference codes.
"""

# Discriminant key on every authenticationMethod record
ODATA_TYPE_KEY = "@odata.type"
ODATA_TYPE_PREFIX = "#microsoft.graph."

# Method kinds (bare @odata.type names)
KIND_PASSWORD = "passwordAuthenticationMethod"
KIND_EMAIL = "emailAuthenticationMethod"
KIND_AUTHENTICATOR = "microsoftAuthenticatorAuthenticationMethod"
KIND_PHONE = "phoneAuthenticationMethod"
KIND_FIDO2 = "fido2AuthenticationMethod"
KIND_WINDOWS_HELLO = "windowsHelloForBusinessAuthenticationMethod"
KIND_SOFTWARE_OATH = "softwareOathAuthenticationMethod"

# Credentials that are not second factors; never reported
EXCLUDED_KINDS = frozenset({KIND_PASSWORD, KIND_EMAIL})

# Output labels
LABEL_AUTHENTICATOR = "Microsoft Authenticator"
LABEL_PHONE = "Phone"
LABEL_FIDO2 = "FIDO2 Security Key"
LABEL_WINDOWS_HELLO = "Windows Hello for Business"
LABEL_SOFTWARE_OATH = "Software OATH Token"
LABEL_UNKNOWN = "Unknown"

# Fallbacks for optional upstream fields
DEFAULT_AUTHENTICATOR_DEVICE = "Authenticator app"
DEFAULT_PHONE_NUMBER = "N/A"
DEFAULT_FIDO2_MODEL = "Security Key"
DEFAULT_WINDOWS_HELLO_DEVICE = "Windows Hello"
DEFAULT_SOFTWARE_OATH_DEVICE = "OATH TOTP"

SMS_SIGN_IN_ENABLED = "enabled"

# Sign-in preferences
PREFERRED_METHOD_KEY = "userPreferredMethodForSecondaryAuthentication"
NO_PREFERENCE_CODE = "unknown"
NO_PREFERENCE_LABEL = "No default MFA method configured"

# Preference codes that make a method kind the default.
# Different Graph surfaces emit different tokens for the same factor.
DEFAULT_CODES_BY_LABEL = {
    LABEL_AUTHENTICATOR: frozenset({"microsoftAuthenticator", "push"}),
    LABEL_PHONE: frozenset({
        "mobilePhone",
        "alternateMobilePhone",
        "officePhone",
        "voiceMobile",
        "voiceAlternateMobile",
        "voiceOffice",
    }),
    LABEL_FIDO2: frozenset({"fido2"}),
    LABEL_WINDOWS_HELLO: frozenset({"windowsHelloForBusiness"}),
    LABEL_SOFTWARE_OATH: frozenset({"softwareOath", "oath"}),
}

FRIENDLY_PREFERENCE_NAMES = {
    "push": "Microsoft Authenticator (push notification)",
    "microsoftAuthenticator": "Microsoft Authenticator",
    "oath": "Authenticator app or hardware token (code)",
    "softwareOath": "Software OATH token (code)",
    "sms": "Text message (SMS)",
    "mobilePhone": "Mobile phone",
    "alternateMobilePhone": "Alternate mobile phone",
    "officePhone": "Office phone",
    "voiceMobile": "Phone call (mobile)",
    "voiceAlternateMobile": "Phone call (alternate mobile)",
    "voiceOffice": "Phone call (office)",
    "fido2": "FIDO2 security key",
    "windowsHelloForBusiness": "Windows Hello for Business",
}
