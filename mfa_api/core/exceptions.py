# mfa_api/core/exceptions.py

"""
Error taxonomy for the MFA lookup endpoint.

Every failure path ends up as one of these; the handler registered in
main.py renders them as {"error": detail}.
"""

from fastapi import HTTPException, status


class MFALookupError(HTTPException):
    def __init__(self, detail="An error occurred", status_code=status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class MissingUserIdentifierError(MFALookupError):
    def __init__(self, detail="Missing UPN"):
        super().__init__(detail=detail, status_code=status.HTTP_400_BAD_REQUEST)


class UpstreamNotFoundError(MFALookupError):
    def __init__(self, upn: str):
        super().__init__(
            detail=f"User {upn} not found",
            status_code=status.HTTP_404_NOT_FOUND,
        )


class UpstreamRejectedError(MFALookupError):
    def __init__(self, detail="Microsoft Graph rejected the request"):
        super().__init__(detail=detail, status_code=status.HTTP_400_BAD_REQUEST)


class TokenAcquisitionError(MFALookupError):
    def __init__(self, detail="Token request failed"):
        super().__init__(detail=detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class UnexpectedFailureError(MFALookupError):
    def __init__(self, detail="Internal server error"):
        super().__init__(detail=detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
