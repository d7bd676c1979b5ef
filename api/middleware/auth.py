"""
Authentication Middleware

API key validation for protected endpoints.
"""

import secrets
from typing import Optional

from fastapi import HTTPException, Request, Security, status
from fastapi.security import APIKeyHeader

# API key header
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(
    request: Request,
    api_key: Optional[str] = Security(api_key_header),
) -> str:
    """
    Verify API key from request header.

    Returns the API key if valid.
    Raises HTTPException if invalid or missing.
    """
    settings = request.app.state.settings

    # Skip auth in debug mode if no keys configured
    if settings.debug and not settings.api_key_list:
        return "debug-mode"

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "error": {
                    "code": "AUTH_REQUIRED",
                    "message": "API key required. Include X-API-Key header.",
                }
            },
        )

    # Constant-time comparison
    valid = False
    for valid_key in settings.api_key_list:
        if secrets.compare_digest(api_key, valid_key):
            valid = True
            break

    if not valid:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "error": {
                    "code": "INVALID_API_KEY",
                    "message": "Invalid API key.",
                }
            },
        )

    return api_key
