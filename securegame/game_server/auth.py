"""API key authentication for the game service."""

import hmac
from typing import Annotated

from fastapi import Header, HTTPException, Request, status


async def verify_api_key(request: Request, x_api_key: Annotated[str, Header()]) -> str:
    """
    Verify the API key from request headers.

    Args:
        request: Incoming request, used to reach the app settings
        x_api_key: API key from X-API-Key header

    Returns:
        The API key if valid

    Raises:
        HTTPException: 401 if API key is invalid
    """
    expected = request.app.state.settings.api_key
    if not hmac.compare_digest(x_api_key.encode(), expected.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
        )
    return x_api_key
