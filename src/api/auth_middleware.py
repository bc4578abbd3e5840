"""
Authentication guard and fallback dispatch.

An endpoint that depends on authed_user only runs for requests carrying a
valid private "auth" cookie. Other requests are forwarded: the fallback
registered for that endpoint answers instead, or a 404 if there is none.
"""

import logging
from typing import Callable, Dict

from fastapi import Depends, Request, status
from fastapi.responses import JSONResponse

from auth.cookies import AUTH_COOKIE_NAME
from api.auth_context import AuthContext, get_auth_context

logger = logging.getLogger("uvicorn.error")

# endpoint -> fallback handler
_fallbacks: Dict[Callable, Callable] = {}


class AuthedUser:
    """Marker for a request that carried a valid auth cookie."""


class AuthForward(Exception):
    """Request is not authenticated and must go to the fallback handler."""


def fallback(endpoint: Callable):
    """
    Registers the decorated function as fallback for an authenticated endpoint.

    The fallback takes no arguments and returns a JSON-serializable value.
    """
    def decorator(handler: Callable) -> Callable:
        _fallbacks[endpoint] = handler
        return handler
    return decorator


def authed_user(request: Request, context: AuthContext = Depends(get_auth_context)) -> AuthedUser:
    """
    Dependency: succeeds if the auth cookie decrypts to the expected value.
    
    Raises:
        AuthForward: cookie missing, tampered with or sealed with another key
    """
    if context.cookie_cipher.is_authenticated(request.cookies.get(AUTH_COOKIE_NAME)):
        return AuthedUser()
    raise AuthForward()


async def auth_forward_handler(request: Request, exc: AuthForward) -> JSONResponse:
    """Exception handler for AuthForward, installed on the app in api.main."""
    handler = _fallbacks.get(request.scope.get("endpoint"))
    if handler is None:
        logger.info("Unauthenticated request to %s %s", request.method, request.url.path)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not Found"})
    return JSONResponse(content=handler())
