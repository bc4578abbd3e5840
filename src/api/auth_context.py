"""
Centralized auth context storage for the app.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import HTTPException, Request, status

from auth.cookies import CookieCipher


@dataclass(frozen=True)
class AuthContext:
    cookie_cipher: CookieCipher
    cookie_secure: bool = False


def set_auth_context(app, cookie_cipher: CookieCipher, cookie_secure: bool = False) -> None:
    """Attach auth context to the FastAPI app state."""
    app.state.auth_context = AuthContext(
        cookie_cipher=cookie_cipher,
        cookie_secure=cookie_secure,
    )


def get_auth_context(request: Request) -> AuthContext:
    """Fetch auth context from the FastAPI app state."""
    context: Optional[AuthContext] = getattr(request.app.state, "auth_context", None)
    if not context:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Authentication service not initialized",
        )
    return context
