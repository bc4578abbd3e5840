"""
Authentication API router - login and logout via private cookie.
"""

import logging

from fastapi import APIRouter, Depends, Response
from mysql.connector.errors import Error as MySQLError

from Database import Database
from auth.cookies import AUTH_COOKIE_NAME, AUTH_COOKIE_VALUE
from auth.passwords import verify_password
from api.auth_context import AuthContext, get_auth_context
from api.dependencies import get_database
from api.models import LoginRequest
from repositories.user_repository import UserRepository

logger = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["authentication"])

ERROR_NO_USER = "No user with that name found."
ERROR_INVALID_CREDENTIALS = "Invalid login credentials."
ERROR_DATABASE = "Error getting information from database."


@router.post("/login")
def login(
    credentials: LoginRequest,
    response: Response,
    context: AuthContext = Depends(get_auth_context),
    db: Database = Depends(get_database),
):
    """
    Login with username and password.

    On success a private "auth" cookie is set which grants access to the
    authenticated endpoints. Failures are reported in the JSON body:
    unknown user, wrong password, or any other database error.
    """
    try:
        with db.connection() as conn:
            cursor = conn.cursor(buffered=True)
            try:
                user = UserRepository(cursor).find_by_username(credentials.user)
            finally:
                cursor.close()
    except (MySQLError, ValueError) as exc:
        logger.error("Login lookup for '%s' failed: %s", credentials.user, exc)
        return {"success": False, "error": ERROR_DATABASE}

    if user is None:
        logger.info("Login for unknown user '%s'", credentials.user)
        return {"success": False, "error": ERROR_NO_USER}

    try:
        valid = verify_password(credentials.password, user.password)
    except ValueError as exc:
        logger.warning("Stored password hash of '%s' is unusable: %s", user.username, exc)
        valid = False

    if not valid:
        logger.info("Invalid password for '%s'", user.username)
        return {"success": False, "error": ERROR_INVALID_CREDENTIALS}

    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=context.cookie_cipher.seal(AUTH_COOKIE_VALUE),
        httponly=True,
        secure=context.cookie_secure,
        samesite="strict",
        path="/",
    )
    logger.info("User '%s' logged in", user.username)
    return {"success": True}


@router.get("/logout")
def logout(response: Response, context: AuthContext = Depends(get_auth_context)):
    """Removes the auth cookie. Always succeeds."""
    response.delete_cookie(
        key=AUTH_COOKIE_NAME,
        httponly=True,
        secure=context.cookie_secure,
        samesite="strict",
        path="/",
    )
    return {"success": True}
