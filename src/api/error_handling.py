"""
Central error handling for the XbeeWeb API.
Consistent error-handling patterns for all routers.
"""

import asyncio
import logging
from functools import wraps
from typing import Callable, Any

from fastapi import HTTPException, status
from mysql.connector.errors import Error as MySQLError, OperationalError, InterfaceError, DatabaseError

logger = logging.getLogger("uvicorn.error")


def _to_http_exception(exc: Exception, operation_name: str) -> HTTPException:
    if isinstance(exc, (OperationalError, InterfaceError, DatabaseError)):
        logger.error("Database error in %s: %s", operation_name, exc)
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Database connection error during {operation_name}. Please try again."
        )
    if isinstance(exc, MySQLError):
        logger.error("MySQL error in %s: %s", operation_name, exc)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database error during {operation_name}"
        )
    logger.exception("Unexpected error in %s: %s", operation_name, exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Internal server error during {operation_name}"
    )


def handle_db_errors(operation_name: str = "database operation"):
    """
    Decorator for uniform error handling in API endpoints.
    
    Args:
        operation_name: Name of the operation for error messages
        
    Usage:
        @router.post("/endpoint")
        @handle_db_errors("add data")
        def my_endpoint(cursor = Depends(get_db_cursor)):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def async_wrapper(*args, **kwargs) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                raise _to_http_exception(exc, operation_name) from exc
        
        @wraps(func)
        def sync_wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                raise _to_http_exception(exc, operation_name) from exc
        
        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper
    
    return decorator
