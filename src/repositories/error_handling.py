#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Central error handling for the repository layer.
#
"""
Central error handling for the repository layer.

Repositories never translate database errors into API responses; they log
them with the failing operation and re-raise so the caller decides.
"""

from __future__ import annotations

from functools import wraps
from typing import Callable, Any
import logging

from mysql.connector.errors import Error as MySQLError, OperationalError, InterfaceError, DatabaseError

logger = logging.getLogger("uvicorn.error")


def _log_repository_exception(operation_name: str, base_message: str, exc: Exception) -> None:
    logger.error("%s (%s): %s", base_message, operation_name, exc)


def handle_repository_errors(operation_name: str = "database operation"):
    """Decorator for consistent error logging in repositories."""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except (OperationalError, InterfaceError, DatabaseError) as exc:
                _log_repository_exception(operation_name, "Database connection error", exc)
                raise
            except MySQLError as exc:
                _log_repository_exception(operation_name, "Database error", exc)
                raise
        return wrapper
    return decorator

