"""
FastAPI dependencies for database access and the node cache
"""

import logging

from fastapi import Depends, HTTPException, Request, status
from mysql.connector.errors import Error as MySQLError

from Database import Database
from config import DEFAULT_CONFIG_PATH
from services.info_set import InfoSet

logger = logging.getLogger("uvicorn.error")


# Global database instance (initialized on startup)
_db_instance: Database | None = None

# Config file used on startup (set by main.py before launching uvicorn)
_config_path: str = DEFAULT_CONFIG_PATH


def set_config_path(config_path: str) -> None:
    global _config_path
    _config_path = config_path


def get_config_path() -> str:
    return _config_path


def get_database() -> Database:
    """
    Get database instance (singleton pattern).
    
    Raises:
        HTTPException: If database not initialized
    """
    if _db_instance is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database not initialized"
        )
    return _db_instance


def set_database_instance(db: Database | None):
    """Set the global database instance."""
    global _db_instance
    _db_instance = db


def get_db_cursor(db: Database = Depends(get_database)):
    """
    Checks out a pooled connection for the request and yields a cursor.
    The connection goes back to the pool when the request is done.
    """
    try:
        conn = db.get_connection()
    except MySQLError as e:
        logger.error("Could not check out a database connection: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database connection unavailable"
        )

    try:
        try:
            cursor = conn.cursor(buffered=True)
        except MySQLError as e:
            logger.error("Could not open a cursor on the pooled connection: %s", e)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Database connection unavailable"
            )
        try:
            yield cursor
        finally:
            cursor.close()
    finally:
        conn.close()


def get_info_set(request: Request) -> InfoSet:
    """Node cache attached to the app on startup."""
    info_set = getattr(request.app.state, "info_set", None)
    if info_set is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Node cache not initialized"
        )
    return info_set
