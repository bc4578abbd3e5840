"""
Xbee node API router - list, add and send. All endpoints require the auth cookie.
"""

import logging

from fastapi import APIRouter, Depends

from api.auth_middleware import AuthedUser, authed_user, fallback
from api.dependencies import get_db_cursor, get_info_set
from api.error_handling import handle_db_errors
from api.models import MessageRequest, NewXbeeRequest
from repositories.xbee_repository import XbeeRepository
from services.info_set import InfoSet

logger = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["nodes"])


@router.post("/send")
def send(message: MessageRequest, _user: AuthedUser = Depends(authed_user)):
    """
    Sends a message to a node of the xbee network.

    Example body: {"content": "Data to send", "dest": 1234}
    Nothing is transmitted yet; the content is echoed back.
    """
    logger.info("Message for node %s: %r", message.dest, message.content)
    return {"content": message.content, "success": True}


@router.post("/add")
@handle_db_errors("add xbee")
def add(
    xbee: NewXbeeRequest,
    _user: AuthedUser = Depends(authed_user),
    cursor=Depends(get_db_cursor),
    info_set: InfoSet = Depends(get_info_set),
):
    """
    Adds a node to the database and the node cache.

    Example body: {"node_id": 1234, "name": "Temperature Sensor", "units": "C"}
    Node ids are not checked for duplicates.
    """
    node = xbee.to_domain()
    XbeeRepository(cursor).insert(node)
    info_set.register(node)
    return {"success": True}


@router.get("/list")
def list_authed(_user: AuthedUser = Depends(authed_user), info_set: InfoSet = Depends(get_info_set)):
    """
    Known nodes with their most recent values.

    Example:
        {"nodes": [{"uuid": 2, "name": "Test", "units": "C", "reading": 413,
                    "last_update": 1523568385, "min_value": 0.0, "max_value": 150.0,
                    "min_voltage": 0.0, "max_voltage": 5.0}],
         "success": true}
    """
    return {"nodes": info_set.nodes(), "success": True}


@fallback(list_authed)
def list_invalid():
    """Answer for /api/list without a valid auth cookie: no node data."""
    return {"success": False}
