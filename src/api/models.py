"""
Pydantic models for API request validation
"""

from pydantic import BaseModel, Field

from domain.xbee import Xbee

U32_MAX = 2**32 - 1


class LoginRequest(BaseModel):
    """Login request: {"user": ..., "pass": ...}"""
    user: str
    password: str = Field(alias="pass")

    class Config:
        populate_by_name = True


class NewXbeeRequest(BaseModel):
    """Request model for adding a sensor node"""
    node_id: int = Field(ge=0, le=U32_MAX)
    name: str
    units: str

    def to_domain(self) -> Xbee:
        return Xbee(node_id=self.node_id, name=self.name, units=self.units)


class MessageRequest(BaseModel):
    """Message for a node on the xbee network"""
    content: str
    dest: int = Field(ge=0, le=U32_MAX)
