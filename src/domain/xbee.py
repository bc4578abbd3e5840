from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class Xbee:
    node_id: int
    name: str
    units: str
    min_value: float = 0.0
    max_value: float = 0.0
    min_voltage: float = 0.0
    max_voltage: float = 5.0


@dataclass
class NodeInfo:
    """Cached state of one node as served by /api/list."""
    uuid: int
    name: str
    units: str
    min_value: float = 0.0
    max_value: float = 0.0
    min_voltage: float = 0.0
    max_voltage: float = 5.0
    reading: Optional[int] = None
    last_update: Optional[int] = None  # unix seconds

    @classmethod
    def from_xbee(cls, xbee: Xbee) -> "NodeInfo":
        return cls(
            uuid=xbee.node_id,
            name=xbee.name,
            units=xbee.units,
            min_value=xbee.min_value,
            max_value=xbee.max_value,
            min_voltage=xbee.min_voltage,
            max_voltage=xbee.max_voltage,
        )

    def to_dict(self) -> dict:
        return asdict(self)
