"""
In-memory cache of node information served by /api/list.

The cache is seeded from the database at startup, extended when a node is
added through the API, and updated with new samples via record().
"""

import threading
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from domain.xbee import NodeInfo, Xbee


def _to_unix(timestamp) -> Optional[int]:
    if timestamp is None:
        return None
    if isinstance(timestamp, datetime):
        return int(timestamp.timestamp())
    return int(timestamp)


class InfoSet:
    """
    Thread-safe cache of NodeInfo keyed by node id.

    Request handlers read it concurrently while startup and the add endpoint
    write to it, so every access goes through one re-entrant lock.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._nodes: Dict[int, NodeInfo] = {}

    def load(self, xbees: Iterable[Xbee], readings: Iterable[Tuple[int, int, object]] = ()) -> int:
        """
        Rebuilds the cache.

        Args:
            xbees: Nodes from the xbees table; a later row with the same id wins
            readings: (node_id, reading, recorded_at) of the newest sample per node

        Returns:
            Number of cached nodes
        """
        nodes: Dict[int, NodeInfo] = {}
        for xbee in xbees:
            nodes[xbee.node_id] = NodeInfo.from_xbee(xbee)

        for node_id, reading, recorded_at in readings:
            node = nodes.get(node_id)
            if node is not None:
                node.reading = reading
                node.last_update = _to_unix(recorded_at)

        with self._lock:
            self._nodes = nodes
            return len(self._nodes)

    def register(self, xbee: Xbee) -> NodeInfo:
        """Adds or replaces a node; a reading already cached for the id is kept."""
        with self._lock:
            node = NodeInfo.from_xbee(xbee)
            previous = self._nodes.get(xbee.node_id)
            if previous is not None:
                node.reading = previous.reading
                node.last_update = previous.last_update
            self._nodes[xbee.node_id] = node
            return node

    def record(self, node_id: int, reading: int, timestamp=None) -> NodeInfo:
        """
        Stores the latest sample of a known node.

        Args:
            node_id: Node id
            reading: Raw sample
            timestamp: datetime or unix seconds (default: now)

        Raises:
            KeyError: Node is not registered
        """
        if timestamp is None:
            timestamp = datetime.now()
        with self._lock:
            node = self._nodes[node_id]
            node.reading = reading
            node.last_update = _to_unix(timestamp)
            return node

    def get(self, node_id: int) -> Optional[NodeInfo]:
        with self._lock:
            return self._nodes.get(node_id)

    def nodes(self) -> List[dict]:
        """JSON-ready snapshot of all nodes, sorted by id."""
        with self._lock:
            return [self._nodes[node_id].to_dict() for node_id in sorted(self._nodes)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._nodes)
