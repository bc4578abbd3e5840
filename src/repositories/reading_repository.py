from datetime import datetime

from repositories.base import BaseRepository
from repositories.error_handling import handle_repository_errors


class ReadingRepository(BaseRepository):
   @handle_repository_errors("latest readings")
   def latest_per_node(self) -> list[tuple[int, int, datetime]]:
      """(node_id, reading, recorded_at) of the newest reading of every node."""
      self.cursor.execute(
         """SELECT r.node_id, r.reading, r.recorded_at
            FROM readings r
            JOIN (SELECT node_id, MAX(recorded_at) AS recorded_at
                  FROM readings GROUP BY node_id) latest
              ON latest.node_id = r.node_id AND latest.recorded_at = r.recorded_at
            ORDER BY r.node_id"""
      )
      return [(row[0], row[1], row[2]) for row in self.cursor.fetchall()]
