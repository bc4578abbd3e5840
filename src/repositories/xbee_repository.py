from repositories.base import BaseRepository
from repositories.error_handling import handle_repository_errors
from domain.xbee import Xbee


class XbeeRepository(BaseRepository):
   @handle_repository_errors("insert xbee")
   def insert(self, xbee: Xbee) -> None:
      self.cursor.execute(
         """INSERT INTO xbees
            (node_id, name, units, min_value, max_value, min_voltage, max_voltage)
            VALUES (%s, %s, %s, %s, %s, %s, %s)""",
         (
            xbee.node_id,
            xbee.name,
            xbee.units,
            xbee.min_value,
            xbee.max_value,
            xbee.min_voltage,
            xbee.max_voltage,
         ),
      )

   @handle_repository_errors("list xbees")
   def list_all(self) -> list[Xbee]:
      self.cursor.execute(
         """SELECT node_id, name, units, min_value, max_value, min_voltage, max_voltage
            FROM xbees ORDER BY id"""
      )
      return [
         Xbee(
            node_id=row[0],
            name=row[1],
            units=row[2],
            min_value=row[3],
            max_value=row[4],
            min_voltage=row[5],
            max_voltage=row[6],
         )
         for row in self.cursor.fetchall()
      ]
