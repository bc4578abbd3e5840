class BaseRepository:
   def __init__(self, cursor):
      """Initialize repository with a raw DB cursor.

      Args:
         cursor: cursor of a (pooled) connection
      """
      self.cursor = cursor
