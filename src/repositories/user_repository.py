from typing import Optional

from repositories.base import BaseRepository
from repositories.error_handling import handle_repository_errors
from domain.user import User


class UserRepository(BaseRepository):
   @handle_repository_errors("find user")
   def find_by_username(self, username: str) -> Optional[User]:
      """Returns the user or None; usernames are unique so at most one row matches."""
      self.cursor.execute(
         "SELECT username, password FROM users WHERE username = %s LIMIT 1",
         (username,),
      )
      row = self.cursor.fetchone()
      if not row:
         return None
      return User(username=row[0], password=row[1])

   @handle_repository_errors("insert user")
   def insert(self, user: User) -> None:
      self.cursor.execute(
         "INSERT INTO users (username, password) VALUES (%s, %s)",
         (user.username, user.password),
      )
