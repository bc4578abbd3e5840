import logging
from contextlib import contextmanager

import mysql.connector.pooling
from mysql.connector import Error

logger = logging.getLogger("uvicorn.error")


class Database:
   """MySQL connection pool; one connection is checked out per request."""
   
   def __init__(self, host: str, user: str, password: str, database_name: str, port: int = 3306, pool_size: int = 5):
      """
      Initialize database connection parameters.
      
      Args:
         host: MySQL server host address
         user: Database user
         password: Database password
         database_name: Name of the database
         port: MySQL server port (default: 3306)
         pool_size: Connections kept in the pool (default: 5)
      """
      self.host = host
      self.user = user
      self.password = password
      self.database_name = database_name
      self.port = port
      self.pool_size = pool_size
      self.pool = None
    
   def connect(self, use_database: bool = True) -> bool:
      """
      Create the connection pool.
      
      Args:
         use_database: If True, connect to specific database; if False, connect to server only.
      
      Returns:
         True on success, False otherwise.
      """
      self.close()
      try:
         self.pool = mysql.connector.pooling.MySQLConnectionPool(
            pool_name=f"xbeeweb_{self.database_name if use_database else 'server'}",
            pool_size=self.pool_size,
            host=self.host,
            user=self.user,
            password=self.password,
            database=self.database_name if use_database else None,
            port=self.port,
            autocommit=True,
            use_pure=True,
         )
      except Error as e:
         logger.error("Error connecting to MySQL: %s", e)
         self.pool = None
         return False

      logger.info("Connection pool '%s' created (%s connections)", self.pool.pool_name, self.pool_size)
      return True
      
   def close(self) -> None:
      """Drop the pool; checked-out connections close when released."""
      if self.pool is not None:
         logger.info("Database connection pool closed")
      self.pool = None

   def is_connected(self) -> bool:
      """Check if the pool exists."""
      return self.pool is not None

   def get_connection(self):
      """
      Check out a pooled connection. Closing it returns it to the pool.

      Raises:
         mysql.connector.errors.InterfaceError: pool not created
         mysql.connector.errors.PoolError: pool exhausted
      """
      if self.pool is None:
         raise mysql.connector.errors.InterfaceError("Connection pool not initialized")
      return self.pool.get_connection()

   @contextmanager
   def connection(self):
      """Context manager around get_connection() that always releases the connection."""
      conn = self.get_connection()
      try:
         yield conn
      finally:
         conn.close()
