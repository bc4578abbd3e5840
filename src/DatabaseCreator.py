#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Creates the XbeeWeb database and tables.
#
import logging
from mysql.connector import Error

from Database import Database


logger = logging.getLogger(__name__)


def split_sql_statements(sql_content: str) -> list[str]:
   """Split an SQL script into statements, dropping blank lines and '--' comments."""
   statements = []
   current_statement = []

   for line in sql_content.split('\n'):
      stripped = line.strip()
      if not stripped or stripped.startswith('--'):
         continue

      current_statement.append(line)

      if stripped.endswith(';'):
         statement = '\n'.join(current_statement)
         if statement.strip():
            statements.append(statement)
         current_statement = []

   return statements


class DatabaseCreator:
   """Create the database schema from an SQL file using a provided Database instance."""

   def __init__(self, db: Database):
      self.db = db

   def create_database(self) -> bool:
      """Create the database if it doesn't exist."""
      try:
         with self.db.connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
               f"CREATE DATABASE IF NOT EXISTS `{self.db.database_name}` "
               f"DEFAULT CHARACTER SET utf8mb4"
            )
            cursor.close()
         logger.info("Database '%s' created or already exists", self.db.database_name)
         return True
      except Error as e:
         logger.error("Error creating database: %s", e)
         return False

   def execute_sql_file(self, sql_file_path: str) -> bool:
      """
      Execute SQL commands from file.
      
      Args:
         sql_file_path: Path to the SQL file.
      
      Returns:
         True if every statement executed, False otherwise.
      """
      try:
         with open(sql_file_path, 'r', encoding='utf-8') as file:
            statements = split_sql_statements(file.read())
      except FileNotFoundError:
         logger.error("SQL file not found: %s", sql_file_path)
         return False

      logger.info("Executing %s SQL statements...", len(statements))
      try:
         with self.db.connection() as conn:
            cursor = conn.cursor()
            for statement in statements:
               cursor.execute(statement)
            cursor.close()
      except Error as e:
         logger.error("Error executing SQL file: %s", e)
         return False

      logger.info("Successfully executed %s SQL statements", len(statements))
      return True

   def create_from_file(self, sql_file_path: str) -> bool:
      """
      Complete workflow: connect, create database, execute SQL file.
      
      Returns:
         True on success, False on failure.
      """
      if not self.db.connect(use_database=False):
         raise RuntimeError("Failed to connect to MySQL server")

      if not self.create_database():
         self.db.close()
         raise RuntimeError("Failed to create database")

      if not self.db.connect(use_database=True):
         raise RuntimeError("Failed to connect to MySQL database")

      success = self.execute_sql_file(sql_file_path)
      self.db.close()

      if success:
         logger.info("Database '%s' created successfully!", self.db.database_name)
      else:
         logger.error("Database creation failed")
      return success
