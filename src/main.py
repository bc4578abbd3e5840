#!/usr/bin/env python3
"""
Command line entry point for XbeeWeb.
Creates the database structure, adds users, or launches the API server.
"""

import sys
import getpass
import logging
import argparse

from pathlib import Path

from Database import Database
from DatabaseCreator import DatabaseCreator
from auth.passwords import MAX_PASSWORD_BYTES, hash_password
from config import get_config
from domain.user import User
from mysql.connector import Error
from repositories.user_repository import UserRepository


def build_database(db_config: dict) -> Database:
   return Database(
      host=db_config.get('host', 'localhost'),
      user=db_config.get('user', ''),
      password=db_config.get('password', ''),
      database_name=db_config.get('name', 'xbee'),
      port=db_config.get('port', 3306),
      pool_size=db_config.get('pool_size', 5)
   )


def create_user(db: Database, username: str, password: str) -> bool:
   """Stores a new user with a bcrypt hash of the password."""
   try:
      hashed = hash_password(password)
   except ValueError as e:
      logging.error("Could not create user '%s': %s", username, e)
      return False

   if not db.connect():
      return False
   try:
      with db.connection() as conn:
         cursor = conn.cursor()
         try:
            UserRepository(cursor).insert(User(username=username, password=hashed))
         finally:
            cursor.close()
   except Error as e:
      logging.error("Could not create user '%s': %s", username, e)
      return False
   finally:
      db.close()

   logging.info("User '%s' created", username)
   return True


def main(argv=None) -> int:
   parser = argparse.ArgumentParser(
      description='XbeeWeb - web backend for an Xbee sensor network (uses cfg/config.yaml for defaults)',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog="""
   Examples:
     python main.py --setup
     python main.py --create-user admin
     python main.py --api --host 0.0.0.0 --port 8000

   Note: Database credentials are read from config.yaml or the
      XBEEWEB_DB_USER / XBEEWEB_DB_PASSWORD environment variables.
      """
   )
   parser.add_argument('--config',
                       default='cfg/config.yaml',
                       help='Path to config file (default: cfg/config.yaml)')
   parser.add_argument('--setup',
                       action="store_true",
                       help='Create the database and its tables')
   parser.add_argument('--create-user',
                       metavar='USERNAME',
                       help='Add a user; the password is prompted for')
   parser.add_argument('--api',
                       action="store_true",
                       help='Launch the web API server (FastAPI)')
   parser.add_argument('--host',
                       default=None,
                       help='API server host (default: api.host from config or 127.0.0.1)')
   parser.add_argument('--port',
                       type=int,
                       default=None,
                       help='API server port (default: api.port from config or 8000)')

   args = parser.parse_args(argv)
   logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

   config = get_config(args.config)
   db_config = config.get('database') or {}
   api_config = config.get('api') or {}

   if args.api:
      import uvicorn
      from api.dependencies import set_config_path

      host = args.host or api_config.get('host', '127.0.0.1')
      port = args.port or api_config.get('port', 8000)
      logging.info("Starting XbeeWeb API server on http://%s:%s", host, port)
      logging.info("API Documentation: http://%s:%s/api/docs", host, port)

      set_config_path(args.config)
      uvicorn.run(
         "api.main:app",
         host=host,
         port=port,
         reload=False,
         log_level="info"
      )
      return 0

   if not args.setup and not args.create_user:
      parser.error("nothing to do: use --setup, --create-user or --api")

   success = True
   if args.setup:
      sql_file = Path(db_config.get('sql_file', './db/schema.sql'))
      if not sql_file.exists():
         raise FileNotFoundError(f"SQL file not found at: {sql_file}")
      logging.info("Using SQL file: %s", sql_file)
      try:
         success = DatabaseCreator(build_database(db_config)).create_from_file(str(sql_file))
      except RuntimeError as e:
         logging.error("%s", e)
         success = False

   if success and args.create_user:
      password = getpass.getpass(f"Password for '{args.create_user}': ")
      if not password:
         parser.error("password must not be empty")
      if len(password.encode()) > MAX_PASSWORD_BYTES:
         parser.error(f"password must not be longer than {MAX_PASSWORD_BYTES} bytes")
      success = create_user(build_database(db_config), args.create_user, password)

   return 0 if success else 1


if __name__ == "__main__":
   sys.exit(main())
