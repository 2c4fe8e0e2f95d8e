"""
migrate.py
----------
One-shot migration runner. Connects to the SQLite database, reads a SQL
script from disk, executes it (multiple statements allowed) and exits with
status 0 on success or 1 on failure. Deployment-time tool, not used by the
running web app.

Usage:
    supply-migrate [--db PATH] [--sql FILE] [--log-file FILE]
"""

import argparse
import logging
import os
import sqlite3
import sys

from supply_tools import config
from supply_tools.utils import setup_logging


def read_migration(sql_path):
    with open(sql_path, 'r', encoding='utf-8') as f:
        return f.read()


def run_migration(db_path, sql_path):
    """Execute the script at `sql_path` against `db_path`. Returns True on success."""
    logging.info(f"Connecting to database: {db_path}")
    try:
        migration_sql = read_migration(sql_path)
    except OSError as e:
        logging.error(f"Error reading migration file {sql_path}: {e}")
        return False

    logging.info(f"Running migration: {sql_path}")
    try:
        os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)
        conn = sqlite3.connect(db_path)
    except (OSError, sqlite3.Error) as e:
        logging.error(f"Database connection failed: {e}")
        return False

    try:
        conn.executescript(migration_sql)
        conn.commit()
    except sqlite3.Error as e:
        logging.error(f"Migration failed: {e}")
        return False
    finally:
        conn.close()

    logging.info("Migration completed successfully!")
    return True


def build_parser():
    parser = argparse.ArgumentParser(description="PAU Inventory Management System - database migration")
    parser.add_argument("--db", default=config.DATABASE_PATH, help="SQLite database file")
    parser.add_argument("--sql", default=config.MIGRATION_FILE, help="SQL script to execute")
    parser.add_argument("--log-file", default=config.LOG_FILE, help="Log file path")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, logging.DEBUG if config.DEBUG_MODE else logging.INFO)
    logging.info("PAU Inventory Management System - Database Migration")
    return 0 if run_migration(args.db, args.sql) else 1


if __name__ == "__main__":
    sys.exit(main())
