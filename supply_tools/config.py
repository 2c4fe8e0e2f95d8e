"""
config.py
---------
Stores configuration for the standalone tools: where the API lives, where the
SQLite database and the migration script are, and how the tools log. Central
location for modifying behavior without touching main code.
"""

import os

from supply_web import config as web_config

# Backend communication
BACKEND_URL = os.environ.get("SUPPLY_API_URL", "http://localhost:3000/api")
BACKEND_TIMEOUT = 10  # Request timeout in seconds

# Database (same file the web app uses)
DATABASE_PATH = web_config.DATABASE_PATH

# Migration
MIGRATION_FILE = os.path.join(os.path.dirname(__file__), "sql", "seed_supply_requests.sql")

# File paths
LOG_FILE = "supply_tools.log"

# Debug settings
DEBUG_MODE = False
