"""
Web App Configuration
Centralized settings for the PAU Inventory web application
"""

import os

# Flask settings
SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "pau-inventory-dev-key")
MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB for JSON bodies
PORT = 3000

# Database settings
DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')
DATABASE_PATH = os.environ.get("SUPPLY_DB_PATH", os.path.join(DATA_DIR, 'inventory.db'))

# Logging
LOG_LEVEL = os.environ.get("SUPPLY_LOG_LEVEL", "INFO")

# Static credential table: username -> {password | password_hash, role}
# Entries may carry a werkzeug `password_hash` instead of a plain password.
USERS = {
    'admin': {'password': 'admin', 'role': 'admin'},
    'supervisor': {'password': 'supervisor', 'role': 'supervisor'},
    'staff1': {'password': 'staff123', 'role': 'staff'},
    'staff2': {'password': 'staff123', 'role': 'staff'},
    'john': {'password': 'john123', 'role': 'staff'},
    'mary': {'password': 'mary123', 'role': 'staff'},
}

# Role -> endpoint of the landing page after login
ROLE_LANDING_PAGES = {
    'admin': 'dashboard.supervisor_dashboard',
    'supervisor': 'dashboard.supervisor_dashboard',
    'staff': 'dashboard.staff_dashboard',
}

# Dashboard stats panel (placeholder until real aggregates exist)
DASHBOARD_PLACEHOLDER_STATS = {
    'totalItems': 0,
    'categories': 0,
    'lowStock': 0,
    'totalValue': 0,
}

# Supply request API
SUPPLY_REQUEST_ID_PREFIX = "SR"
DEFAULT_UNIT = "pcs"
