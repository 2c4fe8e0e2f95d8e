"""
database.py
-----------
Creates and manages the SQLite database used by the PAU Inventory app. Holds
the `supply_requests` schema, the mapping between API field names and the
(space-containing) storage columns, and one function per CRUD statement.
"""

import os
import sqlite3
from contextlib import contextmanager
from datetime import date

from flask import current_app

from supply_web.errors import NotFoundError, StorageError, ValidationError

TABLE = "supply_requests"
ID_COLUMN = "request id"
DATE_COLUMN = "date"
STATUS_COLUMN = "status"
DEFAULT_STATUS = "pending"

# API field -> storage column, for the columns a client may write
WRITABLE_FIELDS = (
    ("itemName", "item name"),
    ("quantityRequested", "quantity"),
    ("priority", "priority"),
    ("requestedBy", "requested by"),
    ("neededBy", "needed by"),
    ("notes", "justification"),
    ("supplierInfo", "preferred supplier"),
)


def quote_identifier(name):
    """Quote a column/table name for SQLite ("item name" -> "\"item name\"")."""
    return '"' + name.replace('"', '""') + '"'


SCHEMA = f"""
    CREATE TABLE IF NOT EXISTS {TABLE} (
        {quote_identifier(ID_COLUMN)} INTEGER PRIMARY KEY AUTOINCREMENT,
        "item name" TEXT NOT NULL,
        "quantity" INTEGER NOT NULL,
        "priority" TEXT NOT NULL,
        "status" TEXT NOT NULL DEFAULT '{DEFAULT_STATUS}',
        "requested by" TEXT NOT NULL,
        "needed by" TEXT,
        "justification" TEXT,
        "preferred supplier" TEXT,
        "date" TEXT NOT NULL
    )
"""


def get_db(db_path=None):
    path = db_path or current_app.config['DATABASE_PATH']
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def connection(db_path=None):
    """Open a connection, commit on success and translate driver errors."""
    try:
        conn = get_db(db_path)
    except (sqlite3.Error, OSError) as e:
        raise StorageError(str(e)) from e
    try:
        yield conn
        conn.commit()
    except (sqlite3.IntegrityError, OverflowError) as e:
        raise ValidationError(str(e)) from e
    except sqlite3.Error as e:
        raise StorageError(str(e)) from e
    finally:
        conn.close()


def init_db(db_path=None):
    with connection(db_path) as conn:
        conn.execute(SCHEMA)


# ------------------------------------------------------------
# Supply Request Functions
# ------------------------------------------------------------
def _field_values(fields):
    return [fields.get(name) for name, _ in WRITABLE_FIELDS]


def list_supply_requests():
    """Get all supply requests, newest creation date first"""
    query = (
        f"SELECT * FROM {TABLE} "
        f"ORDER BY {quote_identifier(DATE_COLUMN)} DESC, {quote_identifier(ID_COLUMN)} DESC"
    )
    with connection() as conn:
        return conn.execute(query).fetchall()


def create_supply_request(fields):
    """Insert a request; status and date are always set here, never by the caller.

    Returns the generated identifier.
    """
    columns = [column for _, column in WRITABLE_FIELDS] + [STATUS_COLUMN, DATE_COLUMN]
    placeholders = ", ".join("?" for _ in columns)
    query = (
        f"INSERT INTO {TABLE} ({', '.join(quote_identifier(c) for c in columns)}) "
        f"VALUES ({placeholders})"
    )
    values = _field_values(fields) + [DEFAULT_STATUS, date.today().isoformat()]

    with connection() as conn:
        cursor = conn.execute(query, values)
        return cursor.lastrowid


def update_supply_request(request_id, fields):
    """Overwrite every writable column plus status for one request."""
    columns = [column for _, column in WRITABLE_FIELDS] + [STATUS_COLUMN]
    assignments = ", ".join(f"{quote_identifier(c)} = ?" for c in columns)
    query = f"UPDATE {TABLE} SET {assignments} WHERE {quote_identifier(ID_COLUMN)} = ?"
    values = _field_values(fields) + [fields.get("status"), request_id]

    with connection() as conn:
        cursor = conn.execute(query, values)
        if cursor.rowcount == 0:
            raise NotFoundError(f"No supply request with id {request_id}")


def delete_supply_request(request_id):
    query = f"DELETE FROM {TABLE} WHERE {quote_identifier(ID_COLUMN)} = ?"
    with connection() as conn:
        cursor = conn.execute(query, (request_id,))
        if cursor.rowcount == 0:
            raise NotFoundError(f"No supply request with id {request_id}")
