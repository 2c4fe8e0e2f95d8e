"""
supply_requests.py
------------------
REST endpoints for supply requests, mounted under /api/supply-requests.
Each route maps one HTTP verb onto one statement in `database` and reshapes
storage rows into the JSON schema the inventory pages consume.
"""

from datetime import datetime

from flask import Blueprint, current_app, jsonify, request

from supply_web import database
from supply_web.errors import NotFoundError, SupplyRequestError, ValidationError

bp = Blueprint('supply_requests', __name__, url_prefix='/api/supply-requests')

# Older pages post these names instead of the API ones
LEGACY_ALIASES = {
    'quantityRequested': 'quantity',
    'notes': 'justification',
    'supplierInfo': 'preferredSupplier',
}

NOT_FOUND_MESSAGE = 'Supply request not found'
MAX_SQLITE_INTEGER = 2 ** 63 - 1


def format_request_id(request_id):
    """Render a numeric id as the external SR### form (7 -> SR007)."""
    prefix = current_app.config['SUPPLY_REQUEST_ID_PREFIX']
    return f"{prefix}{int(request_id):03d}"


def parse_request_id(raw):
    """Accept either 12 or SR012; return the integer id, or None when it cannot exist."""
    value = (raw or '').strip()
    prefix = current_app.config['SUPPLY_REQUEST_ID_PREFIX']
    if value.upper().startswith(prefix):
        value = value[len(prefix):]
    if not (value.isascii() and value.isdigit()):
        return None
    request_id = int(value)
    if request_id > MAX_SQLITE_INTEGER:
        return None
    return request_id


def _calendar_date(value):
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace('Z', '+00:00')).date().isoformat()
    except ValueError:
        return str(value)


def serialize_supply_request(row):
    requested_date = _calendar_date(row['date'])
    return {
        "id": format_request_id(row['request id']),
        "itemName": row['item name'],
        "quantityRequested": row['quantity'],
        "unit": current_app.config['DEFAULT_UNIT'],
        "priority": row['priority'],
        "requestedBy": row['requested by'],
        "requestedDate": requested_date,
        "neededBy": _calendar_date(row['needed by']),
        "status": row['status'],
        "notes": row['justification'],
        "supplierInfo": row['preferred supplier'],
        "estimatedCost": None,
        "approvedBy": None,
        "approvedDate": None,
        "createdAt": requested_date,
    }


def _read_payload():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")

    fields = dict(data)
    for field, alias in LEGACY_ALIASES.items():
        if fields.get(field) in (None, '') and alias in data:
            fields[field] = data[alias]
    return fields


def _error_response(message, error):
    if isinstance(error, NotFoundError):
        current_app.logger.warning(f"{message}: {error}")
        return jsonify({"error": NOT_FOUND_MESSAGE, "code": error.code}), error.status_code
    current_app.logger.error(f"{message}: {error}")
    return jsonify(error.to_dict(message)), error.status_code


@bp.route('', methods=['GET'])
def list_requests():
    current_app.logger.info("Supply request list requested")
    try:
        rows = database.list_supply_requests()
    except SupplyRequestError as e:
        return _error_response("Failed to fetch supply requests", e)

    current_app.logger.info(f"Found {len(rows)} supply requests")
    return jsonify([serialize_supply_request(row) for row in rows])


@bp.route('', methods=['POST'])
def create_request():
    try:
        fields = _read_payload()
        new_id = database.create_supply_request(fields)
    except SupplyRequestError as e:
        return _error_response("Failed to add supply request", e)

    current_app.logger.info(f"Supply request added, id {new_id}")
    return jsonify({"message": "Supply request added successfully", "id": new_id}), 201


@bp.route('/<request_id>', methods=['PUT'])
def update_request(request_id):
    current_app.logger.info(f"Update requested for supply request {request_id}")
    parsed_id = parse_request_id(request_id)
    try:
        if parsed_id is None:
            raise NotFoundError(f"Unrecognised supply request id {request_id!r}")
        fields = _read_payload()
        database.update_supply_request(parsed_id, fields)
    except SupplyRequestError as e:
        return _error_response("Failed to update supply request", e)

    return jsonify({"message": "Supply request updated successfully"})


@bp.route('/<request_id>', methods=['DELETE'])
def delete_request(request_id):
    current_app.logger.info(f"Delete requested for supply request {request_id}")
    parsed_id = parse_request_id(request_id)
    try:
        if parsed_id is None:
            raise NotFoundError(f"Unrecognised supply request id {request_id!r}")
        database.delete_supply_request(parsed_id)
    except SupplyRequestError as e:
        return _error_response("Failed to delete supply request", e)

    return jsonify({"message": "Supply request deleted successfully"})
