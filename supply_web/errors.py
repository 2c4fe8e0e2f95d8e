"""
errors.py
---------
Error types raised by the supply request storage layer. Each carries the HTTP
status and a stable code so routes can answer without leaking driver messages.
"""


class SupplyRequestError(Exception):
    status_code = 500
    code = "error"

    def __init__(self, message=""):
        super().__init__(message)
        self.message = message

    def to_dict(self, public_message):
        return {"error": public_message, "code": self.code}


class ValidationError(SupplyRequestError):
    """Request body or stored row rejected (bad shape, constraint violation)."""
    status_code = 400
    code = "validation_error"


class NotFoundError(SupplyRequestError):
    status_code = 404
    code = "not_found"


class StorageError(SupplyRequestError):
    """Any other database failure."""
    status_code = 500
    code = "storage_error"
