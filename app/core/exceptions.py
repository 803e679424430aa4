# app/core/exceptions.py
"""Domain errors raised by the service layer.

The HTTP layer turns these into JSON responses using ``status_code`` and
``error``; nothing below the routers knows about HTTP otherwise.
"""


class CrmError(Exception):
    """Base class for CRM domain errors."""

    status_code = 400
    error = "crm_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CrmError):
    """Raised when an update targets a record that does not exist."""

    status_code = 404
    error = "not_found"


class ReferentialIntegrityError(CrmError):
    """Raised when a sale or interaction points at a missing customer."""

    status_code = 409
    error = "referential_integrity"
