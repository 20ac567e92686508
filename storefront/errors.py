"""Error types raised by the catalog and the request handlers.

Each error knows the HTTP status it maps to and the JSON body the
storefront expects to see, so the exception handlers in ``main`` stay
one-liners.
"""

from typing import Any, Dict


class StoreError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class NotFound(StoreError):
    status_code = 404


class ValidationFailure(StoreError):
    """A required field was missing or a value was out of range."""

    status_code = 400

    def to_body(self) -> Dict[str, Any]:
        return {"success": False, "error": self.message}


class UpstreamFailure(StoreError):
    status_code = 500
