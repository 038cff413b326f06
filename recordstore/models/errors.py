"""Persistence errors carrying an HTTP-style status and a detail payload."""

from typing import Any, Dict, Optional


class PersistenceError(Exception):
    """
    Base error raised by persistence adapters.

    Attributes:
        message: Human-readable error message
        status: HTTP-style status code the REST layer should answer with
        data: Detail payload describing the failure
    """

    status: int = 500
    default_message: str = "Persistence error"

    def __init__(self, message: Optional[str] = None, data: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.data = data if data is not None else {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view used by the API error handler."""
        return {"detail": self.message, "data": self.data}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, message={self.message!r}, data={self.data!r})"


class NotFoundError(PersistenceError):
    """No record exists at the requested ID."""
    status = 404
    default_message = "Resource not found"


class InvalidDataError(PersistenceError):
    """A candidate record failed the validation policy."""
    status = 400
    default_message = "Invalid data"
