"""
Caller-facing errors raised by the data-access layer.

Each error carries the HTTP status it maps to, so the Flask app can turn
any of them into a response with a single handler.
"""


class JoblyError(Exception):
    """Base class for errors reported back to a client."""

    status = 500

    def __init__(self, message: str = None):
        self.message = message or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": {"message": self.message, "status": self.status}}


class InvalidInput(JoblyError):
    """Bad request: empty update data, an inverted range filter, bad params."""

    status = 400


class NotFound(JoblyError):
    """A keyed get, update or delete matched no row."""

    status = 404


class ConflictAlreadyExists(JoblyError):
    """A create found an existing record with the same natural key."""

    status = 409
