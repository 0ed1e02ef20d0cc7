"""Errors raised by the domain and by the backend adapters.

Everything derives from DomainException, which the CLI turns into a
one-line error message.  Backend problems are GatewayErrors; a refused
request (HTTP 403) is the more specific PermissionDeniedError.
"""


from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class GatewayError(DomainException):
    """The backend could not be reached or answered with an error.

    ``status_code`` is None when no HTTP response was received at all.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PermissionDeniedError(GatewayError):
    """The backend refused the request (HTTP 403)."""

    def __init__(self, message: str = "Permission denied") -> None:
        super().__init__(message, status_code=403)
