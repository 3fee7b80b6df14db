"""Domain errors mapped to HTTP status codes by the API layer."""


class PortfolioError(Exception):
    """Base error carrying a user-facing message and an HTTP status."""

    status_code = 500

    def __init__(
        self, message: str, details: dict[str, object] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(PortfolioError):
    """Missing or malformed input."""

    status_code = 400


class AuthenticationError(PortfolioError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class ForbiddenOperationError(PortfolioError):
    """Operation refused by a policy guard."""

    status_code = 403


class NotFoundError(PortfolioError):
    """No record for the requested id."""

    status_code = 404


class ConflictError(PortfolioError):
    """Operation clashes with existing data."""

    status_code = 409
