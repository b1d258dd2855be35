"""Domain errors raised by services and translated to HTTP responses."""


class TrustletError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500
    public_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.public_message)
        self.message = message or self.public_message


class Unauthorized(TrustletError):
    """Missing, malformed or rejected bearer credential."""

    status_code = 401
    public_message = "Unauthorized"


class ValidationError(TrustletError):
    """Malformed input; raised before the store is touched."""

    status_code = 400
    public_message = "Invalid request"


class BusinessNotFound(TrustletError):
    status_code = 404
    public_message = "Business not found"


class QuotaExceeded(TrustletError):
    """The owner's plan does not allow collecting another review."""

    status_code = 402
    public_message = "Review limit reached for the current plan"


class StoreError(TrustletError):
    """Persistence failure. The message shown to callers stays generic."""

    status_code = 500
    public_message = "Internal server error"
