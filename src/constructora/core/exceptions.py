class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when a shared secret, password or session is invalid."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when the caller is authenticated but the action is not allowed."""

    status_code = 403


class NotFoundError(DomainError):
    status_code = 404


class ConflictError(DomainError):
    """Raised on uniqueness violations (same-day attendance, duplicate worker id)."""

    status_code = 409


class RateLimitError(DomainError):
    status_code = 429


class ConfigurationError(DomainError):
    """Raised when a required setting is missing at request time."""

    status_code = 500


class UpstreamError(DomainError):
    """Raised when the generative AI API fails or answers garbage."""

    status_code = 500


class ServiceUnavailableError(DomainError):
    status_code = 503


class UnprocessableError(DomainError):
    """Raised when the upstream answered but not with what was asked for."""

    status_code = 422


class BadUpstreamResponseError(UpstreamError):
    status_code = 502
