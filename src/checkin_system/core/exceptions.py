class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class ConfigurationError(DomainError):
    """Raised at startup when required settings are missing."""


class RequestFailed(DomainError):
    """Raised by the remote API client for any failed request."""

    def __init__(self, message: str = "Request failed."):
        super().__init__(message)


class MissingCredentials(ValidationError):
    def __init__(self, message: str = "Email and password are required."):
        super().__init__(message)


class InvalidCredentials(AuthenticationError):
    def __init__(self, message: str = "Invalid credentials."):
        super().__init__(message)


class DemoUnavailable(AuthenticationError):
    def __init__(self, message: str = "Demo user unavailable."):
        super().__init__(message)


class MissingCode(ValidationError):
    def __init__(self, message: str = "QR code is required."):
        super().__init__(message)


class InvalidCode(ValidationError):
    def __init__(self, message: str = "Invalid QR code."):
        super().__init__(message)


class AlreadyCompleted(ValidationError):
    def __init__(self, message: str = "Already completed for today."):
        super().__init__(message)
