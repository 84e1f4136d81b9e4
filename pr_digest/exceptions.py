"""PR Digest exception classes."""


class PRDigestError(Exception):
    """Base exception for all PR Digest errors."""


class ConfigurationError(PRDigestError):
    """Raised when required environment variables are missing."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required environment variables: {', '.join(self.missing)}")


class TransportError(PRDigestError):
    """Raised when an HTTP exchange could not be completed."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause}")


class DecodeError(PRDigestError):
    """Raised when a response payload is not what the endpoint should return."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        super().__init__(message)
