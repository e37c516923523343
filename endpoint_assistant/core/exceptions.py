"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Transport failures (httpx.TransportError) and JSON decode errors are not
wrapped; they propagate from httpx and the json module unchanged.
"""


class EndpointsError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(EndpointsError):
    """Raised when one or more required settings are missing."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(
            f"Missing required environment variables: {', '.join(self.errors)}",
            code="CFG_MISSING_SETTINGS",
        )


class APIError(EndpointsError):
    """Raised when the API answers with a status outside 200-299."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}", code="HTTP_ERROR")


class DownloadError(EndpointsError):
    """Raised when fetching a file from its presigned URL fails."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(
            f"Failed to download file: HTTP {status_code}",
            code="FILE_DOWNLOAD_FAILED",
        )


class UsageError(EndpointsError):
    """Raised when local input (arguments, JSON, files) is unusable."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CLI_USAGE_ERROR")
