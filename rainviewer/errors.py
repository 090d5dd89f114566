"""Error types raised by the RainViewer client."""


class RainViewerError(Exception):
    """Base class for every error raised by this package."""


class TransportError(RainViewerError):
    """Raised when a request never produced an HTTP response."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class UnexpectedStatus(RainViewerError):
    """Raised when the service answers with a non-success status code."""

    def __init__(self, status_code: int, url: str):
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class DecodeError(RainViewerError):
    """Raised when the discovery document is not JSON or has the wrong shape."""


class ParameterError(RainViewerError, ValueError):
    """Raised when tile request arguments are out of range."""


class InvalidCoordinate(ParameterError):
    def __init__(self, field: str, value: object, message: str):
        super().__init__(f"Invalid {field}={value}: {message}")
        self.field = field
        self.value = value


class InvalidSize(ParameterError):
    def __init__(self, value: int):
        super().__init__(f"Image size must be either 256 or 512, got {value}")
        self.value = value
