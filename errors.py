# Error taxonomy for the page loading pipeline
import enum


class ErrorKind(enum.Enum):
    INVALID_URL = "invalid_url"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DIRECTORY_UNAVAILABLE = "directory_unavailable"


class PageLoaderError(Exception):
    """
    Base class for every classified pipeline failure.

    `kind` is the discriminant; the remaining attributes are the payload of
    that kind (unused fields stay None). Unclassified filesystem errors are
    not wrapped and propagate as plain OSError.
    """
    kind = None

    def __init__(self, message, url=None, cause=None):
        super().__init__(message)
        self.url = url
        self.cause = cause


class InvalidUrlError(PageLoaderError):
    kind = ErrorKind.INVALID_URL

    def __init__(self, url, cause=None):
        super().__init__(f"Invalid URL: {url}", url=url, cause=cause)


class TransportError(PageLoaderError):
    """Connection-level failure (refused, DNS, timeout, reset)."""
    kind = ErrorKind.TRANSPORT

    def __init__(self, message, url, code, cause=None):
        super().__init__(message, url=url, cause=cause)
        self.code = code


class HttpStatusError(PageLoaderError):
    """The server answered with a non-success status."""
    kind = ErrorKind.HTTP_STATUS

    def __init__(self, message, url, status, cause=None):
        super().__init__(message, url=url, cause=cause)
        self.status = status


class DirectoryUnavailableError(PageLoaderError):
    kind = ErrorKind.DIRECTORY_UNAVAILABLE

    def __init__(self, directory, cause=None):
        super().__init__(f"Directory: {directory} not exists or has no access", cause=cause)
        self.directory = directory
