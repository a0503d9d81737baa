# Decorators for HTTP client functions
import errno
import socket
import logging
import functools
import requests
import constants # Import constants
from errors import InvalidUrlError, TransportError, HttpStatusError

logger = logging.getLogger(__name__)

# Message templates per request scope: (http status message, transport message)
MESSAGES = {
    "page": (
        "Request {url} failed with status {status}",
        "Request {url} failed: {code}",
    ),
    "asset": (
        "Failed to load asset {url}: HTTP {status}",
        "Failed to load asset {url}: {code}",
    ),
}

_INVALID_URL_ERRORS = (
    requests.exceptions.InvalidURL,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.URLRequired,
)


def _iter_causes(exc, max_depth=10):
    """Walks the chain of wrapped exceptions (args, urllib3 `reason`, __cause__, __context__)."""
    seen = set()
    pending = [(exc, 0)]
    while pending:
        current, depth = pending.pop(0)
        if id(current) in seen or depth > max_depth:
            continue
        seen.add(id(current))
        yield current
        linked = [arg for arg in current.args if isinstance(arg, BaseException)]
        linked.append(getattr(current, 'reason', None))
        linked.append(current.__cause__)
        linked.append(current.__context__)
        for nested in linked:
            if isinstance(nested, BaseException):
                pending.append((nested, depth + 1))


def transport_error_code(exc):
    """Derives a stable transport error identifier (e.g. ECONNREFUSED) from a requests exception."""
    if isinstance(exc, requests.exceptions.Timeout):
        return constants.CODE_TIMEOUT
    for cause in _iter_causes(exc):
        if isinstance(cause, socket.gaierror) or type(cause).__name__ == "NameResolutionError":
            return constants.CODE_DNS_FAILURE
        if isinstance(cause, ConnectionRefusedError):
            return constants.CODE_CONNECTION_REFUSED
        if isinstance(cause, ConnectionResetError):
            return constants.CODE_CONNECTION_RESET
        if isinstance(cause, (socket.timeout, TimeoutError)):
            return constants.CODE_TIMEOUT
        if isinstance(cause, OSError) and cause.errno in errno.errorcode:
            return errno.errorcode[cause.errno]
    return constants.CODE_UNKNOWN


def _find_url(args, kwargs):
    url = kwargs.get('url') # Prioritize 'url' kwarg
    if url is None and args:
        url = args[0]
    return url


def translate_request_errors(scope="page"):
    """
    Decorator translating `requests` exceptions raised by the wrapped function
    into the pipeline's error kinds. There is no retry: every failure is final.

    The wrapped function must take the URL as its first argument (or as `url=`).
    Errors already classified (PageLoaderError) and filesystem errors pass through.

    Args:
        scope (str): "page" or "asset"; selects the wording of error messages.
    """
    status_template, transport_template = MESSAGES[scope]

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            url = _find_url(args, kwargs)
            try:
                return func(*args, **kwargs)
            except requests.exceptions.HTTPError as e:
                status = e.response.status_code if e.response is not None else None
                logger.debug(f"HTTP error {status} in {func.__name__} for {url}")
                raise HttpStatusError(status_template.format(url=url, status=status), url=url, status=status, cause=e) from e
            except _INVALID_URL_ERRORS as e:
                logger.debug(f"Transport rejected URL {url}: {e}")
                raise InvalidUrlError(url, cause=e) from e
            except requests.exceptions.RequestException as e:
                code = transport_error_code(e)
                logger.debug(f"{type(e).__name__} ({code}) in {func.__name__} for {url}: {e}")
                raise TransportError(transport_template.format(url=url, code=code), url=url, code=code, cause=e) from e

        return wrapper
    return decorator
