# Module for fetching pages and assets over HTTP

import requests
import logging
from urllib.parse import urlparse
import constants # Import constants
import file_handler
from errors import InvalidUrlError
from .decorators import translate_request_errors # Import the decorator

logger = logging.getLogger(__name__)


def validate_url(url):
    """
    Parses a page or asset URL without touching the network.
    Returns the parsed URL or raises InvalidUrlError.
    """
    if not isinstance(url, str) or not url:
        raise InvalidUrlError(url)
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError as e: # e.g. unbalanced IPv6 brackets
        raise InvalidUrlError(url, cause=e) from e
    if parsed.scheme not in constants.SUPPORTED_SCHEMES or not hostname:
        raise InvalidUrlError(url)
    return parsed


def _request_options(config):
    config = config or {}
    user_agent = config.get('user_agent', constants.DEFAULT_USER_AGENT)
    headers = {'User-Agent': user_agent} if user_agent else None
    timeout = config.get('request_timeout_seconds', constants.DEFAULT_REQUEST_TIMEOUT)
    return headers, timeout


# --- Page Fetching ---
@translate_request_errors(scope="page")
def fetch_page(url, config=None):
    """
    Fetches the page with a single GET and returns the raw body as bytes.
    Raises InvalidUrlError, HttpStatusError or TransportError.
    """
    validate_url(url)
    headers, timeout = _request_options(config)

    logger.debug(f"Starting loading page from {url}")
    response = requests.get(url, headers=headers, timeout=timeout)
    try:
        response.raise_for_status() # Decorator turns this into HttpStatusError
        content = response.content
    finally:
        # Ensure the response is always closed
        response.close()

    logger.debug(f"Fetched {len(content)} bytes from {url}")
    return content


# --- Asset Fetching ---
@translate_request_errors(scope="asset")
def download_asset(url, destination, config=None):
    """
    Streams the asset body straight into `destination`.
    Returns the destination path. Filesystem errors propagate unchanged.
    """
    validate_url(url)
    headers, timeout = _request_options(config)
    chunk_size = (config or {}).get('chunk_size', constants.DEFAULT_CHUNK_SIZE)

    logger.debug(f"Loading asset {url} to {destination}")
    response = requests.get(url, headers=headers, timeout=timeout, stream=True)
    try:
        response.raise_for_status()
        written = file_handler.save_asset(response.iter_content(chunk_size=chunk_size), destination)
    finally:
        response.close()

    logger.debug(f"Successfully loaded asset {url} ({written} bytes)")
    return destination
