import io
import os
import sys
import logging
import threading
import pytest
import requests

# Ensure the project root is in the Python path for imports in tests
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


def make_response(status_code=200, body=b"", url=None):
    """Builds a real requests.Response whose body can be read or streamed once."""
    response = requests.Response()
    response.status_code = status_code
    response.raw = io.BytesIO(body)
    response.url = url
    response.encoding = 'utf-8'
    response.reason = "OK" if status_code < 400 else "Error"
    return response


class FakeTransport:
    """Stands in for requests.get: routes URLs to canned responses and records every call."""

    def __init__(self):
        self.routes = {}
        self.calls = []
        self._lock = threading.Lock()

    def add(self, url, body=b"", status_code=200, error=None):
        self.routes[url] = (body, status_code, error)

    def count(self, url):
        return sum(1 for called_url, _ in self.calls if called_url == url)

    def __call__(self, url, **kwargs):
        with self._lock:
            self.calls.append((url, kwargs))
        body, status_code, error = self.routes.get(url, (b"", 404, None))
        if error is not None:
            raise error
        return make_response(status_code, body, url)


@pytest.fixture
def fake_transport(monkeypatch):
    """Replaces the HTTP transport used by fetchers.page_client."""
    transport = FakeTransport()
    monkeypatch.setattr("fetchers.page_client.requests.get", transport)
    return transport


@pytest.fixture(autouse=True)
def configure_logging(caplog):
    """Ensure logging is configured to capture DEBUG level messages for all tests."""
    caplog.set_level(logging.DEBUG, logger="root") # Set root logger level


@pytest.fixture
def response_factory():
    return make_response
