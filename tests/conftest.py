"""Shared fixtures for the pez test suite.

The network is never touched: `fake_http` replaces `requests.Session.get`
with a function that serves canned responses registered per URL.
"""

import io
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest
import requests

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


SAMPLE_HTML = b"<a><b>hello</b><b>world</b></a>"


class FakeResponse:
    """Minimal stand-in for a streamed requests.Response."""

    def __init__(self, chunks: List[bytes], status_code: int = 200,
                 error: Optional[Exception] = None):
        self.chunks = chunks
        self.status_code = status_code
        self.error = error
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def iter_content(self, chunk_size=1):
        for chunk in self.chunks:
            yield chunk
        if self.error is not None:
            raise self.error


class FakeHttp:
    """Registry of canned responses keyed by URL."""

    def __init__(self):
        self.responses: Dict[str, FakeResponse] = {}
        self.requests: List[dict] = []

    def add(self, url: str, body: bytes = b"", status_code: int = 200,
            chunks: Optional[List[bytes]] = None, error: Optional[Exception] = None) -> FakeResponse:
        response = FakeResponse(chunks if chunks is not None else [body],
                                status_code=status_code, error=error)
        self.responses[url] = response
        return response

    def get(self, url, **kwargs):
        self.requests.append({"url": url, **kwargs})
        if url not in self.responses:
            raise requests.ConnectionError(f"Failed to resolve {url}")
        return self.responses[url]


@pytest.fixture
def fake_http(monkeypatch):
    """Serve registered URLs; any other URL fails to connect."""
    http = FakeHttp()
    monkeypatch.setattr(requests.Session, "get", http.get)
    return http


@pytest.fixture
def html_file(tmp_path):
    """Factory writing HTML bytes to a temporary file and returning its path."""
    def _write(data: bytes = SAMPLE_HTML, name: str = "page.html") -> str:
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)
    return _write


@pytest.fixture
def set_stdin(monkeypatch):
    """Replace sys.stdin with a text wrapper around the given bytes."""
    def _set(data: bytes):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    return _set
