"""Shared pytest configuration and fixtures for all tests."""

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from cargo_nav.api.browser.BrowserLauncher import BrowserLauncher
from cargo_nav.api.browser.DispatchError import DispatchError


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no network or browser")
    config.addinivalue_line("markers", "integration: tests that talk to a local stub registry")


# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def nav_home(tmp_path: Path, monkeypatch) -> Path:
    """Point CARGO_NAV_HOME at an empty directory and clear overrides.

    Keeps a developer's own config file and environment out of the tests.
    """
    home = tmp_path / ".cargo-nav"
    monkeypatch.setenv("CARGO_NAV_HOME", str(home))
    for name in ("CARGO_NAV_API_URL", "CARGO_NAV_SITE_URL", "CARGO_NAV_TIMEOUT", "CARGO"):
        monkeypatch.delenv(name, raising=False)
    return home


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def mock_response(status_code: int = 200, body: object = None, raw: bytes | None = None) -> MagicMock:
    """Build a stand-in for ``requests.Response``.

    Args:
        status_code: HTTP status to report
        body: Object serialized to JSON for the body
        raw: Exact body bytes, used instead of ``body`` when given
    """
    content = raw if raw is not None else json.dumps(body).encode("utf-8")
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.text = content.decode("utf-8", errors="replace")
    return response


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    """Pytest fixture exposing run_cmd."""
    return run_cmd


@pytest.fixture(name="mock_response")
def mock_response_fixture():
    """Pytest fixture exposing mock_response."""
    return mock_response


class FakeBrowserLauncher(BrowserLauncher):
    """Records launched URLs instead of opening a browser."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.launched: list[str] = []

    def launch(self, url: str) -> None:
        if self.fail:
            raise DispatchError(url, "browser refused")
        self.launched.append(url)


@pytest.fixture
def fake_launcher() -> FakeBrowserLauncher:
    return FakeBrowserLauncher()


@pytest.fixture
def failing_launcher() -> FakeBrowserLauncher:
    return FakeBrowserLauncher(fail=True)


# =============================================================================
# Stub Registry
# =============================================================================


class _StubRegistryHandler(BaseHTTPRequestHandler):
    def do_GET(self):  # noqa: N802
        registry = self.server.registry  # type: ignore[attr-defined]
        registry.requests.append({"path": self.path, "headers": dict(self.headers)})
        status, body = registry.routes.get(
            self.path,
            (404, json.dumps({"errors": [{"detail": "Not Found"}]})),
        )
        payload = body.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format, *args):  # noqa: A002
        pass


class StubRegistry:
    """Local HTTP server answering ``GET /api/v1/crates/<name>``."""

    def __init__(self):
        self.routes: dict[str, tuple[int, str]] = {}
        self.requests: list[dict] = []
        self._server = ThreadingHTTPServer(("127.0.0.1", 0), _StubRegistryHandler)
        self._server.registry = self  # type: ignore[attr-defined]
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    @property
    def api_url(self) -> str:
        host, port = self._server.server_address[:2]
        return f"http://{host}:{port}/api/v1/crates"

    def add_crate(self, name: str, record: dict | None = None, status: int = 200, body: str | None = None) -> None:
        """Serve ``{"crate": record}`` (or ``body`` verbatim) for ``name``."""
        if body is None:
            body = json.dumps({"crate": record if record is not None else {"name": name}})
        self.routes[f"/api/v1/crates/{name}"] = (status, body)

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._server.shutdown()
        self._server.server_close()
        self._thread.join(timeout=5)


@pytest.fixture
def stub_registry(monkeypatch):
    """A running StubRegistry, shut down after the test."""
    monkeypatch.setenv("NO_PROXY", "127.0.0.1,localhost")
    monkeypatch.setenv("no_proxy", "127.0.0.1,localhost")
    registry = StubRegistry()
    registry.start()
    try:
        yield registry
    finally:
        registry.stop()
