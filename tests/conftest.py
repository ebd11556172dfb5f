"""
Shared fixtures for the test suite.

- A FastAPI stand-in server (mock_server.py) runs in a uvicorn thread for
  the whole session; its recorded requests are cleared before each test.
- Output printed by client.py is captured with a timestamp per line so
  tests can check that streamed lines arrive incrementally.
"""
import socket
import threading
import time

import pytest
import uvicorn

from chat_service_client import client
import mock_server


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture(scope="session")
def live_server():
    port = _free_port()
    config = uvicorn.Config(mock_server.app, host="127.0.0.1", port=port, log_level="warning")
    server = uvicorn.Server(config)
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline:
            raise RuntimeError("mock server did not start")
        time.sleep(0.01)

    yield f"http://127.0.0.1:{port}"

    server.should_exit = True
    thread.join(timeout=5)


@pytest.fixture
def dead_url():
    """A local address with nothing listening on it."""
    return f"http://127.0.0.1:{_free_port()}"


@pytest.fixture(autouse=True)
def reset_mock_server():
    mock_server.RECEIVED.clear()
    mock_server.reset_state()
    yield
    mock_server.reset_state()


@pytest.fixture(autouse=True)
def bypass_proxies(monkeypatch):
    monkeypatch.setenv("NO_PROXY", "127.0.0.1,localhost")
    monkeypatch.setenv("no_proxy", "127.0.0.1,localhost")


@pytest.fixture
def printed(monkeypatch):
    """Capture client.py's print calls as (monotonic time, text) pairs."""
    lines = []

    def record(*args, sep=" ", end="\n", **kwargs):
        lines.append((time.monotonic(), sep.join(str(a) for a in args)))

    monkeypatch.setattr(client, "print", record, raising=False)
    return lines
