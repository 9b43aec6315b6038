import socket
import threading

import pytest


class Receiver:
    """Loopback TCP listener that records everything one client sends."""

    def __init__(self):
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.sock.bind(("127.0.0.1", 0))
        self.sock.listen(1)
        self.port = self.sock.getsockname()[1]
        self.data = b""
        self.connections = 0
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    def _serve(self):
        conn, _ = self.sock.accept()
        self.connections += 1
        chunks = []
        with conn:
            while True:
                chunk = conn.recv(65536)
                if not chunk:
                    break
                chunks.append(chunk)
        self.data = b"".join(chunks)

    def wait(self, timeout=5.0):
        self._thread.join(timeout)
        assert not self._thread.is_alive(), "receiver never saw the connection close"
        return self.data

    def close(self):
        self.sock.close()


@pytest.fixture
def receiver():
    r = Receiver()
    yield r
    r.close()


@pytest.fixture
def make_receiver():
    """Factory for extra receivers; all are closed at teardown."""
    made = []

    def factory():
        r = Receiver()
        made.append(r)
        return r

    yield factory
    for r in made:
        r.close()


@pytest.fixture
def closed_port():
    """A loopback port with nothing listening on it."""
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.bind(("127.0.0.1", 0))
    port = s.getsockname()[1]
    s.close()
    return port


class FakeSocket:
    """Stands in for a connected socket; fails the Nth sendall if asked."""

    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.writes = []
        self.closed = False

    def sendall(self, data):
        if self.fail_on is not None and len(self.writes) + 1 == self.fail_on:
            raise BrokenPipeError("peer went away")
        self.writes.append(bytes(data))

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


@pytest.fixture
def fake_dial(monkeypatch):
    """Patch socket.create_connection; returns a dict describing the calls."""
    state = {"calls": [], "socket": FakeSocket(), "error": None}

    def create_connection(target, *args, **kwargs):
        state["calls"].append((target, args, kwargs))
        if state["error"] is not None:
            raise state["error"]
        return state["socket"]

    monkeypatch.setattr(socket, "create_connection", create_connection)
    return state


@pytest.fixture
def fake_socket():
    """Factory for fake sockets, optionally failing the Nth write."""
    return FakeSocket
