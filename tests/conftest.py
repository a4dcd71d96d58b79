import json
import sys, pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parent.parent))

import pytest
import requests

from state import CLIState


class FakeResponse:
    def __init__(self, status_code, body=b""):
        self.status_code = status_code
        self._body = body
        self.closed = False

    def iter_content(self, chunk_size=1):
        for start in range(0, len(self._body), chunk_size):
            yield self._body[start : start + chunk_size]

    def close(self):
        self.closed = True


class FakeAPI:
    """Stands in for requests.request and replays queued responses."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def queue(self, status_code, body=b""):
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            body = body.encode("utf-8")
        self.responses.append(FakeResponse(status_code, body))
        return self

    def fail_with(self, exc):
        self.responses.append(exc)
        return self

    def __call__(self, method, url, headers=None, data=None, timeout=None, stream=False):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": headers or {},
                "json": json.loads(data) if data is not None else None,
                "timeout": timeout,
            }
        )
        if not self.responses:
            raise AssertionError(f"unexpected request: {method} {url}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def methods(self):
        return [call["method"] for call in self.calls]


@pytest.fixture(autouse=True)
def _debug_off(monkeypatch):
    """Keep a --debug run from leaking DEBUG lines into later tests."""
    from utils import core

    monkeypatch.setattr(core, "DEBUG", False)


@pytest.fixture
def fake_api(monkeypatch):
    api = FakeAPI()
    monkeypatch.setattr(requests, "request", api)
    return api


@pytest.fixture
def state():
    return CLIState(base_url="https://cards.test/", token="secret-token", card_id="42")


@pytest.fixture
def quiet_state():
    return CLIState(base_url="https://cards.test", token="secret-token", card_id="42", quiet=True)


@pytest.fixture
def jpg_image(tmp_path):
    path = tmp_path / "face.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")
    return path
