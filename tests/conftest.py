"""
tests/conftest.py

Shared fixtures: a static directory for the API, and a fake requests
session so the frontend never touches the network.
"""

import json
from http import HTTPStatus
from typing import Dict, List, Union

import pytest
import requests
from fastapi.testclient import TestClient

from backend.api import create_app
from backend.config import Settings


INDEX_HTML = "<!DOCTYPE html><html><body><main id='app'>shell</main></body></html>"


def make_response(status: int, body: Union[bytes, str, dict], reason: str = "") -> requests.Response:
    """Build a requests.Response without any I/O."""
    if isinstance(body, dict):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")

    response = requests.Response()
    response.status_code = status
    response.reason = reason or HTTPStatus(status).phrase
    response._content = body
    response.encoding = "utf-8"
    return response


class FakeSession:
    """
    Stands in for requests.Session. Maps a URL path to either a Response
    or an exception to raise.
    """

    def __init__(self, routes: Dict[str, Union[requests.Response, Exception]] = None):
        self.routes = routes or {}
        self.requested: List[str] = []
        self.closed = False

    def get(self, url: str) -> requests.Response:
        self.requested.append(url)
        path = "/" + url.split("://", 1)[-1].split("/", 1)[-1]
        outcome = self.routes.get(path)
        if outcome is None:
            return make_response(404, "not found")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def static_dir(tmp_path):
    (tmp_path / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def api_client(static_dir):
    app = create_app(Settings(static_dir=str(static_dir)))
    return TestClient(app)
