"""Shared fixtures: real ``requests.Response`` objects and a scripted transport."""

import json

import pytest
import requests

from fitbit_api.clients.base import BaseClient
from fitbit_api.clients.fitbit import FitbitClient


def build_response(status=200, payload=None, body=None, headers=None, url="https://api.fitbit.com/"):
    """Build a ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.encoding = "utf-8"

    if body is not None:
        response._content = body.encode("utf-8")
    elif payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
    else:
        response._content = b""

    response.headers.update(headers or {"Content-Type": "application/json"})
    return response


def error_payload(error_type, message="error"):
    return {"success": False, "errors": [{"errorType": error_type, "message": message}]}


class FakeTransport(BaseClient):
    """Transport answering from scripted responses, recording every call.

    Each URL has a queue of responses; the last one is repeated once the
    queue is down to a single entry.
    """

    def __init__(self):
        super().__init__()
        self.routes = {}
        self.calls = []

    def add(self, url, *responses):
        self.routes.setdefault(url, []).extend(responses)

    def _respond(self, method, url, data=None, headers=None):
        self.calls.append({
            "method": method,
            "url": url,
            "data": data,
            "headers": headers,
            "authorization": self.default_headers.get("Authorization"),
        })
        queue = self.routes[url]
        return queue.pop(0) if len(queue) > 1 else queue[0]

    def get(self, url, headers=None):
        return self._respond("GET", url, headers=headers)

    def post(self, url, data=None, headers=None):
        return self._respond("POST", url, data=data, headers=headers)

    def delete(self, url, headers=None):
        return self._respond("DELETE", url, headers=headers)


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def make_error():
    return error_payload


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    """FitbitClient wired to the fake transport, no token refresh."""
    return FitbitClient("initial-token", http=transport)
