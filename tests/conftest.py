"""Shared fixtures: reporting service payloads and a mocked transport."""

import copy

import httpx
import pytest

BASE_URL = "http://reporting.test"

SUMMARY = {
    "totalMessages": 100,
    "errorCount": 5,
    "messageCount": 90,
    "warningCount": 5,
    "avgMagnitude": 1.2,
    "uniqueUsers": 10,
}

USERS = [
    {
        "userId": 7,
        "userName": "alice",
        "totalMessages": 42,
        "errors": 3,
        "lastMessage": "2024-01-15T10:30:00Z",
    },
    {
        "userId": 2,
        "userName": "",
        "totalMessages": 0,
        "errors": 0,
        "lastMessage": "2024-01-10T08:00:00",
    },
]

ACTIVITY = [
    {"date": "2024-01-14", "messages": 0, "errors": 0, "warnings": 0},
    {"date": "2024-01-15", "messages": 3, "errors": 0, "warnings": 1},
]

TOP_USERS = [
    {"userId": 7, "userName": "alice", "messageCount": 42},
    {"userId": 9, "userName": "bob", "messageCount": 50},
]


def make_payloads(**overrides):
    """Path -> (status, body) for all four endpoints."""
    routes = {
        "/api/stats/messages/summary": (200, copy.deepcopy(SUMMARY)),
        "/api/stats/messages/by-user": (200, copy.deepcopy(USERS)),
        "/api/stats/messages/by-day": (200, copy.deepcopy(ACTIVITY)),
        "/api/stats/messages/top-users": (200, copy.deepcopy(TOP_USERS)),
    }
    routes.update(overrides)
    return routes


def make_client(routes) -> httpx.AsyncClient:
    """AsyncClient answering from a routes table built by make_payloads."""

    def handler(request: httpx.Request) -> httpx.Response:
        status, body = routes[request.url.path]
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def routes():
    return make_payloads()
