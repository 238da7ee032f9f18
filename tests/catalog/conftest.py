"""Shared fixtures for catalog tests.

Provides an in-memory backing store served through httpx.MockTransport, so
DepositClient and CatalogSession run their real HTTP code paths without a
server.
"""

from __future__ import annotations

import json

import httpx
import pytest

from minemap.catalog.models import SAMPLE_DEPOSITS

BASE_URL = "http://backing.test/api/deposits"


class FakeBackend:
    """Deposits collection kept in a dict, with switchable failures."""

    def __init__(self, rows=None):
        self.rows: dict[int, dict] = {}
        for row in rows or []:
            self.rows[row["id"]] = dict(row)
        self.next_id = max(self.rows, default=0) + 1
        self.fail_status: int | None = None
        self.fail_transport = False
        self.bad_body: bytes | None = None
        self.requests: list[tuple[str, str, dict | None]] = []

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        self.requests.append((request.method, request.url.path, body))

        if self.fail_transport:
            raise httpx.ConnectError("connection refused", request=request)
        if self.fail_status is not None:
            return httpx.Response(self.fail_status, json={"error": "boom"})
        if self.bad_body is not None:
            return httpx.Response(200, content=self.bad_body)

        parts = request.url.path.rstrip("/").split("/")
        deposit_id = int(parts[-1]) if parts[-1].isdigit() else None

        if request.method == "GET" and deposit_id is None:
            return httpx.Response(200, json=[self.rows[k] for k in sorted(self.rows)])
        if request.method == "POST":
            row = {"id": self.next_id, **body, "created_at": "2024-01-01T00:00:00"}
            self.rows[self.next_id] = row
            self.next_id += 1
            return httpx.Response(200, json=row)
        if deposit_id not in self.rows:
            return httpx.Response(404, json={"detail": "Deposit not found"})
        if request.method == "PUT":
            self.rows[deposit_id].update(body)
            return httpx.Response(200, json=self.rows[deposit_id])
        if request.method == "DELETE":
            del self.rows[deposit_id]
            return httpx.Response(200, json={"success": True})
        return httpx.Response(405)


@pytest.fixture
def backend():
    """Fake backing store pre-loaded with the six sample deposits."""
    return FakeBackend([d.to_dict() for d in SAMPLE_DEPOSITS])


@pytest.fixture
def sample():
    return list(SAMPLE_DEPOSITS)


@pytest.fixture
def base_url():
    return BASE_URL
