"""Tests for DepositClient against a mocked transport."""

from __future__ import annotations

import asyncio

import pytest

from minemap.catalog.client import BackingStoreError, DepositClient


def _run(backend, base_url, fn):
    async def _inner():
        async with DepositClient(base_url, transport=backend.transport()) as client:
            return await fn(client)
    return asyncio.run(_inner())


@pytest.mark.unit
class TestDepositClient:

    def test_list(self, backend, base_url):
        deposits = _run(backend, base_url, lambda c: c.list_deposits())
        assert [d.id for d in deposits] == [1, 2, 3, 4, 5, 6]
        assert deposits[1].company_name == "BHP"

    def test_create_strips_id(self, backend, base_url, sample):
        payload = {**sample[0].to_payload(), "id": 123}
        created = _run(backend, base_url, lambda c: c.create_deposit(payload))
        assert created.id == 7
        method, path, body = backend.requests[-1]
        assert method == "POST"
        assert path == "/api/deposits"
        assert "id" not in body

    def test_update_sends_put(self, backend, base_url):
        updated = _run(backend, base_url, lambda c: c.update_deposit(2, {"latitude": -25.0}))
        assert updated.id == 2
        assert updated.latitude == -25.0
        assert backend.requests[-1] == ("PUT", "/api/deposits/2", {"latitude": -25.0})

    def test_delete(self, backend, base_url):
        _run(backend, base_url, lambda c: c.delete_deposit(3))
        assert 3 not in backend.rows
        assert backend.requests[-1][:2] == ("DELETE", "/api/deposits/3")

    def test_http_error_status(self, backend, base_url):
        backend.fail_status = 500
        with pytest.raises(BackingStoreError) as exc:
            _run(backend, base_url, lambda c: c.list_deposits())
        assert exc.value.status_code == 500

    def test_not_found(self, backend, base_url):
        with pytest.raises(BackingStoreError) as exc:
            _run(backend, base_url, lambda c: c.delete_deposit(99))
        assert exc.value.status_code == 404

    def test_transport_error(self, backend, base_url):
        backend.fail_transport = True
        with pytest.raises(BackingStoreError) as exc:
            _run(backend, base_url, lambda c: c.list_deposits())
        assert exc.value.status_code is None

    @pytest.mark.parametrize("body", [
        b"<html>proxy error</html>",
        b'[{"id": 1}]',
        b'{"detail": "ok"}',
    ])
    def test_malformed_list_body(self, backend, base_url, body):
        backend.bad_body = body
        with pytest.raises(BackingStoreError) as exc:
            _run(backend, base_url, lambda c: c.list_deposits())
        assert exc.value.status_code is None

    def test_malformed_create_body(self, backend, base_url, sample):
        backend.bad_body = b"not json"
        with pytest.raises(BackingStoreError):
            _run(backend, base_url, lambda c: c.create_deposit(sample[0].to_payload()))

    def test_requires_context_manager(self, base_url):
        client = DepositClient(base_url)
        with pytest.raises(RuntimeError):
            asyncio.run(client.list_deposits())

    def test_trailing_slash_trimmed(self):
        assert DepositClient("http://x/api/deposits/").base_url == "http://x/api/deposits"

    def test_from_settings(self):
        from minemap.config import settings
        client = DepositClient.from_settings()
        assert client.base_url == settings.api_base_url.rstrip("/")
        assert client.timeout == settings.request_timeout
