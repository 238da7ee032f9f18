"""Async client for the deposits REST collection."""

from typing import Optional

import httpx
from loguru import logger

from minemap.catalog.models import Deposit
from minemap.config import settings


class BackingStoreError(Exception):
    """A backing-store call failed (transport error or non-2xx response)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DepositClient:
    """CRUD calls against one deposits collection.

    Use as an async context manager::

        async with DepositClient("http://localhost:8000/api/deposits") as client:
            deposits = await client.list_deposits()
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_settings(cls) -> "DepositClient":
        """Client for the configured collection URL and timeout."""
        return cls(settings.api_base_url, timeout=settings.request_timeout)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _url(self, deposit_id: Optional[int] = None) -> str:
        if deposit_id is None:
            return self.base_url
        return f"{self.base_url}/{deposit_id}"

    async def _request(self, method: str, url: str, payload: Optional[dict] = None) -> httpx.Response:
        """Send one request; any failure becomes BackingStoreError."""
        if not self._client:
            raise RuntimeError("Client not initialized. Use async with.")

        try:
            response = await self._client.request(method, url, json=payload)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            logger.error(f"Backing store rejected {method} {url}: HTTP {e.response.status_code}")
            raise BackingStoreError(
                f"{method} {url} returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Backing store request failed: {method} {url} - {e!r}")
            raise BackingStoreError(f"{method} {url} failed: {e!r}") from e

    def _decode(self, response: httpx.Response, parse):
        """Parse a 2xx body; malformed JSON or rows become BackingStoreError."""
        try:
            return parse(response.json())
        except (ValueError, KeyError, TypeError) as e:
            request = response.request
            logger.error(f"Backing store sent a malformed body for {request.method} {request.url}: {e!r}")
            raise BackingStoreError(f"{request.method} {request.url} returned a malformed body: {e!r}") from e

    async def list_deposits(self) -> list[Deposit]:
        """GET the whole collection."""
        response = await self._request("GET", self._url())
        return self._decode(response, lambda rows: [Deposit.from_dict(row) for row in rows])

    async def create_deposit(self, payload: dict) -> Deposit:
        """POST a new record; returns it with its assigned id."""
        body = {k: v for k, v in payload.items() if k != "id"}
        response = await self._request("POST", self._url(), body)
        return self._decode(response, Deposit.from_dict)

    async def update_deposit(self, deposit_id: int, payload: dict) -> Deposit:
        """PUT a full or partial record; returns the updated row."""
        body = {k: v for k, v in payload.items() if k != "id"}
        response = await self._request("PUT", self._url(deposit_id), body)
        return self._decode(response, Deposit.from_dict)

    async def delete_deposit(self, deposit_id: int) -> None:
        await self._request("DELETE", self._url(deposit_id))
