# marketplace/client.py
"""
Async HTTP client for the marketplace API.

The bearer token and the logged-in user live only on the client instance for
the lifetime of the session; nothing is written to disk.
"""
import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class MarketplaceClient:
    """
    Usage:
        async with MarketplaceClient("http://localhost:3000") as api:
            await api.login("alice", "pass1")
            await api.add_favorite("t1")
            favs = await api.list_favorites()
    """

    def __init__(self, base_url: str, transport: httpx.AsyncBaseTransport | None = None, timeout: float = 10.0):
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        self.token: str | None = None
        self.user: dict | None = None
        self.favorites: list[dict] = []

    async def __aenter__(self) -> "MarketplaceClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Token {self.token}"} if self.token else {}

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        resp = await self._http.request(method, url, headers=self._auth_headers(), **kwargs)
        if resp.is_error:
            try:
                message = resp.json().get("message", resp.text)
            except ValueError:
                message = resp.text
            raise ApiError(resp.status_code, message)
        return resp.json()

    # ----- accounts -----
    async def register(self, username: str, password: str) -> dict:
        return await self._request("POST", "/register", json={"username": username, "password": password})

    async def login(self, username: str, password: str) -> dict:
        data = await self._request("POST", "/login", json={"username": username, "password": password})
        self.token = data["token"]
        self.user = data["user"]
        return data

    async def logout(self) -> None:
        """Ask the server to revoke the token, then forget it locally whatever the outcome."""
        if self.token:
            try:
                await self._request("POST", "/logout")
            except (httpx.HTTPError, ApiError) as exc:
                logger.debug("logout request failed: %s", exc)
        self.token = None
        self.user = None
        self.favorites = []

    # ----- catalog -----
    async def list_templates(self) -> list[dict]:
        return await self._request("GET", "/api/templates")

    async def get_template(self, template_id: str) -> dict:
        return await self._request("GET", f"/api/templates/{template_id}")

    # ----- favorites -----
    async def add_favorite(self, template_id: str) -> dict:
        return await self._request("POST", f"/api/favorites/{template_id}")

    async def list_favorites(self) -> list[dict]:
        self.favorites = await self._request("GET", "/api/favorites")
        return self.favorites

    async def refresh_favorites(self) -> list[dict]:
        """
        Best-effort reload of the favorites list. Failures are logged and the
        last known list is returned unchanged.
        """
        try:
            return await self.list_favorites()
        except (httpx.HTTPError, ApiError) as exc:
            logger.debug("favorites refresh failed: %s", exc)
            return self.favorites
