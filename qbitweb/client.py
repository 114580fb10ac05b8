"""qBittorrent WebUI API client with async httpx."""

from typing import Optional

import httpx

from .errors import AuthenticationError, TransportError
from .torrents.assembler import RequestPayload
from .torrents.descriptor import AddDescriptor
from .torrents.orchestrator import add_torrents
from .utils.logger import logger
from .utils.config import settings


LOGIN_ENDPOINT = "/api/v2/auth/login"


class QbitApi:
    """Async client for the qBittorrent WebUI API v2."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize qBittorrent client.

        Args:
            base_url: WebUI address, e.g. http://localhost:8080 (uses settings if not provided)
            username: WebUI username (uses settings if not provided)
            password: WebUI password (uses settings if not provided)
            transport: Custom httpx transport, mostly useful in tests
        """
        self.base_url = (base_url or settings.qbittorrent_url).rstrip("/")
        self.username = username or settings.qbittorrent_username
        self.password = password or settings.qbittorrent_password
        self._sid: Optional[str] = None
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout),
            limits=httpx.Limits(max_connections=settings.max_connections),
            transport=transport,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def get_cookie(self) -> str:
        """
        Return the SID session cookie, logging in if there is none yet.

        The SID is cached for the life of the client and is not refreshed
        when qBittorrent expires the session; adds then fail with
        NetworkError(403). Call forget_cookie() to log in again on the
        next request.

        Raises:
            AuthenticationError: If qBittorrent rejects the credentials
            TransportError: If the login request cannot be sent
        """
        if self._sid is not None:
            return self._sid

        logger.info(f"Logging in to qBittorrent at {self.base_url}")
        try:
            response = await self.client.post(
                f"{self.base_url}{LOGIN_ENDPOINT}",
                data={"username": self.username, "password": self.password},
            )
        except httpx.HTTPError as e:
            raise TransportError(f"qBittorrent login request failed: {e}") from e

        if not response.is_success or response.text.strip() != "Ok.":
            raise AuthenticationError(
                f"qBittorrent login failed ({response.status_code}): {response.text.strip()}"
            )

        sid = response.cookies.get("SID")
        if not sid:
            raise AuthenticationError("qBittorrent login response carried no SID cookie")

        # The SID is sent explicitly on every request
        self.client.cookies.clear()
        self._sid = sid
        return sid

    def forget_cookie(self) -> None:
        """Drop the cached SID so the next request logs in again."""
        self._sid = None

    async def send(self, endpoint: str, payload: RequestPayload, cookie: str) -> httpx.Response:
        """
        POST a multipart payload.

        Args:
            endpoint: API path, e.g. /api/v2/torrents/add
            payload: Rendered request payload
            cookie: SID session cookie

        Returns:
            The response, whatever its status

        Raises:
            TransportError: If no response was received
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"POST {url} ({len(payload.fields)} fields, {len(payload.files)} files)")
        try:
            return await self.client.post(
                url,
                files=payload.to_multipart(),
                headers={"Cookie": f"SID={cookie}"},
            )
        except httpx.HTTPError as e:
            raise TransportError(f"POST {url} failed: {e}") from e

    async def torrents_add_torrent(self, descriptor: AddDescriptor) -> None:
        """
        Add one or more torrents.

        Args:
            descriptor: Torrents to add and the options to add them with

        Raises:
            QbitError: Subclass describing why the add failed
        """
        await add_torrents(self, descriptor)
