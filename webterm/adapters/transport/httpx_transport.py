"""
HTTP transport adapter built on httpx.
"""

import logging
from typing import Any, Mapping, Optional

import httpx
from typing_extensions import override

from webterm.config.settings import settings
from webterm.exceptions import TransportError
from webterm.ports.transport.transport_port import TransportPort


class HttpxTransport(TransportPort):
    """httpx implementation of the transport port."""

    def __init__(
        self,
        base_url: str | None = None,
        api_token: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the transport.

        Args:
            base_url: Backend base URL (defaults to settings)
            api_token: Bearer token added to every request (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
            client: Preconfigured client, mostly for tests
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self.base_url: str = base_url or settings.backend_url
        self.api_token: str | None = api_token or settings.api_token
        self.timeout: float = timeout if timeout is not None else settings.timeout
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

        headers = {"Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"

        self._owns_client = client is None
        # Reused across requests
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, headers=headers
        )

    @override
    async def get_json(
        self, path: str, params: Optional[Mapping[str, str]] = None
    ) -> Any:
        return await self._request("GET", path, params=params)

    @override
    async def post_json(self, path: str, payload: Any = None) -> Any:
        return await self._request("POST", path, json=payload)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        self._logger.debug(f"{method} {path}")
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            self._logger.warning(f"{method} {path} failed: {e}")
            raise TransportError.from_status(
                0, f"Http failure response for {path}: 0 Unknown Error", path
            ) from e

        if not response.is_success:
            self._logger.warning(f"{method} {path} answered {response.status_code}")
            raise TransportError.from_status(
                response.status_code,
                f"Http failure response for {path}: "
                f"{response.status_code} {response.reason_phrase}",
                path,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise TransportError.from_status(
                response.status_code,
                f"Http failure during parsing for {path}",
                path,
            ) from e

    @override
    async def aclose(self) -> None:
        # An injected client belongs to the caller
        if self._owns_client:
            await self._client.aclose()
