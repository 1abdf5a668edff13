"""
Use case for issuing arbitrary calls to the backend API.
"""

import logging
from typing import Any, Optional

from webterm.config.settings import settings
from webterm.exceptions import TransportError
from webterm.ports.transport.transport_port import TransportPort


class CallBackendUseCase:
    """POST a JSON body to an /api endpoint.

    Unlike interactive commands, failures are propagated to the caller.
    Authentication is carried by the transport.
    """

    def __init__(
        self,
        transport: TransportPort,
        api_prefix: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._transport = transport
        self._api_prefix = (api_prefix or settings.api_prefix).rstrip("/")
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, endpoint: str, data: Any = None) -> Any:
        """
        Call an endpoint.

        Args:
            endpoint: Endpoint name relative to the API prefix (e.g. "reports/run")
            data: JSON-serializable body

        Returns:
            The decoded JSON answer

        Raises:
            TransportError: If the call fails
        """
        path = f"{self._api_prefix}/{endpoint.lstrip('/')}"
        try:
            self._logger.info(f"Calling backend endpoint: {path}")
            return await self._transport.post_json(path, data)
        except TransportError as e:
            self._logger.error(f"Backend call to {path} failed: {e}")
            raise
