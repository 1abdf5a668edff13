"""
Transport port interface defining the contract for backend calls.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class TransportPort(ABC):
    """Port interface for asynchronous calls to the backend service."""

    @abstractmethod
    async def get_json(
        self, path: str, params: Optional[Mapping[str, str]] = None
    ) -> Any:
        """
        Issue a GET request and decode the JSON body.

        Args:
            path: Path relative to the backend base URL (e.g. "/api/health")
            params: Optional query string parameters

        Returns:
            The decoded JSON body

        Raises:
            TransportError: If the call fails; the subclass tells why
        """
        pass

    @abstractmethod
    async def post_json(self, path: str, payload: Any = None) -> Any:
        """
        Issue a POST request with a JSON body and decode the JSON answer.

        Args:
            path: Path relative to the backend base URL
            payload: JSON-serializable body

        Returns:
            The decoded JSON body (None for an empty answer)

        Raises:
            TransportError: If the call fails; the subclass tells why
        """
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """Release the connections held by the transport."""
        pass
