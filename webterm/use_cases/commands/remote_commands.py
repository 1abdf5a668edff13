"""
Command handlers backed by the remote service.

Failure policy differs per command: ping and system-info fall back silently to
synthetic output, api-test reports the failure, lista shows a fallback listing
under a diagnostic banner.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from webterm.config.settings import settings
from webterm.entities.remote_payloads import (
    EntitiesPayload,
    HealthPayload,
    PingPayload,
    SystemInfoPayload,
)
from webterm.exceptions import TransportError
from webterm.ports.transport.transport_port import TransportPort

DEFAULT_PING_HOST = "google.com"

FALLBACK_ENTITIES = (
    "articoli",
    "cataloghi",
    "cataloghidettagli",
    "presenze",
    "utenti",
    "actor",
    "politicaprezzi",
    "sales",
    "keycassa",
    "categorie",
    "articolisoloimmagini",
    "movimenticassa",
    "baseoraria",
)

BACKEND_ERROR_BANNER = (
    "❌ ERRORE: Impossibile connettersi al backend\n"
    "📡 Motivo: Timeout o server non raggiungibile\n"
    "💡 Soluzione: Verifica che il backend sia in esecuzione\n\n"
    "📋 Mostro entità locali di fallback:\n\n"
)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def synthetic_ping(host: str) -> str:
    return (
        f"PING {host} (142.250.184.206) 56(84) bytes of data.\n"
        f"64 bytes from {host}: icmp_seq=1 ttl=117 time=15.4 ms\n"
        f"64 bytes from {host}: icmp_seq=2 ttl=117 time=14.8 ms\n"
        f"64 bytes from {host}: icmp_seq=3 ttl=117 time=15.2 ms\n"
        f"\n"
        f"--- {host} ping statistics ---\n"
        f"3 packets transmitted, 3 received, 0% packet loss, time 2002ms\n"
        f"rtt min/avg/max/mdev = 14.897/15.198/15.498/0.312 ms"
    )


def synthetic_system_info(hostname: str) -> str:
    return SystemInfoPayload(
        os="Linux Ubuntu 22.04 LTS",
        hostname=hostname,
        kernel="5.15.0-86-generic",
        uptime="2 giorni, 4 ore, 32 minuti",
        memory="3.2G / 7.8G (41%)",
    ).render()


def format_entities(entities: Sequence[str]) -> str:
    """Render entity names sorted, each followed by its [utilizza:<name>] control."""
    if not entities:
        return "📭 Nessuna entità disponibile"

    ordered = sorted(entities)
    output = "📋 Entità disponibili:\n\n"
    for entity in ordered:
        output += f"   {entity} [utilizza:{entity}]\n"
    output += f"\n📊 Totale: {len(ordered)} entità"
    return output


def fallback_entities() -> str:
    return BACKEND_ERROR_BANNER + format_entities(FALLBACK_ENTITIES)


class RemoteCommands:
    """Handlers for ping, system-info, api-test and lista."""

    def __init__(
        self,
        transport: TransportPort,
        hostname: str,
        api_prefix: Optional[str] = None,
        entities_path: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the handlers.

        Args:
            transport: Transport used for every backend call
            hostname: Session host name, used by the synthetic system info
            api_prefix: Prefix of the /api endpoints (defaults to settings)
            entities_path: Path of the entity listing (defaults to settings)
            logger: Logger instance to use for logging
        """
        self._transport = transport
        self._hostname = hostname
        self._api_prefix = (api_prefix or settings.api_prefix).rstrip("/")
        self._entities_path = entities_path or settings.entities_path
        self._logger = logger or logging.getLogger(__name__)

    async def _fetch(
        self,
        path: str,
        model: Type[PayloadT],
        params: Optional[Mapping[str, str]] = None,
    ) -> PayloadT:
        """GET a payload; an unreadable body is reported as a TransportError."""
        body = await self._transport.get_json(path, params=params)
        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise TransportError.from_status(
                200, f"Http failure during parsing for {path}", path
            ) from e

    async def ping(self, args: Sequence[str]) -> str:
        host = args[0] if args else DEFAULT_PING_HOST
        try:
            payload = await self._fetch(
                f"{self._api_prefix}/ping", PingPayload, params={"host": host}
            )
        except TransportError as e:
            self._logger.warning(f"ping falling back to synthetic output: {e}")
            return synthetic_ping(host)
        return payload.message

    async def system_info(self, args: Sequence[str]) -> str:
        try:
            payload = await self._fetch(
                f"{self._api_prefix}/system-info", SystemInfoPayload
            )
        except TransportError as e:
            self._logger.warning(f"system-info falling back to synthetic output: {e}")
            return synthetic_system_info(self._hostname)
        return payload.render()

    async def api_test(self, args: Sequence[str]) -> str:
        try:
            payload = await self._fetch(f"{self._api_prefix}/health", HealthPayload)
        except TransportError as e:
            return f"❌ API Error: {e}\nAssicurati che il backend sia in esecuzione"
        return f"✅ API Connection: {payload.message}\nTimestamp: {payload.timestamp}"

    async def lista(self, args: Sequence[str]) -> str:
        try:
            payload = await self._fetch(self._entities_path, EntitiesPayload)
        except TransportError as e:
            self._logger.error(f"lista failed: {e}")
            return fallback_entities()

        if not payload.success or payload.data is None:
            return "❌ Errore nel recupero delle entità dal backend\n" + fallback_entities()
        return format_entities(payload.data)
