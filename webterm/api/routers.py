"""
FastAPI router definitions.

``backend_router`` serves the endpoints the remote commands call, so the
terminal can run against a local development server. ``terminal_router``
exposes a terminal session over HTTP.
"""

import logging
import platform
import socket
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from fastapi import APIRouter, HTTPException, Query

from webterm.api.dependencies import get_call_backend_uc, get_execute_command_uc
from webterm.api.schemas import (
    BackendCallRequest,
    BackendCallResponse,
    EntitiesPayload,
    ErrorResponse,
    ExecuteRequest,
    ExecuteResponse,
    HealthPayload,
    PingPayload,
    RecallResponse,
    SystemInfoPayload,
    TranscriptResponse,
)
from webterm.exceptions import TransportError
from webterm.use_cases.commands.remote_commands import FALLBACK_ENTITIES

logger = logging.getLogger(__name__)

backend_router = APIRouter()
terminal_router = APIRouter(prefix="/terminal")

UNKNOWN = "sconosciuto"


def _read_uptime() -> str:
    try:
        seconds = int(float(Path("/proc/uptime").read_text().split()[0]))
    except (OSError, ValueError, IndexError):
        return UNKNOWN
    days, rest = divmod(seconds, 86400)
    hours, rest = divmod(rest, 3600)
    return f"{days} giorni, {hours} ore, {rest // 60} minuti"


def _read_memory() -> str:
    try:
        fields = {}
        for line in Path("/proc/meminfo").read_text().splitlines():
            key, _, value = line.partition(":")
            fields[key] = int(value.split()[0])
        total = fields["MemTotal"]
        used = total - fields["MemAvailable"]
    except (OSError, ValueError, KeyError, IndexError):
        return UNKNOWN
    gib = 1024 * 1024
    return f"{used / gib:.1f}G / {total / gib:.1f}G ({round(used * 100 / total)}%)"


@backend_router.get("/api/ping", response_model=PingPayload)
def ping(host: str = Query("google.com", description="Host to reach")):
    """
    Check that a host name resolves.

    Args:
        host: Host name to resolve

    Returns:
        PingPayload: Resolution outcome as a ping-like message
    """
    try:
        address = socket.gethostbyname(host)
    except (OSError, UnicodeError) as e:
        logger.info(f"Ping target {host} did not resolve: {e}")
        return PingPayload(
            success=False, message=f"ping: {host}: Name or service not known"
        )
    return PingPayload(
        success=True, message=f"PING {host} ({address}): host raggiungibile"
    )


@backend_router.get("/api/system-info", response_model=SystemInfoPayload)
def system_info():
    """Describe the machine running the backend."""
    return SystemInfoPayload(
        os=f"{platform.system()} {platform.release()}".strip() or UNKNOWN,
        hostname=platform.node() or UNKNOWN,
        kernel=platform.version() or UNKNOWN,
        uptime=_read_uptime(),
        memory=_read_memory(),
    )


@backend_router.get("/api/health", response_model=HealthPayload)
def health():
    """Report that the backend is up."""
    return HealthPayload(
        status="ok",
        message="Backend operativo",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@backend_router.get("/terminal/listamaschere", response_model=EntitiesPayload)
def list_entities():
    """List the entities the terminal can use."""
    return EntitiesPayload(code=200, success=True, data=list(FALLBACK_ENTITIES))


@terminal_router.post(
    "/execute",
    response_model=ExecuteResponse,
    responses={400: {"model": ErrorResponse}},
)
async def execute(request: ExecuteRequest):
    """
    Execute one line of input in the server-side session.

    Args:
        request: The input line

    Returns:
        ExecuteResponse: Output plus the prompt and header after execution

    Raises:
        HTTPException: If the input is blank
    """
    if not request.input.strip():
        raise HTTPException(status_code=400, detail="Input must not be empty")
    uc = get_execute_command_uc()
    output = await uc.execute(request.input)
    return ExecuteResponse(
        output=output, prompt=uc.session.prompt, header=uc.session.header
    )


@terminal_router.get("/history", response_model=TranscriptResponse)
def transcript():
    """Return the transcript snapshot."""
    return TranscriptResponse(lines=get_execute_command_uc().session.transcript)


@terminal_router.get("/recall", response_model=RecallResponse)
def recall(direction: Literal["up", "down"] = Query(..., description="up or down")):
    """Step through the command history."""
    command = get_execute_command_uc().recall(direction)
    return RecallResponse(direction=direction, command=command)


@terminal_router.post(
    "/call/{endpoint:path}",
    response_model=BackendCallResponse,
    responses={502: {"model": ErrorResponse}},
)
async def call_backend(endpoint: str, request: BackendCallRequest):
    """
    Forward a JSON body to a backend endpoint under the API prefix.

    Raises:
        HTTPException: If the backend call fails
    """
    try:
        result = await get_call_backend_uc().execute(endpoint, request.data)
    except TransportError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return BackendCallResponse(result=result)
