"""
Pydantic models for the payloads exchanged with the backend service.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class PingPayload(BaseModel):
    """Answer of GET /api/ping."""

    success: bool = Field(..., description="Whether the host answered")
    message: str = Field(..., description="Ping transcript")


class SystemInfoPayload(BaseModel):
    """Answer of GET /api/system-info."""

    os: str = Field(..., description="Operating system name")
    hostname: str = Field(..., description="Backend host name")
    kernel: str = Field(..., description="Kernel release")
    uptime: str = Field(..., description="Human readable uptime")
    memory: str = Field(..., description="Human readable memory usage")

    def render(self) -> str:
        return (
            f"Sistema Operativo: {self.os}\n"
            f"Hostname: {self.hostname}\n"
            f"Kernel: {self.kernel}\n"
            f"Uptime: {self.uptime}\n"
            f"Memoria: {self.memory}"
        )


class HealthPayload(BaseModel):
    """Answer of GET /api/health."""

    status: str = Field(..., description="Service status")
    message: str = Field(..., description="Status message")
    timestamp: str = Field(..., description="Server time")


class EntitiesPayload(BaseModel):
    """Answer of GET /terminal/listamaschere."""

    code: Optional[int] = Field(None, description="Application status code")
    success: bool = Field(False, description="Whether the listing succeeded")
    data: Optional[List[str]] = Field(None, description="Entity names")
