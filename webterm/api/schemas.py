"""
Pydantic models for API requests and responses.
"""

from typing import Any, List, Literal

from pydantic import BaseModel, Field

from webterm.entities.remote_payloads import (
    EntitiesPayload,
    HealthPayload,
    PingPayload,
    SystemInfoPayload,
)

__all__ = [
    "BackendCallRequest",
    "BackendCallResponse",
    "EntitiesPayload",
    "ErrorResponse",
    "ExecuteRequest",
    "ExecuteResponse",
    "HealthPayload",
    "PingPayload",
    "RecallResponse",
    "SystemInfoPayload",
    "TranscriptResponse",
]


class ExecuteRequest(BaseModel):
    """Schema for a line of terminal input."""

    input: str = Field(..., description="Raw input line, e.g. 'ls -l | grep doc'")


class ExecuteResponse(BaseModel):
    """Schema for the result of a line of terminal input."""

    output: str = Field(..., description="Textual result of the execution")
    prompt: str = Field(..., description="Prompt after execution")
    header: str = Field(..., description="Header line after execution")


class TranscriptResponse(BaseModel):
    """Schema for the transcript snapshot."""

    lines: List[str] = Field(..., description="Transcript lines, oldest first")


class RecallResponse(BaseModel):
    """Schema for a history recall step."""

    direction: Literal["up", "down"] = Field(..., description="Recall direction")
    command: str = Field(..., description="Recalled command, empty at current line")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")


class BackendCallRequest(BaseModel):
    """Schema for a custom backend call."""

    data: Any = Field(None, description="JSON body forwarded to the endpoint")


class BackendCallResponse(BaseModel):
    """Schema for the decoded answer of a custom backend call."""

    result: Any = Field(None, description="Decoded JSON answer, null when empty")
