"""
Command domain entities.
"""

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional, Sequence

CommandHandler = Callable[[Sequence[str]], Awaitable[str]]
PipeHandler = Callable[[Sequence[str], str], str]


@dataclass(frozen=True)
class Command:
    """A named terminal command.

    ``pipe_handler`` is set only for commands that read text from a previous
    pipeline stage; every other command is rejected in a non-first position.
    """

    name: str
    description: str
    handler: CommandHandler = field(compare=False)
    usage: Optional[str] = None
    pipe_handler: Optional[PipeHandler] = field(default=None, compare=False)


@dataclass(frozen=True)
class PipelineStage:
    """One command segment of a pipeline or statement chain."""

    command_name: str
    args: tuple[str, ...] = ()

    @classmethod
    def parse(cls, segment: str) -> "PipelineStage":
        parts = segment.split()
        if not parts:
            return cls("")
        return cls(parts[0], tuple(parts[1:]))
