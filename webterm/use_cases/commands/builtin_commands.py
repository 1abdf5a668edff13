"""
Built-in command handlers working on the in-memory session state.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from webterm.entities.file_entry import HOME_FIXTURE, KNOWN_DIRECTORIES, FileEntry
from webterm.entities.session import HOME, Session
from webterm.exceptions import InvalidTargetError, MissingOperandError
from webterm.use_cases.commands.registry import CommandRegistry

ANSI_GREEN = "\x1b[1;32m"
ANSI_GRAY = "\x1b[2;37m"
ANSI_RESET = "\x1b[0m"

HELP_NAME_WIDTH = 12


class BuiltinCommands:
    """Handlers for help, clear, ls, pwd, cd, whoami, echo, date, mkdir, touch and history.

    Every handler is a coroutine taking the argument list so it can be stored
    in a Command next to the remote handlers.
    """

    def __init__(
        self,
        session: Session,
        registry: CommandRegistry,
        clock: Optional[Callable[[], datetime]] = None,
        fixture: Sequence[FileEntry] = HOME_FIXTURE,
        logger: Optional[logging.Logger] = None,
    ):
        self._session = session
        self._registry = registry
        self._clock = clock or datetime.now
        self._fixture = tuple(fixture)
        self._logger = logger or logging.getLogger(__name__)

    async def help(self, args: Sequence[str]) -> str:
        lines = []
        for command in self._registry.list():
            line = (
                f"{ANSI_GREEN}{command.name.ljust(HELP_NAME_WIDTH)}{ANSI_RESET}"
                f" - {command.description}"
            )
            if command.usage:
                line += f"\n    {ANSI_GRAY}Usage: {command.usage}{ANSI_RESET}"
            lines.append(line)
        return "\n".join(lines)

    async def clear(self, args: Sequence[str]) -> str:
        self._session.clear_transcript()
        return ""

    async def history(self, args: Sequence[str]) -> str:
        return "\n".join(
            f" {index}  {command}"
            for index, command in enumerate(self._session.command_history, start=1)
        )

    async def ls(self, args: Sequence[str]) -> str:
        show_all = "-a" in args or "--all" in args
        long_format = "-l" in args or "--long" in args
        # Sizes are pre-formatted, -h only drops the column padding
        human_readable = "-h" in args or "--human-readable" in args

        entries = [e for e in self._fixture if show_all or not e.hidden]

        if long_format:
            return "\n".join(
                e.long_line(self._session.user, human_readable) for e in entries
            )
        return "  ".join(e.name for e in entries)

    async def pwd(self, args: Sequence[str]) -> str:
        return self._session.current_directory

    async def cd(self, args: Sequence[str]) -> str:
        """
        Change the simulated working directory.

        Raises:
            InvalidTargetError: If the target is neither known nor absolute
        """
        if not args:
            self._session.current_directory = HOME
            return ""

        target = args[0]
        if target not in KNOWN_DIRECTORIES and not target.startswith("/"):
            raise InvalidTargetError(f"cd: {target}: No such file or directory")

        current = self._session.current_directory
        if target == "..":
            parent = "/".join(current.split("/")[:-1])
            self._session.current_directory = parent or HOME
        elif target == HOME or target.startswith("/"):
            self._session.current_directory = target
        elif current == HOME:
            self._session.current_directory = target
        else:
            self._session.current_directory = f"{current}/{target}"

        self._logger.debug(f"Directory changed to {self._session.current_directory}")
        return ""

    async def whoami(self, args: Sequence[str]) -> str:
        return self._session.user

    async def echo(self, args: Sequence[str]) -> str:
        return " ".join(args)

    async def date(self, args: Sequence[str]) -> str:
        now = self._clock()
        return f"{now.day}/{now.month}/{now.year}, {now:%H:%M:%S}"

    async def mkdir(self, args: Sequence[str]) -> str:
        if not args:
            raise MissingOperandError("mkdir: missing operand")
        return f"Directory '{args[0]}' created successfully"

    async def touch(self, args: Sequence[str]) -> str:
        if not args:
            raise MissingOperandError("touch: missing file operand")
        return f"File '{args[0]}' created successfully"
