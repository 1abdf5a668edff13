"""
Registry of the commands known to a terminal session.
"""

import logging
from typing import Iterable, Optional

from webterm.entities.command import Command
from webterm.exceptions import CommandNotFoundError, DuplicateCommandError


class CommandRegistry:
    """Name to command table that keeps registration order."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._commands: dict[str, Command] = {}
        self._logger = logger or logging.getLogger(__name__)

    def register(self, command: Command) -> None:
        """
        Register a command.

        Raises:
            DuplicateCommandError: If a command with the same name exists
        """
        if command.name in self._commands:
            raise DuplicateCommandError(command.name)
        self._commands[command.name] = command
        self._logger.debug(f"Registered command: {command.name}")

    def register_all(self, commands: Iterable[Command]) -> None:
        for command in commands:
            self.register(command)

    def resolve(self, name: str) -> Optional[Command]:
        """Exact, case-sensitive lookup; None when the name is unknown."""
        return self._commands.get(name)

    def get(self, name: str, hint: Optional[str] = None) -> Command:
        """
        Look up a command that must exist.

        Args:
            name: Command name
            hint: Text appended to the not-found message

        Raises:
            CommandNotFoundError: If the name is unknown
        """
        command = self.resolve(name)
        if command is None:
            raise CommandNotFoundError(name, hint)
        return command

    def list(self) -> list[Command]:
        return list(self._commands.values())

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)
