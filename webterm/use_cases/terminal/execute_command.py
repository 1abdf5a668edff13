"""
Use case interpreting one line of terminal input.

Input is evaluated in this order: blank, literal ``clear``, statement chain
(``;``), pipeline (``|``), simple command. Every failure is turned into text;
nothing raised by a handler reaches the caller.
"""

import asyncio
import logging
from typing import Optional, Sequence

from webterm.entities.command import Command, PipelineStage
from webterm.entities.session import Direction, Session
from webterm.exceptions import CommandNotFoundError, TerminalError, TransportError
from webterm.ports.events.event_bus_port import ENTITY_USE, EventBusPort
from webterm.use_cases.commands.registry import CommandRegistry

CLEAR_COMMAND = "clear"


def classify_error(command_name: str, error: Exception) -> str:
    """
    Turn a handler failure into the message shown to the user.

    Args:
        command_name: Name of the failing command
        error: The exception raised by its handler

    Returns:
        A single human readable line
    """
    if isinstance(error, TransportError):
        if error.status == 0:
            return f"{command_name}: errore di connessione - Backend non raggiungibile"
        if error.status == 404:
            return f"{command_name}: endpoint non trovato"
        if error.status >= 500:
            return f"{command_name}: errore interno del server"
    elif isinstance(error, TerminalError):
        return str(error)
    return f"{command_name}: errore - {str(error) or 'Errore sconosciuto'}"


HELP_HINT = "Digita 'help' per la lista dei comandi"


class ExecuteCommandUseCase:
    """Interpreter of raw terminal input against a command registry."""

    def __init__(
        self,
        session: Session,
        registry: CommandRegistry,
        event_bus: Optional[EventBusPort] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            session: Session state this interpreter mutates
            registry: Commands available to the session
            event_bus: Bus notified when an entity control is activated
            logger: Logger instance to use for logging
        """
        self._session = session
        self._registry = registry
        self._event_bus = event_bus
        self._logger = logger or logging.getLogger(__name__)
        # One evaluation at a time per session
        self._lock = asyncio.Lock()

    @property
    def session(self) -> Session:
        return self._session

    async def execute(self, raw_input: str) -> str:
        """
        Execute one line of input.

        Args:
            raw_input: Text typed by the user

        Returns:
            The textual result; empty for blank input and silent commands
        """
        text = raw_input.strip()
        if not text:
            return ""

        async with self._lock:
            try:
                if text == CLEAR_COMMAND:
                    return await self._clear()

                self._session.append_command(text)
                self._session.append_transcript(f"{self._session.prompt} {text}")
                self._logger.info(f"Executing: {text}")

                if ";" in text:
                    return await self._execute_statements(text)
                if "|" in text:
                    output = await self._execute_pipeline(text)
                    self._record(output)
                    return output
                return await self._execute_simple(text, record=True)
            finally:
                self._session.reset_cursor()

    def recall(self, direction: Direction) -> str:
        """Step through the command history; see Session.recall."""
        return self._session.recall(direction)

    def cancel(self) -> None:
        """Abandon the line being typed."""
        self._session.append_transcript("^C")
        self._session.reset_cursor()

    async def activate_entity(self, name: str) -> str:
        """
        Handle activation of a ``[utilizza:<name>]`` control.

        Publishes the entity name on the event bus, then runs ``use <name>``.
        """
        if self._event_bus is not None:
            self._event_bus.publish(ENTITY_USE, name)
        return await self.execute(f"use {name}")

    async def _clear(self) -> str:
        command = self._registry.resolve(CLEAR_COMMAND)
        if command is None:
            self._session.clear_transcript()
            return ""
        return await self._run(command, ())

    async def _execute_statements(self, text: str) -> str:
        statements = [s.strip() for s in text.split(";") if s.strip()]
        results = []
        for statement in statements:
            if "|" in statement:
                results.append(await self._execute_pipeline(statement))
            else:
                results.append(await self._execute_simple(statement, record=False))

        combined = "\n".join(results)
        if len(results) > 1:
            self._record(combined)
        elif results:
            self._record(results[0])
        return combined

    async def _execute_pipeline(self, text: str) -> str:
        output = ""
        for index, segment in enumerate(s.strip() for s in text.split("|")):
            stage = PipelineStage.parse(segment)
            try:
                command = self._registry.get(stage.command_name)
            except CommandNotFoundError as e:
                output = str(e)
                continue
            if index == 0:
                output = await self._run(command, stage.args)
            else:
                output = self._run_filter(command, stage.args, output)
        return output

    async def _execute_simple(self, text: str, record: bool) -> str:
        stage = PipelineStage.parse(text)
        try:
            command = self._registry.get(stage.command_name, HELP_HINT)
        except CommandNotFoundError as e:
            self._logger.info(f"Unknown command: {e.name}")
            message = str(e)
            if record:
                self._session.append_transcript(message)
            return message

        output = await self._run(command, stage.args)
        if record:
            self._record(output)
        return output

    async def _run(self, command: Command, args: Sequence[str]) -> str:
        try:
            return await command.handler(list(args)) or ""
        except Exception as e:
            return self._failure(command.name, e)

    def _run_filter(self, command: Command, args: Sequence[str], text: str) -> str:
        if command.pipe_handler is None:
            return f"{command.name}: comando non supporta pipe"
        try:
            return command.pipe_handler(list(args), text)
        except Exception as e:
            return self._failure(command.name, e)

    def _failure(self, command_name: str, error: Exception) -> str:
        if isinstance(error, (TerminalError, TransportError)):
            self._logger.warning(f"{command_name} failed: {error}")
        else:
            self._logger.error(f"Unexpected error in {command_name}: {error}")
        return classify_error(command_name, error)

    def _record(self, output: str) -> None:
        if output and output.strip():
            self._session.append_transcript(output)
