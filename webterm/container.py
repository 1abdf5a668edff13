"""
Dependency injection container for managing application dependencies.
"""

import logging

from webterm.adapters.events.in_memory_event_bus import InMemoryEventBus
from webterm.adapters.transport.httpx_transport import HttpxTransport
from webterm.config.settings import settings
from webterm.entities.session import Session
from webterm.ports.events.event_bus_port import EventBusPort
from webterm.ports.transport.transport_port import TransportPort
from webterm.use_cases.commands.builtin_commands import BuiltinCommands
from webterm.use_cases.commands.catalog import build_command_table
from webterm.use_cases.commands.registry import CommandRegistry
from webterm.use_cases.commands.remote_commands import RemoteCommands
from webterm.use_cases.terminal.call_backend import CallBackendUseCase
from webterm.use_cases.terminal.execute_command import ExecuteCommandUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_transport(self) -> TransportPort:
        """
        Get transport adapter instance.

        Returns:
            TransportPort implementation
        """
        if "transport" not in self._instances:
            self._instances["transport"] = HttpxTransport(logger=self._logger)
        return self._instances["transport"]

    def get_event_bus(self) -> EventBusPort:
        """
        Get event bus instance.

        Returns:
            EventBusPort implementation
        """
        if "event_bus" not in self._instances:
            self._instances["event_bus"] = InMemoryEventBus(self._logger)
        return self._instances["event_bus"]

    def get_session(self) -> Session:
        """Get the terminal session state."""
        if "session" not in self._instances:
            self._instances["session"] = Session(
                user=settings.user, hostname=settings.hostname, logger=self._logger
            )
        return self._instances["session"]

    def get_command_registry(self) -> CommandRegistry:
        """
        Get the command registry filled with the default commands.

        Returns:
            Configured CommandRegistry
        """
        if "command_registry" not in self._instances:
            session = self.get_session()
            registry = CommandRegistry(self._logger)
            builtins = BuiltinCommands(session, registry, logger=self._logger)
            remote = RemoteCommands(
                self.get_transport(), session.hostname, logger=self._logger
            )
            registry.register_all(build_command_table(builtins, remote))
            self._instances["command_registry"] = registry
        return self._instances["command_registry"]

    def get_execute_command_use_case(self) -> ExecuteCommandUseCase:
        """
        Get execute command use case with injected dependencies.

        Returns:
            Configured ExecuteCommandUseCase
        """
        if "execute_command_use_case" not in self._instances:
            self._instances["execute_command_use_case"] = ExecuteCommandUseCase(
                self.get_session(),
                self.get_command_registry(),
                event_bus=self.get_event_bus(),
                logger=self._logger,
            )
        return self._instances["execute_command_use_case"]

    def get_call_backend_use_case(self) -> CallBackendUseCase:
        """
        Get call backend use case with injected dependencies.

        Returns:
            Configured CallBackendUseCase
        """
        if "call_backend_use_case" not in self._instances:
            self._instances["call_backend_use_case"] = CallBackendUseCase(
                self.get_transport(), logger=self._logger
            )
        return self._instances["call_backend_use_case"]

    async def aclose(self) -> None:
        """Close the transport, if one was created, and drop all instances."""
        transport = self._instances.get("transport")
        if transport is not None:
            await transport.aclose()
        self.reset()

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
