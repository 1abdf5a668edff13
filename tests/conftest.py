"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from webterm.adapters.events.in_memory_event_bus import InMemoryEventBus
from webterm.container import DependencyContainer
from webterm.entities.session import Session
from webterm.exceptions import TransportUnreachableError
from webterm.ports.transport.transport_port import TransportPort
from webterm.use_cases.commands.builtin_commands import BuiltinCommands
from webterm.use_cases.commands.catalog import build_command_table
from webterm.use_cases.commands.registry import CommandRegistry
from webterm.use_cases.commands.remote_commands import RemoteCommands
from webterm.use_cases.terminal.execute_command import ExecuteCommandUseCase

FIXED_NOW = datetime(2024, 3, 7, 9, 5, 3)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def fixed_now():
    """Clock value used by date."""
    return FIXED_NOW


@pytest.fixture
def session(mock_logger):
    """Fresh session for user@linux-box at home."""
    return Session(user="user", hostname="linux-box", logger=mock_logger)


@pytest.fixture
def transport():
    """
    Transport whose calls all fail as if the backend were down.

    Tests override ``get_json.side_effect`` or ``return_value`` as needed.
    """
    mock_transport = MagicMock(spec=TransportPort)
    mock_transport.get_json = AsyncMock(
        side_effect=TransportUnreachableError("Http failure response: 0 Unknown Error")
    )
    mock_transport.post_json = AsyncMock(return_value=None)
    return mock_transport


@pytest.fixture
def registry(session, transport, mock_logger):
    """Registry filled with the default command table."""
    command_registry = CommandRegistry(mock_logger)
    builtins = BuiltinCommands(
        session, command_registry, clock=lambda: FIXED_NOW, logger=mock_logger
    )
    remote = RemoteCommands(
        transport,
        session.hostname,
        api_prefix="/api",
        entities_path="/terminal/listamaschere",
        logger=mock_logger,
    )
    command_registry.register_all(build_command_table(builtins, remote))
    return command_registry


@pytest.fixture
def event_bus(mock_logger):
    return InMemoryEventBus(mock_logger)


@pytest.fixture
def terminal(session, registry, event_bus, mock_logger):
    """Interpreter wired to the default commands and a failing transport."""
    return ExecuteCommandUseCase(session, registry, event_bus, mock_logger)


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
