"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from webterm.container import container
from webterm.use_cases.terminal.call_backend import CallBackendUseCase
from webterm.use_cases.terminal.execute_command import ExecuteCommandUseCase


def get_execute_command_uc() -> ExecuteCommandUseCase:
    """
    Get the execute command use case from the container.

    Returns:
        ExecuteCommandUseCase: The execute command use case instance
    """
    return container.get_execute_command_use_case()


def get_call_backend_uc() -> CallBackendUseCase:
    """
    Get the call backend use case from the container.

    Returns:
        CallBackendUseCase: The call backend use case instance
    """
    return container.get_call_backend_use_case()
