"""
Tests for the CallBackendUseCase.
"""

from unittest.mock import AsyncMock

import pytest

from webterm.exceptions import RemoteServerError
from webterm.use_cases.terminal.call_backend import CallBackendUseCase


class TestCallBackendUseCase:
    """Test cases for the CallBackendUseCase."""

    @pytest.mark.asyncio
    async def test_posts_to_api_prefix(self, transport, mock_logger):
        transport.post_json = AsyncMock(return_value={"id": 7})
        use_case = CallBackendUseCase(transport, api_prefix="/api/", logger=mock_logger)

        result = await use_case.execute("/reports/run", {"month": 3})

        assert result == {"id": 7}
        transport.post_json.assert_awaited_once_with("/api/reports/run", {"month": 3})
        mock_logger.info.assert_called_once_with(
            "Calling backend endpoint: /api/reports/run"
        )

    @pytest.mark.asyncio
    async def test_failure_propagates(self, transport, mock_logger):
        """Unlike interactive commands, errors reach the caller."""
        transport.post_json = AsyncMock(side_effect=RemoteServerError("boom", 500))
        use_case = CallBackendUseCase(transport, api_prefix="/api", logger=mock_logger)

        with pytest.raises(RemoteServerError):
            await use_case.execute("reports/run")

        mock_logger.error.assert_called_once()
