"""
Tests for the API router endpoints.
"""

import socket
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from webterm.exceptions import RemoteServerError
from webterm.main import app
from webterm.use_cases.commands.remote_commands import FALLBACK_ENTITIES

client = TestClient(app)


@pytest.fixture
def patched_terminal(terminal):
    """Route the terminal endpoints to the test interpreter."""
    with patch("webterm.api.routers.get_execute_command_uc", return_value=terminal):
        yield terminal


class TestBackendAPI:
    """Test cases for the development backend endpoints."""

    def test_ping_success(self):
        """Test ping with a resolvable host."""
        with patch("webterm.api.routers.socket.gethostbyname") as mock_resolve:
            mock_resolve.return_value = "93.184.216.34"

            response = client.get("/api/ping?host=example.org")

            assert response.status_code == 200
            assert response.json() == {
                "success": True,
                "message": "PING example.org (93.184.216.34): host raggiungibile",
            }
            mock_resolve.assert_called_once_with("example.org")

    def test_ping_unresolved(self):
        """Test ping with a host that does not resolve."""
        with patch("webterm.api.routers.socket.gethostbyname") as mock_resolve:
            mock_resolve.side_effect = socket.gaierror("not known")

            response = client.get("/api/ping?host=nowhere.invalid")

            assert response.status_code == 200
            data = response.json()
            assert data["success"] is False
            assert data["message"] == "ping: nowhere.invalid: Name or service not known"

    def test_system_info(self):
        response = client.get("/api/system-info")

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"os", "hostname", "kernel", "uptime", "memory"}
        assert all(isinstance(value, str) and value for value in data.values())

    def test_health(self):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["message"] == "Backend operativo"
        assert data["timestamp"]

    def test_list_entities(self):
        response = client.get("/terminal/listamaschere")

        assert response.status_code == 200
        assert response.json() == {
            "code": 200,
            "success": True,
            "data": list(FALLBACK_ENTITIES),
        }


class TestTerminalAPI:
    """Test cases for the terminal session endpoints."""

    def test_execute(self, patched_terminal):
        """Test executing a command changes the returned prompt."""
        response = client.post("/terminal/execute", json={"input": "cd documenti"})

        assert response.status_code == 200
        assert response.json() == {
            "output": "",
            "prompt": "user@linux-box:documenti$",
            "header": "user@linux-box: documenti",
        }

    def test_execute_returns_output(self, patched_terminal):
        response = client.post("/terminal/execute", json={"input": "pwd; whoami"})

        assert response.status_code == 200
        assert response.json()["output"] == "~\nuser"

    def test_execute_blank_input(self, patched_terminal):
        """Test that blank input is rejected."""
        response = client.post("/terminal/execute", json={"input": "   "})

        assert response.status_code == 400
        assert response.json() == {"detail": "Input must not be empty"}
        assert patched_terminal.session.transcript == []

    def test_execute_missing_body(self):
        response = client.post("/terminal/execute", json={})

        assert response.status_code == 422

    def test_history(self, patched_terminal):
        client.post("/terminal/execute", json={"input": "whoami"})

        response = client.get("/terminal/history")

        assert response.status_code == 200
        assert response.json() == {"lines": ["user@linux-box:~$ whoami", "user"]}

    def test_recall(self, patched_terminal):
        for line in ("pwd", "whoami"):
            client.post("/terminal/execute", json={"input": line})

        first = client.get("/terminal/recall?direction=up").json()
        second = client.get("/terminal/recall?direction=up").json()
        back = client.get("/terminal/recall?direction=down").json()

        assert first == {"direction": "up", "command": "whoami"}
        assert second["command"] == "pwd"
        assert back["command"] == "whoami"

    def test_recall_invalid_direction(self):
        response = client.get("/terminal/recall?direction=left")

        assert response.status_code == 422

    def test_call_backend(self):
        """Test that the body is forwarded and the answer wrapped."""
        with patch("webterm.api.routers.get_call_backend_uc") as mock_uc:
            mock_uc.return_value.execute = AsyncMock(return_value={"id": 7})

            response = client.post(
                "/terminal/call/reports/run", json={"data": {"month": 3}}
            )

            assert response.status_code == 200
            assert response.json() == {"result": {"id": 7}}
            mock_uc.return_value.execute.assert_awaited_once_with(
                "reports/run", {"month": 3}
            )

    def test_call_backend_failure(self):
        """Test that a transport failure becomes a 502."""
        with patch("webterm.api.routers.get_call_backend_uc") as mock_uc:
            mock_uc.return_value.execute = AsyncMock(
                side_effect=RemoteServerError("Http failure response: 500", 500)
            )

            response = client.post("/terminal/call/reports/run", json={})

            assert response.status_code == 502
            assert response.json() == {"detail": "Http failure response: 500"}


class TestLifespan:
    """Test cases for application startup and shutdown."""

    def test_shutdown_closes_container(self):
        """Leaving the app context releases the backend connections."""
        with patch(
            "webterm.main.container.aclose", new_callable=AsyncMock
        ) as mock_aclose:
            with TestClient(app) as lifespan_client:
                assert lifespan_client.get("/api/health").status_code == 200
                mock_aclose.assert_not_awaited()

            mock_aclose.assert_awaited_once()
