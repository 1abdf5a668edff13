"""
Tests for the server launcher.
"""

from unittest.mock import patch

from webterm.cli_serve import main


class TestServe:
    """Test cases for webterm-serve."""

    def test_defaults_from_environment(self, monkeypatch):
        monkeypatch.setenv("HOST", "0.0.0.0")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.delenv("RELOAD", raising=False)

        with patch("webterm.cli_serve.uvicorn.run") as mock_run:
            assert main([]) == 0

        mock_run.assert_called_once_with(
            "webterm.main:app", host="0.0.0.0", port=9000, reload=False
        )

    def test_arguments_override_environment(self, monkeypatch):
        """Command line options win over HOST and PORT."""
        monkeypatch.setenv("PORT", "9000")

        with patch("webterm.cli_serve.uvicorn.run") as mock_run:
            main(["--host", "localhost", "--port", "8123", "--reload"])

        mock_run.assert_called_once_with(
            "webterm.main:app", host="localhost", port=8123, reload=True
        )
