"""
Session domain entity holding the interpreter state.
"""

import logging
from typing import Callable, Literal, Optional

HOME = "~"

TRANSCRIPT_LIMIT = 1000
TRANSCRIPT_KEEP = 500
COMMAND_HISTORY_LIMIT = 100
COMMAND_HISTORY_KEEP = 50

TranscriptObserver = Callable[[list[str]], None]
Direction = Literal["up", "down"]


class Session:
    """
    Terminal session state: working directory, identity and both histories.

    The transcript is what the rendering surface shows (prompt echoes and
    outputs); the command history is the list of raw inputs used for recall.
    Observers registered with ``subscribe`` receive the whole transcript
    snapshot on every change.
    """

    def __init__(
        self,
        user: str = "user",
        hostname: str = "linux-box",
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the session.

        Args:
            user: User name shown in the prompt and by whoami
            hostname: Host name shown in the prompt
            logger: Logger instance to use for logging
        """
        self._user = user
        self._hostname = hostname
        self._logger = logger or logging.getLogger(__name__)
        self.current_directory: str = HOME
        self._transcript: list[str] = []
        self._command_history: list[str] = []
        self._history_cursor = -1
        self._observers: list[TranscriptObserver] = []

    @property
    def user(self) -> str:
        return self._user

    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def prompt(self) -> str:
        return f"{self._user}@{self._hostname}:{self.current_directory}$"

    @property
    def header(self) -> str:
        return f"{self._user}@{self._hostname}: {self.current_directory}"

    @property
    def transcript(self) -> list[str]:
        return list(self._transcript)

    @property
    def command_history(self) -> list[str]:
        return list(self._command_history)

    @property
    def history_cursor(self) -> int:
        return self._history_cursor

    # Transcript

    def append_transcript(self, line: str) -> None:
        self._transcript.append(line)
        if len(self._transcript) > TRANSCRIPT_LIMIT:
            self._transcript = self._transcript[-TRANSCRIPT_KEEP:]
        self._notify()

    def clear_transcript(self) -> None:
        self._transcript = []
        self._notify()

    def subscribe(self, observer: TranscriptObserver) -> Callable[[], None]:
        """
        Register an observer of the transcript.

        The observer is called immediately with the current snapshot, then
        again after every change.

        Args:
            observer: Callable receiving the full ordered transcript

        Returns:
            A callable that removes the observer
        """
        self._observers.append(observer)
        observer(self.transcript)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.transcript
        for observer in list(self._observers):
            try:
                observer(snapshot)
            except Exception as e:
                self._logger.error(f"Transcript observer failed: {e}")

    # Command history

    def append_command(self, command: str) -> None:
        """Record a raw input for recall, skipping consecutive duplicates."""
        if not self._command_history or self._command_history[-1] != command:
            self._command_history.append(command)
            if len(self._command_history) > COMMAND_HISTORY_LIMIT:
                self._command_history = self._command_history[-COMMAND_HISTORY_KEEP:]
        self._history_cursor = -1

    def reset_cursor(self) -> None:
        self._history_cursor = -1

    def recall(self, direction: Direction) -> str:
        """
        Move the recall cursor and return the entry under it.

        Cursor 0 is the most recent command; ``up`` walks towards older
        commands and stops at the oldest, ``down`` walks back to -1, the empty
        current line.

        Args:
            direction: "up" or "down"

        Returns:
            The recalled command, or an empty string at the current line
        """
        if not self._command_history:
            return ""

        if direction == "up":
            self._history_cursor = min(
                self._history_cursor + 1, len(self._command_history) - 1
            )
        else:
            self._history_cursor = max(self._history_cursor - 1, -1)

        if self._history_cursor < 0:
            return ""
        return self._command_history[-1 - self._history_cursor]
