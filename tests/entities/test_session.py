"""
Tests for the Session entity.
"""

from webterm.entities.session import (
    COMMAND_HISTORY_KEEP,
    COMMAND_HISTORY_LIMIT,
    HOME,
    TRANSCRIPT_KEEP,
    TRANSCRIPT_LIMIT,
    Session,
)


class TestSessionIdentity:
    """Test cases for prompt and header accessors."""

    def test_starts_at_home(self, session):
        """A new session starts at the home sentinel."""
        assert session.current_directory == HOME
        assert session.history_cursor == -1

    def test_prompt_and_header_follow_directory(self, session):
        """Prompt and header are computed from the live directory."""
        assert session.prompt == "user@linux-box:~$"
        assert session.header == "user@linux-box: ~"

        session.current_directory = "documenti"

        assert session.prompt == "user@linux-box:documenti$"
        assert session.header == "user@linux-box: documenti"


class TestTranscript:
    """Test cases for the transcript and its subscription."""

    def test_subscribe_delivers_current_snapshot(self, session):
        """Subscribers get the current snapshot right away."""
        session.append_transcript("one")
        received = []

        session.subscribe(received.append)

        assert received == [["one"]]

    def test_every_change_pushes_full_snapshot(self, session):
        """Each append and clear pushes the whole list, not a diff."""
        received = []
        session.subscribe(received.append)

        session.append_transcript("a")
        session.append_transcript("b")
        session.clear_transcript()

        assert received == [[], ["a"], ["a", "b"], []]

    def test_unsubscribe_stops_notifications(self, session):
        """An unsubscribed observer is no longer called."""
        received = []
        unsubscribe = session.subscribe(received.append)

        unsubscribe()
        session.append_transcript("ignored")

        assert received == [[]]

    def test_snapshot_is_a_copy(self, session):
        """Mutating a delivered snapshot does not touch the session."""
        session.append_transcript("a")
        snapshot = session.transcript
        snapshot.append("b")

        assert session.transcript == ["a"]

    def test_failing_observer_does_not_break_others(self, session, mock_logger):
        """An observer raising is logged and the next one still runs."""
        received = []

        def broken(snapshot):
            if snapshot:
                raise RuntimeError("boom")

        session.subscribe(broken)
        session.subscribe(received.append)
        session.append_transcript("a")

        assert received[-1] == ["a"]
        mock_logger.error.assert_called_once()

    def test_transcript_trimmed_on_overflow(self, session):
        """Past the limit only the most recent entries survive."""
        for index in range(TRANSCRIPT_LIMIT):
            session.append_transcript(str(index))
        assert len(session.transcript) == TRANSCRIPT_LIMIT

        session.append_transcript("overflow")

        transcript = session.transcript
        assert len(transcript) == TRANSCRIPT_KEEP
        assert transcript[-1] == "overflow"
        assert transcript[0] == str(TRANSCRIPT_LIMIT - TRANSCRIPT_KEEP + 1)


class TestCommandHistory:
    """Test cases for the command history and recall cursor."""

    def test_consecutive_duplicates_skipped(self, session):
        """Only a change of command is recorded."""
        session.append_command("ls")
        session.append_command("ls")
        session.append_command("pwd")
        session.append_command("ls")

        assert session.command_history == ["ls", "pwd", "ls"]

    def test_history_never_exceeds_limit(self, session):
        """The 101st entry trims the history to the last 50."""
        for index in range(COMMAND_HISTORY_LIMIT + 1):
            session.append_command(f"echo {index}")

        history = session.command_history
        assert len(history) == COMMAND_HISTORY_KEEP
        assert history[0] == f"echo {COMMAND_HISTORY_LIMIT + 1 - COMMAND_HISTORY_KEEP}"
        assert history[-1] == f"echo {COMMAND_HISTORY_LIMIT}"

    def test_recall_on_empty_history(self, session):
        """Nothing to recall yields an empty line."""
        assert session.recall("up") == ""
        assert session.history_cursor == -1

    def test_recall_walks_from_newest_to_oldest(self, session):
        """up goes to older entries and clamps at the oldest one."""
        for command in ("ls", "pwd", "whoami"):
            session.append_command(command)

        assert session.recall("up") == "whoami"
        assert session.recall("up") == "pwd"
        assert session.recall("up") == "ls"
        assert session.recall("up") == "ls"
        assert session.history_cursor == 2

    def test_recall_down_returns_to_current_line(self, session):
        """down goes back to newer entries then to the empty line."""
        for command in ("ls", "pwd"):
            session.append_command(command)
        session.recall("up")
        session.recall("up")

        assert session.recall("down") == "pwd"
        assert session.recall("down") == ""
        assert session.recall("down") == ""
        assert session.history_cursor == -1

    def test_recall_after_trim_reaches_only_survivors(self, session):
        """Trimmed entries cannot be recalled."""
        for index in range(COMMAND_HISTORY_LIMIT + 1):
            session.append_command(f"echo {index}")

        recalled = [session.recall("up") for _ in range(COMMAND_HISTORY_LIMIT)]

        assert recalled[-1] == f"echo {COMMAND_HISTORY_LIMIT + 1 - COMMAND_HISTORY_KEEP}"
        assert set(recalled) == set(session.command_history)

    def test_append_resets_cursor(self, session):
        """Recording a command ends navigation."""
        session.append_command("ls")
        session.recall("up")

        session.append_command("pwd")

        assert session.history_cursor == -1

    def test_custom_identity(self):
        """User and host come from the constructor."""
        custom = Session(user="anna", hostname="box")

        assert custom.user == "anna"
        assert custom.prompt == "anna@box:~$"
