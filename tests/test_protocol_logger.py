# Area: Shared Tests
"""Tests for protocol logger."""

from nuggets_server._shared.protocol_logger import (
    CYAN,
    GREEN,
    RECEIVE_DISPLAY_NAMES,
    RED,
    RESET,
    SEND_DISPLAY_NAMES,
    ProtocolLogger,
    get_protocol_logger,
)

PEER = ("127.0.0.1", 5001)


class TestMessageTypeMappings:
    """Tests for message type → display name mappings."""

    def test_receive_display_names_complete(self):
        assert RECEIVE_DISPLAY_NAMES == {
            "SPECTATE": "JOIN-SPECTATOR",
            "PLAY": "JOIN-PLAYER",
            "KEY": "KEYSTROKE",
        }

    def test_send_display_names_complete(self):
        for msg_type in ("OK", "GRID", "DISPLAY", "GOLD", "QUIT", "NO", "GAMEOVER"):
            assert msg_type in SEND_DISPLAY_NAMES


class TestProtocolLogger:
    """Tests for ProtocolLogger class."""

    def test_disabled_by_default(self, capsys):
        logger = ProtocolLogger()
        logger.log_received(PEER, "PLAY alice")
        logger.log_sent(PEER, "OK A")
        assert capsys.readouterr().out == ""

    def test_log_received_output(self, capsys):
        logger = ProtocolLogger(enabled=True)
        logger.log_received(PEER, "KEY h", role="A")
        output = capsys.readouterr().out

        assert "RECEIVED" in output
        assert "127.0.0.1:5001" in output
        assert "KEYSTROKE" in output
        assert "ROLE: A" in output
        assert GREEN in output
        assert RESET in output

    def test_unknown_received_type(self, capsys):
        logger = ProtocolLogger(enabled=True)
        logger.log_received(PEER, "HELLO")
        assert "UNRECOGNIZED" in capsys.readouterr().out

    def test_log_sent_first_line_only(self, capsys):
        logger = ProtocolLogger(enabled=True)
        logger.log_sent(PEER, "DISPLAY\n+--+\n|..|\n", role="SPECTATOR")
        output = capsys.readouterr().out

        assert "SENT" in output
        assert "MAP-UPDATE" in output
        assert "|..|" not in output
        assert CYAN in output

    def test_set_enabled(self, capsys):
        logger = ProtocolLogger()
        logger.set_enabled(True)
        logger.log_sent(PEER, "GOLD 1 2 3")
        assert "GOLD-UPDATE" in capsys.readouterr().out

    def test_log_error_always_shown(self, capsys):
        logger = ProtocolLogger()
        logger.log_error("Something went wrong")
        output = capsys.readouterr().err

        assert "[ERROR]" in output
        assert "Something went wrong" in output
        assert RED in output


class TestGetProtocolLogger:
    """Tests for get_protocol_logger singleton."""

    def test_returns_same_instance(self):
        assert get_protocol_logger() is get_protocol_logger()
