"""Tests for session states and transitions."""

from depctl.domain.session import SESSION_TRANSITIONS, SessionState, is_valid_transition


class TestSessionState:
    def test_members(self) -> None:
        assert [s.value for s in SessionState] == [
            "accepting_depends",
            "accepting_commands",
            "ended",
        ]

    def test_every_state_has_transitions(self) -> None:
        assert set(SESSION_TRANSITIONS) == {s.value for s in SessionState}


class TestTransitions:
    def test_forward_moves(self) -> None:
        assert is_valid_transition("accepting_depends", "accepting_commands")
        assert is_valid_transition("accepting_depends", "ended")
        assert is_valid_transition("accepting_commands", "ended")

    def test_staying_put_is_allowed_until_ended(self) -> None:
        assert is_valid_transition("accepting_commands", "accepting_commands")
        assert not is_valid_transition("ended", "ended")

    def test_no_backwards_moves(self) -> None:
        assert not is_valid_transition("accepting_commands", "accepting_depends")
        assert not is_valid_transition("ended", "accepting_commands")
