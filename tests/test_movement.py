# Area: Game Tests
"""Tests for the movement resolver."""

from nuggets_server._game.movement import (
    MoveResult,
    is_direction_key,
    is_slide_key,
    resolve_move,
    step,
)

from helpers import make_session, place

ALICE = ("127.0.0.1", 5001)
BOB = ("127.0.0.1", 5002)


def recorder():
    """on_step hook that records outcomes and never stops the move."""
    seen = []

    def hook(outcome):
        seen.append(outcome)
        return False

    return seen, hook


class TestKeys:
    """Tests for key classification."""

    def test_direction_keys(self):
        for key in "hjklyubn":
            assert is_direction_key(key)
            assert not is_slide_key(key)

    def test_slide_keys(self):
        for key in "HJKLYUBN":
            assert is_direction_key(key)
            assert is_slide_key(key)

    def test_other_keys(self):
        for key in ("x", "Q", "1", " ", "hh"):
            assert not is_direction_key(key)


class TestStep:
    """Tests for single steps."""

    def test_into_wall(self, session):
        a = place(session, "alice", ALICE, (1, 1))
        outcome = step(session, a, (-1, 0))
        assert outcome.result is MoveResult.INVALID
        assert a.position == (1, 1)

    def test_plain_move(self, session):
        a = place(session, "alice", ALICE, (1, 1))
        outcome = step(session, a, (1, 1))
        assert outcome.result is MoveResult.MOVED
        assert a.position == (2, 2)

    def test_swap(self, session):
        a = place(session, "alice", ALICE, (1, 1))
        b = place(session, "bob", BOB, (2, 1))
        outcome = step(session, a, (1, 0))
        assert outcome.result is MoveResult.MOVED_ONTO_PLAYER
        assert outcome.swapped_with is b
        assert a.position == (2, 1)
        assert b.position == (1, 1)

    def test_pickup(self):
        session = make_session(piles={(2, 1): 5, (5, 3): 1})
        a = place(session, "alice", ALICE, (1, 1))
        outcome = step(session, a, (1, 0))
        assert outcome.result is MoveResult.MOVED_ONTO_GOLD
        assert outcome.picked_up == 5
        assert a.purse == 5
        assert session.gold_remaining == 1
        assert (2, 1) not in session.piles

    def test_pickup_happens_once(self):
        """Stepping off and back onto an emptied spot collects nothing."""
        session = make_session(piles={(2, 1): 5, (5, 3): 1})
        a = place(session, "alice", ALICE, (1, 1))
        step(session, a, (1, 0))
        step(session, a, (-1, 0))
        outcome = step(session, a, (1, 0))
        assert outcome.result is MoveResult.MOVED
        assert a.purse == 5


class TestResolveMove:
    """Tests for resolve_move()."""

    def test_invalid_key(self, session):
        a = place(session, "alice", ALICE, (1, 1))
        seen, hook = recorder()
        summary = resolve_move(session, a, "x", hook)
        assert summary.key_valid is False
        assert summary.steps == 0
        assert seen == []

    def test_blocked_step(self, session):
        a = place(session, "alice", ALICE, (1, 1))
        seen, hook = recorder()
        summary = resolve_move(session, a, "k", hook)
        assert summary.key_valid is True
        assert summary.steps == 0
        assert seen == []

    def test_single_step(self, session):
        a = place(session, "alice", ALICE, (1, 1))
        seen, hook = recorder()
        summary = resolve_move(session, a, "l", hook)
        assert summary.steps == 1
        assert a.position == (2, 1)
        assert len(seen) == 1

    def test_slide_until_wall(self, session):
        a = place(session, "alice", ALICE, (1, 1))
        seen, hook = recorder()
        summary = resolve_move(session, a, "L", hook)
        assert summary.steps == 4
        assert a.position == (5, 1)
        assert len(seen) == 4

    def test_slide_collects_every_pile(self):
        session = make_session(piles={(2, 1): 3, (4, 1): 4, (5, 3): 1})
        a = place(session, "alice", ALICE, (1, 1))
        seen, hook = recorder()
        resolve_move(session, a, "L", hook)
        assert a.purse == 7
        assert [o.picked_up for o in seen if o.result is MoveResult.MOVED_ONTO_GOLD] == [3, 4]

    def test_slide_stops_when_hook_says_so(self):
        """A slide ends at the step that takes the last nugget."""
        session = make_session(piles={(2, 1): 3, (4, 1): 4})
        a = place(session, "alice", ALICE, (1, 1))
        summary = resolve_move(session, a, "L", lambda o: session.is_gold_exhausted())
        assert summary.steps == 3
        assert a.position == (4, 1)
        assert session.gold_remaining == 0

    def test_slide_continues_through_swap(self, session):
        a = place(session, "alice", ALICE, (1, 1))
        b = place(session, "bob", BOB, (3, 1))
        seen, hook = recorder()
        summary = resolve_move(session, a, "L", hook)
        assert summary.steps == 4
        assert a.position == (5, 1)
        assert b.position == (2, 1)
        assert seen[1].result is MoveResult.MOVED_ONTO_PLAYER

    def test_diagonal_slide(self, session):
        a = place(session, "alice", ALICE, (1, 1))
        _, hook = recorder()
        summary = resolve_move(session, a, "N", hook)
        assert summary.steps == 2
        assert a.position == (3, 3)
