"""
Tests for the snapshot publisher shared by all engines.
"""
from pocket_arcade.gameplay.tictactoe import TicTacToeEngine
from pocket_arcade.gameplay.puzzle import GridPuzzleEngine


class TestStatePublisher:
    """Tests for subscribe/unsubscribe."""

    def test_unsubscribe(self):
        """A removed listener hears nothing more."""
        game = TicTacToeEngine()
        received = []
        unsubscribe = game.subscribe(received.append)

        game.make_move(0)
        unsubscribe()
        game.make_move(1)

        assert len(received) == 1

    def test_unsubscribe_twice_is_harmless(self):
        game = TicTacToeEngine()
        unsubscribe = game.subscribe(lambda snap: None)
        unsubscribe()
        unsubscribe()

    def test_listener_may_unsubscribe_itself(self):
        """Unsubscribing during notification doesn't skip other listeners."""
        game = TicTacToeEngine()
        calls = []

        def once(snap):
            calls.append("once")
            unsubscribe_once()

        unsubscribe_once = game.subscribe(once)
        game.subscribe(lambda snap: calls.append("always"))

        game.make_move(0)
        game.make_move(1)

        assert calls == ["once", "always", "always"]

    def test_snapshot_matches_engine_after_each_call(self):
        """Whatever was published equals a fresh snapshot."""
        puzzle = GridPuzzleEngine(4)
        received = []
        puzzle.subscribe(received.append)

        puzzle.select_cell(0, 1)
        assert received[-1] == puzzle.snapshot()
        puzzle.input_number(4)
        assert received[-1] == puzzle.snapshot()
        puzzle.switch_level(6)
        assert received[-1] == puzzle.snapshot()
