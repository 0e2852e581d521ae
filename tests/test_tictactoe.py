"""
Tests for the tic-tac-toe engine.
"""
import pytest
from pocket_arcade.gameplay.tictactoe import (
    TicTacToeEngine, Player, GameStatus, TicTacToeSnapshot
)
from pocket_arcade.gameplay.constants import WINNING_LINES


def play(game: TicTacToeEngine, *moves: int) -> None:
    for index in moves:
        game.make_move(index)


class TestInitialState:
    """Tests for a fresh engine."""

    def test_new_game(self):
        """Board starts empty with X to move."""
        game = TicTacToeEngine()
        assert game.board == [None] * 9
        assert game.current_player == Player.X
        assert game.status == GameStatus.IN_PROGRESS
        assert game.winner is None
        assert game.winning_line is None
        assert game.x_score == 0 and game.o_score == 0

    def test_status_text(self):
        """Status line names whose turn it is."""
        game = TicTacToeEngine()
        assert game.status_text == "X's Turn"
        game.make_move(0)
        assert game.status_text == "O's Turn"


class TestMoves:
    """Tests for make_move."""

    def test_move_places_mark_and_toggles(self):
        """A legal move marks the cell and passes the turn."""
        game = TicTacToeEngine()
        game.make_move(4)

        assert game.board[4] == Player.X
        assert game.current_player == Player.O

    def test_occupied_cell_is_ignored(self):
        """Playing on an occupied cell changes nothing."""
        game = TicTacToeEngine()
        game.make_move(4)
        before = game.snapshot()

        game.make_move(4)

        assert game.snapshot() == before
        assert game.board[4] == Player.X

    @pytest.mark.parametrize("index", [-1, 9, 42])
    def test_out_of_range_is_ignored(self, index):
        """Indices outside 0-8 are silently ignored."""
        game = TicTacToeEngine()
        before = game.snapshot()

        game.make_move(index)

        assert game.snapshot() == before

    def test_cells_never_overwritten(self):
        """Hammering every cell repeatedly never replaces a mark."""
        game = TicTacToeEngine()
        seen = {}
        for index in [4, 4, 0, 4, 8, 0, 2, 6, 6, 1, 3, 5, 7]:
            game.make_move(index)
            for i, mark in enumerate(game.board):
                if i in seen:
                    assert mark == seen[i]
                elif mark is not None:
                    seen[i] = mark


class TestWinAndTie:
    """Tests for terminal states."""

    def test_top_row_win(self):
        """X completes the top row: [0,3,1,4,2]."""
        game = TicTacToeEngine()
        play(game, 0, 3, 1, 4, 2)

        assert game.status == GameStatus.WON
        assert game.winner == Player.X
        assert game.winning_line == (0, 1, 2)
        assert game.x_score == 1
        assert game.o_score == 0
        assert game.status_text == "X Wins!"

    def test_o_can_win(self):
        """O wins down the middle column."""
        game = TicTacToeEngine()
        play(game, 0, 1, 2, 4, 8, 7)

        assert game.status == GameStatus.WON
        assert game.winner == Player.O
        assert game.winning_line == (1, 4, 7)
        assert game.o_score == 1

    @pytest.mark.parametrize("line", WINNING_LINES)
    def test_every_line_wins(self, line):
        """Each of the 8 lines is recognised."""
        game = TicTacToeEngine()
        # O plays into cells outside the line, never completing its own
        others = [i for i in range(9) if i not in line]
        play(game, line[0], others[0], line[1], others[1], line[2])

        assert game.status == GameStatus.WON
        assert game.winner == Player.X
        assert game.winning_line == line

    def test_win_stops_turns(self):
        """After a win further moves are ignored and the turn stays put."""
        game = TicTacToeEngine()
        play(game, 0, 3, 1, 4, 2)
        before = game.snapshot()

        game.make_move(5)
        game.make_move(8)

        assert game.snapshot() == before
        assert game.current_player == Player.X

    def test_tie(self):
        """A full board with no line is a tie."""
        game = TicTacToeEngine()
        # X O X / X O O / O X X
        play(game, 0, 1, 2, 4, 3, 5, 7, 6, 8)

        assert game.status == GameStatus.TIED
        assert game.winner is None
        assert game.winning_line is None
        assert game.x_score == 0 and game.o_score == 0
        assert game.status_text == "It's a Tie!"
        assert game.is_game_over

    def test_win_on_last_cell_is_not_tie(self):
        """Filling the board with a winning move counts as a win."""
        game = TicTacToeEngine()
        # X O X / O X O / O X X -> last move 8 completes the diagonal
        play(game, 0, 1, 2, 3, 4, 5, 7, 6, 8)

        assert game.status == GameStatus.WON
        assert game.winning_line == (0, 4, 8)


class TestReset:
    """Tests for reset and reset_score."""

    def test_reset_keeps_scores(self):
        """reset clears the board but not the scoreboard."""
        game = TicTacToeEngine()
        play(game, 0, 3, 1, 4, 2)

        game.reset()

        assert game.board == [None] * 9
        assert game.current_player == Player.X
        assert game.status == GameStatus.IN_PROGRESS
        assert game.winner is None
        assert game.winning_line is None
        assert game.x_score == 1

    def test_reset_score_keeps_board(self):
        """reset_score zeroes scores without touching the board."""
        game = TicTacToeEngine()
        play(game, 0, 3, 1, 4, 2)
        game.reset()
        play(game, 4, 0)

        game.reset_score()

        assert game.x_score == 0 and game.o_score == 0
        assert game.board[4] == Player.X
        assert game.board[0] == Player.O

    def test_scores_accumulate(self):
        """Scores persist across several games."""
        game = TicTacToeEngine()
        for _ in range(3):
            play(game, 0, 3, 1, 4, 2)
            game.reset()

        assert game.x_score == 3
        assert game.score_for(Player.X) == 3
        assert game.score_for(Player.O) == 0


class TestSnapshots:
    """Tests for published state."""

    def test_snapshot_is_detached(self):
        """A snapshot doesn't change when the engine does."""
        game = TicTacToeEngine()
        snap = game.snapshot()
        game.make_move(0)

        assert isinstance(snap, TicTacToeSnapshot)
        assert snap.board[0] is None

    def test_listener_sees_each_move(self):
        """Subscribers get a snapshot after every accepted move."""
        game = TicTacToeEngine()
        received = []
        game.subscribe(received.append)

        play(game, 0, 0, 3)

        # The repeated move on cell 0 is a no-op and isn't published
        assert len(received) == 2
        assert received[-1].board[3] == Player.O
        assert received[-1].current_player == Player.X

    def test_reset_on_fresh_board_publishes_nothing(self):
        game = TicTacToeEngine()
        received = []
        game.subscribe(received.append)

        game.reset()

        assert received == []

    def test_reset_score_at_zero_publishes_nothing(self):
        game = TicTacToeEngine()
        game.make_move(4)
        received = []
        game.subscribe(received.append)

        game.reset_score()

        assert received == []

    def test_resets_publish_when_something_changes(self):
        """After a win both resets change state and notify."""
        game = TicTacToeEngine()
        play(game, 0, 3, 1, 4, 2)
        received = []
        game.subscribe(received.append)

        game.reset()
        game.reset_score()

        assert len(received) == 2
        assert received[0].x_score == 1
        assert received[1].x_score == 0
