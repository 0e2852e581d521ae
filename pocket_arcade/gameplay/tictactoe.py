"""
Tic-tac-toe rules and state.
NO UI DEPENDENCIES.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple

from .constants import BOARD_CELLS, WINNING_LINES
from .events import StatePublisher

logger = logging.getLogger(__name__)


class Player(Enum):
    """The two marks. Value is the text drawn on the board."""
    X = "X"
    O = "O"

    def other(self) -> 'Player':
        return Player.O if self is Player.X else Player.X


class GameStatus(Enum):
    """Exactly one of these holds at any time."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()


@dataclass(frozen=True)
class TicTacToeSnapshot:
    """Read-only view handed to the renderer."""
    board: Tuple[Optional[Player], ...]
    current_player: Player
    status: GameStatus
    winner: Optional[Player]
    winning_line: Optional[Tuple[int, int, int]]
    x_score: int
    o_score: int
    status_text: str


class TicTacToeEngine(StatePublisher):
    """
    3x3 turn-based game with win/tie detection and running scores.

    Invalid input (bad index, occupied cell, finished game) is ignored
    without raising. Scores survive reset() until reset_score().

    Usage:
        game = TicTacToeEngine()
        game.make_move(4)
        snap = game.snapshot()
    """

    def __init__(self):
        super().__init__()
        self.board: List[Optional[Player]] = [None] * BOARD_CELLS
        self.current_player = Player.X
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.winning_line: Optional[Tuple[int, int, int]] = None
        self.x_score = 0
        self.o_score = 0

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def make_move(self, index: int) -> None:
        """Place the current player's mark at index (0-8, row-major)."""
        if self.is_game_over:
            return
        if not 0 <= index < BOARD_CELLS or self.board[index] is not None:
            return

        mover = self.current_player
        self.board[index] = mover
        logger.debug(f"{mover.value} takes cell {index}")

        line = self._find_winning_line(index, mover)
        if line is not None:
            self.status = GameStatus.WON
            self.winner = mover
            self.winning_line = line
            self._add_point(mover)
            logger.info(f"{mover.value} wins on {line} (X {self.x_score} - O {self.o_score})")
        elif all(cell is not None for cell in self.board):
            self.status = GameStatus.TIED
            logger.info("Board full, game tied")
        else:
            self.current_player = mover.other()

        self._publish()

    def reset(self) -> None:
        """Clear the board for a new game. Scores are kept."""
        if self._is_fresh_board():
            return

        self.board = [None] * BOARD_CELLS
        self.current_player = Player.X
        self.status = GameStatus.IN_PROGRESS
        self.winner = None
        self.winning_line = None
        logger.info("New tic-tac-toe game")
        self._publish()

    def reset_score(self) -> None:
        """Zero both scores; the board is left alone."""
        if self.x_score == 0 and self.o_score == 0:
            return

        self.x_score = 0
        self.o_score = 0
        self._publish()

    # =========================================================================
    # STATE QUERIES
    # =========================================================================

    @property
    def is_game_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def status_text(self) -> str:
        """Headline for the scoreboard."""
        if self.status is GameStatus.WON:
            return f"{self.winner.value} Wins!"
        if self.status is GameStatus.TIED:
            return "It's a Tie!"
        return f"{self.current_player.value}'s Turn"

    def score_for(self, player: Player) -> int:
        return self.x_score if player is Player.X else self.o_score

    def snapshot(self) -> TicTacToeSnapshot:
        return TicTacToeSnapshot(
            board=tuple(self.board),
            current_player=self.current_player,
            status=self.status,
            winner=self.winner,
            winning_line=self.winning_line,
            x_score=self.x_score,
            o_score=self.o_score,
            status_text=self.status_text,
        )

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _find_winning_line(self, index: int, player: Player) -> Optional[Tuple[int, int, int]]:
        # Only lines through the new mark can have just been completed
        for line in WINNING_LINES:
            if index in line and all(self.board[i] is player for i in line):
                return line
        return None

    def _is_fresh_board(self) -> bool:
        return (
            self.status is GameStatus.IN_PROGRESS
            and self.current_player is Player.X
            and all(cell is None for cell in self.board)
        )

    def _add_point(self, player: Player) -> None:
        if player is Player.X:
            self.x_score += 1
        else:
            self.o_score += 1
