"""
Game engines for Pocket Arcade.
Nothing under this package imports a UI library.
"""

from pocket_arcade.gameplay.tictactoe import TicTacToeEngine, Player, GameStatus
from pocket_arcade.gameplay.shooter import ArcadeShooterEngine, Projectile, Obstacle
from pocket_arcade.gameplay.puzzle import GridPuzzleEngine, Cell
from pocket_arcade.gameplay.scheduler import FixedStepScheduler

__all__ = [
    "TicTacToeEngine",
    "Player",
    "GameStatus",
    "ArcadeShooterEngine",
    "Projectile",
    "Obstacle",
    "GridPuzzleEngine",
    "Cell",
    "FixedStepScheduler",
]
