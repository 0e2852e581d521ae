"""
Input Handlers - Translate key presses and clicks into engine commands.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Optional, Tuple

import pygame

from pocket_arcade.gameplay.constants import PUZZLE_SIZES
from pocket_arcade.gameplay.puzzle import GridPuzzleEngine
from pocket_arcade.gameplay.shooter import ArcadeShooterEngine
from pocket_arcade.gameplay.tictactoe import TicTacToeEngine


# Number row and keypad digits
DIGIT_KEYS = {
    pygame.K_1: 1, pygame.K_2: 2, pygame.K_3: 3,
    pygame.K_4: 4, pygame.K_5: 5, pygame.K_6: 6,
    pygame.K_7: 7, pygame.K_8: 8, pygame.K_9: 9,
    pygame.K_KP1: 1, pygame.K_KP2: 2, pygame.K_KP3: 3,
    pygame.K_KP4: 4, pygame.K_KP5: 5, pygame.K_KP6: 6,
    pygame.K_KP7: 7, pygame.K_KP8: 8, pygame.K_KP9: 9,
}

CURSOR_KEYS = {
    pygame.K_UP: (-1, 0),
    pygame.K_DOWN: (1, 0),
    pygame.K_LEFT: (0, -1),
    pygame.K_RIGHT: (0, 1),
}

SHIP_SPEED = 300.0  # field units per second while an arrow is held


class InputHandler:
    """
    Base handler. handle_key() returns True when the app should quit.
    The renderer is only needed to map mouse clicks onto the board.
    """

    def __init__(self, engine, renderer=None):
        self.engine = engine
        self.renderer = renderer

    def handle_key(self, key: int) -> bool:
        if key == pygame.K_ESCAPE:
            return True
        self._on_key(key)
        return False

    def _on_key(self, key: int) -> None:
        pass

    def handle_click(self, pos: Tuple[int, int]) -> None:
        pass

    def handle_held_keys(self, dt: float, pressed=None) -> None:
        """
        Handle continuously held keys.
        Called every frame for smooth movement.
        """
        pass


class TicTacToeInput(InputHandler):
    """Digits 1-9 play a cell (row-major), N starts over, R clears scores."""

    engine: TicTacToeEngine

    def _on_key(self, key: int) -> None:
        if key in DIGIT_KEYS:
            self.engine.make_move(DIGIT_KEYS[key] - 1)
        elif key == pygame.K_n:
            self.engine.reset()
        elif key == pygame.K_r:
            self.engine.reset_score()

    def handle_click(self, pos: Tuple[int, int]) -> None:
        if self.renderer is None:
            return
        index = self.renderer.cell_at(pos)
        if index is not None:
            self.engine.make_move(index)


class ShooterInput(InputHandler):
    """Arrows steer, Space fires, R restarts a finished match."""

    engine: ArcadeShooterEngine

    def _on_key(self, key: int) -> None:
        if key == pygame.K_SPACE:
            self.engine.fire()
        elif key == pygame.K_r and self.engine.is_finished:
            self.engine.reset()

    def handle_held_keys(self, dt: float, pressed=None) -> None:
        if pressed is None:
            pressed = pygame.key.get_pressed()

        direction = 0
        if pressed[pygame.K_LEFT]:
            direction -= 1
        if pressed[pygame.K_RIGHT]:
            direction += 1
        if direction:
            self.engine.set_player_position(self.engine.player_x + direction * SHIP_SPEED * dt)


class PuzzleInput(InputHandler):
    """
    Arrows move a cursor that selects editable cells, digits fill,
    Backspace/Delete/0 clears, Tab cycles board sizes.
    """

    engine: GridPuzzleEngine

    def __init__(self, engine: GridPuzzleEngine, renderer=None):
        super().__init__(engine, renderer)
        self.cursor = (0, 0)

    def _on_key(self, key: int) -> None:
        if key in CURSOR_KEYS:
            self._move_cursor(*CURSOR_KEYS[key])
        elif key in DIGIT_KEYS:
            self.engine.input_number(DIGIT_KEYS[key])
        elif key in (pygame.K_BACKSPACE, pygame.K_DELETE, pygame.K_0, pygame.K_KP0):
            self.engine.clear_selected()
        elif key == pygame.K_TAB:
            self._cycle_level()

    def handle_click(self, pos: Tuple[int, int]) -> None:
        if self.renderer is None:
            return
        coord = self.renderer.cell_at(pos)
        if coord is not None:
            self.cursor = coord
            self.engine.select_cell(*coord)

    def _move_cursor(self, d_row: int, d_col: int) -> None:
        size = self.engine.size
        row = max(0, min(size - 1, self.cursor[0] + d_row))
        col = max(0, min(size - 1, self.cursor[1] + d_col))
        self.cursor = (row, col)
        # Given cells are skipped over by the engine; selection stays put
        self.engine.select_cell(row, col)

    def _cycle_level(self) -> None:
        index = PUZZLE_SIZES.index(self.engine.size)
        next_size = PUZZLE_SIZES[(index + 1) % len(PUZZLE_SIZES)]
        self.engine.switch_level(next_size)
        self.cursor = (0, 0)


def create_input_handler(engine, renderer=None) -> Optional[InputHandler]:
    """Pick the handler class matching an engine instance."""
    if isinstance(engine, TicTacToeEngine):
        return TicTacToeInput(engine, renderer)
    if isinstance(engine, ArcadeShooterEngine):
        return ShooterInput(engine, renderer)
    if isinstance(engine, GridPuzzleEngine):
        return PuzzleInput(engine, renderer)
    return None
