"""
Tests for the keyboard adapters.

Only pygame key constants are used; no window is opened.
"""
import random

import pygame
import pytest

from pocket_arcade.gameplay.puzzle import GridPuzzleEngine
from pocket_arcade.gameplay.shooter import ArcadeShooterEngine
from pocket_arcade.gameplay.tictactoe import Player, TicTacToeEngine
from pocket_arcade.ui.input_handler import (
    PuzzleInput, ShooterInput, TicTacToeInput, SHIP_SPEED, create_input_handler
)


class Pressed:
    """Stand-in for pygame.key.get_pressed()."""

    def __init__(self, *keys):
        self.keys = set(keys)

    def __getitem__(self, key):
        return key in self.keys


class TestFactory:
    def test_picks_matching_handler(self):
        assert isinstance(create_input_handler(TicTacToeEngine()), TicTacToeInput)
        assert isinstance(create_input_handler(ArcadeShooterEngine()), ShooterInput)
        assert isinstance(create_input_handler(GridPuzzleEngine()), PuzzleInput)
        assert create_input_handler(object()) is None

    def test_escape_quits(self):
        handler = create_input_handler(TicTacToeEngine())
        assert handler.handle_key(pygame.K_ESCAPE)
        assert not handler.handle_key(pygame.K_5)


class TestTicTacToeInput:
    def test_digits_play_cells(self):
        game = TicTacToeEngine()
        handler = TicTacToeInput(game)

        handler.handle_key(pygame.K_1)
        handler.handle_key(pygame.K_KP9)

        assert game.board[0] == Player.X
        assert game.board[8] == Player.O

    def test_new_game_and_reset_score(self):
        game = TicTacToeEngine()
        handler = TicTacToeInput(game)
        for key in (pygame.K_1, pygame.K_4, pygame.K_2, pygame.K_5, pygame.K_3):
            handler.handle_key(key)
        assert game.x_score == 1

        handler.handle_key(pygame.K_n)
        assert game.board == [None] * 9
        assert game.x_score == 1

        handler.handle_key(pygame.K_r)
        assert game.x_score == 0

    def test_click_without_renderer_ignored(self):
        game = TicTacToeEngine()
        TicTacToeInput(game).handle_click((10, 10))
        assert game.board == [None] * 9


class TestShooterInput:
    @pytest.fixture
    def engine(self):
        return ArcadeShooterEngine(field_width=400, rng=random.Random(5))

    def test_space_fires(self, engine):
        ShooterInput(engine).handle_key(pygame.K_SPACE)
        assert len(engine.projectiles) == 1

    def test_held_arrows_move_ship(self, engine):
        handler = ShooterInput(engine)

        handler.handle_held_keys(0.1, Pressed(pygame.K_RIGHT))
        assert engine.player_x == pytest.approx(SHIP_SPEED * 0.1)

        handler.handle_held_keys(0.1, Pressed(pygame.K_LEFT, pygame.K_RIGHT))
        assert engine.player_x == pytest.approx(SHIP_SPEED * 0.1)

        handler.handle_held_keys(0.2, Pressed(pygame.K_LEFT))
        assert engine.player_x == pytest.approx(-SHIP_SPEED * 0.1)

    def test_restart_only_when_finished(self, engine):
        handler = ShooterInput(engine)
        engine.score = 50

        handler.handle_key(pygame.K_r)
        assert engine.score == 50

        engine.lives = 0
        engine.tick()
        assert engine.is_over
        handler.handle_key(pygame.K_r)
        assert not engine.is_over
        assert engine.score == 0


class TestPuzzleInput:
    def test_arrows_select_and_digits_fill(self):
        puzzle = GridPuzzleEngine(4)
        handler = PuzzleInput(puzzle)

        handler.handle_key(pygame.K_RIGHT)
        assert handler.cursor == (0, 1)
        assert puzzle.selected_cell == (0, 1)

        handler.handle_key(pygame.K_4)
        assert puzzle.board[0][1].value == 4

        handler.handle_key(pygame.K_BACKSPACE)
        assert puzzle.board[0][1].value is None

    def test_cursor_over_given_keeps_selection(self):
        puzzle = GridPuzzleEngine(4)
        handler = PuzzleInput(puzzle)
        handler.handle_key(pygame.K_RIGHT)   # (0,1) editable
        handler.handle_key(pygame.K_RIGHT)   # (0,2) given

        assert handler.cursor == (0, 2)
        assert puzzle.selected_cell == (0, 1)

    def test_cursor_stays_on_board(self):
        puzzle = GridPuzzleEngine(4)
        handler = PuzzleInput(puzzle)
        handler.handle_key(pygame.K_UP)
        handler.handle_key(pygame.K_LEFT)
        assert handler.cursor == (0, 0)

    def test_tab_cycles_levels(self):
        puzzle = GridPuzzleEngine(4)
        handler = PuzzleInput(puzzle)

        sizes = []
        for _ in range(3):
            handler.handle_key(pygame.K_TAB)
            sizes.append(puzzle.size)

        assert sizes == [6, 9, 4]
