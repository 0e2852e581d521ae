"""
Renderers - read engine snapshots and draw them with pygame.
This is a THIN ADAPTER - no game logic here.

Each renderer subscribes to its engine and keeps the latest snapshot;
render() only ever draws from that snapshot.
"""
from typing import Optional, Tuple

import pygame

from pocket_arcade.gameplay.constants import BOTTOM_BOUNDARY, MUZZLE_Y, TOP_BOUNDARY
from pocket_arcade.gameplay.puzzle import GridPuzzleEngine, PuzzleSnapshot
from pocket_arcade.gameplay.shooter import ArcadeShooterEngine, ShooterSnapshot
from pocket_arcade.gameplay.tictactoe import (
    GameStatus, Player, TicTacToeEngine, TicTacToeSnapshot
)


# Colors
BG_COLOR = (12, 12, 24)
COLOR_TEXT = (220, 220, 230)
COLOR_DIM = (110, 110, 130)
COLOR_GRID = (150, 80, 200)
COLOR_X = (0, 230, 255)
COLOR_O = (255, 90, 180)
COLOR_WIN = (255, 255, 120)
COLOR_SHIP = (100, 255, 140)
COLOR_PROJECTILE = (255, 240, 120)
COLOR_OBSTACLE = (170, 130, 100)
COLOR_GIVEN = (230, 230, 240)
COLOR_ENTRY = (120, 200, 255)
COLOR_WRONG = (255, 80, 80)
COLOR_SELECTED = (60, 60, 110)
COLOR_WON = (100, 255, 100)
COLOR_LOST = (255, 100, 100)

HUD_HEIGHT = 64
FONT_SIZE = 28

PLAYER_COLORS = {
    Player.X: COLOR_X,
    Player.O: COLOR_O,
}


class Renderer:
    """Shared pygame plumbing: a surface, a font, and text helpers."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self.font = pygame.font.SysFont("monospace", FONT_SIZE, bold=True)
        self.small_font = pygame.font.SysFont("monospace", FONT_SIZE // 2)

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def put_string(self, x: int, y: int, text: str, color, small: bool = False, center: bool = False):
        font = self.small_font if small else self.font
        image = font.render(text, True, color)
        rect = image.get_rect()
        if center:
            rect.center = (x, y)
        else:
            rect.topleft = (x, y)
        self.surface.blit(image, rect)

    def render(self):
        raise NotImplementedError


class TicTacToeRenderer(Renderer):
    """Scoreboard, status line and the 3x3 board."""

    def __init__(self, surface: pygame.Surface, engine: TicTacToeEngine):
        super().__init__(surface)
        self.snapshot: TicTacToeSnapshot = engine.snapshot()
        engine.subscribe(self._on_state)

    def _on_state(self, snapshot: TicTacToeSnapshot):
        self.snapshot = snapshot

    def board_rect(self) -> pygame.Rect:
        side = min(self.width, self.height - 2 * HUD_HEIGHT) - 40
        rect = pygame.Rect(0, 0, side, side)
        rect.center = (self.width // 2, self.height // 2 + HUD_HEIGHT // 2)
        return rect

    def cell_at(self, pos: Tuple[int, int]) -> Optional[int]:
        """Board index under a screen position, or None."""
        rect = self.board_rect()
        if not rect.collidepoint(pos):
            return None
        cell = rect.width / 3
        col = int((pos[0] - rect.left) // cell)
        row = int((pos[1] - rect.top) // cell)
        return row * 3 + col

    def render(self):
        snap = self.snapshot
        self.surface.fill(BG_COLOR)

        # Scoreboard
        self.put_string(self.width // 4, 20, f"X {snap.x_score}", COLOR_X, center=True)
        self.put_string(self.width // 2, 20, "VS", COLOR_DIM, center=True)
        self.put_string(3 * self.width // 4, 20, f"O {snap.o_score}", COLOR_O, center=True)

        status_color = PLAYER_COLORS[snap.current_player]
        if snap.status is GameStatus.WON:
            status_color = COLOR_WIN
        self.put_string(self.width // 2, HUD_HEIGHT, snap.status_text, status_color, center=True)

        rect = self.board_rect()
        cell = rect.width / 3
        for i in (1, 2):
            offset = int(i * cell)
            pygame.draw.line(self.surface, COLOR_GRID,
                             (rect.left + offset, rect.top), (rect.left + offset, rect.bottom), 3)
            pygame.draw.line(self.surface, COLOR_GRID,
                             (rect.left, rect.top + offset), (rect.right, rect.top + offset), 3)

        winning = snap.winning_line or ()
        for index, mark in enumerate(snap.board):
            if mark is None:
                continue
            row, col = divmod(index, 3)
            center = (int(rect.left + (col + 0.5) * cell), int(rect.top + (row + 0.5) * cell))
            color = COLOR_WIN if index in winning else PLAYER_COLORS[mark]
            self.put_string(center[0], center[1], mark.value, color, center=True)

        self.put_string(10, self.height - 24,
                        "1-9/click: move  N: new game  R: reset score  Esc: quit",
                        COLOR_DIM, small=True)


class ShooterRenderer(Renderer):
    """Field, ship, projectiles, rocks and the score/lives HUD."""

    def __init__(self, surface: pygame.Surface, engine: ArcadeShooterEngine):
        super().__init__(surface)
        self.snapshot: ShooterSnapshot = engine.snapshot()
        engine.subscribe(self._on_state)

    def _on_state(self, snapshot: ShooterSnapshot):
        self.snapshot = snapshot

    def to_screen(self, x: float, y: float) -> Tuple[int, int]:
        """Map field coordinates onto the window below the HUD."""
        half = self.snapshot.field_width / 2
        sx = (x + half) / self.snapshot.field_width * self.width
        field_height = BOTTOM_BOUNDARY - TOP_BOUNDARY
        sy = HUD_HEIGHT + (y - TOP_BOUNDARY) / field_height * (self.height - HUD_HEIGHT)
        return int(sx), int(sy)

    def scale(self, length: float) -> int:
        return max(1, int(length / self.snapshot.field_width * self.width))

    def render(self):
        snap = self.snapshot
        self.surface.fill(BG_COLOR)

        for obstacle in snap.obstacles:
            pygame.draw.circle(self.surface, COLOR_OBSTACLE,
                               self.to_screen(obstacle.x, obstacle.y), self.scale(obstacle.size / 2))

        for projectile in snap.projectiles:
            px, py = self.to_screen(projectile.x, projectile.y)
            pygame.draw.rect(self.surface, COLOR_PROJECTILE, pygame.Rect(px - 2, py - 8, 4, 16))

        sx, sy = self.to_screen(snap.player_x, MUZZLE_Y)
        pygame.draw.polygon(self.surface, COLOR_SHIP, [(sx, sy), (sx - 14, sy + 30), (sx + 14, sy + 30)])

        # HUD
        self.put_string(10, 10, f"Score: {snap.score}", COLOR_TEXT)
        self.put_string(self.width - 170, 10, f"Lives: {snap.lives}", COLOR_LOST)

        if snap.is_over or snap.has_won:
            title = "VICTORY!" if snap.has_won else "GAME OVER"
            color = COLOR_WON if snap.has_won else COLOR_LOST
            mid = self.height // 2
            self.put_string(self.width // 2, mid - 40, title, color, center=True)
            self.put_string(self.width // 2, mid, snap.end_reason or "", COLOR_TEXT, center=True)
            self.put_string(self.width // 2, mid + 40, f"Final Score: {snap.score}", COLOR_X, center=True)
            self.put_string(self.width // 2, mid + 80, "R: play again", COLOR_DIM, small=True, center=True)
        else:
            self.put_string(10, self.height - 24, "Left/Right: move  Space: fire  Esc: quit",
                            COLOR_DIM, small=True)


class PuzzleRenderer(Renderer):
    """Board with sub-block borders, highlights and the level indicator."""

    def __init__(self, surface: pygame.Surface, engine: GridPuzzleEngine):
        super().__init__(surface)
        self.snapshot: PuzzleSnapshot = engine.snapshot()
        engine.subscribe(self._on_state)

    def _on_state(self, snapshot: PuzzleSnapshot):
        self.snapshot = snapshot

    def board_rect(self) -> pygame.Rect:
        side = min(self.width, self.height - 2 * HUD_HEIGHT) - 40
        rect = pygame.Rect(0, 0, side, side)
        rect.center = (self.width // 2, self.height // 2)
        return rect

    def cell_at(self, pos: Tuple[int, int]) -> Optional[Tuple[int, int]]:
        """(row, col) under a screen position, or None."""
        rect = self.board_rect()
        if not rect.collidepoint(pos):
            return None
        cell = rect.width / self.snapshot.size
        return int((pos[1] - rect.top) // cell), int((pos[0] - rect.left) // cell)

    def render(self):
        snap = self.snapshot
        size = snap.size
        self.surface.fill(BG_COLOR)
        self.put_string(self.width // 2, 24, f"Grid Puzzle {size}x{size}", COLOR_TEXT, center=True)

        rect = self.board_rect()
        cell = rect.width / size

        for row in range(size):
            for col in range(size):
                view = snap.cell_view(row, col)
                cell_rect = pygame.Rect(int(rect.left + col * cell), int(rect.top + row * cell),
                                        int(cell) + 1, int(cell) + 1)
                if view.is_selected:
                    pygame.draw.rect(self.surface, COLOR_SELECTED, cell_rect)
                if view.value is None:
                    continue
                if view.is_given:
                    color = COLOR_GIVEN
                elif view.is_wrong:
                    color = COLOR_WRONG
                else:
                    color = COLOR_ENTRY
                self.put_string(cell_rect.centerx, cell_rect.centery, str(view.value), color, center=True)

        block_rows, block_cols = snap.sub_block_dimensions
        for i in range(size + 1):
            offset = int(i * cell)
            width = 3 if i % block_cols == 0 else 1
            pygame.draw.line(self.surface, COLOR_GRID,
                             (rect.left + offset, rect.top), (rect.left + offset, rect.bottom), width)
            width = 3 if i % block_rows == 0 else 1
            pygame.draw.line(self.surface, COLOR_GRID,
                             (rect.left, rect.top + offset), (rect.right, rect.top + offset), width)

        self.put_string(10, self.height - 24,
                        f"Arrows/click: select  1-{size}: enter  Backspace: clear  Tab: level",
                        COLOR_DIM, small=True)
