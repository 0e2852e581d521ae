"""
Grid puzzle (sudoku-style) board with live mistake highlighting.
NO UI DEPENDENCIES.
"""
import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List, Optional, Set, Tuple

from .constants import DEFAULT_PUZZLE_SIZE, SUB_BLOCK_DIMENSIONS
from .events import StatePublisher
from .puzzle_levels import PUZZLE_SEEDS, Seed

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


@dataclass
class Cell:
    """A single cell of the puzzle grid."""
    value: Optional[int] = None
    is_given: bool = False

    def is_empty(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class CellView:
    """Everything the renderer needs to draw one cell."""
    value: Optional[int]
    is_given: bool
    is_selected: bool
    is_wrong: bool


@dataclass(frozen=True)
class PuzzleSnapshot:
    """Read-only view handed to the renderer."""
    size: int
    values: Tuple[Tuple[Optional[int], ...], ...]
    givens: Tuple[Tuple[bool, ...], ...]
    selected_cell: Optional[Coord]
    invalid_cells: FrozenSet[Coord]

    @property
    def sub_block_dimensions(self) -> Tuple[int, int]:
        return SUB_BLOCK_DIMENSIONS[self.size]

    def cell_view(self, row: int, col: int) -> CellView:
        return CellView(
            value=self.values[row][col],
            is_given=self.givens[row][col],
            is_selected=self.selected_cell == (row, col),
            is_wrong=(row, col) in self.invalid_cells,
        )


class GridPuzzleEngine(StatePublisher):
    """
    N x N number-entry puzzle, N in {4, 6, 9}.

    Coordinate system:
    - (0, 0) is top-left
    - row increases downward, col to the right

    Only the cell just written is checked against its row, column and
    sub-block, so a mistake lights up as soon as it is typed. Peers are
    not re-checked and no full-board solve check is made.

    `seeds` maps board size to its given cells; sizes missing from it
    open as an empty board. Defaults to the shipped layouts.
    """

    def __init__(self, size: int = DEFAULT_PUZZLE_SIZE, seeds: Optional[Dict[int, Seed]] = None):
        super().__init__()
        self.seeds = seeds if seeds is not None else PUZZLE_SEEDS
        self.size = DEFAULT_PUZZLE_SIZE
        self.board: List[List[Cell]] = []
        self.selected_cell: Optional[Coord] = None
        self.invalid_cells: Set[Coord] = set()

        if size not in SUB_BLOCK_DIMENSIONS:
            size = DEFAULT_PUZZLE_SIZE
        self.switch_level(size)

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def switch_level(self, size: int) -> None:
        """Rebuild the board from the fixed seed for this size."""
        if size not in SUB_BLOCK_DIMENSIONS:
            return

        before = self.snapshot() if self.board else None
        self.size = size
        self.board = [[Cell() for _ in range(size)] for _ in range(size)]
        for row, col, value in self.seeds.get(size, ()):
            self.board[row][col] = Cell(value=value, is_given=True)

        self.selected_cell = None
        self.invalid_cells = set()
        logger.info(f"Puzzle level switched to {size}x{size}")
        if self.snapshot() != before:
            self._publish()

    def select_cell(self, row: int, col: int) -> None:
        """Select an editable cell. Given cells cannot be selected."""
        cell = self.get_cell(row, col)
        if cell is None or cell.is_given:
            return
        if self.selected_cell == (row, col):
            return

        self.selected_cell = (row, col)
        logger.debug(f"Selected cell ({row}, {col})")
        self._publish()

    def input_number(self, number: int) -> None:
        """Write number into the selected cell and re-check that cell."""
        target = self._editable_selection()
        if target is None:
            return
        if not 1 <= number <= self.size:
            return

        row, col = target
        is_wrong = not self.is_valid_placement(row, col, number)
        if self.board[row][col].value == number and is_wrong == (target in self.invalid_cells):
            return

        self.board[row][col].value = number
        if is_wrong:
            self.invalid_cells.add(target)
            logger.debug(f"{number} at ({row}, {col}) clashes with a peer")
        else:
            self.invalid_cells.discard(target)
        self._publish()

    def clear_selected(self) -> None:
        """Empty the selected cell."""
        target = self._editable_selection()
        if target is None:
            return

        row, col = target
        if self.board[row][col].is_empty():
            return

        self.board[row][col].value = None
        self.invalid_cells.discard(target)
        self._publish()

    # =========================================================================
    # RULES
    # =========================================================================

    @property
    def sub_block_dimensions(self) -> Tuple[int, int]:
        """(rows, cols) of one sub-block for the current size."""
        return SUB_BLOCK_DIMENSIONS[self.size]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at coordinates, or None if out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return self.board[row][col]

    def iter_peers(self, row: int, col: int) -> Iterator[Coord]:
        """
        Yield every coordinate sharing a row, column or sub-block with
        (row, col), excluding the cell itself. A coordinate may repeat.
        """
        for c in range(self.size):
            if c != col:
                yield (row, c)
        for r in range(self.size):
            if r != row:
                yield (r, col)

        block_rows, block_cols = self.sub_block_dimensions
        top = (row // block_rows) * block_rows
        left = (col // block_cols) * block_cols
        for r in range(top, top + block_rows):
            for c in range(left, left + block_cols):
                if (r, c) != (row, col):
                    yield (r, c)

    def is_valid_placement(self, row: int, col: int, number: int) -> bool:
        """True if no peer of (row, col) already holds number."""
        if not self.in_bounds(row, col):
            return False
        return all(self.board[r][c].value != number for r, c in self.iter_peers(row, col))

    # =========================================================================
    # STATE QUERIES
    # =========================================================================

    def cell_view(self, row: int, col: int) -> Optional[CellView]:
        if not self.in_bounds(row, col):
            return None
        return self.snapshot().cell_view(row, col)

    def snapshot(self) -> PuzzleSnapshot:
        return PuzzleSnapshot(
            size=self.size,
            values=tuple(tuple(cell.value for cell in row) for row in self.board),
            givens=tuple(tuple(cell.is_given for cell in row) for row in self.board),
            selected_cell=self.selected_cell,
            invalid_cells=frozenset(self.invalid_cells),
        )

    def _editable_selection(self) -> Optional[Coord]:
        if self.selected_cell is None:
            return None
        cell = self.get_cell(*self.selected_cell)
        if cell is None or cell.is_given:
            return None
        return self.selected_cell
