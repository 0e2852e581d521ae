"""
Level definitions - hand-authored puzzle seeds per board size.
NO UI DEPENDENCIES.

Puzzles are not generated. Each size has one fixed layout of given cells,
written as (row, col, value).
"""
from typing import Dict, List, Tuple

Seed = List[Tuple[int, int, int]]


# 4x4 with 2x2 blocks
SEED_4X4: Seed = [
    (0, 0, 1), (0, 2, 3),
    (1, 1, 2), (1, 3, 4),
    (2, 0, 4), (2, 2, 1),
    (3, 1, 3), (3, 3, 2),
]

# 6x6 with 2x3 blocks
SEED_6X6: Seed = [
    (0, 0, 1), (0, 2, 3), (0, 4, 5),
    (1, 1, 2), (1, 3, 6), (1, 5, 4),
    (2, 0, 5), (2, 1, 4), (2, 3, 2),
    (3, 2, 6), (3, 4, 1), (3, 5, 3),
    (4, 0, 3), (4, 2, 2), (4, 4, 6),
    (5, 1, 1), (5, 3, 5), (5, 5, 2),
]

# Classic 9x9 with 3x3 blocks
SEED_9X9: Seed = [
    (0, 0, 5), (0, 1, 3), (0, 4, 7),
    (1, 0, 6), (1, 3, 1), (1, 4, 9), (1, 5, 5),
    (2, 1, 9), (2, 2, 8), (2, 7, 6),
    (3, 0, 8), (3, 4, 6), (3, 8, 3),
    (4, 0, 4), (4, 3, 8), (4, 5, 3), (4, 8, 1),
    (5, 0, 7), (5, 4, 2), (5, 8, 6),
    (6, 1, 6), (6, 6, 2), (6, 7, 8),
    (7, 3, 4), (7, 4, 1), (7, 5, 9), (7, 8, 5),
    (8, 4, 8), (8, 7, 7), (8, 8, 9),
]

PUZZLE_SEEDS: Dict[int, Seed] = {
    4: SEED_4X4,
    6: SEED_6X6,
    9: SEED_9X9,
}
