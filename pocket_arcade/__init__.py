"""
Pocket Arcade - tic-tac-toe, an arcade shooter and a grid puzzle.
"""

__version__ = "0.1.0"
