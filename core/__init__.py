"""
core - Ядро Peg Solitaire

Доска, ход и генератор ходов.
"""

from .board import Board, Move, Position
from .moves import MoveGenerator, generate_moves
from .utils import (
    BOARD_SIZE, CENTER, JUMP_DIRECTIONS, PEG, HOLE, INVALID,
    grid_hash, index_to_pos, pos_to_index, count_pegs
)

__all__ = [
    'Board', 'Move', 'Position',
    'MoveGenerator', 'generate_moves',
    'BOARD_SIZE', 'CENTER', 'JUMP_DIRECTIONS', 'PEG', 'HOLE', 'INVALID',
    'grid_hash', 'index_to_pos', 'pos_to_index', 'count_pegs'
]
