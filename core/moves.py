"""
core/moves.py

Генератор допустимых ходов.
"""

from typing import List

from .board import Board, Move
from .utils import BOARD_SIZE, JUMP_DIRECTIONS, HOLE, PEG, is_valid_position


def generate_moves(board: Board) -> List[Move]:
    """
    Генерирует все допустимые ходы.

    Клетки обходятся построчно, для каждого колышка направления
    проверяются в порядке JUMP_DIRECTIONS (вправо, влево, вниз, вверх).
    Порядок детерминирован: он определяет, какой выигрышный ход найдёт DFS.
    """
    grid = board.grid
    moves: List[Move] = []
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if grid[r][c] != PEG:
                continue
            for dr, dc in JUMP_DIRECTIONS:
                r2, c2 = r + 2 * dr, c + 2 * dc
                if not is_valid_position(r2, c2):
                    continue
                if grid[r + dr][c + dc] == PEG and grid[r2][c2] == HOLE:
                    moves.append(Move((r, c), (r2, c2)))
    return moves


class MoveGenerator:
    """Объектная обёртка над generate_moves для подстановки в решатели."""

    def generate(self, board: Board) -> List[Move]:
        return generate_moves(board)
