"""
peg_io/parser.py

Парсинг текстового описания позиции.
"""

import re
from typing import List

from core.board import Board
from core.utils import BOARD_SIZE, INVALID, HOLE, PEG, pos_to_index, is_valid_position
from utils.error_handling import InvalidBoardError


def _parse_positions(spec: str) -> List[tuple]:
    positions = []
    for pos in spec.split(','):
        pos = pos.strip()
        if not pos:
            continue
        try:
            row, col = pos_to_index(pos)
        except (ValueError, IndexError):
            raise InvalidBoardError(f"Неверная клетка: {pos!r}") from None
        if not is_valid_position(row, col):
            raise InvalidBoardError(f"Клетка вне доски: {pos}")
        positions.append((row, col))
    return positions


def parse_input(text: str) -> Board:
    """
    Парсит текстовый формат описания позиции.

    Формат: size=7x7 pegs=C1,D1,... empty=D4
    Клетки, не перечисленные ни в pegs, ни в empty, недоступны.

    Args:
        text: строка с описанием

    Returns:
        Board
    """
    size_match = re.search(r'size=(\d+)x(\d+)', text)
    pegs_match = re.search(r'pegs=([\w,]*)', text)
    empty_match = re.search(r'empty=([\w,]*)', text)

    if not size_match or not pegs_match or not empty_match:
        raise InvalidBoardError(
            "Неверный формат. Ожидается: size=7x7 pegs=A1,A2,... empty=D4"
        )

    rows, cols = int(size_match.group(1)), int(size_match.group(2))
    if (rows, cols) != (BOARD_SIZE, BOARD_SIZE):
        raise InvalidBoardError(f"Поддерживается только доска {BOARD_SIZE}x{BOARD_SIZE}")

    grid = [[INVALID for _ in range(cols)] for _ in range(rows)]
    for row, col in _parse_positions(pegs_match.group(1)):
        grid[row][col] = PEG
    for row, col in _parse_positions(empty_match.group(1)):
        grid[row][col] = HOLE

    return Board.from_grid(grid)
