"""
peg_io/visualizer.py

Визуализация доски и решений.
"""

from typing import List, Optional

from core.board import Board, Move
from core.utils import CELL_SYMBOLS


def display_board(board: Board) -> str:
    """
    Форматирует доску с подписями столбцов и строк.

    Args:
        board: доска

    Returns:
        Строка для вывода
    """
    cols = len(board.grid[0]) if board.grid else 0
    header = "   " + " ".join(chr(c + ord('A')) for c in range(cols))
    lines = [header]

    for r, row in enumerate(board.grid):
        row_str = f"{r + 1:<2} " + " ".join(CELL_SYMBOLS[cell] for cell in row)
        lines.append(row_str.rstrip())

    return "\n".join(lines)


def format_move(move: Move) -> str:
    """Ход в нотации 'D2 → D4'."""
    return str(move)


def format_solution(moves: Optional[List[Move]]) -> str:
    """
    Форматирует список ходов для вывода.

    Args:
        moves: список ходов или None

    Returns:
        Форматированная строка
    """
    if not moves:
        return "Решение не найдено"

    lines = [f"Найдено решение за {len(moves)} ходов:"]
    for i, move in enumerate(moves, 1):
        lines.append(f"  {i:2}. {format_move(move)}")

    return "\n".join(lines)
