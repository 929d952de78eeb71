"""
utils/error_handling.py

Иерархия исключений и обработка ошибок решателя.
"""

from typing import Any, Sequence

from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidBoardError(SolverError):
    """Ошибка невалидной доски."""
    pass


class IllegalMoveError(SolverError):
    """Ход не допустим для данной доски."""
    pass


class NoSolutionError(SolverError):
    """Ошибка отсутствия решения."""
    pass


def safe_search(solver, board, default: Any = None):
    """
    Безопасное выполнение search с обработкой ошибок решателя.

    Args:
        solver: решатель
        board: доска
        default: значение по умолчанию при ошибке

    Returns:
        SearchResult или default
    """
    try:
        return solver.search(board)
    except SolverError as e:
        logger = get_logger()
        logger.error(f"Ошибка решателя {solver.__class__.__name__}: {str(e)}")
        return default


def validate_board(grid: Sequence[Sequence[int]], remaining_pegs: int,
                   size: int = 7) -> bool:
    """
    Валидирует сетку доски.

    Args:
        grid: сетка size×size из значений INVALID/HOLE/PEG
        remaining_pegs: заявленное количество колышков
        size: размер стороны доски

    Returns:
        True если доска валидна

    Raises:
        InvalidBoardError: если доска невалидна
    """
    if grid is None:
        raise InvalidBoardError("Доска не может быть None")

    if len(grid) != size or any(len(row) != size for row in grid):
        raise InvalidBoardError(f"Доска должна быть {size}x{size}")

    pegs = 0
    for row in grid:
        for cell in row:
            if cell not in (-1, 0, 1):
                raise InvalidBoardError(f"Неизвестное значение клетки: {cell!r}")
            if cell == 1:
                pegs += 1

    if pegs != remaining_pegs:
        raise InvalidBoardError(
            f"Счётчик колышков ({remaining_pegs}) не совпадает с доской ({pegs})"
        )

    return True
