"""
core/utils.py

Общие утилиты и константы для Peg Solitaire.
"""

from typing import List, Sequence, Tuple

# Размер доски
BOARD_SIZE = 7
CENTER: Tuple[int, int] = (3, 3)

# Состояния клетки
INVALID = -1    # Недоступная клетка (угол креста)
HOLE = 0        # Пустое место (можно прыгнуть)
PEG = 1         # Колышек

# Направления прыжка: вправо, влево, вниз, вверх.
# Порядок фиксирован — от него зависит, какое решение найдёт DFS.
JUMP_DIRECTIONS: List[Tuple[int, int]] = [(0, 1), (0, -1), (1, 0), (-1, 0)]

# Символы для отображения
CELL_SYMBOLS = {PEG: 'X', HOLE: 'o', INVALID: ' '}
SYMBOL_CELLS = {'X': PEG, 'o': HOLE, ' ': INVALID, '.': INVALID}

# Маска английского креста (1 — игровая клетка)
ENGLISH_MASK = (
    (0, 0, 1, 1, 1, 0, 0),
    (0, 0, 1, 1, 1, 0, 0),
    (1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1),
    (0, 0, 1, 1, 1, 0, 0),
    (0, 0, 1, 1, 1, 0, 0),
)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def grid_hash(grid: Sequence[Sequence[int]]) -> int:
    """
    Полиномиальный хеш сетки (основание 31, знаковые 32 бита).

    Сначала хешируется каждая строка, затем хеши строк сворачиваются
    тем же полиномом. Функция зависит от порядка клеток, но не свободна
    от коллизий.
    """
    h = 1
    for row in grid:
        row_h = 1
        for cell in row:
            row_h = _to_int32(31 * row_h + cell)
        h = _to_int32(31 * h + row_h)
    return h


def index_to_pos(row: int, col: int) -> str:
    """Индекс (row, col) → шахматная нотация (A1, B2, ...)."""
    return f"{chr(col + ord('A'))}{row + 1}"


def pos_to_index(pos: str) -> Tuple[int, int]:
    """Шахматная нотация → индекс."""
    col = ord(pos[0].upper()) - ord('A')
    row = int(pos[1:]) - 1
    return row, col


def count_pegs(grid: Sequence[Sequence[int]]) -> int:
    """Подсчёт количества колышков на доске."""
    return sum(row.count(PEG) for row in grid)


def is_valid_position(r: int, c: int, rows: int = BOARD_SIZE, cols: int = BOARD_SIZE) -> bool:
    """Проверяет, находится ли позиция в пределах доски."""
    return 0 <= r < rows and 0 <= c < cols
