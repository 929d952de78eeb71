"""
core/board.py

Иммутабельная доска 7×7 и ход-прыжок.
"""

from typing import NamedTuple, Optional, Sequence, Tuple

from .utils import (
    BOARD_SIZE, CENTER, ENGLISH_MASK, INVALID, HOLE, PEG,
    CELL_SYMBOLS, SYMBOL_CELLS, count_pegs, grid_hash, index_to_pos,
    is_valid_position,
)
from utils.error_handling import IllegalMoveError, InvalidBoardError, validate_board

Position = Tuple[int, int]
Grid = Tuple[Tuple[int, ...], ...]


class Move(NamedTuple):
    """Прыжок from_pos → to_pos через соседнюю клетку."""
    from_pos: Position
    to_pos: Position

    @property
    def jumped(self) -> Position:
        """Клетка, с которой снимается колышек (середина прыжка)."""
        return ((self.from_pos[0] + self.to_pos[0]) // 2,
                (self.from_pos[1] + self.to_pos[1]) // 2)

    def __str__(self) -> str:
        return f"{index_to_pos(*self.from_pos)} → {index_to_pos(*self.to_pos)}"


class Board:
    """
    Иммутабельное представление доски.

    Хранит сетку 7×7 (INVALID/HOLE/PEG) и счётчик колышков, который
    обновляется инкрементально при каждом ходе. Любой ход возвращает
    новую доску, исходная не меняется.
    """
    __slots__ = ('grid', 'remaining_pegs', '_hash')

    def __init__(self, grid: Grid, remaining_pegs: int):
        self.grid = grid
        self.remaining_pegs = remaining_pegs
        self._hash: Optional[int] = None

    @classmethod
    def initial(cls) -> 'Board':
        """Стандартная английская доска: 32 колышка, пустой центр."""
        grid = tuple(
            tuple(
                INVALID if not ENGLISH_MASK[r][c]
                else HOLE if (r, c) == CENTER
                else PEG
                for c in range(BOARD_SIZE)
            )
            for r in range(BOARD_SIZE)
        )
        return cls(grid, 32)

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> 'Board':
        """Создаёт доску из сетки значений с проверкой."""
        frozen = tuple(tuple(row) for row in grid)
        pegs = count_pegs(frozen)
        validate_board(frozen, pegs, BOARD_SIZE)
        return cls(frozen, pegs)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Создаёт доску из текстовых строк.

        Символы: 'X' — колышек, 'o' — дырка, ' ' или '.' — недоступная клетка.
        Короткие строки дополняются недоступными клетками справа.
        """
        if len(rows) != BOARD_SIZE:
            raise InvalidBoardError(f"Ожидается {BOARD_SIZE} строк, получено {len(rows)}")
        grid = []
        for row in rows:
            if len(row) > BOARD_SIZE:
                raise InvalidBoardError(f"Слишком длинная строка: {row!r}")
            try:
                grid.append([SYMBOL_CELLS[ch] for ch in row.ljust(BOARD_SIZE)])
            except KeyError as e:
                raise InvalidBoardError(f"Неизвестный символ {e.args[0]!r}") from None
        return cls.from_grid(grid)

    def cell(self, row: int, col: int) -> int:
        """Значение клетки; вне доски — INVALID."""
        if not is_valid_position(row, col):
            return INVALID
        return self.grid[row][col]

    def peg_count(self) -> int:
        """Количество колышков — O(1)."""
        return self.remaining_pegs

    def has_won(self) -> bool:
        """Победа: один колышек, и он в центре."""
        return self.remaining_pegs == 1 and self.grid[CENTER[0]][CENTER[1]] == PEG

    def is_legal(self, move: Move) -> bool:
        """Проверка допустимости хода."""
        (fr, fc), (tr, tc) = move
        if sorted((abs(tr - fr), abs(tc - fc))) != [0, 2]:
            return False
        jr, jc = move.jumped
        return (
            self.cell(fr, fc) == PEG and
            self.cell(jr, jc) == PEG and
            self.cell(tr, tc) == HOLE
        )

    def apply(self, move: Move) -> 'Board':
        """
        Возвращает новую доску после хода.

        Raises:
            IllegalMoveError: если ход недопустим для этой доски
        """
        if not self.is_legal(move):
            raise IllegalMoveError(f"Недопустимый ход {move} для {self!r}")

        (fr, fc), (tr, tc) = move
        jr, jc = move.jumped
        rows = [list(row) for row in self.grid]
        rows[fr][fc] = HOLE
        rows[jr][jc] = HOLE
        rows[tr][tc] = PEG
        return Board(tuple(tuple(row) for row in rows), self.remaining_pegs - 1)

    def position_hash(self) -> int:
        """Детерминированный хеш всей сетки (ключ таблицы транспозиций)."""
        if self._hash is None:
            self._hash = grid_hash(self.grid)
        return self._hash

    def render(self) -> str:
        """Текстовое представление в рамке: X — колышек, o — дырка."""
        border = " " + "-" * 15
        lines = [border]
        for row in self.grid:
            lines.append("| " + "".join(CELL_SYMBOLS[cell] + " " for cell in row) + "|")
        lines.append(border)
        return "\n".join(lines)

    def __hash__(self) -> int:
        return self.position_hash()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.grid == other.grid

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board({self.remaining_pegs} pegs)"
