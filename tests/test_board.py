"""
tests/test_board.py

Тесты для Board: начальная позиция, ходы, победа, хеш, отрисовка.
"""

import pytest

from core.board import Board, Move
from core.moves import generate_moves
from core.utils import PEG, HOLE, INVALID, CENTER, count_pegs, grid_hash
from utils.error_handling import IllegalMoveError, InvalidBoardError


def _board_with_pegs(*pegs, holes=()):
    """Английский крест, где колышки только в pegs, остальное — дырки."""
    rows = [list(row) for row in Board.initial().grid]
    for r in range(7):
        for c in range(7):
            if rows[r][c] != INVALID:
                rows[r][c] = HOLE
    for r, c in pegs:
        rows[r][c] = PEG
    return Board.from_grid(rows)


def test_initial_board():
    """Начальная доска: 32 колышка, пустой центр, 16 недоступных углов."""
    board = Board.initial()

    assert board.remaining_pegs == 32
    assert count_pegs(board.grid) == 32
    assert board.cell(*CENTER) == HOLE
    assert sum(row.count(INVALID) for row in board.grid) == 16
    assert not board.has_won()


def test_apply_move_into_center():
    """Ход сверху в центр: 31 колышек, центр занят, победы нет."""
    board = Board.initial()
    move = Move((1, 3), (3, 3))

    new_board = board.apply(move)

    assert new_board.remaining_pegs == 31
    assert new_board.cell(3, 3) == PEG
    assert new_board.cell(2, 3) == HOLE
    assert new_board.cell(1, 3) == HOLE
    assert not new_board.has_won()


def test_apply_does_not_mutate_receiver():
    board = Board.initial()
    before = board.grid

    board.apply(Move((3, 1), (3, 3)))

    assert board.grid == before
    assert board.remaining_pegs == 32
    assert board.cell(3, 3) == HOLE


def test_apply_rejects_jump_over_hole():
    """(2,3) → (4,3) на начальной доске: середина пуста, цель занята."""
    board = Board.initial()

    with pytest.raises(IllegalMoveError):
        board.apply(Move((2, 3), (4, 3)))


@pytest.mark.parametrize("move", [
    Move((3, 1), (3, 2)),   # шаг на одну клетку
    Move((1, 2), (3, 4)),   # диагональ
    Move((0, 0), (0, 2)),   # из недоступной клетки
    Move((3, 5), (3, 7)),   # за пределы доски
])
def test_apply_rejects_malformed_moves(move):
    with pytest.raises(IllegalMoveError):
        Board.initial().apply(move)


def test_generated_moves_pre_and_post_conditions():
    """Для каждого сгенерированного хода проверяем состояние до и после."""
    board = Board.initial().apply(Move((1, 3), (3, 3)))
    boards = [board] + [board.apply(m) for m in generate_moves(board)]

    for b in boards:
        for move in generate_moves(b):
            assert b.cell(*move.from_pos) == PEG
            assert b.cell(*move.jumped) == PEG
            assert b.cell(*move.to_pos) == HOLE

            after = b.apply(move)
            assert after.remaining_pegs == b.remaining_pegs - 1
            assert after.remaining_pegs == count_pegs(after.grid)
            assert after.cell(*move.from_pos) == HOLE
            assert after.cell(*move.jumped) == HOLE
            assert after.cell(*move.to_pos) == PEG


def test_has_won_requires_single_center_peg():
    assert _board_with_pegs(CENTER).has_won()
    assert not _board_with_pegs((2, 3)).has_won(), "Один колышек не в центре"
    assert not _board_with_pegs(CENTER, (0, 2)).has_won(), "Два колышка"


def test_move_jumped_is_midpoint():
    assert Move((1, 3), (3, 3)).jumped == (2, 3)
    assert Move((3, 5), (3, 3)).jumped == (3, 4)


def test_position_hash_structural():
    """Одинаковые сетки дают одинаковый хеш независимо от способа построения."""
    played = Board.initial().apply(Move((1, 3), (3, 3)))
    rebuilt = Board.from_grid(played.grid)

    assert played == rebuilt
    assert played.position_hash() == rebuilt.position_hash()
    assert played.position_hash() == grid_hash(played.grid)
    assert played.position_hash() == played.position_hash()


def test_position_hash_is_order_sensitive():
    """Перестановка значений между клетками меняет хеш."""
    a = _board_with_pegs((3, 1), (3, 2))
    b = _board_with_pegs((3, 2), (3, 3))

    assert a.remaining_pegs == b.remaining_pegs
    assert a.position_hash() != b.position_hash()


def test_position_hash_collides_on_transposed_boards():
    """Известная коллизия: транспонированные позиции имеют один хеш."""
    down = Board.initial().apply(Move((1, 3), (3, 3)))
    right = Board.initial().apply(Move((3, 1), (3, 3)))

    assert down != right
    assert down.position_hash() == right.position_hash()


def test_render_initial():
    lines = Board.initial().render().split("\n")

    assert len(lines) == 9
    assert lines[0] == " " + "-" * 15
    assert lines[-1] == " " + "-" * 15
    assert lines[1] == "|     X X X     |"
    assert lines[4] == "| X X X o X X X |"


def test_from_rows_roundtrip_symbols():
    rows = [
        "  ooo  ",
        "  ooo  ",
        "ooooooo",
        "oXXoooo",
        "ooooooo",
        "  ooo  ",
        "  ooo  ",
    ]
    board = Board.from_rows(rows)

    assert board.remaining_pegs == 2
    assert board.cell(3, 1) == PEG
    assert board.cell(0, 0) == INVALID
    assert board.cell(2, 0) == HOLE


@pytest.mark.parametrize("rows", [
    ["ooooooo"] * 6,
    ["ooooooo"] * 6 + ["oooooooo"],
    ["ooooooo"] * 6 + ["ooo?ooo"],
])
def test_from_rows_rejects_bad_input(rows):
    with pytest.raises(InvalidBoardError):
        Board.from_rows(rows)
