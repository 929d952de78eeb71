"""
tests/test_moves.py

Тесты для генератора ходов: полнота, порядок, граничные случаи.
"""

from core.board import Board, Move
from core.moves import MoveGenerator, generate_moves
from core.utils import INVALID


def test_initial_moves_in_row_major_order():
    """Четыре хода в центр, в порядке обхода строк."""
    moves = generate_moves(Board.initial())

    assert moves == [
        Move((1, 3), (3, 3)),   # вниз
        Move((3, 1), (3, 3)),   # вправо
        Move((3, 5), (3, 3)),   # влево
        Move((5, 3), (3, 3)),   # вверх
    ]


def test_blocked_and_isolated_pegs():
    """Заблокированные и изолированные колышки не дают ходов."""
    board = Board.from_rows([
        "  ooo  ",
        "  oXo  ",
        "ooXXXoo",
        "oXXXXXo",
        "ooXXXoo",
        "  oXo  ",
        "  ooo  ",
    ])
    moves_from_center = [m for m in generate_moves(board) if m.from_pos == (3, 3)]

    # Из центра соседи заняты, но цели (3,5),(3,1),(5,3),(1,3) — колышки
    assert moves_from_center == []

    board = Board.from_rows([
        "  ooo  ",
        "  oXo  ",
        "ooooooo",
        "oXoXoXo",
        "ooooooo",
        "  oXo  ",
        "  ooo  ",
    ])
    assert generate_moves(board) == [], "Нет соседних колышков — нет ходов"


def test_all_four_directions():
    board = Board.from_rows([
        "  ooo  ",
        "  ooo  ",
        "oooXooo",
        "ooXXXoo",
        "oooXooo",
        "  ooo  ",
        "  ooo  ",
    ])
    center = [m for m in generate_moves(board) if m.from_pos == (3, 3)]

    assert center == [
        Move((3, 3), (3, 5)),
        Move((3, 3), (3, 1)),
        Move((3, 3), (5, 3)),
        Move((3, 3), (1, 3)),
    ]


def test_no_jump_into_invalid_or_off_board():
    """Прыжки в углы и за край доски не генерируются."""
    board = Board.from_rows([
        "  XXo  ",
        "  Xoo  ",
        "ooooooo",
        "ooooooo",
        "ooooooo",
        "  ooo  ",
        "  ooo  ",
    ])
    moves = generate_moves(board)

    assert Move((0, 2), (0, 4)) in moves
    assert Move((0, 2), (2, 2)) in moves
    assert all(board.cell(*m.to_pos) != INVALID for m in moves)
    # (0,3) → (0,1): цель недоступна
    assert Move((0, 3), (0, 1)) not in moves


def test_generator_is_deterministic():
    board = Board.initial().apply(Move((3, 5), (3, 3)))
    generator = MoveGenerator()

    assert generator.generate(board) == generator.generate(board)
    assert generator.generate(board) == generate_moves(board)
