"""
solutions/verify.py

Независимая проверка последовательности ходов.
"""

from typing import List

from core.board import Board, Move
from core.utils import CENTER, HOLE, PEG


def verify_solution(board: Board, moves: List[Move], require_center: bool = True) -> bool:
    """
    Проверяет корректность решения, не полагаясь на Board.apply.

    Правила:
    - каждый ход — прыжок на две клетки по одной оси;
    - в from и jumped есть колышки, в to — дырка;
    - после всех ходов остаётся ровно один колышек;
    - если require_center=True, он должен стоять в центре.
    """
    grid = [list(row) for row in board.grid]
    size = len(grid)

    for move in moves:
        (fr, fc), (tr, tc) = move
        if not all(0 <= v < size for v in (fr, fc, tr, tc)):
            return False
        if sorted((abs(tr - fr), abs(tc - fc))) != [0, 2]:
            return False

        jr, jc = (fr + tr) // 2, (fc + tc) // 2
        if grid[fr][fc] != PEG or grid[jr][jc] != PEG or grid[tr][tc] != HOLE:
            return False

        grid[fr][fc] = HOLE
        grid[jr][jc] = HOLE
        grid[tr][tc] = PEG

    pegs = [(r, c) for r in range(size) for c in range(size) if grid[r][c] == PEG]
    if len(pegs) != 1:
        return False

    if require_center:
        return pegs[0] == CENTER

    return True
