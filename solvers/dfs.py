"""
solvers/dfs.py

DFS (Depth-First Search) с таблицей транспозиций.
Запоминаются только выигрышные результаты.
"""

import time
from typing import Callable, Optional

from .base import BaseSolver, SearchResult, SolverStats
from .transposition import TranspositionTable
from core.board import Board
from core.moves import MoveGenerator


class DFSSolver(BaseSolver):
    """
    Рекурсивный DFS, ищущий любой выигрышный ход.

    Особенности:
    - Ходы перебираются в порядке генератора, первый выигрышный побеждает
    - Выигрышные результаты кешируются в TranspositionTable
    - Тупики по умолчанию не кешируются и пересчитываются при повторном визите
    - Таблица принадлежит решателю и переживает вызовы search()
    """

    def __init__(self, table: Optional[TranspositionTable] = None,
                 generator: Optional[MoveGenerator] = None,
                 hash_fn: Optional[Callable[[Board], int]] = None,
                 cache_dead_ends: bool = False, verbose: bool = False):
        """
        Args:
            table: таблица транспозиций (по умолчанию — новая пустая)
            generator: генератор ходов
            hash_fn: функция ключа позиции (по умолчанию Board.position_hash)
            cache_dead_ends: кешировать также проигрышные результаты;
                меняет семантику кеша, по умолчанию выключено
            verbose: выводить отладочную информацию
        """
        super().__init__(verbose=verbose)
        self.table = table if table is not None else TranspositionTable()
        self.generator = generator if generator is not None else MoveGenerator()
        self.hash_fn = hash_fn
        self.cache_dead_ends = cache_dead_ends

    def search(self, board: Board) -> SearchResult:
        """Ищет выигрышный ход для позиции."""
        self.stats = SolverStats()
        self._log(f"Starting DFS (pegs={board.peg_count()}, cached={len(self.table)})")

        start = time.perf_counter()
        result = self._dfs(board, 0)
        self.stats.time_elapsed = time.perf_counter() - start

        self._log(f"Done: move={result.move}, winning={result.is_winning}; {self.stats}")
        return result

    def _get_key(self, board: Board) -> int:
        if self.hash_fn is not None:
            return self.hash_fn(board)
        return board.position_hash()

    def _dfs(self, board: Board, depth: int) -> SearchResult:
        self.stats.nodes_visited += 1
        self.stats.max_depth = max(self.stats.max_depth, depth)

        # Победа: сама позиция не кешируется
        if board.has_won():
            return SearchResult(None, True)

        key = self._get_key(board)
        cached = self.table.get(key)
        if cached is not None:
            self.stats.cache_hits += 1
            return cached

        moves = self.generator.generate(board)
        if not moves:
            self.stats.dead_ends += 1
            return self._remember(key, SearchResult(None, False))

        for move in moves:
            if self._dfs(board.apply(move), depth + 1).is_winning:
                return self._remember(key, SearchResult(move, True))

        # Ни один ход не ведёт к победе — возвращаем первый
        return self._remember(key, SearchResult(moves[0], False))

    def _remember(self, key: int, result: SearchResult) -> SearchResult:
        if result.is_winning or self.cache_dead_ends:
            self.table.put(key, result)
            self.stats.cache_stores += 1
        return result
