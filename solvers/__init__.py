"""
solvers - Решатели Peg Solitaire

Экспортирует:
- DFSSolver: поиск в глубину с таблицей транспозиций
- TranspositionTable: кеш выигрышных результатов
- SearchResult, SolverStats: результат и статистика поиска
"""

from .base import BaseSolver, SearchResult, SolverStats
from .transposition import TranspositionTable
from .dfs import DFSSolver

__all__ = [
    'BaseSolver',
    'SearchResult',
    'SolverStats',
    'TranspositionTable',
    'DFSSolver',
]
