"""
solvers/base.py

Базовый класс для всех решателей.
"""

from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional
from dataclasses import dataclass

from core.board import Board, Move
from utils.error_handling import NoSolutionError
from utils.logging import get_logger


class SearchResult(NamedTuple):
    """Результат поиска: ход (или None) и признак выигрыша."""
    move: Optional[Move]
    is_winning: bool


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    cache_hits: int = 0
    cache_stores: int = 0
    dead_ends: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Hits: {self.cache_hits}, "
            f"Stored: {self.cache_stores}, "
            f"Dead ends: {self.dead_ends}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Наследники реализуют search(): один выигрышный ход для позиции.
    solve() строит из них полную последовательность.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()

    @abstractmethod
    def search(self, board: Board) -> SearchResult:
        """
        Ищет выигрышное продолжение.

        Args:
            board: текущая позиция

        Returns:
            SearchResult(ход, выигрывает ли он)
        """
        pass

    def solve(self, board: Board) -> List[Move]:
        """
        Возвращает полную выигрышную последовательность ходов.

        Raises:
            NoSolutionError: если позиция проигрышная
        """
        moves: List[Move] = []
        while not board.has_won():
            result = self.search(board)
            if not result.is_winning:
                raise NoSolutionError(
                    f"Нет выигрышного продолжения после {len(moves)} ходов ({board!r})"
                )
            moves.append(result.move)
            board = board.apply(result.move)

        self.stats.solution_length = len(moves)
        self._log(f"Solution found: {len(moves)} moves")
        return moves

    def _log(self, message: str) -> None:
        """Логирует сообщение если verbose=True."""
        if self.verbose:
            get_logger().info(f"[{self.__class__.__name__}] {message}")
