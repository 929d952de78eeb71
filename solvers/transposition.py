"""
solvers/transposition.py

Таблица транспозиций: хеш позиции → результат поиска.
"""

from typing import Dict, Iterator, Optional

from .base import SearchResult


class TranspositionTable:
    """
    Отображение хеша позиции в SearchResult.

    Живёт столько же, сколько владеющий ею решатель, и не очищается между
    ходами партии: будущее позиции определяется только её клетками, поэтому
    транспозиции взаимозаменяемы. Полное состояние доски не хранится,
    коллизии хеша не обнаруживаются.
    """

    def __init__(self):
        self._entries: Dict[int, SearchResult] = {}
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def get(self, key: int) -> Optional[SearchResult]:
        result = self._entries.get(key)
        if result is None:
            self.misses += 1
        else:
            self.hits += 1
        return result

    def put(self, key: int, result: SearchResult) -> None:
        """Вставляет или перезаписывает запись."""
        self._entries[key] = result
        self.stores += 1

    def values(self) -> Iterator[SearchResult]:
        return iter(self._entries.values())

    def clear(self) -> None:
        self._entries.clear()
        self.hits = self.misses = self.stores = 0

    def __contains__(self, key: int) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"TranspositionTable(entries={len(self)}, "
            f"hits={self.hits}, misses={self.misses})"
        )
