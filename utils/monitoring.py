"""
utils/monitoring.py

Мониторинг производительности: время выполнения операций.
"""

import time
from typing import Dict, List, Any
from collections import defaultdict

from .logging import get_logger


class PerformanceMonitor:
    """Монитор производительности."""

    def __init__(self):
        self.metrics: Dict[str, List[float]] = defaultdict(list)
        self.logger = get_logger()

    def record_time(self, operation: str, elapsed: float):
        """
        Записывает время выполнения операции.

        Args:
            operation: имя операции
            elapsed: время в секундах
        """
        self.metrics[operation].append(elapsed)
        self.logger.debug(f"{operation}: {elapsed * 1000:.1f} ms")

    def get_stats(self, operation: str) -> Dict[str, Any]:
        """
        Возвращает статистику операции.

        Args:
            operation: имя операции

        Returns:
            Словарь со статистикой
        """
        if operation not in self.metrics:
            return {}

        times = self.metrics[operation]
        return {
            'operation': operation,
            'count': len(times),
            'total': sum(times),
            'average': sum(times) / len(times),
            'min': min(times),
            'max': max(times),
            'last': times[-1]
        }

    def format_stats(self, operation: str) -> str:
        """Однострочная сводка по операции."""
        stats = self.get_stats(operation)
        if not stats:
            return f"{operation}: нет данных"
        return (
            f"{operation}: {stats['count']} calls, "
            f"total {stats['total'] * 1000:.1f} ms, "
            f"avg {stats['average'] * 1000:.1f} ms, "
            f"max {stats['max'] * 1000:.1f} ms"
        )


def timed(monitor: PerformanceMonitor, operation: str, func, *args, **kwargs):
    """
    Вызывает func и записывает время выполнения в monitor.

    Returns:
        (результат, время в секундах)
    """
    start = time.perf_counter()
    try:
        result = func(*args, **kwargs)
    except Exception:
        monitor.record_time(f"{operation}_error", time.perf_counter() - start)
        raise
    elapsed = time.perf_counter() - start
    monitor.record_time(operation, elapsed)
    return result, elapsed
