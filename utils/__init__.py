"""
utils - Логирование, ошибки и мониторинг.
"""

from .logging import SolverLogger, get_logger, setup_file_logging
from .error_handling import (
    SolverError, InvalidBoardError, IllegalMoveError,
    NoSolutionError, safe_search, validate_board
)
from .monitoring import PerformanceMonitor, timed

__all__ = [
    'SolverLogger', 'get_logger', 'setup_file_logging',
    'SolverError', 'InvalidBoardError', 'IllegalMoveError',
    'NoSolutionError', 'safe_search', 'validate_board',
    'PerformanceMonitor', 'timed',
]
