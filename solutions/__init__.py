"""
solutions - Проверка решений.
"""

from .verify import verify_solution

__all__ = [
    'verify_solution',
]
