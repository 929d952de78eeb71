"""
peg_io - Ввод/вывод для Peg Solitaire

Экспортирует:
- Парсинг текстового описания позиции
- Визуализация доски и решений
"""

from .parser import parse_input
from .visualizer import display_board, format_move, format_solution

__all__ = [
    'parse_input',
    'display_board',
    'format_move',
    'format_solution',
]
