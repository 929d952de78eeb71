#!/usr/bin/env python3
"""
main.py

Точка входа: пошаговая партия, в которой каждый ход находит DFSSolver.

Использование:
    python main.py                 # английская доска, Enter — следующий ход
    python main.py --auto          # без ожидания Enter
    python main.py --position "size=7x7 pegs=... empty=D4"
"""

import sys
import argparse
import logging
from typing import Callable, Optional, Tuple

from core.board import Board
from peg_io import parse_input, format_move
from solvers import DFSSolver
from utils.error_handling import SolverError
from utils.logging import get_logger, setup_file_logging
from utils.monitoring import PerformanceMonitor, timed


def play(board: Board, solver: DFSSolver, auto: bool = False,
         read_line: Callable[[str], str] = input,
         monitor: Optional[PerformanceMonitor] = None) -> Tuple[Board, int]:
    """
    Играет партию до победы, тупика или конца ввода.

    Args:
        board: начальная позиция
        solver: решатель
        auto: не ждать Enter перед каждым ходом
        read_line: функция чтения строки (для тестов)
        monitor: монитор времени вызовов search

    Returns:
        (итоговая позиция, количество сыгранных ходов)
    """
    monitor = monitor if monitor is not None else PerformanceMonitor()

    print("Starting game...")
    print(board.render())

    counter = 0
    while not board.has_won():
        counter += 1

        if not auto:
            try:
                read_line("Press Enter to continue...")
            except EOFError:
                print("No more input. Exiting the game.")
                counter -= 1
                break

        result, elapsed = timed(monitor, 'search', solver.search, board)
        if not result.is_winning:
            if result.move is None:
                print("Нет допустимых ходов: тупик.")
            else:
                print("Выигрышного продолжения нет.")
            counter -= 1
            break

        board = board.apply(result.move)
        print(f"Playing move #{counter} {format_move(result.move)} in {elapsed * 1000:.0f} ms\n")
        print(board.render())

    print(f"Game finished in {counter} moves!")
    print(monitor.format_stats('search'))
    return board, counter


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Peg Solitaire: пошаговое решение английской доски',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                     # английская доска
  python main.py --auto              # без ожидания Enter
  python main.py --auto -v           # с логом решателя
        """
    )
    parser.add_argument(
        '--position', '-p',
        help='Позиция в формате: size=7x7 pegs=C1,D1,... empty=D4'
    )
    parser.add_argument(
        '--auto', action='store_true',
        help='Играть без ожидания Enter'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Логировать работу решателя'
    )
    parser.add_argument(
        '--log-file',
        help='Дополнительно писать лог в файл'
    )

    args = parser.parse_args(argv)

    logger = get_logger()
    level = logging.INFO if args.verbose else logging.WARNING
    logger.set_level(level)
    if args.log_file:
        setup_file_logging(args.log_file, level)

    try:
        board = parse_input(args.position) if args.position else Board.initial()
    except SolverError as e:
        logger.error(f"Ошибка: {e}")
        return 1

    solver = DFSSolver(verbose=args.verbose)
    final, _ = play(board, solver, auto=args.auto)
    return 0 if final.has_won() else 1


if __name__ == "__main__":
    sys.exit(main())
