#!/usr/bin/env python3
"""
main.py

Точка входа для Marbles Solver.

Использование:
    python main.py                               # доска по умолчанию (крест 7×7)
    python main.py board.txt                     # доска из файла (строки X O .)
    python main.py --preset trivial              # предустановленная доска
    python main.py --notation "size=1x3 marbles=A1,B1 empty=C1"
    python main.py --hash-algorithm md5 --hash-width 5
    python main.py --solver iterative --verbose
"""

import argparse
import sys
from typing import List, Optional

from core.board import Board
from core.config import SolverConfig, load_config
from marbles_io import (
    PRESETS, parse_input, get_preset, load_board_file,
    display_board, format_solution, solution_frames
)
from solutions.verify import verify_solution
from solvers import SOLVERS, create_solver
from utils.error_handling import ConfigError, InvalidBoardError, SolverError, handle_errors
from utils.logging import get_logger, setup_file_logging
from utils.monitoring import get_monitor

EXIT_OK = 0
EXIT_NO_SOLUTION = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Marbles (peg solitaire) Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                        # крест 7×7
  python main.py --preset trivial       # один ход
  python main.py --hash-width 6         # больше корзин, меньше коллизий
  python main.py --solver iterative     # без рекурсии
        """
    )
    parser.add_argument('board_file', nargs='?', help='Файл с доской (строки из X, O, .)')
    parser.add_argument('--preset', '-p', choices=list(PRESETS.keys()), help='Предустановленная доска')
    parser.add_argument('--notation', '-n', help='Позиция: size=7x7 marbles=A1,... empty=D4')
    parser.add_argument('--config', '-c', help='JSON файл конфигурации')
    parser.add_argument('--solver', '-s', choices=list(SOLVERS.keys()), help='Решатель (default: recursive)')
    parser.add_argument('--hash-algorithm', choices=['crc32', 'md5', 'zobrist'], help='Алгоритм ключа корзины')
    parser.add_argument('--hash-width', type=int, help='Длина ключа корзины (символов)')
    parser.add_argument('--show-boards', action='store_true', help='Показать доску после каждого хода')
    parser.add_argument('--verbose', '-v', action='store_true', help='Подробный лог')
    parser.add_argument('--log-file', help='Дублировать лог в файл')
    return parser


def build_config(args: argparse.Namespace) -> SolverConfig:
    """Файл конфигурации + флаги командной строки (флаги важнее)."""
    config = load_config(args.config) if args.config else SolverConfig()
    if args.solver:
        config.solver = args.solver
    if args.hash_algorithm:
        config.hash_algorithm = args.hash_algorithm
    if args.hash_width is not None:
        config.hash_width = args.hash_width
    if args.verbose:
        config.verbose = True
        config.log_level = 'DEBUG'
    return config.validate()


def load_board(args: argparse.Namespace, config: SolverConfig) -> Board:
    hasher = config.make_hasher()
    if args.board_file:
        return load_board_file(args.board_file, hasher=hasher)
    if args.notation:
        return Board.from_rows(parse_input(args.notation), hasher=hasher)
    return get_preset(args.preset or 'default', hasher=hasher)


def solve_board(board: Board, config: SolverConfig, show_boards: bool = False) -> Optional[list]:
    """
    Решает доску, проверяет решение и выводит результат.

    Returns:
        Список ходов или None
    """
    solver = create_solver(config)
    monitor = get_monitor()

    with monitor.measure('solve') as timer:
        result = solver.solve(board)
    monitor.record_solver_stats(solver.stats)

    if result is None:
        print(f"\n{format_solution(None)}")
        print(f"⏱ Время: {timer.elapsed:.3f}с")
        print(f"📊 Статистика: {solver.stats}")
        return None

    if not verify_solution(board, result):
        raise SolverError("Найдено некорректное решение (проверка не пройдена)")

    print(f"\n{format_solution(result)}")
    print(f"\n⏱ Время: {timer.elapsed:.3f}с")
    print(f"📊 Статистика: {solver.stats}")

    if show_boards:
        for i, frame in enumerate(solution_frames(board, result)[1:], 1):
            print(f"\nПосле хода {i} ({result[i - 1].notation()}):")
            print(display_board(frame))

    return result


@handle_errors(default_return=EXIT_INPUT_ERROR, exceptions=(InvalidBoardError, ConfigError))
def execute(args: argparse.Namespace) -> int:
    config = build_config(args)

    get_logger().set_level(config.log_level)
    if args.log_file:
        setup_file_logging(args.log_file, config.log_level)

    board = load_board(args, config)

    print("=" * 50)
    print("🎯 Marbles Solver")
    print("=" * 50)
    print(f"\nНачальная позиция ({board.marble_count()} шариков):")
    print(display_board(board))
    print(f"\n🔧 Решатель: {config.solver}, хеш: {config.hash_algorithm}/{config.hash_width}")
    print("-" * 50)

    result = solve_board(board, config, show_boards=args.show_boards)
    if config.verbose:
        get_monitor().log_stats()
    return EXIT_OK if result is not None else EXIT_NO_SOLUTION


def run(args: argparse.Namespace) -> int:
    """
    Запускает решение и возвращает глобальный логгер в исходное состояние.

    Ошибки ввода и конфигурации дают EXIT_INPUT_ERROR. Внутренние ошибки
    (недопустимый ход при поиске, непрошедшая проверка решения) не
    перехватываются.
    """
    logger = get_logger().logger
    previous_level = logger.level
    previous_handlers = list(logger.handlers)
    try:
        return execute(args)
    finally:
        for handler in logger.handlers[:]:
            if handler not in previous_handlers:
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(previous_level)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
