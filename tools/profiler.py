"""
tools/profiler.py

Профилирование и подбор настроек хеширования.

Длина и алгоритм ключа корзины — ручка баланса процессор/память.
compare_hash_settings() решает одну и ту же доску с разными настройками
и показывает размер индекса тупиков и время.

Использование:
    python -m tools.profiler                 # доска по умолчанию
    python -m tools.profiler --profile       # + вывод cProfile
"""

import argparse
import cProfile
import io
import pstats
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence, Tuple

from core.board import Board
from core.hashing import BoardHasher
from marbles_io.parser import create_default_board
from solvers import MarblesSolver
from solvers.base import BaseSolver

# (алгоритм, длина ключа)
DEFAULT_SETTINGS: List[Tuple[str, Optional[int]]] = [
    ('crc32', 2),
    ('crc32', 3),
    ('crc32', 4),
    ('crc32', 6),
    ('md5', 4),
    ('zobrist', 4),
]


class PerformanceProfiler:
    """Профилировщик на основе cProfile."""

    def __init__(self):
        self.profiles: Dict[str, cProfile.Profile] = {}

    @contextmanager
    def profile(self, name: str):
        """
        Usage:
            with profiler.profile('solve'):
                solver.solve(board)
        """
        profiler = cProfile.Profile()
        profiler.enable()
        try:
            yield profiler
        finally:
            profiler.disable()
            self.profiles[name] = profiler

    def get_stats(self, name: str, sort_by: str = 'cumulative', limit: int = 20) -> str:
        """
        Args:
            name: имя профиля
            sort_by: сортировка ('cumulative', 'time', 'calls')
            limit: количество строк
        """
        if name not in self.profiles:
            return f"No profile found for '{name}'"

        stream = io.StringIO()
        stats = pstats.Stats(self.profiles[name], stream=stream)
        stats.sort_stats(sort_by)
        stats.print_stats(limit)
        return stream.getvalue()


def with_hasher(board: Board, hasher: BoardHasher) -> Board:
    """Та же доска с другим хешированием."""
    return Board(board.rows, board.marble_count(), hasher, board.directions)


def compare_hash_settings(board: Board,
                          settings: Sequence[Tuple[str, Optional[int]]] = DEFAULT_SETTINGS,
                          solver: Optional[BaseSolver] = None,
                          profiler: Optional[PerformanceProfiler] = None) -> Dict[str, Dict[str, Any]]:
    """
    Решает доску с каждой настройкой хеширования.

    Returns:
        Словарь: 'алгоритм/длина' -> метрики запуска
    """
    solver = solver or MarblesSolver()
    profiler = profiler or PerformanceProfiler()
    results = {}

    for algorithm, width in settings:
        name = f"{algorithm}/{width if width is not None else 'full'}"
        start_board = with_hasher(board, BoardHasher(algorithm, width))

        with profiler.profile(name):
            solution = solver.solve(start_board)

        results[name] = {
            'solution_found': solution is not None,
            'solution_length': len(solution) if solution is not None else 0,
            'time_elapsed': solver.stats.time_elapsed,
            'nodes_visited': solver.stats.nodes_visited,
            'nodes_pruned': solver.stats.nodes_pruned,
            'dead_ends': solver.stats.dead_ends,
            'buckets': solver.stats.buckets,
            'max_bucket': solver.dead_ends.max_bucket_size(),
        }

    return results


def format_comparison(results: Dict[str, Dict[str, Any]]) -> str:
    lines = [
        f"{'Хеш':<14} {'Время':>10} {'Узлов':>10} {'Тупиков':>10} {'Корзин':>8} {'Макс.':>6} {'Решение':>8}",
        "-" * 72,
    ]
    for name, stats in results.items():
        status = "✅" if stats['solution_found'] else "❌"
        lines.append(
            f"{name:<14} {stats['time_elapsed']:>9.3f}s {stats['nodes_visited']:>10} "
            f"{stats['dead_ends']:>10} {stats['buckets']:>8} {stats['max_bucket']:>6} {status:>8}"
        )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Сравнение настроек хеширования')
    parser.add_argument('--profile', action='store_true', help='Показать cProfile для crc32/4')
    args = parser.parse_args(argv)

    profiler = PerformanceProfiler()
    results = compare_hash_settings(create_default_board(), profiler=profiler)
    print(format_comparison(results))

    if args.profile:
        print(profiler.get_stats('crc32/4'))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
