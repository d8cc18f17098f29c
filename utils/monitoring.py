"""
utils/monitoring.py

Замер времени и накопление метрик запусков.
"""

import time
from collections import defaultdict
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .logging import get_logger


class Timer:
    """Результат замера: elapsed заполняется при выходе из контекста."""

    def __init__(self):
        self.start = time.perf_counter()
        self.elapsed = 0.0


class PerformanceMonitor:
    """Монитор производительности."""

    def __init__(self):
        self.metrics: Dict[str, List[float]] = defaultdict(list)
        self.counters: Dict[str, int] = defaultdict(int)

    @contextmanager
    def measure(self, operation: str):
        """
        Замеряет время блока и записывает его под именем operation.

        Usage:
            with monitor.measure('solve') as timer:
                solver.solve(board)
            print(timer.elapsed)
        """
        timer = Timer()
        try:
            yield timer
        finally:
            timer.elapsed = time.perf_counter() - timer.start
            self.metrics[operation].append(timer.elapsed)

    def increment_counter(self, counter: str, value: int = 1):
        self.counters[counter] += value

    def record_solver_stats(self, stats) -> None:
        """Добавляет счётчики из SolverStats."""
        self.increment_counter('nodes_visited', stats.nodes_visited)
        self.increment_counter('nodes_pruned', stats.nodes_pruned)
        self.increment_counter('dead_ends', stats.dead_ends)

    def get_stats(self, operation: Optional[str] = None) -> Dict[str, Any]:
        """
        Args:
            operation: имя операции (None — сводка по всем)
        """
        if operation:
            times = self.metrics.get(operation)
            if not times:
                return {}
            return {
                'operation': operation,
                'count': len(times),
                'total': sum(times),
                'average': sum(times) / len(times),
                'min': min(times),
                'max': max(times),
                'last': times[-1],
            }

        return {
            'operations': {op: self.get_stats(op) for op in self.metrics},
            'counters': dict(self.counters),
        }

    def log_stats(self) -> None:
        logger = get_logger()
        for op, op_stats in self.get_stats()['operations'].items():
            logger.info(f"{op}: {op_stats['count']} раз, среднее {op_stats['average']:.3f}s")
        for counter, value in self.counters.items():
            logger.info(f"{counter}: {value}")

    def reset(self):
        self.metrics.clear()
        self.counters.clear()


# Глобальный монитор
_monitor: Optional[PerformanceMonitor] = None


def get_monitor() -> PerformanceMonitor:
    """Возвращает глобальный монитор."""
    global _monitor
    if _monitor is None:
        _monitor = PerformanceMonitor()
    return _monitor
