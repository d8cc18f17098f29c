"""
solvers/base.py

Базовый класс для решателей.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from dataclasses import dataclass
import time

from core.board import Board
from core.move import Move
from utils.error_handling import validate_board
from utils.logging import get_logger
from .dead_end import DeadEndIndex


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    nodes_pruned: int = 0
    dead_ends: int = 0
    buckets: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Dead ends: {self.dead_ends} in {self.buckets} buckets, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Каждый вызов solve() получает собственный индекс тупиков, поэтому
    независимые запуски не влияют друг на друга.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()
        self.dead_ends = DeadEndIndex()

    def solve(self, board: Board) -> Optional[List[Move]]:
        """
        Решает головоломку.

        Args:
            board: начальная позиция

        Returns:
            Список ходов (пустой, если шарик уже один) или None, если решения нет

        Raises:
            InvalidBoardError: доска без клеток или без шариков
        """
        validate_board(board)
        self.stats = SolverStats()
        self.dead_ends = DeadEndIndex()

        self._log(f"Starting {self.__class__.__name__} "
                  f"(marbles={board.marble_count()}, hasher={board.hasher})")
        start = time.perf_counter()
        result = self._search(board)
        self.stats.time_elapsed = time.perf_counter() - start
        self.stats.dead_ends = len(self.dead_ends)
        self.stats.buckets = self.dead_ends.bucket_count()

        if result is not None:
            self.stats.solution_length = len(result)
            self._log(f"Solution found: {len(result)} moves")
        else:
            self._log("No solution found")

        self._log(f"Stats: {self.stats}")
        return result

    @abstractmethod
    def _search(self, board: Board) -> Optional[List[Move]]:
        """Поиск в глубину от начальной доски."""
        pass

    def _log(self, message: str) -> None:
        """INFO если verbose=True, иначе DEBUG."""
        logger = get_logger()
        text = f"[{self.__class__.__name__}] {message}"
        if self.verbose:
            logger.info(text)
        else:
            logger.debug(text)
