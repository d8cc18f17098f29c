"""
solvers/marbles.py

DFS с индексом тупиков (рекурсивный).

Возвращает ПЕРВОЕ найденное решение, не кратчайшее. Ходы перебираются
строго в порядке Board.get_moves(), поэтому результат воспроизводим.
"""

from typing import List, Optional

from .base import BaseSolver
from core.board import Board
from core.move import Move


class MarblesSolver(BaseSolver):
    """
    Рекурсивный поиск в глубину.

    Особенности:
    - Доска, из которой не нашлось решения, попадает в индекс тупиков
    - Дочерние доски из индекса пропускаются
    - Глубина рекурсии = длина текущего пути (не больше числа шариков)
    """

    def _search(self, board: Board) -> Optional[List[Move]]:
        return self.explore(board, [])

    def explore(self, board: Board, path: List[Move]) -> Optional[List[Move]]:
        """
        Рекурсивный DFS поиск.

        Args:
            board: текущее состояние доски
            path: путь ходов до текущего состояния (изменяется на месте)

        Returns:
            Копия пути до решения или None
        """
        self.stats.nodes_visited += 1
        if len(path) > self.stats.max_depth:
            self.stats.max_depth = len(path)

        # Победа: остался один шарик
        if board.marble_count() == 1:
            return list(path)

        for move in board.get_moves():
            new_board = board.apply_move(move)

            # Уже доказанный тупик
            if self.dead_ends.contains(new_board):
                self.stats.nodes_pruned += 1
                continue

            path.append(move)
            result = self.explore(new_board, path)
            if result is not None:
                return result
            path.pop()

        # Ни один ход не привёл к решению
        self.dead_ends.record(board)
        return None
