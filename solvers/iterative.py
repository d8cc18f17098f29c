"""
solvers/iterative.py

DFS с индексом тупиков на явном стеке.

Тот же алгоритм, что MarblesSolver, но без рекурсии: подходит для досок,
где число шариков больше лимита рекурсии интерпретатора. Решение и порядок
записи тупиков совпадают с рекурсивной версией.
"""

from typing import Iterator, List, Optional, Tuple

from .base import BaseSolver
from core.board import Board
from core.move import Move

Frame = Tuple[Board, Iterator[Move]]


class IterativeMarblesSolver(BaseSolver):
    """
    Поиск в глубину со стеком кадров (доска, оставшиеся ходы).

    Путь общий для всех кадров: len(path) == len(stack) - 1.
    """

    def _search(self, board: Board) -> Optional[List[Move]]:
        self.stats.nodes_visited += 1
        if board.marble_count() == 1:
            return []

        path: List[Move] = []
        stack: List[Frame] = [(board, iter(board.get_moves()))]

        while stack:
            current, moves = stack[-1]

            for move in moves:
                new_board = current.apply_move(move)

                if self.dead_ends.contains(new_board):
                    self.stats.nodes_pruned += 1
                    continue

                path.append(move)
                self.stats.nodes_visited += 1
                if len(path) > self.stats.max_depth:
                    self.stats.max_depth = len(path)

                if new_board.marble_count() == 1:
                    return list(path)

                stack.append((new_board, iter(new_board.get_moves())))
                break
            else:
                # Все ходы исчерпаны: тупик, возвращаемся на уровень выше
                self.dead_ends.record(current)
                stack.pop()
                if path:
                    path.pop()

        return None
