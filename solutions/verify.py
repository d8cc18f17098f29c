"""
solutions/verify.py

Проверка решений повторным проигрыванием ходов.
"""

from typing import List

from core.board import Board
from core.move import Move


def replay(board: Board, moves: List[Move]) -> Board:
    """
    Применяет ходы по порядку.

    Raises:
        InvalidMoveError: если какой-то ход недопустим на своём шаге
    """
    for move in moves:
        board = board.apply_move(move)
    return board


def verify_solution(board: Board, moves: List[Move]) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход допустим на доске, полученной предыдущими ходами;
    - после всех ходов остаётся ровно один шарик;
    - пустое решение корректно только для доски с одним шариком.
    """
    for move in moves:
        if not board.is_valid_move(move):
            return False
        board = board.apply_move(move)

    return board.marble_count() == 1
