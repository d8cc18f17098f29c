"""
marbles_io/visualizer.py

Визуализация доски и решений.
"""

from typing import Dict, List, Optional

from core.board import Board
from core.move import Move
from core.utils import GLYPHS


def display_board(board: Board) -> str:
    """
    Форматирует доску с подписями столбцов (A, B, ...) и строк (1, 2, ...).

    Args:
        board: доска

    Returns:
        Строка для вывода
    """
    cols = max((len(row) for row in board.rows), default=0)
    header = "   " + " ".join(chr(c + ord('A')) for c in range(cols))
    lines = [header.rstrip()]

    for y, row in enumerate(board.rows):
        cells = " ".join(GLYPHS[symbol] for symbol in row)
        lines.append(f"{y + 1:<2} {cells}".rstrip())

    return "\n".join(lines)


def format_move(move: Move) -> str:
    """Ход в нотации 'C2 → C4'."""
    return move.notation()


def format_solution(moves: Optional[List[Move]]) -> str:
    """
    Форматирует список ходов для вывода.

    Args:
        moves: список ходов или None

    Returns:
        Форматированная строка
    """
    if moves is None:
        return "❌ Решение не найдено"
    if not moves:
        return "✅ Доска уже решена: остался один шарик"

    lines = [f"✅ Найдено решение за {len(moves)} ходов:"]
    for i, move in enumerate(moves, 1):
        lines.append(f"  {i:2}. {format_move(move)}")

    return "\n".join(lines)


def solution_frames(board: Board, moves: List[Move]) -> List[Board]:
    """Начальная доска и доска после каждого хода."""
    frames = [board]
    for move in moves:
        board = board.apply_move(move)
        frames.append(board)
    return frames


def move_to_dict(move: Move) -> Dict:
    """Ход для JSON ответа."""
    return {
        'from': {'x': move.origin.x, 'y': move.origin.y},
        'over': {'x': move.middle.x, 'y': move.middle.y},
        'to': {'x': move.destination.x, 'y': move.destination.y},
        'notation': move.notation(),
    }
