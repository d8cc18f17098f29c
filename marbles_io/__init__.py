"""
marbles_io - Ввод/вывод для Marbles

Экспортирует:
- Парсинг входных данных и предустановленные доски
- Визуализация доски и решений
"""

from .parser import (
    parse_rows, parse_input, create_default_board, get_preset,
    load_board_file, PRESETS, DEFAULT_ROWS
)
from .visualizer import (
    display_board, format_move, format_solution, solution_frames, move_to_dict
)

__all__ = [
    'parse_rows',
    'parse_input',
    'create_default_board',
    'get_preset',
    'load_board_file',
    'PRESETS',
    'DEFAULT_ROWS',
    'display_board',
    'format_move',
    'format_solution',
    'solution_frames',
    'move_to_dict',
]
