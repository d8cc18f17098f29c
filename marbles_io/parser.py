"""
marbles_io/parser.py

Парсинг входных данных и предустановленные доски.
"""

import re
from typing import Dict, List, Optional

from core.board import Board
from core.hashing import BoardHasher
from core.utils import BLOCKED, EMPTY, MARBLE, pos_to_index, to_symbol
from utils.error_handling import InvalidBoardError


# Доска по умолчанию: крест 7×7 с пустым центром
DEFAULT_ROWS = [
    '..XXX..',
    '..XXX..',
    'XXXXXXX',
    'XXXOXXX',
    'XXXXXXX',
    '..XXX..',
    '..XXX..',
]

PRESETS: Dict[str, Dict] = {
    'default': {
        'name': 'Крест 7×7',
        'rows': DEFAULT_ROWS,
    },
    'trivial': {
        'name': 'Один ход',
        'rows': ['XXO'],
    },
    'unsolvable': {
        'name': 'Без ходов',
        'rows': ['X.X'],
    },
    'plus': {
        'name': 'Плюс',
        'rows': [
            '..O..',
            '..X..',
            'OXXXO',
            '..X..',
            '..O..',
        ],
    },
}


def parse_rows(text: str) -> List[str]:
    """
    Парсит доску построчно.

    Одна строка текста — одна строка доски. Символы: X O . (или ● ○ ▫).
    Пустые строки и строки с '#' в начале пропускаются, пробелы в конце
    строки отбрасываются. Каждый пробел в начале строки становится недоступной
    клеткой ('.'), поэтому доску можно выровнять отступом. Строки могут быть
    разной длины.

    Raises:
        InvalidBoardError: неизвестный символ или нет ни одной строки
    """
    rows = []
    for line_no, line in enumerate(text.splitlines(), 1):
        line = line.rstrip()
        if not line or line.lstrip().startswith('#'):
            continue
        cells = line.lstrip(' ')
        row = [BLOCKED] * (len(line) - len(cells))
        for ch in cells:
            symbol = to_symbol(ch)
            if symbol is None:
                raise InvalidBoardError(f"Строка {line_no}: неизвестный символ {ch!r}")
            row.append(symbol)
        rows.append(''.join(row))

    if not rows:
        raise InvalidBoardError("Пустое описание доски")
    return rows


def parse_input(text: str) -> List[str]:
    """
    Парсит координатный формат описания позиции.

    Формат: size=7x7 marbles=C1,D1,... empty=D4 (вместо marbles= допускается pegs=).
    Неперечисленные клетки недоступны.

    Returns:
        Строки доски
    """
    size_match = re.search(r'size=(\d+)x(\d+)', text)
    marbles_match = re.search(r'(?:marbles|pegs)=([\w,]+)', text)
    empty_match = re.search(r'empty=([\w,]+)', text)

    if not size_match or not marbles_match or not empty_match:
        raise InvalidBoardError(
            "Неверный формат. Ожидается: size=NxM marbles=A1,A2,... empty=D4"
        )

    rows, cols = int(size_match.group(1)), int(size_match.group(2))
    grid = [[BLOCKED] * cols for _ in range(rows)]

    for group, symbol in ((marbles_match.group(1), MARBLE), (empty_match.group(1), EMPTY)):
        for pos in group.split(','):
            pos = pos.strip()
            if not pos:
                continue
            try:
                x, y = pos_to_index(pos)
            except ValueError as e:
                raise InvalidBoardError(f"Неверная клетка {pos!r}") from e
            if not (0 <= y < rows and 0 <= x < cols):
                raise InvalidBoardError(f"Клетка {pos} вне доски {rows}x{cols}")
            grid[y][x] = symbol

    return [''.join(row) for row in grid]


def create_default_board(hasher: Optional[BoardHasher] = None) -> Board:
    """Создаёт доску по умолчанию (крест 7×7)."""
    return Board.from_rows(DEFAULT_ROWS, hasher=hasher)


def get_preset(name: str, hasher: Optional[BoardHasher] = None) -> Board:
    """
    Raises:
        InvalidBoardError: неизвестное имя
    """
    if name not in PRESETS:
        raise InvalidBoardError(
            f"Неизвестная доска: {name!r} (доступны: {', '.join(PRESETS)})"
        )
    return Board.from_rows(PRESETS[name]['rows'], hasher=hasher)


def load_board_file(path: str, hasher: Optional[BoardHasher] = None) -> Board:
    """Загружает доску из текстового файла (формат parse_rows)."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        raise InvalidBoardError(f"Не удалось прочитать {path}: {e}") from e
    return Board.from_rows(parse_rows(text), hasher=hasher)
