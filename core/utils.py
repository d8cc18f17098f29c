"""
core/utils.py

Общие константы и утилиты для игры Marbles.
"""

from enum import Enum
from typing import List, Optional, Tuple


class Cell(str, Enum):
    """Содержимое клетки доски."""
    BLOCKED = '.'   # Недоступная клетка
    EMPTY = 'O'     # Пустая лунка (можно прыгнуть)
    MARBLE = 'X'    # Шарик


# Символы для хранения в строках доски
BLOCKED = Cell.BLOCKED.value
EMPTY = Cell.EMPTY.value
MARBLE = Cell.MARBLE.value

# Символы для отображения
GLYPHS = {
    BLOCKED: '▫',
    EMPTY: '○',
    MARBLE: '●',
}

# Обратное соответствие: глиф → символ хранения
SYMBOLS = {glyph: symbol for symbol, glyph in GLYPHS.items()}
SYMBOLS.update({symbol: symbol for symbol in GLYPHS})

# Направления прыжка (dx, dy): влево, вверх, вправо, вниз.
# Порядок определяет порядок перебора ходов.
DIRECTIONS: List[Tuple[int, int]] = [(-1, 0), (0, -1), (1, 0), (0, 1)]


def to_symbol(value) -> Optional[str]:
    """
    Приводит значение клетки (Cell, символ или глиф) к символу хранения.

    Returns:
        Символ из {'.', 'O', 'X'} или None для неизвестного значения
    """
    if isinstance(value, Cell):
        return value.value
    if isinstance(value, str):
        return SYMBOLS.get(value)
    return None


def index_to_pos(x: int, y: int) -> str:
    """Координаты (x=столбец, y=строка) → нотация (A1, B2, ...)."""
    return f"{chr(x + ord('A'))}{y + 1}"


def pos_to_index(pos: str) -> Tuple[int, int]:
    """Нотация → координаты (x, y)."""
    x = ord(pos[0].upper()) - ord('A')
    y = int(pos[1:]) - 1
    return x, y


def count_marbles(rows) -> int:
    """Подсчёт шариков полным проходом по строкам."""
    return sum(row.count(MARBLE) for row in rows)
