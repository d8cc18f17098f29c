"""
core/board.py

Представление доски через кортеж строк.

Каждая строка — одна строка доски, один символ на клетку ('.', 'O', 'X').
Строки могут быть разной длины: отсутствующая клетка ≠ недоступная клетка.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from .hashing import BoardHasher, DEFAULT_HASHER
from .move import Coordinates, Move
from .utils import Cell, DIRECTIONS, EMPTY, MARBLE, count_marbles, to_symbol
from utils.error_handling import InvalidBoardError, InvalidMoveError

DEFAULT_DIRECTIONS: Tuple[Coordinates, ...] = tuple(Coordinates(dx, dy) for dx, dy in DIRECTIONS)


class Board:
    """
    Иммутабельное состояние доски.

    Количество шариков считается полным проходом только для начальной доски,
    производные доски получают count - 1. Ключ корзины пересчитывается для
    каждой новой доски.
    """
    __slots__ = ('rows', '_marble_count', '_hash', 'hasher', 'directions')

    def __init__(self, rows: Sequence[str], marble_count: Optional[int] = None,
                 hasher: Optional[BoardHasher] = None,
                 directions: Optional[Sequence[Coordinates]] = None):
        """
        Args:
            rows: строки доски (символы '.', 'O', 'X')
            marble_count: количество шариков; None — посчитать (только для начальной доски)
            hasher: функция ключа корзины
            directions: направления прыжков в порядке перебора
        """
        self.rows: Tuple[str, ...] = tuple(rows)
        self.hasher = hasher or DEFAULT_HASHER
        self.directions = tuple(directions) if directions is not None else DEFAULT_DIRECTIONS

        if marble_count is None:
            marble_count = count_marbles(self.rows)
        self._marble_count = marble_count
        self._hash = self.hasher(self.rows)

    @classmethod
    def from_rows(cls, rows, hasher: Optional[BoardHasher] = None,
                  directions: Optional[Sequence[Tuple[int, int]]] = None) -> 'Board':
        """
        Создаёт начальную доску.

        Args:
            rows: последовательность строк; строка — str или список Cell/символов/глифов

        Raises:
            InvalidBoardError: нет клеток, неизвестный символ или нет шариков
        """
        normalized: List[str] = []
        for y, row in enumerate(rows):
            symbols = []
            for x, value in enumerate(row):
                symbol = to_symbol(value)
                if symbol is None:
                    raise InvalidBoardError(f"Неизвестная клетка {value!r} в позиции ({x}, {y})")
                symbols.append(symbol)
            normalized.append(''.join(symbols))

        if not any(normalized):
            raise InvalidBoardError("Доска не содержит клеток")

        if directions is not None:
            directions = [Coordinates(dx, dy) for dx, dy in directions]

        board = cls(normalized, hasher=hasher, directions=directions)
        if board.marble_count() < 1:
            raise InvalidBoardError("Доска должна содержать хотя бы один шарик")
        return board

    def marble_count(self) -> int:
        """Количество шариков — O(1)."""
        return self._marble_count

    def get_hash(self) -> str:
        """Ключ корзины для индекса тупиков."""
        return self._hash

    def symbol_at(self, x: int, y: int) -> Optional[str]:
        """Символ клетки или None, если клетки нет."""
        if y < 0 or x < 0 or y >= len(self.rows):
            return None
        row = self.rows[y]
        if x >= len(row):
            return None
        return row[x]

    def cell(self, x: int, y: int) -> Optional[Cell]:
        symbol = self.symbol_at(x, y)
        return None if symbol is None else Cell(symbol)

    def marbles(self) -> Iterator[Coordinates]:
        """Шарики в порядке построчного обхода (сверху вниз, слева направо)."""
        for y, row in enumerate(self.rows):
            x = row.find(MARBLE)
            while x != -1:
                yield Coordinates(x, y)
                x = row.find(MARBLE, x + 1)

    def is_valid_move(self, move: Move) -> bool:
        """Проверка допустимости хода."""
        (x, y), (dx, dy) = move
        return (
            self.symbol_at(x, y) == MARBLE and
            self.symbol_at(x + dx, y + dy) == MARBLE and
            self.symbol_at(x + 2 * dx, y + 2 * dy) == EMPTY
        )

    def get_moves(self) -> List[Move]:
        """
        Генерирует все допустимые ходы.

        Порядок: шарики построчно, для каждого шарика — направления в порядке
        self.directions. От порядка зависит, какое решение будет найдено.
        """
        moves = []
        rows = self.rows
        height = len(rows)
        for y, row in enumerate(rows):
            x = row.find(MARBLE)
            while x != -1:
                for direction in self.directions:
                    dx, dy = direction
                    mx, my = x + dx, y + dy
                    tx, ty = x + 2 * dx, y + 2 * dy
                    if tx < 0 or ty < 0 or ty >= height or tx >= len(rows[ty]):
                        continue
                    if rows[ty][tx] != EMPTY:
                        continue
                    if mx < 0 or my < 0 or my >= height or mx >= len(rows[my]):
                        continue
                    if rows[my][mx] == MARBLE:
                        moves.append(Move(Coordinates(x, y), direction))
                x = row.find(MARBLE, x + 1)
        return moves

    def apply_move(self, move: Move) -> 'Board':
        """
        Возвращает новую доску после хода.

        Raises:
            InvalidMoveError: ход недопустим на этой доске
        """
        if not self.is_valid_move(move):
            raise InvalidMoveError(f"Недопустимый ход {move.notation()} на доске {self!r}")

        (x, y), (dx, dy) = move
        rows = list(self.rows)
        _set_cell(rows, x, y, EMPTY)
        _set_cell(rows, x + dx, y + dy, EMPTY)
        _set_cell(rows, x + 2 * dx, y + 2 * dy, MARBLE)
        return Board(rows, self._marble_count - 1, self.hasher, self.directions)

    def __hash__(self) -> int:
        return hash(self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"Board({self._marble_count} marbles, hash={self._hash})"


def _set_cell(rows: List[str], x: int, y: int, symbol: str) -> None:
    row = rows[y]
    rows[y] = row[:x] + symbol + row[x + 1:]
