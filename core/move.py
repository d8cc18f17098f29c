"""
core/move.py

Координаты и ход шарика.
"""

from typing import NamedTuple

from .utils import index_to_pos


class Coordinates(NamedTuple):
    """Пара (x, y): позиция клетки или направление прыжка."""
    x: int
    y: int

    def shifted(self, delta: 'Coordinates', factor: int = 1) -> 'Coordinates':
        """Возвращает self + factor * delta."""
        return Coordinates(self.x + delta.x * factor, self.y + delta.y * factor)

    def notation(self) -> str:
        return index_to_pos(self.x, self.y)


class Move(NamedTuple):
    """
    Прыжок шарика.

    origin — клетка прыгающего шарика, direction — единичный вектор.
    Перепрыгиваемая клетка и клетка назначения вычисляются.
    """
    origin: Coordinates
    direction: Coordinates

    @classmethod
    def create(cls, x: int, y: int, dx: int, dy: int) -> 'Move':
        return cls(Coordinates(x, y), Coordinates(dx, dy))

    @property
    def middle(self) -> Coordinates:
        """Клетка, через которую прыгает шарик."""
        return self.origin.shifted(self.direction)

    @property
    def destination(self) -> Coordinates:
        """Клетка, куда приземляется шарик."""
        return self.origin.shifted(self.direction, 2)

    def notation(self) -> str:
        return f"{self.origin.notation()} → {self.destination.notation()}"

    def __repr__(self) -> str:
        return f"Move({self.notation()})"
