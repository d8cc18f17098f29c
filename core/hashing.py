"""
core/hashing.py

Ключи корзин для индекса тупиков.

Ключ — не доказательство равенства, а фильтр: одинаковые доски всегда дают
одинаковый ключ, разные доски могут совпасть. Длина ключа — баланс
процессор/память:
- длинный ключ: больше корзин, короче линейный просмотр в корзине;
- короткий ключ: меньше корзин, дольше просмотр.

Для доски по умолчанию crc32 с 4 знаками — хорошая точка отсчёта.
"""

import hashlib
import random
import zlib
from typing import Dict, Optional, Sequence, Tuple

from .utils import MARBLE
from utils.error_handling import ConfigError

DEFAULT_HASH_ALGORITHM = 'crc32'
DEFAULT_HASH_WIDTH = 4

# Фиксированный seed: ключи воспроизводимы между запусками
ZOBRIST_SEED = 42


def serialize_rows(rows: Sequence[str]) -> bytes:
    """Сериализация клеток: строки через перевод строки (различает рваные доски)."""
    return '\n'.join(rows).encode('utf-8')


def _crc32_digest(rows: Sequence[str]) -> str:
    return str(zlib.crc32(serialize_rows(rows)))


def _md5_digest(rows: Sequence[str]) -> str:
    return hashlib.md5(serialize_rows(rows)).hexdigest()


class ZobristTable:
    """
    Zobrist таблица: для каждой координаты — случайное 64-bit число.

    Координаты добавляются лениво, поэтому таблица подходит для досок
    любого размера. Значения зависят только от seed и координаты.
    """

    def __init__(self, seed: int = ZOBRIST_SEED):
        self.seed = seed
        self._table: Dict[Tuple[int, int], int] = {}

    def value(self, x: int, y: int) -> int:
        key = (x, y)
        value = self._table.get(key)
        if value is None:
            value = random.Random(f"{self.seed}:{x}:{y}").getrandbits(64)
            self._table[key] = value
        return value

    def digest(self, rows: Sequence[str]) -> str:
        h = 0
        for y, row in enumerate(rows):
            x = row.find(MARBLE)
            while x != -1:
                h ^= self.value(x, y)
                x = row.find(MARBLE, x + 1)
        return str(h)


class BoardHasher:
    """
    Вычисляет ключ корзины по строкам доски.

    Поддерживаемые алгоритмы: crc32, md5, zobrist.
    width — сколько последних символов дайджеста оставить (None — весь).
    """

    ALGORITHMS = ('crc32', 'md5', 'zobrist')

    def __init__(self, algorithm: str = DEFAULT_HASH_ALGORITHM,
                 width: Optional[int] = DEFAULT_HASH_WIDTH):
        if algorithm not in self.ALGORITHMS:
            raise ConfigError(
                f"Неизвестный алгоритм хеширования: {algorithm!r} "
                f"(доступны: {', '.join(self.ALGORITHMS)})"
            )
        if width is not None and (isinstance(width, bool) or not isinstance(width, int) or width < 1):
            raise ConfigError(f"Длина ключа должна быть положительным целым: {width!r}")

        self.algorithm = algorithm
        self.width = width

        if algorithm == 'crc32':
            self._digest = _crc32_digest
        elif algorithm == 'md5':
            self._digest = _md5_digest
        else:
            self._digest = ZobristTable().digest

    def __call__(self, rows: Sequence[str]) -> str:
        digest = self._digest(rows)
        if self.width is None:
            return digest
        return digest[-self.width:]

    def __repr__(self) -> str:
        return f"BoardHasher({self.algorithm}, width={self.width})"


DEFAULT_HASHER = BoardHasher()
