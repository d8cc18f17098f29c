"""
solvers/dead_end.py

Индекс тупиков: доски, из которых решение недостижимо.

Доски раскладываются по корзинам по ключу board.get_hash(). Ключ может
совпадать у разных досок, поэтому внутри корзины доски сравниваются
целиком. Без этого сравнения решатель мог бы отсечь рабочую ветку.
"""

from collections import defaultdict
from typing import Dict, Iterator, List

from core.board import Board


class DeadEndIndex:
    """Хеш-индекс тупиковых досок. Только растёт."""

    def __init__(self):
        self._buckets: Dict[str, List[Board]] = defaultdict(list)
        self._size = 0

    def contains(self, board: Board) -> bool:
        """Доска уже доказана тупиковой?"""
        bucket = self._buckets.get(board.get_hash())
        if not bucket:
            return False
        for dead_end in bucket:
            if dead_end == board:
                return True
        return False

    def record(self, board: Board) -> None:
        """Запоминает тупик. Повторная запись ничего не меняет."""
        if self.contains(board):
            return
        self._buckets[board.get_hash()].append(board)
        self._size += 1

    def bucket_count(self) -> int:
        return len(self._buckets)

    def max_bucket_size(self) -> int:
        return max((len(bucket) for bucket in self._buckets.values()), default=0)

    def clear(self) -> None:
        self._buckets.clear()
        self._size = 0

    def __iter__(self) -> Iterator[Board]:
        for bucket in self._buckets.values():
            yield from bucket

    def __contains__(self, board: Board) -> bool:
        return self.contains(board)

    def __len__(self) -> int:
        return self._size
