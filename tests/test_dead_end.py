"""
tests/test_dead_end.py

Тесты для DeadEndIndex: корзины по ключу + точное сравнение досок.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from itertools import product

from core.board import Board
from core.hashing import BoardHasher
from solvers.dead_end import DeadEndIndex


def _colliding_pair():
    """Две разные доски с одинаковым ключом (ключ из одного символа)."""
    hasher = BoardHasher('crc32', 1)
    seen = {}
    for cells in product('XO', repeat=5):
        board = Board.from_rows([''.join(cells)], hasher=hasher) if 'X' in cells else None
        if board is None:
            continue
        key = board.get_hash()
        if key in seen:
            return seen[key], board
        seen[key] = board
    raise AssertionError("Коллизия должна найтись: 31 доска на 10 ключей")


def test_empty_index():
    index = DeadEndIndex()
    board = Board.from_rows(['XXO'])

    assert not index.contains(board)
    assert len(index) == 0
    assert index.bucket_count() == 0
    assert index.max_bucket_size() == 0


def test_record_and_contains():
    index = DeadEndIndex()
    board = Board.from_rows(['X.X'])

    index.record(board)

    assert index.contains(board)
    assert Board.from_rows(['X.X']) in index, "Равная доска тоже должна находиться"
    assert len(index) == 1


def test_duplicate_record_is_noop():
    """Тест: повторная запись не меняет индекс."""
    index = DeadEndIndex()
    board = Board.from_rows(['X.X'])

    index.record(board)
    index.record(Board.from_rows(['X.X']))

    assert len(index) == 1
    assert index.max_bucket_size() == 1


def test_collision_does_not_give_false_positive():
    """Тест: совпадение ключа не означает совпадение доски."""
    first, second = _colliding_pair()
    assert first.get_hash() == second.get_hash()
    assert first != second

    index = DeadEndIndex()
    index.record(first)

    assert index.contains(first)
    assert not index.contains(second), "Доска с тем же ключом, но другими клетками — не тупик"

    index.record(second)
    assert index.contains(second)
    assert index.bucket_count() == 1
    assert index.max_bucket_size() == 2
    assert list(index) == [first, second]


def test_clear():
    index = DeadEndIndex()
    index.record(Board.from_rows(['X.X']))

    index.clear()

    assert len(index) == 0
    assert not index.contains(Board.from_rows(['X.X']))
