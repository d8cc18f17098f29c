"""
tests/test_board.py

Тесты для Board: генерация ходов, применение хода, равенство, ключи.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import Board
from core.hashing import BoardHasher
from core.move import Coordinates, Move
from core.utils import Cell
from marbles_io.parser import DEFAULT_ROWS, PRESETS
from utils.error_handling import InvalidBoardError, InvalidMoveError


def test_trivial_board_has_one_move():
    """Тест: [X, X, O] — единственный ход из столбца 0 через 1 в 2."""
    board = Board.from_rows(['XXO'])

    moves = board.get_moves()

    assert moves == [Move.create(0, 0, 1, 0)], "Должен быть ровно один ход вправо"
    assert moves[0].middle == Coordinates(1, 0)
    assert moves[0].destination == Coordinates(2, 0)


def test_apply_move_updates_three_cells():
    """Тест: ход очищает начало и середину, ставит шарик в цель."""
    board = Board.from_rows(['XXO'])

    new_board = board.apply_move(Move.create(0, 0, 1, 0))

    assert new_board.rows == ('OOX',)
    assert new_board.marble_count() == 1
    assert board.rows == ('XXO',), "Исходная доска не должна меняться"


def test_move_order_directions_left_up_right_down():
    """Тест: у одного шарика направления перебираются влево, вверх, вправо, вниз."""
    board = Board.from_rows(PRESETS['plus']['rows'])

    moves = board.get_moves()

    assert moves == [
        Move.create(2, 2, -1, 0),
        Move.create(2, 2, 0, -1),
        Move.create(2, 2, 1, 0),
        Move.create(2, 2, 0, 1),
    ]


def test_move_order_row_major():
    """Тест: шарики перебираются построчно сверху вниз, слева направо."""
    board = Board.from_rows([
        'OXX',
        'XOO',
        'XOO',
    ])

    moves = board.get_moves()

    assert moves == [Move.create(2, 0, -1, 0), Move.create(0, 2, 0, -1)]


def test_ragged_rows():
    """Тест: строки разной длины; отсутствующая клетка не участвует в ходе."""
    board = Board.from_rows(['XX', 'X', 'O'])

    assert board.get_moves() == [Move.create(0, 0, 0, 1)]
    assert board.cell(1, 1) is None, "Клетки (1, 1) нет"
    assert board.cell(0, 2) is Cell.EMPTY


def test_missing_middle_cell_blocks_move():
    """Тест: цель существует, но середины нет — хода нет."""
    board = Board.from_rows(['.X', '.', '.O'])

    assert board.get_moves() == []
    assert not board.is_valid_move(Move.create(1, 0, 0, 1))


def test_blocked_middle_cell_blocks_move():
    """Тест: [X, ., X] — нет ходов."""
    board = Board.from_rows(['X.X'])

    assert board.get_moves() == []


def test_negative_coordinates_do_not_wrap():
    """Тест: ход за левый край не должен находить клетку с конца строки."""
    board = Board.from_rows(['XXO', 'OOO'])

    assert Move.create(1, 0, -1, 0) not in board.get_moves()
    assert not board.is_valid_move(Move.create(1, 0, -1, 0))


def test_apply_illegal_move_raises():
    """Тест: недопустимый ход — нарушение контракта."""
    board = Board.from_rows(['XXO'])

    with pytest.raises(InvalidMoveError):
        board.apply_move(Move.create(1, 0, 1, 0))

    with pytest.raises(InvalidMoveError):
        board.apply_move(Move.create(2, 0, -1, 0))


def test_every_generated_move_is_applicable():
    """Тест: каждый ход из get_moves() принимается apply_move()."""
    board = Board.from_rows(DEFAULT_ROWS)

    for move in board.get_moves():
        child = board.apply_move(move)
        assert child.marble_count() == board.marble_count() - 1
        for grandchild_move in child.get_moves():
            grandchild = child.apply_move(grandchild_move)
            assert grandchild.marble_count() == child.marble_count() - 1


def test_marble_count_matches_scan():
    """Тест: счётчик производной доски совпадает с полным подсчётом."""
    board = Board.from_rows(DEFAULT_ROWS)
    assert board.marble_count() == 32

    for move in board.get_moves()[:2]:
        child = board.apply_move(move)
        rebuilt = Board.from_rows(child.rows)
        assert child.marble_count() == rebuilt.marble_count()


def test_equality_and_hash_consistency():
    """Тест: одинаковые клетки → равные доски и одинаковые ключи."""
    a = Board.from_rows(['XXO'])
    b = Board.from_rows([[Cell.MARBLE, Cell.MARBLE, Cell.EMPTY]])
    c = Board.from_rows(['●●○'])

    assert a == b == c
    assert a.get_hash() == b.get_hash() == c.get_hash()
    assert hash(a) == hash(b)

    derived = Board.from_rows(['OXXO']).apply_move(Move.create(2, 0, -1, 0))
    fresh = Board.from_rows(['XOOO'])
    assert derived == fresh
    assert derived.get_hash() == fresh.get_hash(), "Ключ пересчитывается, а не наследуется"


def test_equality_ignores_hasher():
    """Тест: равенство досок зависит только от клеток."""
    a = Board.from_rows(['XXO'], hasher=BoardHasher('crc32', 4))
    b = Board.from_rows(['XXO'], hasher=BoardHasher('md5', None))

    assert a == b
    assert a.get_hash() != b.get_hash()


def test_ragged_boards_are_distinct():
    """Тест: 'XX','X' и 'X','XX' — разные доски."""
    a = Board.from_rows(['XX', 'X'])
    b = Board.from_rows(['X', 'XX'])

    assert a != b
    assert a.marble_count() == b.marble_count() == 3


def test_derived_board_inherits_hasher_and_directions():
    hasher = BoardHasher('zobrist', 6)
    board = Board.from_rows(['XXO'], hasher=hasher, directions=[(1, 0)])

    child = board.apply_move(Move.create(0, 0, 1, 0))

    assert child.hasher is hasher
    assert child.directions == (Coordinates(1, 0),)


def test_custom_directions():
    """Тест: набор направлений задаётся снаружи (только вправо)."""
    board = Board.from_rows(['XXOXX', 'OOOOO'], directions=[(1, 0)])

    assert board.get_moves() == [Move.create(0, 0, 1, 0)]


def test_empty_directions_mean_no_moves():
    """Тест: пустой набор направлений не подменяется направлениями по умолчанию."""
    board = Board.from_rows(['XXO'], directions=[])

    assert board.directions == ()
    assert board.get_moves() == []
    assert Board(['XXO'], directions=[]).get_moves() == []


@pytest.mark.parametrize("rows", [
    [],
    [''],
    ['...'],
    ['OOO'],
    ['XZO'],
])
def test_invalid_boards(rows):
    """Тест: нет клеток, нет шариков или неизвестный символ."""
    with pytest.raises(InvalidBoardError):
        Board.from_rows(rows)


def test_marbles_iteration_order():
    board = Board.from_rows(['.X.', 'X.X'])

    assert list(board.marbles()) == [Coordinates(1, 0), Coordinates(0, 1), Coordinates(2, 1)]


def test_move_notation():
    move = Move.create(2, 0, 0, 1)

    assert move.notation() == "C1 → C3"
    assert repr(move) == "Move(C1 → C3)"
