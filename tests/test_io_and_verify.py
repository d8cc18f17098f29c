"""
tests/test_io_and_verify.py

Тесты для:
- marbles_io.parser (строки, нотация, предустановки, файлы)
- marbles_io.visualizer (текстовый вывод, кадры решения)
- solutions.verify (проверка решений)
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import Board
from core.move import Move
from marbles_io import (
    parse_rows, parse_input, create_default_board, get_preset, load_board_file,
    display_board, format_solution, solution_frames, move_to_dict, PRESETS
)
from solutions.verify import verify_solution, replay
from utils.error_handling import InvalidBoardError, InvalidMoveError


def test_parse_rows_skips_comments_and_blank_lines():
    text = """
# доска из одного хода
XXO

.X
"""
    assert parse_rows(text) == ['XXO', '.X']


def test_parse_rows_accepts_glyphs_and_keeps_ragged_rows():
    assert parse_rows("●●○\n▫●  \n") == ['XXO', '.X']


def test_parse_rows_leading_spaces_are_blocked_cells():
    """Тест: отступ в начале строки не ошибка, а недоступные клетки."""
    assert parse_rows("  XXX\n  XOX\n") == ['..XXX', '..XOX']
    assert parse_rows(" ●●○") == ['.XXO']


def test_load_indented_board_file(tmp_path):
    path = tmp_path / "indented.txt"
    path.write_text("  XXO\n", encoding='utf-8')

    board = load_board_file(str(path))

    assert board.rows == ('..XXO',)
    assert board.get_moves() == [Move.create(2, 0, 1, 0)]


def test_parse_rows_errors():
    with pytest.raises(InvalidBoardError):
        parse_rows("XX?\n")
    with pytest.raises(InvalidBoardError):
        parse_rows("# только комментарий\n\n")


def test_parse_input_notation():
    """Тест: неперечисленные клетки становятся недоступными."""
    rows = parse_input("size=2x3 marbles=A1,B1 empty=C1")

    assert rows == ['XXO', '...']


def test_parse_input_accepts_pegs_alias():
    assert parse_input("size=1x3 pegs=A1,B1 empty=C1") == ['XXO']


@pytest.mark.parametrize("text", [
    "marbles=A1 empty=B1",
    "size=1x3 marbles=A1,D1 empty=C1",
    "size=1x3 marbles=A1,1B empty=C1",
])
def test_parse_input_errors(text):
    with pytest.raises(InvalidBoardError):
        parse_input(text)


def test_default_board():
    board = create_default_board()

    assert board.marble_count() == 32
    assert board.rows[3] == 'XXXOXXX'
    assert board.cell(0, 0).value == '.'


def test_presets_are_valid_boards():
    for name in PRESETS:
        assert isinstance(get_preset(name), Board)

    with pytest.raises(InvalidBoardError):
        get_preset('european')


def test_load_board_file(tmp_path):
    path = tmp_path / "board.txt"
    path.write_text("# тест\nXXO\n", encoding='utf-8')

    board = load_board_file(str(path))

    assert board.rows == ('XXO',)

    with pytest.raises(InvalidBoardError):
        load_board_file(str(tmp_path / "missing.txt"))


def test_display_board():
    board = Board.from_rows(['XXO', '.X'])

    assert display_board(board) == "   A B C\n1  ● ● ○\n2  ▫ ●"


def test_format_solution():
    move = Move.create(0, 0, 1, 0)

    assert "не найдено" in format_solution(None)
    assert "один шарик" in format_solution([])
    text = format_solution([move])
    assert "1 ходов" in text
    assert "A1 → C1" in text


def test_solution_frames():
    board = Board.from_rows(['XXOXO'])
    moves = [Move.create(0, 0, 1, 0), Move.create(2, 0, 1, 0)]

    frames = solution_frames(board, moves)

    assert [frame.rows[0] for frame in frames] == ['XXOXO', 'OOXXO', 'OOOOX']


def test_move_to_dict():
    data = move_to_dict(Move.create(0, 2, 0, -1))

    assert data == {
        'from': {'x': 0, 'y': 2},
        'over': {'x': 0, 'y': 1},
        'to': {'x': 0, 'y': 0},
        'notation': 'A3 → A1',
    }


def test_verify_solution():
    board = Board.from_rows(['XXOXO'])
    good = [Move.create(0, 0, 1, 0), Move.create(2, 0, 1, 0)]

    assert verify_solution(board, good) is True
    assert verify_solution(board, good[:1]) is False, "Остаётся два шарика"
    assert verify_solution(board, [Move.create(3, 0, -1, 0)]) is False, "Недопустимый ход"
    assert verify_solution(board, []) is False
    assert verify_solution(Board.from_rows(['X']), []) is True


def test_replay_raises_on_illegal_move():
    board = Board.from_rows(['XXOXO'])

    assert replay(board, [Move.create(0, 0, 1, 0)]).rows == ('OOXXO',)
    with pytest.raises(InvalidMoveError):
        replay(board, [Move.create(2, 0, 1, 0)])
