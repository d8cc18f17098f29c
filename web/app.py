"""
web/app.py

Flask веб-приложение для Marbles Solver.
"""

import os
import sys
import time

from flask import Flask, render_template, request, jsonify

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.board import Board
from core.config import SolverConfig
from marbles_io import PRESETS, get_preset, solution_frames, move_to_dict
from solvers import create_solver
from utils.error_handling import SolverError, InvalidBoardError
from utils.logging import get_logger

app = Flask(__name__)


def board_to_json(board: Board) -> dict:
    return {
        'rows': list(board.rows),
        'marble_count': board.marble_count(),
    }


def run_solver(board: Board, config: SolverConfig):
    """Новый решатель на каждый запрос: индексы тупиков не разделяются."""
    solver = create_solver(config)
    start = time.perf_counter()
    solution = solver.solve(board)
    elapsed = time.perf_counter() - start
    return solution, elapsed, solver.stats


@app.route('/')
def index():
    """Решение доски по умолчанию: все позиции от начальной до финальной."""
    name = request.args.get('preset', 'default')
    config = SolverConfig()
    try:
        board = get_preset(name, hasher=config.make_hasher())
    except InvalidBoardError as e:
        return jsonify({'success': False, 'error': str(e)}), 404

    solution, elapsed, stats = run_solver(board, config)
    frames = solution_frames(board, solution) if solution is not None else [board]
    return render_template(
        'index.html',
        preset=PRESETS[name]['name'],
        frames=frames,
        solution=solution,
        elapsed=elapsed,
        stats=stats,
    )


@app.route('/api/solve', methods=['POST'])
def solve():
    """
    API для решения головоломки.

    Тело запроса: {"rows": ["XXO"], "solver": "recursive",
                   "hash_algorithm": "crc32", "hash_width": 4}
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'success': False, 'error': 'Ожидается JSON объект'}), 400

    rows = data.get('rows')
    if not isinstance(rows, list) or not all(isinstance(row, (str, list)) for row in rows):
        return jsonify({'success': False, 'error': 'Поле rows должно быть списком строк'}), 400

    try:
        config = SolverConfig.from_dict({k: v for k, v in data.items() if k != 'rows'})
        board = Board.from_rows(rows, hasher=config.make_hasher())
    except SolverError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except TypeError as e:
        return jsonify({'success': False, 'error': f'Неверные параметры: {e}'}), 400

    get_logger().info(f"Solve request: solver={config.solver}, marbles={board.marble_count()}")
    solution, elapsed, stats = run_solver(board, config)

    if solution is None:
        return jsonify({
            'success': False,
            'error': 'Решение не найдено',
            'marble_count': board.marble_count(),
            'time': round(elapsed, 3),
            'dead_ends': stats.dead_ends,
        })

    return jsonify({
        'success': True,
        'moves': [move_to_dict(move) for move in solution],
        'move_count': len(solution),
        'marble_count': board.marble_count(),
        'time': round(elapsed, 3),
        'nodes_visited': stats.nodes_visited,
        'dead_ends': stats.dead_ends,
    })


@app.route('/api/preset/<name>')
def preset(name):
    """Получить предустановленную позицию."""
    if name not in PRESETS:
        return jsonify({'error': 'Preset not found'}), 404
    return jsonify({'name': PRESETS[name]['name'], 'rows': PRESETS[name]['rows']})


@app.route('/api/config')
def config_defaults():
    """Настройки по умолчанию."""
    return jsonify(SolverConfig().to_dict())


if __name__ == '__main__':
    print("=" * 50)
    print("Marbles Solver - Web UI")
    print("=" * 50)
    print("\nOpen http://localhost:5000 in your browser")
    print()

    app.run(debug=True, host='0.0.0.0', port=5000)
