"""
core - Ядро Marbles Solver

Базовые структуры данных и утилиты.
"""

from .board import Board, DEFAULT_DIRECTIONS
from .move import Coordinates, Move
from .hashing import BoardHasher, DEFAULT_HASH_ALGORITHM, DEFAULT_HASH_WIDTH
from .config import SolverConfig, load_config
from .utils import (
    Cell, DIRECTIONS, BLOCKED, EMPTY, MARBLE, GLYPHS,
    index_to_pos, pos_to_index, count_marbles
)

__all__ = [
    'Board', 'DEFAULT_DIRECTIONS', 'Coordinates', 'Move',
    'BoardHasher', 'DEFAULT_HASH_ALGORITHM', 'DEFAULT_HASH_WIDTH',
    'SolverConfig', 'load_config',
    'Cell', 'DIRECTIONS', 'BLOCKED', 'EMPTY', 'MARBLE', 'GLYPHS',
    'index_to_pos', 'pos_to_index', 'count_marbles'
]
