"""
solvers - Решатели Marbles

Экспортирует:
- MarblesSolver: рекурсивный DFS с индексом тупиков
- IterativeMarblesSolver: тот же DFS на явном стеке
- DeadEndIndex: хеш-индекс тупиковых досок
"""

from typing import Optional

from .base import BaseSolver, SolverStats
from .dead_end import DeadEndIndex
from .marbles import MarblesSolver
from .iterative import IterativeMarblesSolver
from core.config import SolverConfig

SOLVERS = {
    'recursive': MarblesSolver,
    'iterative': IterativeMarblesSolver,
}


def create_solver(config: Optional[SolverConfig] = None) -> BaseSolver:
    """Создаёт решатель по конфигурации."""
    config = (config or SolverConfig()).validate()
    return SOLVERS[config.solver](verbose=config.verbose)


__all__ = [
    'BaseSolver',
    'SolverStats',
    'DeadEndIndex',
    'MarblesSolver',
    'IterativeMarblesSolver',
    'SOLVERS',
    'create_solver',
]
