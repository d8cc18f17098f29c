"""
solutions - Проверка решений.
"""

from .verify import verify_solution, replay

__all__ = [
    'verify_solution',
    'replay',
]
