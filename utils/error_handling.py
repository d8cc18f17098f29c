"""
utils/error_handling.py

Исключения и обработка ошибок.

Нарушение контракта (невалидная доска, недопустимый ход) — исключение.
Отсутствие решения — нормальный результат (None), не исключение.
"""

from typing import Any, Callable, Tuple, Type
from functools import wraps

from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidBoardError(SolverError):
    """Ошибка невалидной доски."""
    pass


class InvalidMoveError(SolverError):
    """Ход недопустим на данной доске."""
    pass


class ConfigError(SolverError):
    """Ошибка конфигурации."""
    pass


def handle_errors(default_return: Any = None, log_error: bool = True,
                  exceptions: Tuple[Type[SolverError], ...] = (SolverError,)):
    """
    Декоратор: перехватывает ошибки из exceptions, логирует и возвращает default_return.

    Прочие исключения не перехватываются.

    Args:
        default_return: значение по умолчанию при ошибке
        log_error: логировать ли ошибку
        exceptions: перехватываемые типы (по умолчанию любой SolverError)
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except exceptions as e:
                if log_error:
                    get_logger().error(f"{func.__name__}: {e}")
                return default_return
        return wrapper
    return decorator


def validate_board(board) -> bool:
    """
    Валидирует доску перед поиском.

    Raises:
        InvalidBoardError: если доска невалидна
    """
    if board is None:
        raise InvalidBoardError("Доска не может быть None")

    if not hasattr(board, 'marble_count'):
        raise InvalidBoardError("Доска должна иметь метод marble_count()")

    if not board.rows or not any(board.rows):
        raise InvalidBoardError("Доска не содержит клеток")

    if board.marble_count() < 1:
        raise InvalidBoardError("Доска должна содержать хотя бы один шарик")

    return True
