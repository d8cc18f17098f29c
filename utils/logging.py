"""
utils/logging.py

Централизованная система логирования.
"""

import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "marbles_solver"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _to_level(level: Union[int, str]) -> int:
    """'DEBUG' / 'info' / 10 → числовой уровень logging."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Неизвестный уровень логирования: {level}")
    return value


class SolverLogger:
    """Логгер для решателей."""

    def __init__(self, name: str = LOGGER_NAME, level: Union[int, str] = logging.INFO):
        """
        Args:
            name: имя логгера
            level: уровень логирования
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(_to_level(level))

        # Избегаем дублирования handlers
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self.logger.addHandler(console_handler)

    def set_level(self, level: Union[int, str]):
        self.logger.setLevel(_to_level(level))

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)


# Глобальный логгер
_default_logger: Optional[SolverLogger] = None


def get_logger(name: str = LOGGER_NAME, level: Union[int, str] = logging.INFO) -> SolverLogger:
    """
    Возвращает глобальный логгер или создаёт новый.

    Args:
        name: имя логгера
        level: уровень логирования (только при первом вызове)
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = SolverLogger(name, level)
    return _default_logger


def setup_file_logging(log_file: str = "marbles_solver.log", level: Union[int, str] = logging.INFO):
    """
    Дублирует лог в файл.

    Args:
        log_file: путь к файлу лога
        level: уровень логирования для файла
    """
    logger = get_logger()

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(_to_level(level))
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.logger.addHandler(file_handler)
    return file_handler
