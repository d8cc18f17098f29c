"""
core/config.py

Настройки решателя.

Пример JSON файла:
    {"solver": "iterative", "hash_algorithm": "md5", "hash_width": 5}
"""

import json
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

from .hashing import BoardHasher, DEFAULT_HASH_ALGORITHM, DEFAULT_HASH_WIDTH
from utils.error_handling import ConfigError

SOLVER_NAMES = ('recursive', 'iterative')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


@dataclass
class SolverConfig:
    """Конфигурация одного запуска."""
    solver: str = 'recursive'
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    hash_width: Optional[int] = DEFAULT_HASH_WIDTH
    verbose: bool = False
    log_level: str = 'INFO'

    def validate(self) -> 'SolverConfig':
        """
        Raises:
            ConfigError: при недопустимых значениях
        """
        if self.solver not in SOLVER_NAMES:
            raise ConfigError(
                f"Неизвестный решатель: {self.solver!r} (доступны: {', '.join(SOLVER_NAMES)})"
            )
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigError(f"Неизвестный уровень логирования: {self.log_level!r}")
        self.make_hasher()
        return self

    def make_hasher(self) -> BoardHasher:
        return BoardHasher(self.hash_algorithm, self.hash_width)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SolverConfig':
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Неизвестные параметры: {', '.join(sorted(unknown))}")
        return cls(**data).validate()


def load_config(path: str) -> SolverConfig:
    """
    Загружает конфигурацию из JSON файла.

    Raises:
        ConfigError: файл не читается или содержит неверные данные
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Не удалось прочитать конфигурацию {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Конфигурация {path} должна быть JSON объектом")
    return SolverConfig.from_dict(data)
