"""Конфигурация демонстрационной программы digit adaptor."""

from dataclasses import dataclass
from typing import Final, Optional, Tuple

from src.core.math.positional import DEFAULT_RADIX

# Значения встроенной демонстрации
DEMO_VALUE: Final[int] = 8675309
DEMO_COMPARE_VALUE: Final[int] = 8675319
DEMO_RADICES: Final[Tuple[int, ...]] = (10, 5)

# Цифры, записываемые через reverse-курсор (от младшей к старшей)
REVERSE_WRITE_DIGITS: Final[Tuple[int, ...]] = (1, 2, 3, 4)

# Позиция, на которой демонстрируются инкремент и декремент
STEP_DIGIT_INDEX: Final[int] = 4

LOG_LEVELS: Final[Tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class DemoConfig:
    """Параметры запуска демо.

    value=None: полный набор встроенных сценариев
    (8675309 и -8675309 в основаниях 10 и 5, затем сравнение).
    """

    value: Optional[int] = None
    radix: int = DEFAULT_RADIX
    digits: Optional[int] = None
    compare: Optional[int] = None
    log_level: str = "WARNING"
    log_file: Optional[str] = None
