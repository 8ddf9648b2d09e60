"""
Scalar References — хранилище числа, к которому привязывается view

Целые числа в Python неизменяемы, поэтому view привязывается не к самому
числу, а к ссылке на место, где оно хранится. Ссылка предоставляет:
- get() -> int: текущее значение
- set(value): запись нового значения (только mutable ссылки)

View никогда не владеет значением: ссылка живёт снаружи, view лишь
читает и пишет через неё.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel, Field


# =============================================================================
# PYDANTIC CELLS
# =============================================================================


class IntCell(BaseModel):
    """
    Изменяемая ячейка с целым числом.

    validate_assignment=True: запись не-int значения отвергается pydantic.
    """

    value: int = Field(0, description="Текущее значение числа")

    model_config = {"validate_assignment": True}

    readonly: ClassVar[bool] = False

    def get(self) -> int:
        return self.value

    def set(self, value: int) -> None:
        self.value = value


class FrozenIntCell(BaseModel):
    """
    Неизменяемая ячейка с целым числом (frozen=True).

    Используется для read-only views, в том числе когда view строится
    над обычным int.
    """

    value: int = Field(0, description="Значение числа")

    model_config = {"frozen": True}

    readonly: ClassVar[bool] = True

    def get(self) -> int:
        return self.value


# =============================================================================
# ССЫЛКИ НА ВНЕШНЕЕ ХРАНИЛИЩЕ
# =============================================================================


@dataclass(frozen=True)
class AttributeRef:
    """Ссылка на атрибут произвольного объекта."""

    owner: Any
    name: str

    readonly: ClassVar[bool] = False

    def get(self) -> int:
        return getattr(self.owner, self.name)

    def set(self, value: int) -> None:
        setattr(self.owner, self.name, value)


@dataclass(frozen=True)
class ItemRef:
    """Ссылка на элемент контейнера (list, dict, ...)."""

    container: Any
    key: Any

    readonly: ClassVar[bool] = False

    def get(self) -> int:
        return self.container[self.key]

    def set(self, value: int) -> None:
        self.container[self.key] = value


@dataclass(frozen=True)
class ReadOnlyRef:
    """Read-only фасад над любой ссылкой: только get()."""

    target: Any

    readonly: ClassVar[bool] = True

    def get(self) -> int:
        return self.target.get()


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def is_readonly(ref: Any) -> bool:
    """
    Проверка, что ссылка не поддерживает запись.

    Ссылка без метода set() или с readonly=True считается read-only.
    """
    return getattr(ref, "readonly", False) or not callable(getattr(ref, "set", None))


def as_scalar_ref(scalar: Any) -> Any:
    """
    Приведение аргумента к ссылке на число.

    Args:
        scalar: int (становится FrozenIntCell) или объект с методом get()

    Returns:
        Ссылка с методом get() (и set() для mutable)

    Raises:
        TypeError: Если аргумент не int и не ссылка
    """
    if isinstance(scalar, bool):
        raise TypeError("bool is not a valid scalar for a digit view")

    if isinstance(scalar, int):
        return FrozenIntCell(value=scalar)

    if not isinstance(scalar, Mapping) and callable(getattr(scalar, "get", None)):
        return scalar

    raise TypeError(
        f"Expected int or scalar reference with get(), got {type(scalar).__name__}"
    )
