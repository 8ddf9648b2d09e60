"""Digit View — число как контейнер цифр в заданном основании.

View привязывается к ссылке на число и фиксирует количество цифр:
- по модулю числа в момент построения (у нуля одна цифра)
- или явно (digits=...), независимо от модуля

Цифры нумеруются слева направо: индекс 0 означает старшую цифру, индекс
size() - 1 означает младшую. Индексы вне [0, size()] ограничиваются (clamp),
отрицательный индекс означает позицию 0, а не отсчёт с конца.

Основание фиксируется при определении класса или при построении:

    class HexView(DigitView, radix=16):
        pass

    view = DigitView(cell, radix=8)

Неверное основание (<= 1) отвергается ViewSpec в момент определения
класса или построения view.
"""

import logging
import operator
from typing import Any, ClassVar, Iterator, List, Optional

from src.adaptor.accessor import ConstDigitRef, DigitRef
from src.adaptor.cursor import DigitCursor, Direction
from src.core.domain.scalar import as_scalar_ref, is_readonly
from src.core.domain.view_spec import ViewSpec
from src.core.math.positional import DEFAULT_RADIX, forward_divisor, total_digits

logger = logging.getLogger(__name__)


class ConstDigitView:
    """Read-only digit view.

    Не владеет числом: хранит только ссылку, основание и количество цифр.
    Количество цифр не меняется за время жизни view.
    """

    RADIX: ClassVar[int] = DEFAULT_RADIX
    MUTABLE: ClassVar[bool] = False

    def __init_subclass__(cls, radix: Optional[int] = None, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if radix is not None:
            cls.RADIX = ViewSpec(radix=radix).radix

    def __init__(self, scalar: Any, digits: Optional[int] = None, *, radix: Optional[int] = None):
        """
        Args:
            scalar: int или ссылка на число (IntCell, AttributeRef, ...)
            digits: явное количество цифр (None: по модулю числа)
            radix: основание (None: RADIX класса)

        Raises:
            pydantic.ValidationError: radix <= 1 или digits < 0
            TypeError: scalar не int и не ссылка
        """
        spec = ViewSpec(radix=self.RADIX if radix is None else radix, digits=digits)
        self._scalar = self._bind(scalar)
        self._radix = spec.radix

        if spec.digits is None:
            self._digits = total_digits(self._scalar.get(), self._radix)
        else:
            self._digits = spec.digits

        logger.debug(
            "Bound %s: radix=%d digits=%d explicit=%s",
            type(self).__name__,
            self._radix,
            self._digits,
            spec.digits is not None,
        )

    @classmethod
    def _bind(cls, scalar: Any) -> Any:
        return as_scalar_ref(scalar)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def radix(self) -> int:
        return self._radix

    @property
    def scalar(self) -> Any:
        """Ссылка на число, к которому привязан view."""
        return self._scalar

    @property
    def value(self) -> int:
        """Текущее значение числа."""
        return self._scalar.get()

    def size(self) -> int:
        return self._digits

    def __len__(self) -> int:
        return self._digits

    def __int__(self) -> int:
        return self._scalar.get()

    # -------------------------------------------------------------------------
    # Доступ к цифрам
    # -------------------------------------------------------------------------

    def _ref(self, index: int) -> ConstDigitRef:
        ref_type = DigitRef if self.MUTABLE else ConstDigitRef
        divisor = forward_divisor(operator.index(index), self._digits, self._radix)
        return ref_type(self._scalar, divisor, self._radix)

    def __getitem__(self, index: int) -> ConstDigitRef:
        return self._ref(index)

    def digits(self) -> List[int]:
        """Цифры как список int (старшая первой)."""
        return [ref.get() for ref in self]

    def __iter__(self) -> Iterator[ConstDigitRef]:
        cursor, last = self.begin(), self.end()
        while cursor != last:
            yield cursor.deref()
            cursor.increment()

    def __reversed__(self) -> Iterator[ConstDigitRef]:
        cursor, last = self.rbegin(), self.rend()
        while cursor != last:
            yield cursor.deref()
            cursor.increment()

    # -------------------------------------------------------------------------
    # Курсоры
    # -------------------------------------------------------------------------

    def _cursor(self, position: int, direction: Direction, mutable: bool) -> DigitCursor:
        return DigitCursor(self, position, direction, mutable)

    def begin(self) -> DigitCursor:
        return self._cursor(0, Direction.FORWARD, self.MUTABLE)

    def end(self) -> DigitCursor:
        return self._cursor(self._digits, Direction.FORWARD, self.MUTABLE)

    def cbegin(self) -> DigitCursor:
        return self._cursor(0, Direction.FORWARD, False)

    def cend(self) -> DigitCursor:
        return self._cursor(self._digits, Direction.FORWARD, False)

    def rbegin(self) -> DigitCursor:
        return self._cursor(0, Direction.REVERSE, self.MUTABLE)

    def rend(self) -> DigitCursor:
        return self._cursor(self._digits, Direction.REVERSE, self.MUTABLE)

    def crbegin(self) -> DigitCursor:
        return self._cursor(0, Direction.REVERSE, False)

    def crend(self) -> DigitCursor:
        return self._cursor(self._digits, Direction.REVERSE, False)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self.value}, "
            f"radix={self._radix}, digits={self._digits})"
        )


class DigitView(ConstDigitView):
    """Read-write digit view.

    Требует изменяемую ссылку на число: int или FrozenIntCell отвергаются
    при построении.
    """

    MUTABLE: ClassVar[bool] = True

    @classmethod
    def _bind(cls, scalar: Any) -> Any:
        ref = as_scalar_ref(scalar)
        if is_readonly(ref):
            raise TypeError(
                f"{cls.__name__} requires a mutable scalar reference, "
                f"got {type(scalar).__name__}"
            )
        return ref

    def __getitem__(self, index: int) -> DigitRef:
        return self._ref(index)  # type: ignore[return-value]

    def __setitem__(self, index: int, value: Any) -> None:
        self._ref(index).set(value)  # type: ignore[attr-defined]

    def as_const(self) -> ConstDigitView:
        """Read-only view над тем же числом с тем же основанием и размером."""
        return ConstDigitView(self._scalar, self._digits, radix=self._radix)


def bind(scalar: Any, digits: Optional[int] = None, radix: int = DEFAULT_RADIX) -> ConstDigitView:
    """
    Построение view подходящего варианта.

    Args:
        scalar: int или ссылка на число
        digits: явное количество цифр (optional)
        radix: основание

    Returns:
        DigitView для изменяемой ссылки, ConstDigitView для int и
        read-only ссылок
    """
    ref = as_scalar_ref(scalar)
    if is_readonly(ref):
        return ConstDigitView(ref, digits, radix=radix)
    return DigitView(ref, digits, radix=radix)
