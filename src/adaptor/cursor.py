"""Digit Cursor — random-access обход позиций цифр.

Единственное состояние курсора: индекс позиции в [0, size]. Любое
перемещение насыщается на границах (clamp), а не выходит за диапазон.

Четыре варианта курсора:
- FORWARD / REVERSE: нумерация от старшей или от младшей цифры
- mutable / const: deref() отдаёт DigitRef или ConstDigitRef

Позиция size является past-the-end sentinel: deref() на ней не проверяется и
отдаёт accessor со служебным делителем (только для сравнения концов).
"""

from enum import Enum
from typing import Any, Union

from src.adaptor.accessor import ConstDigitRef, DigitRef
from src.core.math.positional import clamp_index, compute_divisor


class Direction(str, Enum):
    """Направление обхода цифр."""

    FORWARD = "forward"  # старшая → младшая
    REVERSE = "reverse"  # младшая → старшая


class DigitCursor:
    """Random-access курсор по цифрам view.

    Operations:
    - cursor + n, cursor - n, +=, -= (насыщение на [0, size])
    - cursor - other → разница позиций
    - increment()/decrement() и post-формы
    - сравнения по позиции
    - deref(), cursor[n]
    """

    __slots__ = ("_view", "_position", "_direction", "_mutable")

    def __init__(
        self,
        view: Any,
        position: int = 0,
        direction: Direction = Direction.FORWARD,
        mutable: bool = True,
    ):
        """
        Args:
            view: исходный digit view
            position: стартовая позиция (clamp в [0, view.size()])
            direction: направление обхода
            mutable: True, если deref() должен отдавать DigitRef
        """
        self._view = view
        self._position = clamp_index(position, view.size())
        self._direction = Direction(direction)
        self._mutable = mutable

    @property
    def view(self) -> Any:
        return self._view

    @property
    def position(self) -> int:
        return self._position

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def mutable(self) -> bool:
        return self._mutable

    def copy(self) -> "DigitCursor":
        return DigitCursor(self._view, self._position, self._direction, self._mutable)

    def _moved(self, offset: int) -> "DigitCursor":
        return DigitCursor(
            self._view, self._position + offset, self._direction, self._mutable
        )

    # -------------------------------------------------------------------------
    # Перемещение
    # -------------------------------------------------------------------------

    def increment(self) -> "DigitCursor":
        if self._position < self._view.size():
            self._position += 1
        return self

    def decrement(self) -> "DigitCursor":
        if self._position > 0:
            self._position -= 1
        return self

    def post_increment(self) -> "DigitCursor":
        """Сдвиг вперёд, возвращает копию курсора до сдвига."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "DigitCursor":
        previous = self.copy()
        self.decrement()
        return previous

    def __add__(self, offset: int) -> "DigitCursor":
        if not isinstance(offset, int):
            return NotImplemented
        return self._moved(offset)

    def __radd__(self, offset: int) -> "DigitCursor":
        return self.__add__(offset)

    def __sub__(self, other: Union[int, "DigitCursor"]) -> Any:
        if isinstance(other, DigitCursor):
            return self._position - other._position
        if not isinstance(other, int):
            return NotImplemented
        return self._moved(-other)

    def __iadd__(self, offset: int) -> "DigitCursor":
        if not isinstance(offset, int):
            return NotImplemented
        self._position = clamp_index(self._position + offset, self._view.size())
        return self

    def __isub__(self, offset: int) -> "DigitCursor":
        if not isinstance(offset, int):
            return NotImplemented
        self._position = clamp_index(self._position - offset, self._view.size())
        return self

    # -------------------------------------------------------------------------
    # Сравнения (по позиции)
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DigitCursor):
            return NotImplemented
        return self._position == other._position

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, DigitCursor):
            return NotImplemented
        return self._position != other._position

    def __lt__(self, other: "DigitCursor") -> bool:
        if not isinstance(other, DigitCursor):
            return NotImplemented
        return self._position < other._position

    def __le__(self, other: "DigitCursor") -> bool:
        if not isinstance(other, DigitCursor):
            return NotImplemented
        return self._position <= other._position

    def __gt__(self, other: "DigitCursor") -> bool:
        if not isinstance(other, DigitCursor):
            return NotImplemented
        return self._position > other._position

    def __ge__(self, other: "DigitCursor") -> bool:
        if not isinstance(other, DigitCursor):
            return NotImplemented
        return self._position >= other._position

    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Доступ к цифре
    # -------------------------------------------------------------------------

    def divisor(self) -> int:
        """Делитель текущей позиции для направления курсора."""
        return compute_divisor(
            self._position,
            self._view.size(),
            self._view.radix,
            reverse=self._direction is Direction.REVERSE,
        )

    def deref(self) -> ConstDigitRef:
        """Accessor для текущей позиции (DigitRef для mutable курсора)."""
        ref_type = DigitRef if self._mutable else ConstDigitRef
        return ref_type(self._view.scalar, self.divisor(), self._view.radix)

    def __getitem__(self, offset: int) -> ConstDigitRef:
        return self._moved(offset).deref()

    def __repr__(self) -> str:
        access = "mutable" if self._mutable else "const"
        return (
            f"DigitCursor(position={self._position}, "
            f"direction={self._direction.value}, {access})"
        )
