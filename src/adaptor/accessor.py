"""Digit Accessors — proxy-ссылки на одну цифру числа.

Accessor не хранит цифру: каждое чтение заново вычисляет её из живого
значения по ссылке, каждая запись заново собирает число с заменённой
цифрой. Accessor определяется парой (ссылка на число, делитель позиции).

Два варианта:
- ConstDigitRef: только чтение и сравнение
- DigitRef: чтение, запись, инкремент/декремент, swap

DigitRef свободно превращается в ConstDigitRef (as_const), обратного
преобразования нет.
"""

from typing import Any

from src.core.math.positional import DEFAULT_RADIX, extract_digit, replace_digit


def _digit_value(other: Any) -> Any:
    """Значение цифры для сравнений и записи: int или цифра другого accessor."""
    if isinstance(other, ConstDigitRef):
        return other.get()
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return NotImplemented


class ConstDigitRef:
    """Read-only accessor к цифре.

    Сравнения (==, <, ...) сравнивают значения цифр, а не позиции или
    ссылки. Арифметика (+, -) отдаёт обычный int.
    """

    __slots__ = ("_scalar", "_divisor", "_radix")

    def __init__(self, scalar: Any, divisor: int, radix: int = DEFAULT_RADIX):
        """
        Args:
            scalar: ссылка на число (метод get())
            divisor: positional weight цифры
            radix: основание
        """
        self._scalar = scalar
        self._divisor = divisor
        self._radix = radix

    @property
    def divisor(self) -> int:
        return self._divisor

    @property
    def radix(self) -> int:
        return self._radix

    def get(self) -> int:
        """Текущая цифра, вычисленная из живого значения."""
        return extract_digit(self._scalar.get(), self._divisor, self._radix)

    def address(self) -> "ConstDigitPointer":
        """Pointer-like handle, единственная операция которого deref()."""
        return ConstDigitPointer(self)

    def __int__(self) -> int:
        return self.get()

    def __index__(self) -> int:
        return self.get()

    def __bool__(self) -> bool:
        return self.get() != 0

    def __eq__(self, other: Any) -> bool:
        value = _digit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() == value

    def __ne__(self, other: Any) -> bool:
        value = _digit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() != value

    def __lt__(self, other: Any) -> bool:
        value = _digit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() < value

    def __le__(self, other: Any) -> bool:
        value = _digit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() <= value

    def __gt__(self, other: Any) -> bool:
        value = _digit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() > value

    def __ge__(self, other: Any) -> bool:
        value = _digit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() >= value

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Any) -> int:
        value = _digit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() + value

    def __radd__(self, other: Any) -> int:
        return self.__add__(other)

    def __sub__(self, other: Any) -> int:
        value = _digit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return self.get() - value

    def __rsub__(self, other: Any) -> int:
        value = _digit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return value - self.get()

    def __str__(self) -> str:
        return str(self.get())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(digit={self.get()}, "
            f"divisor={self._divisor}, radix={self._radix})"
        )


class DigitRef(ConstDigitRef):
    """Read-write accessor к цифре.

    Ведёт себя как lvalue-ссылка: set() от другого accessor копирует
    значение его цифры, а не саму пару (ссылка, делитель).
    """

    __slots__ = ()

    def set(self, value: Any) -> "DigitRef":
        """Запись цифры (value % radix). Возвращает сам accessor.

        Args:
            value: int или другой accessor

        Raises:
            TypeError: если value не int и не accessor
        """
        digit = _digit_value(value)
        if digit is NotImplemented:
            raise TypeError(
                f"Digit value must be int or digit accessor, got {type(value).__name__}"
            )
        current = self._scalar.get()
        self._scalar.set(replace_digit(current, self._divisor, digit, self._radix))
        return self

    def increment(self) -> "DigitRef":
        """Pre-increment: цифра + 1 по модулю radix."""
        return self.set(self.get() + 1)

    def decrement(self) -> "DigitRef":
        """Pre-decrement: цифра - 1 по модулю radix."""
        return self.set(self.get() - 1)

    def post_increment(self) -> int:
        """Post-increment: возвращает предыдущую цифру (значение, не accessor)."""
        previous = self.get()
        self.increment()
        return previous

    def post_decrement(self) -> int:
        """Post-decrement: возвращает предыдущую цифру."""
        previous = self.get()
        self.decrement()
        return previous

    def swap(self, other: "DigitRef") -> None:
        """Обмен значениями цифр (не самими accessor)."""
        if not isinstance(other, DigitRef):
            raise TypeError(f"Can only swap with DigitRef, got {type(other).__name__}")
        first = self.get()
        second = other.get()
        self.set(second)
        other.set(first)

    def as_const(self) -> ConstDigitRef:
        return ConstDigitRef(self._scalar, self._divisor, self._radix)

    def address(self) -> "DigitPointer":
        return DigitPointer(self)


class ConstDigitPointer:
    """Минимальный pointer на read-only цифру: только deref()."""

    __slots__ = ("_ref",)

    def __init__(self, ref: ConstDigitRef):
        self._ref = ref

    def deref(self) -> ConstDigitRef:
        return self._ref

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._ref!r})"


class DigitPointer(ConstDigitPointer):
    """Минимальный pointer на изменяемую цифру."""

    __slots__ = ()

    def deref(self) -> DigitRef:
        return self._ref


def swap(first: DigitRef, second: DigitRef) -> None:
    """Обмен значениями двух изменяемых цифр.

    Raises:
        TypeError: если хотя бы один аргумент не DigitRef
    """
    if not isinstance(first, DigitRef) or not isinstance(second, DigitRef):
        raise TypeError("swap() requires two read-write digit accessors")
    first.swap(second)
