"""Sequence algorithms над парами курсоров [first, last).

CursorRange превращает пару курсоров в MutableSequence фиксированной
длины, поэтому к цифрам применимы обычные приёмы Python (срезы,
reverse(), sort(), index(), count()). Функции модуля повторяют
iterator-style алгоритмы: reverse, sort, equal, mismatch, transform,
copy, fill, iter_swap.

Направление обхода задаётся курсорами: сортировка по rbegin()/rend()
упорядочивает цифры от младшей к старшей (зеркально forward-сортировке).
"""

import operator
from collections.abc import MutableSequence
from typing import Any, Callable, Iterator, List, Optional, Tuple

from src.adaptor.accessor import DigitRef, swap
from src.adaptor.cursor import DigitCursor


def _writable(cursor: DigitCursor) -> DigitCursor:
    if not cursor.mutable:
        raise TypeError("Cannot write digits through a const cursor")
    return cursor


def distance(first: DigitCursor, last: DigitCursor) -> int:
    """Количество позиций в [first, last) (не меньше нуля)."""
    return max(last - first, 0)


class CursorRange(MutableSequence):
    """MutableSequence фиксированной длины над [first, last).

    Элементы: значения цифр (int). Индексация следует правилам
    последовательностей Python: отрицательный индекс считается с конца,
    индекс вне диапазона даёт IndexError. Вставка и удаление невозможны.
    """

    def __init__(self, first: DigitCursor, last: DigitCursor):
        self._first = first.copy()
        self._length = distance(first, last)

    @property
    def mutable(self) -> bool:
        return self._first.mutable

    def __len__(self) -> int:
        return self._length

    def _position(self, index: int) -> int:
        index = operator.index(index)
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("digit range index out of range")
        return index

    def ref(self, index: int) -> Any:
        """Accessor цифры с индексом index внутри диапазона."""
        return (self._first + self._position(index)).deref()

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return [self.ref(i).get() for i in range(*index.indices(self._length))]
        return self.ref(index).get()

    def __setitem__(self, index: Any, value: Any) -> None:
        _writable(self._first)
        if isinstance(index, slice):
            positions = range(*index.indices(self._length))
            values = list(value)
            if len(values) != len(positions):
                raise ValueError(
                    f"digit ranges have a fixed size: cannot assign "
                    f"{len(values)} values to {len(positions)} positions"
                )
            for position, digit in zip(positions, values):
                self.ref(position).set(digit)
            return
        self.ref(index).set(value)

    def __delitem__(self, index: Any) -> None:
        raise TypeError("digit ranges have a fixed size")

    def insert(self, index: int, value: Any) -> None:
        raise TypeError("digit ranges have a fixed size")

    def __iter__(self) -> Iterator[int]:
        cursor = self._first.copy()
        for _ in range(self._length):
            yield cursor.deref().get()
            cursor.increment()

    def sort(self, key: Optional[Callable[[int], Any]] = None, reverse: bool = False) -> None:
        """Сортировка цифр на месте (по значениям)."""
        self[:] = sorted(self, key=key, reverse=reverse)

    def __repr__(self) -> str:
        return f"CursorRange({list(self)!r})"


# =============================================================================
# ITERATOR-STYLE АЛГОРИТМЫ
# =============================================================================


def iter_swap(first: DigitCursor, second: DigitCursor) -> None:
    """Обмен цифрами, на которые указывают два mutable курсора."""
    a = _writable(first).deref()
    b = _writable(second).deref()
    swap(a, b)  # type: ignore[arg-type]


def reverse(first: DigitCursor, last: DigitCursor) -> None:
    """Разворот цифр в [first, last) обменом с концов к середине."""
    left = first.copy()
    right = last.copy()
    while left < right:
        right.decrement()
        if left == right:
            break
        iter_swap(left, right)
        left.increment()


def sort(
    first: DigitCursor,
    last: DigitCursor,
    key: Optional[Callable[[int], Any]] = None,
    reverse: bool = False,
) -> None:
    """Сортировка цифр в [first, last) по возрастанию (или убыванию)."""
    _writable(first)
    CursorRange(first, last).sort(key=key, reverse=reverse)


def equal(first1: DigitCursor, last1: DigitCursor, first2: DigitCursor) -> bool:
    """Поэлементное равенство [first1, last1) и диапазона с first2."""
    return mismatch(first1, last1, first2)[0] >= last1


def mismatch(
    first1: DigitCursor, last1: DigitCursor, first2: DigitCursor
) -> Tuple[DigitCursor, DigitCursor]:
    """Первая пара позиций, где цифры различаются (или (last1, ...))."""
    left = first1.copy()
    right = first2.copy()
    while left < last1 and left.deref() == right.deref():
        left.increment()
        right.increment()
    return left, right


def transform(
    first: DigitCursor,
    last: DigitCursor,
    out: DigitCursor,
    func: Callable[[int], int],
) -> DigitCursor:
    """Запись func(digit) для каждой цифры [first, last) через out.

    Returns:
        Курсор out после последней записанной позиции
    """
    # Значения читаются заранее: out может указывать на тот же view
    values = list(CursorRange(first, last))
    target = _writable(out).copy()
    for digit in values:
        target.deref().set(func(digit))  # type: ignore[attr-defined]
        target.increment()
    return target


def copy(first: DigitCursor, last: DigitCursor, out: DigitCursor) -> DigitCursor:
    """Копирование цифр [first, last) через out."""
    return transform(first, last, out, lambda digit: digit)


def fill(first: DigitCursor, last: DigitCursor, value: int) -> None:
    """Запись одной цифры во все позиции [first, last)."""
    _writable(first)
    cursor = first.copy()
    while cursor < last:
        ref: DigitRef = cursor.deref()  # type: ignore[assignment]
        ref.set(value)
        cursor.increment()


def to_list(first: DigitCursor, last: DigitCursor) -> List[int]:
    """Значения цифр [first, last) списком."""
    return list(CursorRange(first, last))
