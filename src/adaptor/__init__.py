"""Digit adaptor — целое число как random-access контейнер цифр.

- View (ConstDigitView / DigitView): привязка к числу, размер, индексация
- Accessor (ConstDigitRef / DigitRef): proxy-ссылка на одну цифру
- Cursor (DigitCursor): forward/reverse random-access обход
- algorithms: sort/reverse/equal/transform над парами курсоров
"""

from .accessor import ConstDigitPointer, ConstDigitRef, DigitPointer, DigitRef, swap
from .algorithms import CursorRange
from .cursor import DigitCursor, Direction
from .view import ConstDigitView, DigitView, bind

__all__ = [
    # Views
    "ConstDigitView",
    "DigitView",
    "bind",
    # Accessors
    "ConstDigitRef",
    "DigitRef",
    "ConstDigitPointer",
    "DigitPointer",
    "swap",
    # Cursors
    "DigitCursor",
    "Direction",
    # Algorithms
    "CursorRange",
]
