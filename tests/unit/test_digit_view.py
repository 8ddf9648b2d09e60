"""
Тесты для Digit View

Coverage:
- Размер view (по модулю числа и явный)
- Индексация, чтение и запись цифр
- Знак отрицательных чисел
- Основание: атрибут класса, параметр построения, проверка radix > 1
- ConstDigitView / DigitView / bind
- Сценарии: 12345, -12345, 0, 0x12345
"""

import pytest
from pydantic import ValidationError

from src.adaptor import ConstDigitRef, ConstDigitView, DigitRef, DigitView, bind
from src.core.domain import AttributeRef, FrozenIntCell, IntCell, ItemRef


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def cell():
    """Ячейка с числом 12345."""
    return IntCell(value=12345)


@pytest.fixture
def view(cell):
    """Десятичный view над 12345."""
    return DigitView(cell)


class HexView(DigitView, radix=16):
    pass


class OctalView(ConstDigitView, radix=8):
    pass


# =============================================================================
# РАЗМЕР
# =============================================================================


class TestViewSize:
    """Тесты размера view."""

    def test_size_from_magnitude(self, view) -> None:
        assert view.size() == 5
        assert len(view) == 5

    def test_zero_has_one_digit(self) -> None:
        view = DigitView(IntCell(value=0))
        assert view.size() == 1
        assert view.digits() == [0]

    def test_negative_size(self) -> None:
        assert DigitView(IntCell(value=-12345)).size() == 5

    @pytest.mark.parametrize("radix", [8, 10, 16])
    @pytest.mark.parametrize("value", [1, 9, 10, 255, 256, 12345, 8675309, -4096])
    def test_minimal_size(self, radix: int, value: int) -> None:
        """radix ** size > |value|, размер минимален"""
        size = ConstDigitView(value, radix=radix).size()
        assert radix**size > abs(value)
        assert radix ** (size - 1) <= abs(value)

    def test_explicit_size(self, cell) -> None:
        view = DigitView(cell, 8)
        assert view.size() == 8
        assert view.digits() == [0, 0, 0, 1, 2, 3, 4, 5]

    def test_size_fixed_after_construction(self, cell, view) -> None:
        """Размер не меняется при изменении числа"""
        cell.set(123456789)
        assert view.size() == 5
        view[0] = 0
        assert view.size() == 5

    def test_narrow_window_leaves_high_digits_untouched(self, cell) -> None:
        """Явный размер меньше модуля: старшие цифры недоступны"""
        view = DigitView(cell, 3)
        assert view.digits() == [3, 4, 5]
        view[0] = 9
        assert cell.value == 12945
        for ref in view:
            ref.set(0)
        assert cell.value == 12000

    def test_zero_size_view(self, cell) -> None:
        view = DigitView(cell, 0)
        assert view.size() == 0
        assert view.digits() == []
        assert view.begin() == view.end()


# =============================================================================
# ИНДЕКСАЦИЯ
# =============================================================================


class TestIndexing:
    """Тесты индексации view."""

    def test_digits_left_to_right(self, view) -> None:
        assert view.digits() == [1, 2, 3, 4, 5]
        assert [view[i].get() for i in range(5)] == [1, 2, 3, 4, 5]

    def test_write_most_significant(self, cell, view) -> None:
        view[0] = 6
        assert cell.value == 62345

    def test_write_through_accessor(self, cell, view) -> None:
        view[4].set(9)
        assert cell.value == 12349

    def test_round_trip(self, view) -> None:
        for i in range(5):
            for digit in (0, 7, 12, -3):
                view[i] = digit
                assert view[i].get() == digit % 10

    def test_negative_index_clamped_to_zero(self, view) -> None:
        """Отрицательный индекс — позиция 0, не отсчёт с конца"""
        assert view[-1].get() == 1
        assert view[-100].get() == view[0].get()

    def test_index_beyond_end_clamped(self, view) -> None:
        assert view[5].divisor == 1
        assert view[500].divisor == 1

    def test_accessor_type(self, view) -> None:
        assert isinstance(view[0], DigitRef)
        assert type(view.as_const()[0]) is ConstDigitRef

    def test_separate_handles_independent(self, view) -> None:
        """set() на одном accessor не трогает цифру другого"""
        first = view[0]
        last = view[4]
        first.set(9)
        assert last.get() == 5
        assert first.get() == 9

    def test_accessor_reads_live_value(self, cell, view) -> None:
        ref = view[2]
        assert ref.get() == 3
        cell.set(99799)
        assert ref.get() == 7

    def test_index_with_accessor(self, view) -> None:
        """Accessor поддерживает __index__"""
        assert view[view[0]].get() == 2

    def test_non_integer_index_rejected(self, view) -> None:
        with pytest.raises(TypeError):
            view["0"]


# =============================================================================
# ЗНАК
# =============================================================================


class TestNegativeValues:
    """Тесты знака отрицательных чисел."""

    def test_digits_of_negative(self) -> None:
        view = DigitView(IntCell(value=-12345))
        assert view.digits() == [1, 2, 3, 4, 5]

    def test_zeroing_digits_in_sequence(self) -> None:
        cell = IntCell(value=-12345)
        view = DigitView(cell)

        expected = [-2345, -345, -45, -5]
        for i, value in enumerate(expected):
            view[i] = 0
            assert cell.value == value

        view[0] = 1
        assert cell.value == -10005

    def test_all_zero_loses_sign(self) -> None:
        cell = IntCell(value=-305)
        view = DigitView(cell)
        for ref in view:
            ref.set(0)
        assert cell.value == 0

        view[2] = 4
        assert cell.value == 4

    def test_sign_preserved_while_nonzero(self) -> None:
        cell = IntCell(value=-8675309)
        view = DigitView(cell)
        for i in range(6):
            view[i] = 0
            assert cell.value < 0


# =============================================================================
# ОСНОВАНИЕ
# =============================================================================


class TestRadix:
    """Тесты основания view."""

    def test_hex_digits(self) -> None:
        view = DigitView(IntCell(value=0x12345), radix=16)
        assert view.radix == 16
        assert view.digits() == [1, 2, 3, 4, 5]

    def test_class_level_radix(self) -> None:
        cell = IntCell(value=0xBEEF)
        view = HexView(cell)
        assert HexView.RADIX == 16
        assert view.digits() == [0xB, 0xE, 0xE, 0xF]

        view[0] = 0xD
        assert cell.value == 0xDEEF

    def test_const_class_level_radix(self) -> None:
        assert OctalView(0o1234).digits() == [1, 2, 3, 4]

    def test_instance_radix_overrides_class(self) -> None:
        assert HexView(IntCell(value=100), radix=10).digits() == [1, 0, 0]

    def test_write_reduced_modulo_radix(self) -> None:
        cell = IntCell(value=0o777)
        view = DigitView(cell, radix=8)
        view[2] = 10
        assert cell.value == 0o772

    @pytest.mark.parametrize("radix", [1, 0, -2])
    def test_invalid_radix_at_construction(self, radix: int) -> None:
        with pytest.raises(ValidationError):
            DigitView(IntCell(value=5), radix=radix)

    def test_invalid_radix_at_class_definition(self) -> None:
        """radix <= 1 отвергается при определении класса"""
        with pytest.raises(ValidationError):

            class UnaryView(DigitView, radix=1):
                pass

    def test_negative_digit_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DigitView(IntCell(value=5), -1)

    def test_binary(self) -> None:
        cell = IntCell(value=0b1011)
        view = DigitView(cell, radix=2)
        assert view.digits() == [1, 0, 1, 1]
        view[1].increment()
        assert cell.value == 0b1111


# =============================================================================
# CONST / MUTABLE / BIND
# =============================================================================


class TestViewVariants:
    """Тесты ConstDigitView / DigitView / bind."""

    def test_const_view_over_int(self) -> None:
        view = ConstDigitView(8675319)
        assert view.digits() == [8, 6, 7, 5, 3, 1, 9]
        assert int(view) == 8675319

    def test_const_view_has_no_item_assignment(self) -> None:
        view = ConstDigitView(123)
        with pytest.raises(TypeError):
            view[0] = 5

    def test_const_accessor_has_no_set(self) -> None:
        assert not hasattr(ConstDigitView(123)[0], "set")

    def test_mutable_view_over_int_rejected(self) -> None:
        with pytest.raises(TypeError, match="requires a mutable scalar reference"):
            DigitView(123)

    def test_mutable_view_over_frozen_cell_rejected(self) -> None:
        with pytest.raises(TypeError):
            DigitView(FrozenIntCell(value=123))

    def test_as_const(self, cell, view) -> None:
        const_view = view.as_const()
        assert isinstance(const_view, ConstDigitView)
        assert not isinstance(const_view, DigitView)
        assert const_view.size() == view.size()

        view[0] = 9
        assert const_view[0].get() == 9

    def test_as_const_keeps_radix_and_size(self) -> None:
        view = DigitView(IntCell(value=0xFF), 4, radix=16)
        const_view = view.as_const()
        assert const_view.radix == 16
        assert const_view.digits() == [0, 0, 0xF, 0xF]

    def test_bind_int(self) -> None:
        assert type(bind(42)) is ConstDigitView

    def test_bind_cell(self) -> None:
        view = bind(IntCell(value=42), 4, radix=8)
        assert type(view) is DigitView
        assert view.size() == 4
        assert view.radix == 8

    def test_value_and_int(self, cell, view) -> None:
        assert view.value == 12345
        view[4] = 0
        assert int(view) == 12340
        assert view.scalar is cell

    def test_attribute_ref(self) -> None:
        class Account:
            number = 4321

        account = Account()
        view = DigitView(AttributeRef(account, "number"))
        view[0] = 9
        assert account.number == 9321

    def test_item_ref(self) -> None:
        values = [111, 222]
        view = DigitView(ItemRef(values, 1))
        view[1] = 5
        assert values == [111, 252]

    def test_multiple_views_same_scalar(self, cell) -> None:
        """Несколько views над одним числом, записи в порядке программы"""
        decimal = DigitView(cell)
        wide = DigitView(cell, 7)
        hexadecimal = DigitView(cell, radix=16)

        decimal[0] = 0
        assert wide.digits() == [0, 0, 0, 2, 3, 4, 5]
        assert hexadecimal.value == 2345

    def test_iteration_yields_accessors(self, view) -> None:
        refs = list(view)
        assert all(isinstance(ref, DigitRef) for ref in refs)
        assert refs == [1, 2, 3, 4, 5]

    def test_reversed_iteration(self, view) -> None:
        assert [ref.get() for ref in reversed(view)] == [5, 4, 3, 2, 1]

    def test_contains(self, view) -> None:
        assert 3 in view
        assert 7 not in view

    def test_repr(self, view) -> None:
        assert repr(view) == "DigitView(value=12345, radix=10, digits=5)"
