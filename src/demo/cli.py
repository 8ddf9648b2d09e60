"""Demo CLI — демонстрация digit adaptor на конкретных числах.

Usage:
    python -m src.demo
    python -m src.demo --value 0x12345 --radix 16
    python -m src.demo --value -12345 --digits 7 --compare -12346

Каждая строка вывода: цифры view подряд, пробел, текущее значение числа.
"""

import argparse
import logging
from typing import List, Optional, Sequence

from src.adaptor import algorithms
from src.adaptor.accessor import swap
from src.adaptor.view import ConstDigitView, DigitView
from src.core.domain.scalar import IntCell
from src.core.logging_config import setup_logging
from src.demo.config import (
    DEMO_COMPARE_VALUE,
    DEMO_RADICES,
    DEMO_VALUE,
    LOG_LEVELS,
    REVERSE_WRITE_DIGITS,
    STEP_DIGIT_INDEX,
    DemoConfig,
)

logger = logging.getLogger(__name__)


def format_view(view: ConstDigitView) -> str:
    """Цифры view подряд и значение числа через пробел."""
    return "".join(str(digit) for digit in view.digits()) + f" {view.value}"


def run_step_scenario(value: int, radix: int, digits: Optional[int] = None) -> List[str]:
    """
    Пошаговые изменения числа через view.

    Шаги: исходное число, reverse, sort, post-increment цифры 4,
    pre-decrement цифры 4, цифра 0 := 1, запись 1, 2, 3, 4 через
    reverse-курсор.

    Returns:
        Строка format_view после каждого шага
    """
    logger.info("Step scenario: value=%d radix=%d digits=%s", value, radix, digits)

    cell = IntCell(value=value)
    view = DigitView(cell, digits, radix=radix)
    lines = [format_view(view)]

    algorithms.reverse(view.begin(), view.end())
    lines.append(format_view(view))

    algorithms.sort(view.begin(), view.end())
    lines.append(format_view(view))

    view[STEP_DIGIT_INDEX].post_increment()
    lines.append(format_view(view))

    view[STEP_DIGIT_INDEX].decrement()
    lines.append(format_view(view))

    view[0] = 1
    lines.append(format_view(view))

    cursor = view.rbegin()
    for digit in REVERSE_WRITE_DIGITS:
        cursor.post_increment().deref().set(digit)
    lines.append(format_view(view))

    logger.info("Step scenario finished: value=%d", cell.value)
    return lines


def run_compare_scenario(mutable_value: int, const_value: int, radix: int) -> List[str]:
    """
    Сравнение цифр изменяемого и read-only views.

    Печатает равенство цифр по позициям, обмен цифр 0 и 1 изменяемого
    view и суммы цифр по позициям.
    """
    logger.info(
        "Compare scenario: mutable=%d const=%d radix=%d", mutable_value, const_value, radix
    )

    mda = DigitView(IntCell(value=mutable_value), radix=radix)
    cda = ConstDigitView(const_value, radix=radix)
    count = min(mda.size(), cda.size())

    lines = [f"mda[{i}] == cda[{i}]? {mda[i] == cda[i]}" for i in range(count)]

    lines.append(f"mda[0] = {mda[0]}  mda[1] = {mda[1]}")
    swap(mda[0], mda[1])
    lines.append(f"mda[0] = {mda[0]}  mda[1] = {mda[1]}")

    lines.extend(f"mda[{i}] + cda[{i}]? {mda[i] + cda[i]}" for i in range(count))
    return lines


def run(config: DemoConfig) -> List[str]:
    """Все строки вывода для заданной конфигурации."""
    if config.value is None:
        lines: List[str] = []
        for radix in DEMO_RADICES:
            for value in (DEMO_VALUE, -DEMO_VALUE):
                lines.extend(run_step_scenario(value, radix))
            lines.extend(run_compare_scenario(DEMO_VALUE, DEMO_COMPARE_VALUE, radix))
        return lines

    lines = run_step_scenario(config.value, config.radix, config.digits)
    if config.compare is not None:
        lines.extend(run_compare_scenario(config.value, config.compare, config.radix))
    return lines


def _int_literal(text: str) -> int:
    """int с префиксами 0x/0o/0b."""
    return int(text, 0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Digit adaptor demo: edit integer digits in place",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src.demo
  python -m src.demo --value 0x12345 --radix 16
  python -m src.demo --value 8675309 --radix 5 --compare 8675319
        """,
    )
    parser.add_argument(
        "--value",
        type=_int_literal,
        default=None,
        help="Number to edit (default: run the full built-in demo)",
    )
    parser.add_argument(
        "--radix",
        type=int,
        default=DemoConfig.radix,
        help="Radix of the digit view (must be larger than 1)",
    )
    parser.add_argument(
        "--digits",
        type=int,
        default=None,
        help="Explicit number of digits (default: derived from the value)",
    )
    parser.add_argument(
        "--compare",
        type=_int_literal,
        default=None,
        help="Read-only number to compare digits against",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=DemoConfig.log_level,
        help="Logging level (logs go to stderr)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Optional file to write logs to",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for the demo."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = DemoConfig(
        value=args.value,
        radix=args.radix,
        digits=args.digits,
        compare=args.compare,
        log_level=args.log_level,
        log_file=args.log_file,
    )
    setup_logging(getattr(logging, config.log_level), config.log_file)

    try:
        lines = run(config)
    except ValueError as e:
        # pydantic.ValidationError (radix <= 1, digits < 0) is a ValueError
        parser.error(str(e))

    for line in lines:
        print(line)
    return 0
