"""
Core math modules для digit adaptor

Арифметика позиционной записи целых чисел.
"""

# Positional arithmetic
from src.core.math.positional import (
    # Constants
    DEFAULT_RADIX,
    MIN_RADIX,
    # Magnitude
    magnitude,
    total_digits,
    # Indexes and divisors
    clamp,
    clamp_index,
    compute_divisor,
    forward_divisor,
    reverse_divisor,
    # Digit read / write
    extract_digit,
    replace_digit,
)

__all__ = [
    # Positional — Constants
    "DEFAULT_RADIX",
    "MIN_RADIX",
    # Positional — Magnitude
    "magnitude",
    "total_digits",
    # Positional — Indexes and divisors
    "clamp",
    "clamp_index",
    "compute_divisor",
    "forward_divisor",
    "reverse_divisor",
    # Positional — Digit read / write
    "extract_digit",
    "replace_digit",
]
