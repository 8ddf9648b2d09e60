"""
Core scalar references, positional arithmetic, and view parameters.

This module contains the foundational building blocks of the digit adaptor
that are independent of any particular view or traversal strategy.
"""
