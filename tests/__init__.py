"""
Test suite for digit adaptor

Contains:
- tests/unit/          : Unit tests for individual modules
"""
