"""Демонстрационная программа digit adaptor (python -m src.demo)."""

from .cli import main, run, run_compare_scenario, run_step_scenario
from .config import DemoConfig

__all__ = [
    "DemoConfig",
    "main",
    "run",
    "run_compare_scenario",
    "run_step_scenario",
]
