from .config import SolveConfig, DEFAULT_LENGTH, DICT_PATH
from .core import SolveResult, solve, solve_words
from .io import render, pass_summary

__all__ = [
    "SolveConfig",
    "DEFAULT_LENGTH",
    "DICT_PATH",
    "SolveResult",
    "solve",
    "solve_words",
    "render",
    "pass_summary",
]
