from .patterns import PLACEHOLDER, extract_positions
from .constraints import (
    Constraint,
    LetterSet,
    PositionalConstraint,
    filter_words,
    run_passes,
)
from .validation import check_inputs

__all__ = [
    "PLACEHOLDER",
    "extract_positions",
    "Constraint",
    "LetterSet",
    "PositionalConstraint",
    "filter_words",
    "run_passes",
    "check_inputs",
]
