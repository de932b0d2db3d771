"""
Partial-word pattern parsing.

A pattern spells out the letters whose position is already known and uses a
placeholder for everything else, e.g. '-u-e-' for a word with 'u' second and
'e' fourth.

    extract_positions("ze---") -> {0: "z", 1: "e"}
    extract_positions("-----") -> {}
"""

from typing import Dict

# Marks an unknown position in a partial word.
PLACEHOLDER = "-"


def extract_positions(partial: str, placeholder: str = PLACEHOLDER) -> Dict[int, str]:
    """
    Map every non-placeholder index of `partial` to its letter.

    The pattern length is not checked against the word length here;
    see engine.validation.check_inputs for that.
    """
    return {i: ch for i, ch in enumerate(partial) if ch != placeholder}
