"""
Lightweight checks on solve inputs.

The filter engine accepts anything: a pattern of the wrong length, digits in
the letter strings or a letter that is both required and excluded all just
produce an empty (or surprising) candidate list. This module answers the
question "do these inputs make sense?" so the CLI can warn, or refuse to run
with --strict.
"""

from typing import List

from .patterns import PLACEHOLDER


def _non_alpha(s: str, allow: str = "") -> List[str]:
    return sorted({ch for ch in s if not ch.isalpha() and ch not in allow})


def check_inputs(
        pattern: str,
        required: str,
        excluded: str,
        N: int,
        placeholder: str = PLACEHOLDER,
) -> List[str]:
    """
    Return a list of human-readable problems (empty if the inputs look sane).

    Checks:
      - pattern length == N
      - only letters in the constraint strings (placeholder allowed in pattern)
      - no letter is both required and excluded
      - no fixed pattern letter is excluded
      - the placeholder is a single character
    """
    issues: List[str] = []

    if len(placeholder) != 1:
        issues.append(f"placeholder {placeholder!r} must be a single character")

    if len(pattern) != N:
        issues.append(f"pattern {pattern!r} has length {len(pattern)}, expected {N}")

    bad = _non_alpha(pattern, allow=placeholder)
    if bad:
        issues.append(f"pattern contains non-letter characters: {bad}")
    bad = _non_alpha(required)
    if bad:
        issues.append(f"required letters contain non-letter characters: {bad}")
    bad = _non_alpha(excluded)
    if bad:
        issues.append(f"excluded letters contain non-letter characters: {bad}")

    both = sorted(set(required) & set(excluded))
    if both:
        issues.append(f"letters both required and excluded: {both}")

    fixed = {ch for ch in pattern if ch != placeholder}
    clash = sorted(fixed & set(excluded))
    if clash:
        issues.append(f"pattern letters also excluded: {clash}")

    return issues
