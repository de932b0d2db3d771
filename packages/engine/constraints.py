"""
Candidate filtering for a single solve.

Three kinds of knowledge narrow the word list:
  - fixed letters at known positions   (PositionalConstraint)
  - letters somewhere in the word      (LetterSet, present=True)
  - letters nowhere in the word        (LetterSet, present=False)

`filter_words` is the one reusable filtering step; it dispatches on the
constraint's `kind` tag. `run_passes` applies the three passes in the fixed
order positional -> required -> excluded and keeps every intermediate list
so callers can report how much each pass narrowed the set.

Every pass returns a new list (order preserved as in the input) and can only
drop words, never add them. Because each pass is an intersection, the order
of the passes does not change the final set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Literal, Mapping, Union


@dataclass(frozen=True)
class PositionalConstraint:
    """Index -> letter pairs; a word must match all of them."""
    positions: Mapping[int, str] = field(default_factory=dict)
    kind: Literal["positional"] = field(default="positional", init=False)


@dataclass(frozen=True)
class LetterSet:
    """
    Flat set of letters with a polarity.

    present=True  : keep words containing every letter (at least once each)
    present=False : keep words containing none of the letters
    """
    letters: str = ""
    present: bool = True
    kind: Literal["letters"] = field(default="letters", init=False)


Constraint = Union[PositionalConstraint, LetterSet]


def _match_positions(words: List[str], positions: Mapping[int, str]) -> List[str]:
    for idx, letter in positions.items():
        # An index past the end of a word can never match.
        words = [w for w in words if idx < len(w) and w[idx] == letter]
    return words


def _match_letters(words: List[str], letters: str, present: bool) -> List[str]:
    for ch in letters:
        if present:
            words = [w for w in words if ch in w]
        else:
            words = [w for w in words if ch not in w]
    return words


def filter_words(words: Iterable[str], constraint: Constraint) -> List[str]:
    """
    Keep only the words of `words` that satisfy `constraint`.

    Args:
      words      : current candidate set (not modified)
      constraint : PositionalConstraint or LetterSet

    Returns:
      List[str] of surviving words, in input order.

    Examples:
      filter_words(["zebra", "zesty", "abbey"], PositionalConstraint({0: "z", 1: "e"}))
        -> ["zebra", "zesty"]
      filter_words(["zebra", "zerda", "zesty"], LetterSet("r"))
        -> ["zebra", "zerda"]
      filter_words(["zebra", "zerda"], LetterSet("d", present=False))
        -> ["zebra"]
    """
    out = list(words)
    if constraint.kind == "positional":
        return _match_positions(out, constraint.positions)
    if constraint.kind == "letters":
        return _match_letters(out, constraint.letters, constraint.present)
    raise TypeError(f"Unknown constraint kind: {constraint.kind!r}")


def run_passes(
        words: Iterable[str],
        positions: Dict[int, str],
        required: str,
        excluded: str,
) -> List[List[str]]:
    """
    Apply the positional, required-letter and excluded-letter passes in order.

    Returns:
      [after_positional, after_required, after_excluded]; the last list is
      the set of words consistent with every constraint.
    """
    passes: List[Constraint] = [
        PositionalConstraint(positions),
        LetterSet(required, present=True),
        LetterSet(excluded, present=False),
    ]

    stages: List[List[str]] = []
    current = list(words)
    for c in passes:
        current = filter_words(current, c)
        stages.append(current)
    return stages
