"""
Solve driver.

- solve:       load the dictionary, parse the pattern, run the three passes.
- solve_words: the same pipeline over an in-memory word list.

The driver only sequences the pieces; every filtering rule lives in
packages.engine and every file concern in packages.datasets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from packages.datasets.io import load_words
from packages.engine import extract_positions, run_passes
from .config import DEFAULT_LENGTH, SolveConfig

# Pass names in pipeline order (keys of SolveResult.pass_counts).
PASS_NAMES = ("positional", "required", "excluded")


@dataclass
class SolveResult:
    config: SolveConfig
    candidates: List[str]
    universe: int                     # dictionary words of the target length
    pass_counts: Dict[str, int] = field(default_factory=dict)
    dictionary: Optional[str] = None  # path read, None for an injected word list

    def as_dict(self) -> Dict:
        return {
            "pattern": self.config.pattern,
            "required": self.config.required,
            "excluded": self.config.excluded,
            "length": self.config.length,
            "dictionary": self.dictionary,
            "universe": self.universe,
            "pass_counts": dict(self.pass_counts),
            "candidates": list(self.candidates),
        }


def solve(config: SolveConfig, words: Optional[Iterable[str]] = None) -> SolveResult:
    """
    Run one solve.

    Args:
        config: inputs and defaults for this solve
        words:  optional word universe; when omitted the dictionary at
                config.dict_path is loaded (WordListUnavailable propagates)

    Returns:
        SolveResult whose `candidates` are the words consistent with the
        pattern, the required letters and the excluded letters.
    """
    N = config.length
    if words is None:
        universe = load_words(config.dict_path, N)
    else:
        universe = [w for w in words if w and len(w) == N]

    positions = extract_positions(config.pattern, config.placeholder)
    stages = run_passes(universe, positions, config.required, config.excluded)

    return SolveResult(
        config=config,
        candidates=stages[-1],
        universe=len(universe),
        pass_counts={name: len(s) for name, s in zip(PASS_NAMES, stages)},
        dictionary=config.dict_path if words is None else None,
    )


def solve_words(
        pattern: str,
        required: str,
        excluded: str,
        words: Iterable[str],
        length: int = DEFAULT_LENGTH,
) -> List[str]:
    """Candidates from an in-memory word list (no dictionary file involved)."""
    cfg = SolveConfig(pattern, required, excluded, length)
    return solve(cfg, words=words).candidates
