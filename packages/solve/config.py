"""
Explicit configuration for one solve.

Everything the driver needs travels in a SolveConfig; nothing reads process
arguments or globals below the CLI. Defaults are applied here, at
construction, so the pipeline itself never has to guess.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from packages.engine.patterns import PLACEHOLDER

# Classic Wordle word length.
DEFAULT_LENGTH = 5

# System word list shipped with most Unix-like hosts.
DICT_PATH = "/usr/share/dict/words"


@dataclass(frozen=True)
class SolveConfig:
    pattern: str
    required: str = ""
    excluded: str = ""
    length: Optional[int] = None
    dict_path: str = DICT_PATH
    placeholder: str = PLACEHOLDER

    def __post_init__(self):
        # None or 0 both mean "use the default"
        if not self.length:
            object.__setattr__(self, "length", DEFAULT_LENGTH)
        object.__setattr__(self, "length", int(self.length))

    @classmethod
    def from_args(cls, args) -> "SolveConfig":
        """Build a config from an argparse namespace (see apps/cli/solve.py)."""
        return cls(
            pattern=args.pattern,
            required=args.good or "",
            excluded=args.bad or "",
            length=args.length,
            dict_path=args.dict,
            placeholder=args.placeholder,
        )
