"""
Output helpers for solve results.

Formats:
- lines: one candidate per line (default; easy to pipe into grep/wc)
- list:  a single bracketed list, e.g. ['zebra']
- json:  inputs, per-pass counts and candidates as an indented JSON object
"""

from __future__ import annotations

import json
from typing import Tuple

from .core import SolveResult

FORMATS: Tuple[str, ...] = ("lines", "list", "json")


def render(result: SolveResult, fmt: str = "lines") -> str:
    """Render a result as text; an empty candidate list is still valid output."""
    if fmt == "lines":
        return "\n".join(result.candidates)
    if fmt == "list":
        return repr(list(result.candidates))
    if fmt == "json":
        return json.dumps(result.as_dict(), indent=2)
    raise ValueError(f"Unknown output format: {fmt}. Available: {list(FORMATS)}")


def pass_summary(result: SolveResult) -> str:
    """
    One-liner showing how each pass narrowed the set.

    Example:
        N=5 | words=10230 -> positional=8 -> required=2 -> excluded=1
    """
    steps = " -> ".join(f"{k}={v}" for k, v in result.pass_counts.items())
    return f"N={result.config.length} | words={result.universe} -> {steps}"
