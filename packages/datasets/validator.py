"""
Dictionary report for the solver.

What this module does:
- Inspect a newline-delimited dictionary file for a given word length N.
- Count lines, blank lines, words of length N and how many of those are
  unique or contain non-alphabetic characters (apostrophes, hyphens, ...).
- Compute SHA-256 of the raw file so a run can be tied to an exact list.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "/usr/share/dict/words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import WordListUnavailable, read_lines


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    N: int
    path: str            # file path (as given)
    exists: bool         # could the file be read?
    sha256: str          # SHA-256 of raw file bytes (empty string if unreadable)
    total_lines: int
    blank_lines: int
    count: int           # words of length N
    unique_count: int    # unique words of length N
    non_alpha: int       # length-N words with non-letter characters
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(N: int, path: str) -> Dict:
    """
    Report on the dictionary at `path` for words of length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema). `passed`
        is True when the file is readable, has at least one length-N word and
        no duplicates among them. Non-alphabetic entries are reported but do
        not fail the check (system dictionaries carry possessives).
    """
    issues: List[str] = []
    p = Path(path)

    try:
        lines = read_lines(p)
    except WordListUnavailable as e:
        issues.append(str(e))
        rep = WordlistReport(N, path, False, "", 0, 0, 0, 0, 0, False, issues)
        return asdict(rep)

    words = [ln for ln in lines if ln and len(ln) == N]
    unique = set(words)
    non_alpha = sum(1 for w in words if not w.isalpha())

    if not words:
        issues.append(f"no words of length {N}")
    if len(unique) != len(words):
        issues.append(f"{len(words) - len(unique)} duplicate word(s) of length {N}")
    if non_alpha:
        issues.append(f"{non_alpha} word(s) of length {N} with non-letter characters")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        total_lines=len(lines),
        blank_lines=sum(1 for ln in lines if not ln),
        count=len(words),
        unique_count=len(unique),
        non_alpha=non_alpha,
        passed=bool(words) and len(unique) == len(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | /usr/share/dict/words | words=10230 (uniq=10230, non-alpha=0) | lines=104334 | sha=abc123... | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | {report['path']} "
        f"| words={report['count']} (uniq={report['unique_count']}, non-alpha={report['non_alpha']}) "
        f"| lines={report['total_lines']} | sha={sha} | {status}"
    )
