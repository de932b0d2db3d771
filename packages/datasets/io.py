from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


class WordListUnavailable(OSError):
    """The dictionary file could not be read; a solve cannot continue."""

    def __init__(self, path: Path | str, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Couldn't read from: {self.path}" + (f" ({reason})" if reason else ""))


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file (BOM tolerated) into a list of lines.

    LF, CRLF and lone CR terminators are all accepted, so word lists written
    on any platform split the same way.
    Raises WordListUnavailable if the file is missing or unreadable.
    """
    p = Path(p)
    try:
        text = p.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise WordListUnavailable(p, type(e).__name__) from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def load_words(p: Path | str, N: int) -> List[str]:
    """
    Return every non-empty line of the file whose length is exactly N,
    in file order. Lines are not case-folded or deduplicated.
    """
    return [ln for ln in read_lines(p) if ln and len(ln) == N]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(f"{ln}\n" for ln in lines), encoding="utf-8")
    return str(p)
