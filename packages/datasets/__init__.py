from .io import WordListUnavailable, read_lines, load_words, write_lines
from .validator import validate_wordlist, pretty_summary

__all__ = [
    "WordListUnavailable",
    "read_lines",
    "load_words",
    "write_lines",
    "validate_wordlist",
    "pretty_summary",
]
