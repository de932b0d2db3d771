# apps/cli/solve.py
"""
CLI entry point for the word-puzzle filter.

Enter a partially known word, the letters known to be in it and the letters
known not to be in it, and receive the list of possible solutions.

Usage:
    python -m apps.cli.solve PATTERN GOOD BAD [LENGTH]

Example:
    python -m apps.cli.solve ze--- r dfsol
    zebra
    python -m apps.cli.solve -u-e- r st

This script:
  1) Builds a SolveConfig from the command line (length defaults to 5).
  2) Checks the inputs; warns on stderr, or exits 2 with --strict.
  3) Loads the dictionary, runs the three filter passes, prints candidates.
An unreadable dictionary prints "Couldn't read from: <path>" and exits 1.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from packages.datasets import WordListUnavailable, validate_wordlist, pretty_summary, write_lines
from packages.engine import PLACEHOLDER, check_inputs
from packages.solve import DICT_PATH, SolveConfig, solve, render, pass_summary
from packages.solve.io import FORMATS

EXIT_UNREADABLE = 1
EXIT_BAD_INPUT = 2

# Options that consume the following token as their value.
VALUE_OPTIONS = ("--dict", "--placeholder", "--format", "--out")
FLAG_OPTIONS = ("--report", "--strict", "--verbose", "-v", "-h", "--help")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="List the words matching a partial word, known letters and eliminated letters",
        allow_abbrev=False)
    ap.add_argument("pattern", help=f"partial word, unknown letters as '{PLACEHOLDER}' (e.g. ze---)")
    ap.add_argument("good", help="letters in the word at unknown positions (may be '')")
    ap.add_argument("bad", help="letters not in the word (may be '')")
    ap.add_argument("length", nargs="?", type=int, default=None,
                    help="word length (default: 5)")
    ap.add_argument("--dict", default=DICT_PATH, help="newline-delimited dictionary file")
    ap.add_argument("--placeholder", default=PLACEHOLDER,
                    help="character marking unknown positions in the pattern")
    ap.add_argument("--format", choices=FORMATS, default="lines", help="output format")
    ap.add_argument("--out", help="also write candidates to this file, one per line")
    ap.add_argument("--report", action="store_true",
                    help="print a dictionary summary (counts, SHA) to stderr")
    ap.add_argument("--strict", action="store_true",
                    help="refuse to run when the inputs look inconsistent")
    ap.add_argument("--verbose", "-v", action="store_true",
                    help="echo the inputs and per-pass counts to stderr")
    return ap


def split_argv(argv: List[str]) -> List[str]:
    """
    Reorder argv as options first, then '--', then positionals.

    Patterns such as '-----' or '-u-e-' start with the placeholder and would
    otherwise be read by argparse as unknown options. Any dash-prefixed token
    that is not one of our option strings is kept as a positional.
    """
    opts: List[str] = []
    pos: List[str] = []
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok == "--":
            pos.extend(argv[i + 1:])
            break
        name = tok.split("=", 1)[0]
        if name in VALUE_OPTIONS:
            opts.append(tok)
            if "=" not in tok and i + 1 < len(argv):
                i += 1
                opts.append(argv[i])
        elif tok in FLAG_OPTIONS:
            opts.append(tok)
        else:
            pos.append(tok)
        i += 1
    return opts + ["--"] + pos


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, solve, and print the candidates. Returns the exit status.
    """
    args = build_parser().parse_args(split_argv(sys.argv[1:] if argv is None else argv))
    cfg = SolveConfig.from_args(args)

    if args.verbose:
        print(f"solve: {cfg.pattern} {cfg.required} {cfg.excluded} {cfg.length}", file=sys.stderr)

    issues = check_inputs(cfg.pattern, cfg.required, cfg.excluded, cfg.length, cfg.placeholder)
    for msg in issues:
        print(f"warning: {msg}", file=sys.stderr)
    if issues and args.strict:
        return EXIT_BAD_INPUT

    if args.report:
        print(pretty_summary(validate_wordlist(cfg.length, cfg.dict_path)), file=sys.stderr)

    try:
        result = solve(cfg)
    except WordListUnavailable as e:
        print(f"Couldn't read from: {e.path}", file=sys.stderr)
        return EXIT_UNREADABLE

    if args.verbose:
        print(pass_summary(result), file=sys.stderr)

    text = render(result, args.format)
    if text:
        print(text)

    if args.out:
        path = write_lines(result.candidates, args.out)
        print(f"Wrote: {path}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
