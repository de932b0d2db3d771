"""
Build a solver dictionary from a local word list or a plain-text URL.

Features:
- Reads a local file (any line endings) or downloads an http(s) text list.
- Keeps only words of length N when --N is given.
- Optional lowercasing and dropping of non-alphabetic entries ("zebra's").
- Removes duplicates preserving original order; optional sort afterwards.

Usage:
    python -m script.build_wordlist --src /usr/share/dict/words --N 5 \
        --lower --alpha-only --out data/words_5.txt
    python -m script.build_wordlist --src https://example.org/words.txt --out data/words.txt
"""

from __future__ import annotations

import argparse
from typing import List, Optional

import requests

from packages.datasets.io import read_lines, write_lines


def is_url(src: str) -> bool:
    return src.startswith(("http://", "https://"))


def fetch_lines(url: str) -> List[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.text.splitlines()


def unique_preserve_order(lines: List[str]) -> List[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def build_wordlist(
        lines: List[str],
        N: Optional[int] = None,
        lower: bool = False,
        alpha_only: bool = False,
        sort: bool = False,
) -> List[str]:
    """Clean raw lines into a dictionary: stripped, non-empty, deduplicated."""
    words = [ln.strip() for ln in lines if ln.strip()]
    if lower:
        words = [w.lower() for w in words]
    if N:
        words = [w for w in words if len(w) == N]
    if alpha_only:
        words = [w for w in words if w.isalpha()]
    words = unique_preserve_order(words)
    if sort:
        words = sorted(words)
    return words


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Build a clean word list for the solver.")
    ap.add_argument("--src", required=True, help="input .txt file or http(s) URL")
    ap.add_argument("--out", required=True, help="output file")
    ap.add_argument("--N", type=int, help="keep only words of this length")
    ap.add_argument("--lower", action="store_true", help="lowercase every word")
    ap.add_argument("--alpha-only", action="store_true", help="drop words with non-letter characters")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe")
    args = ap.parse_args(argv)

    raw = fetch_lines(args.src) if is_url(args.src) else read_lines(args.src)
    words = build_wordlist(raw, N=args.N, lower=args.lower, alpha_only=args.alpha_only,
                           sort=args.sort)
    write_lines(words, args.out)
    print(f"Input: {args.src} ({len(raw)} lines) -> Output: {args.out} ({len(words)} words)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
