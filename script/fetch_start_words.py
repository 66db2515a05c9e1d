"""
Build a start-word list from a web page of English words.

What it does:
- Downloads the page (HTML or plain text).
- Extracts the visible text and keeps alphabetic tokens of exactly --length letters.
- Lowercases, de-duplicates while preserving page order, and writes one word per line.
- Prints the validation summary for the written file.

Usage:
    python -m script.fetch_start_words --url https://example.org/words.html \
        --out wordscramble/datasets/data/start.txt
    # or alphabetically sorted:
    python -m script.fetch_start_words --url ... --sort --out ...
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from wordscramble.datasets import validate_start_words, pretty_summary, write_lines

TOKEN_RE = re.compile(r"[A-Za-z]+")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(text: str, length: int) -> list[str]:
    words = [m.group(0).lower() for m in TOKEN_RE.finditer(text) if len(m.group(0)) == length]
    return unique_preserve_order(words)


def fetch_words(url: str, length: int) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    soup = BeautifulSoup(r.text, "html.parser")
    return extract_words(soup.get_text("\n", strip=True), length)


def main():
    ap = argparse.ArgumentParser(description="Build a start-word list from a web page")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="wordscramble/datasets/data/start.txt")
    ap.add_argument("--length", type=int, default=8, help="letters per root word")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.length)
    if args.sort:
        words = sorted(words)
    if not words:
        raise SystemExit(f"No {args.length}-letter words found at {args.url}")

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")
    print(pretty_summary(validate_start_words(args.out)))


if __name__ == "__main__":
    main()
