"""
Word List Loading

Reads the player's found words (and cached answer files) from disk and
normalizes them into the sorted, lowercase form the hint engine expects.
"""

import os
import re
import tempfile
from pathlib import Path
from typing import Iterable, List

WHITESPACE = re.compile(r'\s+')


def normalize_word(raw: str) -> str:
    """Lowercase a word and remove every whitespace character from it"""
    return WHITESPACE.sub('', raw).lower()


def normalize_words(lines: Iterable[str]) -> List[str]:
    """
    Turn raw lines into a clean word list

    Blank entries are dropped, duplicates are kept, and the result is
    sorted case-insensitively so it lines up with the answer list.
    """
    words = [normalize_word(line) for line in lines]
    return sorted((word for word in words if word), key=str.lower)


def read_word_file(path) -> List[str]:
    """
    Read a one-word-per-line file

    Returns an empty list when the file doesn't exist yet.
    """
    path = Path(path)
    if not path.exists():
        return []

    print(f"Reading words from {path}.\n")

    with open(path, 'r', encoding='utf-8') as f:
        return normalize_words(f)


def write_word_file(path, words: Iterable[str]) -> Path:
    """
    Write one word per line

    The words go to a temporary file in the same directory, which then
    replaces the target, so readers never see a half-written list.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            for word in words:
                f.write(f"{word}\n")
        os.replace(temp_name, path)
    except Exception:
        os.unlink(temp_name)
        raise

    return path
