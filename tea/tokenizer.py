# tea/tokenizer.py
"""
Command-line splitting.

A token is a maximal run of non-space characters in which a double-quoted
substring counts as part of the run even if it contains spaces:

    tokenize('a "b c" d')   -> ['a', 'b c', 'd']
    tokenize('a"b c"d')     -> ['a"b c"d']     (embedded quotes kept)
    tokenize('"abc def')    -> ['abc', 'def']  (unpaired quote is literal)

Quote characters bounding a run are stripped. Nothing here ever raises.
"""

from __future__ import annotations
import re
from typing import Iterable, List

_TOKEN_RE = re.compile(r'(?:"[^"]*"|[^ ])+')


def tokenize(line: str) -> List[str]:
    if not line:
        return []
    return [m.group(0).strip('"') for m in _TOKEN_RE.finditer(line)]


def join_arguments(tokens: Iterable[str]) -> str:
    # Lossy: quoting and spacing inside the original tokens are not preserved.
    return " ".join(tokens)
