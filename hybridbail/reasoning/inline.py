# hybridbail/reasoning/inline.py
from __future__ import annotations
import re
from typing import List

from .schema import Run

EMPHASIS_MARKER = "**"

# **text** with no '*' inside, shortest match first
EMPHASIS_RE = re.compile(r"\*\*([^*]+?)\*\*")


def tokenize(text: str) -> List[Run]:
    """
    Split text into plain/emphasized runs.

    Emphasis markers are removed from emphasized runs; everything else is kept
    verbatim, so joining the run texts gives the input minus the markers.
    Unmatched markers stay in the plain text.
    """
    s = text or ""
    runs: List[Run] = []
    last = 0

    for m in EMPHASIS_RE.finditer(s):
        if m.start() > last:
            runs.append(Run(text=s[last:m.start()], emphasized=False))
        runs.append(Run(text=m.group(1), emphasized=True))
        last = m.end()

    if last < len(s):
        runs.append(Run(text=s[last:], emphasized=False))

    if not runs:
        runs.append(Run(text=s, emphasized=False))
    return runs


def strip_emphasis(text: str) -> str:
    """Text with every matched emphasis pair unwrapped."""
    return EMPHASIS_RE.sub(r"\1", text or "")
