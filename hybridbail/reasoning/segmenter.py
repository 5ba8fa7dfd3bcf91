# hybridbail/reasoning/segmenter.py
from __future__ import annotations
import re
from typing import List, Optional, Tuple

from hybridbail.utils.logger import get_logger
from .schema import SectionCandidate

log = get_logger(__name__)

# **<digits>. at the very start of a line opens a section
SECTION_MARKER_RE = re.compile(r"^\*\*(\d+)\.")

# first emphasis pair on the opening line
_FIRST_SPAN_RE = re.compile(r"^\*\*(.+?)\*\*")
# second pair right after an ordinal-only first pair: **1.** **Summary:**
_NEXT_SPAN_RE = re.compile(r"^\s*\*\*(.+?)\*\*")
_ORDINAL_ONLY_RE = re.compile(r"^\d+\.\s*$")


def is_section_start(line: str) -> bool:
    return bool(SECTION_MARKER_RE.match(line))


def split_heading_line(line: str) -> Tuple[str, str]:
    """
    Split an opening line into (heading, rest of line).

    The heading is the content of the first emphasis pair (trailing colon kept).
    An ordinal-only pair followed directly by a second pair is joined with it.
    Without a closing marker, the whole line after '**' is the heading.
    """
    m = _FIRST_SPAN_RE.match(line)
    if not m:
        return line[2:].strip(), ""

    heading = m.group(1).strip()
    rest = line[m.end():]

    if _ORDINAL_ONLY_RE.match(heading):
        m2 = _NEXT_SPAN_RE.match(rest)
        if m2:
            heading = f"{heading} {m2.group(1).strip()}"
            rest = rest[m2.end():]

    return heading, rest.strip()


def _marker_number(line: str) -> Optional[int]:
    m = SECTION_MARKER_RE.match(line)
    return int(m.group(1)) if m else None


def segment(text: str) -> List[SectionCandidate]:
    """
    Cut a narrative into (heading, body) candidates at each '**<n>.' line.

    Lines before the first marker are dropped; no marker means no candidates.
    """
    lines = (text or "").splitlines()
    out: List[SectionCandidate] = []

    number: Optional[int] = None
    heading: Optional[str] = None
    body: List[str] = []
    preamble = 0

    def _flush() -> None:
        if heading is None:
            return
        out.append(
            SectionCandidate(
                number=number,
                raw_heading=heading,
                body_text="\n".join(body).strip("\n"),
            )
        )

    for line in lines:
        if is_section_start(line):
            _flush()
            number = _marker_number(line)
            heading, first = split_heading_line(line)
            body = [first] if first else []
            continue

        if heading is None:
            preamble += 1
            continue
        body.append(line)

    _flush()

    if preamble and out:
        log.debug("segment: %d preamble line(s) discarded", preamble)
    log.debug("segment: %d section(s)", len(out))
    return out
