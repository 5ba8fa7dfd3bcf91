# hybridbail/reasoning/grouper.py
from __future__ import annotations
import re
from typing import List, Sequence, Tuple

from .inline import tokenize
from .schema import Block, BlockKind

_BULLET_RE = re.compile(r"^\s*[*\-]")
_BULLET_PREFIX_RE = re.compile(r"^\s*[*\-]\s*")
# a line opening with a full emphasis span is paragraph text, not a bullet
_LEADING_EMPHASIS_RE = re.compile(r"^\s*\*\*[^*]+?\*\*")


def is_bullet_line(line: str) -> bool:
    if not _BULLET_RE.match(line):
        return False
    return not _LEADING_EMPHASIS_RE.match(line)


def bullet_text(line: str) -> str:
    """Drop the single bullet character and the whitespace around it."""
    return _BULLET_PREFIX_RE.sub("", line, count=1).strip()


def _paragraph(lines: List[str]) -> Block:
    text = "\n".join(lines)
    return Block(kind="paragraph", text=text, runs=tuple(tokenize(text)))


def _bullet(line: str) -> Block:
    text = bullet_text(line)
    return Block(kind="bullet", text=text, runs=tuple(tokenize(text)))


def group(body: str) -> List[Block]:
    """
    Group a section body into paragraph and bullet blocks.

    - every bullet line is one bullet block
    - consecutive plain lines form one paragraph
    - blank lines only separate: they close the open paragraph
    """
    blocks: List[Block] = []
    para: List[str] = []

    for raw in (body or "").splitlines():
        line = raw.strip()
        if not line:
            if para:
                blocks.append(_paragraph(para))
                para = []
            continue

        if is_bullet_line(raw):
            if para:
                blocks.append(_paragraph(para))
                para = []
            blocks.append(_bullet(raw))
            continue

        para.append(line)

    if para:
        blocks.append(_paragraph(para))
    return blocks


def list_groups(blocks: Sequence[Block]) -> List[Tuple[BlockKind, List[Block]]]:
    """
    Layout shared by renderers: each paragraph alone, consecutive bullets
    gathered into one list.
    """
    out: List[Tuple[BlockKind, List[Block]]] = []
    for b in blocks:
        if b.kind == "bullet" and out and out[-1][0] == "bullet":
            out[-1][1].append(b)
        else:
            out.append((b.kind, [b]))
    return out
