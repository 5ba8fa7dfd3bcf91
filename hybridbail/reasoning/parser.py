# hybridbail/reasoning/parser.py
from __future__ import annotations
from typing import List, Optional

from hybridbail.utils.config import settings
from hybridbail.utils.logger import get_logger
from .grouper import group
from .schema import ParsedNarrative, Section, SectionCandidate
from .segmenter import segment

log = get_logger(__name__)


def build_section(ordinal: int, candidate: SectionCandidate) -> Section:
    return Section(
        ordinal=ordinal,
        number=candidate.number,
        raw_heading=candidate.raw_heading,
        body_text=candidate.body_text,
        blocks=tuple(group(candidate.body_text)),
    )


def parse_narrative(text: str, *, fallback: Optional[bool] = None) -> ParsedNarrative:
    """
    Single parse shared by every renderer: segment, classify, group, tokenize.

    fallback=True wraps a non-blank narrative without any section marker into
    one untitled section (category Other). Defaults to settings.fallback_section.
    """
    use_fallback = settings.fallback_section if fallback is None else fallback

    candidates: List[SectionCandidate] = segment(text)
    if not candidates and use_fallback and (text or "").strip():
        log.debug("parse_narrative: no section marker, using single fallback section")
        candidates = [SectionCandidate(number=None, raw_heading="", body_text=text.strip("\n"))]

    sections = tuple(build_section(i, c) for i, c in enumerate(candidates))
    return ParsedNarrative(sections=sections)
