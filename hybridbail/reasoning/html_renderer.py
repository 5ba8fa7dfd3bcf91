# hybridbail/reasoning/html_renderer.py
from __future__ import annotations
import html
from typing import Iterable, List

from .classifier import style_for
from .grouper import list_groups
from .schema import Block, ParsedNarrative, Run, Section


# ---------- utils ----------
def escape_html(s: object) -> str:
    """Escape text content and attribute values."""
    if s is None:
        return ""
    return html.escape(str(s), quote=True)


def render_runs_html(runs: Iterable[Run]) -> str:
    parts: List[str] = []
    for r in runs:
        if r.emphasized:
            parts.append("<strong>" + escape_html(r.text) + "</strong>")
        else:
            parts.append(escape_html(r.text))
    return "".join(parts)


def _paragraph_html(block: Block) -> str:
    return "<p>" + render_runs_html(block.runs) + "</p>"


def _bullet_list_html(blocks: List[Block]) -> str:
    items = ["<li>" + render_runs_html(b.runs) + "</li>" for b in blocks]
    return "<ul>\n" + "\n".join(items) + "\n</ul>"


# ---------- sections ----------
def render_section_html(section: Section) -> str:
    style = style_for(section.category)
    body: List[str] = []
    for kind, group in list_groups(section.blocks):
        if kind == "bullet":
            body.append(_bullet_list_html(group))
        else:
            body.extend(_paragraph_html(b) for b in group)

    return "\n".join(
        [
            f'<div class="reasoning-section {style.css_class}" '
            f'data-category="{escape_html(section.category.value)}" '
            f'data-ordinal="{section.ordinal}">',
            '<div class="reasoning-title">'
            f'<span class="reasoning-icon">{style.icon}</span> '
            f'<span class="reasoning-heading">{escape_html(section.title)}</span>'
            "</div>",
            '<div class="reasoning-content">',
            *body,
            "</div>",
            "</div>",
        ]
    )


def render_sections_html(parsed: ParsedNarrative, *, empty_message: str = "") -> str:
    """
    Markup for the reasoning body only (no page frame).
    An empty parse yields a single 'reasoning-empty' placeholder.
    """
    if parsed.is_empty:
        return f'<div class="reasoning-empty">{escape_html(empty_message)}</div>'
    return "\n".join(render_section_html(s) for s in parsed.sections)
