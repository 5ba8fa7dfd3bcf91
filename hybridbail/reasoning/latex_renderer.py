# hybridbail/reasoning/latex_renderer.py
from __future__ import annotations
import re
from typing import Iterable, List

from .grouper import list_groups
from .schema import ParsedNarrative, Run, Section


# ---------- unicode normalization ----------
def normalize_unicode(s: str) -> str:
    if not s:
        return ""
    return (
        s.replace("−", "-")
         .replace("–", "--")
         .replace("—", "---")
         .replace("’", "'")
         .replace("“", '"')
         .replace("”", '"')
         .replace("₹", "Rs.")
         .replace("\u00a0", " ")  # nbsp
    )


# pdflatex-safe replacements; each is a single escape sequence in the output
TEX_SPECIALS = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "§": r"\S{}",
    "¶": r"\P{}",
    "…": r"\ldots{}",
    "•": r"\textbullet{}",
    "°": r"\textdegree{}",
}
_TEX_SPECIALS_RE = re.compile("|".join(re.escape(k) for k in TEX_SPECIALS))


def tex_text(s: object) -> str:
    """Escape running text (not paths)."""
    if s is None:
        return ""
    return _TEX_SPECIALS_RE.sub(lambda m: TEX_SPECIALS[m.group(0)], normalize_unicode(str(s)))


def render_runs_tex(runs: Iterable[Run]) -> str:
    parts: List[str] = []
    for r in runs:
        t = tex_text(r.text)
        parts.append(r"\textbf{" + t + "}" if r.emphasized else t)
    return "".join(parts)


# ---------- sections ----------
def render_section_tex(section: Section) -> str:
    lines: List[str] = [
        f"% category: {section.category.value}",
        r"\section*{" + tex_text(section.title) + "}",
        "",
    ]
    for kind, group in list_groups(section.blocks):
        if kind == "bullet":
            lines.append(r"\begin{itemize}")
            # empty group keeps a leading '[' out of \item's optional label
            lines.extend(r"  \item{} " + render_runs_tex(b.runs) for b in group)
            lines.append(r"\end{itemize}")
        else:
            for b in group:
                lines.append(render_runs_tex(b.runs))
        lines.append("")
    return "\n".join(lines)


def render_sections_tex(parsed: ParsedNarrative, *, empty_message: str = "") -> str:
    r"""
    Reasoning body in LaTeX (no preamble): one \section* per section.
    Output is pdflatex-safe for Latin-1 text plus the symbols in TEX_SPECIALS;
    other scripts need xelatex or lualatex.
    """
    if parsed.is_empty:
        return r"\emph{" + tex_text(empty_message) + "}\n"
    return "\n".join(render_section_tex(s) for s in parsed.sections)
