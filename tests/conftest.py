import random
import re

import pytest
from bs4 import BeautifulSoup, Tag

from hybridbail.reasoning.latex_renderer import TEX_SPECIALS
from hybridbail.reasoning.tree import Node

SAMPLE_REASONING = """Based on the analysis of the bail application, here is the detailed reasoning.

**1. Case Summary:** The accused, aged 34, is charged under **Section 437 CrPC**.
The application was filed after 45 days in custody.

**2. Legal Framework:**
* **Section 437 CrPC** governs bail in non-bailable offences.
* The offence is punishable with imprisonment up to 7 years.

**3. Precedent Analysis:** Similar cases show a 65% grant rate.

**4. Factors Favoring Bail:**
- First-time accused with no criminal history
- Sole breadwinner with **two minor children**

**5. Factors Against Bail:**
* Risk of witness tampering was raised by the prosecution.

**6. Reasoning and Conclusion:** On balance, bail is **recommended** subject to conditions.
"""


# Narratives every renderer must agree on.
NARRATIVES = {
    "sample": SAMPLE_REASONING,
    "two_sections": "**1. Summary:** Defendant is 34.\n**2. Legal Framework:** Section 437 applies.",
    "bullets": "**1. Factors Favoring Bail:**\n* First point\n* Second **important** point",
    "no_marker": "Plain text without any numbered heading.",
    "empty": "",
    "heading_only": "**1. Summary:**\n**2. Conclusion:**",
    "unbalanced": "**1. Summary:** an **unclosed marker\n* a **bold** item and a stray **",
    "mixed_blocks": (
        "**1. Reasoning:** Opening paragraph.\n"
        "Still the opening paragraph.\n"
        "\n"
        "Second paragraph after a blank line.\n"
        "* bullet one\n"
        "- bullet two\n"
        "Closing paragraph with **emphasis**."
    ),
    "other": "**7. Additional Notes:** Nothing **further**.",
    "bracket_bullets": "**4. Factors Favoring Bail:**\n* [Verified] no prior record\n- [2] dependents, **[sole] earner**",
    "tex_specials": (
        "**2. Legal Framework: § 437 & {439}**\n"
        "Bail in 50% of cases_x ~ ^ $ # back\\slash.\n"
        "* **{R&D}** item } {"
    ),
}


@pytest.fixture
def sample_reasoning():
    return SAMPLE_REASONING


@pytest.fixture
def analysis_payload():
    """Shape of the analysis service response (extra keys included)."""
    return {
        "case_id": "BA-2024-0117",
        "filename": "bail_application.pdf",
        "category": "Regular Bail",
        "recommendation": "GRANT",
        "confidence": 0.875,
        "legal_provisions": {
            "provisions": {"IPC": ["420", "406"], "CrPC": ["437"], "NDPS": []},
            "all_sections": ["IPC 420", "IPC 406", "CrPC 437"],
            "primary_statute": "IPC",
            "offense_nature": "Non-bailable, cognizable",
        },
        "accused_profile": {
            "age": 34,
            "age_group": "adult",
            "gender": "male",
            "custody_days": 45,
            "health_status": {"has_health_issues": False, "medical_bail_eligible": False, "conditions": []},
            "criminal_history": {"category": "First-time offender", "previous_cases": 0, "first_time_accused": True},
            "employment_status": None,
            "family_circumstances": {"has_dependents": True, "sole_breadwinner": True, "minor_children": True},
        },
        "similar_precedents": [
            {"case_title": "State v. Sharma", "decision": "GRANTED", "similarity_score": 0.91},
            {"decision": "DENIED", "similarity_score": 0.684, "court": "Delhi HC"},
        ],
        "model_version": "2.3.1",
        "precedent_summary": "Similar cases show a 65% grant rate.",
        "detailed_reasoning": SAMPLE_REASONING,
        "timestamp": "2025-01-15T10:30:00Z",
    }


# ---------- structure extractors ----------
def _runs(pairs):
    return tuple((t, e) for t, e in pairs if t)


def tree_signature(doc: Node):
    out = []
    for sec in doc.children:
        heading = sec.children[0]
        blocks = []
        for child in sec.children[1:]:
            items = child.children if child.kind == "bullet_list" else (child,)
            for item in items:
                blocks.append((item.kind, _runs((r.text, r.kind == "strong") for r in item.children)))
        out.append((sec.attrs["category"], heading.text, tuple(blocks)))
    return out


def html_signature(markup: str):
    soup = BeautifulSoup(markup, "html.parser")
    out = []
    for div in soup.select("div.reasoning-section"):
        title = div.select_one(".reasoning-heading").get_text()
        content = div.select_one(".reasoning-content")
        blocks = []
        for el in content.find_all(["p", "li"]):
            pairs = []
            for c in el.children:
                if isinstance(c, Tag) and c.name == "strong":
                    pairs.append((c.get_text(), True))
                else:
                    pairs.append((str(c), False))
            blocks.append(("paragraph" if el.name == "p" else "bullet", _runs(pairs)))
        out.append((div["data-category"], title, tuple(blocks)))
    return out


_TEX_ESCAPES = {v: k for k, v in TEX_SPECIALS.items()}
_TEX_ESCAPE_ALT = "|".join(re.escape(v) for v in sorted(_TEX_ESCAPES, key=len, reverse=True))
_TEX_UNESCAPE_RE = re.compile(_TEX_ESCAPE_ALT)
_TEXTBF_RE = re.compile(r"\\textbf\{((?:" + _TEX_ESCAPE_ALT + r"|[^{}])*)\}")
_ITEM = r"  \item{} "


def _tex_unescape(s: str) -> str:
    return _TEX_UNESCAPE_RE.sub(lambda m: _TEX_ESCAPES[m.group(0)], s)


def _tex_runs(line: str):
    pairs = []
    last = 0
    for m in _TEXTBF_RE.finditer(line):
        pairs.append((_tex_unescape(line[last:m.start()]), False))
        pairs.append((_tex_unescape(m.group(1)), True))
        last = m.end()
    pairs.append((_tex_unescape(line[last:]), False))
    return _runs(pairs)


def tex_signature(tex: str):
    """Reads back render_sections_tex() output (text free of dash/quote/rupee normalization)."""
    out = []
    current = None
    para = []

    def _close_para():
        if para and current is not None:
            current[2].append(("paragraph", _tex_runs("\n".join(para))))
        para.clear()

    for line in tex.split("\n"):
        if line.startswith("% category: "):
            _close_para()
            current = [line[len("% category: "):], None, []]
            out.append(current)
        elif line.startswith(r"\section*{"):
            current[1] = _tex_unescape(line[len(r"\section*{"):-1])
        elif line in (r"\begin{itemize}", r"\end{itemize}"):
            _close_para()
        elif line.startswith(_ITEM):
            current[2].append(("bullet", _tex_runs(line[len(_ITEM):])))
        elif not line.strip():
            _close_para()
        else:
            para.append(line)
    _close_para()
    return [(c, t, tuple(b)) for c, t, b in out]


# ---------- generated narratives ----------
_HEADINGS = [
    "Case Summary:",
    "Legal Framework:",
    "Precedent Analysis:",
    "Factors Favoring Bail:",
    "Factors Against Bail:",
    "Reasoning and Conclusion:",
    "Notes on [R&D] at 50%:",
    "Section 437 {CrPC} § 2",
]
_WORDS = [
    "bail", "accused", "custody", "[Verified]", "[", "]", "50%", "R&D", "snake_case",
    "{x}", "}", "{", "<b>", "a>b", "x~y", "2^3", "$100", "#4", "back\\slash", "§437",
    "¶", "…", "•", "90°", "Tom's", "\"quoted\"",
]


def _phrase(rng: random.Random) -> str:
    words = []
    for _ in range(rng.randint(1, 6)):
        w = rng.choice(_WORDS)
        roll = rng.random()
        if roll < 0.2:
            w = f"**{w}**"
        elif roll < 0.25:
            w = "**" + w
        words.append(w)
    return " ".join(words)


def random_narrative(seed: int) -> str:
    """Seeded narrative mixing headings, paragraphs, bullets, blank lines and LaTeX/HTML specials."""
    rng = random.Random(seed)
    lines = []
    if rng.random() < 0.3:
        lines.append("Preamble " + _phrase(rng))
    for n in range(1, rng.randint(1, 5) + 1):
        heading = f"**{n}. {rng.choice(_HEADINGS)}**"
        if rng.random() < 0.4:
            heading += " " + _phrase(rng)
        lines.append(heading)
        for _ in range(rng.randint(0, 7)):
            roll = rng.random()
            if roll < 0.2:
                lines.append("")
            elif roll < 0.55:
                lines.append(rng.choice(["* ", "- ", "  * "]) + _phrase(rng))
            else:
                lines.append(_phrase(rng))
    return "\n".join(lines)
