# hybridbail/reasoning/report.py
from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .classifier import CATEGORY_STYLES
from .html_renderer import escape_html, render_sections_html
from .latex_renderer import render_sections_tex, tex_text
from .parser import parse_narrative
from .schema import (
    AccusedProfile,
    AnalysisResult,
    LegalProvisions,
    ParsedNarrative,
    PrecedentCase,
    Recommendation,
    ReportFrame,
)


@dataclass(frozen=True)
class RecommendationStyle:
    label: str
    color: str
    bg_color: str


RECOMMENDATION_STYLES: Dict[Recommendation, RecommendationStyle] = {
    "GRANT": RecommendationStyle("GRANT", "#10b981", "#ecfdf5"),
    "DENY": RecommendationStyle("DENY", "#ef4444", "#fef2f2"),
    "HUMAN_INTERVENTION_REQUIRED": RecommendationStyle("HUMAN INTERVENTION REQUIRED", "#f59e0b", "#fffbf0"),
}


# ---------- small helpers ----------
def format_timestamp(ts: str) -> str:
    """ISO timestamps -> 'YYYY-MM-DD HH:MM'; anything else passes through unchanged."""
    raw = (ts or "").strip()
    if not raw:
        return ""
    try:
        dt = datetime.datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return raw
    return dt.strftime("%Y-%m-%d %H:%M")


def confidence_pct(confidence: float) -> str:
    return f"{confidence * 100:.1f}%"


def report_filename(case_id: str, day: Optional[datetime.date] = None, *, ext: str = "html") -> str:
    day = day or datetime.date.today()
    safe_id = "".join(ch if ch.isalnum() or ch in "-_" else "-" for ch in (case_id or "case")) or "case"
    return f"bail-analysis-report-{safe_id}-{day.isoformat()}.{ext}"


# ---------- case data rows (shared by HTML and LaTeX) ----------
Row = Tuple[str, str]


def case_information_rows(result: AnalysisResult) -> List[Row]:
    rows: List[Row] = []
    if result.category:
        rows.append(("Bail Category", result.category))
    lp = result.legal_provisions
    if lp is not None and lp.offense_nature:
        rows.append(("Offense Nature", lp.offense_nature))
    return rows


def legal_provision_rows(lp: LegalProvisions) -> List[Row]:
    return [
        ("Primary Statute", lp.primary_statute or "N/A"),
        ("Applicable Sections", ", ".join(lp.all_sections) or "N/A"),
    ]


def accused_profile_rows(profile: AccusedProfile) -> List[Row]:
    rows: List[Row] = []
    if profile.age:
        age = f"{profile.age} years"
        rows.append(("Age", f"{age} ({profile.age_group})" if profile.age_group else age))
    rows.append(("Gender", profile.gender or "N/A"))
    rows.append(("Criminal History", profile.criminal_history.category or "N/A"))
    if profile.employment_status:
        rows.append(("Employment Status", profile.employment_status))
    health = "Yes" if profile.health_status.has_health_issues else "No"
    rows.append(("Health Status", f"{health} Health Issues"))
    family = "Has Dependents" if profile.family_circumstances.has_dependents else "No Dependents"
    rows.append(("Family Status", family))
    return rows


def precedent_entry(index: int, case: PrecedentCase) -> Tuple[str, str, str]:
    """(numbered title, decision, similarity %) for one similar precedent."""
    similarity = f"{(case.similarity_score or 0) * 100:.0f}%"
    return f"{index}. {case.case_title or 'Precedent Case'}", case.decision or "N/A", similarity


# ---------- HTML ----------
def _section_css() -> str:
    rules = []
    for style in CATEGORY_STYLES.values():
        rules.append(
            f".reasoning-section.{style.css_class} {{ background: {style.background_hex}; "
            f"border-left-color: {style.border_hex}; }}"
        )
    return "\n".join(rules)


def _report_css(rec: RecommendationStyle, confidence: float) -> str:
    return "\n".join(
        [
            "* { margin: 0; padding: 0; box-sizing: border-box; }",
            "body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; color: #1f2937; "
            "line-height: 1.6; background: #f9fafb; }",
            ".container { max-width: 900px; margin: 0 auto; padding: 40px 20px; background: white; "
            "box-shadow: 0 10px 40px rgba(0,0,0,0.1); }",
            ".header { border-bottom: 3px solid #1e3a8a; padding-bottom: 30px; margin-bottom: 40px; text-align: center; }",
            ".logo { font-size: 28px; font-weight: bold; color: #1e3a8a; margin-bottom: 10px; }",
            ".report-title { font-size: 24px; font-weight: 700; color: #111827; margin-bottom: 20px; }",
            ".meta-info { width: 100%; border-collapse: collapse; background: #f3f4f6; margin-bottom: 30px; font-size: 13px; }",
            ".meta-info th { color: #6b7280; font-weight: 500; padding: 10px 10px 0; }",
            ".meta-info td { color: #111827; font-weight: 600; font-size: 14px; text-align: center; padding: 5px 10px 10px; }",
            f".recommendation-card {{ background: {rec.bg_color}; border: 2px solid {rec.color}; "
            "border-radius: 12px; padding: 30px; margin-bottom: 30px; text-align: center; }",
            ".recommendation-label { color: #6b7280; font-size: 12px; text-transform: uppercase; "
            "letter-spacing: 1px; margin-bottom: 10px; }",
            f".recommendation-text {{ color: {rec.color}; font-size: 32px; font-weight: 700; margin-bottom: 15px; }}",
            ".confidence-bar { background: #e5e7eb; height: 8px; border-radius: 4px; overflow: hidden; "
            "max-width: 300px; margin: 15px auto; }",
            f".confidence-fill {{ background: {rec.color}; height: 100%; width: {round(confidence * 100)}%; }}",
            ".confidence-text { color: #6b7280; font-size: 13px; margin-top: 8px; }",
            ".section { margin-bottom: 40px; }",
            ".section-title { font-size: 18px; font-weight: 700; color: #1e3a8a; border-left: 4px solid #1e3a8a; "
            "padding-left: 15px; margin-bottom: 20px; }",
            ".section-content { background: #f9fafb; padding: 20px; border-radius: 8px; border: 1px solid #e5e7eb; }",
            ".info-grid { display: grid; grid-template-columns: repeat(2, 1fr); gap: 15px; }",
            ".info-item { padding: 10px; background: white; border-radius: 6px; border: 1px solid #e5e7eb; }",
            ".info-label { color: #6b7280; font-size: 12px; margin-bottom: 5px; }",
            ".info-value { color: #111827; font-weight: 600; }",
            ".ipc-sections { margin-top: 15px; }",
            ".tag { display: inline-block; background: #dbeafe; color: #1e40af; padding: 4px 12px; "
            "border-radius: 20px; font-size: 12px; margin-right: 8px; margin-bottom: 8px; }",
            ".precedent-section { background: white; padding: 15px; border-radius: 8px; margin-bottom: 15px; "
            "border-left: 3px solid #3b82f6; }",
            ".precedent-title { font-weight: 600; color: #1e3a8a; margin-bottom: 8px; }",
            ".precedent-info { font-size: 13px; color: #6b7280; }",
            ".reasoning-section { background: #f9fafb; border-left: 4px solid #1e3a8a; padding: 20px; "
            "border-radius: 8px; margin-bottom: 20px; }",
            _section_css(),
            ".reasoning-title { font-size: 16px; font-weight: 700; margin-bottom: 15px; color: #1f2937; }",
            ".reasoning-content { color: #374151; line-height: 1.8; }",
            ".reasoning-content p { margin-bottom: 10px; }",
            ".reasoning-content ul { margin-left: 20px; margin-top: 10px; }",
            ".reasoning-content li { margin-bottom: 10px; list-style-type: disc; }",
            ".reasoning-content strong { font-weight: 600; color: #111827; }",
            ".reasoning-intro { background: #eff6ff; border-left: 4px solid #3b82f6; padding: 20px; "
            "border-radius: 8px; margin-bottom: 30px; color: #374151; }",
            ".reasoning-empty { color: #6b7280; font-style: italic; padding: 20px; }",
            ".reasoning-disclaimer { background: #fffbf0; border-left: 4px solid #f59e0b; padding: 20px; "
            "border-radius: 8px; margin-top: 30px; color: #374151; font-size: 13px; }",
            ".footer { margin-top: 40px; padding-top: 20px; border-top: 1px solid #e5e7eb; text-align: center; "
            "color: #6b7280; font-size: 12px; }",
            ".timestamp { color: #9ca3af; font-size: 12px; margin-top: 10px; }",
            "@media print { body { background: white; } .container { box-shadow: none; padding: 20px; } }",
        ]
    )


def _info_grid_html(rows: List[Row]) -> str:
    items = [
        '<div class="info-item">'
        f'<div class="info-label">{escape_html(label)}</div>'
        f'<div class="info-value">{escape_html(value)}</div>'
        "</div>"
        for label, value in rows
    ]
    return '<div class="info-grid">' + "".join(items) + "</div>"


def _section_html(css_class: str, title: str, body: List[str]) -> List[str]:
    return [
        f'<div class="section {css_class}">',
        f'<div class="section-title">{escape_html(title)}</div>',
        '<div class="section-content">',
        *body,
        "</div>",
        "</div>",
    ]


def render_report_html(
    result: AnalysisResult,
    frame: Optional[ReportFrame] = None,
    *,
    parsed: Optional[ParsedNarrative] = None,
) -> str:
    """
    Self-contained HTML report (inline CSS, no external resources).

    `parsed` lets a caller reuse the parse already shown on screen; otherwise
    `result.detailed_reasoning` is parsed here.
    """
    frame = frame or ReportFrame()
    parsed = parsed if parsed is not None else parse_narrative(result.detailed_reasoning)
    rec = RECOMMENDATION_STYLES[result.recommendation]
    generated = format_timestamp(result.timestamp)

    lines: List[str] = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"<title>{escape_html(frame.title)} - {escape_html(result.case_id)}</title>",
        "<style>",
        _report_css(rec, result.confidence),
        "</style>",
        "</head>",
        "<body>",
        '<div class="container">',
        '<div class="header">',
        f'<div class="logo">⚖️ {escape_html(frame.product_name)}</div>',
        f'<div class="report-title">{escape_html(frame.title)}</div>',
        "</div>",
        '<table class="meta-info">',
        "<tr><th>Case ID</th><th>Document</th><th>Generated</th></tr>",
        "<tr>"
        f'<td class="meta-case-id">{escape_html(result.case_id)}</td>'
        f'<td class="meta-filename">{escape_html(result.filename)}</td>'
        f'<td class="meta-generated">{escape_html(generated)}</td>'
        "</tr>",
        "</table>",
        '<div class="recommendation-card">',
        '<div class="recommendation-label">System Recommendation</div>',
        f'<div class="recommendation-text">{escape_html(rec.label)}</div>',
        '<div class="confidence-bar"><div class="confidence-fill"></div></div>',
        f'<div class="confidence-text">Confidence: {confidence_pct(result.confidence)}</div>',
        "</div>",
    ]

    case_rows = case_information_rows(result)
    if case_rows:
        lines += _section_html("case-information", "📋 Case Information", [_info_grid_html(case_rows)])

    lp = result.legal_provisions
    if lp is not None:
        body = [_info_grid_html(legal_provision_rows(lp))]
        if lp.ipc_sections:
            tags = "".join(f'<span class="tag">IPC {escape_html(s)}</span>' for s in lp.ipc_sections)
            body.append(f'<div class="ipc-sections"><div class="info-label">IPC Sections</div><div>{tags}</div></div>')
        lines += _section_html("legal-provisions", "⚖️ Legal Provisions", body)

    if result.accused_profile is not None:
        lines += _section_html(
            "accused-profile", "👤 Accused Profile", [_info_grid_html(accused_profile_rows(result.accused_profile))]
        )

    if result.similar_precedents:
        body = []
        for i, case in enumerate(result.similar_precedents, start=1):
            name, decision, similarity = precedent_entry(i, case)
            body += [
                '<div class="precedent-section">',
                f'<div class="precedent-title">{escape_html(name)}</div>',
                '<div class="precedent-info">'
                f"<strong>Decision:</strong> {escape_html(decision)} | "
                f"<strong>Similarity:</strong> {similarity}"
                "</div>",
                "</div>",
            ]
        title = f"📚 Similar Precedent Cases ({len(result.similar_precedents)})"
        lines += _section_html("similar-precedents", title, body)

    if result.precedent_summary:
        lines += _section_html(
            "precedent-summary",
            "📊 Precedent Analysis Summary",
            [f"<p>{escape_html(result.precedent_summary)}</p>"],
        )

    lines += [
        '<div class="section reasoning">',
        f'<div class="section-title">📝 {escape_html(frame.reasoning_heading)}</div>',
        f'<div class="reasoning-intro"><p>{escape_html(frame.intro)}</p></div>',
        '<div class="reasoning-body">',
        render_sections_html(parsed, empty_message=frame.empty_message),
        "</div>",
        '<div class="reasoning-disclaimer">',
        f"<strong>⚖️ Legal Disclaimer:</strong> {escape_html(frame.disclaimer)}",
        "</div>",
        "</div>",
        '<div class="footer">',
        f"<p>This report was generated by {escape_html(frame.product_name)} - {escape_html(frame.footer)}</p>",
        f'<p class="timestamp">Generated on {escape_html(generated)}</p>',
        "</div>",
        "</div>",
        "</body>",
        "</html>",
        "",
    ]
    return "\n".join(lines)


# ---------- LaTeX ----------
def _tex_table(rows: List[Row]) -> List[str]:
    body = [tex_text(label) + " & " + tex_text(value) + r" \\" for label, value in rows]
    return [r"\begin{tabular}{ll}", *body, r"\end{tabular}"]


def render_report_tex(
    result: AnalysisResult,
    frame: Optional[ReportFrame] = None,
    *,
    parsed: Optional[ParsedNarrative] = None,
) -> str:
    """Standalone `article` document carrying the same frame as the HTML report."""
    frame = frame or ReportFrame()
    parsed = parsed if parsed is not None else parse_narrative(result.detailed_reasoning)
    rec = RECOMMENDATION_STYLES[result.recommendation]
    generated = format_timestamp(result.timestamp)

    lines: List[str] = [
        r"\documentclass[11pt,a4paper]{article}",
        r"\usepackage[utf8]{inputenc}",
        r"\usepackage[T1]{fontenc}",
        r"\usepackage{textcomp}",
        r"\usepackage[margin=2.5cm]{geometry}",
        "",
        r"\title{" + tex_text(f"{frame.product_name}: {frame.title}") + "}",
        r"\date{" + tex_text(generated) + "}",
        "",
        r"\begin{document}",
        r"\maketitle",
        "",
        r"\begin{tabular}{ll}",
        r"Case ID & " + tex_text(result.case_id) + r" \\",
        r"Document & " + tex_text(result.filename) + r" \\",
        r"Generated & " + tex_text(generated) + r" \\",
        r"Recommendation & \textbf{" + tex_text(rec.label) + r"} \\",
        r"Confidence & " + tex_text(confidence_pct(result.confidence)) + r" \\",
        r"\end{tabular}",
        "",
    ]
    case_rows = case_information_rows(result)
    if case_rows:
        lines += [r"\paragraph{Case Information}", *_tex_table(case_rows), ""]

    lp = result.legal_provisions
    if lp is not None:
        rows = legal_provision_rows(lp)
        if lp.ipc_sections:
            rows.append(("IPC Sections", ", ".join(f"IPC {s}" for s in lp.ipc_sections)))
        lines += [r"\paragraph{Legal Provisions}", *_tex_table(rows), ""]

    if result.accused_profile is not None:
        lines += [r"\paragraph{Accused Profile}", *_tex_table(accused_profile_rows(result.accused_profile)), ""]

    if result.similar_precedents:
        lines += [
            r"\paragraph{" + tex_text(f"Similar Precedent Cases ({len(result.similar_precedents)})") + "}",
            r"\begin{itemize}",
        ]
        for i, case in enumerate(result.similar_precedents, start=1):
            name, decision, similarity = precedent_entry(i, case)
            lines.append(
                r"  \item[] \textbf{" + tex_text(name) + r"} \\ "
                + r"Decision: " + tex_text(decision) + "; Similarity: " + tex_text(similarity)
            )
        lines += [r"\end{itemize}", ""]

    if result.precedent_summary:
        lines += [
            r"\paragraph{Precedent Analysis Summary}",
            tex_text(result.precedent_summary),
            "",
        ]
    lines += [
        r"\begin{center}\large\bfseries " + tex_text(frame.reasoning_heading) + r"\end{center}",
        tex_text(frame.intro),
        "",
        render_sections_tex(parsed, empty_message=frame.empty_message),
        r"\paragraph{Legal Disclaimer}",
        tex_text(frame.disclaimer),
        "",
        r"\end{document}",
        "",
    ]
    return "\n".join(lines)
