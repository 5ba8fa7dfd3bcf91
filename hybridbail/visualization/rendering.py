# hybridbail/visualization/rendering.py
from __future__ import annotations

import re
from typing import Iterable, List

import streamlit as st

from hybridbail.reasoning.report import confidence_pct, format_timestamp
from hybridbail.reasoning.schema import AnalysisResult
from hybridbail.reasoning.tree import Node
from hybridbail.visualization.ui_labels import pretty_label

# streamlit colour names for the category colour roles
_ST_COLORS = {"indigo": "violet", "amber": "orange", "purple": "violet"}

_MD_SPECIALS = re.compile(r"([\\`*_{}\[\]<>()#+\-.!|~])")


def escape_md(s: str) -> str:
    """Backslash-escape Markdown syntax so literal text stays literal."""
    return _MD_SPECIALS.sub(r"\\\1", s or "")


def runs_to_markdown(children: Iterable[Node]) -> str:
    parts: List[str] = []
    for n in children:
        t = escape_md(n.text)
        if n.kind == "strong" and t.strip():
            parts.append(f"**{t}**")
        else:
            parts.append(t)
    # hard line breaks inside a paragraph
    return "".join(parts).replace("\n", "  \n")


def _render_block(node: Node) -> None:
    if node.kind == "paragraph":
        st.markdown(runs_to_markdown(node.children))
    elif node.kind == "bullet_list":
        items = ["- " + runs_to_markdown(item.children).replace("  \n", " ") for item in node.children]
        st.markdown("\n".join(items))


def _render_section(node: Node) -> None:
    heading = node.children[0] if node.children and node.children[0].kind == "heading" else None
    icon = node.attrs.get("icon", "")
    color = node.attrs.get("color", "gray")
    color = _ST_COLORS.get(color, color)
    title = heading.text if heading and heading.text else pretty_label(node.attrs.get("category", "Other"))

    with st.container(border=True):
        st.markdown(f"#### {icon} :{color}[{escape_md(title)}]")
        st.caption(pretty_label(node.attrs.get("category", "Other")))
        for child in node.children:
            if child.kind != "heading":
                _render_block(child)


def render_reasoning_tree(doc: Node, *, empty_message: str = "No detailed reasoning is available.") -> None:
    """Paint a document node built by render_tree()."""
    if not doc.children:
        st.info(empty_message)
        return
    for section in doc.children:
        _render_section(section)


def render_recommendation(result: AnalysisResult) -> None:
    label = pretty_label(result.recommendation)
    if result.recommendation == "GRANT":
        st.success(label, icon="✅")
    elif result.recommendation == "DENY":
        st.error(label, icon="❌")
    else:
        st.warning(label, icon="⚠️")

    c1, c2, c3 = st.columns(3)
    c1.metric("Case ID", result.case_id)
    c2.metric("Document", result.filename or "NA")
    c3.metric("Generated", format_timestamp(result.timestamp) or "NA")

    st.progress(min(max(result.confidence, 0.0), 1.0), text=f"Confidence: {confidence_pct(result.confidence)}")
