# app/streamlit_app.py
from __future__ import annotations

import streamlit as st
from pydantic import ValidationError

from hybridbail.reasoning.parser import parse_narrative
from hybridbail.reasoning.report import render_report_html, report_filename
from hybridbail.reasoning.schema import AnalysisResult, ReportFrame
from hybridbail.reasoning.tree import render_tree
from hybridbail.utils.config import settings
from hybridbail.utils.logger import get_logger
from hybridbail.utils.session_state import clear_result, get_state, is_new_upload, set_result, upload_widget_key
from hybridbail.visualization.rendering import render_reasoning_tree, render_recommendation

log = get_logger(__name__)

st.set_page_config(page_title=settings.app_name, layout="wide")
state = get_state()
frame = ReportFrame()

SOURCE_JSON = "Analysis result (JSON)"
SOURCE_TEXT = "Paste narrative"


def _load_uploaded(upload) -> None:
    try:
        result = AnalysisResult.model_validate_json(upload.getvalue())
    except ValidationError as e:
        log.warning("invalid analysis result %s: %s", upload.name, e)
        st.error(f"Invalid analysis result: {upload.name} ({e.error_count()} error(s))")
        return
    set_result(result, source_name=upload.name, source_id=upload.file_id)


# ---------------------------
# Sidebar
# ---------------------------
with st.sidebar:
    st.header("Source")
    source = st.radio("Input", [SOURCE_JSON, SOURCE_TEXT], index=0)

    if source == SOURCE_JSON:
        upload = st.file_uploader("Result file", type=["json"], key=upload_widget_key())
        if upload is not None and is_new_upload(upload.file_id):
            _load_uploaded(upload)
    else:
        case_id = st.text_input("Case ID", value="manual")
        narrative = st.text_area("Detailed reasoning", height=260, placeholder="**1. Summary:** ...")
        if st.button("Render", type="primary"):
            set_result(AnalysisResult(case_id=case_id or "manual", detailed_reasoning=narrative), source_name=None)

    st.divider()
    state.fallback_section = st.checkbox(
        "Show unstructured text as one section",
        value=state.fallback_section,
        help="Narratives without '**1.' style headings are otherwise shown as empty.",
    )
    if st.button("Clear"):
        clear_result()
        st.rerun()

# ---------------------------
# Main
# ---------------------------
st.title(f"{settings.app_name} - Analysis Results")

result = state.result
if result is None:
    st.info("Load an analysis result or paste a narrative in the sidebar.")
    st.stop()

render_recommendation(result)
st.divider()

parsed = parse_narrative(result.detailed_reasoning, fallback=state.fallback_section)

st.subheader(frame.reasoning_heading)
st.caption(frame.intro)
render_reasoning_tree(render_tree(parsed), empty_message=frame.empty_message)
st.warning(f"**Legal Disclaimer:** {frame.disclaimer}", icon="⚖️")

st.download_button(
    "Download report (HTML)",
    data=render_report_html(result, frame, parsed=parsed),
    file_name=report_filename(result.case_id),
    mime="text/html",
)
