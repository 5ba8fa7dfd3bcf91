from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from hybridbail.reasoning.schema import AnalysisResult
from hybridbail.utils.config import settings

@dataclass
class HybridBailState:
    result: AnalysisResult | None = None
    source_name: str | None = None
    # UploadedFile.file_id of the loaded result; changes on every re-upload
    source_id: str | None = None
    # bumped on clear so the uploader widget starts empty
    upload_generation: int = 0
    fallback_section: bool = settings.fallback_section

_KEY = "hybridbail_state"

def get_state() -> HybridBailState:
    if _KEY not in st.session_state:
        st.session_state[_KEY] = HybridBailState()
    return st.session_state[_KEY]

def upload_widget_key() -> str:
    return f"result-upload-{get_state().upload_generation}"

def is_new_upload(file_id: str) -> bool:
    return file_id != get_state().source_id

def set_result(result: AnalysisResult, source_name: str | None = None, source_id: str | None = None) -> None:
    s = get_state()
    s.result = result
    s.source_name = source_name
    s.source_id = source_id

def clear_result() -> None:
    s = get_state()
    s.result = None
    s.source_name = None
    s.source_id = None
    s.upload_generation += 1
