# hybridbail/visualization/ui_labels.py
from __future__ import annotations

import re

UI_LABELS: dict[str, str] = {
    # --- Reasoning categories ---
    "Summary": "Case summary",
    "LegalFramework": "Legal framework",
    "Precedent": "Precedent analysis",
    "Favoring": "Factors favoring bail",
    "Against": "Factors against bail",
    "ReasoningConclusion": "Reasoning & conclusion",
    "Other": "Other observations",

    # --- Recommendations ---
    "GRANT": "Recommendation: GRANT",
    "DENY": "Recommendation: DENY",
    "HUMAN_INTERVENTION_REQUIRED": "Recommendation: HUMAN INTERVENTION REQUIRED",
}


def pretty_label(key: str) -> str:
    if key in UI_LABELS:
        return UI_LABELS[key]

    # fallback: "ReasoningConclusion" -> "Reasoning conclusion", "SOME_KEY" -> "Some key"
    s = re.sub(r"(?<=[a-z])(?=[A-Z])", " ", key).replace("_", " ").lower()
    return s[:1].upper() + s[1:]
