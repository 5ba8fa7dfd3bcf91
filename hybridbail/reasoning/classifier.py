# hybridbail/reasoning/classifier.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Category(str, Enum):
    SUMMARY = "Summary"
    LEGAL_FRAMEWORK = "LegalFramework"
    PRECEDENT = "Precedent"
    FAVORING = "Favoring"
    AGAINST = "Against"
    REASONING_CONCLUSION = "ReasoningConclusion"
    OTHER = "Other"


@dataclass(frozen=True)
class CategoryStyle:
    icon: str
    color: str  # colour role, resolved to concrete colours by each renderer
    css_class: str
    border_hex: str
    background_hex: str


# Ordered precedence table: first substring contained in the heading wins.
CLASSIFICATION_RULES: Tuple[Tuple[str, Category], ...] = (
    ("Summary", Category.SUMMARY),
    ("Legal Framework", Category.LEGAL_FRAMEWORK),
    ("Precedent", Category.PRECEDENT),
    ("Favoring", Category.FAVORING),
    ("Against", Category.AGAINST),
    ("Reasoning", Category.REASONING_CONCLUSION),
    ("Conclusion", Category.REASONING_CONCLUSION),
)

CATEGORY_STYLES: Dict[Category, CategoryStyle] = {
    Category.SUMMARY: CategoryStyle("📖", "blue", "summary", "#3b82f6", "#eff6ff"),
    Category.LEGAL_FRAMEWORK: CategoryStyle("⚖️", "indigo", "framework", "#4f46e5", "#f0f4ff"),
    Category.PRECEDENT: CategoryStyle("📚", "amber", "precedent", "#f59e0b", "#fffbf0"),
    Category.FAVORING: CategoryStyle("✅", "green", "favoring", "#10b981", "#f0fdf4"),
    Category.AGAINST: CategoryStyle("❌", "red", "against", "#ef4444", "#fef2f2"),
    Category.REASONING_CONCLUSION: CategoryStyle("🎯", "purple", "reasoning", "#a855f7", "#faf5ff"),
    Category.OTHER: CategoryStyle("📖", "gray", "other", "#6b7280", "#f9fafb"),
}


def classify(heading: str) -> Category:
    """Map a section heading to its category. Total: unmatched headings are OTHER."""
    h = heading or ""
    for needle, category in CLASSIFICATION_RULES:
        if needle in h:
            return category
    return Category.OTHER


def style_for(category: Category) -> CategoryStyle:
    return CATEGORY_STYLES[category]
