from .classifier import CATEGORY_STYLES, CLASSIFICATION_RULES, Category, CategoryStyle, classify, style_for
from .grouper import group
from .html_renderer import render_sections_html
from .inline import tokenize
from .latex_renderer import render_sections_tex
from .parser import parse_narrative
from .report import render_report_html, render_report_tex, report_filename
from .schema import (
    AccusedProfile,
    AnalysisResult,
    Block,
    LegalProvisions,
    ParsedNarrative,
    PrecedentCase,
    ReportFrame,
    Run,
    Section,
    SectionCandidate,
)
from .segmenter import segment
from .tree import Node, render_tree

__all__ = [
    "Category",
    "CategoryStyle",
    "CATEGORY_STYLES",
    "CLASSIFICATION_RULES",
    "classify",
    "style_for",
    "segment",
    "tokenize",
    "group",
    "parse_narrative",
    "render_tree",
    "render_sections_html",
    "render_sections_tex",
    "render_report_html",
    "render_report_tex",
    "report_filename",
    "AccusedProfile",
    "AnalysisResult",
    "LegalProvisions",
    "PrecedentCase",
    "Block",
    "Node",
    "ParsedNarrative",
    "ReportFrame",
    "Run",
    "Section",
    "SectionCandidate",
]
