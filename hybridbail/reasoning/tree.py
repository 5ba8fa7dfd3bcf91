# hybridbail/reasoning/tree.py
from __future__ import annotations
from typing import Dict, List, Literal, Sequence, Tuple
from pydantic import BaseModel, ConfigDict, Field

from .classifier import style_for
from .grouper import list_groups
from .schema import Block, ParsedNarrative, Run, Section

NodeKind = Literal[
    "document",
    "section",
    "heading",
    "paragraph",
    "bullet_list",
    "bullet",
    "text",
    "strong",
]


class Node(BaseModel):
    """Display-neutral node; the Streamlit painter walks these."""
    model_config = ConfigDict(frozen=True)

    kind: NodeKind
    text: str = ""
    attrs: Dict[str, str] = Field(default_factory=dict)
    children: Tuple["Node", ...] = ()


def _run_node(run: Run) -> Node:
    return Node(kind="strong" if run.emphasized else "text", text=run.text)


def _block_node(block: Block) -> Node:
    return Node(kind=block.kind, children=tuple(_run_node(r) for r in block.runs))


def _body_nodes(blocks: Sequence[Block]) -> List[Node]:
    nodes: List[Node] = []
    for kind, group in list_groups(blocks):
        if kind == "bullet":
            nodes.append(Node(kind="bullet_list", children=tuple(_block_node(b) for b in group)))
        else:
            nodes.extend(_block_node(b) for b in group)
    return nodes


def section_node(section: Section) -> Node:
    style = style_for(section.category)
    attrs = {
        "ordinal": str(section.ordinal),
        "category": section.category.value,
        "icon": style.icon,
        "color": style.color,
        "css_class": style.css_class,
    }
    heading = Node(kind="heading", text=section.title, attrs={"icon": style.icon})
    return Node(kind="section", attrs=attrs, children=(heading, *_body_nodes(section.blocks)))


def render_tree(parsed: ParsedNarrative) -> Node:
    """Structured rendering: document -> section -> heading/paragraph/bullet_list -> runs."""
    children = tuple(section_node(s) for s in parsed.sections)
    return Node(
        kind="document",
        attrs={"empty": "true" if not children else "false"},
        children=children,
    )
