from hybridbail.reasoning.grouper import bullet_text, group, is_bullet_line, list_groups


def _shape(blocks):
    return [(b.kind, b.text) for b in blocks]


def test_bullets_with_emphasis():
    blocks = group("* First point\n* Second **important** point")
    assert [b.kind for b in blocks] == ["bullet", "bullet"]
    assert [(r.text, r.emphasized) for r in blocks[1].runs] == [
        ("Second ", False),
        ("important", True),
        (" point", False),
    ]


def test_consecutive_plain_lines_form_one_paragraph():
    assert _shape(group("line one\n  line two  ")) == [("paragraph", "line one\nline two")]


def test_blank_line_closes_paragraph():
    assert _shape(group("first\n\nsecond")) == [("paragraph", "first"), ("paragraph", "second")]


def test_blank_lines_alone_produce_nothing():
    assert group("") == []
    assert group("\n  \n\t\n") == []


def test_mixed_blocks_keep_order():
    body = "Intro line\n* one\n- two\nOutro with **bold**"
    assert _shape(group(body)) == [
        ("paragraph", "Intro line"),
        ("bullet", "one"),
        ("bullet", "two"),
        ("paragraph", "Outro with **bold**"),
    ]


def test_paragraph_after_bullets_is_not_folded_into_the_bullet():
    assert _shape(group("* item\ncontinued text")) == [("bullet", "item"), ("paragraph", "continued text")]


def test_every_non_blank_line_lands_in_one_block():
    body = "a\nb\n\n* c\n  - d\n\ne\n"
    blocks = group(body)
    lines = [ln for b in blocks for ln in b.text.split("\n")]
    assert lines == ["a", "b", "c", "d", "e"]


def test_leading_emphasis_line_is_a_paragraph():
    blocks = group("**Note:** the accused cooperated")
    assert _shape(blocks) == [("paragraph", "**Note:** the accused cooperated")]
    assert [(r.text, r.emphasized) for r in blocks[0].runs] == [
        ("Note:", True),
        (" the accused cooperated", False),
    ]


def test_bullet_prefix_keeps_inner_emphasis():
    assert bullet_text("* **Flight risk:** low") == "**Flight risk:** low"
    assert bullet_text("   -   indented dash") == "indented dash"
    assert is_bullet_line("  * indented")
    assert is_bullet_line("-no space")
    assert not is_bullet_line("**Bold** start")
    assert not is_bullet_line("plain")


def test_list_groups_gathers_consecutive_bullets():
    blocks = group("p1\n* a\n* b\np2\n* c")
    layout = [(kind, [b.text for b in bs]) for kind, bs in list_groups(blocks)]
    assert layout == [
        ("paragraph", ["p1"]),
        ("bullet", ["a", "b"]),
        ("paragraph", ["p2"]),
        ("bullet", ["c"]),
    ]


def test_paragraphs_are_never_gathered():
    blocks = group("p1\n\np2")
    assert [kind for kind, _ in list_groups(blocks)] == ["paragraph", "paragraph"]
