import pytest

from hybridbail.reasoning.inline import strip_emphasis, tokenize


def _pairs(runs):
    return [(r.text, r.emphasized) for r in runs]


def test_no_marker_single_plain_run():
    assert _pairs(tokenize("Defendant is 34.")) == [("Defendant is 34.", False)]


def test_empty_input():
    assert _pairs(tokenize("")) == [("", False)]


def test_emphasis_in_the_middle():
    assert _pairs(tokenize("Second **important** point")) == [
        ("Second ", False),
        ("important", True),
        (" point", False),
    ]


def test_leading_and_trailing_emphasis():
    assert _pairs(tokenize("**a** and **b**")) == [("a", True), (" and ", False), ("b", True)]


def test_adjacent_spans():
    assert _pairs(tokenize("**a****b**")) == [("a", True), ("b", True)]


def test_shortest_span_wins():
    assert _pairs(tokenize("**x** y **z**")) == [("x", True), (" y ", False), ("z", True)]


@pytest.mark.parametrize("text", ["an **unclosed marker", "stray ** here", "****", "**a*b**"])
def test_unmatched_markers_stay_literal(text):
    assert _pairs(tokenize(text)) == [(text, False)]


def test_unmatched_trailing_marker_after_span():
    assert _pairs(tokenize("**a** **b")) == [("a", True), (" **b", False)]


@pytest.mark.parametrize(
    "text",
    [
        "The accused, aged 34, is charged under **Section 437 CrPC**.",
        "**Flight risk:** low\nsecond line with **two** **spans**",
        "no markers at all",
    ],
)
def test_lossless(text):
    assert "".join(r.text for r in tokenize(text)) == text.replace("**", "")
    assert "".join(r.text for r in tokenize(text)) == strip_emphasis(text)


def test_no_empty_runs_between_spans():
    assert all(r.text for r in tokenize("x **a** y **b** z"))
