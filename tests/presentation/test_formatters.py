from narrow.core.engine import NarrowEngine
from narrow.domain.candidate import PRIMARY, Candidate, HighlightSpan
from narrow.presentation.formatters import (
    MARKER_STYLES,
    format_candidate_text,
    format_count_indicator,
    format_prompt_text,
)


def test_candidate_text_includes_prefix_and_suffix():
    text = format_candidate_text(Candidate("apple", display_prefix="> ", display_suffix="/"))
    assert text.plain == "> apple/"


def test_highlight_span_is_offset_by_prefix():
    candidate = Candidate("apple", display_prefix="> ").with_highlights((HighlightSpan(1, 3, PRIMARY),))
    text = format_candidate_text(candidate)
    styled = [(span.start, span.end) for span in text.spans if span.style == MARKER_STYLES[PRIMARY]]
    assert styled == [(3, 5)]


def test_right_margin_is_aligned_to_width():
    text = format_candidate_text(Candidate("apple", display_prefix="> ", right_margin="fruit"), width=20)
    assert len(text.plain) == 20
    assert text.plain.endswith("fruit")


def test_current_row_is_reversed():
    text = format_candidate_text(Candidate("apple"), current=True)
    assert any(span.style == "reverse" for span in text.spans)


def test_selection_column():
    assert format_candidate_text(Candidate("a"), selected=True).plain == "* a"
    assert format_candidate_text(Candidate("a"), selected=False).plain == "  a"


def test_prompt_line_shows_count_and_default_hint():
    session = NarrowEngine().start_session("Fruit:", ["banana", "apple"], {"default_candidate": "kiwi"})
    text = format_prompt_text(session.view)
    assert text.plain.startswith("2/2 Fruit:")
    assert "(default kiwi)" in text.plain


def test_count_indicator_uses_format():
    session = NarrowEngine().start_session("Fruit:", ["banana", "apple"])
    view = session.on_query_changed("ban")
    assert format_count_indicator(view, "{shown} of {total}") == "1 of 2"
