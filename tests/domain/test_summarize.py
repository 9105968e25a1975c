from __future__ import annotations

from mirrorball.domain.summarize import PLACEHOLDER, summarize, summarize_slot


def test_summarize_empty_input_yields_no_columns() -> None:
    assert summarize([]) == []


def test_summarize_identical_values_returns_the_value() -> None:
    assert "".join(summarize(["1.2.3", "1.2.3", "1.2.3"])) == "1.2.3"


def test_summarize_single_value_is_kept_verbatim() -> None:
    assert summarize(["x"]) == ["x"]


def test_summarize_redacts_disagreeing_columns_only() -> None:
    result = summarize(["1.2.3", "1.4.3"])

    assert result == ["1", ".", PLACEHOLDER, ".", "3"]


def test_summarize_pads_shorter_values_with_placeholder() -> None:
    result = summarize(["abc", "ab"])

    assert result == ["a", "b", PLACEHOLDER]


def test_summarize_missing_value_never_matches() -> None:
    result = summarize(["v1", None])

    assert result == [PLACEHOLDER, PLACEHOLDER]


def test_summarize_only_missing_values_has_no_columns() -> None:
    assert summarize([None, None]) == []


def test_summarize_slot_marks_uniform_slots() -> None:
    slot = summarize_slot(["keep", "keep"])

    assert slot.text == "keep"
    assert slot.uniform is True
    assert slot.display_text() == "keep"


def test_summarize_slot_collapses_varying_slots_for_display() -> None:
    slot = summarize_slot(["y", "z"])

    assert slot.text == PLACEHOLDER
    assert slot.uniform is False
    assert slot.display_text() == "(varies)"
    assert slot.display_text("~") == "~"


def test_summarize_slot_keeps_literal_placeholder_characters_uniform() -> None:
    slot = summarize_slot(["what?", "what?"])

    assert slot.text == "what?"
    assert slot.uniform is True
