"""Tests for mapping word entries to the service's list word format."""

from datetime import datetime

import pytest

from voclist.lists.mapper import AnnotationMode, format_added_date, to_persisted_form
from voclist.models import WordEntry

NOW = datetime(2018, 6, 6, 14, 8)


def test_format_added_date():
    assert format_added_date(NOW) == "Wednesday 6 June 2018 at 14:08."
    assert format_added_date(datetime(2024, 1, 7, 9, 5)) == "Sunday 7 January 2024 at 09:05."


def test_minimal_entry_src_lit():
    assert to_persisted_form(WordEntry("zilch"), AnnotationMode.SRC_LIT, NOW) == {
        "word": "zilch",
        "lang": "en",
    }


def test_src_lit_attaches_source_to_example():
    entry = WordEntry("zilch", description="my note", example="So far, zilch.",
                      title="Forum thread")
    assert to_persisted_form(entry, "src-lit", NOW) == {
        "word": "zilch",
        "lang": "en",
        "description": "my note",
        "example": {
            "text": "So far, zilch.",
            "source": {"id": "LIT", "date": "20180606", "name": "Forum thread"},
        },
    }


def test_src_lit_untitled_source_and_sentence_fallback():
    entry = WordEntry("zilch", sentence="So far, zilch.")
    persisted = to_persisted_form(entry, AnnotationMode.SRC_LIT, NOW)

    assert persisted["example"]["text"] == "So far, zilch."
    assert persisted["example"]["source"]["name"] == "Untitled source"


def test_src_lit_leaves_description_alone():
    entry = WordEntry("zilch", description="my note", location="https://example.org")
    persisted = to_persisted_form(entry, AnnotationMode.SRC_LIT, NOW)

    assert persisted["description"] == "my note"
    assert "example" not in persisted


def test_comment_without_description():
    persisted = to_persisted_form(WordEntry("zilch"), AnnotationMode.COMMENT, NOW)
    assert persisted["description"] == "Added on Wednesday 6 June 2018 at 14:08."


def test_comment_appends_to_description():
    persisted = to_persisted_form(WordEntry("zilch", description="my note"), "comment", NOW)
    assert persisted["description"] == "my note\nAdded on Wednesday 6 June 2018 at 14:08."


def test_comment_with_location():
    entry = WordEntry("zilch", description="my note", location="https://example.org/t/1")
    persisted = to_persisted_form(entry, AnnotationMode.COMMENT, NOW)
    assert persisted["description"] == (
        "my note\nAdded from URL: https://example.org/t/1 on Wednesday 6 June 2018 at 14:08."
    )


def test_comment_keeps_example_without_source():
    entry = WordEntry("zilch", example="So far, zilch.", title="Forum thread")
    persisted = to_persisted_form(entry, AnnotationMode.COMMENT, NOW)
    assert persisted["example"] == {"text": "So far, zilch."}


def test_synset_id_is_passed_through():
    entry = WordEntry("test", synset_id="1234")
    assert to_persisted_form(entry, AnnotationMode.SRC_LIT, NOW)["synsetid"] == "1234"


def test_same_input_same_clock_same_output():
    entry = WordEntry("zilch", description="d", example="e", location="https://x.org")
    for mode in AnnotationMode:
        assert to_persisted_form(entry, mode, NOW) == to_persisted_form(entry, mode, NOW)


def test_entry_is_not_modified():
    entry = WordEntry("zilch", description="my note")
    to_persisted_form(entry, AnnotationMode.COMMENT, NOW)
    assert entry.description == "my note"


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        to_persisted_form(WordEntry("zilch"), "footnote", NOW)
