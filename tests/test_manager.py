"""Tests for adding corrected words to lists."""

from datetime import datetime

import pytest

from conftest import FakeService, grab_of
from voclist.correction.corrector import WordCorrector
from voclist.errors import NoSuggestionsFound
from voclist.lists.manager import ListManager
from voclist.lists.mapper import AnnotationMode
from voclist.models import WordEntry


class RecordingAPI:
    """Records saves instead of sending them."""

    def __init__(self):
        self.saved = []
        self.created = []
        self.names = {}

    def save_words(self, persisted_words, list_id):
        self.saved.append((persisted_words, list_id))
        return {"status": 200, "response": ""}

    def create_list(self, persisted_words, name, description="", shared=False):
        self.created.append((persisted_words, name, description, shared))
        return {"status": 0}

    def get_list_name_or_none(self, list_id):
        return self.names.get(str(list_id))


def _manager(service, mode=AnnotationMode.SRC_LIT):
    api = RecordingAPI()
    corrector = WordCorrector(lookup=service.lookup, grab=service.grab)
    return ListManager(api, corrector, mode), api


def test_add_single_word_keeps_all_annotations(capsys):
    service = FakeService(suggestions={"grammer": ["grammar"]})
    manager, api = _manager(service)
    entry = WordEntry("grammer", example="Mind your grammer.", title="Style guide",
                      synset_id="77")

    result = manager.add_to_list([entry], 12)

    assert result.corrected == [entry]
    (persisted, list_id), = api.saved
    assert list_id == 12
    assert persisted[0]["word"] == "grammar"
    assert persisted[0]["synsetid"] == "77"
    assert persisted[0]["example"]["source"]["name"] == "Style guide"
    assert "grammer corrected to grammar" in capsys.readouterr().out


def test_add_several_words_saves_merged_words():
    service = FakeService(grab=grab_of(["spelling", "grammar"], not_found=["xyzzy"]))
    manager, api = _manager(service, AnnotationMode.COMMENT)
    entries = [
        WordEntry("speling", description="d1"),
        WordEntry("xyzzy"),
        WordEntry("gramma"),
    ]

    result = manager.add_to_list(entries, "5")

    assert result.not_found == ["xyzzy"]
    (persisted, _), = api.saved
    assert [p["word"] for p in persisted] == ["spelling", "grammar"]
    assert persisted[0]["description"].startswith("d1\nAdded on ")
    assert persisted[1]["description"].startswith("Added on ")


def test_add_nothing_found_saves_nothing(capsys):
    service = FakeService(grab=grab_of([], not_found=["xyzzy", "plugh"]))
    manager, api = _manager(service)

    result = manager.add_to_list([WordEntry("xyzzy"), WordEntry("plugh")], 1)

    assert result.words == []
    assert api.saved == []
    assert "No words left" in capsys.readouterr().out


def test_add_empty_list_saves_nothing():
    manager, api = _manager(FakeService())
    assert manager.add_to_list([], 1).words == []
    assert api.saved == []


def test_add_single_word_without_suggestions_raises():
    manager, api = _manager(FakeService())
    with pytest.raises(NoSuggestionsFound):
        manager.add_to_list([WordEntry("xyzzy")], 1)
    assert api.saved == []


def test_add_reports_list_name(capsys):
    service = FakeService(suggestions={"zilch": ["zilch"]})
    manager, api = _manager(service)
    api.names["3"] = "In The Wild"

    manager.add_to_list([WordEntry("zilch")], 3)

    assert "In The Wild" in capsys.readouterr().out


def test_add_to_new_list_does_not_correct():
    service = FakeService()
    manager, api = _manager(service)

    manager.add_to_new_list([WordEntry("speling")], "Mine", "desc", shared=True)

    (persisted, name, description, shared), = api.created
    assert persisted == [{"word": "speling", "lang": "en"}]
    assert (name, description, shared) == ("Mine", "desc", True)
    assert service.grabs == [] and service.lookups == []


def test_to_persisted_uses_one_clock():
    manager, _ = _manager(FakeService(), AnnotationMode.COMMENT)
    now = datetime(2018, 6, 6, 14, 8)
    persisted = manager.to_persisted([WordEntry("a"), WordEntry("b")], now)
    assert {p["description"] for p in persisted} == {"Added on Wednesday 6 June 2018 at 14:08."}


def test_set_annotation_mode(capsys):
    manager, _ = _manager(FakeService())
    manager.set_annotation_mode("comment")
    assert manager.annotation_mode is AnnotationMode.COMMENT
    with pytest.raises(ValueError):
        manager.set_annotation_mode("footnote")


def test_default_corrector_uses_api():
    class API(RecordingAPI):
        def autocomplete(self, term):
            return []

        def grab_words(self, text):
            return grab_of([])

    api = API()
    manager = ListManager(api)
    assert manager.corrector.lookup == api.autocomplete
    assert manager.corrector.grab == api.grab_words
