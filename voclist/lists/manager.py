"""
Adding words to vocabulary.com lists.

Words are corrected against the service's vocabulary before they are saved,
so a misspelled word ends up in the list under its real spelling.
"""

from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from ..api.client import VocabularyAPI
from ..config import DEFAULT_ANNOTATION_MODE
from ..correction.corrector import WordCorrector
from ..models import ReconciliationResult, WordEntry
from .mapper import AnnotationMode, to_persisted_form


class ListManager:
    """
    Corrects, formats and saves words to the user's lists.

    Args:
        api: Client used for the requests
        corrector: Word corrector (defaults to one backed by ``api``)
        annotation_mode: How the date a word was added is recorded
    """

    def __init__(self, api: VocabularyAPI, corrector: Optional[WordCorrector] = None,
                 annotation_mode: Union[AnnotationMode, str] = DEFAULT_ANNOTATION_MODE):
        self.api = api
        self.corrector = corrector or WordCorrector.from_api(api)
        self.annotation_mode = AnnotationMode(annotation_mode)

    def set_annotation_mode(self, mode: Union[AnnotationMode, str]):
        """Set the annotation mode."""
        self.annotation_mode = AnnotationMode(mode)
        print(f"📝 Annotation mode set to: {self.annotation_mode.value}")

    def to_persisted(self, entries: Sequence[WordEntry],
                     now: Optional[datetime] = None) -> List[Dict]:
        """Format entries for the service with the current annotation mode."""
        now = now or datetime.now()
        return [to_persisted_form(e, self.annotation_mode, now) for e in entries]

    def add_to_list(self, entries: Sequence[WordEntry], list_id: Any) -> ReconciliationResult:
        """
        Correct words and add them to an existing list.

        A single word is corrected through autocomplete and keeps all of its
        annotations. Several words go through the vocab grabber in one
        request and keep their description and example.

        Returns:
            The reconciliation, telling which words were corrected, not
            found or not learnable

        Raises:
            NoSuggestionsFound: a single word has no suggestions at all
        """
        result = self.corrector.reconcile(entries)
        if not result.words:
            if entries:
                print(f"⚠ No words left to add to list {list_id}")
            return result

        if len(entries) == 1:
            to_save = [replace(entries[0], word=result.words[0].word)]
            if result.corrected:
                print(f"✏️  {entries[0].word} corrected to {to_save[0].word}")
        else:
            to_save = [w.to_entry() for w in result.words]
            if result.corrected:
                print(f"✏️  Corrected: {', '.join(e.word for e in result.corrected)}")
        if result.not_found:
            print(f"⚠ Not found: {', '.join(result.not_found)}")

        self.api.save_words(self.to_persisted(to_save), list_id)

        name = self.api.get_list_name_or_none(list_id) or list_id
        print(f"📋 Added {len(to_save)} word(s) to {name}")
        return result

    def add_to_new_list(self, entries: Sequence[WordEntry], name: str,
                        description: str = "", shared: bool = False) -> Any:
        """Create a list from the given words, as they are."""
        response = self.api.create_list(self.to_persisted(entries), name, description, shared)
        print(f"📋 Created list '{name}' with {len(entries)} word(s)")
        return response
