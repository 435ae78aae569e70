"""
Word correction against vocabulary.com's vocabulary.

Two strategies:
- Single word: ask the autocomplete lookup for candidates and keep the most
  similar one. Precise, one request per word.
- Word list: send the whole list to the vocab grabber in one request and
  line its answer up with the input, in order.

The grabber tokenizes the text itself. Alignment assumes that, once the
not-found words are removed, its words match the input one to one and in
the same order. When the grabber splits or merges words the alignment
drifts, and input left over after the grabber's words run out is dropped.
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence

from ..config import SIMILARITY_THRESHOLD
from ..errors import NoSuggestionsFound
from ..models import GrabResult, MergedWord, ReconciliationResult, Suggestion, WordEntry
from .similarity import best_match

SuggestionLookup = Callable[[str], List[Suggestion]]
GrabEndpoint = Callable[[str], GrabResult]


@dataclass
class WordCorrector:
    """
    Corrects free-text words to their closest vocabulary.com word.

    Args:
        lookup: Returns autocomplete suggestions for a search term
        grab: Returns the words the vocab grabber finds in a text
        threshold: Minimum similarity (exclusive) for a suggestion to count
    """

    lookup: SuggestionLookup
    grab: GrabEndpoint
    threshold: float = SIMILARITY_THRESHOLD

    @classmethod
    def from_api(cls, api, threshold: float = SIMILARITY_THRESHOLD) -> 'WordCorrector':
        """Build a corrector backed by a VocabularyAPI."""
        return cls(lookup=api.autocomplete, grab=api.grab_words, threshold=threshold)

    def correct_word(self, word: str) -> str:
        """
        Correct a word with the nearest word known to vocabulary.com.

        Returns the word unchanged when no suggestion is similar enough.

        Raises:
            NoSuggestionsFound: the lookup returned no suggestions at all
        """
        suggestions = self.lookup(word)
        if not suggestions:
            raise NoSuggestionsFound(word)
        return best_match([s.word for s in suggestions], word, self.threshold)

    def reconcile(self, entries: Sequence[WordEntry]) -> ReconciliationResult:
        """
        Align a list of word entries with vocabulary.com's canonical words.

        Each surviving entry becomes a MergedWord: the canonical word with
        the entry's description and example. Entries whose text differed
        from their canonical word are reported in ``corrected``.
        """
        if not entries:
            return ReconciliationResult()

        if len(entries) == 1:
            return self._reconcile_single(entries[0])

        grabbed = self.grab(", ".join(entry.word for entry in entries))
        not_found = set(grabbed.not_found)

        merged: List[MergedWord] = []
        corrected: List[WordEntry] = []
        result_index = 0
        for original in entries:
            if result_index >= len(grabbed.words):
                break
            if original.word in not_found:
                continue

            canonical = grabbed.words[result_index].word
            merged.append(_merge(original, canonical))
            if original.word != canonical:
                corrected.append(original)
            result_index += 1

        return ReconciliationResult(
            words=merged,
            not_found=list(grabbed.not_found),
            not_learnable=list(grabbed.not_learnable),
            corrected=corrected,
        )

    # Same operation under the name the list endpoints use
    correct_words = reconcile

    def _reconcile_single(self, entry: WordEntry) -> ReconciliationResult:
        word = self.correct_word(entry.word)
        return ReconciliationResult(
            words=[_merge(entry, word)],
            corrected=[entry] if word != entry.word else [],
        )


def _merge(original: WordEntry, canonical: str) -> MergedWord:
    return MergedWord(
        word=canonical,
        description=original.description,
        example=original.example,
    )
