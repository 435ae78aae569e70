"""
VocList - vocabulary.com list client

Adds words to vocabulary.com word lists, correcting them first:
1. CORRECT single words through the site's autocomplete
2. RECONCILE word lists with the vocab grabber, keeping each word's notes
3. SAVE them to new or existing lists, annotated with the date added
"""

from .config import VERSION
from .errors import (
    VocabularyError, NoSuggestionsFound, NotFoundError, APIResponseError,
    NotLearnableError, ListNameNotCached,
)
from .models import (
    WordEntry, CanonicalWord, GrabResult, Suggestion, MergedWord,
    ReconciliationResult, WordProgress,
)
from .correction import similarity, is_similar, best_match, WordCorrector
from .api import VocabularyAPI, VocabularyHTTP
from .lists import AnnotationMode, to_persisted_form, ListManager

__version__ = VERSION
__all__ = [
    'VERSION',
    'VocabularyError', 'NoSuggestionsFound', 'NotFoundError', 'APIResponseError',
    'NotLearnableError', 'ListNameNotCached',
    'WordEntry', 'CanonicalWord', 'GrabResult', 'Suggestion', 'MergedWord',
    'ReconciliationResult', 'WordProgress',
    'similarity', 'is_similar', 'best_match', 'WordCorrector',
    'VocabularyAPI', 'VocabularyHTTP',
    'AnnotationMode', 'to_persisted_form', 'ListManager',
]
