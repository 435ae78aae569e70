"""
Unofficial client for vocabulary.com.

Uses the site's JSON endpoints where they exist and falls back on its HTML
fragments for autocomplete. Every method issues its requests one after the
other and either returns a complete result or raises; nothing is retried.

Endpoints:
- Autocomplete: word suggestions and the learnable meanings of a word
- Vocab grabber: canonical vocabulary found in a piece of text
- Lists: list the user's lists, load, save, create and delete them
- Progress: learning progress, priority, start learning
"""

import json
from typing import Any, Dict, List, Optional

from ..config import ENDPOINTS, DEFAULT_LIST_SORT
from ..errors import NotLearnableError
from ..models import GrabResult, Suggestion, WordProgress
from ..utils.cache import cache_get, cache_set
from ..utils.list_cache import ListNameCache
from .http import VocabularyHTTP, handle_response
from .parsers import parse_autocomplete


class VocabularyAPI:
    """
    Client for one vocabulary.com session.

    Args:
        http: Transport to use (a fresh VocabularyHTTP by default)
        use_cache: Cache autocomplete suggestions on disk
    """

    def __init__(self, http: Optional[VocabularyHTTP] = None, use_cache: bool = False):
        self.http = http if http is not None else VocabularyHTTP()
        self.use_cache = use_cache
        self.list_names = ListNameCache()

    # =========================================================================
    # DICTIONARY
    # =========================================================================

    def autocomplete(self, search_term: str) -> List[Suggestion]:
        """
        Possible words for a search term, one suggestion per meaning.
        """
        cache_key = f"autocomplete_v1_{search_term}"
        if self.use_cache:
            cached = cache_get(cache_key)
            if cached is not None:
                return [Suggestion.from_dict(s) for s in cached]

        resp = self.http.get(
            ENDPOINTS['autocomplete'],
            referer=ENDPOINTS['dictionary'],
            params={'search': search_term},
        )
        suggestions = parse_autocomplete(handle_response(resp))

        if self.use_cache and suggestions:
            cache_set(cache_key, [s.to_dict() for s in suggestions])
        return suggestions

    def get_meanings(self, word: str) -> List[Suggestion]:
        """Learnable meanings of one specific word."""
        return self.autocomplete(f'word:"{word}"')

    def grab_words(self, text: str) -> GrabResult:
        """
        Extract the vocabulary.com words found in a text.

        Not-learnable words are reported in ``not_learnable`` and are still
        part of ``words``.
        """
        resp = self.http.post(
            ENDPOINTS['grab'],
            referer='',
            data={'text': text},
        )
        return GrabResult.from_dict(handle_response(resp, as_json=True) or {})

    # =========================================================================
    # LISTS
    # =========================================================================

    def get_lists(self, sort_by: str = DEFAULT_LIST_SORT) -> List[Dict[str, Any]]:
        """
        Word lists owned by the user, highest ``sort_by`` value first.

        Also records every list's name for get_list_name().
        """
        resp = self.http.get(ENDPOINTS['lists_by_profile'], referer=ENDPOINTS['dictionary'])
        data = handle_response(resp, as_json=True)

        wordlists = data.get('result', {}).get('wordlists', [])
        owned = [wl for wl in wordlists if wl.get('owner')]
        # Lists without a value for the sort key go last, in their original order
        with_key = [wl for wl in owned if wl.get(sort_by) not in (None, '')]
        without_key = [wl for wl in owned if wl.get(sort_by) in (None, '')]
        with_key.sort(key=lambda wl: wl[sort_by], reverse=True)
        owned = with_key + without_key

        for wl in owned:
            self.list_names.remember(wl['wordlistid'], wl.get('name', ''))
        return owned

    def get_list_name(self, list_id: Any) -> str:
        """
        Name of a list seen by get_lists().

        Raises:
            ListNameNotCached: the list has not been fetched yet
        """
        return self.list_names.get(list_id)

    def get_list_name_or_none(self, list_id: Any) -> Optional[str]:
        return self.list_names.get_or_none(list_id)

    def get_list(self, list_id: Any) -> Any:
        """Load a list with its words, definitions and annotations."""
        resp = self.http.post(
            ENDPOINTS['list_load'],
            referer=ENDPOINTS['dictionary'],
            data={'id': list_id},
        )
        return handle_response(resp, as_json=True)

    def save_words(self, persisted_words: List[Dict], list_id: Any) -> Dict[str, Any]:
        """
        Add words, already in the service's format, to an existing list.

        Returns:
            {"status": HTTP status, "response": body text}
        """
        referer = ENDPOINTS['dictionary']
        if persisted_words:
            referer = f"{ENDPOINTS['dictionary']}/{persisted_words[0]['word']}"

        resp = self.http.post(
            ENDPOINTS['list_save'],
            referer=referer,
            data={
                'addwords': json.dumps(persisted_words),
                'id': list_id,
            },
        )
        return {'status': resp.status_code, 'response': handle_response(resp)}

    def create_list(self, persisted_words: List[Dict], name: str,
                    description: str = "", shared: bool = False) -> Any:
        """Create a new list holding the given words."""
        wordlist = {
            'words': persisted_words,
            'name': name,
            'description': description,
            'action': 'create',
            'shared': shared,
        }
        resp = self.http.post(
            ENDPOINTS['list_save'],
            referer=ENDPOINTS['vocabgrabber'],
            data={'wordlist': json.dumps(wordlist)},
        )
        return handle_response(resp, as_json=True)

    def delete_list(self, list_id: Any) -> str:
        resp = self.http.post(
            ENDPOINTS['list_delete'],
            referer=f"/lists/{list_id}/edit",
            data={'id': list_id},
        )
        return handle_response(resp)

    # =========================================================================
    # PROGRESS
    # =========================================================================

    def progress(self, word: str) -> WordProgress:
        """
        Learning progress of a word.

        Raises:
            NotLearnableError: the service does not teach this word
        """
        resp = self.http.post(
            ENDPOINTS['progress'],
            referer=f"{ENDPOINTS['dictionary']}/{word}",
            data={'word': word},
        )
        data = handle_response(resp, as_json=True)
        if data.get('lrn') is False:
            raise NotLearnableError(word)
        return WordProgress.from_dict(data)

    def set_priority(self, word: str, priority: int) -> str:
        """
        Set the learning priority of a word.

        Args:
            priority: -1 for low priority, 0 for automatic, 1 for high
        """
        resp = self.http.post(
            ENDPOINTS['set_priority'],
            referer=f"{ENDPOINTS['dictionary']}/{word}",
            data={'word': word, 'priority': priority},
        )
        return handle_response(resp)

    def start_learning(self, word: str) -> str:
        resp = self.http.post(
            ENDPOINTS['start_learning'],
            referer=f"{ENDPOINTS['dictionary']}/{word}",
            data={'word': word},
        )
        return handle_response(resp)
