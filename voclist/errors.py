"""
Exceptions raised by the vocabulary.com client and the correction engine.

Transport errors from requests (timeouts, connection failures) are not
wrapped; they reach the caller as ``requests.RequestException``.
"""

from typing import Any, Optional


class VocabularyError(Exception):
    """Base class for all VocList errors."""


class NoSuggestionsFound(VocabularyError):
    """Raised when the autocomplete lookup has no candidates for a word."""
    def __init__(self, word: str):
        super().__init__(f"'{word}' not found in Vocabulary.com")
        self.word = word


# Older name, kept for callers that catch it
NotFoundError = NoSuggestionsFound


class APIResponseError(VocabularyError):
    """Raised when the service answers with a non-200 status."""
    def __init__(self, status: int, body: Any = None, url: Optional[str] = None):
        message = f"HTTP {status}"
        if url:
            message += f" from {url}"
        super().__init__(message)
        self.status = status
        self.body = body
        self.url = url


class NotLearnableError(VocabularyError):
    """Raised when progress is requested for a word that cannot be learned."""
    def __init__(self, word: str):
        super().__init__(f"'{word}' is not learnable")
        self.word = word


class ListNameNotCached(VocabularyError, KeyError):
    """Raised when a list id has not been seen by get_lists() yet."""
    def __init__(self, list_id: Any):
        super().__init__(f"Name of list {list_id} not found in cache")
        self.list_id = list_id

    def __str__(self) -> str:
        return self.args[0]
