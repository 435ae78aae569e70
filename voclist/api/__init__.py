"""
vocabulary.com API access.

- http: session transport and response handling
- parsers: autocomplete HTML parsing
- client: VocabularyAPI, one method per endpoint
"""

from .http import VocabularyHTTP, handle_response
from .parsers import parse_autocomplete
from .client import VocabularyAPI

__all__ = ['VocabularyHTTP', 'handle_response', 'parse_autocomplete', 'VocabularyAPI']
