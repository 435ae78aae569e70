import json
import os
import tempfile

import pytest

# Keep the file cache out of the package directory
os.environ.setdefault("VOCLIST_DATA_DIR", tempfile.mkdtemp(prefix="voclist-test-"))

from voclist.api.http import VocabularyHTTP
from voclist.api.client import VocabularyAPI
from voclist.models import CanonicalWord, GrabResult, Suggestion


class FakeResponse:
    def __init__(self, status_code=200, text="", json_data=None, url=""):
        self.status_code = status_code
        self.url = url
        self._json = json_data
        self.text = text if json_data is None else json.dumps(json_data)

    def json(self):
        if self._json is None:
            return json.loads(self.text)
        return self._json


class FakeSession:
    """Answers requests from a queue and records what was sent."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def queue(self, response):
        self.responses.append(response)

    def request(self, method, url, params=None, data=None, headers=None, timeout=None):
        self.calls.append({
            'method': method,
            'url': url,
            'params': params,
            'data': data,
            'headers': headers,
            'timeout': timeout,
        })
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        response.url = url
        return response


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def api(session):
    return VocabularyAPI(http=VocabularyHTTP(session=session, urlbase="https://voc.test"))


class FakeService:
    """Stands in for the autocomplete lookup and the vocab grabber."""

    def __init__(self, suggestions=None, grab=None):
        self.suggestions = suggestions or {}
        self.grab_result = grab or GrabResult()
        self.lookups = []
        self.grabs = []

    def lookup(self, term):
        self.lookups.append(term)
        return [Suggestion(word=w) for w in self.suggestions.get(term, [])]

    def grab(self, text):
        self.grabs.append(text)
        return self.grab_result


def grab_of(words, not_found=(), not_learnable=()):
    return GrabResult(
        words=[CanonicalWord(word=w, definition=f"meaning of {w}") for w in words],
        not_found=list(not_found),
        not_learnable=list(not_learnable),
    )


@pytest.fixture
def service():
    return FakeService()
