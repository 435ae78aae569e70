"""
HTTP transport for vocabulary.com.

A thin wrapper over requests.Session: it builds URLs from endpoint paths,
sends the Referer header the site's own pages send, and applies the
configured timeout. Responses are turned into values by handle_response().
"""

from typing import Any, Dict, Optional

import requests

from ..config import URLBASE, HTTP_TIMEOUT, USER_AGENT
from ..errors import APIResponseError


class VocabularyHTTP:
    """
    Session-backed request function for one client.

    Cookies set by the service (login, preferences) live in the session, so
    an authenticated ``requests.Session`` can be passed in.
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 urlbase: str = URLBASE, timeout: float = HTTP_TIMEOUT):
        self.session = session if session is not None else requests.Session()
        self.urlbase = urlbase.rstrip('/')
        self.timeout = timeout

        if isinstance(self.session, requests.Session):
            self.session.headers.update({'User-Agent': USER_AGENT})

    def url(self, path: str) -> str:
        """Absolute URL for an endpoint path."""
        return f"{self.urlbase}{path}"

    def request(self, method: str, path: str, referer: Optional[str] = None,
                params: Optional[Dict[str, Any]] = None,
                data: Optional[Dict[str, Any]] = None) -> requests.Response:
        """
        Send a request to the service.

        Args:
            method: 'GET' or 'POST'
            path: Endpoint path, e.g. '/lists/load.json'
            referer: Path of the page the request appears to come from
            params: Query string parameters
            data: Form fields, sent url-encoded

        Raises:
            requests.RequestException: on transport failure (not wrapped)
        """
        headers = {'Referer': self.url(referer) if referer is not None else self.urlbase}
        return self.session.request(
            method,
            self.url(path),
            params=params,
            data=data,
            headers=headers,
            timeout=self.timeout,
        )

    def get(self, path: str, **kwargs) -> requests.Response:
        return self.request('GET', path, **kwargs)

    def post(self, path: str, **kwargs) -> requests.Response:
        return self.request('POST', path, **kwargs)


def handle_response(resp: requests.Response, as_json: bool = False) -> Any:
    """
    Default response handler.

    Returns:
        Parsed JSON body if ``as_json``, otherwise the body text

    Raises:
        APIResponseError: status is anything but 200
    """
    if resp.status_code != 200:
        raise APIResponseError(resp.status_code, resp.text, getattr(resp, 'url', None))
    return resp.json() if as_json else resp.text
