"""
Parsing of vocabulary.com's autocomplete HTML fragment.

The autocomplete endpoint answers with a list of meanings, one <li> per
meaning:

    <li lang="en" synsetid="123" word="test" freq="58.08">
      <a><span class="word">test</span><span class="pos">n</span>
         <span class="definition">trying something to find out about it</span></a>
    </li>

The definition is the third element inside the item's first child.
"""

from typing import List

from bs4 import BeautifulSoup, Tag

from ..models import Suggestion


def _to_float(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _definition_of(item: Tag) -> str:
    first = item.find(True)
    if first is None:
        return ""
    children = first.find_all(True, recursive=False)
    if len(children) > 2:
        return children[2].get_text(strip=True)
    fallback = item.find(class_='definition')
    return fallback.get_text(strip=True) if fallback else ""


def parse_autocomplete(html: str) -> List[Suggestion]:
    """
    Extract suggestions from an autocomplete response.

    Items without a word attribute are skipped. An empty or unrelated
    document yields an empty list.
    """
    soup = BeautifulSoup(html or "", "html.parser")

    suggestions = []
    for item in soup.find_all('li'):
        word = item.get('word')
        if not word:
            continue
        suggestions.append(Suggestion(
            word=word,
            definition=_definition_of(item),
            frequency=_to_float(item.get('freq')),
            language=item.get('lang') or 'en',
            meaning_id=item.get('synsetid') or '',
        ))
    return suggestions
