"""
Maps word entries to the shape vocabulary.com stores in a word list.

The date a word was added is recorded in one of two ways:
- comment: appended to the word's description as a readable sentence
- src-lit: attached to the example sentence as a "LIT" source citation,
  which the service displays under the example in the list
"""

from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Union

from ..config import LIT_SOURCE_ID, UNTITLED_SOURCE, WORD_LANGUAGE
from ..models import WordEntry


class AnnotationMode(Enum):
    """How the date a word was added is stored."""
    COMMENT = "comment"
    SRC_LIT = "src-lit"


DAYS = ['Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday']
MONTHS = ['January', 'February', 'March', 'April', 'May', 'June', 'July',
          'August', 'September', 'October', 'November', 'December']


def format_added_date(now: datetime) -> str:
    """e.g. 'Wednesday 6 June 2018 at 14:08.'"""
    return (f"{DAYS[now.weekday()]} {now.day} {MONTHS[now.month - 1]} "
            f"{now.year} at {now.hour:02d}:{now.minute:02d}.")


def to_persisted_form(entry: WordEntry,
                      mode: Union[AnnotationMode, str] = AnnotationMode.SRC_LIT,
                      now: Optional[datetime] = None) -> Dict:
    """
    Convert a word entry to the service's list word format.

    Args:
        entry: Word to convert
        mode: Annotation mode (enum or its string value)
        now: Time of adding; defaults to the current local time

    Returns:
        Dict with word, lang and optionally description, example, synsetid
    """
    mode = AnnotationMode(mode)
    now = now or datetime.now()

    persisted = {
        "word": entry.word,
        "lang": WORD_LANGUAGE,
    }
    if entry.description:
        persisted["description"] = entry.description

    example_text = entry.example or entry.sentence
    if example_text:
        persisted["example"] = {"text": example_text}

    if mode == AnnotationMode.COMMENT:
        date_string = format_added_date(now)
        if entry.location:
            annotation = f"Added from URL: {entry.location} on {date_string}"
        else:
            annotation = f"Added on {date_string}"

        if entry.description:
            persisted["description"] = entry.description + "\n" + annotation
        else:
            persisted["description"] = annotation

    elif example_text:
        persisted["example"]["source"] = {
            "id": LIT_SOURCE_ID,
            "date": now.strftime("%Y%m%d"),
            "name": entry.title or UNTITLED_SOURCE,
        }

    if entry.synset_id:
        persisted["synsetid"] = entry.synset_id

    return persisted
