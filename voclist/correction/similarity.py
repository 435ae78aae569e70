"""
Positional string similarity used to pick the closest vocabulary word.

The score compares characters at the same index only, up to the length of
the shorter word. A shared prefix keeps the score high no matter how the
words end, so inflections line up with their base form:

    similarity('cooks', 'cooking')            -> 0.8
    similarity('pre-eminent', 'pre-eminently') -> 1.0
    similarity('speak', 'spozc')               -> 0.4

A shifted prefix ('xspeak' vs 'speak') scores low.
"""

from typing import Iterable

from ..config import SIMILARITY_THRESHOLD


def similarity(word1: str, word2: str) -> float:
    """
    Score how alike two words are.

    Returns:
        Float between 0 and 1. 1 means one word is a prefix of the other.
    """
    min_len = min(len(word1), len(word2))
    step = 1 / (min_len if min_len else 1)

    score = 1.0
    for i in range(min_len):
        if word1[i] != word2[i]:
            score -= step
    return score


def is_similar(word1: str, word2: str, threshold: float = SIMILARITY_THRESHOLD) -> bool:
    """True if the words score strictly above the threshold."""
    return similarity(word1, word2) > threshold


def best_match(candidates: Iterable[str], word: str,
               threshold: float = SIMILARITY_THRESHOLD) -> str:
    """
    Return the candidate most similar to ``word``.

    Only candidates scoring above ``threshold`` are considered. On a tie the
    earliest candidate wins. Falls back to ``word`` itself when nothing is
    similar enough.
    """
    best_word, best_score = word, 0.0
    for candidate in candidates:
        if not is_similar(candidate, word, threshold):
            continue
        score = similarity(candidate, word)
        if best_score < score:
            best_word, best_score = candidate, score
    return best_word
