"""
Word correction: similarity scoring and list reconciliation.
"""

from .similarity import similarity, is_similar, best_match
from .corrector import WordCorrector

__all__ = ['similarity', 'is_similar', 'best_match', 'WordCorrector']
