"""
Word list formatting and saving.
"""

from .mapper import AnnotationMode, to_persisted_form, format_added_date
from .manager import ListManager

__all__ = ['AnnotationMode', 'to_persisted_form', 'format_added_date', 'ListManager']
