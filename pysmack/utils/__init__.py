"""
Utility functions for pysmack
"""

from .validators import label_length, is_label_too_long, validate_label

__all__ = [
    "label_length",
    "is_label_too_long",
    "validate_label",
]
