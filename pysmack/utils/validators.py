"""
Label validators for pysmack

SMACK labels are opaque strings; the only constraint enforced here
is the SMACK64 length limit, measured in encoded bytes.
"""

from typing import Any

from ..constants import SMACK64_LEN
from ..exceptions import LabelRangeError


def label_length(label: str) -> int:
    """Length of a label in bytes, as the kernel counts it"""
    return len(label.encode("utf-8"))


def is_label_too_long(label: str) -> bool:
    return label_length(label) > SMACK64_LEN


def validate_label(label: Any, field_name: str = "label") -> str:
    """
    Validate a SMACK label.
    
    Args:
        label: Label to validate
        field_name: Field name for error messages
        
    Returns:
        The label unchanged
        
    Raises:
        TypeError: If the label is not a string
        LabelRangeError: If the label exceeds SMACK64_LEN bytes
    """
    if not isinstance(label, str):
        raise TypeError(f"{field_name} must be a string, not {type(label).__name__}")
    
    if is_label_too_long(label):
        raise LabelRangeError(label, field=field_name, max_length=SMACK64_LEN)
    
    return label
