"""
Access-mask codec for pysmack
Conversion between access bits and the compact ("rx") and
kernel ("r-x-") textual dialects
"""

from enum import IntFlag
from typing import Tuple, Union

from .constants import SMACK_ACC_R, SMACK_ACC_W, SMACK_ACC_X, SMACK_ACC_A, RuleFormat


class Access(IntFlag):
    """SMACK access bits"""
    NONE = 0
    READ = SMACK_ACC_R
    WRITE = SMACK_ACC_W
    EXECUTE = SMACK_ACC_X
    APPEND = SMACK_ACC_A  # not adjacent to x; kernel column 4

    def allows(self, requested: Union["Access", int]) -> bool:
        """Check that every requested bit is present"""
        requested = int(requested)
        return (int(self) & requested) == requested


ACCESS_ALL = int(Access.READ | Access.WRITE | Access.EXECUTE | Access.APPEND)

# Column order shared by both dialects
_COLUMNS: Tuple[Tuple[str, Access], ...] = (
    ("r", Access.READ),
    ("w", Access.WRITE),
    ("x", Access.EXECUTE),
    ("a", Access.APPEND),
)

_LETTERS = {letter: bit for letter, bit in _COLUMNS}


def decode_access(text: str) -> Access:
    """Parse access text, ignoring case and unknown characters"""
    access = Access.NONE
    for char in text.lower():
        bit = _LETTERS.get(char)
        if bit is not None:
            access |= bit
    return access


def encode_access(access: Union[Access, int], fmt: RuleFormat = RuleFormat.CONFIG) -> str:
    """
    Render access bits as text.
    
    Args:
        access: Access bits
        fmt: RuleFormat.CONFIG for set letters only, RuleFormat.KERNEL
            for four fixed columns with '-' for unset bits
        
    Returns:
        Encoded access string
    """
    value = int(access)
    fmt = RuleFormat(fmt)
    
    if fmt == RuleFormat.KERNEL:
        return "".join(letter if value & bit else "-" for letter, bit in _COLUMNS)
    
    return "".join(letter for letter, bit in _COLUMNS if value & bit)


def to_access(access: Union[Access, int, str]) -> Access:
    """Accept access as text or bits"""
    if isinstance(access, str):
        return decode_access(access)
    return Access(int(access) & ACCESS_ALL)
