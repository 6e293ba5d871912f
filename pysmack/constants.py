"""
Constants for the pysmack policy store

Access bits, label limits and the kernel-facing names used when
reading or writing SMACK labels.
"""

from enum import Enum
from typing import Final

# =============================================================================
# LABELS
# =============================================================================

SMACK64: Final[str] = "security.SMACK64"
SMACK64_LEN: Final[int] = 23

SMACK_PROC_PATH: Final[str] = "/proc/{pid}/attr/current"

# =============================================================================
# ACCESS BITS
# =============================================================================

SMACK_ACC_R: Final[int] = 1
SMACK_ACC_W: Final[int] = 2
SMACK_ACC_X: Final[int] = 4
SMACK_ACC_A: Final[int] = 16
SMACK_ACC_LEN: Final[int] = 4


class RuleFormat(str, Enum):
    """Textual dialects for rule files"""
    CONFIG = "config"    # "subject object rx"
    KERNEL = "kernel"    # fixed columns, "r-x-"
