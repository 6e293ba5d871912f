"""
pysmack
In-memory SMACK rule and user stores, rule file formats and label accessors
"""

__version__ = "0.1.0"

# Core exports
from .config import SmackConfig, get_smack_config, update_smack_config
from .constants import SMACK64, SMACK64_LEN, RuleFormat
from .exceptions import SmackError, LabelRangeError, SmackParseError, SmackIOError

# Access codec
from .access import Access, decode_access, encode_access

# Stores
from .rules import Rule, SmackRules
from .users import UserBinding, SmackUsers

# Label accessors
from .labels import get_label, set_label, get_label_of_process

from .logging_setup import configure_logging

__all__ = [
    # Config
    "SmackConfig",
    "get_smack_config",
    "update_smack_config",
    "configure_logging",
    
    # Constants
    "SMACK64",
    "SMACK64_LEN",
    "RuleFormat",
    
    # Errors
    "SmackError",
    "LabelRangeError",
    "SmackParseError",
    "SmackIOError",
    
    # Access
    "Access",
    "decode_access",
    "encode_access",
    
    # Stores
    "Rule",
    "SmackRules",
    "UserBinding",
    "SmackUsers",
    
    # Labels
    "get_label",
    "set_label",
    "get_label_of_process",
]
