"""
Configuration management for pysmack
Attribute names, proc paths, label checks and logging settings
"""

from pydantic_settings import BaseSettings
from pydantic import Field

from .constants import SMACK64, SMACK_PROC_PATH


class SmackConfig(BaseSettings):
    """pysmack configuration settings"""
    
    # Label accessors
    xattr_name: str = Field(default=SMACK64, description="Extended attribute holding the label")
    proc_attr_path: str = Field(
        default=SMACK_PROC_PATH,
        description="Template of the per-process label file, formatted with pid"
    )
    
    # Rule store
    strict_rule_labels: bool = Field(
        default=True,
        description="Reject a rule when either label is too long (False: only when both are)"
    )
    
    # Rule and user files
    file_encoding: str = Field(default="utf-8")
    
    # Environment-specific overrides
    log_level: str = Field(default="INFO")
    
    model_config = {"env_prefix": "SMACK_", "case_sensitive": False}


# Global configuration instance
smack_config = SmackConfig()


def get_smack_config() -> SmackConfig:
    """Get the global configuration instance"""
    return smack_config


def update_smack_config(**kwargs) -> SmackConfig:
    """Update configuration with new values"""
    global smack_config
    for key, value in kwargs.items():
        if hasattr(smack_config, key):
            setattr(smack_config, key, value)
    return smack_config
