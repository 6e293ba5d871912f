"""Tests for configuration, logging setup and the error hierarchy."""

from __future__ import annotations

import pytest

from pysmack.config import SmackConfig, get_smack_config, update_smack_config
from pysmack.exceptions import LabelRangeError, SmackError
from pysmack.logging_setup import configure_logging


def test_defaults() -> None:
    config = SmackConfig()

    assert config.xattr_name == "security.SMACK64"
    assert config.proc_attr_path == "/proc/{pid}/attr/current"
    assert config.strict_rule_labels is True


def test_environment_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SMACK_STRICT_RULE_LABELS", "false")
    monkeypatch.setenv("SMACK_XATTR_NAME", "security.SMACK64EXEC")

    config = SmackConfig()

    assert config.strict_rule_labels is False
    assert config.xattr_name == "security.SMACK64EXEC"


def test_update_config_ignores_unknown_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    config = get_smack_config()
    monkeypatch.setattr(config, "log_level", config.log_level)

    updated = update_smack_config(log_level="DEBUG", not_a_setting=1)

    assert updated is config
    assert config.log_level == "DEBUG"
    assert not hasattr(config, "not_a_setting")


def test_configure_logging_accepts_level() -> None:
    configure_logging("warning")


def test_error_to_dict() -> None:
    error = LabelRangeError("L" * 24, field="object")

    assert isinstance(error, SmackError)
    data = error.to_dict()
    assert data["error"] == "LABEL_RANGE"
    assert data["details"]["field"] == "object"
    assert data["details"]["max_length"] == 23
