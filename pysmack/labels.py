"""
SMACK label accessors
Read and write the label of a path through its extended attribute,
and read the label of a running process from /proc
"""

import os
import structlog

from .config import get_smack_config
from .exceptions import SmackIOError
from .fileio import PathLike
from .utils.validators import validate_label

logger = structlog.get_logger(__name__)


def get_label(path: PathLike, follow_symlinks: bool = True) -> str:
    """
    Read the SMACK label of a path.

    Args:
        path: File to inspect
        follow_symlinks: When False, read the label of a symlink itself

    Raises:
        SmackIOError: If the attribute is missing or cannot be read
    """
    path = os.fspath(path)
    attribute = get_smack_config().xattr_name
    try:
        value = os.getxattr(path, attribute, follow_symlinks=follow_symlinks)
    except OSError as e:
        raise SmackIOError.from_os_error(path, f"read {attribute} of", e) from e
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SmackIOError(path, f"read {attribute} of", reason="label is not valid UTF-8") from e


def set_label(path: PathLike, label: str, follow_symlinks: bool = True) -> None:
    """
    Set the SMACK label of a path.

    Raises:
        LabelRangeError: If the label exceeds SMACK64_LEN bytes
        SmackIOError: If the attribute cannot be written
    """
    validate_label(label)
    path = os.fspath(path)
    attribute = get_smack_config().xattr_name
    try:
        os.setxattr(path, attribute, label.encode("utf-8"),
                    follow_symlinks=follow_symlinks)
    except OSError as e:
        logger.error("Failed to set label", path=path, label=label, error=str(e))
        raise SmackIOError.from_os_error(path, f"write {attribute} of", e) from e
    logger.debug("Set label", path=path, label=label)


def get_label_of_process(pid: int) -> str:
    """
    Read the SMACK label of a running process.

    Raises:
        SmackIOError: If the process attribute file cannot be read
    """
    path = get_smack_config().proc_attr_path.format(pid=pid)
    try:
        with open(path, "r", encoding="utf-8") as handle:
            line = handle.readline()
    except OSError as e:
        raise SmackIOError.from_os_error(path, "read", e) from e
    except UnicodeDecodeError as e:
        raise SmackIOError(path, "read", reason="label is not valid UTF-8") from e

    if not line:
        raise SmackIOError(path, "read", reason="empty label")
    return line.rstrip("\n\x00")
