"""
SMACK user store
User name -> label bindings with file load/save
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional
import structlog

from .exceptions import SmackError
from .fileio import PathLike, parse_file, write_lines
from .utils.validators import validate_label

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UserBinding:
    """Label assigned to a user"""
    user: str
    label: str

    def to_line(self) -> str:
        return f"{self.user} {self.label}\n"


def _update_user(users: Dict[str, str], user: str, label: str) -> None:
    # User names are unbounded; only the label is checked
    users[user] = validate_label(label)


class SmackUsers:
    """Set of user -> label bindings, one label per user"""

    def __init__(self):
        self._users: Dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[UserBinding]:
        for user, label in self._users.items():
            yield UserBinding(user, label)

    def __contains__(self, user: str) -> bool:
        return user in self._users

    def add_user(self, user: str, label: str) -> None:
        """
        Bind a user to a label, replacing any previous binding.

        Raises:
            LabelRangeError: If the label exceeds SMACK64_LEN bytes
        """
        _update_user(self._users, user, label)
        logger.debug("Added user", user=user, label=label)

    def get_label(self, user: str) -> Optional[str]:
        """Label bound to user, or None"""
        return self._users.get(user)

    def read_from_file(self, path: PathLike) -> None:
        """
        Replace the bindings with those read from a file of "user label"
        lines. On any error the current bindings are left untouched.

        Raises:
            SmackIOError: If the file cannot be opened or read
            SmackParseError: On a malformed line or overflowing label
        """
        users: Dict[str, str] = {}

        def handle_record(fields: List[str]) -> None:
            user, label = fields
            _update_user(users, user, label)

        try:
            lines = parse_file(path, 2, handle_record)
        except SmackError as e:
            logger.warning("Failed to load users", path=str(path), error=str(e))
            raise

        self._users = users
        logger.info("Loaded users", path=str(path), lines=lines, users=len(users))

    def write_to_file(self, path: PathLike) -> None:
        """Write all bindings to a file, replacing its contents"""
        count = write_lines(path, (binding.to_line() for binding in self))
        logger.info("Saved users", path=str(path), count=count)

    def destroy(self) -> None:
        """Release all bindings"""
        self._users.clear()
