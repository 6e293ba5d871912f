"""
SMACK rule store
In-memory subject -> object -> access rules with file load/save
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Union
import structlog

from .access import Access, decode_access, encode_access, to_access
from .config import get_smack_config
from .constants import SMACK64_LEN, SMACK_ACC_LEN, RuleFormat
from .exceptions import LabelRangeError, SmackError
from .fileio import PathLike, parse_file, write_lines
from .utils.validators import is_label_too_long, validate_label

logger = structlog.get_logger(__name__)

Subjects = Dict[str, Dict[str, Access]]


@dataclass(frozen=True)
class Rule:
    """Single access rule"""
    subject: str
    object: str
    access: Access

    def to_line(self, fmt: RuleFormat = RuleFormat.CONFIG) -> str:
        """Render as one line of a rule file"""
        access = encode_access(self.access, fmt)
        if RuleFormat(fmt) == RuleFormat.KERNEL:
            return (f"{self.subject:<{SMACK64_LEN}} "
                    f"{self.object:<{SMACK64_LEN}} {access:>{SMACK_ACC_LEN}}\n")
        # An empty mask still needs a third field to be read back
        return f"{self.subject} {self.object} {access or '-'}\n"


def _check_rule_labels(subject: str, object: str) -> None:
    if get_smack_config().strict_rule_labels:
        validate_label(subject, "subject")
        validate_label(object, "object")
    elif is_label_too_long(subject) and is_label_too_long(object):
        # Lenient mode only rejects when both labels overflow
        raise LabelRangeError(subject, field="subject", max_length=SMACK64_LEN)


def _update_rule(subjects: Subjects, subject: str, object: str, access: Access) -> None:
    _check_rule_labels(subject, object)
    subjects.setdefault(subject, {})[object] = access


class SmackRules:
    """
    Set of SMACK access rules.

    At most one rule exists per (subject, object) pair; adding a rule for
    an existing pair replaces its access bits.
    """

    def __init__(self):
        self._subjects: Subjects = {}

    def __len__(self) -> int:
        return sum(len(objects) for objects in self._subjects.values())

    def __iter__(self) -> Iterator[Rule]:
        for subject, objects in self._subjects.items():
            for object, access in objects.items():
                yield Rule(subject, object, access)

    def __contains__(self, key: Tuple[str, str]) -> bool:
        subject, object = key
        return object in self._subjects.get(subject, {})

    def subjects(self) -> List[str]:
        """Subject labels, including subjects left without rules"""
        return list(self._subjects)

    def objects(self, subject: str) -> List[str]:
        """Object labels the subject has rules for"""
        return list(self._subjects.get(subject, {}))

    def add_rule(self, subject: str, object: str, access: Union[str, Access, int]) -> None:
        """
        Add or replace a rule.

        Args:
            subject: Subject label
            object: Object label
            access: Access text such as "rwx", or Access bits

        Raises:
            LabelRangeError: If a label exceeds SMACK64_LEN bytes
        """
        access = to_access(access)
        _update_rule(self._subjects, subject, object, access)
        logger.debug("Added rule", subject=subject, object=object,
                     access=encode_access(access))

    def remove_rule(self, subject: str, object: str) -> None:
        """Remove one rule; the subject entry is kept even if emptied"""
        objects = self._subjects.get(subject)
        if objects is None or object not in objects:
            return
        del objects[object]
        logger.debug("Removed rule", subject=subject, object=object)

    def remove_rules_by_subject(self, subject: str) -> None:
        """Remove every rule of a subject, leaving the empty subject entry"""
        objects = self._subjects.get(subject)
        if objects is None:
            return
        count = len(objects)
        objects.clear()
        logger.debug("Removed rules by subject", subject=subject, count=count)

    def remove_rules_by_object(self, object: str) -> None:
        """Remove the rule for object from every subject"""
        count = 0
        for objects in self._subjects.values():
            if objects.pop(object, None) is not None:
                count += 1
        logger.debug("Removed rules by object", object=object, count=count)

    def get_access(self, subject: str, object: str) -> Optional[Access]:
        """Stored access bits for a pair, or None"""
        return self._subjects.get(subject, {}).get(object)

    def have_access(self, subject: str, object: str, access: Union[str, Access, int]) -> bool:
        """Check whether the rules grant every requested access bit"""
        requested = to_access(access)
        stored = self.get_access(subject, object)
        if stored is None:
            return False
        return stored.allows(requested)

    def read_from_file(self, path: PathLike, subject_filter: Optional[str] = None) -> None:
        """
        Replace the rules with those read from a file.

        Each line holds "subject object access". When subject_filter is
        given only lines for that subject are kept. On any error the
        current rules are left untouched.

        Raises:
            SmackIOError: If the file cannot be opened or read
            SmackParseError: On a malformed line or overflowing label
        """
        subjects: Subjects = {}

        def handle_record(fields: List[str]) -> None:
            subject, object, access = fields
            if subject_filter is not None and subject != subject_filter:
                return
            _update_rule(subjects, subject, object, decode_access(access))

        try:
            lines = parse_file(path, 3, handle_record)
        except SmackError as e:
            logger.warning("Failed to load rules", path=str(path), error=str(e))
            raise

        self._subjects = subjects
        logger.info("Loaded rules", path=str(path), lines=lines,
                    subjects=len(subjects), subject_filter=subject_filter)

    def write_to_file(self, path: PathLike, fmt: RuleFormat = RuleFormat.CONFIG) -> None:
        """
        Write all rules to a file, replacing its contents.

        Args:
            path: Target file
            fmt: RuleFormat.CONFIG for "subject object rx" lines,
                RuleFormat.KERNEL for the fixed-column kernel format

        Raises:
            SmackIOError: If the file cannot be written
        """
        fmt = RuleFormat(fmt)
        count = write_lines(path, (rule.to_line(fmt) for rule in self))
        logger.info("Saved rules", path=str(path), format=fmt.value, count=count)

    def destroy(self) -> None:
        """Release all subjects and their rules"""
        self._subjects.clear()
