"""
Line-oriented load/save protocol shared by the rule and user stores

Loading is strict: every line must carry exactly the expected number of
whitespace-separated fields. Records are handed to a callback that builds
a fresh store; the caller swaps it in only after the whole file parsed.
Saving truncates the target and writes one record per line.
"""

import os
import re
from contextlib import closing
from typing import Callable, Iterable, Iterator, List, Tuple, Union

import structlog

from .config import get_smack_config
from .exceptions import LabelRangeError, SmackIOError, SmackParseError

logger = structlog.get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

# Only ASCII whitespace separates fields; labels may hold other whitespace
ASCII_WHITESPACE = " \t\n\r\f\v"
_FIELD_SEPARATOR = re.compile(r"[ \t\n\r\f\v]+")


def split_fields(line: str) -> List[str]:
    """Split a record on runs of ASCII whitespace"""
    stripped = line.strip(ASCII_WHITESPACE)
    if not stripped:
        return []
    return _FIELD_SEPARATOR.split(stripped)


def iter_records(path: PathLike, arity: int) -> Iterator[Tuple[int, List[str]]]:
    """
    Yield (line_number, fields) for every line of a policy file.
    
    Args:
        path: File to read
        arity: Exact number of fields each line must have
        
    Raises:
        SmackIOError: If the file cannot be opened or read
        SmackParseError: On a line with the wrong number of fields
    """
    path = os.fspath(path)
    encoding = get_smack_config().file_encoding
    
    try:
        handle = open(path, "r", encoding=encoding)
    except OSError as e:
        raise SmackIOError.from_os_error(path, "open", e) from e
    
    with handle:
        line_number = 0
        try:
            for line in handle:
                line_number += 1
                fields = split_fields(line)
                if len(fields) != arity:
                    raise SmackParseError(
                        path,
                        f"expected {arity} fields, got {len(fields)}",
                        line_number=line_number,
                        line=line.rstrip("\n")
                    )
                yield line_number, fields
        except UnicodeDecodeError as e:
            raise SmackParseError(
                path, f"not valid {encoding}", line_number=line_number + 1
            ) from e
        except OSError as e:
            raise SmackIOError.from_os_error(path, "read", e) from e


def parse_file(path: PathLike, arity: int,
               handle_record: Callable[[List[str]], None]) -> int:
    """
    Feed every record of a file to handle_record.
    
    A LabelRangeError raised by the callback aborts the parse and is
    reported as a SmackParseError for that line.
    
    Returns:
        Number of lines read
    """
    count = 0
    with closing(iter_records(path, arity)) as records:
        for line_number, fields in records:
            try:
                handle_record(fields)
            except LabelRangeError as e:
                raise SmackParseError(
                    os.fspath(path), e.message, line_number=line_number
                ) from e
            count = line_number
    return count


def write_lines(path: PathLike, lines: Iterable[str]) -> int:
    """
    Replace the contents of path with lines.
    
    The file is truncated first; if a write fails the partial file is
    left as it is.
    
    Returns:
        Number of lines written
    
    Raises:
        SmackIOError: If the file cannot be created or written
    """
    path = os.fspath(path)
    encoding = get_smack_config().file_encoding
    
    try:
        handle = open(path, "w", encoding=encoding)
    except OSError as e:
        logger.error("Failed to open policy file", path=path, error=str(e))
        raise SmackIOError.from_os_error(path, "open", e) from e
    
    count = 0
    try:
        with handle:
            for line in lines:
                handle.write(line)
                count += 1
    except OSError as e:
        logger.error("Failed to write policy file", path=path, written=count, error=str(e))
        raise SmackIOError.from_os_error(path, "write", e) from e
    
    return count
