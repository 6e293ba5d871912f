"""
Custom Exceptions for pysmack

Provides a unified exception hierarchy for label validation,
rule/user file parsing and the underlying file and attribute I/O.
"""

from typing import Optional, Dict, Any


class SmackError(Exception):
    """
    Base exception for all pysmack errors.
    
    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        details: Additional context about the error
    """
    
    def __init__(
        self,
        message: str,
        error_code: str = "SMACK_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for reporting"""
        result: Dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# LABEL ERRORS
# =============================================================================

class LabelRangeError(SmackError, ValueError):
    """Raised when a label exceeds the SMACK64 length limit"""
    
    def __init__(
        self,
        label: str,
        field: Optional[str] = None,
        max_length: int = 23
    ):
        details: Dict[str, Any] = {"label": label, "max_length": max_length}
        if field:
            details["field"] = field
        super().__init__(
            message=f"Label exceeds {max_length} bytes: {label!r}",
            error_code="LABEL_RANGE",
            details=details
        )
        self.label = label


# =============================================================================
# FILE ERRORS
# =============================================================================

class SmackParseError(SmackError):
    """Raised when a rule or user file contains a malformed record"""
    
    def __init__(
        self,
        path: str,
        reason: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None
    ):
        details: Dict[str, Any] = {"path": path, "reason": reason}
        if line_number is not None:
            details["line_number"] = line_number
        if line is not None:
            details["line"] = line
        location = f"{path}:{line_number}" if line_number is not None else path
        super().__init__(
            message=f"Parse error in {location}: {reason}",
            error_code="PARSE_ERROR",
            details=details
        )
        self.path = path
        self.line_number = line_number


class SmackIOError(SmackError):
    """Raised when a file, proc entry or extended attribute cannot be accessed"""
    
    def __init__(
        self,
        path: str,
        operation: str,
        errno: Optional[int] = None,
        reason: Optional[str] = None
    ):
        details: Dict[str, Any] = {"path": path, "operation": operation}
        if errno is not None:
            details["errno"] = errno
        if reason:
            details["reason"] = reason
        message = f"Failed to {operation} {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, "IO_ERROR", details)
        self.path = path
        self.errno = errno
    
    @classmethod
    def from_os_error(cls, path: str, operation: str, exc: OSError) -> "SmackIOError":
        """Build from an OSError raised by the underlying call"""
        return cls(path, operation, errno=exc.errno, reason=exc.strerror or str(exc))
