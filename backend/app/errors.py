"""
Error types raised by the analytics engine.

Range errors are caller-input faults: the API layer reports them as 400s with
the offending field. ``InternalConsistencyFault`` means malformed data got past
upstream validation and the computation was aborted.
"""

from typing import Any, Dict, Optional


class AnalyticsError(Exception):
    """Base class for analytics errors."""

    code = "analytics_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


class InvalidRange(AnalyticsError):
    """A date range could not be resolved from the query parameters."""

    code = "invalid_range"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def to_detail(self) -> Dict[str, Any]:
        detail = super().to_detail()
        detail["field"] = self.field
        return detail


class InvalidRangeFormat(InvalidRange):
    """Malformed month token or timestamp string."""

    code = "invalid_range_format"


class ConflictingRangeParams(InvalidRange):
    """Month together with from/to, or only one of from/to."""

    code = "conflicting_range_params"


class MissingRangeParams(InvalidRange):
    """Neither a month nor a complete from/to pair where one is required."""

    code = "missing_range_params"


class InvertedRange(InvalidRange):
    """from is after to."""

    code = "inverted_range"


class InternalConsistencyFault(AnalyticsError):
    """An input amount is not a finite decimal."""

    code = "internal_consistency_fault"
