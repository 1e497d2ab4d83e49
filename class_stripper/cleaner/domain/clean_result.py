"""
CleanResult - outcome of a clean() call.

Exactly one of a successful html payload or an error is meaningful: a failed
result always carries an empty html string.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .exceptions import CleanerError
from .statistics import CleaningStatistics


@dataclass(frozen=True)
class CleanResult:
    html: str
    statistics: Optional[CleaningStatistics] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(
        cls, html: str, statistics: Optional[CleaningStatistics]
    ) -> "CleanResult":
        return cls(html=html, statistics=statistics)

    @classmethod
    def failure(
        cls, error: CleanerError, statistics: Optional[CleaningStatistics] = None
    ) -> "CleanResult":
        """Build a failed result; *statistics* holds whatever was tracked so far."""
        return cls(
            html="",
            statistics=statistics,
            error=error.message,
            error_code=error.error_code,
        )

    def to_dict(self, camel_case: bool = False) -> Dict[str, Any]:
        return {
            "html": self.html,
            "statistics": (
                self.statistics.to_dict(camel_case=camel_case)
                if self.statistics is not None
                else None
            ),
            "error": self.error,
            "error_code": self.error_code,
        }
