from dataclasses import dataclass
from enum import Enum
from typing import Any


class OracleFailurePolicy(str, Enum):
    ABORT = "abort"
    SKIP = "skip"


@dataclass(frozen=True)
class BatchSummary:
    source_label: str
    lines_read: int
    queried_count: int
    short_circuit_count: int
    available_count: int
    failed_count: int
    duration_ms: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_label": self.source_label,
            "lines_read": self.lines_read,
            "queried_count": self.queried_count,
            "short_circuit_count": self.short_circuit_count,
            "available_count": self.available_count,
            "failed_count": self.failed_count,
            "duration_ms": self.duration_ms,
        }


@dataclass(frozen=True)
class LookupResult:
    name: str
    canonical_name: str
    available: bool
    message: str
