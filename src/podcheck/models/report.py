"""
Evaluation report model for podcheck.

A CheckReport accumulates what happened during one evaluation run:
emitted lines, join warnings and per-pod errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from podcheck.errors import JoinWarning


@dataclass
class PodError:
    """A check failure tied to a single pod."""

    namespace: str
    pod: str
    error: str

    def __str__(self) -> str:
        return f"error checking pod {self.namespace}/{self.pod}: {self.error}"


@dataclass
class CheckReport:
    """
    Result of running a check over a pod snapshot.

    Attributes:
        check_name: Name of the check that ran
        lines: Output records in pod order
        join_warnings: Pods skipped because their namespace was unknown
        errors: Pods the check failed on
        pods_seen: Number of pods iterated
        pods_evaluated: Number of pods handed to the check
        duration_seconds: Wall time of the run
    """

    check_name: str
    lines: list[str] = field(default_factory=list)
    join_warnings: list[JoinWarning] = field(default_factory=list)
    errors: list[PodError] = field(default_factory=list)
    pods_seen: int = 0
    pods_evaluated: int = 0
    duration_seconds: float = 0.0

    @property
    def success(self) -> bool:
        """Check if every pod was joined and evaluated without errors."""
        return not self.join_warnings and not self.errors

    @property
    def lines_emitted(self) -> int:
        """Get number of output records."""
        return len(self.lines)

    def summary(self) -> dict[str, Any]:
        """Get run summary."""
        return {
            "check": self.check_name,
            "pods_seen": self.pods_seen,
            "pods_evaluated": self.pods_evaluated,
            "lines_emitted": self.lines_emitted,
            "join_warnings": len(self.join_warnings),
            "errors": len(self.errors),
            "duration_seconds": round(self.duration_seconds, 3),
        }
