"""
Observability for podcheck.

Provides logging for warnings, per-pod errors and run summaries.
"""

from podcheck.observability.logging import (
    HumanReadableFormatter,
    PodcheckLogger,
    StructuredFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "HumanReadableFormatter",
    "PodcheckLogger",
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
]
