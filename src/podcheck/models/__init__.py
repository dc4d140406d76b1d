"""
Data models for podcheck.

- Namespace, Pod, Container: read-only snapshots of cluster objects
- CheckReport, PodError: outcome of one evaluation run
"""

from podcheck.models.report import CheckReport, PodError
from podcheck.models.resources import Container, Namespace, Pod

__all__ = [
    # Resources
    "Container",
    "Namespace",
    "Pod",
    # Report
    "CheckReport",
    "PodError",
]
