"""
podcheck - check and filter Kubernetes pods

Reports which pods in a cluster (or in pod/namespace snapshot files) are
eligible for running with isolated user namespaces.

Key Features:
- Read-only: never modifies cluster state
- Works against a live cluster or against `kubectl get -o yaml` snapshots
- One-shot evaluation with stable, input-ordered output

Quick Start:
    >>> from podcheck.collectors import ObjectSource
    >>> from podcheck.config import SourceConfig
    >>> from podcheck.checks import UsernsCheck
    >>> from podcheck.engine import run_check
    >>>
    >>> source = ObjectSource(SourceConfig("pods.yaml", "namespaces.yaml"))
    >>> report = run_check(UsernsCheck(), source.load_pods(), source.load_namespaces())
    >>> print("\\n".join(report.lines))
"""

from __future__ import annotations

__version__ = "0.1.0"

from podcheck.errors import (
    APIError,
    ConfigError,
    DecodeError,
    FileReadError,
    JoinWarning,
    PodcheckError,
    PredicateError,
)
from podcheck.models import CheckReport, Container, Namespace, Pod, PodError

__all__ = [
    "__version__",
    # Errors
    "APIError",
    "ConfigError",
    "DecodeError",
    "FileReadError",
    "JoinWarning",
    "PodcheckError",
    "PredicateError",
    # Models
    "CheckReport",
    "Container",
    "Namespace",
    "Pod",
    "PodError",
]
