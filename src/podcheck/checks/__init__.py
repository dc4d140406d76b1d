"""
Pod checks for podcheck.

Each check is a callable taking (namespace, pod) and returning a
tab-separated record, or "" to leave the pod out of the output. Checks
are registered by the name used as the CLI verb.
"""

from __future__ import annotations

from typing import Callable

from podcheck.checks.userns import (
    ACTION_MIMIC,
    ACTION_USE,
    RUN_LEVEL_LABEL,
    UsernsCheck,
    UsernsDecision,
    Verdict,
    check_user_namespaces,
    classify_pod,
    render_decision,
)
from podcheck.config import OutputMode
from podcheck.errors import ConfigError
from podcheck.models import Namespace, Pod

CheckFunc = Callable[[Namespace, Pod], str]

CHECKS: dict[str, type[UsernsCheck]] = {
    UsernsCheck.name: UsernsCheck,
}


def list_check_names() -> list[str]:
    """Get names of all registered checks."""
    return sorted(CHECKS)


def get_check(name: str, mode: OutputMode = OutputMode.SCC) -> UsernsCheck:
    """
    Create a registered check bound to an output mode.

    Raises:
        ConfigError: If no check has this name
    """
    check_cls = CHECKS.get(name)
    if check_cls is None:
        raise ConfigError(
            f"unknown check '{name}' (available: {', '.join(list_check_names())})"
        )
    return check_cls(mode)


__all__ = [
    "ACTION_MIMIC",
    "ACTION_USE",
    "CHECKS",
    "CheckFunc",
    "RUN_LEVEL_LABEL",
    "UsernsCheck",
    "UsernsDecision",
    "Verdict",
    "check_user_namespaces",
    "classify_pod",
    "get_check",
    "list_check_names",
    "render_decision",
]
