"""
User namespace eligibility check.

Classifies pods by whether they can run with isolated user namespaces
(spec.hostUsers: false). A pod is unavailable when it shares a host
namespace, runs as root, or has a privileged container. Eligible pods are
given a recommended action based on whether their namespace carries an
externally enforced security policy label.

Reference: https://kubernetes.io/docs/concepts/workloads/pods/user-namespaces/
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from podcheck.config import OutputMode
from podcheck.models import Container, Namespace, Pod

# Namespaces with this label have their security context policy managed
# externally (OpenShift run levels), so the restricted profile cannot be
# applied directly.
RUN_LEVEL_LABEL = "openshift.io/run-level"

ACTION_USE = "Use restricted-v3"
ACTION_MIMIC = "Mimic restricted-v3"


class Verdict(Enum):
    """Outcome of the user namespace decision tree."""

    ELIGIBLE = "eligible"
    OPTED_OUT = "opted_out"  # hostUsers: false already set
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class UsernsDecision:
    """
    Classification of one pod.

    Attributes:
        verdict: Eligibility outcome
        reason: Human-readable reason (the action label for eligible pods)
        container_name: Offending container, if a container decided it
        scc_enabled: Whether the namespace lacks the run-level label
    """

    verdict: Verdict
    reason: str
    container_name: str | None = None
    scc_enabled: bool = True

    @property
    def eligible(self) -> bool:
        """Check if the pod can use user namespaces."""
        return self.verdict == Verdict.ELIGIBLE

    @property
    def action(self) -> str | None:
        """Get the recommended action for eligible pods."""
        if not self.eligible:
            return None
        return ACTION_USE if self.scc_enabled else ACTION_MIMIC


def _unavailable(reason: str, container: Container | None = None) -> UsernsDecision:
    return UsernsDecision(
        verdict=Verdict.UNAVAILABLE,
        reason=f"unavailable: {reason}",
        container_name=container.name if container else None,
    )


def is_scc_enabled(namespace: Namespace) -> bool:
    """Check if the namespace has no (or an empty) run-level label."""
    return namespace.get_label(RUN_LEVEL_LABEL) == ""


def classify_pod(namespace: Namespace, pod: Pod) -> UsernsDecision:
    """
    Decide whether a pod can run with user namespaces.

    Checks are ordered and the first match wins, so verbose output always
    reports the highest priority reason. Only explicit values disqualify
    a pod; unset fields never do.

    Args:
        namespace: The pod's namespace
        pod: Pod to classify

    Returns:
        UsernsDecision for the pod
    """
    if pod.host_users is False:
        return UsernsDecision(
            verdict=Verdict.OPTED_OUT,
            reason="opted out via hostUsers=false",
        )

    if pod.host_network:
        return _unavailable("hostNetwork=true")
    if pod.host_ipc:
        return _unavailable("hostIPC=true")
    if pod.host_pid:
        return _unavailable("hostPID=true")

    if pod.run_as_user == 0:
        return _unavailable("runAsUser=0")

    for container in pod.containers:
        if container.run_as_user == 0:
            return _unavailable(f"container {container.name} runAsUser=0", container)
        if container.privileged is True:
            return _unavailable(f"container {container.name} privileged=true", container)

    scc_enabled = is_scc_enabled(namespace)
    return UsernsDecision(
        verdict=Verdict.ELIGIBLE,
        reason=ACTION_USE if scc_enabled else ACTION_MIMIC,
        scc_enabled=scc_enabled,
    )


HEADERS = {
    OutputMode.MINIMAL: ["NAMESPACE", "POD"],
    OutputMode.SCC: ["NAMESPACE", "POD", "SCC ENABLED"],
    OutputMode.ACTION: ["NAMESPACE", "POD", "ACTION"],
    OutputMode.VERBOSE: ["NAMESPACE", "POD", "REASON"],
}


def render_decision(
    namespace: Namespace,
    pod: Pod,
    decision: UsernsDecision,
    mode: OutputMode,
) -> str:
    """
    Render a decision as a tab-separated record.

    Returns:
        The record, or "" when the pod is suppressed in this mode
    """
    if mode == OutputMode.VERBOSE:
        return f"{namespace.name}\t{pod.name}\t{decision.reason}"

    if not decision.eligible:
        return ""

    if mode == OutputMode.MINIMAL:
        return f"{namespace.name}\t{pod.name}"
    if mode == OutputMode.ACTION:
        return f"{namespace.name}\t{pod.name}\t{decision.action}"
    return f"{namespace.name}\t{pod.name}\t{str(decision.scc_enabled).lower()}"


class UsernsCheck:
    """
    User namespace eligibility check bound to an output mode.

    Instances are callables usable as the check function of the
    evaluation driver.

    Example:
        check = UsernsCheck(OutputMode.ACTION)
        line = check(namespace, pod)
        if line:
            print(line)
    """

    name = "userns"
    description = "List pods that are eligible for using user namespaces"

    def __init__(self, mode: OutputMode = OutputMode.SCC):
        """
        Initialize the check.

        Args:
            mode: Shape of emitted records
        """
        self.mode = mode

    @property
    def headers(self) -> list[str]:
        """Get column headers for the configured mode."""
        return HEADERS[self.mode]

    def __call__(self, namespace: Namespace, pod: Pod) -> str:
        return render_decision(namespace, pod, classify_pod(namespace, pod), self.mode)


def check_user_namespaces(
    namespace: Namespace,
    pod: Pod,
    mode: OutputMode = OutputMode.SCC,
) -> str:
    """
    Convenience function to check a single pod.

    Example:
        >>> check_user_namespaces(Namespace("ns1"), Pod("p1", "ns1"))
        'ns1\\tp1\\ttrue'
    """
    return UsernsCheck(mode)(namespace, pod)
