"""
Evaluation driver for podcheck.

Joins each pod to its namespace and runs a check over it, streaming
non-empty records in pod order. Pods with an unknown namespace and pods
the check fails on are logged and skipped; they never abort a run.
"""

from __future__ import annotations

import time
from typing import Callable, Iterable, Iterator

from podcheck.engine.index import NamespaceIndex
from podcheck.errors import JoinWarning, PredicateError
from podcheck.models import CheckReport, Namespace, Pod, PodError
from podcheck.observability import get_logger

logger = get_logger("engine.runner")


class CheckRunner:
    """
    Runs a check function over a pod snapshot.

    Example:
        runner = CheckRunner(UsernsCheck(), check_name="userns")
        for line in runner.iter_results(pods, NamespaceIndex(namespaces)):
            print(line)
        print(runner.report.summary())
    """

    def __init__(
        self,
        check: Callable[[Namespace, Pod], str],
        check_name: str = "check",
    ) -> None:
        """
        Initialize the runner.

        Args:
            check: Returns a record for a (namespace, pod) pair, or "" to skip it
            check_name: Name used in logs and the report
        """
        self._check = check
        self._check_name = check_name
        self.report = CheckReport(check_name=check_name)

    def iter_results(
        self,
        pods: Iterable[Pod],
        namespaces: NamespaceIndex,
    ) -> Iterator[str]:
        """
        Evaluate pods and yield non-empty records as they are produced.

        The report is reset at the start of each iteration and is complete
        once the iterator is exhausted.

        Args:
            pods: Pods in the order they should be reported
            namespaces: Index used to join pods to namespaces

        Yields:
            Output records in pod order
        """
        pods = list(pods)
        report = CheckReport(check_name=self._check_name)
        self.report = report
        start_time = time.time()

        logger.check_started(self._check_name, len(pods))

        for pod in pods:
            report.pods_seen += 1

            namespace = namespaces.get(pod.namespace)
            if namespace is None:
                report.join_warnings.append(JoinWarning(pod.namespace, pod.name))
                logger.join_warning(pod.namespace, pod.name)
                continue

            report.pods_evaluated += 1
            error = None
            try:
                output = self._check(namespace, pod)
            except PredicateError as e:
                error = str(e)
            except Exception as e:
                error = f"{type(e).__name__}: {e}"

            if error is not None:
                report.errors.append(PodError(pod.namespace, pod.name, error))
                logger.pod_error(pod.namespace, pod.name, error)
                continue

            if output:
                report.lines.append(output)
                yield output

        report.duration_seconds = time.time() - start_time
        logger.check_completed(report.summary())

    def run(self, pods: Iterable[Pod], namespaces: NamespaceIndex) -> CheckReport:
        """
        Evaluate all pods and return the completed report.

        Args:
            pods: Pods in the order they should be reported
            namespaces: Index used to join pods to namespaces

        Returns:
            CheckReport with every emitted record
        """
        for _ in self.iter_results(pods, namespaces):
            pass
        return self.report


def run_check(
    check: Callable[[Namespace, Pod], str],
    pods: Iterable[Pod],
    namespaces: Iterable[Namespace],
    check_name: str = "check",
) -> CheckReport:
    """
    Convenience function to index namespaces and run a check.

    Example:
        >>> report = run_check(UsernsCheck(), pods, namespaces, "userns")
        >>> print("\\n".join(report.lines))
    """
    return CheckRunner(check, check_name).run(pods, NamespaceIndex(namespaces))
