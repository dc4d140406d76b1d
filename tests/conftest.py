"""
Pytest configuration and fixtures for podcheck tests.

This module provides manifest builders and snapshot file fixtures used
across unit tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Generator

import pytest
import yaml

from podcheck.models import Namespace, Pod
from tests.factories import list_document, namespace_manifest, pod_manifest


@pytest.fixture(autouse=True)
def reset_podcheck_logging() -> Generator[None, None, None]:
    """Drop handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger("podcheck")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def clean_podcheck_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of tests."""
    for var in (
        "PODCHECK_KUBECONFIG",
        "PODCHECK_CONTEXT",
        "PODCHECK_IN_CLUSTER",
        "PODCHECK_PAGE_SIZE",
        "PODCHECK_LOG_LEVEL",
        "PODCHECK_LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, Any], str]:
    """Return a helper that writes a document to a YAML file."""

    def _write(filename: str, document: Any) -> str:
        path = tmp_path / filename
        path.write_text(yaml.safe_dump(document, sort_keys=False))
        return str(path)

    return _write


@pytest.fixture
def plain_namespace() -> Namespace:
    """Return a namespace without the run-level label."""
    return Namespace(name="ns1")


@pytest.fixture
def run_level_namespace() -> Namespace:
    """Return a namespace carrying the run-level label."""
    return Namespace(name="ns2", labels={"openshift.io/run-level": "0"})


@pytest.fixture
def bare_pod() -> Pod:
    """Return a pod with no security-relevant fields set."""
    return Pod(name="p1", namespace="ns1")


@pytest.fixture
def sample_namespaces_document() -> dict[str, Any]:
    """Return a NamespaceList with a plain and a run-level namespace."""
    return list_document(
        "NamespaceList",
        [
            namespace_manifest("ns1", kind=None),
            namespace_manifest("ns2", {"openshift.io/run-level": "1"}, kind=None),
        ],
    )


@pytest.fixture
def sample_pods_document() -> dict[str, Any]:
    """Return a generic List of pods covering eligible and unavailable cases."""
    return list_document(
        "List",
        [
            pod_manifest("p1", "ns1"),
            pod_manifest("p2", "ns1", {"hostUsers": False, "containers": [{"name": "app"}]}),
            pod_manifest("p3", "ns2"),
            pod_manifest("p4", "ns1", {"hostNetwork": True, "containers": [{"name": "app"}]}),
            pod_manifest("p5", "ghost"),
            pod_manifest(
                "p6",
                "ns1",
                {
                    "containers": [
                        {"name": "init", "securityContext": {"runAsUser": 1000}},
                        {"name": "root", "securityContext": {"runAsUser": 0}},
                    ]
                },
            ),
        ],
    )
