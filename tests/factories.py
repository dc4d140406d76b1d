"""
Manifest builders for podcheck tests.
"""

from __future__ import annotations

from typing import Any


def pod_manifest(
    name: str,
    namespace: str,
    spec: dict[str, Any] | None = None,
    kind: str | None = "Pod",
) -> dict[str, Any]:
    """Build a pod manifest mapping."""
    manifest: dict[str, Any] = {
        "apiVersion": "v1",
        "metadata": {"name": name, "namespace": namespace},
        "spec": spec if spec is not None else {"containers": [{"name": "app"}]},
    }
    if kind:
        manifest["kind"] = kind
    return manifest


def namespace_manifest(
    name: str,
    labels: dict[str, str] | None = None,
    kind: str | None = "Namespace",
) -> dict[str, Any]:
    """Build a namespace manifest mapping."""
    manifest: dict[str, Any] = {"apiVersion": "v1", "metadata": {"name": name}}
    if labels is not None:
        manifest["metadata"]["labels"] = labels
    if kind:
        manifest["kind"] = kind
    return manifest


def list_document(kind: str, items: list[dict[str, Any]]) -> dict[str, Any]:
    """Build a list document of the given kind."""
    return {"apiVersion": "v1", "kind": kind, "items": items}
