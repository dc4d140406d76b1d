"""
Kubernetes resource models for podcheck.

This module defines normalized, immutable views of the Namespace and Pod
fields the eligibility checks look at. Models are built from
Kubernetes-shaped mappings (camelCase keys, as found in YAML manifests or
serialized API objects).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _mapping(data: Any, path: str) -> dict[str, Any]:
    """Return data as a mapping, treating null as empty."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected mapping, got {type(data).__name__}")
    return data


def _optional_bool(data: dict[str, Any], key: str, path: str) -> bool | None:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ValueError(f"{path}.{key}: expected boolean, got {type(value).__name__}")


def _optional_int(data: dict[str, Any], key: str, path: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    # bool is an int subclass; YAML "true" must not become UID 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{path}.{key}: expected integer, got {type(value).__name__}")
    return value


def _string(data: dict[str, Any], key: str, path: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{path}.{key}: expected string, got {type(value).__name__}")
    return value


def _labels(data: dict[str, Any]) -> dict[str, str]:
    """Check label keys and values are strings; a null value reads as empty."""
    labels = {}
    for key, value in data.items():
        if not isinstance(key, str):
            raise ValueError(
                f"metadata.labels: expected string key, got {type(key).__name__}"
            )
        if value is None:
            value = ""
        elif not isinstance(value, str):
            raise ValueError(
                f"metadata.labels.{key}: expected string, got {type(value).__name__}"
            )
        labels[key] = value
    return labels


@dataclass(frozen=True)
class Namespace:
    """
    A Kubernetes namespace.

    Attributes:
        name: Namespace name (unique within a cluster)
        labels: Namespace labels
    """

    name: str
    labels: dict[str, str] = field(default_factory=dict)

    def get_label(self, key: str, default: str = "") -> str:
        """Get a label value by key."""
        return self.labels.get(key, default)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Namespace:
        """
        Create a Namespace from a manifest mapping.

        Raises:
            ValueError: If a present field has the wrong type
        """
        data = _mapping(data, "namespace")
        metadata = _mapping(data.get("metadata"), "metadata")
        labels = _mapping(metadata.get("labels"), "metadata.labels")

        return cls(
            name=_string(metadata, "name", "metadata"),
            labels=_labels(labels),
        )


@dataclass(frozen=True)
class Container:
    """
    Security-relevant settings of a single container.

    Attributes:
        name: Container name
        run_as_user: securityContext.runAsUser, if set
        privileged: securityContext.privileged, if set
    """

    name: str
    run_as_user: int | None = None
    privileged: bool | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = "container") -> Container:
        """Create a Container from a manifest mapping."""
        data = _mapping(data, path)
        security_context = _mapping(
            data.get("securityContext"), f"{path}.securityContext"
        )

        return cls(
            name=_string(data, "name", path),
            run_as_user=_optional_int(
                security_context, "runAsUser", f"{path}.securityContext"
            ),
            privileged=_optional_bool(
                security_context, "privileged", f"{path}.securityContext"
            ),
        )


@dataclass(frozen=True)
class Pod:
    """
    A Kubernetes pod, reduced to the fields that decide user namespace
    eligibility.

    Pods are identified by (namespace, name). Absent fields keep their
    Kubernetes defaults: host flags are false, tri-state and optional
    values are None.

    Attributes:
        name: Pod name
        namespace: Name of the owning namespace
        host_users: spec.hostUsers (None when unset)
        host_network: spec.hostNetwork
        host_pid: spec.hostPID
        host_ipc: spec.hostIPC
        run_as_user: spec.securityContext.runAsUser, if set
        containers: spec.containers in declaration order
    """

    name: str
    namespace: str
    host_users: bool | None = None
    host_network: bool = False
    host_pid: bool = False
    host_ipc: bool = False
    run_as_user: int | None = None
    containers: tuple[Container, ...] = ()

    @property
    def key(self) -> str:
        """Get the namespace/name identifier."""
        return f"{self.namespace}/{self.name}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pod:
        """
        Create a Pod from a manifest mapping.

        Raises:
            ValueError: If a present field has the wrong type
        """
        data = _mapping(data, "pod")
        metadata = _mapping(data.get("metadata"), "metadata")
        spec = _mapping(data.get("spec"), "spec")
        security_context = _mapping(spec.get("securityContext"), "spec.securityContext")

        raw_containers = spec.get("containers")
        if raw_containers is None:
            raw_containers = []
        if not isinstance(raw_containers, list):
            raise ValueError(
                f"spec.containers: expected list, got {type(raw_containers).__name__}"
            )

        return cls(
            name=_string(metadata, "name", "metadata"),
            namespace=_string(metadata, "namespace", "metadata"),
            host_users=_optional_bool(spec, "hostUsers", "spec"),
            host_network=bool(_optional_bool(spec, "hostNetwork", "spec")),
            host_pid=bool(_optional_bool(spec, "hostPID", "spec")),
            host_ipc=bool(_optional_bool(spec, "hostIPC", "spec")),
            run_as_user=_optional_int(security_context, "runAsUser", "spec.securityContext"),
            containers=tuple(
                Container.from_dict(c, f"spec.containers[{i}]")
                for i, c in enumerate(raw_containers)
            ),
        )
