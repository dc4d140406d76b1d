"""
Check configuration for podcheck.

Provides configuration for where objects come from (snapshot files or a
live cluster), how the cluster is reached, and how results are rendered.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from podcheck.errors import ConfigError

DEFAULT_PAGE_SIZE = 500


class OutputMode(Enum):
    """Shape of each emitted record."""

    MINIMAL = "minimal"  # namespace, pod
    SCC = "scc"  # namespace, pod, SCC enabled flag
    ACTION = "action"  # namespace, pod, recommended action
    VERBOSE = "verbose"  # namespace, pod, reason (every evaluated pod)


class OutputFormat(Enum):
    """How records are written to stdout."""

    TSV = "tsv"
    TABLE = "table"


def _parse_enum(enum_cls: type[Enum], value: Any, option: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise ConfigError(f"invalid {option} '{value}' (choose from {choices})")


def _parse_bool(value: str, option: str) -> bool:
    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("", "0", "false", "no", "off"):
        return False
    raise ConfigError(f"invalid {option} '{value}': expected a boolean")


@dataclass
class ClusterConfig:
    """
    How to reach a live cluster.

    Passed explicitly to the object source so that the process-wide
    kubernetes client configuration is never touched.

    Attributes:
        kubeconfig: Path to kubeconfig file (default: ~/.kube/config)
        context: Kubernetes context to use (default: current context)
        in_cluster: If True, use the pod's service account
        page_size: Items per list request (0 disables paging)
    """

    kubeconfig: str | None = None
    context: str | None = None
    in_cluster: bool = False
    page_size: int = DEFAULT_PAGE_SIZE

    def validate(self) -> None:
        """
        Check option consistency.

        Raises:
            ConfigError: If options are invalid or conflict
        """
        if self.page_size < 0:
            raise ConfigError(f"page size must not be negative, got {self.page_size}")
        if self.in_cluster and (self.kubeconfig or self.context):
            raise ConfigError("--in-cluster cannot be combined with --kubeconfig or --context")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "kubeconfig": self.kubeconfig,
            "context": self.context,
            "in_cluster": self.in_cluster,
            "page_size": self.page_size,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClusterConfig:
        """Create from dictionary."""
        return cls(
            kubeconfig=data.get("kubeconfig"),
            context=data.get("context"),
            in_cluster=data.get("in_cluster", False),
            page_size=data.get("page_size", DEFAULT_PAGE_SIZE),
        )


@dataclass
class SourceConfig:
    """
    Where pods and namespaces come from.

    An unset (or empty) path means the entity is fetched from the cluster.
    """

    pods_file: str | None = None
    namespaces_file: str | None = None

    def __post_init__(self) -> None:
        self.pods_file = self.pods_file or None
        self.namespaces_file = self.namespaces_file or None

    @property
    def needs_cluster(self) -> bool:
        """Check if at least one entity type is fetched live."""
        return self.pods_file is None or self.namespaces_file is None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "pods_file": self.pods_file,
            "namespaces_file": self.namespaces_file,
        }


@dataclass
class CheckConfig:
    """Complete configuration for one check run."""

    check_name: str
    mode: OutputMode = OutputMode.SCC
    output_format: OutputFormat = OutputFormat.TSV
    verbose: bool = False
    source: SourceConfig = field(default_factory=SourceConfig)
    cluster: ClusterConfig = field(default_factory=ClusterConfig)

    @property
    def effective_mode(self) -> OutputMode:
        """Get the output mode after applying --verbose."""
        return OutputMode.VERBOSE if self.verbose else self.mode

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "check_name": self.check_name,
            "mode": self.mode.value,
            "output_format": self.output_format.value,
            "verbose": self.verbose,
            "source": self.source.to_dict(),
            "cluster": self.cluster.to_dict(),
        }

    @classmethod
    def from_args(
        cls,
        args: Any,
        env: ClusterConfig | None = None,
    ) -> CheckConfig:
        """
        Build a configuration from parsed CLI arguments.

        Cluster options left unset on the command line fall back to the
        environment. Choosing a connection method on the command line
        (--in-cluster, or --kubeconfig/--context) replaces the other
        method's environment defaults.

        Raises:
            ConfigError: If any value is invalid
        """
        env = env or load_config_from_env()

        kubeconfig = getattr(args, "kubeconfig", None)
        context = getattr(args, "context", None)
        in_cluster = bool(getattr(args, "in_cluster", False))
        page_size = getattr(args, "page_size", None)

        if not in_cluster:
            if kubeconfig or context:
                kubeconfig = kubeconfig or env.kubeconfig
                context = context or env.context
            else:
                kubeconfig, context, in_cluster = env.kubeconfig, env.context, env.in_cluster

        cluster = ClusterConfig(
            kubeconfig=kubeconfig,
            context=context,
            in_cluster=in_cluster,
            page_size=env.page_size if page_size is None else page_size,
        )
        cluster.validate()

        return cls(
            check_name=args.command,
            mode=_parse_enum(OutputMode, getattr(args, "mode", "scc"), "mode"),
            output_format=_parse_enum(
                OutputFormat, getattr(args, "output", "tsv"), "output format"
            ),
            verbose=bool(getattr(args, "verbose", False)),
            source=SourceConfig(
                pods_file=getattr(args, "pods", None),
                namespaces_file=getattr(args, "namespaces", None),
            ),
            cluster=cluster,
        )


def load_config_from_env() -> ClusterConfig:
    """
    Load cluster connection defaults from environment variables.

    Environment variables:
        PODCHECK_KUBECONFIG: Path to kubeconfig file
        PODCHECK_CONTEXT: Kubernetes context name
        PODCHECK_IN_CLUSTER: Use in-cluster service account (true/false)
        PODCHECK_PAGE_SIZE: Items per list request

    Raises:
        ConfigError: If a variable has an invalid value
    """
    page_size_raw = os.getenv("PODCHECK_PAGE_SIZE", "")
    try:
        page_size = int(page_size_raw) if page_size_raw else DEFAULT_PAGE_SIZE
    except ValueError:
        raise ConfigError(f"invalid PODCHECK_PAGE_SIZE '{page_size_raw}': expected an integer")

    return ClusterConfig(
        kubeconfig=os.getenv("PODCHECK_KUBECONFIG") or None,
        context=os.getenv("PODCHECK_CONTEXT") or None,
        in_cluster=_parse_bool(os.getenv("PODCHECK_IN_CLUSTER", ""), "PODCHECK_IN_CLUSTER"),
        page_size=page_size,
    )
