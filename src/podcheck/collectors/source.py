"""
Object source for podcheck.

Resolves, independently for pods and namespaces, whether objects come
from a snapshot file or from a live cluster query.
"""

from __future__ import annotations

from podcheck.collectors.file_source import load_namespaces_from_file, load_pods_from_file
from podcheck.collectors.k8s_cluster import KubernetesSource
from podcheck.config import ClusterConfig, SourceConfig
from podcheck.models import Namespace, Pod
from podcheck.observability import get_logger

logger = get_logger("collectors.source")


class ObjectSource:
    """
    Loads the pod and namespace snapshots for one run.

    Each entity type is read from its file when a path is configured and
    fetched from the cluster otherwise, so file and live sources can be
    mixed. The cluster client is only created when a live query is needed.
    """

    def __init__(
        self,
        source_config: SourceConfig,
        cluster_config: ClusterConfig | None = None,
        cluster: KubernetesSource | None = None,
    ) -> None:
        """
        Initialize the object source.

        Args:
            source_config: Snapshot file paths
            cluster_config: Cluster connection settings for live queries
            cluster: Pre-built cluster source (default: built on demand)
        """
        self._source_config = source_config
        self._cluster_config = cluster_config or ClusterConfig()
        self._cluster = cluster

    @property
    def cluster(self) -> KubernetesSource:
        """Get the live cluster source, creating it on first use."""
        if self._cluster is None:
            self._cluster = KubernetesSource(self._cluster_config)
        return self._cluster

    def load_namespaces(self) -> list[Namespace]:
        """
        Load namespaces from file or cluster.

        Raises:
            FileReadError, DecodeError, APIError
        """
        path = self._source_config.namespaces_file
        if path:
            namespaces = load_namespaces_from_file(path)
        else:
            namespaces = self.cluster.list_namespaces()
        logger.source_loaded("namespaces", path or "cluster", len(namespaces))
        return namespaces

    def load_pods(self) -> list[Pod]:
        """
        Load pods from file or cluster.

        Raises:
            FileReadError, DecodeError, APIError
        """
        path = self._source_config.pods_file
        if path:
            pods = load_pods_from_file(path)
        else:
            pods = self.cluster.list_pods()
        logger.source_loaded("pods", path or "cluster", len(pods))
        return pods
