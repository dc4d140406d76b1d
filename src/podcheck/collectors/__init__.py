"""
Object collectors for podcheck.

Pods and namespaces come either from snapshot files (PodList,
NamespaceList or generic List documents) or from a live cluster.
"""

from podcheck.collectors.file_source import (
    decode_list,
    load_namespaces_from_file,
    load_pods_from_file,
    read_document,
)
from podcheck.collectors.k8s_cluster import KubernetesSource
from podcheck.collectors.source import ObjectSource

__all__ = [
    "KubernetesSource",
    "ObjectSource",
    "decode_list",
    "load_namespaces_from_file",
    "load_pods_from_file",
    "read_document",
]
