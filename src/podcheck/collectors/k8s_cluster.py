"""
Live Kubernetes cluster source for podcheck.

Lists pods across all namespaces and namespaces cluster-wide through the
official kubernetes client. API objects are serialized back to manifest
shape and decoded by the same models as snapshot files.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

import urllib3
from kubernetes import client, config
from kubernetes.client.rest import ApiException

from podcheck.config import ClusterConfig
from podcheck.errors import APIError, DecodeError
from podcheck.models import Namespace, Pod

logger = logging.getLogger(__name__)


class KubernetesSource:
    """
    Read-only access to pods and namespaces of a live cluster.

    The client is built against its own Configuration object, loaded from
    the ClusterConfig given here, and is only initialized on first use.

    Example:
        source = KubernetesSource(ClusterConfig(context="prod"))
        namespaces = source.list_namespaces()
        pods = source.list_pods()
    """

    def __init__(
        self,
        cluster_config: ClusterConfig | None = None,
        core_v1: Any = None,
    ) -> None:
        """
        Initialize the cluster source.

        Args:
            cluster_config: How to reach the cluster (default: current kubeconfig context)
            core_v1: Pre-built CoreV1Api, skips kubeconfig loading
        """
        self._config = cluster_config or ClusterConfig()
        self._api_client: Any = None
        self._core_v1: Any = core_v1

    def _init_client(self) -> None:
        """Initialize the Kubernetes client."""
        if self._api_client is not None:
            return

        if self._core_v1 is not None:
            self._api_client = client.ApiClient()
            return

        configuration = client.Configuration()
        try:
            if self._config.in_cluster:
                config.load_incluster_config(client_configuration=configuration)
            else:
                config.load_kube_config(
                    config_file=self._config.kubeconfig,
                    context=self._config.context,
                    client_configuration=configuration,
                    persist_config=False,
                )
        except (config.ConfigException, OSError) as e:
            raise APIError("cluster", f"failed to load kubeconfig: {e}") from e

        self._api_client = client.ApiClient(configuration=configuration)
        self._core_v1 = client.CoreV1Api(self._api_client)

    def list_pods(self) -> list[Pod]:
        """
        List pods in all namespaces.

        Raises:
            APIError: If the cluster cannot be queried
        """
        self._init_client()
        return self._decode(
            self._paginate(self._core_v1.list_pod_for_all_namespaces, "pods"),
            Pod.from_dict,
            "pods",
        )

    def list_namespaces(self) -> list[Namespace]:
        """
        List all namespaces.

        Raises:
            APIError: If the cluster cannot be queried
        """
        self._init_client()
        return self._decode(
            self._paginate(self._core_v1.list_namespace, "namespaces"),
            Namespace.from_dict,
            "namespaces",
        )

    def _paginate(
        self, method: Callable[..., Any], resource: str
    ) -> Iterator[dict[str, Any]]:
        """
        Handle Kubernetes list pagination.

        Args:
            method: CoreV1Api list method
            resource: Resource name, used in error messages

        Yields:
            Individual items serialized to manifest mappings
        """
        continue_token: str | None = None
        pages = 0

        while True:
            kwargs: dict[str, Any] = {}
            if self._config.page_size:
                kwargs["limit"] = self._config.page_size
            if continue_token:
                kwargs["_continue"] = continue_token

            try:
                response = method(**kwargs)
            except ApiException as e:
                raise APIError(resource, e.reason or "API request failed", status=e.status) from e
            except urllib3.exceptions.HTTPError as e:
                raise APIError(resource, f"transport error: {e}") from e

            pages += 1
            for item in response.items or []:
                yield self._api_client.sanitize_for_serialization(item)

            continue_token = response.metadata._continue if response.metadata else None
            if not continue_token:
                break

        logger.debug(f"Listed {resource} in {pages} page(s)")

    def _decode(
        self,
        items: Iterator[dict[str, Any]],
        decode_item: Callable[[dict[str, Any]], Any],
        resource: str,
    ) -> list[Any]:
        decoded = []
        for index, item in enumerate(items):
            try:
                decoded.append(decode_item(item))
            except ValueError as e:
                raise DecodeError(f"cluster {resource}", str(e), index=index) from e
        return decoded
