"""
Unit tests for ObjectSource.
"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from podcheck.collectors import ObjectSource
from podcheck.config import ClusterConfig, SourceConfig
from podcheck.errors import APIError, FileReadError
from podcheck.models import Namespace, Pod


class TestObjectSource:
    """Tests for ObjectSource."""

    def test_files_only_never_builds_cluster(
        self, write_yaml, sample_pods_document, sample_namespaces_document
    ):
        """Test loading from files does not touch the cluster."""
        pods_path = write_yaml("pods.yaml", sample_pods_document)
        ns_path = write_yaml("namespaces.yaml", sample_namespaces_document)

        with patch("podcheck.collectors.source.KubernetesSource") as cluster_cls:
            source = ObjectSource(SourceConfig(pods_path, ns_path))
            namespaces = source.load_namespaces()
            pods = source.load_pods()

        cluster_cls.assert_not_called()
        assert [ns.name for ns in namespaces] == ["ns1", "ns2"]
        assert len(pods) == 6

    def test_mixed_file_and_cluster(self, write_yaml, sample_namespaces_document):
        """Test namespaces from a file can be combined with live pods."""
        ns_path = write_yaml("namespaces.yaml", sample_namespaces_document)
        cluster = MagicMock()
        cluster.list_pods.return_value = [Pod(name="live", namespace="ns1")]

        source = ObjectSource(SourceConfig(namespaces_file=ns_path), cluster=cluster)

        assert [ns.name for ns in source.load_namespaces()] == ["ns1", "ns2"]
        assert [p.name for p in source.load_pods()] == ["live"]
        cluster.list_namespaces.assert_not_called()
        cluster.list_pods.assert_called_once_with()

    def test_cluster_built_from_config(self):
        """Test the cluster source is created lazily with the cluster config."""
        cluster_config = ClusterConfig(context="prod")

        with patch("podcheck.collectors.source.KubernetesSource") as cluster_cls:
            cluster_cls.return_value.list_namespaces.return_value = [Namespace("ns1")]
            source = ObjectSource(SourceConfig(), cluster_config)

            cluster_cls.assert_not_called()
            namespaces = source.load_namespaces()
            source.load_pods()

        cluster_cls.assert_called_once_with(cluster_config)
        assert namespaces == [Namespace("ns1")]

    def test_empty_path_means_cluster(self):
        """Test an empty file path selects the cluster."""
        cluster = MagicMock()
        cluster.list_pods.return_value = []

        ObjectSource(SourceConfig(pods_file=""), cluster=cluster).load_pods()

        cluster.list_pods.assert_called_once_with()

    def test_file_error_propagates(self, tmp_path):
        """Test a missing file is fatal."""
        source = ObjectSource(SourceConfig(pods_file=str(tmp_path / "missing.yaml")))

        with pytest.raises(FileReadError):
            source.load_pods()

    def test_api_error_propagates(self):
        """Test cluster errors are fatal."""
        cluster = MagicMock()
        cluster.list_namespaces.side_effect = APIError("namespaces", "Forbidden", status=403)

        with pytest.raises(APIError):
            ObjectSource(SourceConfig(), cluster=cluster).load_namespaces()

    def test_logs_loaded_counts(self, caplog, write_yaml, sample_namespaces_document):
        """Test loading logs the origin and item count."""
        ns_path = write_yaml("namespaces.yaml", sample_namespaces_document)
        caplog.set_level(logging.DEBUG, logger="podcheck")

        ObjectSource(SourceConfig(namespaces_file=ns_path)).load_namespaces()

        assert f"Loaded 2 namespaces from {ns_path}" in caplog.text
