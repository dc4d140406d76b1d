"""
Unit tests for podcheck resource and report models.

Tests cover:
- Namespace decoding and label lookup
- Pod decoding, defaults, and container order
- Field type validation
- Check report summaries
"""

from __future__ import annotations

import pytest

from podcheck.errors import JoinWarning
from podcheck.models import CheckReport, Container, Namespace, Pod, PodError


class TestNamespace:
    """Tests for the Namespace model."""

    def test_from_dict(self):
        """Test decoding a namespace with labels."""
        ns = Namespace.from_dict(
            {
                "kind": "Namespace",
                "metadata": {"name": "prod", "labels": {"openshift.io/run-level": "0"}},
            }
        )

        assert ns.name == "prod"
        assert ns.labels == {"openshift.io/run-level": "0"}
        assert ns.get_label("openshift.io/run-level") == "0"

    def test_missing_labels(self):
        """Test a namespace without labels has an empty label map."""
        ns = Namespace.from_dict({"metadata": {"name": "default"}})

        assert ns.labels == {}
        assert ns.get_label("anything") == ""
        assert ns.get_label("anything", "fallback") == "fallback"

    def test_null_label_value_becomes_empty(self):
        """Test a null label value is normalized to an empty string."""
        ns = Namespace.from_dict(
            {"metadata": {"name": "a", "labels": {"openshift.io/run-level": None}}}
        )

        assert ns.get_label("openshift.io/run-level") == ""

    @pytest.mark.parametrize("value", [False, 0, 1.5, ["a"]])
    def test_non_string_label_value_rejected(self, value):
        """Test label values must be strings."""
        with pytest.raises(ValueError, match="metadata.labels.openshift.io/run-level"):
            Namespace.from_dict(
                {"metadata": {"name": "n", "labels": {"openshift.io/run-level": value}}}
            )

    def test_non_string_label_key_rejected(self):
        """Test label keys must be strings."""
        with pytest.raises(ValueError, match="expected string key"):
            Namespace.from_dict({"metadata": {"name": "n", "labels": {1: "one"}}})

    def test_wrong_metadata_type(self):
        """Test non-mapping metadata is rejected."""
        with pytest.raises(ValueError, match="metadata"):
            Namespace.from_dict({"metadata": ["not", "a", "mapping"]})


class TestContainer:
    """Tests for the Container model."""

    def test_from_dict(self):
        """Test decoding container security settings."""
        container = Container.from_dict(
            {"name": "app", "securityContext": {"runAsUser": 1000, "privileged": False}}
        )

        assert container == Container(name="app", run_as_user=1000, privileged=False)

    def test_defaults(self):
        """Test unset security settings stay None."""
        container = Container.from_dict({"name": "app"})

        assert container.run_as_user is None
        assert container.privileged is None

    def test_bool_run_as_user_rejected(self):
        """Test a boolean is not accepted as a UID."""
        with pytest.raises(ValueError, match="runAsUser"):
            Container.from_dict({"name": "app", "securityContext": {"runAsUser": True}})

    def test_string_privileged_rejected(self):
        """Test privileged must be a boolean."""
        with pytest.raises(ValueError, match="privileged"):
            Container.from_dict({"name": "app", "securityContext": {"privileged": "yes"}})


class TestPod:
    """Tests for the Pod model."""

    def test_from_dict_full(self):
        """Test decoding every field the checks read."""
        pod = Pod.from_dict(
            {
                "metadata": {"name": "web", "namespace": "prod"},
                "spec": {
                    "hostUsers": True,
                    "hostNetwork": True,
                    "hostPID": True,
                    "hostIPC": True,
                    "securityContext": {"runAsUser": 0},
                    "containers": [
                        {"name": "a"},
                        {"name": "b", "securityContext": {"privileged": True}},
                    ],
                },
            }
        )

        assert pod.name == "web"
        assert pod.namespace == "prod"
        assert pod.key == "prod/web"
        assert pod.host_users is True
        assert pod.host_network is True
        assert pod.host_pid is True
        assert pod.host_ipc is True
        assert pod.run_as_user == 0
        assert [c.name for c in pod.containers] == ["a", "b"]
        assert pod.containers[1].privileged is True

    def test_from_dict_defaults(self):
        """Test absent fields take their Kubernetes defaults."""
        pod = Pod.from_dict({"metadata": {"name": "p", "namespace": "ns"}})

        assert pod.host_users is None
        assert pod.host_network is False
        assert pod.host_pid is False
        assert pod.host_ipc is False
        assert pod.run_as_user is None
        assert pod.containers == ()

    def test_host_users_false_preserved(self):
        """Test hostUsers=false is distinguishable from unset."""
        pod = Pod.from_dict(
            {"metadata": {"name": "p", "namespace": "ns"}, "spec": {"hostUsers": False}}
        )

        assert pod.host_users is False

    def test_null_spec(self):
        """Test a null spec decodes like an empty one."""
        pod = Pod.from_dict({"metadata": {"name": "p", "namespace": "ns"}, "spec": None})

        assert pod.containers == ()

    def test_string_host_network_rejected(self):
        """Test a quoted boolean is rejected."""
        with pytest.raises(ValueError, match="spec.hostNetwork"):
            Pod.from_dict(
                {"metadata": {"name": "p", "namespace": "ns"}, "spec": {"hostNetwork": "true"}}
            )

    @pytest.mark.parametrize("containers", [{}, "", 0, False])
    def test_containers_must_be_list(self, containers):
        """Test spec.containers must be a list, including falsy values."""
        with pytest.raises(ValueError, match="spec.containers: expected list"):
            Pod.from_dict(
                {
                    "metadata": {"name": "p", "namespace": "ns"},
                    "spec": {"containers": containers},
                }
            )

    def test_null_containers(self):
        """Test null spec.containers decodes to no containers."""
        pod = Pod.from_dict(
            {"metadata": {"name": "p", "namespace": "ns"}, "spec": {"containers": None}}
        )

        assert pod.containers == ()

    def test_container_error_carries_index(self):
        """Test container errors name the offending container index."""
        with pytest.raises(ValueError, match=r"spec.containers\[1\]"):
            Pod.from_dict(
                {
                    "metadata": {"name": "p", "namespace": "ns"},
                    "spec": {
                        "containers": [
                            {"name": "ok"},
                            {"name": "bad", "securityContext": {"runAsUser": "0"}},
                        ]
                    },
                }
            )


class TestCheckReport:
    """Tests for CheckReport."""

    def test_empty_report(self):
        """Test a fresh report is successful and empty."""
        report = CheckReport(check_name="userns")

        assert report.success is True
        assert report.lines_emitted == 0

    def test_summary(self):
        """Test summary counts."""
        report = CheckReport(
            check_name="userns",
            lines=["ns1\tp1\ttrue"],
            join_warnings=[JoinWarning("ghost", "p5")],
            errors=[PodError("ns1", "p9", "boom")],
            pods_seen=3,
            pods_evaluated=2,
            duration_seconds=0.12345,
        )

        summary = report.summary()

        assert report.success is False
        assert summary == {
            "check": "userns",
            "pods_seen": 3,
            "pods_evaluated": 2,
            "lines_emitted": 1,
            "join_warnings": 1,
            "errors": 1,
            "duration_seconds": 0.123,
        }

    def test_messages(self):
        """Test warning and error string forms."""
        assert str(JoinWarning("ghost", "p5")) == "namespace ghost not found for pod p5"
        assert str(PodError("ns1", "p9", "boom")) == "error checking pod ns1/p9: boom"
