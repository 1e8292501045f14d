"""Unit tests for kubectl display models."""

from __future__ import annotations

import pytest

from kube_helper.integrations.kubectl.models import ServicePort, ServiceSummary


@pytest.mark.unit
@pytest.mark.kubernetes
class TestServiceSummary:
    """Tests for ServiceSummary.from_k8s_object and matching."""

    def test_from_k8s_object_collects_addresses(self) -> None:
        """Cluster, external and load balancer IPs are all collected."""
        svc = ServiceSummary.from_k8s_object(
            {
                "metadata": {"name": "web", "namespace": "team-a"},
                "spec": {
                    "type": "LoadBalancer",
                    "clusterIP": "10.0.0.7",
                    "clusterIPs": ["10.0.0.7", "fd00::7"],
                    "externalIPs": ["203.0.113.4"],
                    "ports": [{"port": 443, "protocol": "TCP"}],
                },
                "status": {"loadBalancer": {"ingress": [{"ip": "198.51.100.2"}, {"hostname": "lb"}]}},
            }
        )

        assert svc.cluster_ips == ["10.0.0.7", "fd00::7"]
        assert svc.addresses == ["10.0.0.7", "fd00::7", "203.0.113.4", "198.51.100.2"]
        assert svc.matches_ip("198.51.100.2")
        assert not svc.matches_ip("10.0.0.8")

    def test_headless_service_has_no_cluster_ip(self) -> None:
        """clusterIP "None" is not an address."""
        svc = ServiceSummary.from_k8s_object(
            {"metadata": {"name": "db"}, "spec": {"clusterIP": "None"}}
        )

        assert svc.cluster_ips == []
        assert svc.namespace == "default"
        assert not svc.matches_ip("None")

    def test_to_line(self) -> None:
        """Display line lists namespace/name, type, cluster IP and ports."""
        svc = ServiceSummary(
            name="web",
            namespace="team-a",
            cluster_ips=["10.0.0.7"],
            ports=[ServicePort(port=80), ServicePort(port=53, protocol="UDP")],
        )

        assert svc.to_line() == "team-a/web  ClusterIP  10.0.0.7  80/TCP, 53/UDP"

    def test_to_line_without_ports(self) -> None:
        """Missing ports and cluster IP are shown as placeholders."""
        svc = ServiceSummary(name="ext", type="ExternalName")

        assert svc.to_line() == "default/ext  ExternalName  None  -"
