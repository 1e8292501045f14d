"""Display models for kubectl JSON output."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServicePort(BaseModel):
    """A single port exposed by a Service."""

    model_config = ConfigDict(extra="ignore")

    port: int | None = None
    protocol: str = "TCP"

    def __str__(self) -> str:
        return f"{self.port}/{self.protocol}"


class ServiceSummary(BaseModel):
    """Subset of a Service object used for IP lookups."""

    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
    )

    name: str = Field(description="Service name")
    namespace: str = Field(default="default", description="Service namespace")
    type: str = Field(default="ClusterIP", description="Service type")
    cluster_ips: list[str] = Field(default_factory=list, description="Cluster IPs")
    external_ips: list[str] = Field(default_factory=list, description="External IPs")
    load_balancer_ips: list[str] = Field(
        default_factory=list, description="Load balancer ingress IPs"
    )
    ports: list[ServicePort] = Field(default_factory=list, description="Exposed ports")

    @classmethod
    def from_k8s_object(cls, obj: dict[str, Any]) -> ServiceSummary:
        """Create from one item of ``kubectl get services -o json``."""
        metadata = obj.get("metadata") or {}
        spec = obj.get("spec") or {}
        status = obj.get("status") or {}

        cluster_ips = list(spec.get("clusterIPs") or [])
        cluster_ip = spec.get("clusterIP")
        if cluster_ip and cluster_ip not in cluster_ips:
            cluster_ips.insert(0, cluster_ip)

        ingress = (status.get("loadBalancer") or {}).get("ingress") or []

        return cls(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace") or "default",
            type=spec.get("type") or "ClusterIP",
            cluster_ips=[ip for ip in cluster_ips if ip and ip != "None"],
            external_ips=list(spec.get("externalIPs") or []),
            load_balancer_ips=[i["ip"] for i in ingress if i.get("ip")],
            ports=[ServicePort.model_validate(p) for p in spec.get("ports") or []],
        )

    @property
    def addresses(self) -> list[str]:
        """Every IP this service answers on."""
        return [*self.cluster_ips, *self.external_ips, *self.load_balancer_ips]

    def matches_ip(self, ip: str) -> bool:
        """Return True if the service answers on ``ip``."""
        return ip in self.addresses

    def to_line(self) -> str:
        """Format as a single display line."""
        ports = ", ".join(str(p) for p in self.ports) or "-"
        cluster_ip = self.cluster_ips[0] if self.cluster_ips else "None"
        return f"{self.namespace}/{self.name}  {self.type}  {cluster_ip}  {ports}"
