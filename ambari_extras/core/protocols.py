"""
Core Protocols - Interfaces for the deployment collaborators.

Follows LSP and DIP principles: the coordinator depends on these
abstractions, never on a concrete extension or cluster implementation.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ambari_extras.mapping.models import ComponentMapping

# Nested configuration payload: {config-type: {property: value}}
AmbariConfig = dict[str, dict[str, Any]]


# =============================================================================
# Cluster Handle Protocol
# =============================================================================

@runtime_checkable
class ClusterHandle(Protocol):
    """
    Read-only view of the cluster being deployed.

    Supplied by the orchestrator to ``get_ambari_config`` and to both
    deploy hooks. Implementations must not let extensions mutate topology.
    """
    name: str

    def host_groups(self) -> list[str]:
        """Names of all host groups in the topology."""
        ...

    def hosts_in_group(self, host_group: str) -> list[str]:
        """Hostnames assigned to a host group (empty if unknown)."""
        ...

    def attribute(self, key: str, default: Any = None) -> Any:
        """Runtime attribute published by the cluster or its entities."""
        ...


# =============================================================================
# Cluster Extension Protocol
# =============================================================================

@runtime_checkable
class ClusterExtension(Protocol):
    """
    Protocol for all cluster extensions.

    An extension is assured to be called at two points of the deployment:

    - ``pre_cluster_deploy`` once all agents and servers are installed,
      just before the cluster itself is deployed.
    - ``post_cluster_deploy`` once the cluster has been deployed.

    Hooks signal failure by raising ``ExtensionLifecycleError``.
    """
    service_name: str

    def get_component_mappings(self) -> list[ComponentMapping]:
        """Resolved component <-> host-group mappings, in declaration order."""
        ...

    def get_ambari_config(self, cluster: ClusterHandle) -> AmbariConfig:
        """Configuration payload to merge into the cluster blueprint."""
        ...

    def pre_cluster_deploy(self, cluster: ClusterHandle) -> None:
        """Called just before the cluster is deployed."""
        ...

    def post_cluster_deploy(self, cluster: ClusterHandle) -> None:
        """Called just after the cluster has been deployed."""
        ...
