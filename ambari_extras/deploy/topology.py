"""
Static cluster topology.

An in-memory ClusterHandle built from a TopologyConfig. The
orchestrator normally supplies its own handle; this one backs the CLI
and tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from ambari_extras.config.models import TopologyConfig


@dataclass(frozen=True)
class ClusterTopology:
    """Read-only cluster view: host groups, their hosts, and attributes."""

    name: str
    groups: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the mappings so extensions cannot alter the topology
        object.__setattr__(
            self,
            "groups",
            MappingProxyType({group: tuple(hosts) for group, hosts in self.groups.items()}),
        )
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @classmethod
    def from_config(cls, config: TopologyConfig) -> ClusterTopology:
        return cls(name=config.name, groups=config.host_groups, attributes=config.attributes)

    def host_groups(self) -> list[str]:
        return list(self.groups)

    def hosts_in_group(self, host_group: str) -> list[str]:
        return list(self.groups.get(host_group, ()))

    def attribute(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)
