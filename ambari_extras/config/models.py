"""
ambari-extras Config - Configuration models.

Pydantic models for type-safe extension configuration. Field aliases
match the configuration keys used in extension definition files
(``bindTo``, ``serviceName``, ``componentNames``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExtensionConfig(BaseModel):
    """Configuration shared by every extension.

    Example YAML:
        serviceName: RANGER
        bindTo: master
        componentNames:
          - RANGER_ADMIN
          - RANGER_USERSYNC|edge
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    bind_to: str | None = Field(
        default=None,
        alias="bindTo",
        description="Host group used for component names without an explicit '|<host-group>'",
    )
    service_name: str = Field(
        alias="serviceName",
        min_length=1,
        description="Name of the service, as identified by Ambari",
    )
    component_names: tuple[str, ...] = Field(
        default=(),
        alias="componentNames",
        description="Mapping expressions of form <component>|<hostGroup> or <component>",
    )

    @field_validator("service_name")
    @classmethod
    def _service_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("serviceName must not be blank")
        return value.strip()

    @property
    def default_host_group(self) -> str:
        """Default host group for unqualified mappings ("" when unbound)."""
        return self.bind_to or ""


class ExtensionDefinition(ExtensionConfig):
    """One entry of an extensions file: config plus implementation selection.

    Unknown keys are rejected, so a misspelled key such as ``componentName``
    fails loading instead of being dropped.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    type: str = Field(default="generic", min_length=1, description="Registered extension type")
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Implementation-specific options",
    )

    def to_config(self) -> ExtensionConfig:
        """Strip the implementation selection, keeping the shared keys."""
        return ExtensionConfig(
            bind_to=self.bind_to,
            service_name=self.service_name,
            component_names=self.component_names,
        )


class ExtensionsFile(BaseModel):
    """Top-level document of an extensions YAML file."""

    extensions: list[ExtensionDefinition] = Field(default_factory=list)


class TopologyConfig(BaseModel):
    """Static description of a cluster topology.

    Example YAML:
        name: analytics
        host_groups:
          master: [master-1.example.com]
          edge: [edge-1.example.com, edge-2.example.com]
        attributes:
          ambari.server.host: master-1.example.com
    """

    name: str = Field(min_length=1, description="Cluster name")
    host_groups: dict[str, list[str]] = Field(default_factory=dict)
    attributes: dict[str, Any] = Field(default_factory=dict)
