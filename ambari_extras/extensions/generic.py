"""
Generic Extension - configuration-only extra service.

Adds components to host groups and passes a static configuration
block to Ambari. Useful for services that need no setup around the
deployment itself.

Example YAML:
    type: generic
    serviceName: KNOX
    bindTo: edge
    componentNames: [KNOX_GATEWAY]
    options:
      configurations:
        gateway-site:
          gateway.port: "8443"
"""

from __future__ import annotations

import copy
from typing import Any

from ambari_extras.core.exceptions import InvalidConfigError
from ambari_extras.core.protocols import AmbariConfig, ClusterHandle
from ambari_extras.extensions.base import BaseExtension, NoOpHooksMixin


class GenericExtension(NoOpHooksMixin, BaseExtension):
    """Configuration-only extension driven entirely by its definition."""

    def __init__(self, config, options: dict[str, Any] | None = None) -> None:
        super().__init__(config, options)
        configurations = self.options.get("configurations", {})
        if not isinstance(configurations, dict) or not all(
            isinstance(props, dict) for props in configurations.values()
        ):
            raise InvalidConfigError(
                f"'configurations' of extension '{self.service_name}' must map "
                "configuration types to property mappings",
                {"service_name": self.service_name},
            )
        self._configurations: AmbariConfig = configurations

    def get_ambari_config(self, cluster: ClusterHandle) -> AmbariConfig:
        return copy.deepcopy(self._configurations)
