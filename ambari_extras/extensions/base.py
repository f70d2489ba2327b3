"""
Base Extension - Abstract base class for all cluster extensions.

Implements the parts of the ClusterExtension contract that every
extension shares (mapping resolution, configuration accessors) and
leaves the two deploy hooks to subclasses.
"""

from __future__ import annotations

import copy
import warnings
from abc import ABC, abstractmethod
from typing import Any

from loguru import logger

from ambari_extras.config.models import ExtensionConfig
from ambari_extras.core.protocols import AmbariConfig, ClusterHandle
from ambari_extras.mapping.models import ComponentMapping
from ambari_extras.mapping.resolver import resolve_all


class BaseExtension(ABC):
    """
    Abstract base class for cluster extensions.

    Subclasses must implement ``pre_cluster_deploy`` and
    ``post_cluster_deploy``, and should override
    ``get_ambari_config(cluster)`` to contribute configuration.

    Args:
        config: Shared extension configuration (service name, binding,
            component mapping expressions).
        options: Implementation-specific options.
    """

    #: Component expressions used when the configuration lists none.
    default_components: tuple[str, ...] = ()

    def __init__(self, config: ExtensionConfig, options: dict[str, Any] | None = None) -> None:
        self.config = config
        self.options = dict(options or {})

    @property
    def service_name(self) -> str:
        """Service name reported to Ambari."""
        return self.config.service_name

    @property
    def component_expressions(self) -> tuple[str, ...]:
        """Configured mapping expressions, falling back to the defaults."""
        return self.config.component_names or self.default_components

    def get_component_mappings(self) -> list[ComponentMapping]:
        """
        Resolve the configured component expressions.

        Returns:
            Mappings in declaration order, duplicates preserved.

        Raises:
            MappingError: If an expression resolves to no host group.
        """
        return resolve_all(self.component_expressions, self.config.default_host_group)

    def get_legacy_ambari_config(self) -> AmbariConfig:
        """
        Configuration to pass to Ambari, without cluster context.

        Deprecated: override ``get_ambari_config(cluster)`` instead. The
        default ``get_ambari_config`` still calls this method.
        """
        return {}

    def get_ambari_config(self, cluster: ClusterHandle) -> AmbariConfig:
        """
        Configuration to pass to Ambari for the given cluster.

        The default implementation delegates to the legacy accessor so
        extensions written against it keep working.
        """
        if type(self).get_legacy_ambari_config is not BaseExtension.get_legacy_ambari_config:
            warnings.warn(
                f"{type(self).__name__}.get_legacy_ambari_config() is deprecated, "
                "override get_ambari_config(cluster) instead",
                DeprecationWarning,
                stacklevel=2,
            )
        return copy.deepcopy(self.get_legacy_ambari_config())

    @abstractmethod
    def pre_cluster_deploy(self, cluster: ClusterHandle) -> None:
        """
        Called once all agents and servers are installed, just before the
        cluster is deployed.

        Raises:
            ExtensionLifecycleError: To abort the deployment.
        """

    @abstractmethod
    def post_cluster_deploy(self, cluster: ClusterHandle) -> None:
        """
        Called once the cluster has been deployed.

        Raises:
            ExtensionLifecycleError: To report a failed post-deploy step.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(service_name={self.service_name!r})"


class NoOpHooksMixin:
    """Deploy hooks that only log. For configuration-only extensions."""

    def pre_cluster_deploy(self, cluster: ClusterHandle) -> None:
        logger.debug(f"⏭️ {self.service_name}: nothing to do before deploying {cluster.name}")

    def post_cluster_deploy(self, cluster: ClusterHandle) -> None:
        logger.debug(f"⏭️ {self.service_name}: nothing to do after deploying {cluster.name}")
