"""
Deployment coordinator.

Drives a registered list of extensions through one cluster deployment:

1. resolve every extension's component mappings
2. run every ``pre_cluster_deploy`` hook
3. merge mappings and configuration payloads into the blueprint
4. hand the blueprint to the caller's deploy function
5. run every ``post_cluster_deploy`` hook

Extensions are processed sequentially in registration order. Any error
aborts the deployment and propagates to the caller unchanged; post
hooks never run once a pre hook or the deployment itself has failed.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from loguru import logger

from ambari_extras.core.exceptions import ExtensionError, InvalidConfigError, LifecycleOrderError
from ambari_extras.core.protocols import ClusterExtension, ClusterHandle
from ambari_extras.core.types import LifecycleState
from ambari_extras.deploy.blueprint import Blueprint, add_component_mappings, merge_configurations
from ambari_extras.deploy.lifecycle import ExtensionLifecycle
from ambari_extras.mapping.models import ComponentMapping
from ambari_extras.utils.logger import log_prefix
from ambari_extras.utils.security import redact_config

DeployFunction = Callable[[Blueprint], Any]


@dataclass
class DeploymentResult:
    """Outcome of a successful deployment."""

    cluster_name: str
    blueprint: Blueprint
    mappings: dict[str, list[ComponentMapping]] = field(default_factory=dict)
    deploy_output: Any = None

    @property
    def services(self) -> list[str]:
        return list(self.mappings)


class DeploymentCoordinator:
    """
    Runs the extension lifecycle around one cluster deployment.

    Args:
        extensions: Extensions in registration order.
        cluster: Read-only handle on the cluster being deployed.

    Raises:
        ExtensionError: If an object does not implement ClusterExtension.
        InvalidConfigError: If two extensions report the same service name.
    """

    def __init__(self, extensions: Iterable[ClusterExtension], cluster: ClusterHandle) -> None:
        self.cluster = cluster
        self.lifecycles: list[ExtensionLifecycle] = []

        seen: set[str] = set()
        for extension in extensions:
            if not isinstance(extension, ClusterExtension):
                raise ExtensionError(
                    f"{type(extension).__name__} does not implement the cluster extension contract"
                )
            if extension.service_name in seen:
                raise InvalidConfigError(
                    f"Service '{extension.service_name}' is provided by more than one extension",
                    {"service_name": extension.service_name},
                )
            seen.add(extension.service_name)
            self.lifecycles.append(ExtensionLifecycle(extension))

    @property
    def extensions(self) -> list[ClusterExtension]:
        return [lifecycle.extension for lifecycle in self.lifecycles]

    def states(self) -> dict[str, LifecycleState]:
        """Current lifecycle state per service."""
        return {lifecycle.service_name: lifecycle.state for lifecycle in self.lifecycles}

    def resolve_mappings(self) -> dict[str, list[ComponentMapping]]:
        """
        Resolve the component mappings of every extension.

        Raises:
            MappingError: On the first unresolvable expression.
        """
        return {lifecycle.service_name: lifecycle.resolve_mappings() for lifecycle in self.lifecycles}

    def run_pre_deploy(self) -> None:
        """Run every pre-cluster-deploy hook, stopping at the first failure."""
        for lifecycle in self.lifecycles:
            logger.info(f"🧩 {lifecycle.service_name}: pre cluster deploy on {self.cluster.name}")
            lifecycle.pre_deploy(self.cluster)

    def build_blueprint(self, base: Blueprint | None = None) -> Blueprint:
        """
        Merge every extension's mappings and configuration into a copy of ``base``.

        Raises:
            LifecycleOrderError: If mappings have not been resolved yet.
            InvalidConfigError: If a mapping targets an unknown host group.
        """
        blueprint = copy.deepcopy(base) if base else {}

        for lifecycle in self.lifecycles:
            if lifecycle.state == LifecycleState.CONFIGURED:
                raise LifecycleOrderError(
                    lifecycle.service_name, "build_blueprint", lifecycle.state, "mappings not resolved"
                )
            add_component_mappings(blueprint, lifecycle.mappings)

            config = lifecycle.extension.get_ambari_config(self.cluster)
            merge_configurations(blueprint, config)
            logger.debug(f"📐 {lifecycle.service_name} configuration: {redact_config(config)}")

        return blueprint

    def mark_deployed(self) -> None:
        for lifecycle in self.lifecycles:
            lifecycle.mark_deployed()

    def run_post_deploy(self) -> None:
        """Run every post-cluster-deploy hook, stopping at the first failure."""
        for lifecycle in self.lifecycles:
            logger.info(f"🧩 {lifecycle.service_name}: post cluster deploy on {self.cluster.name}")
            lifecycle.post_deploy(self.cluster)

    def deploy(self, deploy_fn: DeployFunction, base_blueprint: Blueprint | None = None) -> DeploymentResult:
        """
        Run the full lifecycle around ``deploy_fn``.

        Args:
            deploy_fn: Called once with the merged blueprint; performs the
                actual deployment through the cluster-management API and
                returns once the deployment is complete.
            base_blueprint: Blueprint of the base services (not modified).

        Returns:
            DeploymentResult with the blueprint that was deployed.
        """
        logger.info(
            f"{log_prefix('🚀')} Deploying cluster {self.cluster.name} "
            f"with {len(self.lifecycles)} extensions"
        )

        mappings = self.resolve_mappings()
        self.run_pre_deploy()
        blueprint = self.build_blueprint(base_blueprint)

        try:
            output = deploy_fn(blueprint)
        except Exception as e:
            logger.error(f"{log_prefix('❌')} Deployment of cluster {self.cluster.name} failed: {e}")
            raise

        self.mark_deployed()
        self.run_post_deploy()

        logger.info(f"{log_prefix('✅')} Cluster {self.cluster.name} deployed")
        return DeploymentResult(
            cluster_name=self.cluster.name,
            blueprint=blueprint,
            mappings=mappings,
            deploy_output=output,
        )
