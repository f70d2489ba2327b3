"""
ambari-extras Deploy - Running extensions around a cluster deployment.
"""

from ambari_extras.deploy.blueprint import (
    Blueprint,
    add_component_mappings,
    empty_blueprint,
    merge_configurations,
)
from ambari_extras.deploy.coordinator import DeploymentCoordinator, DeploymentResult
from ambari_extras.deploy.lifecycle import ExtensionLifecycle
from ambari_extras.deploy.topology import ClusterTopology

__all__ = [
    "Blueprint",
    "ClusterTopology",
    "DeploymentCoordinator",
    "DeploymentResult",
    "ExtensionLifecycle",
    "add_component_mappings",
    "empty_blueprint",
    "merge_configurations",
]
