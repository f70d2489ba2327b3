"""
ambari-extras Core - Errors, shared types and protocols.
"""

from ambari_extras.core.exceptions import (
    AmbariExtrasError,
    ConfigurationError,
    ExtensionError,
    ExtensionLifecycleError,
    ExtensionNotFoundError,
    InvalidArgumentError,
    InvalidConfigError,
    LifecycleOrderError,
    MappingError,
    ValidationError,
)
from ambari_extras.core.protocols import AmbariConfig, ClusterExtension, ClusterHandle
from ambari_extras.core.types import DeployPhase, LifecycleState

__all__ = [
    "AmbariConfig",
    "AmbariExtrasError",
    "ClusterExtension",
    "ClusterHandle",
    "ConfigurationError",
    "DeployPhase",
    "ExtensionError",
    "ExtensionLifecycleError",
    "ExtensionNotFoundError",
    "InvalidArgumentError",
    "InvalidConfigError",
    "LifecycleOrderError",
    "LifecycleState",
    "MappingError",
    "ValidationError",
]
