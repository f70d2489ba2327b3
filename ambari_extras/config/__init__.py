"""
ambari-extras Config - Configuration management.
"""

from ambari_extras.config.loader import (
    load_blueprint_file,
    load_extensions_file,
    load_extensions_string,
    load_topology_file,
    parse_extensions,
)
from ambari_extras.config.models import (
    ExtensionConfig,
    ExtensionDefinition,
    ExtensionsFile,
    TopologyConfig,
)

__all__ = [
    "ExtensionConfig",
    "ExtensionDefinition",
    "ExtensionsFile",
    "TopologyConfig",
    "load_blueprint_file",
    "load_extensions_file",
    "load_extensions_string",
    "load_topology_file",
    "parse_extensions",
]
