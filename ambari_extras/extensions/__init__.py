"""
ambari-extras Extensions - Extra services for the Hadoop cluster.
"""

from ambari_extras.extensions.base import BaseExtension, NoOpHooksMixin
from ambari_extras.extensions.generic import GenericExtension
from ambari_extras.extensions.ranger import RangerExtension, RangerOptions
from ambari_extras.extensions.registry import (
    ExtensionRegistry,
    build_extensions,
    get_extension_registry,
    register_builtin_extensions,
)

__all__ = [
    "BaseExtension",
    "ExtensionRegistry",
    "GenericExtension",
    "NoOpHooksMixin",
    "RangerExtension",
    "RangerOptions",
    "build_extensions",
    "get_extension_registry",
    "register_builtin_extensions",
]
