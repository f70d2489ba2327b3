"""
ambari-extras Mapping - Component to host-group bindings.
"""

from ambari_extras.mapping.models import ComponentMapping
from ambari_extras.mapping.resolver import (
    MAPPING_DELIMITER,
    resolve,
    resolve_all,
    split_expression,
)

__all__ = [
    "MAPPING_DELIMITER",
    "ComponentMapping",
    "resolve",
    "resolve_all",
    "split_expression",
]
