"""
Blueprint merging.

Folds extension contributions into an Ambari blueprint document::

    {
        "Blueprints": {...},
        "configurations": [{"<type>": {"properties": {...}}}, ...],
        "host_groups": [{"name": "<group>", "components": [{"name": "<component>"}]}]
    }

All helpers mutate and return the blueprint they are given.
"""

from __future__ import annotations

from typing import Any, Iterable

from loguru import logger

from ambari_extras.core.exceptions import InvalidConfigError
from ambari_extras.core.protocols import AmbariConfig
from ambari_extras.mapping.models import ComponentMapping

Blueprint = dict[str, Any]


def _find_host_group(blueprint: Blueprint, name: str) -> dict[str, Any] | None:
    for host_group in blueprint.get("host_groups", []):
        if host_group.get("name") == name:
            return host_group
    return None


def add_component_mappings(blueprint: Blueprint, mappings: Iterable[ComponentMapping]) -> Blueprint:
    """
    Add each mapped component to its host group.

    A component already present in a host group is not added twice.

    Raises:
        InvalidConfigError: If a mapping targets a host group the blueprint does not define.
    """
    for mapping in mappings:
        host_group = _find_host_group(blueprint, mapping.host)
        if host_group is None:
            defined = [hg.get("name") for hg in blueprint.get("host_groups", [])]
            raise InvalidConfigError(
                f"Component '{mapping.component}' is bound to unknown host group '{mapping.host}'",
                {"component": mapping.component, "host_group": mapping.host, "defined": defined},
            )

        components = host_group.setdefault("components", [])
        if any(c.get("name") == mapping.component for c in components):
            logger.debug(f"📐 {mapping.component} already in host group '{mapping.host}'")
            continue
        components.append(mapping.to_blueprint_component())

    return blueprint


def merge_configurations(blueprint: Blueprint, config: AmbariConfig) -> Blueprint:
    """
    Merge ``{type: properties}`` into the blueprint ``configurations`` list.

    Properties of a type already present are updated in place; later
    contributions win on conflicting keys.
    """
    configurations = blueprint.setdefault("configurations", [])

    for config_type, properties in config.items():
        existing = next((entry for entry in configurations if config_type in entry), None)
        if existing is None:
            configurations.append({config_type: {"properties": dict(properties)}})
            continue

        target = existing[config_type].setdefault("properties", {})
        overridden = sorted(set(target) & set(properties))
        if overridden:
            logger.debug(f"📐 Overriding {config_type} properties: {', '.join(overridden)}")
        target.update(properties)

    return blueprint


def empty_blueprint(host_groups: Iterable[str], stack_name: str = "HDP", stack_version: str = "2.3") -> Blueprint:
    """Minimal blueprint with one empty host group per name."""
    return {
        "Blueprints": {"stack_name": stack_name, "stack_version": stack_version},
        "configurations": [],
        "host_groups": [
            {"name": name, "components": [], "cardinality": "1"} for name in host_groups
        ],
    }
