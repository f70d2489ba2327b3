"""
ambari-extras Config - Loader.

Loads extension definitions, cluster topologies and base blueprints
from YAML (or JSON, which is valid YAML) files. Unlike optional
resources, a broken deployment file must abort setup: every failure is
raised as InvalidConfigError.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from ambari_extras.config.models import ExtensionDefinition, ExtensionsFile, TopologyConfig
from ambari_extras.core.exceptions import InvalidConfigError


def _read_yaml(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as f:
            return yaml.safe_load(f)
    except OSError as e:
        raise InvalidConfigError(f"Cannot read {path}: {e}", {"path": str(path)}) from e
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"Invalid YAML in {path}: {e}", {"path": str(path)}) from e


def parse_extensions(data: Any, source: str = "<string>") -> list[ExtensionDefinition]:
    """
    Validate raw extensions data.

    Accepts either ``{"extensions": [...]}`` or a bare list of definitions.

    Raises:
        InvalidConfigError: If the data does not match the schema.
    """
    if data is None:
        logger.warning(f"⚠️ Empty extensions file: {source}")
        return []
    if isinstance(data, list):
        data = {"extensions": data}

    try:
        document = ExtensionsFile.model_validate(data)
    except ValidationError as e:
        raise InvalidConfigError(f"Invalid extensions config in {source}: {e}", {"path": source}) from e

    logger.debug(f"📄 Loaded {len(document.extensions)} extension definitions from {source}")
    return document.extensions


def load_extensions_file(path: Path) -> list[ExtensionDefinition]:
    """Load extension definitions from a YAML file."""
    return parse_extensions(_read_yaml(path), source=str(path))


def load_extensions_string(content: str) -> list[ExtensionDefinition]:
    """Load extension definitions from YAML content."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"Invalid YAML: {e}") from e
    return parse_extensions(data)


def load_topology_file(path: Path) -> TopologyConfig:
    """Load a cluster topology description from a YAML file."""
    data = _read_yaml(path)
    try:
        return TopologyConfig.model_validate(data or {})
    except ValidationError as e:
        raise InvalidConfigError(f"Invalid topology in {path}: {e}", {"path": str(path)}) from e


def load_blueprint_file(path: Path) -> dict[str, Any]:
    """Load a base blueprint document from a YAML or JSON file."""
    data = _read_yaml(path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigError(
            f"Blueprint in {path} must be a mapping, got {type(data).__name__}",
            {"path": str(path)},
        )
    return data
