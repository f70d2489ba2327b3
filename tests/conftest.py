"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest
from loguru import logger

from ambari_extras.config.models import ExtensionConfig
from ambari_extras.core.exceptions import ExtensionLifecycleError
from ambari_extras.deploy.blueprint import empty_blueprint
from ambari_extras.deploy.topology import ClusterTopology
from ambari_extras.extensions.base import BaseExtension
from ambari_extras.extensions.registry import ExtensionRegistry
from ambari_extras.utils import log_config
from ambari_extras.utils.log_config import reset_log_config


class RecordingExtension(BaseExtension):
    """Extension that records every hook call into a shared journal."""

    def __init__(self, config, options=None, journal=None, fail_on=None):
        super().__init__(config, options)
        self.journal = journal if journal is not None else []
        self.fail_on = fail_on

    def get_ambari_config(self, cluster):
        return {f"{self.service_name.lower()}-site": {"cluster": cluster.name}}

    def pre_cluster_deploy(self, cluster):
        self.journal.append((self.service_name, "pre"))
        if self.fail_on == "pre":
            raise ExtensionLifecycleError("pre failed", service_name=self.service_name, phase="pre")

    def post_cluster_deploy(self, cluster):
        self.journal.append((self.service_name, "post"))
        if self.fail_on == "post":
            raise ExtensionLifecycleError("post failed", service_name=self.service_name, phase="post")


@pytest.fixture(autouse=True)
def reset_registry():
    """Reset the extension registry singleton around each test."""
    ExtensionRegistry.reset_instance()
    yield
    ExtensionRegistry.reset_instance()


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    """Keep log files and settings out of the home directory."""
    monkeypatch.setenv("AMBARI_EXTRAS_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setattr(log_config, "CONFIG_FILE", tmp_path / "log_config.json")
    reset_log_config()
    yield
    logger.remove()
    reset_log_config()


@pytest.fixture
def cluster() -> ClusterTopology:
    """Three host-group cluster."""
    return ClusterTopology(
        name="analytics",
        groups={
            "master": ["master-1.example.com"],
            "worker": ["worker-1.example.com", "worker-2.example.com"],
            "edge": ["edge-1.example.com"],
        },
        attributes={"ambari.server.host": "master-1.example.com"},
    )


@pytest.fixture
def base_blueprint(cluster) -> dict:
    """Empty blueprint matching the cluster host groups."""
    return empty_blueprint(cluster.host_groups())


@pytest.fixture
def make_extension():
    """Factory for RecordingExtension instances."""

    def factory(service_name="KNOX", components=("KNOX_GATEWAY",), bind_to="edge", **kwargs):
        config = ExtensionConfig(
            service_name=service_name,
            bind_to=bind_to,
            component_names=components,
        )
        return RecordingExtension(config, **kwargs)

    return factory
