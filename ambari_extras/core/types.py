"""
ambari-extras Core - Shared types and enums.
"""

from __future__ import annotations

from enum import StrEnum


class LifecycleState(StrEnum):
    """Extension lifecycle state, as observed by the orchestrator."""

    CONFIGURED = "configured"
    MAPPINGS_RESOLVED = "mappings_resolved"
    PRE_DEPLOYED = "pre_deployed"
    DEPLOYED = "deployed"
    POST_DEPLOYED = "post_deployed"


class DeployPhase(StrEnum):
    """Hook points of the deployment lifecycle."""

    PRE_CLUSTER_DEPLOY = "pre_cluster_deploy"
    POST_CLUSTER_DEPLOY = "post_cluster_deploy"
