"""
Extension lifecycle tracking.

Wraps one extension and enforces the order in which the orchestrator
drives it::

    CONFIGURED -> MAPPINGS_RESOLVED -> PRE_DEPLOYED -> DEPLOYED -> POST_DEPLOYED

Each step runs at most once. A step that raises aborts the lifecycle:
the exception propagates unchanged and every later step is refused.
There is no rollback state.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from loguru import logger

from ambari_extras.core.exceptions import LifecycleOrderError
from ambari_extras.core.protocols import ClusterExtension, ClusterHandle
from ambari_extras.core.types import LifecycleState
from ambari_extras.mapping.models import ComponentMapping
from ambari_extras.utils.logger import log_prefix


class ExtensionLifecycle:
    """
    Per-extension state machine driven by the deployment coordinator.

    Example:
        >>> lifecycle = ExtensionLifecycle(extension)
        >>> mappings = lifecycle.resolve_mappings()
        >>> lifecycle.pre_deploy(cluster)
        >>> lifecycle.mark_deployed()
        >>> lifecycle.post_deploy(cluster)
    """

    def __init__(self, extension: ClusterExtension) -> None:
        self.extension = extension
        self.state = LifecycleState.CONFIGURED
        self.mappings: list[ComponentMapping] = []
        self.error: BaseException | None = None
        self._lock = threading.Lock()

    @property
    def service_name(self) -> str:
        return self.extension.service_name

    @property
    def aborted(self) -> bool:
        """Whether a step failed; no further step will run."""
        return self.error is not None

    @contextmanager
    def _step(self, step: str, expected: LifecycleState, target: LifecycleState) -> Iterator[None]:
        # Concurrent invocation on the same extension is refused, not queued
        if not self._lock.acquire(blocking=False):
            raise LifecycleOrderError(self.service_name, step, self.state, "another step is running")
        try:
            if self.aborted:
                raise LifecycleOrderError(
                    self.service_name, step, self.state, f"aborted after {type(self.error).__name__}"
                )
            if self.state != expected:
                raise LifecycleOrderError(
                    self.service_name, step, self.state, f"expected state '{expected}'"
                )
            try:
                yield
            except BaseException as e:
                self.error = e
                logger.error(f"{log_prefix('❌')} {self.service_name}: {step} failed: {e}")
                raise
            self.state = target
            logger.debug(f"🧩 {self.service_name}: {expected} -> {target}")
        finally:
            self._lock.release()

    def resolve_mappings(self) -> list[ComponentMapping]:
        """Resolve the extension's component mappings."""
        with self._step("resolve_mappings", LifecycleState.CONFIGURED, LifecycleState.MAPPINGS_RESOLVED):
            self.mappings = list(self.extension.get_component_mappings())
        return self.mappings

    def pre_deploy(self, cluster: ClusterHandle) -> None:
        """Run the pre-cluster-deploy hook."""
        with self._step("pre_cluster_deploy", LifecycleState.MAPPINGS_RESOLVED, LifecycleState.PRE_DEPLOYED):
            self.extension.pre_cluster_deploy(cluster)

    def mark_deployed(self) -> None:
        """Record that the cluster manager reported the deployment complete."""
        with self._step("deploy", LifecycleState.PRE_DEPLOYED, LifecycleState.DEPLOYED):
            pass

    def post_deploy(self, cluster: ClusterHandle) -> None:
        """Run the post-cluster-deploy hook."""
        with self._step("post_cluster_deploy", LifecycleState.DEPLOYED, LifecycleState.POST_DEPLOYED):
            self.extension.post_cluster_deploy(cluster)

    def __repr__(self) -> str:
        return f"ExtensionLifecycle(service_name={self.service_name!r}, state={self.state!r})"
