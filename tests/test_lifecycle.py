"""
Tests for the per-extension lifecycle state machine.
"""
import threading

import pytest

from ambari_extras.core.exceptions import ExtensionLifecycleError, LifecycleOrderError, MappingError
from ambari_extras.core.types import LifecycleState
from ambari_extras.deploy.lifecycle import ExtensionLifecycle


class TestExtensionLifecycle:
    """Tests for ExtensionLifecycle ordering."""

    def test_full_lifecycle(self, make_extension, cluster):
        """Steps advance through every state in order."""
        extension = make_extension()
        lifecycle = ExtensionLifecycle(extension)
        assert lifecycle.state == LifecycleState.CONFIGURED

        mappings = lifecycle.resolve_mappings()
        assert lifecycle.state == LifecycleState.MAPPINGS_RESOLVED
        assert [m.component for m in mappings] == ["KNOX_GATEWAY"]

        lifecycle.pre_deploy(cluster)
        assert lifecycle.state == LifecycleState.PRE_DEPLOYED

        lifecycle.mark_deployed()
        assert lifecycle.state == LifecycleState.DEPLOYED

        lifecycle.post_deploy(cluster)
        assert lifecycle.state == LifecycleState.POST_DEPLOYED
        assert extension.journal == [("KNOX", "pre"), ("KNOX", "post")]

    def test_post_before_pre_refused(self, make_extension, cluster):
        """Post hook cannot run before the pre hook completed."""
        extension = make_extension()
        lifecycle = ExtensionLifecycle(extension)
        lifecycle.resolve_mappings()

        with pytest.raises(LifecycleOrderError) as exc_info:
            lifecycle.post_deploy(cluster)

        assert exc_info.value.step == "post_cluster_deploy"
        assert extension.journal == []
        assert not lifecycle.aborted

    def test_pre_before_mappings_refused(self, make_extension, cluster):
        lifecycle = ExtensionLifecycle(make_extension())

        with pytest.raises(LifecycleOrderError):
            lifecycle.pre_deploy(cluster)

    def test_hook_runs_once(self, make_extension, cluster):
        """A second pre hook call is refused."""
        extension = make_extension()
        lifecycle = ExtensionLifecycle(extension)
        lifecycle.resolve_mappings()
        lifecycle.pre_deploy(cluster)

        with pytest.raises(LifecycleOrderError):
            lifecycle.pre_deploy(cluster)

        assert extension.journal == [("KNOX", "pre")]

    def test_failed_pre_blocks_post(self, make_extension, cluster):
        """If the pre hook fails, the post hook is never invoked."""
        extension = make_extension(fail_on="pre")
        lifecycle = ExtensionLifecycle(extension)
        lifecycle.resolve_mappings()

        with pytest.raises(ExtensionLifecycleError):
            lifecycle.pre_deploy(cluster)

        assert lifecycle.aborted
        assert isinstance(lifecycle.error, ExtensionLifecycleError)
        assert lifecycle.state == LifecycleState.MAPPINGS_RESOLVED

        with pytest.raises(LifecycleOrderError):
            lifecycle.mark_deployed()
        with pytest.raises(LifecycleOrderError):
            lifecycle.post_deploy(cluster)
        with pytest.raises(LifecycleOrderError, match="aborted"):
            lifecycle.pre_deploy(cluster)

        assert extension.journal == [("KNOX", "pre")]

    def test_mapping_error_aborts(self, make_extension):
        """Mapping errors propagate and abort the lifecycle."""
        lifecycle = ExtensionLifecycle(make_extension(bind_to=None))

        with pytest.raises(MappingError):
            lifecycle.resolve_mappings()

        assert lifecycle.aborted
        assert lifecycle.state == LifecycleState.CONFIGURED

    def test_concurrent_hook_refused(self, make_extension, cluster):
        """A hook cannot be entered while another step is running."""
        entered = threading.Event()
        release = threading.Event()
        extension = make_extension()

        def slow_pre(_cluster):
            entered.set()
            release.wait(timeout=5)

        extension.pre_cluster_deploy = slow_pre
        lifecycle = ExtensionLifecycle(extension)
        lifecycle.resolve_mappings()

        worker = threading.Thread(target=lifecycle.pre_deploy, args=(cluster,))
        worker.start()
        try:
            assert entered.wait(timeout=5)
            with pytest.raises(LifecycleOrderError, match="another step is running"):
                lifecycle.pre_deploy(cluster)
        finally:
            release.set()
            worker.join()

        assert lifecycle.state == LifecycleState.PRE_DEPLOYED
        assert not lifecycle.aborted
