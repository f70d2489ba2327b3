"""
Ranger Extension - access-control service for the Hadoop cluster.

Installs the Ranger admin and usersync components and supplies the
database and policy-manager settings Ambari needs to deploy them.

Example YAML:
    type: ranger
    serviceName: RANGER
    bindTo: master
    componentNames:
      - RANGER_ADMIN
      - RANGER_USERSYNC|edge
    options:
      db_host: mysql.example.com
      db_root_password: s3cret
      db_password: rangeradmin
"""

from __future__ import annotations

from typing import Any, Literal

from loguru import logger
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from ambari_extras.config.models import ExtensionConfig
from ambari_extras.core.exceptions import ExtensionLifecycleError, InvalidConfigError
from ambari_extras.core.protocols import AmbariConfig, ClusterHandle
from ambari_extras.core.types import DeployPhase
from ambari_extras.extensions.base import BaseExtension
from ambari_extras.utils.logger import log_prefix

RANGER_ADMIN = "RANGER_ADMIN"
RANGER_USERSYNC = "RANGER_USERSYNC"


class RangerOptions(BaseModel):
    """Ranger-specific options."""

    db_flavor: Literal["MYSQL", "POSTGRES", "ORACLE", "MSSQL"] = Field(
        default="MYSQL", description="Ranger policy database flavor"
    )
    db_host: str | None = Field(
        default=None, description="Database host (defaults to the Ranger admin host)"
    )
    db_root_user: str = Field(default="root", min_length=1, description="Database admin user")
    db_root_password: str = Field(default="", description="Database admin password")
    db_name: str = Field(default="ranger", min_length=1, description="Ranger database name")
    db_user: str = Field(default="rangeradmin", min_length=1, description="Ranger database user")
    db_password: str = Field(default="", description="Ranger database user password")
    admin_port: int = Field(default=6080, ge=1, le=65535, description="Policy manager HTTP port")
    create_db_user: bool = Field(default=True, description="Let Ambari create the database user")


class RangerExtension(BaseExtension):
    """Apache Ranger access-control service."""

    default_components = (RANGER_ADMIN, RANGER_USERSYNC)

    def __init__(self, config: ExtensionConfig, options: dict[str, Any] | None = None) -> None:
        super().__init__(config, options)
        try:
            self.ranger_options = RangerOptions.model_validate(self.options)
        except PydanticValidationError as e:
            raise InvalidConfigError(
                f"Invalid options for extension '{self.service_name}': {e}",
                {"service_name": self.service_name},
            ) from e

    def _admin_host_group(self) -> str | None:
        for mapping in self.get_component_mappings():
            if mapping.component == RANGER_ADMIN:
                return mapping.host
        return None

    def _admin_host(self, cluster: ClusterHandle) -> str:
        host_group = self._admin_host_group()
        if host_group is None:
            raise InvalidConfigError(
                f"Extension '{self.service_name}' does not install {RANGER_ADMIN}",
                {"service_name": self.service_name},
            )
        hosts = cluster.hosts_in_group(host_group)
        if not hosts:
            raise InvalidConfigError(
                f"Host group '{host_group}' of cluster '{cluster.name}' has no hosts for {RANGER_ADMIN}",
                {"service_name": self.service_name, "host_group": host_group},
            )
        return hosts[0]

    def policy_manager_url(self, cluster: ClusterHandle) -> str:
        """External URL of the Ranger policy manager."""
        return f"http://{self._admin_host(cluster)}:{self.ranger_options.admin_port}"

    def get_ambari_config(self, cluster: ClusterHandle) -> AmbariConfig:
        opts = self.ranger_options
        admin_host = self._admin_host(cluster)
        url = f"http://{admin_host}:{opts.admin_port}"

        return {
            "admin-properties": {
                "DB_FLAVOR": opts.db_flavor,
                "db_host": opts.db_host or admin_host,
                "db_root_user": opts.db_root_user,
                "db_root_password": opts.db_root_password,
                "db_name": opts.db_name,
                "db_user": opts.db_user,
                "db_password": opts.db_password,
                "policymgr_external_url": url,
            },
            "ranger-admin-site": {
                "ranger.externalurl": url,
                "ranger.service.http.port": str(opts.admin_port),
            },
            "ranger-env": {
                "create_db_dbuser": str(opts.create_db_user).lower(),
            },
        }

    def pre_cluster_deploy(self, cluster: ClusterHandle) -> None:
        phase = DeployPhase.PRE_CLUSTER_DEPLOY
        host_group = self._admin_host_group()
        if host_group is None:
            raise ExtensionLifecycleError(
                f"{RANGER_ADMIN} is not part of the component list",
                service_name=self.service_name,
                phase=phase,
            )
        if host_group not in cluster.host_groups():
            raise ExtensionLifecycleError(
                f"Host group '{host_group}' for {RANGER_ADMIN} does not exist in cluster '{cluster.name}'",
                service_name=self.service_name,
                phase=phase,
            )
        if not cluster.hosts_in_group(host_group):
            raise ExtensionLifecycleError(
                f"Host group '{host_group}' for {RANGER_ADMIN} has no hosts",
                service_name=self.service_name,
                phase=phase,
            )
        if not self.ranger_options.db_password or not self.ranger_options.db_root_password:
            raise ExtensionLifecycleError(
                "Both 'db_password' and 'db_root_password' must be set for the Ranger database",
                service_name=self.service_name,
                phase=phase,
            )

        logger.info(
            f"{log_prefix('🛡️')} {self.service_name}: {RANGER_ADMIN} will be installed on "
            f"host group '{host_group}' ({self.ranger_options.db_flavor} database)"
        )

    def post_cluster_deploy(self, cluster: ClusterHandle) -> None:
        logger.info(
            f"{log_prefix('✅')} {self.service_name}: policy manager available at "
            f"{self.policy_manager_url(cluster)}"
        )
