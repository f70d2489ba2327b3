"""
ambari-extras - Extra services for Ambari-managed Hadoop clusters.

Lets optional services (Ranger, Knox, ...) join a cluster deployment:
their components are bound to host groups through mapping expressions
and their hooks run around the deployment itself.
"""
from importlib.metadata import PackageNotFoundError, version

from loguru import logger

try:
    __version__ = version("ambari-extras")
except PackageNotFoundError:
    # Package not installed, fallback to pyproject.toml
    __version__ = "0.1.0"

__author__ = "ambari-extras Contributors"

# Library stays silent until the application opts in (see utils.logger.setup_logger)
logger.disable("ambari_extras")
