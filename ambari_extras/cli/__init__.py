"""
ambari-extras CLI - Command line entry point.
"""

from ambari_extras.cli.main import cli, main

__all__ = ["cli", "main"]
