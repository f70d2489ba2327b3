"""
ambari-extras CLI.

Offline inspection of extension definitions: resolved mappings, the
merged blueprint, and the registered extension types. No deploy hooks
run and nothing is sent to Ambari.
"""
import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ambari_extras import __version__
from ambari_extras.config.loader import load_blueprint_file, load_extensions_file, load_topology_file
from ambari_extras.core.exceptions import AmbariExtrasError
from ambari_extras.deploy.blueprint import empty_blueprint
from ambari_extras.deploy.coordinator import DeploymentCoordinator
from ambari_extras.deploy.topology import ClusterTopology
from ambari_extras.extensions.registry import (
    build_extensions,
    get_extension_registry,
    register_builtin_extensions,
)
from ambari_extras.utils.logger import setup_logger
from ambari_extras.utils.security import redact_config

console = Console()
err_console = Console(stderr=True)

_file_argument = click.Path(exists=True, dir_okay=False, path_type=Path)


def _fail(error: AmbariExtrasError) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    sys.exit(1)


@click.group()
@click.version_option(__version__, prog_name="ambari-extras")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Inspect extra services for Ambari cluster deployments."""
    try:
        setup_logger(verbose=verbose)
    except AmbariExtrasError as e:
        _fail(e)
    register_builtin_extensions()


@cli.command()
@click.argument("extensions_file", type=_file_argument)
def mappings(extensions_file: Path) -> None:
    """Show the component to host-group mappings of EXTENSIONS_FILE."""
    try:
        extensions = build_extensions(load_extensions_file(extensions_file))
        rows = [
            (extension.service_name, mapping.component, mapping.host)
            for extension in extensions
            for mapping in extension.get_component_mappings()
        ]
    except AmbariExtrasError as e:
        _fail(e)
        return

    table = Table(title="Component mappings")
    table.add_column("Service", style="cyan")
    table.add_column("Component", style="green")
    table.add_column("Host group", style="magenta")
    for row in rows:
        table.add_row(*row)
    console.print(table)


@cli.command()
@click.argument("extensions_file", type=_file_argument)
@click.option("--topology", "topology_file", type=_file_argument, required=True,
              help="Cluster topology YAML file.")
@click.option("--base", "base_file", type=_file_argument, default=None,
              help="Base blueprint (YAML or JSON). Defaults to empty host groups from the topology.")
@click.option("--show-secrets", is_flag=True, help="Do not mask passwords in the output.")
def blueprint(extensions_file: Path, topology_file: Path, base_file: Path | None, show_secrets: bool) -> None:
    """Print the blueprint with the extensions of EXTENSIONS_FILE merged in."""
    try:
        cluster = ClusterTopology.from_config(load_topology_file(topology_file))
        base = load_blueprint_file(base_file) if base_file else empty_blueprint(cluster.host_groups())
        coordinator = DeploymentCoordinator(build_extensions(load_extensions_file(extensions_file)), cluster)
        coordinator.resolve_mappings()
        merged = coordinator.build_blueprint(base)
    except AmbariExtrasError as e:
        _fail(e)
        return

    if not show_secrets:
        merged = redact_config(merged)
    click.echo(json.dumps(merged, indent=2))


@cli.command()
def registry() -> None:
    """List the registered extension types."""
    table = Table(title="Extension types")
    table.add_column("Type", style="cyan")
    table.add_column("Description")
    for name, description in get_extension_registry().list_with_descriptions().items():
        table.add_row(name, description)
    console.print(table)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
