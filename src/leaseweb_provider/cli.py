"""Inspection commands for the provider.

These commands drive the same lifecycle calls the host runtime makes, which
makes it possible to check a provider block and the environment without
running the host.
"""

import json
from pathlib import Path
from typing import Any

import click

from leaseweb_provider.config.loader import load_config_file
from leaseweb_provider.config.models import ProviderConfigModel
from leaseweb_provider.diagnostics import Diagnostics, Severity
from leaseweb_provider.errors import ConfigLoadError
from leaseweb_provider.log import configure_logging
from leaseweb_provider.provider import LeasewebProvider
from leaseweb_provider.version import PACKAGE_VERSION


def _output_json(status: str, result: Any) -> None:
    click.echo(json.dumps({"status": status, "result": result}, indent=2, default=str))


def _format_diagnostics(diags: Diagnostics) -> str:
    output = []
    for diag in diags:
        if diag.severity == Severity.ERROR:
            label = click.style("Error:", fg="red", bold=True)
        else:
            label = click.style("Info:", fg="blue")
        location = f" {click.style(f'(at {diag.path})', fg='cyan')}" if diag.path else ""
        output.append(f"{label} {diag.summary}{location}")
        if diag.detail:
            output.append(f"  {diag.detail}")
    return "\n".join(output)


@click.command(name="metadata")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
def metadata(json_output: bool) -> None:
    """Show the provider type name and version."""
    response = LeasewebProvider(version=PACKAGE_VERSION).metadata()
    if json_output:
        _output_json("ok", response.model_dump())
    else:
        click.echo(f"{response.type_name} {response.version}")


@click.command(name="schema")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
def schema(json_output: bool) -> None:
    """Show the attributes of the provider block."""
    response = LeasewebProvider(version=PACKAGE_VERSION).schema()
    if json_output:
        _output_json("ok", response.model_dump())
        return

    for name, attribute in response.attributes.items():
        flags = ["optional" if attribute.optional else "required"]
        if attribute.sensitive:
            flags.append("sensitive")
        click.echo(f"{click.style(name, fg='cyan', bold=True)} ({', '.join(flags)})")
        click.echo(f"  {attribute.description}")


@click.command(name="capabilities")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
def capabilities(json_output: bool) -> None:
    """List the data sources and resources offered by the provider."""
    provider = LeasewebProvider(version=PACKAGE_VERSION)
    type_name = provider.metadata().type_name
    names = provider.registry.type_names(type_name)
    if json_output:
        _output_json("ok", names)
        return

    for kind, kind_names in names.items():
        click.echo(click.style(f"{kind} ({len(kind_names)})", fg="cyan", bold=True))
        for name in kind_names:
            click.echo(f"  {name}")


@click.command(name="check")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with the provider block",
)
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def check(config_path: Path | None, json_output: bool, debug: bool) -> None:
    """Resolve the provider configuration against the environment.

    Runs the same configuration step as the host runtime, using LEASEWEB_HOST,
    LEASEWEB_SCHEME and LEASEWEB_TOKEN for anything the file does not set.
    The token itself is never printed.

    \b
    Examples:
        leaseweb-provider check                      # Environment only
        leaseweb-provider check --config lsw.yml     # Provider block from a file
        leaseweb-provider check --json-output        # Output in JSON format
    """
    configure_logging(debug=debug)

    provider = LeasewebProvider(version=PACKAGE_VERSION)
    try:
        config = load_config_file(config_path) if config_path else ProviderConfigModel()
    except ConfigLoadError as e:
        diags = Diagnostics([e.to_diagnostic()])
    else:
        diags = provider.configure(config).diagnostics

    client = provider.client
    if json_output:
        result: dict[str, Any] = {"diagnostics": diags.to_list()}
        if client is not None:
            result["base_url"] = client.base_url
        _output_json("error" if diags.has_error() else "ok", result)
    else:
        if diags:
            click.echo(_format_diagnostics(diags), err=diags.has_error())
        if client is not None:
            click.echo(click.style("✅ Configuration is valid", fg="green", bold=True))
            click.echo(f"   API endpoint: {client.base_url}")

    if diags.has_error():
        raise click.exceptions.Exit(1)
