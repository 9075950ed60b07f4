# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Main CLI application for ecoindex."""

from __future__ import annotations

import json
import logging

import click
from pydantic import ValidationError
from rich.console import Console

from ecoindex_audit import __version__
from ecoindex_audit.audit.ecoindex import EcoindexAudit, MissingArtifactError
from ecoindex_audit.audit.models import AuditProduct
from ecoindex_audit.collectors.file_import import ArtifactFileCollector
from ecoindex_audit.config import PluginConfig, default_plugin_config, load_config
from ecoindex_audit.reporting.terminal import TerminalRenderer
from ecoindex_audit.scoring.engine import compute_result


def _plugin_config(path: str | None) -> PluginConfig:
    return load_config(path) if path else default_plugin_config()


@click.group()
@click.version_option(version=__version__)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, no_color: bool, verbose: bool) -> None:
    """ecoindex: environmental impact score for web pages

    \b
    Scores a page from three measurements:
      DOM size, number of requests, and transferred bytes
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["console"] = Console(no_color=no_color)


@cli.command()
@click.option("--dom", "dom_size", type=click.IntRange(min=0), required=True,
              help="Number of DOM elements")
@click.option("--requests", "request_count", type=click.IntRange(min=0), required=True,
              help="Number of network requests")
@click.option("--size", "size_bytes", type=click.IntRange(min=0), required=True,
              help="Total transferred size in bytes")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def score(
    ctx: click.Context,
    dom_size: int,
    request_count: int,
    size_bytes: int,
    as_json: bool,
) -> None:
    """Compute the EcoIndex for raw measurements."""
    console: Console = ctx.obj["console"]
    result = compute_result(dom_size, request_count, size_bytes)

    if as_json:
        click.echo(result.model_dump_json(indent=2))
        return

    TerminalRenderer(console).render(result)


@cli.command()
@click.argument("artifacts", type=click.Path())
@click.option(
    "--config", "-c", type=click.Path(), default=None,
    help="Plugin config YAML file",
)
@click.option(
    "--export-json", type=click.Path(), default=None,
    help="Export the audit product as JSON at this path",
)
@click.pass_context
def audit(
    ctx: click.Context,
    artifacts: str,
    config: str | None,
    export_json: str | None,
) -> None:
    """Run the EcoIndex audit over an exported artifacts file."""
    console: Console = ctx.obj["console"]
    collector = ArtifactFileCollector(artifacts)

    try:
        plugin_config = _plugin_config(config)
        with console.status("[bold cyan]Loading artifacts..."):
            collected = collector.collect()
        result = EcoindexAudit().evaluate(collected, plugin_config.default_pass)
    except (FileNotFoundError, ValueError, MissingArtifactError, ValidationError) as exc:
        console.print(f"[red]{exc}[/]")
        raise SystemExit(1)

    TerminalRenderer(console).render(result, title=plugin_config.category.title)

    if export_json:
        _export_json(EcoindexAudit.package(result), export_json, console)


@cli.command()
@click.option(
    "--config", "-c", type=click.Path(), default=None,
    help="Plugin config YAML file",
)
def plugin(config: str | None) -> None:
    """Print the plugin registration and audit metadata as JSON."""
    plugin_config = _plugin_config(config)
    payload = {
        "plugin": plugin_config.model_dump(by_alias=True),
        "audit": EcoindexAudit.meta().model_dump(mode="json", by_alias=True),
    }
    click.echo(json.dumps(payload, indent=2))


def _export_json(product: AuditProduct, path: str, console: Console) -> None:
    """Export the host-facing audit product to JSON."""
    with open(path, "w") as f:
        f.write(product.model_dump_json(indent=2, by_alias=True))
    console.print(f"  [green]JSON report exported to:[/green] {path}")
