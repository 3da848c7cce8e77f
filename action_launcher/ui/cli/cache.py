"""
CLI commands for the binary cache.

Thin wrappers over ``action_launcher.core.services.launcher.cache_ops``.
"""

from __future__ import annotations

import json

import click

from action_launcher.ui.cli.common import load_location


@click.group()
def cache() -> None:
    """Cache — inspect and clean the installed binary."""


@cache.command("status")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def status(ctx: click.Context, as_json: bool) -> None:
    """Show whether the binary is installed and list leftover temporaries."""
    from action_launcher.core.services.launcher.cache_ops import cache_status

    result = cache_status(load_location(ctx))

    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    click.secho(f"\n📦 {result['binary_path']}", fg="cyan", bold=True)
    if result["installed"]:
        mode = "executable" if result["executable"] else "NOT executable"
        click.secho(f"   ✓ installed ({result['size_bytes']} bytes, {mode})", fg="green")
    else:
        click.secho("   ✗ not installed", fg="yellow")

    temps = result["temporaries"]
    if temps:
        click.echo()
        click.secho(f"   Leftover temporaries: {len(temps)}", fg="white", bold=True)
        for path in temps:
            click.echo(f"     • {path}")
    click.echo()


@cache.command("prune")
@click.pass_context
def prune(ctx: click.Context) -> None:
    """Delete leftover download/staging files from interrupted or racing installs."""
    from action_launcher.core.services.launcher.cache_ops import prune_temporaries

    removed = prune_temporaries(load_location(ctx))
    if not removed:
        click.secho("Nothing to prune.", fg="green")
        return
    for path in removed:
        click.echo(f"   🗑  {path}")
    click.secho(f"Removed {len(removed)} file(s).", fg="green")


@cache.command("clear")
@click.confirmation_option(prompt="Remove the cached binary?")
@click.pass_context
def clear(ctx: click.Context) -> None:
    """Remove the cache directory; the next run downloads again."""
    from action_launcher.core.services.launcher.cache_ops import clear_cache

    location = load_location(ctx)
    if clear_cache(location):
        click.secho(f"✓ Cleared {location.cache_dir}", fg="green")
    else:
        click.secho(f"Nothing cached at {location.cache_dir}", fg="yellow")
