"""
Action Launcher — CLI entrypoint.

Usage:
    python -m action_launcher.main --help
    python -m action_launcher.main run setup-rust main
    python -m action_launcher.main resolve --json
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from action_launcher.core.observability.logging_config import setup_logging_from_env

from action_launcher import __version__


@click.group()
@click.version_option(version=__version__, prog_name="action-launcher")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to release.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Action Launcher — bootstrap and run the prebuilt action binary."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = None  # LAUNCHER_LOG_LEVEL or WARNING

    setup_logging_from_env(level)


@cli.command()
@click.argument("action")
@click.argument("phase")
@click.pass_context
def run(ctx: click.Context, action: str, phase: str) -> None:
    """Install the binary if needed, then run it with ACTION and PHASE."""
    from action_launcher.core.services.launcher.entry import launch

    sys.exit(launch(action, phase, config_path=ctx.obj.get("config_path")))


@cli.command()
@click.argument("stub_file", type=click.Path(dir_okay=False))
@click.pass_context
def stub(ctx: click.Context, stub_file: str) -> None:
    """Run as if invoked from STUB_FILE (<action>/<phase>.<ext>)."""
    from action_launcher.core.services.launcher.entry import launch, stub_identity

    action, phase = stub_identity(stub_file)
    sys.exit(launch(
        action,
        phase,
        config_path=ctx.obj.get("config_path"),
        start_dir=Path(stub_file).parent,
    ))


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def resolve(ctx: click.Context, as_json: bool) -> None:
    """Show the download URL and cache paths for this host (no side effects)."""
    from action_launcher.ui.cli.common import load_location

    location = load_location(ctx)

    if as_json:
        click.echo(json.dumps(location.to_dict(), indent=2))
        return

    click.secho(f"\n🔗 {location.url}", fg="cyan", bold=True)
    click.echo(f"   Cache:  {location.cache_dir}")
    click.echo(f"   Binary: {location.binary_path}")
    click.echo()


# ── Register sub-command groups from action_launcher/ui/cli/ ──────

from action_launcher.ui.cli.cache import cache

cli.add_command(cache)


if __name__ == "__main__":
    cli()
