"""Core CLI commands: configuration display and GUI launcher."""

from __future__ import annotations
import json as _json
import sys
import click

from .helpers import cli, _redact_api_config


@cli.command(name="config")
@click.option("--section", "-s", help="Only show a specific top-level section (e.g. api, users).")
@click.pass_context
def show_config(ctx: click.Context, section: str | None):
    """Show current configuration settings (token redacted)."""
    data = ctx.obj
    if section:
        section = section.lower()
        if section not in data:
            raise click.UsageError(f"Unknown section '{section}'. Available: {', '.join(sorted(data.keys()))}")
        data = {section: data[section]}
    click.echo(_json.dumps(_redact_api_config(data), indent=2, sort_keys=True))


@cli.command()
def gui():
    """Launch the desktop GUI application.

    \b
    Example:
        ulm gui
    """
    try:
        from ulm.gui.app import main as gui_main
    except ImportError as e:
        if "PySide6" in str(e):
            click.echo(click.style("✗ Error: PySide6 not installed", fg="red", bold=True))
            click.echo("The GUI requires PySide6. Install it with:")
            click.echo(click.style("  pip install PySide6>=6.6.0", fg="cyan"))
            sys.exit(1)
        raise
    sys.exit(gui_main())


__all__ = ["show_config", "gui"]
