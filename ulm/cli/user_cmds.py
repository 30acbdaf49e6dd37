"""User listing and deletion commands."""

from __future__ import annotations
import logging
import click
import requests

from .helpers import cli, get_client
from ..api.models import UserListQuery
from ..gui.utils.formatters import (
    EMPTY_LIST_MESSAGE,
    confirm_delete_message,
    delete_failed_message,
    format_filter_indicator,
    format_page_label,
    format_roles,
    format_user_id,
)

logger = logging.getLogger(__name__)


@cli.group(name="users")
def users():
    """List and delete users."""


@users.command(name="list")
@click.option("--page", "-p", type=click.IntRange(min=1), default=1, show_default=True, help="Page number (1-based)")
@click.option("--name", "-n", default=None, help="Only users whose name contains this text")
@click.pass_context
def list_users(ctx: click.Context, page: int, name: str | None):
    """Show one page of users."""
    cfg = ctx.obj
    client = get_client(cfg)
    page_size = cfg.get('users', {}).get('page_size', 10)
    query = UserListQuery.for_page(page - 1, name, page_size)

    header = format_page_label(page - 1)
    indicator = format_filter_indicator(name)
    if indicator:
        header += f"  ({indicator})"
    click.echo(click.style(header, fg="cyan", bold=True))

    try:
        result = client.list_users(query.backend_page, query.limit, query.name)
    except (requests.RequestException, ValueError) as e:
        logger.debug(f"List request failed: {e}", exc_info=True)
        click.echo(click.style(f"✗ Failed to load users: {e}", fg="red"), err=True)
        ctx.exit(1)
        return

    if not result.users:
        click.echo(EMPTY_LIST_MESSAGE)
        return

    rows = [
        (format_user_id(u), u.name, u.email, format_roles(u.roles))
        for u in result.users
    ]
    headers = ("ID", "Name", "Email", "Role(s)")
    widths = [max(len(h), *(len(r[i]) for r in rows)) for i, h in enumerate(headers)]
    click.echo("  ".join(h.ljust(w) for h, w in zip(headers, widths)))
    click.echo("  ".join("-" * w for w in widths))
    for row in rows:
        click.echo("  ".join(v.ljust(w) for v, w in zip(row, widths)).rstrip())

    if result.more:
        click.echo(click.style(f"More users available: --page {page + 1}", fg="yellow"))


@users.command(name="delete")
@click.argument("user_id")
@click.option("--name", default=None, help="Display name used in prompts (defaults to the id)")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_user(ctx: click.Context, user_id: str, name: str | None, yes: bool):
    """Delete the user with USER_ID."""
    client = get_client(ctx.obj)
    display_name = name or user_id

    if not yes and not click.confirm(confirm_delete_message(display_name), default=False):
        click.echo("Cancelled.")
        return

    outcome = client.delete_user(user_id)
    if not outcome.ok:
        logger.debug(f"Delete failed: {outcome.message}")
        click.echo(click.style(f"✗ {delete_failed_message(display_name)}", fg="red"), err=True)
        ctx.exit(1)
        return

    click.echo(click.style(f'✓ Deleted user "{display_name}"', fg="green"))


__all__ = ["users", "list_users", "delete_user"]
