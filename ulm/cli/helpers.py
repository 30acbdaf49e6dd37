from __future__ import annotations
import copy
import click

from ..api.client import UserApiClient
from ..config import load_typed_config, validate_api_config
from ..version import __version__


def get_client(cfg: dict) -> UserApiClient:
    """Build the API client from a config dict.

    Raises:
        click.UsageError: If the API section is invalid
    """
    try:
        base_url = validate_api_config(cfg)
    except ValueError as e:
        raise click.UsageError(str(e))
    api = cfg.get('api', {})
    return UserApiClient(
        base_url,
        token=api.get('token'),
        timeout=api.get('timeout'),
        max_retries=api.get('max_retries', 3),
    )


def _redact_api_config(cfg: dict) -> dict:
    result = copy.deepcopy(cfg)
    api = result.get('api', {})
    if isinstance(api, dict) and api.get('token'):
        api['token'] = '*** redacted ***'
    return result


@click.group()
@click.version_option(version=__version__, prog_name="user-list-manager")
@click.option('--base-url', default=None, help='API root URL (overrides ULM__API__BASE_URL)')
@click.pass_context
def cli(ctx: click.Context, base_url: str | None):
    """Browse, search and delete users of the remote user API.

    \b
    Examples:
      ulm users list                  # First page
      ulm users list --page 2         # Second page
      ulm users list --name admin     # Users whose name contains "admin"
      ulm users delete 42             # Delete user 42 (asks first)
      ulm gui                         # Desktop application
    """
    if isinstance(ctx.obj, dict):
        cfg = copy.deepcopy(ctx.obj)
    else:
        cfg = load_typed_config().to_dict()
    if base_url:
        cfg.setdefault('api', {})['base_url'] = base_url
    ctx.obj = cfg


__all__ = ["cli", "get_client", "_redact_api_config"]
