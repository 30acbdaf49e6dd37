"""CLI package bootstrap.

Defines root group (`cli`) in helpers and imports submodules so their
decorators register commands.
"""
from ulm.cli.helpers import cli  # root group
from ulm.cli import core  # noqa: F401
from ulm.cli import user_cmds  # noqa: F401

__all__ = ["cli"]
