"""Shared helpers for the CLI commands."""

from __future__ import annotations

import importlib
from typing import cast

import click

from ..config import ConfigManager
from .core import CLIError


def get_config_manager(ctx: click.Context) -> ConfigManager:
    """Return the config manager stored on the click context."""
    return cast(ConfigManager, ctx.obj["config"])


def load_target(target: str) -> type:
    """
    Import a class given as ``package.module:ClassName``.

    Nested classes can be addressed with a dotted name after the colon.
    """
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise CLIError(f"Target must look like 'module:ClassName', got: {target}")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise CLIError(f"Cannot import module '{module_name}': {e}")

    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise CLIError(f"'{module_name}' has no attribute '{qualname}'")

    if not isinstance(obj, type):
        raise CLIError(f"Target is not a class: {target}")
    return obj


def display_error(message: str) -> None:
    """Display an error message."""
    click.echo(f"✗ {message}", err=True)


def display_success(message: str) -> None:
    """Display a success message."""
    click.echo(f"✓ {message}")
