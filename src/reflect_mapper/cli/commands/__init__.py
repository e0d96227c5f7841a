"""Command registration helpers for the CLI."""

from __future__ import annotations

import click

from . import config, mapping


def register_all(main: click.Group) -> None:
    """Attach every built-in command to the root group."""
    mapping.register(main)
    config.register(main)
