"""Configuration-related CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ...logging import get_logger
from ..core import OutputFormatter
from ..decorators import handle_errors
from ..utils import display_success, get_config_manager


def register(main: click.Group) -> None:
    """Attach config-centric commands to the root CLI."""

    @main.command()
    @click.option("--format", "fmt", type=click.Choice(["yaml", "json"]), default="yaml")
    @click.pass_context
    def show_config(ctx: click.Context, fmt: str) -> None:
        """Display the effective configuration."""
        config_dict = get_config_manager(ctx).get_config_dict()
        formatter = OutputFormatter()
        if fmt == "json":
            click.echo(formatter.format_json(config_dict))
        else:
            click.echo(formatter.format_yaml(config_dict).rstrip())

    @main.command()
    @click.option(
        "--output", "-o", type=click.Path(), help="Output path for configuration file"
    )
    @click.pass_context
    @handle_errors
    def init_config(ctx: click.Context, output: Optional[str]) -> None:
        """Write the effective configuration to a YAML file."""
        config_manager = get_config_manager(ctx)
        logger = get_logger(__name__)

        saved = config_manager.save_config(Path(output) if output else None)
        logger.info("Configuration written", config_path=str(saved))
        display_success(f"Configuration written to: {saved}")
