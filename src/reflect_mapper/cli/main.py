"""Root Click group for the Reflect Mapper CLI."""

from __future__ import annotations

from typing import Optional

import click

from ..config.manager import ConfigManager
from ..exceptions import ConfigurationError
from ..logging import get_logger, setup_logging
from .commands import register_all


@click.group()
@click.option(
    "--config", "-c", type=click.Path(exists=False), help="Configuration file path"
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Overrides the configured log level",
)
@click.pass_context
def main(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """Reflect Mapper CLI - convert objects to and from JSON by reflection."""
    ctx.ensure_object(dict)

    try:
        config_manager = ConfigManager(config_path=config)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj["config"] = config_manager

    setup_logging(
        log_level=log_level or config_manager.logging.level,
        log_format=config_manager.logging.format,
        redact_values=config_manager.logging.redact_values,
    )

    logger = get_logger(__name__)
    logger.debug(
        "Reflect Mapper CLI initialized",
        config_path=str(config_manager.config_path),
        environment=config_manager.environment,
    )


register_all(main)


if __name__ == "__main__":  # pragma: no cover
    main()  # pylint: disable=no-value-for-parameter
