"""Common decorators for CLI commands."""

from __future__ import annotations

import functools
import json
from typing import Any, Callable

import click

from ...exceptions import MapperError
from ...logging import get_logger
from ..core.base import CLIError
from ..utils import display_error


def handle_errors(func: Callable) -> Callable:
    """Decorator to report mapping, decoding and CLI errors as a one-line message."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        try:
            return func(*args, **kwargs)
        except CLIError as e:
            logger.error("CLI error", error=str(e), exit_code=e.exit_code)
            display_error(str(e))
            raise click.exceptions.Exit(e.exit_code) from e
        except MapperError as e:
            logger.error("Mapping failed", error_code=e.error_code)
            display_error(str(e))
            raise click.exceptions.Exit(1) from e
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON input", error=str(e))
            display_error(f"Invalid JSON input: {e}")
            raise click.exceptions.Exit(1) from e

    return wrapper
