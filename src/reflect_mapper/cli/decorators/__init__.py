"""Decorators shared by CLI commands."""

from .common import handle_errors

__all__ = ["handle_errors"]
