"""Core building blocks shared by CLI commands."""

from .base import CLIError, OutputFormatter

__all__ = ["CLIError", "OutputFormatter"]
