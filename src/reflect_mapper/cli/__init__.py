"""Command line interface for Reflect Mapper."""

from .main import main

__all__ = ["main"]
