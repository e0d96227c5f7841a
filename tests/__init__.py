"""Reflect Mapper test suite."""
