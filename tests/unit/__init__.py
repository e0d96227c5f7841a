"""Unit tests for Reflect Mapper."""
