"""Configuration models for Reflect Mapper."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class MappingConfig(BaseModel):
    """Defaults for the read path."""

    include_null: bool = Field(
        default=False, description="Emit properties whose value is None"
    )
    max_nesting: int = Field(
        default=3, ge=0, le=64, description="Nesting budget for nested mappable objects"
    )


class JSONOptions(BaseModel):
    """Options passed through to the JSON encoder."""

    indent: Optional[int] = Field(
        default=None, ge=0, le=16, description="Pretty-print indentation (None for compact)"
    )
    sort_keys: bool = Field(default=False, description="Sort object keys")
    ensure_ascii: bool = Field(default=True, description="Escape non-ASCII characters")

    def as_kwargs(self) -> Dict[str, Any]:
        """Encoder keyword arguments, leaving out unset indentation."""
        options = self.model_dump()
        if options["indent"] is None:
            options.pop("indent")
        return options


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Log level",
    )
    format: str = Field(
        default="console", pattern="^(json|console)$", description="Log format"
    )
    redact_values: bool = Field(
        default=True, description="Mask property values in log events"
    )
