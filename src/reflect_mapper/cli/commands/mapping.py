"""Mapping-related CLI commands."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TextIO

import click

from ...core.introspection import (
    enumerate_properties,
    find_accessor,
    is_public_field,
)
from ...core.naming import READ_PREFIXES, WRITE_PREFIX
from ...logging import get_logger
from ..core import CLIError, OutputFormatter
from ..decorators import handle_errors
from ..utils import get_config_manager, load_target


def _type_name(tp: Any) -> str:
    if tp is None:
        return "-"
    if isinstance(tp, type):
        return tp.__name__
    return str(tp).replace("typing.", "")


def describe_properties(obj: Any) -> List[Dict[str, Any]]:
    """Property descriptors of ``obj`` with the accessors each path would use."""
    descriptors = enumerate_properties(type(obj), obj)
    by_name = {d.name: d for d in descriptors}
    rows = []
    for descriptor in descriptors:
        getter = find_accessor(obj, READ_PREFIXES, descriptor.name, arity=0)
        setter = find_accessor(obj, (WRITE_PREFIX,), descriptor.name, arity=1)
        if setter is not None:
            write_via = setter[0]
        elif is_public_field(obj, descriptor.name, by_name):
            write_via = "field"
        else:
            write_via = "-"
        rows.append(
            {
                "name": descriptor.name,
                "type": _type_name(descriptor.declared_type),
                "public": descriptor.public,
                "static": descriptor.static,
                "read": getter[0] if getter is not None else "field",
                "write": write_via,
            }
        )
    return rows


def _instantiate(cls: type) -> Any:
    try:
        return cls()
    except TypeError as e:
        raise CLIError(f"{cls.__name__} cannot be constructed without arguments: {e}")


def register(main: click.Group) -> None:
    """Attach mapping commands to the root CLI."""

    @main.command()
    @click.argument("target")
    @click.option(
        "--format", "fmt", type=click.Choice(["table", "json"]), default="table"
    )
    @click.pass_context
    @handle_errors
    def describe(ctx: click.Context, target: str, fmt: str) -> None:
        """Show the properties and accessors of TARGET (module:ClassName)."""
        cls = load_target(target)
        rows = describe_properties(_instantiate(cls))
        formatter = OutputFormatter()

        if fmt == "json":
            click.echo(formatter.format_json({"class": cls.__name__, "properties": rows}))
            return

        headers = ["name", "type", "public", "static", "read", "write"]
        table_rows = [[str(row[h]) for h in headers] for row in rows]
        click.echo(f"{cls.__module__}.{cls.__qualname__}\n")
        click.echo(formatter.format_table(headers, table_rows))

    @main.command("to-json")
    @click.argument("target")
    @click.option(
        "--input",
        "-i",
        "input_file",
        type=click.File("r", encoding="utf-8"),
        default="-",
        help="JSON object to load (defaults to stdin)",
    )
    @click.option(
        "--include-null/--omit-null",
        default=None,
        help="Emit properties whose value is null (defaults to configuration)",
    )
    @click.option("--indent", type=click.IntRange(0, 16), default=None)
    @click.pass_context
    @handle_errors
    def to_json(
        ctx: click.Context,
        target: str,
        input_file: TextIO,
        include_null: Optional[bool],
        indent: Optional[int],
    ) -> None:
        """Load a JSON object into TARGET and print it back through its accessors."""
        logger = get_logger(__name__)
        config_manager = get_config_manager(ctx)
        cls = load_target(target)
        mapper = config_manager.create_mapper()

        instance = mapper.from_json(cls, input_file.read())

        options = config_manager.json.as_kwargs()
        if indent is not None:
            options["indent"] = indent

        click.echo(mapper.to_json(instance, include_null, **options))
        logger.debug("Object converted", class_name=cls.__name__)
