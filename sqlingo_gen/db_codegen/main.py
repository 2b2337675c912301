"""
DB Code Generator - Generates sqlingo Go table accessors from a live database schema.

For every table the generator emits:
- an accessor struct with one typed field wrapper per column
- a singleton accessor bound to the table name
- field lookup helpers and precomputed field lists in SQL
- a model struct with GetTable/GetValues helpers
"""

from __future__ import annotations

import argparse
import enum
import json
import sys
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Final, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..schema import (
    DRIVER_ERRORS,
    EXAMPLE_DATA_SOURCES,
    FieldDescriptor,
    SchemaFetcher,
    get_schema_fetcher_factory,
    open_connection,
)
from ..shared import (
    GenerationOptions,
    GeneratorError,
    NoDatabaseSelectedError,
    UnknownTypeError,
    UnsupportedDriverError,
    build_options,
    ensure_identifier,
    load_config,
    lower_first,
    to_exported_identifier,
    write_to_file,
)

# Must match sqlingo.SqlingoRuntimeVersion of the runtime the code is built against
GENERATOR_VERSION: Final[int] = 2

BASE_FILE_NAME: Final[str] = "base.dsl.go"

# Template configuration
TEMPLATE_DIR: Final[Path] = Path(__file__).parent / "templates"


class FieldCategory(enum.Enum):
    """Semantic field kind; the value is the sqlingo field class name."""

    NUMBER = "NumberField"
    STRING = "StringField"
    BOOLEAN = "BooleanField"
    WELL_KNOWN_BINARY = "WellKnownBinaryField"

    @property
    def private_name(self) -> str:
        """Name of the unexported interface alias in the base unit."""
        return lower_first(self.value)


_NUMBER = FieldCategory.NUMBER
_STRING = FieldCategory.STRING

# Type mappings from lower-cased column types to Go types
DEFAULT_GO_TYPES: Final[dict[str, tuple[str, FieldCategory]]] = {
    "tinyint": ("int8", _NUMBER),
    "smallint": ("int16", _NUMBER),
    "int": ("int32", _NUMBER),
    "mediumint": ("int32", _NUMBER),
    "bigint": ("int64", _NUMBER),
    "integer": ("int64", _NUMBER),
    "float": ("float64", _NUMBER),
    "double": ("float64", _NUMBER),
    "double precision": ("float64", _NUMBER),
    "decimal": ("float64", _NUMBER),
    "real": ("float64", _NUMBER),
    **{
        name: ("string", _STRING)
        for name in (
            "char",
            "character",
            "varchar",
            "character varying",
            "text",
            "tinytext",
            "mediumtext",
            "longtext",
            "enum",
            "set",
            "datetime",
            "date",
            "time",
            "time without time zone",
            "time with time zone",
            "timestamp",
            "timestamp without time zone",
            "timestamp with time zone",
            "year",
            "json",
            "jsonb",
            "uuid",
            "numeric",
        )
    },
    # Raw bytes are carried as Go strings
    **{
        name: ("string", _STRING)
        for name in (
            "binary",
            "varbinary",
            "blob",
            "tinyblob",
            "mediumblob",
            "longblob",
            "bytea",
        )
    },
    **{
        name: ("sqlingo.WellKnownBinary", FieldCategory.WELL_KNOWN_BINARY)
        for name in (
            "geometry",
            "point",
            "linestring",
            "polygon",
            "multipoint",
            "multilinestring",
            "multipolygon",
            "geometrycollection",
        )
    },
    "boolean": ("bool", FieldCategory.BOOLEAN),
    "bool": ("bool", FieldCategory.BOOLEAN),
}


@dataclass(frozen=True, slots=True)
class Column:
    """A table column with its generated Go names and types."""

    name: str
    name_literal: str
    go_name: str
    go_type: str
    field_class: str
    private_field_class: str
    struct_name: str
    comment: str


@dataclass(frozen=True, slots=True)
class TableSpec:
    """A table entry of the base unit's lookup helpers."""

    name_literal: str
    class_name: str


@dataclass(frozen=True, slots=True)
class EmittedUnit:
    """One generated Go source file."""

    path: Path
    content: str


@dataclass
class GeneratorContext:
    """Context for code generation with cached resources."""

    template_env: Environment = field(init=False)

    def __post_init__(self) -> None:
        self.template_env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            auto_reload=False,
            enable_async=False,
        )
        # Pre-compile templates
        self._base_template = self.template_env.get_template("base.go.j2")
        self._table_template = self.template_env.get_template("table.go.j2")

    @property
    def base_template(self):
        return self._base_template

    @property
    def table_template(self):
        return self._table_template


@lru_cache(maxsize=256)
def _quote(value: str) -> str:
    """Quote a string for Go literal embedding. Cached for performance."""
    return json.dumps(value, ensure_ascii=False)


def _flatten_comment(comment: str) -> str:
    return " ".join(comment.splitlines())


def map_type(
    descriptor: FieldDescriptor,
    table_name: str | None = None,
) -> tuple[str, FieldCategory]:
    """Resolve the Go type and field category for a column.

    Args:
        descriptor: Column descriptor read from the database.
        table_name: Table name for error messages.

    Returns:
        The Go type and the field category.

    Raises:
        UnknownTypeError: If no type mapping exists.
    """
    type_name = descriptor.type.lower()

    if type_name == "bit":
        if descriptor.size == 1:
            go_type, category = "bool", FieldCategory.BOOLEAN
        else:
            go_type, category = "string", FieldCategory.STRING
    else:
        mapped = DEFAULT_GO_TYPES.get(type_name)
        if mapped is None:
            raise UnknownTypeError(descriptor.type, descriptor.name, table_name)
        go_type, category = mapped

    if descriptor.unsigned and go_type.startswith("int"):
        go_type = "u" + go_type
    if descriptor.allow_null:
        go_type = "*" + go_type
    return go_type, category


def _build_columns(
    descriptors: Sequence[FieldDescriptor],
    table_name: str,
    class_name: str,
    force_cases: Sequence[str],
) -> list[Column]:
    """Build Column objects from descriptors, keeping their order."""
    columns: list[Column] = []

    for descriptor in descriptors:
        go_name = to_exported_identifier(descriptor.name, force_cases)
        go_type, category = map_type(descriptor, table_name)
        # One wrapper type per column of each table
        struct_name = f"{ensure_identifier(descriptor.type.lower())}_{class_name}_{go_name}"

        columns.append(
            Column(
                name=descriptor.name,
                name_literal=_quote(descriptor.name),
                go_name=go_name,
                go_type=go_type,
                field_class=category.value,
                private_field_class=category.private_name,
                struct_name=struct_name,
                comment=_flatten_comment(descriptor.comment),
            )
        )

    return columns


def _header_context(database_name: str) -> dict[str, Any]:
    return {"package_name": ensure_identifier(database_name)}


def emit_base(
    database_name: str,
    table_names: Sequence[str],
    force_cases: Sequence[str],
    output_dir: Path,
    ctx: GeneratorContext | None = None,
) -> EmittedUnit:
    """Render the shared unit with the version guard and table lookups."""
    ctx = ctx or GeneratorContext()
    tables = [
        TableSpec(
            name_literal=_quote(table_name),
            class_name=to_exported_identifier(table_name, force_cases),
        )
        for table_name in table_names
    ]

    rendered = ctx.base_template.render(
        **_header_context(database_name),
        generator_version=GENERATOR_VERSION,
        field_categories=list(FieldCategory),
        tables=tables,
    )
    return EmittedUnit(path=output_dir / BASE_FILE_NAME, content=rendered)


def emit_table(
    fetcher: SchemaFetcher,
    database_name: str,
    table_name: str,
    force_cases: Sequence[str],
    output_dir: Path,
    ctx: GeneratorContext | None = None,
) -> EmittedUnit:
    """Render the accessor unit of a single table.

    Raises:
        UnknownTypeError: If a column type has no mapping.
        TableNotFoundError: If a requested table has no columns in the catalog.
    """
    ctx = ctx or GeneratorContext()
    descriptors = fetcher.get_field_descriptors(table_name)

    class_name = to_exported_identifier(table_name, force_cases)
    columns = _build_columns(descriptors, table_name, class_name, force_cases)

    # Pre-compute SQL literals
    quoted_table = fetcher.quote_identifier(table_name)
    fields_sql = ", ".join(fetcher.quote_identifier(col.name) for col in columns)
    full_fields_sql = ", ".join(
        f"{quoted_table}.{fetcher.quote_identifier(col.name)}" for col in columns
    )

    rendered = ctx.table_template.render(
        **_header_context(database_name),
        table_name_literal=_quote(table_name),
        class_name=class_name,
        table_struct_name=f"t{class_name}",
        table_object_name=f"o{class_name}",
        model_name=f"{class_name}Model",
        columns=columns,
        fields_sql_literal=_quote(fields_sql),
        full_fields_sql_literal=_quote(full_fields_sql),
    )
    return EmittedUnit(path=output_dir / f"{table_name}.go", content=rendered)


def generate(
    driver_name: str,
    options: GenerationOptions,
    ask: Callable[[str], str] = input,
) -> int:
    """Generate the base unit and one unit per table.

    Args:
        driver_name: One of the supported driver names.
        options: Settings for this run.
        ask: Prompt used before overwriting files in interactive mode.

    Returns:
        Number of table units written.

    Raises:
        UnsupportedDriverError: If no schema fetcher exists for the driver.
        NoDatabaseSelectedError: If the data source names no database.
        UnknownTypeError: If a column type has no mapping.
        TableNotFoundError: If a requested table has no columns in the catalog.
    """
    fetcher_factory = get_schema_fetcher_factory(driver_name)
    connection = open_connection(driver_name, options.data_source_name)

    with fetcher_factory(connection) as fetcher:
        database_name = fetcher.get_database_name()
        if not database_name:
            raise NoDatabaseSelectedError()

        table_names = list(options.table_names) or fetcher.get_table_names()

        ctx = GeneratorContext()
        base = emit_base(
            database_name,
            table_names,
            options.force_cases,
            options.output_dir,
            ctx,
        )
        write_to_file(base.content, base.path, force=True, ask=ask)

        written = 0
        for table_name in table_names:
            print(f"Generating {table_name}")
            unit = emit_table(
                fetcher,
                database_name,
                table_name,
                options.force_cases,
                options.output_dir,
                ctx,
            )
            if write_to_file(unit.content, unit.path, force=not options.interactive, ask=ask):
                written += 1

    return written


def _print_usage_and_exit(parser: argparse.ArgumentParser, driver_name: str) -> None:
    example = EXAMPLE_DATA_SOURCES.get(driver_name, "dataSourceName")
    parser.print_usage(sys.stderr)
    print(f"Example:\n\t{parser.prog} -o ./ -d \"{example}\"", file=sys.stderr)
    raise SystemExit(1)


def main(driver_name: str, argv: list[str] | None = None) -> None:
    """CLI entry point for one driver."""
    parser = argparse.ArgumentParser(
        prog=f"sqlingo-gen-{driver_name}",
        description=f"Generate sqlingo Go table accessors from a {driver_name} database",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Directory for the generated files",
    )
    parser.add_argument(
        "-d",
        "-dbc",
        "--dbc",
        dest="dbc",
        help="Database connection (data source name)",
    )
    parser.add_argument(
        "-t",
        "--tables",
        help="Comma-separated tables to generate: table1,table2,... (default: all)",
    )
    parser.add_argument(
        "-forcecases",
        "--forcecases",
        dest="forcecases",
        help="Comma-separated words with forced casing: ID,IDs,HTML",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        default=None,
        help="Ask before overwriting existing table files",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="YAML file with default values for the options above",
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else None
        options = build_options(
            {
                "output": args.output,
                "dbc": args.dbc,
                "tables": args.tables,
                "forcecases": args.forcecases,
                "interactive": args.interactive,
            },
            config,
        )
        if options is None:
            _print_usage_and_exit(parser, driver_name)

        count = generate(driver_name, options)

        print(f"Generated {count} table unit(s) into {options.output_dir}")
    except UnsupportedDriverError as e:
        print(e, file=sys.stderr)
        raise SystemExit(2) from e
    except (GeneratorError, OSError, *DRIVER_ERRORS) as e:
        raise SystemExit(f"Error: {e}") from e
