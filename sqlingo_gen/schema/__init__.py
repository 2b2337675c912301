"""Schema fetchers for the supported database engines."""

from .base import FieldDescriptor, SchemaFetcher, parse_column_type
from .mysql import MySQLSchemaFetcher
from .postgres import PostgresSchemaFetcher
from .registry import (
    DRIVER_ERRORS,
    EXAMPLE_DATA_SOURCES,
    SCHEMA_FETCHERS,
    get_schema_fetcher_factory,
    open_connection,
)
from .sqlite import SQLiteSchemaFetcher

__all__ = [
    "FieldDescriptor",
    "SchemaFetcher",
    "parse_column_type",
    "MySQLSchemaFetcher",
    "PostgresSchemaFetcher",
    "SQLiteSchemaFetcher",
    "DRIVER_ERRORS",
    "EXAMPLE_DATA_SOURCES",
    "SCHEMA_FETCHERS",
    "get_schema_fetcher_factory",
    "open_connection",
]
