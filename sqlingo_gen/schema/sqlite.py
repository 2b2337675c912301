"""SQLite schema fetcher."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from ..shared.errors import NoDatabaseSelectedError, TableNotFoundError
from .base import FieldDescriptor, SchemaFetcher, parse_column_type


def connect(dsn: str) -> sqlite3.Connection:
    """Open a database file; ``file:`` URIs are passed through as URIs."""
    return sqlite3.connect(dsn, uri=dsn.startswith("file:"))


class SQLiteSchemaFetcher(SchemaFetcher):
    """Reads schema information through sqlite_master and PRAGMAs."""

    def get_database_name(self) -> str:
        for _, name, file_name in self.connection.execute("PRAGMA database_list"):
            if name == "main" and file_name:
                return Path(file_name).stem
        raise NoDatabaseSelectedError()

    def get_table_names(self) -> list[str]:
        rows = self.connection.execute(
            "SELECT name FROM sqlite_master "
            "WHERE type = 'table' AND name NOT LIKE 'sqlite\\_%' ESCAPE '\\' "
            "ORDER BY name"
        ).fetchall()
        return [row[0] for row in rows]

    def get_field_descriptors(self, table_name: str) -> list[FieldDescriptor]:
        rows = self.connection.execute(
            f"PRAGMA table_info({self.quote_identifier(table_name)})"
        ).fetchall()
        if not rows:
            raise TableNotFoundError(table_name)
        descriptors: list[FieldDescriptor] = []
        # cid, name, type, notnull, dflt_value, pk
        for _, name, declared_type, not_null, _, primary_key in rows:
            type_name, size, unsigned = parse_column_type(declared_type or "")
            descriptors.append(
                FieldDescriptor(
                    name=name,
                    type=type_name,
                    size=size,
                    unsigned=unsigned,
                    allow_null=not not_null and not primary_key,
                )
            )
        return descriptors

    def quote_identifier(self, identifier: str) -> str:
        return '"' + identifier.replace('"', '""') + '"'
