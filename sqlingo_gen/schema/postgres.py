"""Postgres schema fetcher."""

from __future__ import annotations

import psycopg

from ..shared.errors import NoDatabaseSelectedError, TableNotFoundError
from .base import FieldDescriptor, SchemaFetcher

_TABLE_NAMES_SQL = """
    SELECT table_name
    FROM information_schema.tables
    WHERE table_schema = current_schema() AND table_type = 'BASE TABLE'
    ORDER BY table_name
"""

_COLUMNS_SQL = """
    SELECT
        column_name,
        data_type,
        COALESCE(character_maximum_length, numeric_precision, 0),
        is_nullable,
        COALESCE(
            col_description(
                (quote_ident(table_schema) || '.' || quote_ident(table_name))::regclass,
                ordinal_position
            ),
            ''
        )
    FROM information_schema.columns
    WHERE table_schema = current_schema() AND table_name = %s
    ORDER BY ordinal_position
"""


def connect(dsn: str) -> psycopg.Connection:
    """Open a psycopg connection from a conninfo string or URL."""
    return psycopg.connect(dsn)


class PostgresSchemaFetcher(SchemaFetcher):
    """Reads schema information from information_schema of the current schema."""

    def get_database_name(self) -> str:
        with self.connection.cursor() as cursor:
            cursor.execute("SELECT current_database()")
            row = cursor.fetchone()
        if row is None or not row[0]:
            raise NoDatabaseSelectedError()
        return row[0]

    def get_table_names(self) -> list[str]:
        with self.connection.cursor() as cursor:
            cursor.execute(_TABLE_NAMES_SQL)
            return [row[0] for row in cursor.fetchall()]

    def get_field_descriptors(self, table_name: str) -> list[FieldDescriptor]:
        with self.connection.cursor() as cursor:
            cursor.execute(_COLUMNS_SQL, (table_name,))
            rows = cursor.fetchall()
        if not rows:
            raise TableNotFoundError(table_name)
        return [
            FieldDescriptor(
                name=name,
                type=data_type,
                size=size or 0,
                allow_null=is_nullable == "YES",
                comment=comment or "",
            )
            for name, data_type, size, is_nullable, comment in rows
        ]

    def quote_identifier(self, identifier: str) -> str:
        return '"' + identifier.replace('"', '""') + '"'
