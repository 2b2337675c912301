"""Schema fetcher contract shared by all database engines."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

# Declared column types such as "int(10) unsigned", "decimal(10,2)", "VARCHAR(255)"
_COLUMN_TYPE_RE = re.compile(
    r"^\s*(?P<name>[^(]*)(?:\(\s*(?P<size>\d+)?[^)]*\))?\s*(?P<rest>.*?)\s*$"
)


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Engine-independent description of one table column."""

    name: str
    type: str
    size: int = 0
    unsigned: bool = False
    allow_null: bool = False
    comment: str = ""


def parse_column_type(declared: str) -> tuple[str, int, bool]:
    """Split a declared column type into (type, size, unsigned).

    Examples:
        >>> parse_column_type("int(10) unsigned")
        ('int', 10, True)
        >>> parse_column_type("enum('a','b')")
        ('enum', 0, False)
        >>> parse_column_type("BIGINT UNSIGNED")
        ('bigint', 0, True)
    """
    match = _COLUMN_TYPE_RE.match(declared)
    if match is None:
        return declared.strip(), 0, False

    name = match.group("name")
    rest = match.group("rest").lower().split()
    words = name.lower().split()
    unsigned = "unsigned" in words or "unsigned" in rest
    words = [word for word in words if word not in ("unsigned", "signed")]
    size = int(match.group("size")) if match.group("size") else 0
    return " ".join(words), size, unsigned


class SchemaFetcher(ABC):
    """Reads catalog information from one open database connection."""

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    @abstractmethod
    def get_database_name(self) -> str:
        """Return the selected database name.

        Raises:
            NoDatabaseSelectedError: If the connection names no database.
        """

    @abstractmethod
    def get_table_names(self) -> list[str]:
        """Return all table names."""

    @abstractmethod
    def get_field_descriptors(self, table_name: str) -> list[FieldDescriptor]:
        """Return the columns of a table in their physical order."""

    @abstractmethod
    def quote_identifier(self, identifier: str) -> str:
        """Quote an identifier for use in SQL."""

    def close(self) -> None:
        self.connection.close()

    def __enter__(self) -> SchemaFetcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
