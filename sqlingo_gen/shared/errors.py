"""Custom exceptions for the generator."""

from __future__ import annotations


class GeneratorError(Exception):
    """Base exception for generation errors."""

    def __init__(self, message: str, table_name: str | None = None) -> None:
        self.table_name = table_name
        full_message = f"{message}" if not table_name else f"[{table_name}] {message}"
        super().__init__(full_message)


class NoDatabaseSelectedError(GeneratorError):
    """Raised when the data source does not name a database."""

    def __init__(self) -> None:
        super().__init__("no database selected")


class UnknownTypeError(GeneratorError):
    """Raised when a column type has no Go type mapping."""

    def __init__(
        self,
        type_name: str,
        column_name: str | None = None,
        table_name: str | None = None,
    ) -> None:
        self.type_name = type_name
        self.column_name = column_name
        message = f"unknown field type {type_name}"
        if column_name:
            message = f"{message} (column '{column_name}')"
        super().__init__(message, table_name)


class UnsupportedDriverError(GeneratorError):
    """Raised when no schema fetcher exists for a driver name."""

    def __init__(self, driver_name: str) -> None:
        self.driver_name = driver_name
        super().__init__(f"unsupported driver {driver_name}")


class ConfigError(GeneratorError):
    """Raised when a configuration file cannot be loaded."""

    def __init__(self, message: str, config_path: str | None = None) -> None:
        self.config_path = config_path
        if config_path:
            message = f"{config_path}: {message}"
        super().__init__(message)


class TableNotFoundError(GeneratorError):
    """Raised when the catalog has no columns for a requested table."""

    def __init__(self, table_name: str) -> None:
        super().__init__("table not found", table_name)
