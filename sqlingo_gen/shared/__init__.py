"""Shared utilities for the generator."""

from .config import (
    GenerationOptions,
    build_options,
    load_config,
    split_list,
)
from .naming import (
    EXPORTED_PREFIX,
    ensure_identifier,
    lower_first,
    to_exported_identifier,
)
from .errors import (
    ConfigError,
    GeneratorError,
    NoDatabaseSelectedError,
    TableNotFoundError,
    UnknownTypeError,
    UnsupportedDriverError,
)
from .output import write_to_file

__all__ = [
    # Configuration
    "GenerationOptions",
    "build_options",
    "load_config",
    "split_list",
    # Naming utilities
    "EXPORTED_PREFIX",
    "ensure_identifier",
    "lower_first",
    "to_exported_identifier",
    # Errors
    "ConfigError",
    "GeneratorError",
    "NoDatabaseSelectedError",
    "TableNotFoundError",
    "UnknownTypeError",
    "UnsupportedDriverError",
    # Output
    "write_to_file",
]
