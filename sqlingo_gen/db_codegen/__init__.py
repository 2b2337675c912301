"""DB Code Generator - Generates sqlingo Go table accessors from a database schema."""

from .main import (
    Column,
    EmittedUnit,
    FieldCategory,
    GeneratorContext,
    TableSpec,
    emit_base,
    emit_table,
    generate,
    main,
    map_type,
    BASE_FILE_NAME,
    DEFAULT_GO_TYPES,
    GENERATOR_VERSION,
)

__all__ = [
    "Column",
    "EmittedUnit",
    "FieldCategory",
    "GeneratorContext",
    "TableSpec",
    "emit_base",
    "emit_table",
    "generate",
    "main",
    "map_type",
    "BASE_FILE_NAME",
    "DEFAULT_GO_TYPES",
    "GENERATOR_VERSION",
]
