"""Generates sqlingo Go table accessors from a live database schema."""

__version__ = "0.1.0"
