#!/usr/bin/env python3
"""
Unified CLI for the sqlingo code generator.

Usage:
    python -m sqlingo_gen <driver> -o <output dir> -d <data source> [options]

Drivers:
    mysql       MySQL / MariaDB (pymysql)
    sqlite3     SQLite database files
    postgres    PostgreSQL (psycopg)

Examples:
    python -m sqlingo_gen mysql -o ./dsl -d "user:pass@tcp(localhost:3306)/shop"
    python -m sqlingo_gen sqlite3 -o ./dsl -d shop.db -t orders,users
    python -m sqlingo_gen postgres -o ./dsl -d postgresql://localhost/shop --forcecases ID,HTML
"""

from __future__ import annotations

import sys

from sqlingo_gen.db_codegen.main import main as generator_main
from sqlingo_gen.schema import SCHEMA_FETCHERS

DEPRECATION_WARNING = "\n".join([
    "\u001b[31mThis command is deprecated. Please use the command for your driver:",
    "sqlingo-gen-mysql",
    "sqlingo-gen-sqlite3",
    "sqlingo-gen-postgres",
    "\u001b[0m",
])


def run_driver(driver_name: str, args: list[str] | None = None) -> int:
    """Run the generator for one driver and return the exit status."""
    try:
        generator_main(driver_name, args)
        return 0
    except SystemExit as e:
        if e.code is None or isinstance(e.code, int):
            return e.code or 0
        print(e.code, file=sys.stderr)
        return 1


def mysql_main() -> int:
    return run_driver("mysql")


def sqlite3_main() -> int:
    return run_driver("sqlite3")


def postgres_main() -> int:
    return run_driver("postgres")


def legacy_main() -> int:
    """Deprecated entry point that always uses the MySQL driver."""
    print(DEPRECATION_WARNING, file=sys.stderr)
    return run_driver("mysql")


def main() -> int:
    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        print(__doc__)
        return 0

    driver_name = sys.argv[1]
    args = sys.argv[2:]

    if driver_name not in SCHEMA_FETCHERS:
        print(f"unsupported driver {driver_name}", file=sys.stderr)
        print(f"Available drivers: {', '.join(SCHEMA_FETCHERS)}", file=sys.stderr)
        return 2

    return run_driver(driver_name, args)


if __name__ == "__main__":
    sys.exit(main())
