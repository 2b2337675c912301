"""Generation options and configuration file loading."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from .errors import ConfigError

# Keys accepted in a YAML configuration file
CONFIG_KEYS: frozenset[str] = frozenset({
    "output",
    "dbc",
    "tables",
    "forcecases",
    "interactive",
})


@dataclass(frozen=True, slots=True)
class GenerationOptions:
    """Immutable settings for one generation run."""

    data_source_name: str
    output_dir: Path
    table_names: tuple[str, ...] = ()
    force_cases: tuple[str, ...] = ()
    interactive: bool = False


def split_list(value: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize a comma-separated string or a sequence into a tuple.

    Examples:
        >>> split_list("users,orders")
        ('users', 'orders')
        >>> split_list(None)
        ()
    """
    if value is None:
        return ()
    if isinstance(value, str):
        if not value:
            return ()
        return tuple(value.split(","))
    return tuple(str(item) for item in value)


def load_config(config_path: Path) -> dict[str, Any]:
    """Load generator settings from a YAML file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        The parsed settings mapping.

    Raises:
        ConfigError: If the file cannot be read or parsed, or holds unknown keys.
    """
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}", str(config_path)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", str(config_path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping", str(config_path))

    unknown = sorted(set(data) - CONFIG_KEYS)
    if unknown:
        raise ConfigError(
            f"Unknown config key(s): {', '.join(unknown)}",
            str(config_path),
        )

    return data


def build_options(
    overrides: Mapping[str, Any],
    config: Mapping[str, Any] | None = None,
) -> GenerationOptions | None:
    """Merge CLI overrides over config file settings.

    Values in ``overrides`` that are ``None`` fall back to ``config``.

    Returns:
        The options, or None when the output path or data source is missing.
    """
    merged: dict[str, Any] = dict(config or {})
    merged.update({key: value for key, value in overrides.items() if value is not None})

    output = merged.get("output")
    dbc = merged.get("dbc")
    if not output or not dbc:
        return None

    return GenerationOptions(
        data_source_name=str(dbc),
        output_dir=Path(output),
        table_names=split_list(merged.get("tables")),
        force_cases=split_list(merged.get("forcecases")),
        interactive=bool(merged.get("interactive", False)),
    )
