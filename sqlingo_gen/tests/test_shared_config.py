from pathlib import Path

import pytest

from sqlingo_gen.shared.config import (
    GenerationOptions,
    build_options,
    load_config,
    split_list,
)
from sqlingo_gen.shared.errors import ConfigError


class TestSplitList:
    def test_split_comma_string(self):
        assert split_list("orders,users") == ("orders", "users")

    def test_split_preserves_order(self):
        assert split_list("b,a,c") == ("b", "a", "c")

    def test_split_empty_and_none(self):
        assert split_list("") == ()
        assert split_list(None) == ()

    def test_split_sequence(self):
        assert split_list(["ID", "HTML"]) == ("ID", "HTML")


class TestLoadConfig:
    def test_load_valid_config(self, tmp_path):
        config_path = tmp_path / "sqlingo.yaml"
        config_path.write_text(
            """
output: ./dsl
dbc: shop.db
tables: [orders, users]
forcecases: ID,HTML
"""
        )

        data = load_config(config_path)

        assert data["output"] == "./dsl"
        assert data["dbc"] == "shop.db"
        assert data["tables"] == ["orders", "users"]
        assert data["forcecases"] == "ID,HTML"

    def test_load_empty_config(self, tmp_path):
        config_path = tmp_path / "sqlingo.yaml"
        config_path.write_text("")

        assert load_config(config_path) == {}

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Failed to read config file"):
            load_config(tmp_path / "missing.yaml")

    def test_load_invalid_yaml(self, tmp_path):
        config_path = tmp_path / "sqlingo.yaml"
        config_path.write_text("output: [unclosed")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(config_path)

    def test_load_non_mapping(self, tmp_path):
        config_path = tmp_path / "sqlingo.yaml"
        config_path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(config_path)

    def test_load_unknown_key(self, tmp_path):
        config_path = tmp_path / "sqlingo.yaml"
        config_path.write_text("output: ./dsl\ndatabase: shop\n")

        with pytest.raises(ConfigError, match="database"):
            load_config(config_path)


class TestBuildOptions:
    def test_build_from_overrides(self):
        options = build_options(
            {"output": "out", "dbc": "shop.db", "tables": "orders,users", "forcecases": "ID"}
        )

        assert options == GenerationOptions(
            data_source_name="shop.db",
            output_dir=Path("out"),
            table_names=("orders", "users"),
            force_cases=("ID",),
            interactive=False,
        )

    def test_overrides_win_over_config(self):
        options = build_options(
            {"output": "cli_out", "dbc": None, "tables": None},
            {"output": "cfg_out", "dbc": "cfg.db", "tables": ["orders"]},
        )

        assert options.output_dir == Path("cli_out")
        assert options.data_source_name == "cfg.db"
        assert options.table_names == ("orders",)

    def test_missing_output_returns_none(self):
        assert build_options({"output": None, "dbc": "shop.db"}) is None

    def test_missing_dbc_returns_none(self):
        assert build_options({"output": "out", "dbc": ""}) is None

    def test_options_are_immutable(self):
        options = build_options({"output": "out", "dbc": "shop.db"})

        with pytest.raises(AttributeError):
            options.table_names = ("users",)
