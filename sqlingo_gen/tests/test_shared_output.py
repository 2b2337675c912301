from unittest.mock import MagicMock

from sqlingo_gen.shared.output import write_to_file


class TestWriteToFile:
    def test_write_new_file(self, tmp_path):
        path = tmp_path / "orders.go"

        assert write_to_file("package shop_dsl\n", path, force=False) is True
        assert path.read_text() == "package shop_dsl\n"

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "nested" / "dsl" / "base.dsl.go"

        assert write_to_file("content", path, force=True) is True
        assert path.read_text() == "content"

    def test_force_overwrites_without_asking(self, tmp_path):
        path = tmp_path / "orders.go"
        path.write_text("old content that is longer")
        ask = MagicMock()

        assert write_to_file("new", path, force=True, ask=ask) is True
        assert path.read_text() == "new"
        ask.assert_not_called()

    def test_overwrite_confirmed(self, tmp_path):
        path = tmp_path / "orders.go"
        path.write_text("old")
        ask = MagicMock(return_value="y")

        assert write_to_file("new", path, force=False, ask=ask) is True
        assert path.read_text() == "new"
        ask.assert_called_once()
        assert "already exists" in ask.call_args[0][0]

    def test_overwrite_declined_is_skip(self, tmp_path, capsys):
        path = tmp_path / "orders.go"
        path.write_text("old")
        ask = MagicMock(return_value="n")

        assert write_to_file("new", path, force=False, ask=ask) is False
        assert path.read_text() == "old"
        assert f"skip {path}" in capsys.readouterr().out

    def test_closed_input_is_skip(self, tmp_path, capsys):
        path = tmp_path / "orders.go"
        path.write_text("old")
        ask = MagicMock(side_effect=EOFError)

        assert write_to_file("new", path, force=False, ask=ask) is False
        assert path.read_text() == "old"
        assert f"skip {path}" in capsys.readouterr().out
