import pytest

from sqlingo_gen.shared.naming import (
    EXPORTED_PREFIX,
    ensure_identifier,
    lower_first,
    to_exported_identifier,
)


class TestToExportedIdentifier:
    @pytest.mark.parametrize(
        "input_str,expected",
        [
            ("user_id", "UserId"),
            ("user-id", "UserId"),
            ("user id", "UserId"),
            ("order__line--item", "OrderLineItem"),
            ("orders", "Orders"),
            ("createdAt", "CreatedAt"),
            ("HTMLPage", "HTMLPage"),
            ("a", "A"),
            ("_leading", "Leading"),
            ("trailing_", "Trailing"),
            ("v2_api", "V2Api"),
        ],
    )
    def test_to_exported_identifier(self, input_str, expected):
        assert to_exported_identifier(input_str) == expected

    @pytest.mark.parametrize(
        "input_str,expected",
        [
            ("", "E"),
            ("___", "E"),
            ("-", "E"),
            ("2fa_codes", "E2faCodes"),
            ("1", "E1"),
        ],
    )
    def test_sentinel_prefix(self, input_str, expected):
        result = to_exported_identifier(input_str)
        assert result == expected
        assert result.startswith(EXPORTED_PREFIX)

    def test_force_cases(self):
        assert to_exported_identifier("user_id", ["ID"]) == "UserID"
        assert to_exported_identifier("page_html", ["ID", "HTML"]) == "PageHTML"

    def test_force_cases_case_insensitive(self):
        assert to_exported_identifier("USER_ID", ["Id"]) == "USERId"

    def test_force_cases_first_match_wins(self):
        assert to_exported_identifier("ids", ["IDs", "IDS"]) == "IDs"

    def test_force_cases_only_whole_words(self):
        assert to_exported_identifier("identity", ["ID"]) == "Identity"

    def test_force_cases_lowercase_gets_prefix(self):
        assert to_exported_identifier("id", ["id"]) == "Eid"

    def test_force_cases_accepts_tuple_and_list(self):
        assert to_exported_identifier("user_id", ("ID",)) == to_exported_identifier(
            "user_id", ["ID"]
        )

    def test_idempotent_without_separators(self):
        assert to_exported_identifier("UserId") == "UserId"
        assert to_exported_identifier(to_exported_identifier("user_id")) == "UserId"

    def test_no_separators_in_output(self):
        result = to_exported_identifier("a b-c_d.e/f")
        assert result == "ABCDEF"
        assert result.isalnum()

    def test_unicode_letters(self):
        assert to_exported_identifier("größe_kg") == "GrößeKg"

    def test_non_decimal_digits_separate_words(self):
        assert to_exported_identifier("x²") == "X"
        assert to_exported_identifier("area_m²_total") == "AreaMTotal"

    def test_upper_case_expansion_is_not_applied(self):
        assert to_exported_identifier("ßeite") == "Eßeite"
        assert to_exported_identifier("straße_id") == "StraßeId"

    def test_caching(self):
        result1 = to_exported_identifier("user_id", ["ID"])
        result2 = to_exported_identifier("user_id", ["ID"])
        assert result1 == result2 == "UserID"


class TestEnsureIdentifier:
    @pytest.mark.parametrize(
        "input_str,expected",
        [
            ("shop", "shop"),
            ("my-db", "my_db"),
            ("my db.v2", "my_db_v2"),
            ("1st", "_1st"),
            ("", "_"),
            ("character varying", "character_varying"),
            ("already_ok_9", "already_ok_9"),
            ("١db", "_db"),
            ("größe", "gr__e"),
        ],
    )
    def test_ensure_identifier(self, input_str, expected):
        assert ensure_identifier(input_str) == expected


class TestLowerFirst:
    def test_lower_first(self):
        assert lower_first("NumberField") == "numberField"

    def test_lower_first_empty(self):
        assert lower_first("") == ""
