"""Tests for CONCAT rewriting."""

from __future__ import annotations

import pytest

from dbdongle.dongle import Dongle
from tests.conftest import DRIVERS


class TestOperatorDialects:
    @pytest.mark.parametrize("driver", ["pgsql", "postgis", "sqlite"])
    def test_two_fields(self, driver: str) -> None:
        assert Dongle(driver).rewrite_field_concat("CONCAT(first, last)") == "first || last"

    def test_trims_fields(self, sqlite: Dongle) -> None:
        assert sqlite.rewrite_field_concat("concat( a ,b,   c )") == "a || b || c"

    def test_quoted_comma_kept(self, sqlite: Dongle) -> None:
        result = sqlite.rewrite_field_concat("CONCAT(last, ', ', first)")
        assert result == "last || ', ' || first"

    def test_nested_concat(self, pgsql: Dongle) -> None:
        result = pgsql.rewrite_field_concat("CONCAT(a, CONCAT(b, c))")
        assert result == "a || b || c"

    def test_nested_function_argument(self, pgsql: Dongle) -> None:
        result = pgsql.rewrite_field_concat("CONCAT(UPPER(a), LOWER(b, c))")
        assert result == "UPPER(a) || LOWER(b, c)"

    def test_inside_select(self, sqlite: Dongle) -> None:
        sql = "SELECT CONCAT(first, ' ', last) AS name FROM users"
        result = sqlite.rewrite_field_concat(sql)
        assert result == "SELECT first || ' ' || last AS name FROM users"

    def test_two_calls(self, sqlite: Dongle) -> None:
        result = sqlite.rewrite_field_concat("CONCAT(a, b), CONCAT(c, d)")
        assert result == "a || b, c || d"


class TestPassThrough:
    @pytest.mark.parametrize("driver", ["mysql", "sqlsrv"])
    def test_unchanged(self, driver: str) -> None:
        sql = "CONCAT(first, last)"
        assert Dongle(driver).rewrite_field_concat(sql) == sql

    @pytest.mark.parametrize("driver", DRIVERS)
    def test_group_concat_skipped(self, driver: str) -> None:
        sql = "GROUP_CONCAT(a, b)"
        assert Dongle(driver).rewrite_field_concat(sql) == sql

    def test_lowercase_group_concat_skipped(self, sqlite: Dongle) -> None:
        assert sqlite.rewrite_field_concat("group_concat(a, b)") == "group_concat(a, b)"

    def test_concat_inside_group_concat(self, sqlite: Dongle) -> None:
        result = sqlite.rewrite_field_concat("GROUP_CONCAT(CONCAT(a, b))")
        assert result == "GROUP_CONCAT(a || b)"

    def test_other_function_names_skipped(self, sqlite: Dongle) -> None:
        sql = "my_concat(a, b)"
        assert sqlite.rewrite_field_concat(sql) == sql

    def test_call_inside_string_literal_unchanged(self, sqlite: Dongle) -> None:
        sql = "SELECT 'CONCAT(a, b)' FROM t"
        assert sqlite.rewrite_field_concat(sql) == sql

    def test_literal_argument_keeps_its_text(self, sqlite: Dongle) -> None:
        result = sqlite.rewrite_field_concat("CONCAT('CONCAT(a,b)', c)")
        assert result == "'CONCAT(a,b)' || c"

    def test_empty_call_unchanged(self, sqlite: Dongle) -> None:
        assert sqlite.rewrite_field_concat("CONCAT()") == "CONCAT()"

    def test_unbalanced_unchanged(self, sqlite: Dongle) -> None:
        sql = "CONCAT(a, b"
        assert sqlite.rewrite_field_concat(sql) == sql

    def test_idempotent(self, pgsql: Dongle) -> None:
        once = pgsql.rewrite_field_concat("CONCAT(a, b)")
        assert pgsql.rewrite_field_concat(once) == once
