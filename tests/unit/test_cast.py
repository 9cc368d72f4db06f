"""Tests for the dialect-aware cast helper."""

from __future__ import annotations

import pytest

from dbdongle.dongle import Dongle


@pytest.mark.parametrize("driver", ["pgsql", "postgis"])
def test_postgres_wraps(driver: str) -> None:
    assert Dongle(driver).cast("x", "TEXT") == "CAST(x AS TEXT)"


def test_default_target_type(pgsql: Dongle) -> None:
    assert pgsql.cast("parent_id") == "CAST(parent_id AS INTEGER)"


@pytest.mark.parametrize("driver", ["mysql", "sqlite", "sqlsrv"])
def test_other_dialects_unchanged(driver: str) -> None:
    assert Dongle(driver).cast("x", "TEXT") == "x"


def test_not_applied_by_translate(pgsql: Dongle) -> None:
    assert pgsql.translate("x = 1") == "x = 1"
