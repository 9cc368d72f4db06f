"""Shared test fixtures for dbdongle."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from dbdongle.dialect import DialectRegistry
from dbdongle.dongle import Dongle

DRIVERS = ["mysql", "pgsql", "postgis", "sqlite", "sqlsrv"]
TARGET_DRIVERS = ["pgsql", "postgis", "sqlite", "sqlsrv"]


class RecordingConnection:
    """In-memory stand-in for a database connection; records issued SQL."""

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        self.config = config or {}
        self.statements: list[str] = []
        self.updates: list[str] = []

    def statement(self, sql: str) -> bool:
        self.statements.append(sql)
        return True

    def update(self, sql: str) -> int:
        self.updates.append(sql)
        return 0

    def get_config(self, key: str) -> Any:
        return self.config.get(key)


@pytest.fixture
def mysql() -> Dongle:
    return Dongle("mysql")


@pytest.fixture
def pgsql() -> Dongle:
    return Dongle("pgsql")


@pytest.fixture
def postgis() -> Dongle:
    return Dongle("postgis")


@pytest.fixture
def sqlite() -> Dongle:
    return Dongle("sqlite")


@pytest.fixture
def sqlsrv() -> Dongle:
    return Dongle("sqlsrv")


@pytest.fixture
def connection() -> RecordingConnection:
    return RecordingConnection()


@pytest.fixture
def isolated_registry() -> Iterator[type[DialectRegistry]]:
    """Let a test mutate the dialect registry; the built-ins are restored after."""
    classes = [type(DialectRegistry.get(name)) for name in DialectRegistry.available()]
    yield DialectRegistry
    DialectRegistry.reset()
    for dialect_class in classes:
        DialectRegistry.register(dialect_class)
