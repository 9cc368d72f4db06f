"""The translator: rewrites MySQL-flavoured SQL for one target driver."""

from __future__ import annotations

from dataclasses import dataclass, field

from dbdongle.dialect import REFERENCE_DIALECT, Dialect, DialectName, DialectRegistry
from dbdongle.rewrite import (
    RewritePipeline,
    normalize_boolean_literal,
    rewrite_aggregate_concat,
    rewrite_field_concat,
    rewrite_null_coalesce,
)
from dbdongle.rewrite import cast as _cast
from dbdongle.validator import validate_sql


@dataclass
class TranslationResult:
    """The result of translating and validating a fragment."""

    sql: str
    dialect: str
    applied_rules: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    sql_valid: bool = True


class Dongle:
    """Converts MySQL syntax to the configured driver with regex rewrites.

    Only a fixed set of constructs is handled: ``GROUP_CONCAT``, ``CONCAT``,
    ``IFNULL`` and ``true``/``false`` comparisons. Everything else passes
    through untouched. Instances hold no mutable state and may be shared
    between threads.

    An unknown driver name behaves like the reference ``mysql`` driver.
    """

    def __init__(
        self,
        dialect: str | DialectName | Dialect = REFERENCE_DIALECT,
        table_prefix: str = "",
        pipeline: RewritePipeline | None = None,
        validate: bool = True,
    ) -> None:
        self._dialect = DialectRegistry.resolve(dialect)
        self._table_prefix = table_prefix
        self._pipeline = pipeline or RewritePipeline()
        self._validate = validate

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    @property
    def driver(self) -> DialectName:
        """The driver name, eg: ``pgsql``."""
        return self._dialect.name

    @property
    def table_prefix(self) -> str:
        return self._table_prefix

    def translate(self, sql: str) -> str:
        """Transform a SQL fragment to match the active driver."""
        if self._dialect.is_reference:
            return sql
        return self._pipeline.run(sql, self._dialect).sql

    def translate_checked(self, sql: str) -> TranslationResult:
        """Translate, then parse the result with sqlglot (non-blocking).

        With validation switched off the result is always reported valid.
        """
        outcome = self._pipeline.run(sql, self._dialect)
        errors = validate_sql(outcome.sql, self.driver) if self._validate else []
        return TranslationResult(
            sql=outcome.sql,
            dialect=self.driver.value,
            applied_rules=outcome.applied_rules,
            warnings=[f"SQL validation: {e}" for e in errors],
            sql_valid=not errors,
        )

    def rewrite_aggregate_concat(self, sql: str) -> str:
        return rewrite_aggregate_concat(sql, self._dialect)

    def rewrite_field_concat(self, sql: str) -> str:
        return rewrite_field_concat(sql, self._dialect)

    def rewrite_null_coalesce(self, sql: str) -> str:
        return rewrite_null_coalesce(sql, self._dialect)

    def normalize_boolean_literal(self, sql: str) -> str:
        return normalize_boolean_literal(sql, self._dialect)

    def cast(self, expression: str, target_type: str = "INTEGER") -> str:
        """Some drivers require same-type comparisons."""
        return _cast(expression, self._dialect, target_type)

    def __repr__(self) -> str:
        return f"Dongle(driver={self.driver.value!r}, table_prefix={self._table_prefix!r})"
