"""Orchestrates the rewrite rules: GROUP_CONCAT → CONCAT → IFNULL → boolean literals."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from dbdongle.dialect.base import Dialect
from dbdongle.rewrite.aggregate import rewrite_aggregate_concat
from dbdongle.rewrite.boolean import normalize_boolean_literal
from dbdongle.rewrite.coalesce import rewrite_null_coalesce
from dbdongle.rewrite.concat import rewrite_field_concat

logger = logging.getLogger("dbdongle.rewrite")

RewriteRule = Callable[[str, Dialect], str]


@dataclass(frozen=True)
class RuleStep:
    """A named rewrite rule."""

    name: str
    apply: RewriteRule


@dataclass
class RewriteOutcome:
    """The rewritten SQL and the rules that changed it."""

    sql: str
    applied_rules: list[str] = field(default_factory=list)


# GROUP_CONCAT must run before CONCAT: the CONCAT matcher also sees the
# aggregate's name and relies on the aggregate already being handled.
DEFAULT_RULES: tuple[RuleStep, ...] = (
    RuleStep("aggregate_concat", rewrite_aggregate_concat),
    RuleStep("field_concat", rewrite_field_concat),
    RuleStep("null_coalesce", rewrite_null_coalesce),
    RuleStep("boolean_literal", normalize_boolean_literal),
)


class RewritePipeline:
    """Feeds a SQL fragment through each rule in order."""

    def __init__(self, rules: Iterable[RuleStep] = DEFAULT_RULES) -> None:
        self._rules = tuple(rules)

    def run(self, sql: str, dialect: Dialect) -> RewriteOutcome:
        outcome = RewriteOutcome(sql=sql)
        for rule in self._rules:
            rewritten = rule.apply(outcome.sql, dialect)
            if rewritten != outcome.sql:
                logger.debug("%s rewrote fragment for %s", rule.name, dialect.name.value)
                outcome.applied_rules.append(rule.name)
                outcome.sql = rewritten
        return outcome
