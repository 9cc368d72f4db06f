"""Regex-driven rewrite rules for dbdongle."""

from dbdongle.rewrite.aggregate import rewrite_aggregate_concat
from dbdongle.rewrite.boolean import normalize_boolean_literal
from dbdongle.rewrite.cast import cast
from dbdongle.rewrite.coalesce import rewrite_null_coalesce
from dbdongle.rewrite.concat import rewrite_field_concat
from dbdongle.rewrite.pipeline import DEFAULT_RULES, RewriteOutcome, RewritePipeline, RuleStep

__all__ = [
    "DEFAULT_RULES",
    "RewriteOutcome",
    "RewritePipeline",
    "RuleStep",
    "cast",
    "normalize_boolean_literal",
    "rewrite_aggregate_concat",
    "rewrite_field_concat",
    "rewrite_null_coalesce",
]
