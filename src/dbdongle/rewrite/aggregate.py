"""GROUP_CONCAT rewriting."""

from __future__ import annotations

import re

from dbdongle.dialect.base import Dialect

# Greedy up to the last ")" on the line. Nested calls inside the argument
# list are not tracked, so two aggregates on one line form a single match.
_GROUP_CONCAT = re.compile(r"group_concat\((.+)\)", re.IGNORECASE)
_SEPARATOR = re.compile(r"\s+separator\s+", re.IGNORECASE)
_FIELD_BEFORE_COMMA = re.compile(r"\(([\w.\[\]-]+),")
_FUNCTION_NAME = re.compile(r"group_concat\(", re.IGNORECASE)


def rewrite_aggregate_concat(sql: str, dialect: Dialect) -> str:
    """Rewrite ``GROUP_CONCAT(...)`` calls for the target dialect.

    ``SEPARATOR`` becomes a plain second argument; PostgreSQL-family targets
    additionally cast every ``(field,`` inside the call to ``VARCHAR`` and
    call ``string_agg``; SQL Server calls its CLR aggregate.
    """
    caps = dialect.capabilities
    if not caps.inline_separator and caps.aggregate_function is None:
        return sql

    def _rewrite_call(match: re.Match[str]) -> str:
        call = match.group(0)
        if not match.group(1):
            return call
        if caps.inline_separator:
            call = _SEPARATOR.sub(", ", call)
        if caps.cast_aggregate_args:
            call = _FIELD_BEFORE_COMMA.sub(lambda m: f"({m.group(1)}::VARCHAR,", call)
        if caps.aggregate_function is not None:
            call = _FUNCTION_NAME.sub(lambda _: f"{caps.aggregate_function}(", call)
        return call

    return _GROUP_CONCAT.sub(_rewrite_call, sql)
