"""Boolean literal normalisation for dialects storing booleans as integers."""

from __future__ import annotations

import re

from dbdongle.dialect.base import Dialect

_BOOLEAN_COMPARISON = re.compile(r"(\w+\s*(?:=|<>)\s*)(true|false)(?=$|\s)", re.IGNORECASE)


def normalize_boolean_literal(sql: str, dialect: Dialect) -> str:
    """Rewrite ``col = true`` / ``col <> false`` comparisons to ``1`` / ``0``."""
    if not dialect.capabilities.integer_booleans:
        return sql
    return _BOOLEAN_COMPARISON.sub(_as_integer, sql)


def _as_integer(match: re.Match[str]) -> str:
    literal = "1" if match.group(2).lower() == "true" else "0"
    return f"{match.group(1)}{literal}"
