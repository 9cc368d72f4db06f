"""IFNULL rewriting."""

from __future__ import annotations

import re

from dbdongle.dialect.base import Dialect

_IFNULL = re.compile(r"\bifnull\(", re.IGNORECASE)


def rewrite_null_coalesce(sql: str, dialect: Dialect) -> str:
    """Rename ``IFNULL(`` to the dialect's null-coalescing function."""
    function = dialect.capabilities.coalesce_function
    if function is None:
        return sql
    return _IFNULL.sub(lambda _: f"{function}(", sql)
