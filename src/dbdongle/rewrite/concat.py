"""CONCAT rewriting into an infix concatenation operator."""

from __future__ import annotations

import re
from collections.abc import Iterator

from dbdongle.dialect.base import Dialect

_CONCAT_CALL = re.compile(r"\b(group_)?concat\(", re.IGNORECASE)
_QUOTES = "'\"`"


def rewrite_field_concat(sql: str, dialect: Dialect) -> str:
    """Rewrite ``CONCAT(a, b, ...)`` as ``a || b || ...``.

    Arguments are split on top-level commas only, so nested calls and quoted
    commas survive. Calls inside string literals and ``GROUP_CONCAT`` (left to
    the aggregate rule) are skipped.
    """
    operator = dialect.capabilities.concat_operator
    if operator is None:
        return sql
    return _rewrite(sql, f" {operator} ")


def _rewrite(sql: str, joiner: str) -> str:
    parts: list[str] = []
    pos = 0
    while (match := _CONCAT_CALL.search(sql, pos)) is not None:
        if match.group(1) or _inside_quotes(sql, match.start()):
            # aggregate call or literal text; an aggregate's arguments may still
            # hold a CONCAT
            parts.append(sql[pos : match.end()])
            pos = match.end()
            continue

        close = _find_closing_paren(sql, match.end())
        if close is None:
            break
        inner = sql[match.end() : close]
        parts.append(sql[pos : match.start()])
        if inner.strip():
            parts.append(joiner.join(_rewrite(arg, joiner) for arg in _split_arguments(inner)))
        else:
            parts.append(sql[match.start() : close + 1])
        pos = close + 1

    parts.append(sql[pos:])
    return "".join(parts)


def _scan(text: str, start: int = 0) -> Iterator[tuple[int, str, int]]:
    """Yield ``(index, char, depth)`` for characters outside quoted strings."""
    depth = 0
    quote: str | None = None
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if quote is not None:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue
        if char in _QUOTES:
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        yield index, char, depth


def _inside_quotes(text: str, index: int) -> bool:
    quote: str | None = None
    escaped = False
    for char in text[:index]:
        if quote is None:
            if char in _QUOTES:
                quote = char
        elif escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == quote:
            quote = None
    return quote is not None


def _find_closing_paren(sql: str, start: int) -> int | None:
    """Index of the ``)`` closing the call whose arguments begin at ``start``."""
    for index, char, depth in _scan(sql, start):
        if char == ")" and depth < 0:
            return index
    return None


def _split_arguments(inner: str) -> list[str]:
    args: list[str] = []
    last = 0
    for index, char, depth in _scan(inner):
        if char == "," and depth == 0:
            args.append(inner[last:index].strip())
            last = index + 1
    args.append(inner[last:].strip())
    return args
