"""Detects the SQL context at the cursor for context-aware completion."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

KEYWORDS: tuple[str, ...] = (
    "SELECT", "FROM", "WHERE", "JOIN", "LEFT", "RIGHT", "INNER", "OUTER",
    "CROSS", "ON", "AND", "OR", "ORDER", "BY", "GROUP", "HAVING", "LIMIT",
    "OFFSET", "INSERT", "INTO", "VALUES", "UPDATE", "SET", "DELETE", "AS",
    "DISTINCT", "ALL", "UNION", "EXCEPT", "INTERSECT", "CREATE", "DROP",
    "ALTER", "TABLE", "INDEX", "VIEW", "GRANT", "REVOKE", "NULL", "NOT", "IN",
    "LIKE", "BETWEEN", "EXISTS", "CASE", "WHEN", "THEN", "ELSE", "END", "ASC",
    "DESC", "NULLS", "FIRST", "LAST", "TRUE", "FALSE", "IS", "CAST",
    "COALESCE", "NULLIF",
)

FUNCTIONS: tuple[str, ...] = (
    "COUNT", "SUM", "AVG", "MIN", "MAX", "COALESCE", "NULLIF", "CAST",
    "CONCAT", "LENGTH", "LOWER", "UPPER", "TRIM", "SUBSTRING", "REPLACE",
    "NOW", "CURRENT_DATE", "CURRENT_TIME", "CURRENT_TIMESTAMP", "DATE_TRUNC",
    "EXTRACT", "TO_CHAR", "TO_DATE", "TO_NUMBER", "ROUND", "FLOOR", "CEIL",
    "ABS", "RANDOM", "ROW_NUMBER", "RANK", "DENSE_RANK", "LAG", "LEAD",
    "FIRST", "LAST", "ARRAY_AGG", "STRING_AGG", "JSON_AGG", "JSONB_AGG",
)

_RESERVED = frozenset(KEYWORDS) | frozenset(FUNCTIONS)
_JOIN_WORDS = frozenset({"JOIN", "INNER", "LEFT", "RIGHT", "OUTER", "CROSS"})


class SqlContext(Enum):
    """Where in a statement the cursor sits."""

    START = auto()
    SELECT_COLUMNS = auto()
    FROM_TABLE = auto()
    JOIN_TABLE = auto()
    WHERE_CLAUSE = auto()
    ORDER_BY = auto()
    GROUP_BY = auto()
    ALIAS_DOT = auto()
    JOIN_CONDITION = auto()
    SET_CLAUSE = auto()
    INSERT_COLUMNS = auto()


@dataclass
class SqlParseResult:
    """Context at the cursor plus what was learned about the statement so far.

    ``alias`` is set only for ``SqlContext.ALIAS_DOT`` and holds the lower-cased
    name that precedes the dot.
    """

    context: SqlContext = SqlContext.START
    aliases: dict[str, str] = field(default_factory=dict)
    tables: list[str] = field(default_factory=list)
    current_word: str = ""
    alias: str | None = None


def tokenize(sql: str) -> list[str]:
    """Split SQL into identifier-like words, dropping punctuation and whitespace."""
    tokens: list[str] = []
    word: list[str] = []
    for char in sql:
        if char.isalnum() or char == "_":
            word.append(char)
        elif word:
            tokens.append("".join(word))
            word = []
    if word:
        tokens.append("".join(word))
    return tokens


def is_keyword(word: str) -> bool:
    """True if the word (any case) is a known SQL keyword or function name."""
    return word.upper() in _RESERVED


def sql_keywords() -> tuple[str, ...]:
    """All known SQL keywords."""
    return KEYWORDS


def sql_functions() -> tuple[str, ...]:
    """All known SQL function names."""
    return FUNCTIONS


def _table_with_alias(
    tokens: list[str], at: int, result: SqlParseResult
) -> int:
    """Record the table at ``at`` and an alias after it.

    Returns how many tokens past the table were consumed by the alias.
    """
    table = tokens[at].lower()
    if is_keyword(table):
        return 0
    result.tables.append(table)
    if at + 1 >= len(tokens):
        return 0
    following = tokens[at + 1].upper()
    if following == "AS" and at + 2 < len(tokens):
        result.aliases[tokens[at + 2].lower()] = table
        return 2
    if not is_keyword(following):
        result.aliases[following.lower()] = table
        return 1
    return 0


def parse_sql_context(sql: str, cursor_pos: int) -> SqlParseResult:
    """Parse the text before ``cursor_pos`` and report the completion context."""
    before_cursor = sql[: min(cursor_pos, len(sql))]
    tokens = tokenize(before_cursor)
    trimmed = before_cursor.rstrip()
    result = SqlParseResult()

    if tokens:
        last = tokens[-1]
        if not is_keyword(last) and trimmed.endswith(last):
            result.current_word = last

    if trimmed.endswith("."):
        words = trimmed[:-1].split()
        if words:
            return SqlParseResult(
                context=SqlContext.ALIAS_DOT, alias=words[-1].lower()
            )

    count = len(tokens)

    def upper_at(index: int) -> str | None:
        return tokens[index].upper() if index < count else None

    i = 0
    while i < count:
        token = tokens[i].upper()
        if token == "SELECT":
            result.context = SqlContext.SELECT_COLUMNS
        elif token == "FROM":
            result.context = SqlContext.FROM_TABLE
            if i + 1 < count:
                consumed = _table_with_alias(tokens, i + 1, result)
                if consumed:
                    i += consumed + 1
        elif token in _JOIN_WORDS:
            if token == "JOIN" or upper_at(i + 1) == "JOIN":
                result.context = SqlContext.JOIN_TABLE
                if token != "JOIN":
                    i += 1
                if i + 1 < count:
                    _table_with_alias(tokens, i + 1, result)
        elif token == "ON":
            result.context = SqlContext.JOIN_CONDITION
        elif token == "WHERE":
            result.context = SqlContext.WHERE_CLAUSE
        elif token == "ORDER":
            if upper_at(i + 1) == "BY":
                result.context = SqlContext.ORDER_BY
                i += 1
        elif token == "GROUP":
            if upper_at(i + 1) == "BY":
                result.context = SqlContext.GROUP_BY
                i += 1
        elif token == "UPDATE":
            if i + 1 < count:
                table = tokens[i + 1].lower()
                if not is_keyword(table):
                    result.tables.append(table)
        elif token == "SET":
            result.context = SqlContext.SET_CLAUSE
        elif token == "INSERT":
            if upper_at(i + 1) == "INTO":
                if i + 2 < count:
                    table = tokens[i + 2].lower()
                    if not is_keyword(table):
                        result.tables.append(table)
                result.context = SqlContext.INSERT_COLUMNS
                i += 1
        i += 1

    return result