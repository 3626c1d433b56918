"""Schema-aware SQL completion items and the popup's selection state."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from dbglance.geometry import Rect
from dbglance.sql_autocomplete import SqlContext, parse_sql_context

_MAX_WIDTH = 60
_MAX_HEIGHT = 12

_START_KEYWORDS = ("SELECT", "INSERT", "UPDATE", "DELETE", "WITH")
_CONDITION_KEYWORDS = ("AND", "OR", "NOT", "IN", "LIKE", "BETWEEN", "IS", "NULL")
_ORDER_KEYWORDS = ("ASC", "DESC", "NULLS", "FIRST", "LAST")
_COMMON_FUNCTIONS = (
    "COUNT", "SUM", "AVG", "MIN", "MAX", "COALESCE", "NULLIF", "CONCAT",
    "LENGTH", "LOWER", "UPPER", "NOW",
)


class _ColumnLike(Protocol):
    name: str
    data_type: str


class _TableLike(Protocol):
    name: str
    columns: Sequence[_ColumnLike]


class _SchemaLike(Protocol):
    tables: Sequence[_TableLike]


class CompletionKind(Enum):
    """What a completion item stands for."""

    TABLE = "tbl"
    COLUMN = "col"
    KEYWORD = "kw"
    FUNCTION = "fn"

    def label(self) -> str:
        """Short tag shown next to the item."""
        return self.value


@dataclass
class CompletionItem:
    """Text to insert, its kind and an optional detail such as a column type."""

    text: str
    kind: CompletionKind
    detail: str | None = None


def popup_area(input_area: Rect, max_items: int) -> Rect:
    """Area for the completion popup, placed just above the input bar."""
    width = min(input_area.width, _MAX_WIDTH)
    height = min(max_items + 2, _MAX_HEIGHT)
    x = input_area.x + 1
    y = max(input_area.y - height, 0)
    return Rect(x, y, width, height)


@dataclass
class SqlCompletionState:
    """Visibility, items, selection and filter of the completion popup."""

    visible: bool = False
    items: list[CompletionItem] = field(default_factory=list)
    selected: int = 0
    filter: str = ""

    def update(
        self, text: str, cursor_pos: int, schema: _SchemaLike | None
    ) -> None:
        """Recompute completions for ``text`` with the cursor at ``cursor_pos``."""
        result = parse_sql_context(text, cursor_pos)
        self.filter = result.current_word
        self.items = []
        context = result.context

        if context is SqlContext.START:
            self._add_keywords(_START_KEYWORDS)
        elif context is SqlContext.SELECT_COLUMNS:
            self.items.append(CompletionItem("*", CompletionKind.KEYWORD))
            if schema is not None:
                self._add_columns_from_tables(schema, result.tables)
            self._add_functions()
        elif context in (SqlContext.FROM_TABLE, SqlContext.JOIN_TABLE):
            if schema is not None:
                self.items.extend(
                    CompletionItem(table.name, CompletionKind.TABLE)
                    for table in schema.tables
                )
        elif context in (SqlContext.WHERE_CLAUSE, SqlContext.JOIN_CONDITION):
            if schema is not None:
                self._add_columns_from_tables(schema, result.tables)
            self._add_keywords(_CONDITION_KEYWORDS)
        elif context in (SqlContext.ORDER_BY, SqlContext.GROUP_BY):
            if schema is not None:
                self._add_columns_from_tables(schema, result.tables)
            if context is SqlContext.ORDER_BY:
                self._add_keywords(_ORDER_KEYWORDS)
        elif context is SqlContext.ALIAS_DOT:
            if schema is not None and result.alias is not None:
                table_name = result.aliases.get(result.alias, result.alias)
                self._add_columns_from_table(schema, table_name)
        elif context in (SqlContext.SET_CLAUSE, SqlContext.INSERT_COLUMNS):
            if schema is not None and result.tables:
                self._add_columns_from_table(schema, result.tables[0])

        needle = self.filter.lower()
        if needle:
            self.items = [item for item in self.items if needle in item.text.lower()]
        self.items.sort(
            key=lambda item: (
                not item.text.lower().startswith(needle),
                item.text.lower(),
            )
        )

        self.visible = bool(self.items)
        self.selected = 0

    def select_previous(self) -> None:
        """Move the selection up, stopping at the first item."""
        if self.items:
            self.selected = max(self.selected - 1, 0)

    def select_next(self) -> None:
        """Move the selection down, stopping at the last item."""
        if self.items:
            self.selected = min(self.selected + 1, len(self.items) - 1)

    def selected_item(self) -> CompletionItem | None:
        """The item under the selection, or None when there are no items."""
        if 0 <= self.selected < len(self.items):
            return self.items[self.selected]
        return None

    def close(self) -> None:
        """Hide the popup and forget its items and filter."""
        self.visible = False
        self.items = []
        self.selected = 0
        self.filter = ""

    def _add_keywords(self, keywords: Iterable[str]) -> None:
        self.items.extend(CompletionItem(kw, CompletionKind.KEYWORD) for kw in keywords)

    def _add_functions(self) -> None:
        self.items.extend(
            CompletionItem(name, CompletionKind.FUNCTION) for name in _COMMON_FUNCTIONS
        )

    def _add_columns_from_table(self, schema: _SchemaLike, table_name: str) -> None:
        table = next((t for t in schema.tables if t.name == table_name), None)
        if table is None:
            return
        self.items.extend(
            CompletionItem(column.name, CompletionKind.COLUMN, column.data_type)
            for column in table.columns
        )

    def _add_columns_from_tables(
        self, schema: _SchemaLike, tables: Sequence[str]
    ) -> None:
        if not tables:
            self.items.extend(
                CompletionItem(
                    column.name,
                    CompletionKind.COLUMN,
                    f"{table.name}.{column.data_type}",
                )
                for table in schema.tables
                for column in table.columns
            )
            return
        for table_name in tables:
            self._add_columns_from_table(schema, table_name)