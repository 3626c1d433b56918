# dbglance

The parts of a terminal database viewer that do not touch a screen. The package has no dependencies beyond the standard library.

- **Input history** (`dbglance.history.InputHistory`) stores up to 100 entries for the session. It skips blank input and repeated entries. You can step back and forth through it, and the text you had typed but not sent comes back when you return.
- **SQL context detection** (`dbglance.sql_autocomplete.parse_sql_context`) works out what part of a query the cursor is in, such as the select list, FROM, JOIN, WHERE, ORDER BY, GROUP BY, SET, INSERT or `alias.`. It also reports the tables, aliases and the partly typed word it found.
- **SQL completions** (`dbglance.sql_completion.SqlCompletionState`) offers tables, columns, keywords and functions that fit the current context. The suggestions are drawn from a schema of your choice.
- **Command palette** (`dbglance.command_palette.CommandPaletteState`) filters and ranks the slash commands `/sql`, `/schema`, `/clear`, `/vim`, `/help`, `/quit` and `/exit`. Ranking favours prefix matches first, then substring matches, then fuzzy matches.
- **Spinners** (`dbglance.spinner.Spinner`) provide two animated indicators:
  - a braille "Executing" spinner;
  - a dotted "Thinking" indicator.
- **Confirmation dialog helpers** (`dbglance.confirm`):
  - `wrap_sql` word-wraps a query;
  - `dialog_height` sizes the dialog;
  - `dialog_area` places it on screen.
- **Query log formatting** (`dbglance.querylog`):
  - `format_elapsed_short` and `format_elapsed_detail` format execution times;
  - `modal_area` places the details modal.
- **Geometry** (`dbglance.geometry`):
  - a `Rect` type;
  - `center_rect`;
  - `toast_area`;
  - `help_area` (found in `dbglance.help`) for overlay placement.

## Installation

```
pip install dbglance
```

## Example

```python
from dbglance.history import InputHistory
from dbglance.sql_autocomplete import parse_sql_context, SqlContext

history = InputHistory()
history.push("SELECT 1")
history.push("SELECT 2")
assert history.previous("draft") == "SELECT 2"
assert history.next() == "draft"

result = parse_sql_context("SELECT * FROM users u WHERE ", 28)
assert result.context == SqlContext.WHERE_CLAUSE
assert result.aliases["u"] == "users"
```

## Running the tests

```
pip install -e ".[test]"
pytest
```