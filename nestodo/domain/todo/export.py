"""Flatten the forest and render it as CSV.

CSV layout, one header row then one row per todo in pre-order:

    level,path,parentId,parentTitle,id,title,priority,completed,createdAt

``level`` is the bare depth integer and ``completed`` the bare literal
``true``/``false``; every other field is wrapped in double quotes with
embedded quotes doubled, whether or not it needs it. Rows are separated
by ``\\n`` with no trailing newline.
"""

from collections.abc import Sequence
from datetime import date

from .models import PATH_SEPARATOR, ExportRow, Todo

CSV_HEADER = (
    "level",
    "path",
    "parentId",
    "parentTitle",
    "id",
    "title",
    "priority",
    "completed",
    "createdAt",
)


def flatten_for_export(forest: Sequence[Todo]) -> list[ExportRow]:
    """Flatten the forest depth-first, parents before their children."""
    rows: list[ExportRow] = []

    def visit(todo: Todo, parent: Todo | None, titles: list[str]) -> None:
        path = titles + [todo.title]
        rows.append(
            ExportRow(
                id=todo.id,
                title=todo.title,
                parent_id=parent.id if parent else None,
                parent_title=parent.title if parent else None,
                completed=todo.completed,
                priority=todo.priority,
                created_at=todo.created_at,
                depth=len(titles),
                path=PATH_SEPARATOR.join(path),
            )
        )
        for child in todo.children:
            visit(child, todo, path)

    for todo in forest:
        visit(todo, None, [])
    return rows


def escape_csv_field(value: str | None) -> str:
    """Quote a field unconditionally, doubling embedded quotes."""
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def _csv_line(row: ExportRow) -> str:
    return ",".join(
        [
            str(row.depth),
            escape_csv_field(row.path),
            escape_csv_field(row.parent_id),
            escape_csv_field(row.parent_title),
            escape_csv_field(row.id),
            escape_csv_field(row.title),
            escape_csv_field(row.priority.value),
            "true" if row.completed else "false",
            escape_csv_field(row.created_at),
        ]
    )


def to_csv(forest: Sequence[Todo]) -> str:
    """Render the whole forest as CSV text."""
    lines = [",".join(CSV_HEADER)]
    lines.extend(_csv_line(row) for row in flatten_for_export(forest))
    return "\n".join(lines)


def export_filename(today: date) -> str:
    """Default download name for an export made on ``today``."""
    return f"nested-todos-{today.isoformat()}.csv"
