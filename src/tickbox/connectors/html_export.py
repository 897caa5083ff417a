# src/tickbox/connectors/html_export.py

"""
Static HTML rendering of the current list.

All user text goes through html.escape before it touches markup.
"""

from __future__ import annotations

import html
import logging
import os
from pathlib import Path

from ..core.state import RenderModel, TaskRow
from ..todos.todo_models import DueClass, FilterMode

logger = logging.getLogger(__name__)

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: sans-serif; max-width: 40rem; margin: 2rem auto; }}
.todo-list {{ list-style: none; padding: 0; }}
.todo-item {{ display: flex; gap: .5rem; padding: .25rem 0; }}
.todo-item.completed .todo-text {{ text-decoration: line-through; opacity: .6; }}
.todo-due {{ margin-left: auto; font-size: .9em; color: #666; }}
.overdue .todo-due {{ color: #c0392b; font-weight: bold; }}
.due-today .todo-due {{ color: #d35400; }}
.due-tomorrow .todo-due {{ color: #2980b9; }}
</style>
</head>
<body>
<h1>{title}</h1>
<p class="filters">{filters}</p>
<ul class="todo-list">
{items}
</ul>
<p class="summary">{summary}</p>
</body>
</html>
"""


def _render_row(row: TaskRow) -> str:
    classes = ["todo-item"]
    if row.task.completed:
        classes.append("completed")
    if row.due_class is not DueClass.NONE:
        classes.append(row.due_class.value)

    checked = " checked" if row.task.completed else ""
    due = ""
    if row.due_label:
        due = f'<span class="todo-due">{html.escape(row.due_label)}</span>'

    return (
        f'<li class="{" ".join(classes)}" data-id="{row.task.id}">'
        f'<input type="checkbox" class="todo-checkbox" disabled{checked}>'
        f'<span class="todo-text">{html.escape(row.task.text)}</span>'
        f"{due}</li>"
    )


def render_html(model: RenderModel, *, title: str = "Todos") -> str:
    filters = " ".join(
        f'<span class="filter-btn{" active" if mode is model.filter_mode else ""}">'
        f"{mode.value}</span>"
        for mode in FilterMode
    )
    items = "\n".join(_render_row(r) for r in model.rows)
    summary = f"{model.active} active, {model.completed} completed, sorted by {model.sort_mode.value}"
    return _PAGE.format(
        title=html.escape(title),
        filters=filters,
        items=items,
        summary=html.escape(summary),
    )


def export_html(model: RenderModel, path: str | Path, *, title: str = "Todos") -> Path:
    """Write the rendered page atomically and return the target path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = path.with_suffix(".tmp")
    tmp_path.write_text(render_html(model, title=title), "utf-8")
    os.replace(tmp_path, path)

    logger.info("Exported %d todos to %s", len(model.rows), path)
    return path
