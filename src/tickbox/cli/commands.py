# src/tickbox/cli/commands.py

from __future__ import annotations

import inspect
import logging
import re
from collections.abc import Callable
from typing import cast

from ..connectors.html_export import export_html
from ..core.state import AppState, RenderModel
from ..todos.todo_models import DueClass, FilterMode, SortMode
from ..todos.views import parse_due_date

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

_DUE_TOKEN = re.compile(r"(?:^|\s+)due:(\S*)", re.IGNORECASE)


class CommandArgs(list[str]):
    """Whitespace-split arguments that also keep the unsplit remainder of the line."""

    def __init__(self, tokens: list[str], raw: str = "") -> None:
        super().__init__(tokens)
        self.raw = raw


class CommandRegistry:
    """Simple slash-command registry used by front-ends (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""
        args = CommandArgs(rest.split(), raw=rest)

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


_DUE_MARKERS = {
    DueClass.OVERDUE: " !overdue",
    DueClass.DUE_TODAY: " !today",
    DueClass.DUE_TOMORROW: "",
    DueClass.NONE: "",
}


def render_list(model: RenderModel) -> str:
    """Plain-text rendering of the projected list."""
    header = f"Todos [filter: {model.filter_mode.value}, sort: {model.sort_mode.value}]"
    if not model.rows:
        return f"{header}\n  (nothing to show)"

    lines = [header]
    for row in model.rows:
        mark = "x" if row.task.completed else " "
        due = f" ({row.due_label})" if row.due_label else ""
        lines.append(f"  [{mark}] #{row.task.id} {row.task.text}{due}{_DUE_MARKERS[row.due_class]}")
    lines.append(f"  {model.active} active, {model.completed} completed")
    return "\n".join(lines)


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_list(state.render_model())


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add buy milk                 -> task without due date
    /add buy milk due:2024-01-20  -> task due on that day
    """
    raw = getattr(args, "raw", " ".join(args))

    due_date = None
    for m in _DUE_TOKEN.finditer(raw):
        due_date = parse_due_date(m.group(1))
        if due_date is None:
            return f"Invalid due date: {m.group(1)!r}. Use due:YYYY-MM-DD."

    # Text keeps its inner spacing; only due: tokens are cut out.
    task = state.add(_DUE_TOKEN.sub("", raw), due_date)
    if task is None:
        return "Usage: /add <text> [due:YYYY-MM-DD]"
    return f"Added #{task.id}.\n{render_list(state.render_model())}"


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /toggle <id>"

    task = state.toggle(task_id)
    if task is None:
        return f"No task #{task_id}."
    status = "completed" if task.completed else "active"
    return f"#{task.id} is now {status}.\n{render_list(state.render_model())}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /delete <id>"

    if not state.delete(task_id):
        return f"No task #{task_id}."
    return f"Deleted #{task_id}.\n{render_list(state.render_model())}"


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter            -> show current filter
    /filter active     -> only not-completed tasks
    """
    if not args:
        choices = " | ".join(m.value for m in FilterMode)
        return f"Filter is {state.filter_mode.value}. Use /filter {choices}."

    mode = state.set_filter(args[0])
    return f"Filter: {mode.value}.\n{render_list(state.render_model())}"


def cmd_sort(state: AppState, args: list[str]) -> str:
    if not args:
        choices = " | ".join(m.value for m in SortMode)
        return f"Sort is {state.sort_mode.value}. Use /sort {choices}."

    mode = state.set_sort(args[0])
    return f"Sort: {mode.value}.\n{render_list(state.render_model())}"


def cmd_status(state: AppState, args: list[str]) -> str:
    model = state.render_model()
    backend = getattr(state.settings, "storage_backend", "?")
    path = getattr(state.settings, "storage_path", "?")
    return (
        "Status:\n"
        f"  Tasks: {model.total} ({model.active} active, {model.completed} completed)\n"
        f"  Next id: {state.store.next_id}\n"
        f"  Filter/sort: {model.filter_mode.value} / {model.sort_mode.value}\n"
        f"  Storage: {backend} at {path}"
    )


def cmd_export(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /export            -> write HTML to settings.export_path
    /export out.html   -> write HTML to the given path
    """
    target = getattr(args, "raw", " ".join(args)).strip()
    if not target:
        target = getattr(state.settings, "export_path", "todos.html")
    if emit:
        emit(f"[EXPORT] Writing {target} ...")

    title = str(getattr(state.settings, "app_name", "Todos"))
    try:
        path = export_html(state.render_model(), target, title=title)
    except OSError as e:
        logger.warning("HTML export to %s failed: %s", target, e)
        return f"Export failed: {e}"
    return f"Exported to {path}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the todo list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a todo: /add <text> [due:YYYY-MM-DD].")
registry.register("toggle", cmd_toggle, help_text="Complete/uncomplete: /toggle <id>.", aliases=["done"])
registry.register("delete", cmd_delete, help_text="Remove a todo: /delete <id>.", aliases=["rm", "del"])
registry.register("filter", cmd_filter, help_text="Filter: /filter all | active | completed.")
registry.register("sort", cmd_sort, help_text="Sort: /sort due-date | none.")
registry.register("status", cmd_status, help_text="Show counts and storage location.")
registry.register("export", cmd_export, help_text="Write an HTML page: /export [path].")
