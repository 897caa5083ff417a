# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterator

from tickbox.connectors.console_connector import run_console_loop


def _reader(lines: list[str]):
    it: Iterator[str] = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_plain_text_adds_and_commands_route(state) -> None:
    out: list[str] = []
    run_console_loop(
        state,
        read_line=_reader(["buy milk", "   ", "/toggle 1", "walk dog", "/exit", "never read"]),
        write=out.append,
    )

    assert [(t.text, t.completed) for t in state.store.tasks] == [
        ("buy milk", True),
        ("walk dog", False),
    ]
    assert any("Added #1" in line for line in out)
    assert any("#1 is now completed" in line for line in out)


def test_eof_exits_cleanly(state) -> None:
    out: list[str] = []
    run_console_loop(state, read_line=_reader([]), write=out.append)
    assert "(nothing to show)" in out[1]


def test_handler_crash_is_reported(state, monkeypatch) -> None:
    def boom(text, due_date=None):
        raise RuntimeError("boom")

    monkeypatch.setattr(state, "add", boom)
    out: list[str] = []
    run_console_loop(state, read_line=_reader(["explode"]), write=out.append)

    assert out[-1] == "Internal error while handling a command."
