# tests/test_console_connector.py

from __future__ import annotations

from crew_schedule.connectors.console_connector import run_console_loop


def _scripted(lines: list[str]):
    it = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_console_loop_runs_commands_until_exit(state, emitted) -> None:
    run_console_loop(
        state,
        read_line=_scripted(
            [
                "/add research A 09:00 10:00",
                "",
                "hello",
                "/add exercise B 09:30 10:30",
                "/exit",
                "/add research never 12:00 13:00",
            ]
        ),
    )

    text = "\n".join(emitted)
    assert "ASTRONAUT DAILY SCHEDULE ORGANIZER" in text
    assert "Task added successfully!" in text
    assert "Commands start with '/'" in text
    assert "*** SCHEDULE CONFLICT DETECTED ***" in text
    assert state.service.task_count() == 1
    assert not state.service.has_task("never")


def test_console_loop_stops_on_eof(state, emitted) -> None:
    run_console_loop(state, read_line=_scripted(["/list"]))
    assert any("No tasks scheduled for today." in line for line in emitted)
