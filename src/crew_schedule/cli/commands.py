# src/crew_schedule/cli/commands.py

from __future__ import annotations

import inspect
import logging
import shlex
from collections.abc import Callable
from typing import cast

from ..core.ports import Emitter
from ..core.state import AppState
from ..schedule.errors import ScheduleConflict, ScheduleError, ValidationError

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], Emitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/add, /list, ...)."""

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

    def handle(self, state: AppState, line: str, emit: Emitter | None = None) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Could not parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

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


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_types(state: AppState, args: list[str]) -> str:
    lines = ["Available task types:"]
    for i, cat in enumerate(state.factory.available_categories(), start=1):
        lines.append(f"  {i}. {cat.name} - {cat.description}")
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <type> <name> <start> <end>

    Quote names with spaces: /add exercise "Morning run" 07:00 07:45
    """
    if len(args) != 4:
        return (
            "Usage: /add <type> <name> <start> <end>\n"
            f'  e.g. /add research "Plant growth" 09:00 10:30 (times as {state.factory.time_format})\n'
            f"  types: {', '.join(state.factory.category_names())}"
        )

    type_label, name, start, end = args
    service = state.service

    try:
        task = state.factory.create_task(type_label, name, start, end)
        service.add_task(task)
    except ValidationError as e:
        logger.info("Task input rejected: %s", e)
        return f"Failed to add task: {e}"
    except ScheduleConflict as e:
        # Observers already got the conflict banner; keep the reply short.
        return f"Failed to add task: {e}"

    return f"Task added successfully!\nTask: {task}"


def cmd_remove(state: AppState, args: list[str]) -> str:
    """/remove <name>"""
    if not args:
        return "Usage: /remove <name>"
    if state.service.task_count() == 0:
        return "No tasks to remove. Schedule is empty."

    name = " ".join(args)
    try:
        state.service.remove_task(name)
    except ScheduleError as e:
        logger.info("Task removal failed: %s", e)
        return f"Failed to remove task: {e}"
    return f"Task removed successfully: {name.strip()}"


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list          -> summary + detailed view
    /list short    -> summary only
    """
    tasks = state.service.list_tasks()
    header = "=== ASTRONAUT DAILY SCHEDULE ==="
    footer = "=" * len(header)

    if not tasks:
        return "\n".join([header, "No tasks scheduled for today.", footer])

    lines = [header, f"Total Tasks: {len(tasks)}", ""]
    for i, task in enumerate(tasks, start=1):
        lines.append(f"{i}. {task}")

    if not (args and args[0].lower() == "short"):
        lines.extend(["", "=== DETAILED VIEW ==="])
        for task in tasks:
            lines.append("")
            lines.append(task.describe())

    lines.append(footer)
    return "\n".join(lines)


def cmd_status(state: AppState, args: list[str]) -> str:
    service = state.service
    observers = ", ".join(n.observer_id for n in state.notifiers) or "(none)"
    last = service.last_delivery
    if last is None:
        delivery = "no conflicts yet"
    elif last.error is not None:
        delivery = str(last.error)
    else:
        delivery = f"delivered to {last.delivered} of {last.attempted} observers"
    return (
        "Status:\n"
        f"  Tasks: {service.task_count()}\n"
        f"  Observers: {service.observer_count()} ({observers})\n"
        f"  Last conflict broadcast: {delivery}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <type> <name> <start> <end>.")
registry.register("list", cmd_list, help_text="View the schedule: /list | /list short.", aliases=["view", "ls"])
registry.register("remove", cmd_remove, help_text="Remove a task by name: /remove <name>.", aliases=["rm"])
registry.register("types", cmd_types, help_text="List available task types.")
registry.register("status", cmd_status, help_text="Show task/observer counts.")
