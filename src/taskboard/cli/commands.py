# src/taskboard/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..api.models import Priority, Project, Task, TaskStatus, User
from ..core.board import TaskBoard

CommandHandler = Callable[[TaskBoard, list[str]], Awaitable[str]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console front end (/help, /tasks, ...)."""

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

    async def handle(self, board: TaskBoard, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return await handler(board, args)
        except ValueError as e:
            # Bad user input (missing required field, unknown enum value, non-numeric id).
            return f"Invalid input: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _split_options(args: list[str]) -> tuple[list[str], dict[str, str]]:
    """Separate `key=value` tokens from free words."""
    words: list[str] = []
    opts: dict[str, str] = {}
    for a in args:
        key, sep, value = a.partition("=")
        if sep and key:
            opts[key.lower()] = value
        else:
            words.append(a)
    return words, opts


def _parse_id(raw: str, what: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{what} must be a number, got {raw!r}") from None


def format_task(task: Task) -> str:
    line = f"#{task.id} [{task.status}] ({task.priority}) {task.title}"
    meta: list[str] = []
    if task.assigned_to:
        meta.append(f"user: {task.assigned_to.name}")
    if task.project:
        meta.append(f"project: {task.project.name}")
    if task.due_date:
        meta.append(f"due: {task.due_date}")
    if meta:
        line += "  <" + ", ".join(meta) + ">"
    return line


def _outcome(board: TaskBoard, ok: bool, success: str) -> str:
    if ok:
        return success
    return board.error or "Request failed."


async def cmd_help(board: TaskBoard, args: list[str]) -> str:
    return registry.build_help()


async def cmd_load(board: TaskBoard, args: list[str]) -> str:
    if not await board.load():
        return board.error or "Failed to load data."
    s = board.state
    return f"Loaded {len(s.tasks)} tasks, {len(s.users)} users, {len(s.projects)} projects."


async def cmd_tasks(board: TaskBoard, args: list[str]) -> str:
    tasks = board.filtered_tasks
    if not tasks:
        return "No tasks found. Create one with /add-task."
    return "\n".join(format_task(t) for t in tasks)


async def cmd_users(board: TaskBoard, args: list[str]) -> str:
    if not board.state.users:
        return "No users."
    return "\n".join(f"#{u.id} {u.name} <{u.email}>" for u in board.state.users)


async def cmd_projects(board: TaskBoard, args: list[str]) -> str:
    if not board.state.projects:
        return "No projects."
    lines = []
    for p in board.state.projects:
        owner = f" (by {p.created_by.name})" if p.created_by else ""
        lines.append(f"#{p.id} {p.name}{owner}")
    return "\n".join(lines)


async def cmd_stats(board: TaskBoard, args: list[str]) -> str:
    s = board.stats
    return (
        "Stats:\n"
        f"  Total: {s.total}\n"
        f"  To Do: {s.todo}  In Progress: {s.in_progress}  Done: {s.done}\n"
        f"  Low: {s.low}  Medium: {s.medium}  High: {s.high}"
    )


async def cmd_filter(board: TaskBoard, args: list[str]) -> str:
    """
    /filter                          -> show current filter
    /filter clear                    -> show all tasks
    /filter status=DONE priority=LOW -> constrain (either key may be omitted)
    """
    words, opts = _split_options(args)
    if words and words[0].lower() == "clear":
        board.set_filter()
        return "Filter cleared."
    if opts:
        f = board.set_filter(status=opts.get("status", "").upper(), priority=opts.get("priority", "").upper())
    else:
        f = board.state.task_filter
    return f"Filter: status={f.status or 'ALL'} priority={f.priority or 'ALL'}"


async def cmd_add_task(board: TaskBoard, args: list[str]) -> str:
    """/add-task <title...> [status=TODO] [priority=HIGH] [user=<id>] [project=<id>] [due=YYYY-MM-DD]"""
    words, opts = _split_options(args)
    task = Task(
        title=" ".join(words),
        status=TaskStatus.parse(opts.get("status", TaskStatus.TODO).upper()),
        priority=Priority.parse(opts.get("priority", Priority.MEDIUM).upper()),
        due_date=opts.get("due") or None,
    )
    if "user" in opts:
        task.assigned_to = board.find_user(_parse_id(opts["user"], "user"))
        if task.assigned_to is None:
            return f"No user #{opts['user']} on the board. Use /load first."
    if "project" in opts:
        task.project = board.find_project(_parse_id(opts["project"], "project"))
        if task.project is None:
            return f"No project #{opts['project']} on the board. Use /load first."
    return _outcome(board, await board.create_task(task), "Task created.")


async def cmd_add_user(board: TaskBoard, args: list[str]) -> str:
    """/add-user <name...> <email>"""
    if len(args) < 2:
        return "Usage: /add-user <name> <email>"
    user = User(name=" ".join(args[:-1]), email=args[-1])
    return _outcome(board, await board.create_user(user), "User created.")


async def cmd_add_project(board: TaskBoard, args: list[str]) -> str:
    """/add-project <name...> [user=<id>]"""
    words, opts = _split_options(args)
    project = Project(name=" ".join(words))
    if "user" in opts:
        project.created_by = board.find_user(_parse_id(opts["user"], "user"))
        if project.created_by is None:
            return f"No user #{opts['user']} on the board. Use /load first."
    return _outcome(board, await board.create_project(project), "Project created.")


async def cmd_status(board: TaskBoard, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /status <task id> TODO|IN_PROGRESS|DONE"
    task_id = _parse_id(args[0], "task id")
    ok = await board.change_status(task_id, args[1].upper())
    return _outcome(board, ok, f"Task #{task_id} status updated.")


async def cmd_delete(board: TaskBoard, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /delete <task id>"
    task_id = _parse_id(args[0], "task id")
    return _outcome(board, await board.delete_task(task_id), f"Task #{task_id} deleted.")


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("load", cmd_load, help_text="Reload tasks, users and projects from the server.")
registry.register("tasks", cmd_tasks, help_text="List tasks matching the current filter.", aliases=["ls"])
registry.register("users", cmd_users, help_text="List users.")
registry.register("projects", cmd_projects, help_text="List projects.")
registry.register("stats", cmd_stats, help_text="Counts by status and priority.")
registry.register(
    "filter", cmd_filter, help_text="Filter tasks: /filter status=DONE priority=HIGH | /filter clear."
)
registry.register(
    "add-task",
    cmd_add_task,
    help_text="Create a task: /add-task <title> [priority=HIGH] [user=<id>] [project=<id>] [due=YYYY-MM-DD].",
)
registry.register("add-user", cmd_add_user, help_text="Create a user: /add-user <name> <email>.")
registry.register("add-project", cmd_add_project, help_text="Create a project: /add-project <name> [user=<id>].")
registry.register("status", cmd_status, help_text="Change task status: /status <id> DONE.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
