"""todolist CLI - in-memory to-do list session."""

import json
import logging
import shlex

import click

from .config import load_config
from .core.format import empty_message, format_summary, format_task_line
from .workflows import TodoSession, ValidationError, new_session

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("quit", "exit")


@click.group(invoke_without_command=True)
@click.version_option(package_name="todolist")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """todolist - personal to-do list."""
    config = load_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else getattr(logging, config.log_level),
    )
    ctx.obj = config
    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


@main.command()
@click.pass_obj
def shell(config):
    """Run an interactive session. Tasks last until you quit."""
    session = new_session(config)
    click.echo("todolist - type 'help' for commands, 'quit' to leave.")
    _show_tasks(session)

    while True:
        try:
            line = click.prompt("todo", default="", show_default=False, prompt_suffix="> ")
        except click.Abort:
            click.echo()
            break
        if not run_line(session, line):
            break

    logger.debug("Session ended")


def run_line(session: TodoSession, line: str) -> bool:
    """Run one session command. Returns False when the session should end."""
    try:
        args = shlex.split(line)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        return True

    if not args:
        return True
    if args[0].lower() in QUIT_COMMANDS:
        return False

    try:
        session_commands.main(args=args, prog_name="", obj=session, standalone_mode=False)
    except ValidationError as e:
        click.echo(f"Error: {e}", err=True)
    except click.ClickException as e:
        e.show()
    return True


def _show_tasks(session: TodoSession, as_json: bool = False) -> None:
    """Shared task display logic."""
    tasks = session.view()

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "id": t.id,
                        "text": t.text,
                        "completed": t.completed,
                        "priority": t.priority.value,
                        "category": t.category,
                        "due_date": t.due_date.isoformat() if t.due_date else None,
                        "created_at": t.created_at.isoformat(),
                    }
                    for t in tasks
                ],
                indent=2,
            )
        )
        return

    header = f"== {session.status.value}"
    if session.query.strip():
        header += f" matching {session.query.strip()!r}"
    click.echo(f"{header} ({format_summary(session.counts())})")

    if not tasks:
        click.echo(empty_message(session.status))
        return

    for task in tasks:
        click.echo(format_task_line(task, date_format=session.config.date_format))


# ============== Session Commands ==============


@click.group(add_help_option=False)
def session_commands():
    """Session commands."""
    pass


@session_commands.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--priority", "-p", default=None, help="low, medium or high")
@click.option("--category", "-c", default=None, help="Optional category label")
@click.option("--due", "-d", "due_date", default=None, help="Due date (YYYY-MM-DD)")
@click.pass_obj
def add(session: TodoSession, text: tuple[str, ...], priority, category, due_date):
    """Add a task."""
    task = session.add(" ".join(text), priority=priority, category=category, due_date=due_date)
    click.echo(f"Added #{task.id}.")
    _show_tasks(session)


@session_commands.command()
@click.argument("task_id", type=int)
@click.option("--text", "-t", default=None, help="New task text")
@click.option("--priority", "-p", default=None, help="low, medium or high")
@click.option("--category", "-c", default=None, help="New category ('' to clear)")
@click.option("--due", "-d", "due_date", default=None, help="New due date ('' to clear)")
@click.pass_obj
def edit(session: TodoSession, task_id: int, text, priority, category, due_date):
    """Edit fields of a task."""
    if session.edit(task_id, text=text, priority=priority, category=category, due_date=due_date):
        click.echo(f"Updated #{task_id}.")
        _show_tasks(session)
    else:
        click.echo(f"No task #{task_id}.")


@session_commands.command()
@click.argument("task_id", type=int)
@click.pass_obj
def toggle(session: TodoSession, task_id: int):
    """Mark a task done or not done."""
    if session.toggle(task_id):
        _show_tasks(session)
    else:
        click.echo(f"No task #{task_id}.")


@session_commands.command()
@click.argument("task_id", type=int)
@click.pass_obj
def delete(session: TodoSession, task_id: int):
    """Delete a task."""
    if session.delete(task_id):
        click.echo(f"Deleted #{task_id}.")
        _show_tasks(session)
    else:
        click.echo(f"No task #{task_id}.")


@session_commands.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_tasks(session: TodoSession, as_json: bool):
    """Show the current view."""
    _show_tasks(session, as_json)


@session_commands.command("filter")
@click.argument("status")
@click.pass_obj
def filter_tasks(session: TodoSession, status: str):
    """Show all, active or completed tasks."""
    session.set_filter(status)
    _show_tasks(session)


@session_commands.command()
@click.argument("query", nargs=-1)
@click.pass_obj
def search(session: TodoSession, query: tuple[str, ...]):
    """Search text and category (no query clears the search)."""
    session.set_query(" ".join(query))
    _show_tasks(session)


@session_commands.command("help")
def show_help():
    """Show session commands."""
    click.echo("Commands:")
    for name, command in sorted(session_commands.commands.items()):
        click.echo(f"  {name:8} {command.get_short_help_str()}")
    click.echo(f"  {'quit':8} Leave the session.")
