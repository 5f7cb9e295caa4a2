"""
Command Line Interface for Tasklist.
"""

import click

from .version import VERSION
from .config import get_settings
from .commands import CommandLoop
from .data import TaskFile
from .logs import setup_logging, get_logger
from .recovery import TasklistError
from .store import TaskStore

log = get_logger("cli")

INTERRUPTED = "Tasklist interrupted, unsaved changes were discarded"


@click.command()
@click.version_option(version=VERSION, prog_name="tasklist")
def main():
    """
    Tasklist - a terminal task list.

    Type add, print, edit, delete or end at the prompt. Tasks are kept in
    tasklist.json in the current directory and saved when you type end.
    """
    settings = get_settings()
    setup_logging(settings.log_dir)

    task_file = TaskFile(settings.data_file)
    try:
        store = TaskStore(task_file.load())
    except TasklistError as e:
        log.error(f"Could not load {task_file.path}: {e}")
        raise click.ClickException(str(e)) from e

    color = settings.use_color(click.get_text_stream("stdout").isatty())
    loop = CommandLoop(store, color=color, on_end=task_file.save)

    try:
        loop.run()
    except click.Abort:
        log.warning("Session interrupted before end, changes not saved")
        click.echo(INTERRUPTED, err=True)
        raise SystemExit(1)
    except TasklistError as e:
        log.critical(f"Could not save {task_file.path}: {e}")
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
