"""mochi CLI — interactive task tracker.

Installed as ``mochi`` console_script via pipx / pip.
"""

from __future__ import annotations

import sys

import click

from mochi import __version__
from mochi.config import Config


CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("--data-dir", default="", help="Directory holding the save file (env: MOCHI_DATA_DIR)")
@click.option("--file", "file_name", default="", help="Save file name (env: MOCHI_FILE)")
@click.option(
    "-c",
    "--command",
    "commands",
    multiple=True,
    help="Run a command and exit; repeat to run several in order",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
@click.version_option(__version__, prog_name="mochi")
def main(data_dir: str, file_name: str, commands: tuple[str, ...], verbose: bool) -> None:
    """MOCHI — a personal task tracker.

    Keeps to-dos, deadlines and events in a plain text file and edits
    them with one command per line.

    \b
    COMMANDS:
      todo <task>
      deadline <task> /by 2026-01-30
      event <task> /from 2026-02-01 0900 /to 2026-02-01 1000
      mark <n> | unmark <n> | delete <n>
      find <keyword>
      list
      bye

    \b
    EXAMPLES:
      mochi                                   # Interactive session
      mochi -c "todo read book" -c list       # One-shot commands
      mochi --data-dir ~/notes --file todo.txt
    """
    from mochi import log as mlog
    from mochi.session import Session
    from mochi.storage import Storage

    cfg = Config(data_dir=data_dir, file_name=file_name, verbose=verbose)
    mlog.set_verbose(cfg.verbose)
    mlog.debug(f"Using save file {cfg.save_path}")

    session = Session(Storage(cfg.save_path))

    if commands:
        _run_commands(session, commands)
        return

    _run_repl(session)


def _run_commands(session: "Session", commands: tuple[str, ...]) -> None:
    """Execute commands in order, stopping early at ``bye``."""
    from mochi import log as mlog

    failed = False
    for line in commands:
        resp = session.handle(line)
        mlog.response(resp.text)
        failed = failed or not resp.saved
        if resp.exit:
            break
    if failed:
        sys.exit(1)


def _run_repl(session: "Session") -> None:
    """Read one command per line until ``bye`` or end of input."""
    from mochi import log as mlog
    from mochi.session import GOODBYE, WELCOME, usage_text

    mlog.rule()
    mlog.response(WELCOME)
    mlog.rule()
    mlog.response(session.load_status())
    mlog.response(usage_text())
    mlog.rule()

    while True:
        try:
            line = click.prompt("", prompt_suffix="> ", default="", show_default=False)
        except (click.Abort, EOFError):
            mlog.console.print()
            mlog.response(GOODBYE)
            return
        if not line.strip():
            continue
        resp = session.handle(line)
        mlog.rule()
        mlog.response(resp.text)
        mlog.rule()
        if resp.exit:
            return
