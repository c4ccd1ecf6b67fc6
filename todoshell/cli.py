"""Interactive shell that reads commands and applies them to a task file."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Sequence

from todoshell.database import Database, DatabaseError
from todoshell.line_editor import read_line
from todoshell.router import route
from todoshell.validator import ValidationError, validate

PROMPT_SYMBOL = ">>> |" if os.name == "nt" else "──> |"
DEFAULT_FILE = "YOUR_FILE_NAME.txt"

_HELP_LINES = (
    "+--------------------------------------<-HELP-MENU->----------------------------------------+",
    "| add <flag1> <value1> <flag2> <value2>...                                                  |",
    "|    -n, --name              set the task name                                              |",
    "|    -c, --category          set the task category                                          |",
    "|    -C, --completed         set task as completed status (optional) (default=false)        |",
    "|    -d, --due               set a due for the task (optional) (YYYY-MM-DD@hr:min:sec)      |",
    "|                                                                                           |",
    "| ls <flag> <value>                                                                         |",
    "|    -a, --all               show tasks by selected criteria                                |",
    "|                              (name/category/completed/expire)                             |",
    "|    -i, --id                show task by id                                                |",
    "|    -n, --name              show task by name                                              |",
    "|    -c, --category          show tasks by category                                         |",
    "|    -C, --completed         filter by completed status (true/false)                        |",
    "|    -e, --expire            filter by expire status (true/false)                           |",
    "|                                                                                           |",
    "| upt <search-flag> <search-value> <update-flag> <new-value>                                |",
    "|    -i, --id                search by id                                                   |",
    "|    -n, --name              serach/update by name                                          |",
    "|    -c, --category          update by category                                             |",
    "|    -C, --completed         update the task completed status (true/false)                  |",
    "|    -d, --due               update the due of the task                                     |",
    "|                                                                                           |",
    "| rm <flag> <value>                                                                         |",
    "|    -i, --id                delete the task by selected id                                 |",
    "|    -n, --name              delete the task matching the given name                        |",
    "|    -c, --category          delete tasks matching the given category                       |",
    "|    -C, --completed         delete tasks matching the given completed status (true/false)  |",
    "|    -e, --expire            delete tasks matching the given expire status (true/false)     |",
    "|                                                                                           |",
    "| help                       show this menu                                                 |",
    "|                                                                                           |",
    "| exit/quit                  terminate the TodoList                                         |",
    "+-------------------------------------------------------------------------------------------+",
)


def help_text() -> str:
    """The help menu listing every command and flag."""
    return "\n".join(_HELP_LINES) + "\n"


def split_command(line: str) -> list[str]:
    """Split an input line into whitespace-separated words."""
    return line.split()


def run_command(db: Database, line: str) -> tuple[str, bool]:
    """Carry out one input line.

    Returns the text to show and whether the shell should stop.
    """
    command = split_command(line)
    if not command:
        return "", False
    try:
        word = validate(command)
    except ValidationError as error:
        return f"error: {error}\n", False
    if word == "help":
        return help_text(), False
    if word in ("exit", "quit"):
        return "", True
    try:
        return route(db, command), False
    except (ValueError, OverflowError) as error:
        return f"error: {error}\n", False


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive shell; the task list is saved on exit."""
    parser = argparse.ArgumentParser(prog="todoshell", description="Interactive to-do list.")
    parser.add_argument(
        "file",
        nargs="?",
        default=DEFAULT_FILE,
        help=f"task file to load and save (default: {DEFAULT_FILE})",
    )
    args = parser.parse_args(argv)

    db = Database()
    try:
        db.load(args.file)
    except DatabaseError as error:
        sys.stderr.write(f"error: {error}\n")
        return 1

    out = sys.stdout
    stream = None if sys.stdin.isatty() else sys.stdin
    history: list[str] = []
    out.write("Type 'help' to show HELP MENU\n")
    while True:
        out.write(PROMPT_SYMBOL)
        out.flush()
        try:
            line = read_line(history, stream)
        except EOFError:
            out.write("\n")
            break
        out.write("\r")
        if split_command(line):
            history.append(line)
        output, finished = run_command(db, line)
        out.write(output)
        if finished:
            break
    db.save(args.file)
    return 0