"""Dispatch validated command words to the task store and format the replies."""

from __future__ import annotations

from functools import partial
from typing import Callable, Sequence

from todoshell.database import (
    Database,
    NameConflictError,
    Row,
    SortCriteria,
    TaskNotFoundError,
    render_table,
)
from todoshell.task import ExpireStatus
from todoshell.validator import (
    ALL_FLAGS,
    CATEGORY_FLAGS,
    COMPLETED_FLAGS,
    DUE_FLAGS,
    EXPIRE_FLAGS,
    ID_FLAGS,
    NAME_FLAGS,
)

_SORT_WORDS = {
    "name": SortCriteria.NAME,
    "category": SortCriteria.CATEGORY,
    "completed": SortCriteria.COMPLETED,
    "expire": SortCriteria.EXPIRE,
}

_FIELD_BY_FLAG = {
    **dict.fromkeys(NAME_FLAGS, "name"),
    **dict.fromkeys(CATEGORY_FLAGS, "category"),
    **dict.fromkeys(COMPLETED_FLAGS, "completed"),
    **dict.fromkeys(DUE_FLAGS, "due"),
}


def parse_completed(text: str, default: bool = False) -> bool:
    """Map 'true'/'false' to a bool; anything else gives the default."""
    if text == "true":
        return True
    if text == "false":
        return False
    return default


def parse_sort_criteria(
    text: str, default: SortCriteria = SortCriteria.NAME
) -> SortCriteria:
    """Map a sort word to its criteria; anything else gives the default."""
    return _SORT_WORDS.get(text, default)


def parse_expire_status(
    text: str, default: ExpireStatus = ExpireStatus.FALSE
) -> ExpireStatus:
    """Map 'true'/'false' to an expiry status; anything else gives the default."""
    if text == "true":
        return ExpireStatus.TRUE
    if text == "false":
        return ExpireStatus.FALSE
    return default


def _pairs(args: Sequence[str]) -> list[tuple[str, str]]:
    args = list(args)
    return list(zip(args[::2], args[1::2]))


def handle_add(db: Database, args: Sequence[str]) -> str:
    """Create a task from flag/value pairs and show its row."""
    name = category = ""
    completed = False
    due: str | None = None
    for flag, value in _pairs(args):
        if flag in DUE_FLAGS:
            due = value
        elif flag in NAME_FLAGS:
            name = value
        elif flag in CATEGORY_FLAGS:
            category = value
        elif flag in COMPLETED_FLAGS:
            completed = parse_completed(value, completed)
    try:
        row = db.create(name, category, completed, due)
    except NameConflictError as error:
        return f"error: {error}\n"
    return render_table([row])


def handle_list(db: Database, args: Sequence[str]) -> str:
    """Show tasks selected by the first flag/value pair."""
    pairs = _pairs(args)
    if not pairs:
        return ""
    flag, value = pairs[0]
    rows: list[Row]
    try:
        if flag in ALL_FLAGS:
            rows = db.sort(parse_sort_criteria(value))
        elif flag in ID_FLAGS:
            rows = [db.get(int(value))]
        elif flag in NAME_FLAGS:
            rows = [db.find_by_name(value)]
        elif flag in CATEGORY_FLAGS:
            rows = db.select_by_category(value)
        elif flag in COMPLETED_FLAGS:
            rows = db.select_by_completed(parse_completed(value))
        elif flag in EXPIRE_FLAGS:
            rows = db.select_by_expire(parse_expire_status(value))
        else:
            return ""
    except TaskNotFoundError as error:
        return f"error: {error}\n"
    return render_table(rows)


def handle_update(db: Database, args: Sequence[str]) -> str:
    """Find a task by id or name, then apply each following change in turn."""
    pairs = _pairs(args)
    if not pairs:
        return ""
    (search_flag, search_value), *changes = pairs
    update: Callable[[str, object], list[Row]]
    if search_flag in ID_FLAGS:
        update = partial(db.update_by_id, int(search_value))
    elif search_flag in NAME_FLAGS:
        update = partial(db.update_by_name, search_value)
    else:
        return ""
    output = []
    for flag, value in changes:
        field = _FIELD_BY_FLAG.get(flag)
        if field is None:
            continue
        new_value: object = parse_completed(value) if field == "completed" else value
        try:
            output.append(render_table(update(field, new_value)))
        except TaskNotFoundError as error:
            output.append(f"{error}\n")
    return "".join(output)


def handle_remove(db: Database, args: Sequence[str]) -> str:
    """Delete tasks for each flag/value pair, showing what remains after each."""
    output = []
    for flag, value in _pairs(args):
        try:
            if flag in ID_FLAGS:
                rows = db.delete_by_id(int(value))
            elif flag in NAME_FLAGS:
                rows = db.delete_by_name(value)
            elif flag in CATEGORY_FLAGS:
                rows = db.delete_by_category(value)
            elif flag in COMPLETED_FLAGS:
                rows = db.delete_by_completed(parse_completed(value))
            elif flag in EXPIRE_FLAGS:
                rows = db.delete_by_expire(parse_expire_status(value))
            else:
                continue
        except TaskNotFoundError as error:
            output.append(f"{error}\n")
            continue
        output.append(render_table(rows))
    return "".join(output)


_HANDLERS: dict[str, Callable[[Database, Sequence[str]], str]] = {
    "add": handle_add,
    "ls": handle_list,
    "upt": handle_update,
    "rm": handle_remove,
}


def route(db: Database, command: Sequence[str]) -> str:
    """Run a command against the store and return the text to show."""
    command = list(command)
    if not command:
        return ""
    handler = _HANDLERS.get(command[0])
    if handler is None:
        return ""
    return handler(db, command[1:])