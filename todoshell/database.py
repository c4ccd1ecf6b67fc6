"""In-memory task store with lookups, updates, deletes and a plain-text file format."""

from __future__ import annotations

from enum import IntEnum
from operator import attrgetter
from pathlib import Path
from typing import Callable, Iterable, Iterator

from todoshell.task import ExpireStatus, Task

Row = tuple[int, Task]

_BORDER = "+" + "-" * 90 + "+"
_HEADER = (
    "|  id              name          category      completed"
    "             expire(day/hr/min/sec)|"
)
_HEADER_RULE = "+" + "=" * 90 + "+"
_EMPTY_ROW = "|" + " " * 90 + "|"


class SortCriteria(IntEnum):
    """Keys the task list can be ordered by."""

    NAME = 0
    CATEGORY = 1
    COMPLETED = 2
    EXPIRE = 3


_SORT_KEYS: dict[SortCriteria, Callable[[Task], object]] = {
    SortCriteria.NAME: attrgetter("name"),
    SortCriteria.CATEGORY: attrgetter("category"),
    SortCriteria.COMPLETED: attrgetter("completed"),
    SortCriteria.EXPIRE: attrgetter("expire"),
}

_UPDATABLE_FIELDS = ("name", "category", "completed", "due")


class DatabaseError(Exception):
    """Base class for task-store errors."""


class TaskNotFoundError(DatabaseError, LookupError):
    """Raised when no task matches a lookup."""


class NameConflictError(DatabaseError, ValueError):
    """Raised when a new task would share its name with an existing one."""


def _status_word(completed: bool) -> str:
    return "true" if completed else "false"


def _expire_word(expire: ExpireStatus) -> str:
    if expire is ExpireStatus.TRUE:
        return "true"
    if expire is ExpireStatus.NONE:
        return "Due isn't set"
    return "false"


def render_table(rows: Iterable[Row], now: float | None = None) -> str:
    """Format (id, task) rows as the bordered task table."""
    lines = [_BORDER, _HEADER, _HEADER_RULE]
    body = [f"|{task_id:>4}{task.render(now)}|" for task_id, task in rows]
    lines.extend(body or [_EMPTY_ROW])
    lines.append(_BORDER)
    return "\n".join(lines) + "\n"


class Database:
    """An ordered list of tasks whose names are unique on creation."""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self.tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __contains__(self, name: object) -> bool:
        return any(task.name == name for task in self.tasks)

    def _rows(self) -> list[Row]:
        return list(enumerate(self.tasks))

    # create

    def create(
        self,
        name: str,
        category: str,
        completed: bool = False,
        due: str | None = None,
    ) -> Row:
        """Add a task and return its (id, task) row."""
        if name in self:
            if due is None:
                message = f"Name: '{name}' conflict, task name should be unique"
            else:
                message = f"Name: '{name}' conflict\nTask name should be unique"
            raise NameConflictError(message)
        task = Task(name, category, completed)
        if due is not None:
            task.set_due(due)
        self.tasks.append(task)
        return self.find_by_name(name)

    # read

    def sort(
        self, criteria: SortCriteria = SortCriteria.NAME, now: float | None = None
    ) -> list[Row]:
        """Reorder the tasks by the given criteria and return all rows."""
        criteria = SortCriteria(criteria)
        if criteria is SortCriteria.EXPIRE:
            for task in self.tasks:
                task.update_expire_status(now)
        self.tasks.sort(key=_SORT_KEYS[criteria])
        return self._rows()

    def get(self, task_id: int) -> Row:
        """Return the row at the given position."""
        if not 0 <= task_id < len(self.tasks):
            raise TaskNotFoundError(f"Id: '{task_id}' not found")
        return task_id, self.tasks[task_id]

    def find_by_name(self, name: str) -> Row:
        """Return the first row whose task has this name."""
        for row in self._rows():
            if row[1].name == name:
                return row
        raise TaskNotFoundError(f"Name: '{name}' not found")

    def _select(
        self,
        criteria: SortCriteria,
        predicate: Callable[[Task], bool],
        message: str,
        now: float | None = None,
    ) -> list[Row]:
        rows = [row for row in self.sort(criteria, now) if predicate(row[1])]
        if not rows:
            raise TaskNotFoundError(message)
        return rows

    def select_by_category(self, category: str) -> list[Row]:
        """Sort by category and return the rows in the given category."""
        return self._select(
            SortCriteria.CATEGORY,
            lambda task: task.category == category,
            f"Category: '{category}' not found",
        )

    def select_by_completed(self, completed: bool) -> list[Row]:
        """Sort by completion and return the rows with that status."""
        return self._select(
            SortCriteria.COMPLETED,
            lambda task: task.completed == completed,
            f"Completed Status: '{_status_word(completed)}' not found",
        )

    def select_by_expire(
        self, expire: ExpireStatus, now: float | None = None
    ) -> list[Row]:
        """Refresh expiry, sort by it and return the rows with that status."""
        expire = ExpireStatus(expire)
        return self._select(
            SortCriteria.EXPIRE,
            lambda task: task.expire == expire,
            f"Expire Status: '{_expire_word(expire)}' not found",
            now,
        )

    # update

    @staticmethod
    def _apply(task: Task, field: str, value: object) -> None:
        if field == "name":
            task.name = str(value)
        elif field == "category":
            task.category = str(value)
        elif field == "completed":
            task.completed = bool(value)
        elif field == "due":
            task.set_due(str(value))
        else:
            raise ValueError(
                f"unknown field {field!r}; expected one of {', '.join(_UPDATABLE_FIELDS)}"
            )

    def update_by_id(self, task_id: int, field: str, value: object) -> list[Row]:
        """Change one field of the task at a position; returns all rows sorted by name."""
        if not 0 <= task_id < len(self.tasks):
            raise TaskNotFoundError(f"Task with Id: '{task_id}' Not Found")
        self._apply(self.tasks[task_id], field, value)
        return self.sort(SortCriteria.NAME)

    def update_by_name(self, name: str, field: str, value: object) -> list[Row]:
        """Change one field of the named task; returns all rows sorted by name."""
        task = next((task for task in self.tasks if task.name == name), None)
        if task is None:
            raise TaskNotFoundError(f"Task with Name: '{name}' Not Found")
        self._apply(task, field, value)
        return self.sort(SortCriteria.NAME)

    # delete

    def _remove(self, rows: Iterable[Row]) -> list[Row]:
        doomed = {id(task) for _, task in rows}
        self.tasks = [task for task in self.tasks if id(task) not in doomed]
        return self.sort(SortCriteria.NAME)

    def delete_by_id(self, task_id: int) -> list[Row]:
        """Remove the task at a position; returns the remaining rows sorted by name."""
        if not 0 <= task_id < len(self.tasks):
            raise TaskNotFoundError(f"Task with Id: '{task_id}' Not Found")
        del self.tasks[task_id]
        return self.sort(SortCriteria.NAME)

    def delete_by_name(self, name: str) -> list[Row]:
        """Remove the named task; returns the remaining rows sorted by name."""
        try:
            row = self.find_by_name(name)
        except TaskNotFoundError:
            raise TaskNotFoundError(f"Task with Name: '{name}' Not Found") from None
        return self._remove([row])

    def delete_by_category(self, category: str) -> list[Row]:
        """Remove every task in a category; returns the remaining rows sorted by name."""
        try:
            rows = self.select_by_category(category)
        except TaskNotFoundError:
            raise TaskNotFoundError(
                f"Task with Category: '{category}' not found"
            ) from None
        return self._remove(rows)

    def delete_by_completed(self, completed: bool) -> list[Row]:
        """Remove every task with a completion status; returns the rest sorted by name."""
        try:
            rows = self.select_by_completed(completed)
        except TaskNotFoundError:
            raise TaskNotFoundError(
                f"Task with Completed Status: '{_status_word(completed)}' not found"
            ) from None
        return self._remove(rows)

    def delete_by_expire(
        self, expire: ExpireStatus, now: float | None = None
    ) -> list[Row]:
        """Remove every task with an expiry status; returns the rest sorted by name."""
        try:
            rows = self.select_by_expire(expire, now)
        except TaskNotFoundError:
            raise TaskNotFoundError(
                f"Task with Expire Status: '{_expire_word(ExpireStatus(expire))}' not found"
            ) from None
        return self._remove(rows)

    # file I/O

    def save(self, path: str | Path) -> None:
        """Write one 'name category completed due-timestamp' line per task."""
        with open(path, "w", encoding="utf-8") as out:
            for task in self.tasks:
                if task.expire is ExpireStatus.NONE or task.expire_time is None:
                    due = 0
                else:
                    due = task.expire_time
                out.write(f"{task.name} {task.category} {int(task.completed)} {due}\n")

    def load(self, path: str | Path) -> int:
        """Append the tasks stored in a file; a missing file loads nothing.

        Returns the number of tasks read.
        """
        try:
            handle = open(path, encoding="utf-8")
        except FileNotFoundError:
            return 0
        count = 0
        with handle:
            for number, line in enumerate(handle, start=1):
                fields = line.split()
                if not fields:
                    continue
                if len(fields) < 4 or fields[2] not in ("0", "1"):
                    raise DatabaseError(f"{path}:{number}: malformed task line")
                name, category, completed, due = fields[:4]
                try:
                    timestamp = int(due)
                except ValueError:
                    raise DatabaseError(
                        f"{path}:{number}: malformed due timestamp {due!r}"
                    ) from None
                task = Task(name, category, completed == "1")
                if timestamp != 0:
                    task.set_due_timestamp(timestamp)
                self.tasks.append(task)
                count += 1
        return count