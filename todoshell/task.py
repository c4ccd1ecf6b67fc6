"""Tasks with an optional due time and an expiry status."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import IntEnum

_SECONDS_PER_DAY = 60 * 60 * 24
_SECONDS_PER_HOUR = 60 * 60
_SECONDS_PER_MINUTE = 60


class ExpireStatus(IntEnum):
    """Whether a task's due time has passed; ordering matches sort order."""

    FALSE = 4
    TRUE = 5
    NONE = 6


def parse_due(due: str) -> int:
    """Turn a 'YYYY-MM-DD@hr:min:sec' string into a local-time timestamp."""
    fields = (
        int(due[0:4]),
        int(due[5:7]),
        int(due[8:10]),
        int(due[11:13]),
        int(due[14:16]),
        int(due[17:19]),
    )
    return int(time.mktime(fields + (0, 0, 0)))


def _now(now: float | None) -> float:
    return time.time() if now is None else now


@dataclass
class Task:
    """A single to-do item."""

    name: str
    category: str
    completed: bool = False
    expire: ExpireStatus = ExpireStatus.NONE
    expire_time: int | None = None

    def set_due(self, due: str) -> None:
        """Set the due time from a 'YYYY-MM-DD@hr:min:sec' string."""
        self.set_due_timestamp(parse_due(due))

    def set_due_timestamp(self, timestamp: int) -> None:
        """Set the due time from a timestamp and refresh the expiry status."""
        self.expire_time = int(timestamp)
        self.expire = self._status_at(time.time())

    def _status_at(self, now: float) -> ExpireStatus:
        return ExpireStatus.TRUE if self.expire_time - now < 0 else ExpireStatus.FALSE

    def update_expire_status(self, now: float | None = None) -> ExpireStatus:
        """Recompute the expiry status; tasks without a due time are left alone."""
        if self.expire is not ExpireStatus.NONE:
            self.expire = self._status_at(_now(now))
        return self.expire

    def remaining_time(self, now: float | None = None) -> str:
        """Describe the time left until the due time."""
        if self.expire_time is None:
            raise ValueError(f"task {self.name!r} has no due time")
        diff = int(self.expire_time - _now(now))
        if diff < 0:
            return "Already Expired "
        days, diff = divmod(diff, _SECONDS_PER_DAY)
        hours, diff = divmod(diff, _SECONDS_PER_HOUR)
        minutes, seconds = divmod(diff, _SECONDS_PER_MINUTE)
        return f"{days} days {hours} hrs {minutes} mins {seconds} secs "

    def render(self, now: float | None = None) -> str:
        """Format the task as one row of the task table (without id and borders)."""
        completed = "true" if self.completed else "false"
        if self.expire is not ExpireStatus.NONE:
            remaining = self.remaining_time(now)
        else:
            remaining = "Due isn't set "
        return f"{self.name:>18}{self.category:>18}{completed:>15}{remaining:>35}"