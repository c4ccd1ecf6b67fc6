"""Checks that a command line is well formed before it is carried out."""

from __future__ import annotations

from itertools import product
from typing import AbstractSet, Iterable, Sequence

ALL_FLAGS = ("-a", "--all")
ID_FLAGS = ("-i", "--id")
NAME_FLAGS = ("-n", "--name")
CATEGORY_FLAGS = ("-c", "--category")
COMPLETED_FLAGS = ("-C", "--completed")
DUE_FLAGS = ("-d", "--due")
EXPIRE_FLAGS = ("-e", "--expire")

_DIGITS = frozenset("0123456789")
_STATUSES = ("true", "false")
_SORT_CRITERIA = ("name", "category", "completed", "expire")
_DUE_FORMAT = "Format: YYYY-MM-DD@hr:min:sec"


class ValidationError(ValueError):
    """Raised when a command or one of its values is malformed."""


def _build_create_flag_sets() -> frozenset[frozenset[str]]:
    optional: list[tuple[str, ...]] = [()]
    optional += [(flag,) for flag in COMPLETED_FLAGS]
    optional += [(flag,) for flag in DUE_FLAGS]
    optional += list(product(COMPLETED_FLAGS, DUE_FLAGS))
    return frozenset(
        frozenset((name, category, *extra))
        for name, category, extra in product(NAME_FLAGS, CATEGORY_FLAGS, optional)
    )


def _build_update_flag_sets() -> frozenset[frozenset[str]]:
    targets = NAME_FLAGS + CATEGORY_FLAGS + COMPLETED_FLAGS + DUE_FLAGS
    return frozenset(
        frozenset((search, target))
        for search, target in product(ID_FLAGS + NAME_FLAGS, targets)
    )


CREATE_FLAG_SETS = _build_create_flag_sets()
UPDATE_FLAG_SETS = _build_update_flag_sets()
READ_FLAGS = frozenset(
    ALL_FLAGS + ID_FLAGS + NAME_FLAGS + CATEGORY_FLAGS + COMPLETED_FLAGS + EXPIRE_FLAGS
)
DELETE_FLAGS = frozenset(
    ID_FLAGS + NAME_FLAGS + CATEGORY_FLAGS + COMPLETED_FLAGS + EXPIRE_FLAGS
)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_valid_day(year: int, month: int, day: int) -> bool:
    """Whether the day exists in the given month and year."""
    if month in (1, 3, 5, 7, 8, 10, 12):
        last = 31
    elif month in (4, 6, 9, 11):
        last = 30
    elif month == 2:
        last = 29 if is_leap_year(year) else 28
    else:
        return False
    return 1 <= day <= last


def check_name_or_category(value: str) -> str:
    if not 1 <= len(value) <= 15:
        raise ValidationError("Length should be between 1 and 15")
    return value


def check_sort_criteria(value: str) -> str:
    if value not in _SORT_CRITERIA:
        raise ValidationError("invalid sort criteria")
    return value


def check_id(value: str) -> str:
    if not set(value) <= _DIGITS:
        raise ValidationError("Id should be integer")
    return value


def check_due(value: str) -> str:
    """Check a 'YYYY-MM-DD@hr:min:sec' due string, including calendar limits."""
    bad_format = f"invalid format: '{value}' \n{_DUE_FORMAT}"
    if len(value) != 19:
        raise ValidationError(bad_format)
    if (value[4], value[7], value[10], value[13], value[16]) != ("-", "-", "@", ":", ":"):
        raise ValidationError(bad_format)
    digits = value[0:4] + value[5:7] + value[8:10] + value[11:13] + value[14:16] + value[17:19]
    if not set(digits) <= _DIGITS:
        raise ValidationError(f"fail to convert {value} to proper format")
    hour, minute, second = int(value[11:13]), int(value[14:16]), int(value[17:19])
    if hour > 23 or minute > 59 or second > 59:
        raise ValidationError("invalid time value")
    if not is_valid_day(int(value[0:4]), int(value[5:7]), int(value[8:10])):
        raise ValidationError("invalid date value")
    return value


def check_completed_status(value: str) -> str:
    if value not in _STATUSES:
        raise ValidationError("invalid completed status, status should be true/false")
    return value


def check_expire_status(value: str) -> str:
    if value not in _STATUSES:
        raise ValidationError("invalid expire status, status should be true/false")
    return value


_VALUE_CHECKS = {
    **dict.fromkeys(NAME_FLAGS + CATEGORY_FLAGS, check_name_or_category),
    **dict.fromkeys(ALL_FLAGS, check_sort_criteria),
    **dict.fromkeys(ID_FLAGS, check_id),
    **dict.fromkeys(DUE_FLAGS, check_due),
    **dict.fromkeys(COMPLETED_FLAGS, check_completed_status),
    **dict.fromkeys(EXPIRE_FLAGS, check_expire_status),
}


def check_value(flag: str, value: str) -> str:
    """Check the value that follows a flag; returns the value when it is valid."""
    check = _VALUE_CHECKS.get(flag)
    if check is None:
        if value not in _STATUSES:
            raise ValidationError("invalid expire Status")
        raise ValidationError("invalid flags")
    return check(value)


def check_single_flag(command: Sequence[str], allowed: AbstractSet[str]) -> str:
    """Check that the command's first argument is one of the allowed flags."""
    if len(command) == 1 or command[1] not in allowed:
        raise ValidationError("invalid flags")
    return command[1]


def check_flag_combination(
    command: Sequence[str], allowed: Iterable[AbstractSet[str]]
) -> frozenset[str]:
    """Check that the set of flags in the command is one of the allowed sets."""
    flags = frozenset(arg for arg in command[1:] if arg.startswith("-"))
    if flags not in allowed:
        raise ValidationError("invalid flags")
    return flags


def _check_pairs(command: Sequence[str]) -> list[tuple[str, str]]:
    args = list(command[1:])
    pairs = list(zip(args[::2], args[1::2]))
    for flag, value in pairs:
        check_value(flag, value)
    return pairs


def validate_create(command: Sequence[str]) -> list[tuple[str, str]]:
    check_flag_combination(command, CREATE_FLAG_SETS)
    return _check_pairs(command)


def validate_read(command: Sequence[str]) -> list[tuple[str, str]]:
    flag = check_single_flag(command, READ_FLAGS)
    return [(flag, check_value(flag, command[2]))]


def validate_update(command: Sequence[str]) -> list[tuple[str, str]]:
    check_flag_combination(command, UPDATE_FLAG_SETS)
    return _check_pairs(command)


def validate_delete(command: Sequence[str]) -> list[tuple[str, str]]:
    flag = check_single_flag(command, DELETE_FLAGS)
    return [(flag, check_value(flag, command[2]))]


_VALIDATORS = {
    "add": validate_create,
    "ls": validate_read,
    "upt": validate_update,
    "rm": validate_delete,
}


def validate(command: Sequence[str]) -> str:
    """Validate a whole command; returns its command word."""
    command = list(command)
    if len(command) % 2 == 0:
        raise ValidationError("invalid Command")
    word = command[0]
    if word in _VALIDATORS:
        _VALIDATORS[word](command)
    elif word not in ("help", "exit", "quit"):
        raise ValidationError(
            f'Unknown command: "{word}"\n'
            "Need help? Type 'help' to see the available commands"
        )
    return word