import pytest

from todoshell.validator import (
    CREATE_FLAG_SETS,
    DELETE_FLAGS,
    READ_FLAGS,
    UPDATE_FLAG_SETS,
    ValidationError,
    check_completed_status,
    check_due,
    check_expire_status,
    check_flag_combination,
    check_id,
    check_name_or_category,
    check_single_flag,
    check_sort_criteria,
    check_value,
    is_leap_year,
    is_valid_day,
    validate,
    validate_create,
    validate_delete,
    validate_read,
    validate_update,
)


@pytest.mark.parametrize("year", [2000, 2004, 2400])
def test_leap_years(year):
    assert is_leap_year(year)


@pytest.mark.parametrize("year", [1900, 2001, 2100])
def test_common_years(year):
    assert not is_leap_year(year)


def test_is_valid_day_month_lengths():
    assert is_valid_day(2021, 1, 31)
    assert not is_valid_day(2021, 4, 31)
    assert is_valid_day(2021, 4, 30)
    assert is_valid_day(2020, 2, 29)
    assert not is_valid_day(2021, 2, 29)
    assert not is_valid_day(2021, 13, 1)
    assert not is_valid_day(2021, 5, 0)


def test_name_or_category_length():
    assert check_name_or_category("work") == "work"
    with pytest.raises(ValidationError, match="Length should be between 1 and 15"):
        check_name_or_category("")
    with pytest.raises(ValidationError):
        check_name_or_category("x" * 16)
    assert check_name_or_category("y" * 15) == "y" * 15


def test_sort_criteria():
    assert check_sort_criteria("expire") == "expire"
    with pytest.raises(ValidationError, match="invalid sort criteria"):
        check_sort_criteria("date")


def test_id_must_be_digits():
    assert check_id("42") == "42"
    with pytest.raises(ValidationError, match="Id should be integer"):
        check_id("4a")
    with pytest.raises(ValidationError):
        check_id("-1")


def test_due_accepts_valid_value():
    assert check_due("2024-02-29@23:59:59") == "2024-02-29@23:59:59"


@pytest.mark.parametrize(
    "value, message",
    [
        ("2024-01-01", "invalid format"),
        ("2024/01/01@00:00:00", "invalid format"),
        ("20x4-01-01@00:00:00", "fail to convert"),
        ("2024-01-01@24:00:00", "invalid time value"),
        ("2024-01-01@00:60:00", "invalid time value"),
        ("2023-02-29@00:00:00", "invalid date value"),
        ("2023-00-10@00:00:00", "invalid date value"),
    ],
)
def test_due_rejects(value, message):
    with pytest.raises(ValidationError, match=message):
        check_due(value)


def test_statuses():
    assert check_completed_status("true") == "true"
    assert check_expire_status("false") == "false"
    with pytest.raises(ValidationError, match="invalid completed status"):
        check_completed_status("yes")
    with pytest.raises(ValidationError, match="invalid expire status"):
        check_expire_status("no")


def test_check_value_dispatches_by_flag():
    assert check_value("--id", "7") == "7"
    assert check_value("-a", "name") == "name"
    with pytest.raises(ValidationError, match="Id should be integer"):
        check_value("-i", "seven")
    with pytest.raises(ValidationError, match="invalid expire Status"):
        check_value("-z", "value")
    with pytest.raises(ValidationError):
        check_value("-z", "true")


def test_single_flag():
    assert check_single_flag(["ls", "-a", "name"], READ_FLAGS) == "-a"
    with pytest.raises(ValidationError, match="invalid flags"):
        check_single_flag(["ls"], READ_FLAGS)
    with pytest.raises(ValidationError, match="invalid flags"):
        check_single_flag(["rm", "-a", "name"], DELETE_FLAGS)


def test_flag_combination():
    flags = check_flag_combination(["add", "-n", "a", "--category", "b"], CREATE_FLAG_SETS)
    assert flags == {"-n", "--category"}
    with pytest.raises(ValidationError, match="invalid flags"):
        check_flag_combination(["add", "-n", "a"], CREATE_FLAG_SETS)


def test_create_flag_sets_cover_every_spelling():
    mixed = check_flag_combination(
        ["add", "--name", "a", "-c", "b", "-C", "true", "--due", "2030-01-01@00:00:00"],
        CREATE_FLAG_SETS,
    )
    assert mixed == {"--name", "-c", "-C", "--due"}
    short = check_flag_combination(
        ["add", "-n", "a", "-c", "b", "-d", "2030-01-01@00:00:00"], CREATE_FLAG_SETS
    )
    assert short == {"-n", "-c", "-d"}
    with pytest.raises(ValidationError, match="invalid flags"):
        check_flag_combination(
            ["add", "-n", "a", "-d", "2030-01-01@00:00:00"], CREATE_FLAG_SETS
        )


def test_update_flag_sets():
    assert check_flag_combination(["upt", "-n", "a", "-n", "b"], UPDATE_FLAG_SETS) == {"-n"}
    assert check_flag_combination(
        ["upt", "--name", "a", "-n", "b"], UPDATE_FLAG_SETS
    ) == {"--name", "-n"}
    assert check_flag_combination(
        ["upt", "--id", "1", "-d", "2030-01-01@00:00:00"], UPDATE_FLAG_SETS
    ) == {"--id", "-d"}
    with pytest.raises(ValidationError, match="invalid flags"):
        check_flag_combination(
            ["upt", "-i", "1", "-n", "a", "-c", "b"], UPDATE_FLAG_SETS
        )


def test_validate_create():
    pairs = validate_create(["add", "-n", "work", "-c", "job", "-C", "true"])
    assert pairs == [("-n", "work"), ("-c", "job"), ("-C", "true")]
    with pytest.raises(ValidationError, match="invalid date value"):
        validate_create(["add", "-n", "w", "-c", "j", "-d", "2023-02-30@00:00:00"])


def test_validate_update():
    assert validate_update(["upt", "-n", "old", "-n", "new"]) == [("-n", "old"), ("-n", "new")]
    with pytest.raises(ValidationError, match="invalid flags"):
        validate_update(["upt", "-i", "1", "-n", "a", "-c", "b"])


def test_validate_read_and_delete():
    assert validate_read(["ls", "-C", "true"]) == [("-C", "true")]
    assert validate_delete(["rm", "--id", "3"]) == [("--id", "3")]
    with pytest.raises(ValidationError, match="invalid sort criteria"):
        validate_read(["ls", "-a", "size"])
    with pytest.raises(ValidationError, match="invalid flags"):
        validate_delete(["rm", "-d", "2024-01-01@00:00:00"])


def test_validate_returns_command_word():
    assert validate(["help"]) == "help"
    assert validate(["quit"]) == "quit"
    assert validate(["ls", "-a", "name"]) == "ls"
    assert validate(["add", "-n", "a", "-c", "b"]) == "add"


def test_validate_even_length_is_invalid():
    with pytest.raises(ValidationError, match="invalid Command"):
        validate(["ls", "-a"])
    with pytest.raises(ValidationError, match="invalid Command"):
        validate([])


def test_validate_unknown_command():
    with pytest.raises(ValidationError, match='Unknown command: "foo"'):
        validate(["foo"])