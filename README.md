# todoshell

An interactive to-do list shell for the terminal. Every task has a name, a
category and a completed flag, and may have a due date. Tasks are kept in a plain
text file that is read at startup and written again when you leave the shell.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Starting the shell

    todoshell               # uses YOUR_FILE_NAME.txt in the current directory
    todoshell tasks.txt     # uses the given task file

A missing task file is treated as an empty list; it is created when you leave the
shell. The list is saved on `exit`, `quit` or end of input.

The prompt accepts one command per line. In a terminal, up and down arrows step
through earlier commands, left and right arrows move the cursor (shown as `|`),
and backspace deletes the character before the cursor. When standard input is
not a terminal, commands are read from it line by line.

## Commands

Add a task. Name and category are required and must be 1 to 15 characters; a
new task's name must not already be in use. Words are separated by whitespace,
so values cannot contain spaces.

    add -n groceries -c home
    add --name report --category work --due 2030-06-01@17:00:00 --completed false

Due dates are written `YYYY-MM-DD@hr:min:sec` in local time and are checked
against the calendar, leap years included.

List tasks:

    ls -a name          # all tasks, sorted by name, category, completed or expire
    ls -i 0             # the task with id 0
    ls -n groceries     # the task with this name
    ls -c work          # tasks in a category
    ls -C true          # completed (or not completed) tasks
    ls -e true          # expired (or not yet expired) tasks

Tasks with a due date show the days, hours, minutes and seconds left, or
`Already Expired`; tasks without one show `Due isn't set`.

Update a task, found by id or by name:

    upt -i 0 -C true
    upt -n report -d 2030-07-01@09:00:00
    upt -n report -n summary

Remove tasks:

    rm -i 0
    rm -n groceries
    rm -c work
    rm -C true
    rm -e true

Other commands:

    help                # show the help menu
    exit                # save the list and leave (also: quit)

Ids are positions in the list as last shown; they change when the list is sorted
or tasks are removed, so list the tasks before addressing one by id. Updates and
removals show the whole list afterwards, sorted by name.

## Task file format

One task per line, fields separated by spaces:

    name category completed due

`completed` is `0` or `1`; `due` is a Unix timestamp, or `0` when the task has
no due date.

## Using it from Python

The pieces of the shell can be used on their own:

    from todoshell.database import Database, SortCriteria, render_table
    from todoshell.cli import run_command

    db = Database()
    output, finished = run_command(db, "add -n groceries -c home")
    print(render_table(db.sort(SortCriteria.NAME)))
    db.save("tasks.txt")

- `todoshell.validator.validate` checks a split command and raises
  `todoshell.validator.ValidationError` with a readable message when it is
  malformed.
- `todoshell.router.route` carries out a validated command on a `Database` and
  returns the text to show.
- `todoshell.database.Database` raises `TaskNotFoundError` when a lookup matches
  nothing and `NameConflictError` when a new task's name is taken.
- `todoshell.task.Task` holds one task; `todoshell.task.parse_due` turns a due
  string into a timestamp.
- `todoshell.line_editor.LineEditor` is the line editor behind the prompt, and
  `todoshell.line_editor.read_line` reads one line with it.