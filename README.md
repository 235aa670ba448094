# golings

A command-line helper for working through small Go exercises one at a time.
It tells you which exercise is next, runs it with the `go` tool, shows you a
hint when you get stuck, and can rerun the current exercise every time you
save a file.

## Requirements

- Python 3.11 or newer
- A `go` toolchain on your `PATH`. Exercises are run with `go run` or
  `go test -v`.

## Installation

```
pip install .
```

This installs the `golings` command.

## The exercise list

`golings` reads `info.toml` from the directory you run it in. The file holds
one `[[exercises]]` table per exercise, in the order you are meant to do them:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1/main.go"
mode = "compile"
hint = "Declare the variable before using it."

[[exercises]]
name = "if1"
path = "exercises/if/if1/main_test.go"
mode = "test"
hint = "Compare the two numbers with an if statement."
```

- `name`, `path`, `mode` and `hint` must be strings; key names are matched
  without regard to case and any other keys are ignored.
- With `mode = "compile"` the exercise is run as `go run ./<path>`. Any other
  mode runs it as `go test -v ./<path>`.

### Pending and done

An exercise is **Pending** while its file contains a line such as
`// I AM NOT DONE` (one or more spaces between the words, two or three slashes
before them), or while the file cannot be read. Otherwise it is **Done**.
Because the state is read from the file at `path`, point `path` at a file, not
a directory. Once your code works, delete the marker line to move on.

## Usage

```
golings list              # table of every exercise: NAME, PATH, STATE
golings run next          # run the first pending exercise
golings run variables1    # run one exercise by name
golings hint next         # hint for the first pending exercise
golings hint variables1   # hint for one exercise by name
golings verify            # run every exercise in order
golings watch             # rerun the next pending exercise when a file changes
golings --version         # also -v
```

Running `golings` with no command prints the help text.

### run

Runs one exercise behind a spinner, then shows its output. The command exits
with status 1 when:

- no exercise has the given name, or `next` is asked for and none is pending;
- `info.toml` cannot be read or parsed;
- the `go` tool cannot be started, or exits with a non-zero status (the build
  failed or tests failed); its output is shown together with a reminder of
  the `golings hint` command;
- the exercise works but still carries the `I AM NOT DONE` marker.

### verify

Runs every exercise in file order with a progress bar. It stops with exit
status 1 at the first exercise whose run wrote anything to its error output,
and shows that output. When none did, it congratulates you.

### watch

Runs the next pending exercise straight away, then watches the `exercises`
directory below the current directory (and every directory inside it). Each
time a file there is modified, the screen is cleared and the next pending
exercise is run again. While watching you can type:

- `list`: show the exercise table
- `hint`: show the hint for the next pending exercise
- `quit` or `exit`: leave watch mode

Anything else prints a reminder of the available commands. Watch mode also
ends when its input is closed. If there is no `exercises` directory, the
command exits with status 1.

## Using it from Python

- `golings.catalog.list_exercises(info_file)`, `find(name, info_file)` and
  `next_pending(info_file)` read the exercise list; the last two raise
  `ExerciseNotFoundError` and `NoPendingExercisesError`.
- `golings.exercise.Exercise` has `state()`, returning `State.PENDING` or
  `State.DONE`, and `run()`, returning a `Result` with `out`, `err`,
  `returncode` and `ok`. `build_args(exercise)` gives the arguments passed
  to `go`.
- `golings.ui.print_list(out, exercises)` writes the exercise table to a
  text stream.
- `golings.commands` holds the functions behind each command; they raise
  `CommandError` when a command fails.

## What it does not do

`golings` does not ship any exercises or an `info.toml`. You provide the
exercise files and the list yourself, and run `golings` from the directory
that holds them.