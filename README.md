# ferrules

`ferrules` is a terminal companion for working through a set of small
Rust exercises. It reads the list of exercises from an `info.toml` file,
compiles and runs each one, tells you which still fail, shows hints, and
keeps track of how far you have come.

## Installation

```
pip install ferrules
```

Compiling the exercises needs the `rustc` compiler on your `PATH`;
exercises in `clippy` mode also need `cargo`, and `ferrules reset`
needs `git`. `ferrules` checks for `rustc` on start and stops with a
message if it cannot be found.

## The exercise list

Run `ferrules` from the directory that holds `info.toml`; anywhere else
it prints a message and exits with status 1. Each entry names an
exercise, the file it lives in, how it is checked and a hint:

```toml
[[exercises]]
name = "intro1"
path = "exercises/intro/intro1.rs"
mode = "compile"
hint = "No hints this time ;)"
```

`mode` is one of:

- `compile` – build the file with `rustc` and run the program;
- `test` – build the file as a test harness and run its tests;
- `clippy` – write `exercises/clippy/Cargo.toml`, build the file, and
  run `cargo clippy` with warnings treated as errors.

An exercise counts as unfinished while its file still holds a line
comment reading `I AM NOT DONE`. Remove that comment once you are happy
with your solution and the exercise is considered done.

## Commands

```
ferrules                 # welcome text and a short introduction
ferrules --version       # print the version
ferrules watch           # verify in order, re-checking whenever a file changes
ferrules verify          # verify every exercise in the recommended order
ferrules run NAME        # compile and run (or test) a single exercise
ferrules run next        # the first exercise that is not yet done
ferrules hint NAME       # print the hint for an exercise
ferrules reset NAME      # restore an exercise with "git stash -- <file>"
ferrules list            # table of names, paths and status
ferrules lsp             # write rust-project.json for editor support
```

Add `--nocapture` before the subcommand to see the output of test
exercises, for example `ferrules --nocapture run NAME`. A failing
`run` or `verify`, an unknown exercise name, or a missing `NAME`
ends with exit status 1.

`ferrules list` accepts:

- `-p`, `--paths` – show only the paths;
- `-n`, `--names` – show only the names;
- `-f`, `--filter PATTERNS` – comma-separated substrings to match against
  names and paths;
- `-u`, `--unsolved` – show only exercises not yet done;
- `-s`, `--solved` – show only exercises that are done.

It ends with a progress line such as
`Progress: You completed 3 / 10 exercises (30.0 %).`

`ferrules lsp` takes the standard library location from `RUST_SRC_PATH`,
or asks `rustc --print sysroot`, and adds a crate for every `.rs` file
under `exercises/`.

### Watch mode

`ferrules watch` verifies the exercises one after another and stops at
the first that fails. Edit a `.rs` file under `exercises/` and save it;
that exercise is checked first, followed by the others still pending.
While watching you can type:

- `hint` – the current exercise's hint;
- `clear` – clear the screen;
- `quit` – leave watch mode;
- `help` – list these commands.

## Environment

Set `NO_EMOJI` to any value to replace emoji in the output with plain
characters.

## Using it as a library

The pieces behind the commands can be used directly:

```python
from ferrules.exercise import load_exercises
from ferrules.verify import VerificationFailed, verify

exercises = load_exercises("info.toml")
pending = [e for e in exercises if not e.looks_done()]
print(f"{len(pending)} exercises left")

try:
    verify(exercises)
except VerificationFailed as err:
    print(err.exercise.hint)
```

- `ferrules.exercise` – `Exercise`, `Mode`, `load_exercises` and
  `parse_exercises`. `Exercise.compile()` returns a `CompiledExercise`
  (a context manager that removes the built binary on exit) or raises
  `ExerciseFailed`; `Exercise.state()` returns a `State` that, for an
  unfinished exercise, carries the lines around the marker as
  `ContextLine` values.
- `ferrules.verify` – `verify`, `test` and `prompt_for_completion`.
- `ferrules.run` – `run` and `reset`, raising `RunFailed` on failure.
- `ferrules.watch` – `watch`, returning a `WatchStatus`.
- `ferrules.project` – `RustAnalyzerProject` for `rust-project.json`.

## Worked solutions

The package also ships worked solutions to a number of classic
exercises as ordinary Python modules, for reference and comparison:
`ferrules.errors`, `ferrules.iterators`, `ferrules.fruits`,
`ferrules.text_ops`, `ferrules.quizzes`, `ferrules.basics`,
`ferrules.structs`, `ferrules.traits` and `ferrules.messages`.

## What it does not do

- It does not ship the exercises themselves: you need your own
  `info.toml` and exercise files.
- There are no worked solutions for the type-conversion exercises.