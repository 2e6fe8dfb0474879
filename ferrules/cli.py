"""Command-line entry point: list, run, verify, reset and watch exercises."""

from __future__ import annotations

import argparse
import math
import os
import subprocess
import sys
from pathlib import Path
from typing import Iterable, Sequence

from .exercise import Exercise, load_exercises
from .project import RustAnalyzerProject
from .run import RunFailed, reset, run
from .ui import no_emoji
from .verify import VerificationFailed, verify
from .watch import WatchStatus, watch

VERSION = "5.4.0"
INFO_FILE = "info.toml"

WELCOME = "\n".join(
    [
        "       welcome to...",
        "   __                      _",
        "  / _| ___ _ __ _ __ _   _| | ___  ___",
        " | |_ / _ \\ '__| '__| | | | |/ _ \\/ __|",
        " |  _|  __/ |  | |  | |_| | |  __/\\__ \\",
        " |_|  \\___|_|  |_|   \\__,_|_|\\___||___/",
    ]
)

DEFAULT_OUT = """Thanks for installing ferrules!

Is this your first time? Don't worry, these exercises are made for beginners!
Here's a couple of notes about how the exercises work:

1. The central concept is that you solve exercises. These exercises usually
   have some sort of syntax error in them, which will cause them to fail
   compilation or testing. Sometimes there's a logic error instead of a syntax
   error. No matter what error, it's your job to find it and fix it! You'll
   know when you fixed it because then the exercise will compile and the tool
   will be able to move on to the next exercise.
2. If you run in watch mode (which we recommend), it'll automatically start
   with the first exercise. Don't get confused by an error message popping up
   as soon as you start! This is part of the exercise that you're supposed to
   solve, so open the exercise file in an editor and start your detective work!
3. If you're stuck on an exercise, there is a helpful hint you can view by
   typing 'hint' (in watch mode), or running `ferrules hint exercise_name`.
4. If you want to use `rust-analyzer` with the exercises, which provides
   features like autocompletion, run the command `ferrules lsp`.

Got all that? Great! To get started, run `ferrules watch` in order to get the
first exercise. Make sure to have your editor open!"""

FINISH_LINE = """+----------------------------------------------------+
|          You made it to the finish line!           |
+----------------------------------------------------+

We hope you enjoyed learning about the various aspects of Rust!
If you noticed any issues, please don't hesitate to report them.
You can also contribute your own exercises to help the greater community!"""


class ExerciseNotFound(LookupError):
    """No exercise matches the requested name."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = _Parser(
        prog="ferrules",
        description="A collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.add_argument(
        "--nocapture", action="store_true", help="show outputs from the test exercises"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="show the executable version"
    )
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("verify", help="verifies all exercises in the recommended order")
    commands.add_parser("watch", help="reruns `verify` when files were edited")
    for name, text in (
        ("run", "runs/tests a single exercise"),
        ("reset", 'resets a single exercise using "git stash -- <filename>"'),
        ("hint", "returns a hint for the given exercise"),
    ):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("name", nargs="?", help="the name of the exercise")
    commands.add_parser("lsp", help="enable rust-analyzer for exercises")

    listing = commands.add_parser("list", help="lists the available exercises")
    listing.add_argument(
        "-p", "--paths", action="store_true", help="show only the paths of the exercises"
    )
    listing.add_argument(
        "-n", "--names", action="store_true", help="show only the names of the exercises"
    )
    listing.add_argument(
        "-f",
        "--filter",
        default=None,
        help="a string to match exercise names; comma separated patterns are acceptable",
    )
    listing.add_argument(
        "-u", "--unsolved", action="store_true", help="display only exercises not yet solved"
    )
    listing.add_argument(
        "-s", "--solved", action="store_true", help="display only exercises that have been solved"
    )
    return parser


def rustc_exists() -> bool:
    """Return True when `rustc --version` runs successfully."""
    try:
        process = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return process.returncode == 0


def find_exercise(name: str, exercises: Iterable[Exercise]) -> Exercise:
    """Find an exercise by name; 'next' means the first one not yet done."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise ExerciseNotFound(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise ExerciseNotFound(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Iterable[Exercise],
    paths: bool = False,
    names: bool = False,
    filters: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> int:
    """Print the matching exercises and a progress line; return how many are done."""
    exercises = list(exercises)
    if not paths and not names:
        print(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}")
    patterns = [p for p in (filters or "").lower().split(",") if p.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        done = exercise.looks_done()
        if done:
            done_count += 1
        status = "Done" if done else "Pending"
        matches = filters is None or any(
            p in exercise.name or p in fname for p in patterns
        )
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if not (wanted and matches):
            continue
        if paths:
            line = fname
        elif names:
            line = exercise.name
        else:
            line = f"{exercise.name:<17}\t{fname:<46}\t{status:<7}"
        print(line)
    total = len(exercises)
    percentage = done_count / total * 100.0 if total else math.nan
    print(f"Progress: You completed {done_count} / {total} exercises ({percentage:.1f} %).")
    return done_count


def _silence_stdout() -> None:
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        pass


def _lsp() -> int:
    project = RustAnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError:
        print("Couldn't find toolchain path, do you have `rustc` installed?")
        return 1
    project.exercises_to_json()
    if not project.crates:
        print("Failed find any exercises, make sure you're in the exercises folder")
        return 0
    try:
        project.write_to_disk()
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print("rust-analyzer will now parse exercises, restart your language server or editor")
    return 0


def _watch(exercises: list[Exercise], verbose: bool) -> int:
    try:
        status = watch(exercises, verbose)
    except OSError as err:
        print(f"Error: Could not watch your progress. Error message was {err!r}.")
        print(
            "Most likely you've run out of disk space or your "
            "'inotify limit' has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        emoji = "★" if no_emoji() else "🎉"
        print(f"{emoji} All exercises completed! {emoji}")
        print(f"\n{FINISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `ferrules watch` again"
        )
    return 0


def _dispatch(args: argparse.Namespace, exercises: list[Exercise]) -> int:
    verbose = args.nocapture
    command = args.command
    if command == "list":
        try:
            list_exercises(
                exercises, args.paths, args.names, args.filter, args.unsolved, args.solved
            )
        except BrokenPipeError:
            _silence_stdout()
        return 0
    if command == "run":
        try:
            run(find_exercise(args.name, exercises), verbose)
        except RunFailed:
            return 1
        return 0
    if command == "reset":
        try:
            process = reset(find_exercise(args.name, exercises))
        except RunFailed:
            return 1
        process.wait()
        return 0
    if command == "hint":
        print(find_exercise(args.name, exercises).hint)
        return 0
    if command == "verify":
        try:
            verify(exercises, (0, len(exercises)), verbose)
        except VerificationFailed:
            return 1
        return 0
    if command == "lsp":
        return _lsp()
    return _watch(exercises, verbose)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = build_parser().parse_args(argv)

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command in ("run", "reset", "hint") and args.name is None:
        print("Required positional arguments not provided:\n    name", file=sys.stderr)
        return 1

    if args.command is None:
        print(f"\n{WELCOME}\n")

    if not Path(INFO_FILE).exists():
        print(f"{sys.argv[0]} must be run from the exercises directory")
        print(f"Try `cd` into the directory that holds {INFO_FILE}!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(INFO_FILE)

    if args.command is None:
        print(f"{DEFAULT_OUT}\n")
        return 0

    try:
        return _dispatch(args, exercises)
    except ExerciseNotFound as err:
        print(err)
        return 1


if __name__ == "__main__":
    sys.exit(main())