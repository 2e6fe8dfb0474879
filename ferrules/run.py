"""Running and resetting a single exercise."""

from __future__ import annotations

import subprocess

from rich.text import Text

from .exercise import Exercise, ExerciseFailed, Mode
from .ui import console, success, warn
from .verify import VerificationFailed, test


class RunFailed(Exception):
    """Running or resetting an exercise did not succeed."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} failed")
        self.exercise = exercise


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run one exercise, or run its tests; raise RunFailed on failure."""
    if exercise.mode is Mode.TEST:
        try:
            test(exercise, verbose)
        except VerificationFailed as err:
            raise RunFailed(exercise) from err
    else:
        _compile_and_run(exercise)


def reset(exercise: Exercise) -> subprocess.Popen:
    """Start 'git stash -- <path>' for the exercise and return the process."""
    try:
        return subprocess.Popen(["git", "stash", "--", str(exercise.path)])
    except OSError as err:
        raise RunFailed(exercise) from err


def _compile_and_run(exercise: Exercise) -> None:
    with console.status(Text(f"Compiling {exercise}...")) as status:
        try:
            compiled = exercise.compile()
        except ExerciseFailed as err:
            status.stop()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(err.output.stderr)
            raise RunFailed(exercise) from err

        with compiled:
            status.update(Text(f"Running {exercise}..."))
            try:
                output = compiled.run()
            except ExerciseFailed as err:
                failure = err
            else:
                failure = None
            status.stop()

    if failure is None:
        print(output.stdout)
        success(f"Successfully ran {exercise}")
        return
    print(failure.output.stdout)
    print(failure.output.stderr)
    warn(f"Ran {exercise} with errors")
    raise RunFailed(exercise) from failure