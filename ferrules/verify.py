"""Checks exercises in order, reporting progress and completion."""

from __future__ import annotations

from typing import Iterable

from rich.status import Status
from rich.text import Text

from .exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from .ui import console, no_emoji, success, warn

BAR_WIDTH = 60


class VerificationFailed(Exception):
    """An exercise failed to compile, run, pass its tests, or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} did not pass verification")
        self.exercise = exercise


class _Aborted(Exception):
    """Raised internally once a failure has been reported to the user."""


class _ProgressBar:
    def __init__(self, position: int, total: int) -> None:
        self.position = position
        self.total = total

    def show(self, percentage: float) -> None:
        if self.total:
            filled = min(self.position * BAR_WIDTH // self.total, BAR_WIDTH)
        else:
            filled = BAR_WIDTH
        if filled < BAR_WIDTH:
            bar = "#" * filled + ">" + "-" * (BAR_WIDTH - filled - 1)
        else:
            bar = "#" * BAR_WIDTH
        line = Text("Progress: [")
        line.append(bar[:filled], style="green")
        line.append(bar[filled:], style="red")
        line.append(f"] {self.position}/{self.total} ({percentage:.1f} %)")
        console.print(line)

    def advance(self) -> None:
        self.position += 1
        percentage = self.position / self.total * 100.0 if self.total else 100.0
        self.show(percentage)


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int] | None = None,
    verbose: bool = False,
) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first one that fails."""
    exercises = list(exercises)
    num_done, total = progress if progress is not None else (0, len(exercises))
    bar = _ProgressBar(num_done, total)
    bar.show(0.0)

    for exercise in exercises:
        try:
            if exercise.mode is Mode.TEST:
                passed = _compile_and_test(exercise, interactive=True, verbose=verbose)
            elif exercise.mode is Mode.COMPILE:
                passed = _compile_and_run_interactively(exercise)
            else:
                passed = _compile_only(exercise)
        except _Aborted:
            passed = False
        if not passed:
            raise VerificationFailed(exercise)
        bar.advance()


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's test harness without prompting."""
    try:
        _compile_and_test(exercise, interactive=False, verbose=verbose)
    except _Aborted as err:
        raise VerificationFailed(exercise) from err


def _spinner(message: str) -> Status:
    return console.status(Text(message))


def _compile(exercise: Exercise, status: Status) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as err:
        status.stop()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise _Aborted from err


def _compile_only(exercise: Exercise) -> bool:
    with _spinner(f"Compiling {exercise}...") as status:
        with _compile(exercise, status):
            pass
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _spinner(f"Compiling {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            status.update(Text(f"Running {exercise}..."))
            try:
                output = compiled.run()
            except ExerciseFailed as err:
                status.stop()
                warn(f"Ran {exercise} with errors")
                print(err.output.stdout)
                print(err.output.stderr)
                raise _Aborted from err
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _spinner(f"Testing {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as err:
                status.stop()
                warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(err.output.stdout)
                raise _Aborted from err
    if verbose:
        print(output.stdout)
    if interactive:
        return prompt_for_completion(exercise, None)
    return True


def _separator() -> Text:
    return Text("====================", style="bold")


def prompt_for_completion(exercise: Exercise, prompt_output: str | None = None) -> bool:
    """Return True when the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.done():
        return True

    verbs = {Mode.COMPILE: "ran", Mode.TEST: "tested", Mode.CLIPPY: "compiled"}
    success(f"Successfully {verbs[exercise.mode]} {exercise}!")

    emoji_free = no_emoji()
    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    elif exercise.mode is Mode.TEST:
        success_msg = "The code is compiling, and the tests pass!"
    elif emoji_free:
        success_msg = "The code is compiling, and Clippy is happy!"
    else:
        success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"

    console.print()
    if emoji_free:
        console.print(f"~*~ {success_msg} ~*~")
    else:
        console.print(f"🎉 🎉  {success_msg} 🎉 🎉")
    console.print()

    if prompt_output is not None:
        console.print("Output:")
        console.print(_separator())
        print(prompt_output)
        console.print(_separator())
        console.print()

    console.print("You can keep working on this exercise,")
    intro = Text("or jump into the next one by removing the ")
    intro.append("`I AM NOT DONE`", style="bold")
    intro.append(" comment:")
    console.print(intro)
    console.print()
    for context_line in state.context:
        line = Text()
        line.append(f"{context_line.number:>2}", style="bold blue")
        line.append(" ")
        line.append("|", style="blue")
        line.append("  ")
        line.append(context_line.line, style="bold" if context_line.important else "")
        console.print(line)

    return False