"""Exercise metadata, compilation, running and completion state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_ThreadId{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ExerciseOutput:
    """Decoded output of a finished process."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Compiling or running an exercise did not succeed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.context


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _output(process: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(_decode(process.stdout), _decode(process.stderr))


def _execute(args: list[str], failure: str) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(args, capture_output=True, check=False)
    except OSError as err:
        raise RuntimeError(failure) from err


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass
class Exercise:
    """An exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Exercise":
        try:
            return cls(
                name=str(data["name"]),
                path=Path(data["path"]),
                mode=Mode(data["mode"]),
                hint=str(data["hint"]),
            )
        except KeyError as err:
            raise ValueError(f"exercise entry is missing {err.args[0]!r}") from err

    def compile(self) -> "CompiledExercise":
        """Build the exercise; raise ExerciseFailed with the compiler output."""
        target = temp_file()
        source = str(self.path)
        failure = "Failed to run 'compile' command."
        if self.mode is Mode.COMPILE:
            process = _execute(
                ["rustc", source, "-o", target, *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS],
                failure,
            )
        elif self.mode is Mode.TEST:
            process = _execute(
                ["rustc", "--test", source, "-o", target,
                 *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS],
                failure,
            )
        else:
            process = self._clippy(source, target)

        if process.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(_output(process))

    def _clippy(self, source: str, target: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            f'[package]\nname = "{self.name}"\nversion = "0.0.1"\nedition = "2021"\n'
            f'[[bin]]\nname = "{self.name}"\npath = "{self.name}.rs"'
        )
        if "NO_EMOJI" in os.environ:
            message = "Failed to write Clippy Cargo.toml file."
        else:
            message = "Failed to write 📎 Clippy 📎 Cargo.toml file."
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as err:
            raise RuntimeError(message) from err
        # Build a binary too so clippy exercises can be run afterwards.
        _execute(
            ["rustc", source, "-o", target, *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS],
            "Failed to compile!",
        )
        # A clean build is needed for clippy to report every lint.
        _execute(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
            "Failed to run 'cargo clean'",
        )
        return _execute(
            ["cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
             *RUSTC_COLOR_ARGS, "--", "-D", "warnings", "-D", "clippy::float_cmp"],
            "Failed to run 'compile' command.",
        )

    def _run(self) -> ExerciseOutput:
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        process = _execute(args, "Failed to run 'run' command")
        output = _output(process)
        if process.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def state(self) -> State:
        """Read the source and locate the pending marker, if any."""
        source = self.path.read_text(encoding="utf-8", errors="replace")
        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (index for index, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise ValueError(f"pending marker in {self.path} spans several lines")

        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=index + 1, important=index == matched)
                for index, line in enumerate(lines)
                if low <= index <= high
            )
        )

    def looks_done(self) -> bool:
        """True when the pending marker has been removed."""
        return self.state().done()

    def __str__(self) -> str:
        return str(self.path)


class CompiledExercise:
    """A built exercise; closing it removes the temporary binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseFailed when it exits unsuccessfully."""
        return self.exercise._run()

    def close(self) -> None:
        if not self._closed:
            clean()
            self._closed = True

    def __enter__(self) -> "CompiledExercise":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def parse_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from info.toml text."""
    data = tomllib.loads(text)
    try:
        entries = data["exercises"]
    except KeyError as err:
        raise ValueError("no exercises table found") from err
    return [Exercise.from_dict(entry) for entry in entries]


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read and parse an info.toml file."""
    return parse_exercises(Path(path).read_text(encoding="utf-8"))