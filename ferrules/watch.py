"""Watch mode: re-verify exercises whenever their files change."""

from __future__ import annotations

import enum
import os
import queue
import sys
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise
from .verify import VerificationFailed, verify

WATCH_DIR = "./exercises"
POLL_SECONDS = 1.0

HELP_TEXT = "\n".join(
    [
        "Commands available to you in watch mode:",
        "  hint  - prints the current exercise's hint",
        "  clear - clears the screen",
        "  quit  - quits watch mode",
        "  help  - displays this help message",
        "",
        "Watch mode automatically re-evaluates the current exercise",
        "when you edit a file's contents.",
    ]
)


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"


@dataclass
class WatchState:
    """State shared between the watch loop and the command shell."""

    failed_exercise_hint: str | None = None
    should_quit: threading.Event = field(default_factory=threading.Event)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def set_hint(self, hint: str | None) -> None:
        with self.lock:
            self.failed_exercise_hint = hint

    def current_hint(self) -> str | None:
        with self.lock:
            return self.failed_exercise_hint


def handle_command(command: str, state: WatchState) -> str | None:
    """Carry out one shell command, print its reply and return it."""
    command = command.strip()
    if command == "hint":
        reply = state.current_hint()
    elif command == "clear":
        reply = "\x1b[2J\x1b[1;1H"
    elif command == "quit":
        state.should_quit.set()
        reply = "Bye!"
    elif command == "help":
        reply = HELP_TEXT
    else:
        reply = f"unknown command: {command}"
    if reply is not None:
        print(reply)
    return reply


def spawn_watch_shell(state: WatchState) -> threading.Thread:
    """Start a daemon thread that reads commands from standard input."""
    print(
        "Welcome to watch mode! You can type 'help' to get an overview "
        "of the commands you can use here."
    )

    def read_commands() -> None:
        while True:
            try:
                line = sys.stdin.readline()
            except (OSError, ValueError) as err:
                print(f"error reading command: {err}")
                return
            if not line:
                return
            handle_command(line, state)

    thread = threading.Thread(target=read_commands, name="watch-shell", daemon=True)
    thread.start()
    return thread


class _RustFileHandler(FileSystemEventHandler):
    def __init__(self, events: "queue.Queue[Path]") -> None:
        super().__init__()
        self._events = events

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(Path(os.fsdecode(event.src_path)))

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)


def _clear_screen() -> None:
    print("\x1bc")


def _ends_with(filepath: Path, suffix: Path) -> bool:
    parts = suffix.parts
    return bool(parts) and filepath.parts[-len(parts):] == parts


def _pending_order(filepath: Path, exercises: list[Exercise]) -> list[Exercise]:
    changed = next((e for e in exercises if _ends_with(filepath, e.path)), None)
    rest = [
        e for e in exercises if not e.looks_done() and not _ends_with(filepath, e.path)
    ]
    return ([changed] if changed is not None else []) + rest


def _next_change(events: "queue.Queue[Path]") -> Path | None:
    try:
        changed = events.get(timeout=POLL_SECONDS)
    except queue.Empty:
        return None
    # One save often produces several events; keep only the latest per burst.
    while True:
        try:
            changed = events.get_nowait()
        except queue.Empty:
            return changed


def watch(exercises: Iterable[Exercise], verbose: bool = False) -> WatchStatus:
    """Verify exercises, then re-verify on every change until done or told to quit."""
    exercises = list(exercises)
    events: "queue.Queue[Path]" = queue.Queue()
    observer = Observer()
    observer.schedule(_RustFileHandler(events), WATCH_DIR, recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose)
        except VerificationFailed as err:
            state = WatchState(failed_exercise_hint=err.exercise.hint)
        else:
            return WatchStatus.FINISHED

        spawn_watch_shell(state)
        while True:
            changed = _next_change(events)
            if changed is not None and changed.suffix == ".rs" and changed.exists():
                filepath = changed.resolve()
                pending = _pending_order(filepath, exercises)
                num_done = sum(1 for e in exercises if e.looks_done())
                _clear_screen()
                try:
                    verify(pending, (num_done, len(exercises)), verbose)
                except VerificationFailed as err:
                    state.set_hint(err.exercise.hint)
                else:
                    return WatchStatus.FINISHED
            if state.should_quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()