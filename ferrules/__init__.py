"""Terminal runner for small Rust exercises, with progress tracking and worked solutions."""

__version__ = "5.4.0"