"""Builds a rust-project.json description of the exercises."""

from __future__ import annotations

import glob
import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [asdict(crate) for crate in self.crates],
        }

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        """Write the project as compact JSON."""
        data = json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        Path(path).write_text(data, encoding="utf-8")

    def path_to_json(self, path: str) -> None:
        """Add a crate when the text after the first dot of path is 'rs'."""
        _, dot, ext = path.partition(".")
        if dot and ext == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root: str | os.PathLike = ".") -> None:
        """Add a crate for every .rs file below the exercises directory."""
        pattern = os.path.join("exercises", "**", "*")
        for path in sorted(glob.glob(pattern, root_dir=root, recursive=True)):
            self.path_to_json(path)

    def get_sysroot_src(self) -> str:
        """Locate the standard library sources, from RUST_SRC_PATH or rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return env_path

        process = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
        text = process.stdout.decode("utf-8", errors="replace")
        tokens = text.split()
        toolchain = tokens[0] if tokens else text

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(Path(toolchain, "lib", "rustlib", "src", "rust", "library"))
        return self.sysroot_src