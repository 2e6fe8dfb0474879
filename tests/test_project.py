import json
import os
import subprocess
from pathlib import Path
from unittest.mock import patch

from ferrules.project import Crate, RustAnalyzerProject


def test_rs_path_becomes_crate():
    project = RustAnalyzerProject()
    project.path_to_json("exercises/intro/intro1.rs")
    assert project.crates == [Crate("exercises/intro/intro1.rs")]
    assert project.crates[0].edition == "2021"
    assert project.crates[0].cfg == ["test"]
    assert project.crates[0].deps == []


def test_other_extensions_ignored():
    project = RustAnalyzerProject()
    project.path_to_json("exercises/clippy/Cargo.toml")
    project.path_to_json("exercises/README")
    assert project.crates == []


def test_extension_is_text_after_first_dot():
    project = RustAnalyzerProject()
    project.path_to_json("./exercises/intro/intro1.rs")
    assert project.crates == []


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/some/sysroot")
    project.path_to_json("exercises/a.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    loaded = json.loads(target.read_text())
    assert loaded == project.to_dict()
    assert list(loaded) == ["sysroot_src", "crates"]
    assert list(loaded["crates"][0]) == ["root_module", "edition", "deps", "cfg"]


def test_exercises_to_json(tmp_path):
    (tmp_path / "exercises" / "intro").mkdir(parents=True)
    (tmp_path / "exercises" / "intro" / "intro1.rs").write_text("")
    (tmp_path / "exercises" / "quiz1.rs").write_text("")
    (tmp_path / "exercises" / "notes.md").write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    roots = {crate.root_module for crate in project.crates}
    assert roots == {
        os.path.join("exercises", "intro", "intro1.rs"),
        os.path.join("exercises", "quiz1.rs"),
    }


def test_exercises_to_json_without_exercises(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    assert project.crates == []


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/src")
    project = RustAnalyzerProject()
    with patch("subprocess.run") as run:
        assert project.get_sysroot_src() == "/custom/src"
    assert project.sysroot_src == "/custom/src"
    assert run.call_count == 0


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    result = subprocess.CompletedProcess([], 0, b"/opt/toolchain\n", b"")
    project = RustAnalyzerProject()
    with patch("subprocess.run", return_value=result) as run:
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    assert project.sysroot_src == str(
        Path("/opt/toolchain", "lib", "rustlib", "src", "rust", "library")
    )
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out