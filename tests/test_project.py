import json
import subprocess
from pathlib import Path

from drillrunner import project as project_module
from drillrunner.project import Crate, RustAnalyzerProject


def test_add_path_accepts_rs():
    project = RustAnalyzerProject()
    project.add_path("exercises/a.rs")
    assert project.crates == [Crate(root_module="exercises/a.rs")]
    assert project.crates[0].edition == "2021"
    assert project.crates[0].cfg == ["test"]
    assert project.crates[0].deps == []


def test_add_path_rejects_other_files():
    project = RustAnalyzerProject()
    for path in ["exercises/a.txt", "exercises/noext", "exercises/a.b.rs"]:
        project.add_path(path)
    assert project.crates == []


def test_exercises_to_json_finds_nested_sources(tmp_path):
    (tmp_path / "intro").mkdir()
    (tmp_path / "intro" / "intro1.rs").write_text("")
    (tmp_path / "quiz1.rs").write_text("")
    (tmp_path / "README.md").write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path / "ex")  # missing root yields nothing
    assert project.crates == []
    project = RustAnalyzerProject()
    for part in [tmp_path]:
        pass
    root = tmp_path
    project.exercises_to_json(root)
    names = sorted(Path(c.root_module).name for c in project.crates)
    assert names == ["intro1.rs", "quiz1.rs"]


def test_to_json_round_trip():
    project = RustAnalyzerProject(sysroot_src="/sys")
    project.add_path("exercises/a.rs")
    data = json.loads(project.to_json())
    assert list(data) == ["sysroot_src", "crates"]
    assert data["sysroot_src"] == "/sys"
    assert data["crates"][0]["root_module"] == "exercises/a.rs"
    assert list(data["crates"][0]) == ["root_module", "edition", "deps", "cfg"]


def test_write_to_disk(tmp_path):
    project = RustAnalyzerProject()
    project.add_path("exercises/a.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert target.read_text() == project.to_json()


def test_get_sysroot_src(monkeypatch, capsys):
    def fake_run(args, **kwargs):
        assert args == ["rustc", "--print", "sysroot"]
        return subprocess.CompletedProcess(args, 0, stdout=b"/opt/toolchain\n", stderr=b"")

    monkeypatch.setattr(project_module.subprocess, "run", fake_run)
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    parts = Path(project.sysroot_src).parts
    assert parts[-5:] == ("lib", "rustlib", "src", "rust", "library")
    assert Path(project.sysroot_src).parents[4] == Path("/opt/toolchain")
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out