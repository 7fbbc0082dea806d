"""CLI parser and command behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.project_builder import ProjectBuilder
from xportify import console
from xportify.cli import _build_parser, main
from xportify.exports import resolver


@pytest.fixture(autouse=True)
def _fresh_console():
    console.set_console(None)
    yield
    console.set_console(None)


def test_cli_accepts_verbose_before_command() -> None:
    args = _build_parser().parse_args(["--verbose", "extract"])
    assert args.verbose is True
    assert args.command == "extract"


def test_cli_accepts_verbose_after_command() -> None:
    args = _build_parser().parse_args(["extract", "--verbose"])
    assert args.verbose is True


def test_cli_extract_defaults_defer_to_config() -> None:
    args = _build_parser().parse_args(["extract"])
    assert args.project == "."
    assert args.source is None
    assert args.dist is None
    assert args.write is None


def test_cli_accepts_short_options() -> None:
    args = _build_parser().parse_args(["extract", "-p", "pkg", "-s", "lib", "-d", "out", "-w"])
    assert (args.project, args.source, args.dist, args.write) == ("pkg", "lib", "out", True)


def test_cli_requires_command() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args([])


def test_extract_prints_exports(project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    project.package_json()
    project.sources("index.ts")
    project.outputs("index.js", "index.d.ts")

    main(["extract", "--project", str(project.root)])

    out = capsys.readouterr().out
    assert "validated" in out
    assert '"./dist/index.js"' in out
    assert "--write" in out
    assert "exports" not in project.read_package_json()


def test_extract_write_updates_package_json(
    project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    project.package_json()
    project.sources("index.ts")
    project.outputs("index.js", "index.d.ts")

    main(["extract", "--project", str(project.root), "--write"])

    assert project.read_package_json()["exports"] == {
        ".": {"import": "./dist/index.js", "types": "./dist/index.d.ts"}
    }
    assert "exports configuration" in capsys.readouterr().out


def test_extract_exits_on_validation_failure(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["extract", "--project", str(tmp_path / "missing")])

    assert excinfo.value.code == 1
    assert "Project directory does not exist" in capsys.readouterr().out


def test_extract_without_entry_points_exits_cleanly(
    project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    project.package_json()

    main(["extract", "--project", str(project.root)])

    assert "No entry points found" in capsys.readouterr().out


def test_extract_reports_manifest_errors(
    project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    (project.root / "package.json").write_text("{broken", encoding="utf-8")
    project.sources("index.ts")
    project.outputs("index.js")

    with pytest.raises(SystemExit) as excinfo:
        main(["extract", "--project", str(project.root), "--write"])

    assert excinfo.value.code == 1
    assert "Error updating package.json" in capsys.readouterr().out


def test_extract_reports_config_errors(
    project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    project.package_json()
    (project.root / ".xportify.yml").write_text("- nope\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["extract", "--project", str(project.root)])

    assert excinfo.value.code == 1
    assert "must contain a mapping" in capsys.readouterr().out


def test_extract_exits_on_artifact_probe_failure(
    project: ProjectBuilder, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    project.package_json()
    project.sources("index.ts")
    project.outputs("index.js")

    def _denied(path: Path) -> None:
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(resolver, "_stat_artifact", _denied)

    with pytest.raises(SystemExit) as excinfo:
        main(["extract", "-p", str(project.root)])

    assert excinfo.value.code == 1
    assert "Error: Unable to probe artifact" in capsys.readouterr().out
    assert "exports" not in project.read_package_json()
