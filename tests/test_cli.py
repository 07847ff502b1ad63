from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from git_migrate_info import info_cli
from git_migrate_info.config import DEFAULT_CONFIG_NAME


def _env() -> dict[str, str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(Path(__file__).resolve().parents[1] / "src")
    return env


def test_help_describes_flags(tmp_path: Path) -> None:
    cmd = [sys.executable, "-m", "git_migrate_info", "--help"]
    proc = subprocess.run(cmd, cwd=str(tmp_path), env=_env(), text=True, capture_output=True)
    assert proc.returncode == 0, proc.stderr
    assert "--above" in proc.stdout
    assert "--top" in proc.stdout
    assert "--everything" in proc.stdout


def test_version(tmp_path: Path) -> None:
    cmd = [sys.executable, "-m", "git_migrate_info", "--version"]
    proc = subprocess.run(cmd, cwd=str(tmp_path), env=_env(), text=True, capture_output=True)
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.startswith("git-migrate-info ")


def test_unparseable_above_exits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        info_cli.main(["--above", "lots"])
    assert "cannot parse --above=lots" in str(exc.value)


def test_options_combine_config_and_flags(tmp_path: Path) -> None:
    cfg = tmp_path / DEFAULT_CONFIG_NAME
    cfg.write_text('{"above": "1KB", "top": 2, "exclude": "vendor/", "remote": "upstream"}', encoding="utf-8")
    parser = info_cli._build_parser()
    args = parser.parse_args(["--config", str(cfg), "--top", "7", "-I", "*.png,*.jpg", "main", "--exclude-ref", "v1"])
    opts = info_cli._options_from_args(args, info_cli.load_config(args.config))
    assert opts.above == 1024
    assert opts.top == 7
    assert opts.include == ("*.png", "*.jpg")
    assert opts.exclude == ("vendor/",)
    assert opts.include_refs == ("main",)
    assert opts.exclude_refs == ("v1",)
    assert opts.remote == "upstream"


def test_not_a_repository(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    assert info_cli.main(["--repo", str(tmp_path), "--quiet"]) == 2
    assert "not a git repository" in capsys.readouterr().err
