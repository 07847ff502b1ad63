from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional


def run_git(args: list[str], cwd: Path, timeout_s: int = 300) -> tuple[int, str, str]:
    proc = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        errors="surrogateescape",
        timeout=timeout_s,
    )
    return proc.returncode, proc.stdout, proc.stderr


def get_repo_toplevel(candidate: Path) -> Optional[Path]:
    try:
        code, out, _ = run_git(["rev-parse", "--show-toplevel"], cwd=candidate)
    except (OSError, subprocess.SubprocessError):
        return None
    if code != 0 or not out.strip():
        return None
    return Path(out.strip()).resolve()


def current_ref(repo: Path) -> str:
    code, out, _ = run_git(["symbolic-ref", "-q", "HEAD"], cwd=repo)
    if code == 0 and out.strip():
        return out.strip()
    # Detached HEAD.
    code, out, err = run_git(["rev-parse", "--verify", "-q", "HEAD"], cwd=repo)
    if code != 0 or not out.strip():
        raise RuntimeError(f"cannot resolve HEAD in {repo}: {err.strip()[:500] or 'no commits yet'}")
    return out.strip()


def get_remote_urls(repo: Path) -> dict[str, str]:
    try:
        code, out, _ = run_git(["config", "--get-regexp", r"^remote\..*\.url$"], cwd=repo)
    except (OSError, subprocess.SubprocessError):
        return {}
    if code != 0:
        return {}
    remotes: dict[str, str] = {}
    for line in out.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            key, url = line.split(None, 1)
        except ValueError:
            continue
        if not key.startswith("remote.") or not key.endswith(".url"):
            continue
        name = key[len("remote.") : -len(".url")]
        url = url.strip()
        if name and url:
            remotes[name] = url
    return remotes
