from __future__ import annotations

import os
import subprocess
import threading
from pathlib import Path
from typing import Callable, Iterator

from .git import current_ref
from .models import Blob
from .paths import path_included

BlobVisitor = Callable[[str, Blob], Blob]


def rev_list_args(
    *,
    include_refs: tuple[str, ...],
    exclude_refs: tuple[str, ...],
    everything: bool,
    remote: str,
    head: str = "",
) -> list[str]:
    """
    Build the revision arguments for `git rev-list`.

    With no refs at all, `head` (the checked-out branch) is walked and the
    refs of `remote` are excluded, so only history missing from the remote
    is inspected.
    """
    if everything:
        if include_refs or exclude_refs:
            raise ValueError("--everything cannot be combined with --include-ref, --exclude-ref or branch arguments")
        return ["--all"]

    include = [r for r in include_refs if r]
    exclude = [r for r in exclude_refs if r]
    if not include:
        if not head:
            raise ValueError("no refs to include")
        include = [head]
        if not exclude and remote:
            exclude = [f"--remotes={remote}"]

    args = list(include)
    if exclude:
        args.append("--not")
        args.extend(exclude)
    return args


def resolve_refs(
    repo: Path,
    *,
    include_refs: tuple[str, ...],
    exclude_refs: tuple[str, ...],
    everything: bool,
    remote: str,
) -> list[str]:
    head = ""
    if not everything and not include_refs:
        head = current_ref(repo)
    return rev_list_args(
        include_refs=include_refs,
        exclude_refs=exclude_refs,
        everything=everything,
        remote=remote,
        head=head,
    )


def _start_stderr_drain(proc: subprocess.Popen) -> tuple[threading.Thread | None, list[bytes]]:
    chunks: list[bytes] = []
    if proc.stderr is None:
        return None, chunks
    stream = proc.stderr
    max_stderr_bytes = 50_000

    def drain_stderr() -> None:
        taken = 0
        while True:
            chunk = stream.read(8192)
            if not chunk:
                return
            if taken >= max_stderr_bytes:
                continue
            take = chunk[: max_stderr_bytes - taken]
            chunks.append(take)
            taken += len(take)

    thread = threading.Thread(target=drain_stderr, daemon=True)
    thread.start()
    return thread, chunks


def _stderr_text(chunks: list[bytes]) -> str:
    return b"".join(chunks).decode("utf-8", errors="replace").strip()[:500]


def _stop(proc: subprocess.Popen, thread: threading.Thread | None, *, kill: bool) -> None:
    if kill and proc.poll() is None:
        proc.kill()
    proc.wait()
    if proc.stdout is not None:
        proc.stdout.close()
    if thread is not None:
        thread.join()


def iter_blobs(repo: Path, refs: list[str]) -> Iterator[tuple[str, Blob]]:
    """
    Yield `(path, blob)` for every blob reachable from `refs`, in the order
    `git rev-list --objects` reports them.

    Object types and sizes come from one long-lived `git cat-file
    --batch-check`, queried an object at a time. Paths are raw bytes in git's
    output and are decoded with `os.fsdecode`.
    """
    rev_list = subprocess.Popen(
        ["git", "rev-list", "--objects", *refs, "--"],
        cwd=str(repo),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    rev_list_stderr_thread, rev_list_stderr = _start_stderr_drain(rev_list)
    try:
        cat_file = subprocess.Popen(
            ["git", "cat-file", "--batch-check=%(objecttype) %(objectname) %(objectsize)"],
            cwd=str(repo),
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError:
        _stop(rev_list, rev_list_stderr_thread, kill=True)
        raise
    cat_file_stderr_thread, cat_file_stderr = _start_stderr_drain(cat_file)
    finished = False

    try:
        assert rev_list.stdout is not None
        assert cat_file.stdin is not None and cat_file.stdout is not None
        for raw_line in rev_list.stdout:
            oid, _, raw_path = raw_line.rstrip(b"\n").partition(b" ")
            # Commits and the root tree carry no path.
            if not oid or not raw_path:
                continue

            try:
                cat_file.stdin.write(oid + b"\n")
                cat_file.stdin.flush()
                reply = cat_file.stdout.readline()
            except BrokenPipeError:
                reply = b""
            if not reply:
                _stop(cat_file, cat_file_stderr_thread, kill=False)
                raise RuntimeError(f"git cat-file exited {cat_file.returncode}: {_stderr_text(cat_file_stderr)}")

            parts = reply.split()
            # "<oid> missing"
            if len(parts) != 3 or parts[0] != b"blob":
                continue
            try:
                size = int(parts[2])
            except ValueError:
                continue
            yield os.fsdecode(raw_path), Blob(oid=parts[1].decode("ascii"), size=size)

        _stop(rev_list, rev_list_stderr_thread, kill=False)
        if rev_list.returncode != 0:
            raise RuntimeError(f"git rev-list exited {rev_list.returncode}: {_stderr_text(rev_list_stderr)}")
        finished = True
    finally:
        if cat_file.stdin is not None and not cat_file.stdin.closed:
            try:
                cat_file.stdin.close()
            except BrokenPipeError:
                pass
        # cat-file exits on its own once stdin is closed.
        _stop(cat_file, cat_file_stderr_thread, kill=not finished)
        _stop(rev_list, rev_list_stderr_thread, kill=not finished)


def migrate(
    repo: Path,
    refs: list[str],
    visitor: BlobVisitor,
    *,
    include: tuple[str, ...] = (),
    exclude: tuple[str, ...] = (),
) -> int:
    visited = 0
    blobs = iter_blobs(repo, refs)
    try:
        for path, blob in blobs:
            if not path_included(path, include, exclude):
                continue
            out = visitor(path, blob)
            if out != blob:
                raise RuntimeError(f"visitor rewrote {path} ({blob.oid}); migrate info is read-only")
            visited += 1
    finally:
        blobs.close()
    return visited
