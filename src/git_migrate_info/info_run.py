from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import TextIO

from .git import get_remote_urls, get_repo_toplevel
from .info_aggregate import ExtensionStatsAggregator
from .info_entries import top_entries
from .info_render import print_report
from .migrate import migrate, resolve_refs
from .models import InfoOptions


def run_info(*, repo: Path, options: InfoOptions, quiet: bool = False, out: TextIO | None = None) -> int:
    out = out if out is not None else sys.stderr

    top = get_repo_toplevel(repo)
    if top is None:
        print(f"Error: not a git repository: {repo.resolve()}", file=sys.stderr)
        return 2

    try:
        refs = resolve_refs(
            top,
            include_refs=options.include_refs,
            exclude_refs=options.exclude_refs,
            everything=options.everything,
            remote=options.remote,
        )
    except (RuntimeError, ValueError, subprocess.SubprocessError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not quiet:
        defaulted = not (options.everything or options.include_refs or options.exclude_refs)
        if defaulted and options.remote and options.remote not in get_remote_urls(top):
            print(f"Note: remote {options.remote!r} is not configured; walking the full history of {refs[0]}.", file=sys.stderr)
        print(f"Scanning {top} ({' '.join(refs)})...", file=sys.stderr)

    agg = ExtensionStatsAggregator(options.above)
    try:
        visited = migrate(top, refs, agg.visit, include=options.include, exclude=options.exclude)
    except (RuntimeError, OSError, subprocess.SubprocessError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not quiet:
        print(f"Visited {visited} blobs.", file=sys.stderr)

    entries = top_entries(agg.entries, options.top)
    try:
        print_report(entries, options.above, out)
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0
