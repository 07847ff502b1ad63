from __future__ import annotations

import argparse
from pathlib import Path

from .config import DEFAULT_CONFIG_NAME, load_config, merged_config
from .humanize import parse_bytes
from .info_run import run_info
from .models import InfoOptions
from .paths import split_patterns


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-migrate-info",
        description="Summarize which file types take up space in git history (read-only).",
    )
    parser.add_argument("branches", nargs="*", help="Branches or refs to include (default: the current branch).")
    parser.add_argument("--repo", type=Path, default=Path("."), help="Path inside the git repository to inspect.")
    parser.add_argument("--config", type=Path, default=Path(DEFAULT_CONFIG_NAME), help="Path to a JSON config file.")
    parser.add_argument("--above", type=str, default=None, help="Only count files larger than this size (e.g. 500KB, 1MB).")
    parser.add_argument("--top", type=int, default=None, help="Number of file types to show (default: 5).")
    parser.add_argument("-I", "--include", type=str, action="append", default=[], help="Only consider paths matching these comma-separated globs.")
    parser.add_argument("-X", "--exclude", type=str, action="append", default=[], help="Skip paths matching these comma-separated globs.")
    parser.add_argument("--include-ref", type=str, action="append", default=[], help="Ref to walk (repeatable).")
    parser.add_argument("--exclude-ref", type=str, action="append", default=[], help="Ref whose history is skipped (repeatable).")
    parser.add_argument("--everything", action="store_true", help="Walk all local and remote refs.")
    parser.add_argument("--remote", type=str, default=None, help="Remote whose refs are excluded by default (default: origin).")
    parser.add_argument("--quiet", action="store_true", help="Only print the report.")
    return parser


def _options_from_args(args: argparse.Namespace, config: dict) -> InfoOptions:
    cfg = merged_config(config)

    above_fmt = args.above if args.above is not None else str(cfg.get("above") or "")
    try:
        above = parse_bytes(above_fmt)
    except ValueError as e:
        raise SystemExit(f"cannot parse --above={above_fmt}: {e}")

    if args.top is not None:
        top = int(args.top)
    else:
        try:
            top = int(cfg.get("top"))
        except (TypeError, ValueError):
            raise SystemExit(f"Invalid config value for 'top': {cfg.get('top')!r}")

    include = split_patterns(args.include) or split_patterns(cfg.get("include"))
    exclude = split_patterns(args.exclude) or split_patterns(cfg.get("exclude"))
    remote = args.remote if args.remote is not None else str(cfg.get("remote") or "")

    return InfoOptions(
        above=above,
        top=top,
        include=include,
        exclude=exclude,
        include_refs=tuple([*args.branches, *args.include_ref]),
        exclude_refs=tuple(args.exclude_ref),
        everything=bool(args.everything),
        remote=remote,
    )


def main(argv: list[str]) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)
    options = _options_from_args(args, config)
    return run_info(repo=args.repo, options=options, quiet=bool(args.quiet))
