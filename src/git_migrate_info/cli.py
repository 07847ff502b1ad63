from __future__ import annotations

import sys

from . import __version__, info_cli


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] == "--version":
        print(f"git-migrate-info {__version__}")
        return 0
    return info_cli.main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
