from __future__ import annotations

import fnmatch


def split_patterns(values: list[str] | tuple[str, ...] | str | None) -> tuple[str, ...]:
    """Flatten `["*.png,*.jpg", "docs/"]`-style arguments into single patterns."""
    if not values:
        return ()
    if isinstance(values, str):
        values = [values]
    out: list[str] = []
    for v in values:
        for part in str(v).split(","):
            part = part.strip()
            if part:
                out.append(part)
    return tuple(out)


def normalize_path(path: str) -> str:
    p = path.replace("\\", "/")
    while p.startswith("./"):
        p = p[2:]
    return p.lstrip("/")


def path_matches(path: str, pattern: str) -> bool:
    p = normalize_path(path)
    pat = normalize_path(pattern)
    if not pat:
        return False
    if pat.endswith("/"):
        return p.startswith(pat) or f"/{pat}" in f"/{p}"
    if "/" not in pat:
        base = p.rsplit("/", 1)[-1]
        if fnmatch.fnmatchcase(base, pat):
            return True
        # A bare name may also be a directory anywhere in the tree.
        return f"/{pat}/" in f"/{p}"
    if fnmatch.fnmatchcase(p, pat):
        return True
    return p.startswith(pat.rstrip("/") + "/")


def path_included(path: str, include: tuple[str, ...], exclude: tuple[str, ...]) -> bool:
    if include and not any(path_matches(path, pat) for pat in include):
        return False
    return not any(path_matches(path, pat) for pat in exclude)
