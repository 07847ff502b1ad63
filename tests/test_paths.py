from __future__ import annotations

from git_migrate_info.paths import path_included, path_matches, split_patterns


def test_split_patterns() -> None:
    assert split_patterns(["*.png,*.jpg", " docs/ "]) == ("*.png", "*.jpg", "docs/")
    assert split_patterns("a,,b") == ("a", "b")
    assert split_patterns(None) == ()


def test_path_matches_basename_and_dirs() -> None:
    assert path_matches("img/logo.png", "*.png") is True
    assert path_matches("img/logo.png", "*.jpg") is False
    assert path_matches("vendor/lib.c", "vendor") is True
    assert path_matches("src/vendor/lib.c", "vendor/") is True
    assert path_matches("src/app.py", "src/*.py") is True
    assert path_matches("./src/app.py", "src/") is True
    assert path_matches("srcs/app.py", "src/") is False


def test_path_included_exclude_wins() -> None:
    assert path_included("a.png", (), ()) is True
    assert path_included("a.png", ("*.png",), ()) is True
    assert path_included("a.txt", ("*.png",), ()) is False
    assert path_included("assets/a.png", ("*.png",), ("assets/",)) is False
