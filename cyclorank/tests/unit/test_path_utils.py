from __future__ import annotations

from pathlib import Path

import pytest

from cyclorank.core import constants as cs
from cyclorank.infrastructure.language_spec import get_language_spec
from cyclorank.utils.path_utils import is_test_path, iter_source_files

GO_SPEC = get_language_spec(cs.SupportedLanguage.GO)


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    for relative in (
        "b.go",
        "a.go",
        "a_test.go",
        "notes.txt",
        "sub/c.go",
        "vendor/dep/d.go",
    ):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("package x\n")
    return tmp_path


def _names(paths, root: Path) -> list[str]:
    return [p.relative_to(root).as_posix() for p in paths]


def test_directory_scan_is_flat_and_sorted(tree: Path) -> None:
    found = iter_source_files([tree], GO_SPEC)

    assert _names(found, tree) == ["a.go", "a_test.go", "b.go"]


def test_recursive_scan_skips_excluded_directories(tree: Path) -> None:
    found = iter_source_files(
        [tree], GO_SPEC, recursive=True, exclude_dirs=frozenset({"vendor"})
    )

    assert _names(found, tree) == ["a.go", "a_test.go", "b.go", "sub/c.go"]


def test_skip_tests_only_applies_to_directory_scans(tree: Path) -> None:
    found = iter_source_files(
        [tree, tree / "a_test.go"], GO_SPEC, skip_tests=True
    )

    assert _names(found, tree) == ["a.go", "b.go", "a_test.go"]


def test_files_are_yielded_as_given_even_when_missing(tmp_path: Path) -> None:
    missing = tmp_path / "missing.go"
    text_file = tmp_path / "readme.txt"
    text_file.write_text("hi")

    assert list(iter_source_files([missing, text_file], GO_SPEC)) == [
        missing,
        text_file,
    ]


def test_is_test_path() -> None:
    assert is_test_path("pkg/server_test.go", GO_SPEC)
    assert not is_test_path("pkg/testing.go", GO_SPEC)
