from collections.abc import Iterable, Iterator
from pathlib import Path

from loguru import logger

from ..core import logs as ls
from ..data_models.models import LanguageSpec


def is_test_path(path: Path | str, spec: LanguageSpec) -> bool:
    stem = Path(path).stem
    return bool(spec.test_file_suffix) and stem.endswith(spec.test_file_suffix)


def should_skip_path(
    path: Path,
    root: Path,
    exclude_dirs: frozenset[str] = frozenset(),
) -> bool:
    rel_path = path.relative_to(root)
    dir_parts = rel_path.parent.parts if path.is_file() else rel_path.parts
    return not exclude_dirs.isdisjoint(dir_parts)


def _scan_directory(
    directory: Path,
    spec: LanguageSpec,
    recursive: bool,
    exclude_dirs: frozenset[str],
) -> Iterator[Path]:
    logger.debug(ls.SCANNING_DIRECTORY.format(path=directory, recursive=recursive))
    candidates = directory.rglob("*") if recursive else directory.glob("*")
    for candidate in sorted(candidates):
        if candidate.suffix not in spec.file_extensions or not candidate.is_file():
            continue
        if recursive and should_skip_path(candidate, directory, exclude_dirs):
            logger.debug(ls.SKIPPING_EXCLUDED.format(path=candidate))
            continue
        yield candidate


def iter_source_files(
    paths: Iterable[Path],
    spec: LanguageSpec,
    recursive: bool = False,
    skip_tests: bool = False,
    exclude_dirs: frozenset[str] = frozenset(),
) -> Iterator[Path]:
    """Expands the paths given on the command line into source files.

    Paths are visited in the given order. A directory contributes its source
    files in sorted order, either only the ones directly inside it or, with
    `recursive`, the whole tree minus `exclude_dirs`. Anything that is not a
    directory is yielded as-is, even if it does not exist, so that reading it
    reports the error.

    Args:
        paths (Iterable[Path]): Files and directories, in command-line order.
        spec (LanguageSpec): Supplies file extensions and the test-file suffix.
        recursive (bool): Descend into sub-directories.
        skip_tests (bool): Leave out test files found in directories.
        exclude_dirs (frozenset[str]): Directory names skipped when recursing.

    Yields:
        Path: Each source file to analyze.
    """
    for path in paths:
        if not path.is_dir():
            yield path
            continue
        for source_file in _scan_directory(path, spec, recursive, exclude_dirs):
            if skip_tests and is_test_path(source_file, spec):
                logger.debug(ls.SKIPPING_TEST_FILE.format(path=source_file))
                continue
            yield source_file
