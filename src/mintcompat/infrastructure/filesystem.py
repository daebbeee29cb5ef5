"""Filesystem operations for documentation sources.

Discovery honors the site's source-exclusion globs (``srcExclude`` style,
e.g. ``**/zh-CN/**``) matched against root-relative POSIX paths.
"""

from __future__ import annotations

from collections.abc import Iterable
from fnmatch import fnmatchcase
from pathlib import Path

# Directories never scanned, whatever the configured excludes say.
_SKIP_DIRS = frozenset({".git", ".vitepress", "node_modules"})


def read_document(path: Path) -> str:
    """Read a source document as UTF-8 text, line endings untouched."""
    with path.open(encoding="utf-8", newline="") as fh:
        return fh.read()


def write_document(path: Path, text: str) -> None:
    """Write *text* to *path*, creating parent directories.

    Newlines are written untranslated.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)


def is_excluded(relative: str, patterns: Iterable[str]) -> bool:
    """Whether a root-relative POSIX path matches any exclusion glob.

    A leading ``**/`` also matches at the top level, so ``**/drafts/**``
    excludes ``drafts/a.md`` as well as ``guide/drafts/a.md``.
    """
    for pattern in patterns:
        if fnmatchcase(relative, pattern):
            return True
        if pattern.startswith("**/") and fnmatchcase(relative, pattern[3:]):
            return True
    return False


def find_documents(
    root: Path,
    *,
    suffixes: Iterable[str] = (".md",),
    exclude: Iterable[str] = (),
) -> list[Path]:
    """Discover eligible documents under *root*, sorted by path.

    A single file is returned as-is when it carries an eligible suffix.
    """
    wanted = tuple(suffixes)
    if root.is_file():
        return [root] if root.name.endswith(wanted) else []

    patterns = list(exclude)
    results: list[Path] = []
    for path in root.rglob("*"):
        if not path.is_file() or not path.name.endswith(wanted):
            continue
        relative = path.relative_to(root)
        if any(part in _SKIP_DIRS for part in relative.parts):
            continue
        if is_excluded(relative.as_posix(), patterns):
            continue
        results.append(path)
    return sorted(results)
