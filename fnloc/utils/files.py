from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from fnloc.errors import DirectoryNotAccessibleError, NoRustFilesError, SourceReadError
from fnloc.parsing.treesitter import is_rust_path


IGNORED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".idea",
    ".vscode",
    "node_modules",
    "target",
    "vendor",
}


def iter_rust_files(root: str, ignored_dirs: Optional[Iterable[str]] = None) -> Iterable[str]:
    ignored = IGNORED_DIRS if ignored_dirs is None else set(ignored_dirs)
    root_path = Path(root)
    if root_path.is_file():
        if is_rust_path(str(root_path)):
            yield str(root_path)
        return
    for path in sorted(root_path.rglob("*.rs")):
        if not path.is_file():
            continue
        if any(part in ignored for part in path.relative_to(root_path).parts[:-1]):
            continue
        yield str(path)


def find_rust_files(directory: str, ignored_dirs: Optional[Iterable[str]] = None) -> List[str]:
    """Recursively collect the Rust files under ``directory`` in sorted order."""
    if not Path(directory).exists():
        raise DirectoryNotAccessibleError(directory)
    files = list(iter_rust_files(directory, ignored_dirs))
    if not files:
        raise NoRustFilesError(directory)
    return files


def read_rust_file(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, str(e)) from e
