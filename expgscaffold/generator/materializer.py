import os
from enum import Enum
from pathlib import Path
from rich.markup import escape
from .console import console


class Outcome(str, Enum):
    CREATED_DIRECTORY = "created_directory"
    CREATED_FILE = "created_file"
    SKIPPED_EXISTS = "skipped_exists"


def is_directory_path(path: str) -> bool:
    """A trailing separator is the only thing that marks a directory request."""
    path = str(path)
    return path.endswith("/") or path.endswith(os.sep)


def resolve_path(path: str, cwd: str | Path | None = None) -> Path:
    # abspath/normpath rather than Path.resolve(): symlinks are left alone
    base = Path(cwd) if cwd is not None else Path.cwd()
    return Path(os.path.normpath(os.path.join(str(base), str(path))))


def materialize(path: str, content: str = "", cwd: str | Path | None = None) -> Outcome:
    """Create the directory or file named by ``path`` unless something is already there.

    Errors from the filesystem are not caught; ancestors created before a
    failure are left in place.
    """
    full_path = resolve_path(path, cwd)

    if full_path.exists():
        console.print(f"File or folder already exists at {escape(str(full_path))}")
        return Outcome.SKIPPED_EXISTS

    if is_directory_path(path):
        full_path.mkdir(parents=True, exist_ok=True)
        return Outcome.CREATED_DIRECTORY

    if not full_path.parent.is_dir():
        full_path.parent.mkdir(parents=True, exist_ok=True)
    full_path.write_text(content, encoding="utf-8", newline="")
    return Outcome.CREATED_FILE
