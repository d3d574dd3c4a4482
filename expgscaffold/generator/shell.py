import subprocess
from pathlib import Path
from typing import Sequence
from rich.markup import escape
from .console import console


def sh(cmd: Sequence[str], cwd: Path | None = None) -> subprocess.CompletedProcess:
    """Run ``cmd`` with inherited stdio. The exit status is left to the caller."""
    console.print(f"[bold]→[/] {escape(' '.join(cmd))}" + (f"  [dim]in {escape(str(cwd))}[/]" if cwd else ""))
    return subprocess.run(list(cmd), check=False, cwd=str(cwd) if cwd else None)
