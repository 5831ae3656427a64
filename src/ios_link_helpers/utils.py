from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional, Sequence, Union


def relative_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def run_inherited(
    command: Sequence[str], cwd: Optional[Union[str, Path]] = None
) -> None:
    """Run ``command`` attached to the caller's stdin/stdout/stderr.

    Raises ``subprocess.CalledProcessError`` on a non-zero exit and
    ``OSError`` when the executable or working directory is missing.
    """
    subprocess.run(list(command), cwd=cwd, check=True)
