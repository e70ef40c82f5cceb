"""Recursive discovery of mock definition files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union


def find_files(root: Union[str, Path], extension: str = ".json") -> List[Path]:
    """
    Return every file under ``root`` whose name ends with ``extension``.

    The result is sorted so repeated walks over the same tree agree.

    Raises:
        FileNotFoundError: If root doesn't exist
        NotADirectoryError: If root is not a directory
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Mocks directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Mocks path is not a directory: {root}")

    return sorted(
        path
        for path in root.rglob("*")
        if path.name.endswith(extension) and path.is_file()
    )
