# sfdx_manifest/utils/file_utils.py
"""File operation utilities"""

import os
import tempfile
from pathlib import Path
from typing import List, Union

from ..constants import HIDDEN_PREFIX


def list_files(directory: Union[str, Path]) -> List[Path]:
    """
    Recursively list every regular file under a directory

    Nothing is filtered out here, hidden files included. A directory that
    does not exist is a normal condition and yields an empty list.

    Args:
        directory: Root directory

    Returns:
        List of file paths, in no particular order
    """
    directory = Path(directory)
    if not directory.is_dir():
        return []

    return [path for path in directory.rglob('*') if path.is_file()]


def list_subdirectories(directory: Union[str, Path],
                        include_hidden: bool = False) -> List[Path]:
    """
    List the immediate subdirectories of a directory

    Args:
        directory: Parent directory
        include_hidden: Include directories whose name starts with a dot

    Returns:
        Sorted list of directory paths, empty if the directory is missing
    """
    directory = Path(directory)
    if not directory.is_dir():
        return []

    return sorted(
        path for path in directory.iterdir()
        if path.is_dir() and (include_hidden or not path.name.startswith(HIDDEN_PREFIX))
    )


def get_relative_path(file_path: Path, directory: Path) -> str:
    """
    Get a file path relative to a directory, always with forward slashes

    Args:
        file_path: File path under ``directory``
        directory: Base directory

    Returns:
        Relative path string
    """
    return file_path.relative_to(directory).as_posix()


def ensure_parent_dir(file_path: Path) -> Path:
    """
    Ensure parent directory exists

    Args:
        file_path: File path

    Returns:
        Parent directory path
    """
    parent = file_path.parent
    parent.mkdir(parents=True, exist_ok=True)
    return parent


def atomic_write(file_path: Path, content: str) -> None:
    """
    Write a UTF-8 text file atomically

    Args:
        file_path: Target file path
        content: Content to write
    """
    ensure_parent_dir(file_path)

    # Write to temporary file first
    temp_fd, temp_path = tempfile.mkstemp(dir=file_path.parent)

    try:
        with os.fdopen(temp_fd, 'w', encoding='utf-8', newline='\n') as f:
            f.write(content)

        # Atomic rename
        os.replace(temp_path, file_path)

    except Exception:
        # Clean up temp file on error
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise
