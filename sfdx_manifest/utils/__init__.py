# sfdx_manifest/utils/__init__.py
"""Utility functions for sfdx-manifest"""

from .file_utils import (
    list_files,
    list_subdirectories,
    get_relative_path,
    ensure_parent_dir,
    atomic_write,
)

__all__ = [
    # File utilities
    "list_files",
    "list_subdirectories",
    "get_relative_path",
    "ensure_parent_dir",
    "atomic_write",
]
