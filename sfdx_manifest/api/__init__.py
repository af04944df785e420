# sfdx_manifest/api/__init__.py
"""API layer for sfdx-manifest"""

from .exceptions import (
    SfdxManifestError,
    ConfigError,
    ValidationError,
    SelectionError,
    ManifestParseError,
    PathError,
    ProjectNotFoundError,
    FileExistsError,
)
from .query import MetadataQuery, discover, query

__all__ = [
    # Main classes
    "MetadataQuery",

    # Convenience functions
    "discover",
    "query",

    # Exceptions
    "SfdxManifestError",
    "ConfigError",
    "ValidationError",
    "SelectionError",
    "ManifestParseError",
    "PathError",
    "ProjectNotFoundError",
    "FileExistsError",
]
