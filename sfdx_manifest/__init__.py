"""sfdx-manifest - Discover Salesforce DX source metadata and build package.xml.

This tool walks the package directories of an SFDX project, classifies each
source file into a typed metadata component and renders a selection of those
components into a package.xml manifest for the Salesforce CLI.
"""

from .__version__ import __version__, __version_info__

# Exceptions
from .api.exceptions import (
    SfdxManifestError,
    ConfigError,
    ValidationError,
    SelectionError,
    ManifestParseError,
    PathError,
    ProjectNotFoundError,
    FileExistsError,
)

# Core API
from .api.query import MetadataQuery, discover, query
from .core import (
    classify_path,
    discover_metadata,
    organize_metadata,
    build_manifest,
    build_package_xml,
    parse_package_xml,
    parse_selection,
)

# Data models
from .models import (
    ComponentRecord,
    MetadataMap,
    TreeNode,
    PackageManifest,
    ManifestType,
    DiscoveryResult,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",

    # Main classes
    "MetadataQuery",

    # Core API functions
    "discover",
    "query",
    "classify_path",
    "discover_metadata",
    "organize_metadata",
    "build_manifest",
    "build_package_xml",
    "parse_package_xml",
    "parse_selection",

    # Data models
    "ComponentRecord",
    "MetadataMap",
    "TreeNode",
    "PackageManifest",
    "ManifestType",
    "DiscoveryResult",

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
