# sfdx_manifest/models/__init__.py
"""Data models for sfdx-manifest"""

from .component import ComponentRecord, MetadataMap
from .tree import TreeNode
from .manifest import PackageManifest, ManifestType
from .project import LookupStatus, PackageDirectory, SfdxProject, ProjectLookup
from .result import DiscoveryResult

__all__ = [
    # Component models
    "ComponentRecord",
    "MetadataMap",

    # Tree models
    "TreeNode",

    # Manifest models
    "PackageManifest",
    "ManifestType",

    # Project models
    "LookupStatus",
    "PackageDirectory",
    "SfdxProject",
    "ProjectLookup",

    # Result models
    "DiscoveryResult",
]
