"""Core functionality for sfdx-manifest"""

from .path_classifier import classify_path, normalize_path, strip_meta_suffix
from .path_resolver import PathResolver
from .project_loader import load_project
from .metadata_scanner import MetadataScanner, discover_metadata, scan_source_roots, scan_type_folder
from .hierarchy import build_type_tree, organize_metadata
from .manifest_engine import (
    ManifestEngine,
    build_manifest,
    build_package_xml,
    parse_package_xml,
    render_manifest,
    write_package_xml,
)
from .selection import (
    expand_selection,
    load_selection_file,
    parse_component_spec,
    parse_selection,
    select_all,
)

__all__ = [
    "classify_path",
    "normalize_path",
    "strip_meta_suffix",
    "PathResolver",
    "load_project",
    "MetadataScanner",
    "discover_metadata",
    "scan_source_roots",
    "scan_type_folder",
    "build_type_tree",
    "organize_metadata",
    "ManifestEngine",
    "build_manifest",
    "build_package_xml",
    "parse_package_xml",
    "render_manifest",
    "write_package_xml",
    "expand_selection",
    "load_selection_file",
    "parse_component_spec",
    "parse_selection",
    "select_all",
]
