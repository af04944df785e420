"""Discover metadata components in an SFDX project"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Set, Union

from .path_classifier import classify_path
from .path_resolver import PathResolver
from .project_loader import load_project
from ..constants import BUNDLE_METADATA_TYPES, METADATA_TYPE_MAP
from ..models.component import MetadataMap, is_valid_name
from ..models.project import LookupStatus, ProjectLookup
from ..models.result import DiscoveryResult
from ..utils.file_utils import get_relative_path, list_files, list_subdirectories

logger = logging.getLogger(__name__)


def scan_type_folder(type_dir: Path, metadata_type: str) -> Dict[str, Set[str]]:
    """
    Collect the components stored in one metadata type folder

    Args:
        type_dir: Folder such as ``force-app/main/default/classes``
        metadata_type: Metadata type of the folder

    Returns:
        Component names grouped by type. Custom object folders may yield
        several types (CustomObject, CustomField, ValidationRule, ...).
    """
    if metadata_type in BUNDLE_METADATA_TYPES:
        # Each bundle directory is one component
        bundles = {
            bundle.name for bundle in list_subdirectories(type_dir)
            if is_valid_name(bundle.name)
        }
        return {metadata_type: bundles} if bundles else {}

    groups: Dict[str, Set[str]] = {}
    for file_path in list_files(type_dir):
        record = classify_path(get_relative_path(file_path, type_dir), metadata_type)
        if record is None:
            continue
        groups.setdefault(record.type, set()).add(record.name)

    return groups


def scan_source_roots(source_dirs: Iterable[Union[str, Path]],
                      type_map: Optional[Mapping[str, str]] = None) -> MetadataMap:
    """
    Scan source directories and merge everything found

    Args:
        source_dirs: ``<packageDirectory>/main/default`` directories;
            missing ones are skipped
        type_map: Folder name to metadata type table

    Returns:
        Merged metadata map
    """
    type_map = METADATA_TYPE_MAP if type_map is None else type_map
    groups: Dict[str, Set[str]] = {}

    for source_dir in source_dirs:
        source_dir = Path(source_dir)
        if not source_dir.is_dir():
            logger.debug("Source directory not found, skipping: %s", source_dir)
            continue

        for type_dir in list_subdirectories(source_dir, include_hidden=True):
            metadata_type = type_map.get(type_dir.name)
            if metadata_type is None:
                logger.debug("Ignoring unknown metadata folder: %s", type_dir)
                continue

            for comp_type, names in scan_type_folder(type_dir, metadata_type).items():
                groups.setdefault(comp_type, set()).update(names)

    return MetadataMap(groups)


class MetadataScanner:
    """Discover the metadata of an SFDX project"""

    def __init__(self,
                 project_root: Union[str, Path, None] = None,
                 type_map: Optional[Mapping[str, str]] = None,
                 path_resolver: Optional[PathResolver] = None):
        """Initialize metadata scanner

        Args:
            project_root: Project root directory (located automatically
                when omitted)
            type_map: Folder name to metadata type table
            path_resolver: Optional PathResolver instance
        """
        self.path_resolver = path_resolver or PathResolver(project_root)
        self.type_map = METADATA_TYPE_MAP if type_map is None else type_map

    @property
    def project_root(self) -> Path:
        return self.path_resolver.project_root

    def load_project(self) -> ProjectLookup:
        """Look up sfdx-project.json in the project root"""
        return load_project(self.path_resolver.get_config_path())

    def scan(self) -> DiscoveryResult:
        """Discover all metadata components

        Problems are recorded on the result instead of raised: a missing
        configuration is a warning, an unreadable one or a failing scan
        is an error. Either way the metadata is empty and the API version
        is the default.

        Returns:
            DiscoveryResult
        """
        lookup = self.load_project()
        result = DiscoveryResult(project_status=lookup.status)

        if lookup.status == LookupStatus.NOT_FOUND:
            message = f"{lookup.config_path.name} not found. Could not find metadata."
            logger.warning(message)
            result.add_warning(message)
            return result

        if lookup.status == LookupStatus.MALFORMED:
            message = f"Error reading project metadata: {lookup.error}"
            logger.error(message)
            result.add_error(message)
            return result

        source_dirs = self.path_resolver.get_source_dirs(lookup.project)

        try:
            metadata = scan_source_roots(source_dirs, self.type_map)
        except OSError as e:
            message = f"Error reading project metadata: {e}"
            logger.error(message)
            result.add_error(message)
            return result

        result.metadata = metadata
        result.api_version = lookup.project.api_version

        logger.info(
            "Discovered %d component(s) of %d type(s) in %s",
            metadata.component_count, len(metadata), self.project_root
        )
        return result


def discover_metadata(project_root: Union[str, Path, None] = None,
                      type_map: Optional[Mapping[str, str]] = None) -> DiscoveryResult:
    """
    Discover the metadata of an SFDX project

    Args:
        project_root: Project root directory
        type_map: Folder name to metadata type table

    Returns:
        DiscoveryResult
    """
    return MetadataScanner(project_root, type_map=type_map).scan()
