"""Query API tying discovery, tree organization and manifest building together"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .exceptions import FileExistsError
from ..core import (
    ManifestEngine,
    MetadataScanner,
    PathResolver,
    load_selection_file,
    organize_metadata,
    parse_selection,
    select_all,
)
from ..models import ComponentRecord, DiscoveryResult, PackageManifest, TreeNode


class MetadataQuery:
    """Query interface for one SFDX project

    Every call rescans the project; nothing is cached between calls.
    """

    def __init__(self, project_root: Union[str, Path, None] = None):
        """
        Initialize query interface

        Args:
            project_root: Project root directory (located automatically
                when omitted)
        """
        self.path_resolver = PathResolver(project_root)
        self.scanner = MetadataScanner(path_resolver=self.path_resolver)

    @property
    def project_root(self) -> Path:
        return self.path_resolver.project_root

    def discover(self) -> DiscoveryResult:
        """Discover the project's metadata"""
        return self.scanner.scan()

    def tree(self,
             comp_type: Optional[str] = None,
             result: Optional[DiscoveryResult] = None) -> Dict[str, TreeNode]:
        """
        Discover metadata and organize it into per-type trees

        Args:
            comp_type: Only return the tree of this type
            result: Reuse an existing discovery result

        Returns:
            Metadata type to root node
        """
        result = result or self.discover()
        trees = organize_metadata(result.metadata)
        if comp_type:
            return {t: node for t, node in trees.items() if t == comp_type}
        return trees

    def select(self,
               specs: Iterable[str] = (),
               selection_file: Union[str, Path, None] = None,
               include_all: bool = False,
               result: Optional[DiscoveryResult] = None) -> List[ComponentRecord]:
        """
        Resolve a selection against the discovered metadata

        Args:
            specs: ``Type:Name`` strings, ``Type:*`` selects a whole type
            selection_file: YAML/JSON selection file
            include_all: Select every discovered component
            result: Reuse an existing discovery result

        Returns:
            Selected records, in selection order
        """
        result = result or self.discover()
        selected: List[ComponentRecord] = []

        if include_all:
            selected.extend(select_all(result.metadata))
        if selection_file:
            selected.extend(load_selection_file(self.path_resolver.resolve(selection_file), result.metadata))
        selected.extend(parse_selection(specs, result.metadata))

        return selected

    def manifest(self,
                 selected: Iterable[ComponentRecord],
                 api_version: Optional[str] = None,
                 result: Optional[DiscoveryResult] = None) -> PackageManifest:
        """
        Build a manifest for the selection

        Args:
            selected: Selected components
            api_version: Override the project's API version
            result: Reuse an existing discovery result

        Returns:
            PackageManifest
        """
        if api_version is None:
            result = result or self.discover()
            api_version = result.api_version
        return ManifestEngine(api_version).build(selected)

    def write_manifest(self,
                       manifest: PackageManifest,
                       output: Union[str, Path, None] = None,
                       force: bool = True) -> Path:
        """
        Write package.xml

        Args:
            manifest: Manifest to write
            output: Target file (default: package.xml in the project root)
            force: Overwrite an existing file

        Returns:
            Path written

        Raises:
            FileExistsError: If the file exists and ``force`` is False
        """
        target = self.path_resolver.resolve(output) if output else self.path_resolver.get_manifest_path()
        if target.exists() and not force:
            raise FileExistsError(str(target))

        return ManifestEngine(manifest.version).save_manifest(manifest, target)


def discover(project_root: Union[str, Path, None] = None) -> DiscoveryResult:
    """Discover the metadata of a project"""
    return MetadataQuery(project_root).discover()


def query(project_root: Union[str, Path, None] = None) -> MetadataQuery:
    """
    Get query interface

    Args:
        project_root: Project root directory

    Returns:
        MetadataQuery instance
    """
    return MetadataQuery(project_root)
