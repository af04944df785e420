"""Path resolution module for sfdx-manifest"""

import os
from pathlib import Path
from typing import List, Optional, Union

from ..api.exceptions import ProjectNotFoundError
from ..constants import (
    DEFAULT_MANIFEST_FILE,
    ENV_PROJECT_ROOT,
    PROJECT_CONFIG_FILE,
    PROJECT_MARKERS,
)
from ..models.project import SfdxProject


class PathResolver:
    """Resolves paths within an SFDX project"""

    def __init__(self, project_root: Union[str, Path, None] = None):
        """Initialize path resolver

        Args:
            project_root: Root directory of the project. When omitted the
                ``SFDX_MANIFEST_PROJECT_ROOT`` environment variable is used,
                then the nearest ancestor of the working directory holding
                sfdx-project.json, then the working directory itself.
        """
        if project_root is None:
            project_root = os.environ.get(ENV_PROJECT_ROOT)
        if project_root is None:
            try:
                project_root = self.find_project_root()
            except ProjectNotFoundError:
                project_root = Path.cwd()

        self.project_root = Path(project_root).resolve()

    @staticmethod
    def find_project_root(start_path: Optional[Path] = None) -> Path:
        """Find the nearest directory containing a project marker

        Args:
            start_path: Starting directory for search (default: cwd)

        Returns:
            Project root path

        Raises:
            ProjectNotFoundError: If no ancestor holds sfdx-project.json
        """
        current = Path(start_path or Path.cwd()).resolve()

        for candidate in [current, *current.parents]:
            if any((candidate / marker).exists() for marker in PROJECT_MARKERS):
                return candidate

        raise ProjectNotFoundError()

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to project root

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Resolved absolute path
        """
        path = Path(path)

        if path.is_absolute():
            return path

        return (self.project_root / path).resolve()

    def get_config_path(self) -> Path:
        """Get path of sfdx-project.json"""
        return self.project_root / PROJECT_CONFIG_FILE

    def get_manifest_path(self) -> Path:
        """Get default path of the generated package.xml"""
        return self.project_root / DEFAULT_MANIFEST_FILE

    def get_source_dirs(self, project: SfdxProject) -> List[Path]:
        """Get the ``main/default`` directory of every package directory

        Args:
            project: Parsed project configuration

        Returns:
            Source directories in declared order, whether or not they exist
        """
        return [
            directory.source_dir(self.project_root)
            for directory in project.package_directories
        ]

    def make_relative(self, path: Union[str, Path]) -> Path:
        """Make a path relative to project root

        Args:
            path: Path to make relative

        Returns:
            Relative path, or the path itself when it is outside the project
        """
        path = Path(path).resolve()

        try:
            return path.relative_to(self.project_root)
        except ValueError:
            return path
