"""Project configuration models"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..api.exceptions import ConfigError
from ..constants import DEFAULT_API_VERSION, SOURCE_SUBPATH


class LookupStatus(Enum):
    """Outcome of looking up the project configuration"""
    FOUND = "found"
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class PackageDirectory:
    """One entry of ``packageDirectories``"""
    path: str
    default: bool = False

    def source_dir(self, project_root: Path) -> Path:
        """Get the ``main/default`` directory holding type folders"""
        return Path(project_root, self.path, *SOURCE_SUBPATH)


@dataclass(frozen=True)
class SfdxProject:
    """Parsed sfdx-project.json

    Only the keys the scanner needs are modelled; everything else in the
    file is ignored.
    """
    package_directories: Tuple[PackageDirectory, ...] = ()
    source_api_version: Optional[str] = None

    @property
    def api_version(self) -> str:
        """API version for manifests, falling back to the default"""
        return self.source_api_version or DEFAULT_API_VERSION

    @classmethod
    def from_dict(cls, data: Any) -> 'SfdxProject':
        """Create SfdxProject from the decoded JSON document

        Raises:
            ConfigError: If the document does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ConfigError("sfdx-project.json must contain a JSON object")

        version = data.get("sourceApiVersion")
        if version is not None:
            if not isinstance(version, (str, int, float)) or isinstance(version, bool):
                raise ConfigError(f"Invalid sourceApiVersion: {version!r}")
            version = str(version).strip()

        raw_dirs = data.get("packageDirectories") or []
        if not isinstance(raw_dirs, list):
            raise ConfigError("packageDirectories must be a list")

        directories: List[PackageDirectory] = []
        for entry in raw_dirs:
            # Entries without a path cannot be scanned
            if not isinstance(entry, dict) or not isinstance(entry.get("path"), str):
                continue
            directories.append(PackageDirectory(
                path=entry["path"],
                default=bool(entry.get("default", False))
            ))

        return cls(
            package_directories=tuple(directories),
            source_api_version=version or None
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data: Dict[str, Any] = {
            "packageDirectories": [
                {"path": d.path, "default": d.default} for d in self.package_directories
            ]
        }
        if self.source_api_version:
            data["sourceApiVersion"] = self.source_api_version
        return data


@dataclass(frozen=True)
class ProjectLookup:
    """Result of reading sfdx-project.json

    ``project`` is set only when ``status`` is FOUND and ``error`` only
    when it is MALFORMED.
    """
    status: LookupStatus
    config_path: Path
    project: Optional[SfdxProject] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.FOUND

    @classmethod
    def not_found(cls, config_path: Path) -> 'ProjectLookup':
        return cls(status=LookupStatus.NOT_FOUND, config_path=config_path)

    @classmethod
    def malformed(cls, config_path: Path, error: str) -> 'ProjectLookup':
        return cls(status=LookupStatus.MALFORMED, config_path=config_path, error=error)
