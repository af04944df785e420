"""Operation result models"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .component import MetadataMap
from .project import LookupStatus
from ..constants import DEFAULT_API_VERSION


@dataclass
class DiscoveryResult:
    """Metadata discovery result

    A result is always well formed: on any problem ``metadata`` is empty
    and ``api_version`` is the default, with the reason in ``warnings``
    or ``errors``.
    """
    metadata: MetadataMap = field(default_factory=MetadataMap)
    api_version: str = DEFAULT_API_VERSION
    project_status: LookupStatus = LookupStatus.NOT_FOUND
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if discovery completed without errors"""
        return not self.errors

    @property
    def is_empty(self) -> bool:
        """Check if nothing was discovered"""
        return len(self.metadata) == 0

    def add_warning(self, message: str) -> None:
        """Add warning message"""
        self.warnings.append(message)

    def add_error(self, message: str) -> None:
        """Add error message"""
        self.errors.append(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "apiVersion": self.api_version,
            "projectStatus": self.project_status.value,
            "metadata": self.metadata.to_dict(),
            "warnings": list(self.warnings),
            "errors": list(self.errors),
        }
