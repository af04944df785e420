"""Package manifest models"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple

from .component import ComponentRecord


@dataclass(frozen=True)
class ManifestType:
    """A ``<types>`` entry: one metadata type and its members"""
    name: str
    members: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {"name": self.name, "members": list(self.members)}


@dataclass(frozen=True)
class PackageManifest:
    """In-memory form of a package.xml document"""
    version: str
    types: Tuple[ManifestType, ...] = field(default_factory=tuple)

    @property
    def component_count(self) -> int:
        """Total number of members across all types"""
        return sum(len(t.members) for t in self.types)

    @property
    def type_names(self) -> List[str]:
        """Type names in document order"""
        return [t.name for t in self.types]

    def records(self) -> Iterator[ComponentRecord]:
        """Iterate all members as component records"""
        for manifest_type in self.types:
            for member in manifest_type.members:
                yield ComponentRecord(manifest_type.name, member)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "version": self.version,
            "types": [t.to_dict() for t in self.types],
        }
