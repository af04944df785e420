"""Component data models"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Set, Tuple

from ..api.exceptions import ValidationError
from ..constants import SELECTION_SEPARATOR

# Anything outside the XML 1.0 Char production
_XML_ILLEGAL_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def is_valid_name(value) -> bool:
    """Check that a type, name or version can be written to package.xml as is

    The value must be a non-empty string without leading or trailing
    whitespace and without characters XML 1.0 cannot represent.
    """
    return (
        isinstance(value, str)
        and bool(value)
        and value == value.strip()
        and _XML_ILLEGAL_CHARS.search(value) is None
    )


@dataclass(frozen=True)
class ComponentRecord:
    """A single typed metadata component, e.g. ``ApexClass:AccountService``"""

    type: str
    name: str

    def __post_init__(self):
        if not is_valid_name(self.type):
            raise ValidationError(f"Invalid component type: {self.type!r}")
        if not is_valid_name(self.name):
            raise ValidationError(f"Invalid component name: {self.name!r}")
        # Names always use forward slashes
        if "\\" in self.name:
            object.__setattr__(self, "name", self.name.replace("\\", "/"))

    def __str__(self) -> str:
        return f"{self.type}{SELECTION_SEPARATOR}{self.name}"

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary"""
        return {"type": self.type, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> 'ComponentRecord':
        """Create from dictionary"""
        try:
            return cls(type=data["type"], name=data["name"])
        except (KeyError, TypeError):
            raise ValidationError(f"Expected a mapping with 'type' and 'name', got {data!r}")


class MetadataMap(Mapping):
    """Immutable mapping of metadata type to its sorted component names

    Types iterate in lexicographic order and every name tuple is sorted
    and duplicate-free, so two maps built from the same components always
    compare and serialize identically.
    """

    def __init__(self, groups: Mapping = None):
        groups = groups or {}
        self._data: Dict[str, Tuple[str, ...]] = {
            comp_type: tuple(sorted(set(names)))
            for comp_type, names in sorted(groups.items())
            if names
        }

    @classmethod
    def from_records(cls, records: Iterable[ComponentRecord]) -> 'MetadataMap':
        """Group records by type"""
        groups: Dict[str, Set[str]] = {}
        for record in records:
            groups.setdefault(record.type, set()).add(record.name)
        return cls(groups)

    def __getitem__(self, comp_type: str) -> Tuple[str, ...]:
        return self._data[comp_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other) -> bool:
        if isinstance(other, MetadataMap):
            return self._data == other._data
        return super().__eq__(other)

    def __hash__(self):
        return hash(tuple(self._data.items()))

    def __repr__(self) -> str:
        return f"MetadataMap({self._data!r})"

    @property
    def component_count(self) -> int:
        """Total number of components across all types"""
        return sum(len(names) for names in self._data.values())

    def names(self, comp_type: str) -> Tuple[str, ...]:
        """Get names for a type, empty if the type was not discovered"""
        return self._data.get(comp_type, ())

    def records(self) -> Iterator[ComponentRecord]:
        """Iterate every component as a record, ordered by type then name"""
        for comp_type, names in self._data.items():
            for name in names:
                yield ComponentRecord(comp_type, name)

    def merge(self, other: Mapping) -> 'MetadataMap':
        """Return a new map holding the union of both maps"""
        groups: Dict[str, Set[str]] = {t: set(n) for t, n in self._data.items()}
        for comp_type, names in other.items():
            groups.setdefault(comp_type, set()).update(names)
        return MetadataMap(groups)

    def to_dict(self) -> Dict[str, List[str]]:
        """Convert to dictionary"""
        return {comp_type: list(names) for comp_type, names in self._data.items()}
