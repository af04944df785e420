"""Manifest engine for building, parsing and saving package.xml"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..api.exceptions import ManifestParseError, ValidationError
from ..constants import (
    DEFAULT_API_VERSION,
    METADATA_NAMESPACE,
    XML_DECLARATION,
    XML_INDENT,
)
from ..models.component import ComponentRecord, is_valid_name
from ..models.manifest import ManifestType, PackageManifest
from ..utils.file_utils import atomic_write

logger = logging.getLogger(__name__)

SelectedItem = Union[ComponentRecord, Dict[str, Any]]


def _as_record(item: SelectedItem) -> ComponentRecord:
    if isinstance(item, ComponentRecord):
        return item
    if isinstance(item, dict):
        return ComponentRecord.from_dict(item)
    raise ValidationError(f"Expected a ComponentRecord, got {type(item).__name__}")


def build_manifest(selected: Iterable[SelectedItem], api_version: str) -> PackageManifest:
    """
    Group selected components into a manifest

    Types keep the order in which they are first selected; members are
    de-duplicated and sorted.

    Args:
        selected: Selected components (records or ``{"type", "name"}`` dicts)
        api_version: Metadata API version, e.g. ``"60.0"``

    Returns:
        PackageManifest

    Raises:
        ValidationError: On an empty or padded version, or a malformed item
    """
    if not is_valid_name(api_version):
        raise ValidationError(f"Invalid API version: {api_version!r}")

    grouped: Dict[str, Dict[str, None]] = {}
    for item in selected:
        record = _as_record(item)
        grouped.setdefault(record.type, {})[record.name] = None

    return PackageManifest(
        version=api_version,
        types=tuple(
            ManifestType(name=type_name, members=tuple(sorted(members)))
            for type_name, members in grouped.items()
        )
    )


def render_manifest(manifest: PackageManifest) -> str:
    """
    Serialize a manifest as package.xml text

    Args:
        manifest: Manifest to render

    Returns:
        XML document with declaration and 4-space indentation
    """
    root = ET.Element("Package", xmlns=METADATA_NAMESPACE)

    for manifest_type in manifest.types:
        types_elem = ET.SubElement(root, "types")
        ET.SubElement(types_elem, "name").text = manifest_type.name
        for member in manifest_type.members:
            ET.SubElement(types_elem, "members").text = member

    ET.SubElement(root, "version").text = manifest.version

    ET.indent(root, space=XML_INDENT)
    return f"{XML_DECLARATION}\n{ET.tostring(root, encoding='unicode')}\n"


def build_package_xml(selected: Iterable[SelectedItem], api_version: str) -> str:
    """
    Build package.xml text for the selected components

    Args:
        selected: Selected components
        api_version: Metadata API version

    Returns:
        XML document text
    """
    return render_manifest(build_manifest(selected, api_version))


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _text(elem: ET.Element) -> str:
    return (elem.text or "").strip()


def parse_package_xml(text: Union[str, bytes]) -> PackageManifest:
    """
    Parse package.xml text

    Args:
        text: XML document

    Returns:
        PackageManifest with types and members in document order

    Raises:
        ManifestParseError: If the document is not a valid manifest
    """
    if isinstance(text, str):
        text = text.encode("utf-8")

    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ManifestParseError(f"Invalid manifest XML: {e}")

    if _local_name(root.tag) != "Package":
        raise ManifestParseError(f"Unexpected root element: {_local_name(root.tag)}")

    types: List[ManifestType] = []
    version: Optional[str] = None

    for child in root:
        tag = _local_name(child.tag)
        if tag == "types":
            members = []
            type_name = None
            for entry in child:
                entry_tag = _local_name(entry.tag)
                if entry_tag == "members":
                    members.append(_text(entry))
                elif entry_tag == "name":
                    type_name = _text(entry)
            if not type_name:
                raise ManifestParseError("<types> element without <name>")
            types.append(ManifestType(name=type_name, members=tuple(members)))
        elif tag == "version":
            version = _text(child)

    if not version:
        raise ManifestParseError("Manifest has no <version>")

    return PackageManifest(version=version, types=tuple(types))


def write_package_xml(manifest_text: str, manifest_path: Union[str, Path]) -> Path:
    """Write rendered package.xml text, replacing any existing file"""
    manifest_path = Path(manifest_path)
    atomic_write(manifest_path, manifest_text)
    return manifest_path


class ManifestEngine:
    """Build manifests for one API version and persist them"""

    def __init__(self, api_version: str = DEFAULT_API_VERSION):
        """Initialize manifest engine

        Args:
            api_version: Metadata API version written into manifests
        """
        self.api_version = api_version

    def build(self, selected: Iterable[SelectedItem]) -> PackageManifest:
        """Group selected components into a manifest"""
        return build_manifest(selected, self.api_version)

    def render(self, selected: Iterable[SelectedItem]) -> str:
        """Build package.xml text for the selected components"""
        return build_package_xml(selected, self.api_version)

    def save_manifest(self, manifest: PackageManifest, manifest_path: Path) -> Path:
        """Save manifest to file

        Args:
            manifest: Manifest to save
            manifest_path: Target file

        Returns:
            Path to saved manifest file
        """
        manifest_path = write_package_xml(render_manifest(manifest), manifest_path)
        logger.info(
            "Wrote %s with %d component(s)", manifest_path, manifest.component_count
        )
        return manifest_path

    def load_manifest(self, manifest_path: Path) -> Optional[PackageManifest]:
        """Load manifest from file

        Args:
            manifest_path: Manifest file

        Returns:
            PackageManifest or None if the file does not exist

        Raises:
            ManifestParseError: If the file is not a valid manifest
        """
        manifest_path = Path(manifest_path)
        if not manifest_path.is_file():
            return None

        return parse_package_xml(manifest_path.read_bytes())
