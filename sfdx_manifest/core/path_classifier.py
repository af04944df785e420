"""Map a source file path to the metadata component it belongs to"""

import posixpath
from typing import Optional, Tuple

from ..constants import (
    COMPOSITE_METADATA_TYPE,
    COMPOSITE_OBJECT_SUFFIX,
    CUSTOM_OBJECT_CHILD_TYPES,
    FOLDER_AWARE_METADATA_TYPES,
    HIDDEN_PREFIX,
    META_SUFFIXES,
    NAME_SEPARATOR,
    SINGLETON_METADATA_TYPES,
)
from ..models.component import ComponentRecord, is_valid_name


def normalize_path(path: str) -> str:
    """Convert any host path separator to forward slashes"""
    return path.replace("\\", NAME_SEPARATOR)


def strip_meta_suffix(path: str) -> str:
    """Remove a trailing ``-meta.xml`` / ``.meta.xml`` sidecar suffix"""
    for suffix in META_SUFFIXES:
        if path.endswith(suffix):
            return path[:-len(suffix)]
    return path


def classify_path(relative_path: str, folder_type: str) -> Optional[ComponentRecord]:
    """
    Classify a file inside a metadata type folder

    Args:
        relative_path: File path relative to the type folder
            (e.g. ``Account/fields/Rating__c.field-meta.xml`` under ``objects``)
        folder_type: Metadata type of the folder (e.g. ``CustomObject``)

    Returns:
        The component the file belongs to, or None for hidden files and
        paths that leave no usable name (empty, padded with whitespace or
        holding characters XML cannot carry)
    """
    path = normalize_path(relative_path)
    file_name = posixpath.basename(path)

    if not file_name or file_name.startswith(HIDDEN_PREFIX):
        return None

    comp_type = folder_type
    child = _classify_object_file(path, file_name) if folder_type == COMPOSITE_METADATA_TYPE else None

    if child is not None:
        comp_type, name = child
    else:
        name = _default_name(path, folder_type)

    if not is_valid_name(name):
        return None

    return ComponentRecord(type=comp_type, name=name)


def _default_name(path: str, folder_type: str) -> str:
    name = strip_meta_suffix(path)

    # Drop one file extension (.cls, .trigger, .workflow, ...)
    name, _ = posixpath.splitext(name)

    if folder_type not in FOLDER_AWARE_METADATA_TYPES:
        name = posixpath.basename(name)

    if folder_type in SINGLETON_METADATA_TYPES:
        name = SINGLETON_METADATA_TYPES[folder_type]

    return name


def _classify_object_file(path: str, file_name: str) -> Optional[Tuple[str, str]]:
    """Detect custom object sub-components and the object definition itself"""
    folders = path.split(NAME_SEPARATOR)[:-1]

    for folder, (suffix, child_type) in CUSTOM_OBJECT_CHILD_TYPES.items():
        if folder in folders and file_name.endswith(suffix):
            name = file_name[:-len(suffix)]
            return child_type, name

    if file_name.endswith(COMPOSITE_OBJECT_SUFFIX):
        name = file_name[:-len(COMPOSITE_OBJECT_SUFFIX)]
        return COMPOSITE_METADATA_TYPE, name

    return None
