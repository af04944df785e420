"""Organize discovered metadata into per-type trees for display"""

from typing import Dict, Iterable, Mapping

from ..constants import HIERARCHICAL_METADATA_TYPES, NAME_SEPARATOR
from ..models.tree import TreeNode


class _Branch:
    """Mutable node used while folding names into a tree"""

    __slots__ = ("name", "display_name", "selectable", "children")

    def __init__(self, name: str, display_name: str):
        self.name = name
        self.display_name = display_name
        self.selectable = False
        self.children: Dict[str, '_Branch'] = {}

    def freeze(self, comp_type: str) -> TreeNode:
        return TreeNode(
            name=self.name,
            display_name=self.display_name,
            type=comp_type,
            selectable=self.selectable,
            children=tuple(child.freeze(comp_type) for child in self.children.values())
        )


def _build_nested(comp_type: str, names: Iterable[str]) -> TreeNode:
    root = _Branch(comp_type, comp_type)

    for full_name in names:
        level = root
        path = ""
        for part in full_name.split(NAME_SEPARATOR):
            path = f"{path}{NAME_SEPARATOR}{part}" if path else part
            if part not in level.children:
                level.children[part] = _Branch(path, part)
            level = level.children[part]
        level.selectable = True

    # The type node groups components and is never a component itself
    root.selectable = False
    return root.freeze(comp_type)


def _build_flat(comp_type: str, names: Iterable[str]) -> TreeNode:
    return TreeNode(
        name=comp_type,
        display_name=comp_type,
        type=comp_type,
        selectable=False,
        children=tuple(
            TreeNode(name=name, display_name=name, type=comp_type, selectable=True)
            for name in dict.fromkeys(names)
        )
    )


def build_type_tree(comp_type: str, names: Iterable[str]) -> TreeNode:
    """
    Build the tree for one metadata type

    Names of hierarchical types (CustomObject, ApexClass, ApexTrigger) are
    split on "/" and names sharing a prefix share that prefix's node. A
    node is selectable exactly when some full name ends at it, so a
    branch can be selectable too. Other types get one leaf per name.

    Args:
        comp_type: Metadata type
        names: Component names, in display order

    Returns:
        Non-selectable root node named after the type
    """
    if comp_type in HIERARCHICAL_METADATA_TYPES:
        return _build_nested(comp_type, names)
    return _build_flat(comp_type, names)


def organize_metadata(metadata: Mapping[str, Iterable[str]]) -> Dict[str, TreeNode]:
    """
    Turn a metadata map into one tree per type

    Args:
        metadata: Metadata type to component names

    Returns:
        Metadata type to its root node, in the input's type order
    """
    return {
        comp_type: build_type_tree(comp_type, names)
        for comp_type, names in metadata.items()
    }
