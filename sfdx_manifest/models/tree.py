"""Hierarchical tree models for presenting discovered metadata"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple


@dataclass(frozen=True)
class TreeNode:
    """One node of a metadata type tree

    Attributes:
        name: Full component name up to this node (cumulative path)
        display_name: Label for this level only
        type: Metadata type the node belongs to
        selectable: True when the node is a component that can be deployed
        children: Child nodes, empty for leaves
    """
    name: str
    display_name: str
    type: str
    selectable: bool
    children: Tuple['TreeNode', ...] = ()

    @property
    def is_leaf(self) -> bool:
        """Check if node has no children"""
        return not self.children

    def walk(self) -> Iterator['TreeNode']:
        """Iterate this node and its descendants depth-first"""
        yield self
        for child in self.children:
            yield from child.walk()

    def selectable_names(self) -> Iterator[str]:
        """Iterate the component names reachable from this node"""
        for node in self.walk():
            if node.selectable:
                yield node.name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "name": self.name,
            "displayName": self.display_name,
            "type": self.type,
            "selectable": self.selectable,
            "children": [child.to_dict() for child in self.children],
        }
