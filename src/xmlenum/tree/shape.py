"""Tag-shape data model.

A shape tree records which element names have been seen directly inside
which others. Each ``TagNode`` owns the nodes of its child names; a node with
no children is a leaf, any other node is a branch. Nodes only ever grow, so a
tag that has been seen with children stays a branch for the rest of a run.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional

from xmlenum.shared import AggregationMetrics


class TagKind(Enum):
    """Shape of a recorded tag."""

    LEAF = auto()    # Never observed with a child element
    BRANCH = auto()  # Observed with at least one child element


@dataclass(eq=False)
class TagNode:
    """Known children of one tag position in the shape tree."""

    children: Dict[str, "TagNode"] = field(default_factory=dict)

    @property
    def kind(self) -> TagKind:
        return TagKind.BRANCH if self.children else TagKind.LEAF

    @property
    def is_leaf(self) -> bool:
        return self.kind is TagKind.LEAF

    @property
    def is_branch(self) -> bool:
        return self.kind is TagKind.BRANCH

    def child(self, name: str) -> "TagNode":
        """Return the node recorded for ``name``, creating an empty one if absent."""
        if not name:
            raise ValueError("Tag name cannot be empty")
        node = self.children.get(name)
        if node is None:
            node = TagNode()
            self.children[name] = node
        return node

    def leaves(self) -> List[str]:
        """Names of leaf children in ascending order."""
        return sorted(name for name, node in self.children.items() if node.is_leaf)

    def branches(self) -> List[str]:
        """Names of branch children in ascending order."""
        return sorted(name for name, node in self.children.items() if node.is_branch)

    def count(self) -> int:
        """Number of tag positions recorded beneath this node."""
        total = 0
        pending = [self]
        while pending:
            node = pending.pop()
            total += len(node.children)
            pending.extend(node.children.values())
        return total

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested plain dictionaries; leaves map to ``{}``."""
        result: Dict[str, Any] = {}
        pending = [(self, result)]
        while pending:
            node, out = pending.pop()
            for name, child in node.children.items():
                out[name] = {}
                pending.append((child, out[name]))
        return result

    def __len__(self) -> int:
        return len(self.children)

    def __contains__(self, name: object) -> bool:
        return name in self.children

    def __getitem__(self, name: str) -> "TagNode":
        return self.children[name]


@dataclass(eq=False)
class TagShapeTree:
    """Aggregation context shared by every document of a run.

    ``root`` holds the merged shape of all occurrences of the element named
    ``root_name``; its children are the top-level tags that get rendered.
    """

    root_name: str
    root: TagNode = field(default_factory=TagNode)
    metrics: AggregationMetrics = field(default_factory=AggregationMetrics)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate shape tree."""
        if not self.root_name:
            raise ValueError("Root element name cannot be empty")

    @property
    def is_empty(self) -> bool:
        return not self.root.children

    def to_dict(self) -> Dict[str, Any]:
        """Convert the top-level tree to nested plain dictionaries."""
        return self.root.to_dict()
