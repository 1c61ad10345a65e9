"""Relation candidates and finished argument extractions over a dependency tree."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple

from ..tree.node import Node


def _render(root: Node, ids: Iterable[int]) -> str:
    return " ".join(n.word for n in root.find(ids))


@dataclass(eq=False)
class TreeExtraction:
    """A relation phrase: a set of node ids anchored at a root node.

    The id set is the only mutable part. It grows while argument resolution
    folds complements into the relation and never shrinks.

    Attributes
    ----------
    root_node : Node
        Root of the relation (usually the main verb), fixed
    node_ids : List[int]
        Ordered ids of the relation phrase
    kon_node_ids : List[int]
        Ids of verbs coordinated with the root, fixed
    """

    root_node: Node
    node_ids: List[int] = field(default_factory=list)
    kon_node_ids: List[int] = field(default_factory=list)

    def __post_init__(self):
        self.node_ids = list(dict.fromkeys(self.node_ids))
        self.kon_node_ids = list(self.kon_node_ids)

    def nodes(self) -> List[Node]:
        return self.root_node.find(self.node_ids)

    def contains(self, node_id: int) -> bool:
        return node_id in self.node_ids

    def prepend_ids(self, ids: Iterable[int]) -> None:
        """Put ``ids`` in front of the current ids, dropping duplicates."""
        self.node_ids = list(dict.fromkeys(list(ids) + self.node_ids))

    def text(self) -> str:
        """Return the words of the relation in sentence order."""
        return _render(self.root_node, self.node_ids)

    def __len__(self) -> int:
        return len(self.node_ids)


@dataclass(frozen=True)
class ArgumentExtraction:
    """A second argument emitted for a relation.

    ``relation`` is a reference, not a copy: complements folded later in
    the same resolution are visible through it.
    """

    relation: TreeExtraction
    argument_type: str
    root_node: Node
    node_ids: Tuple[int, ...]

    def text(self) -> str:
        return _render(self._sentence_root(), self.node_ids)

    def relation_text(self) -> str:
        return self.relation.text()

    def _sentence_root(self) -> Node:
        node = self.root_node
        while node.parent is not None:
            node = node.parent
        return node

    def to_dict(self) -> Dict[str, Any]:
        return {
            "relation": {
                "ids": list(self.relation.node_ids),
                "text": self.relation_text(),
            },
            "argument": {
                "type": self.argument_type,
                "ids": list(self.node_ids),
                "text": self.text(),
            },
        }
