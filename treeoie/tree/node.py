"""Dependency tree nodes.

A sentence is represented by its root ``Node``. Each node carries the word
form, the fine part-of-speech tag (STTS), a coarse part-of-speech group and
the typed dependency label connecting it to its parent.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Set

from ..config import CONJUNCT_LABEL, COORDINATING_CONJUNCTION, COORDINATION_LABEL


@dataclass(eq=False)
class Node:
    """A node of a labeled dependency tree.

    Attributes
    ----------
    id : int
        Token index, unique within the sentence
    word : str
        Surface form
    pos : str
        Fine part-of-speech tag (e.g. "VAFIN", "NE", "PRF")
    pos_group : str
        Coarse part-of-speech group (e.g. "N", "V", "ADV")
    label_to_parent : str
        Dependency label of the edge to the parent ("" for the root)
    children : List[Node]
        Children ordered by id
    parent : Optional[Node]
        Parent node, None for the root
    """

    id: int
    word: str
    pos: str = ""
    pos_group: str = ""
    label_to_parent: str = ""
    children: List["Node"] = field(default_factory=list)
    parent: Optional["Node"] = field(default=None, repr=False)

    def add_child(self, child: "Node") -> "Node":
        """Attach a child, keeping children ordered by id."""
        child.parent = self
        self.children.append(child)
        self.children.sort(key=lambda n: n.id)
        return child

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.subtree())

    def subtree(self) -> List["Node"]:
        """Return all nodes of this subtree in pre-order."""
        nodes = []
        stack = [self]
        while stack:
            node = stack.pop()
            nodes.append(node)
            stack.extend(reversed(node.children))
        return nodes

    def subtree_ids(self) -> List[int]:
        return sorted(n.id for n in self.subtree())

    def find(self, ids: Iterable[int]) -> List["Node"]:
        """Return the nodes of this subtree whose id is in ``ids``, ordered by id."""
        wanted: Set[int] = set(ids)
        return sorted((n for n in self.subtree() if n.id in wanted), key=lambda n: n.id)

    def get_children_of_type(self, *labels: str) -> List["Node"]:
        return [c for c in self.children if c.label_to_parent in labels]

    def get_descendants_of_type(self, *labels: str) -> List["Node"]:
        """Return all descendants (excluding this node) attached by one of ``labels``."""
        return [n for n in self.subtree()[1:] if n.label_to_parent in labels]

    def has_child_of_type(self, *labels: str) -> bool:
        return any(c.label_to_parent in labels for c in self.children)

    def children_with_relation_mediator(self, label: str, target_relation: str) -> List["Node"]:
        """Return children attached by ``label`` if this node hangs off its parent by ``target_relation``.

        In a prepositional phrase the preposition is attached to the verb by
        "pp" and mediates the noun, which it governs by "pn".
        """
        if self.label_to_parent != target_relation:
            return []
        return self.get_children_of_type(label)

    def contains_pos_group(self, *groups: str) -> bool:
        return any(n.pos_group in groups for n in self.subtree())

    def conjuncts(self) -> List["Node"]:
        """Return the nodes coordinated with this one, in order.

        Coordination chains through "kon" edges; if the "kon" target is a
        coordinating conjunction ("und", "oder") the conjunct is its "cj" child.
        """
        result = []
        current = self
        while True:
            kon = current.get_children_of_type(COORDINATION_LABEL)
            if not kon:
                break
            nxt = kon[0]
            if nxt.pos == COORDINATING_CONJUNCTION:
                cj = nxt.get_children_of_type(CONJUNCT_LABEL)
                if not cj:
                    break
                nxt = cj[0]
            result.append(nxt)
            current = nxt
        return result

    def coordination_ids(self) -> Set[int]:
        """Return the ids of the coordination branch hanging below this node."""
        ids: Set[int] = set()
        for kon in self.get_children_of_type(COORDINATION_LABEL):
            ids.update(n.id for n in kon.subtree())
        return ids

    def text(self) -> str:
        return " ".join(n.word for n in sorted(self.subtree(), key=lambda n: n.id))

    def is_root(self) -> bool:
        return self.parent is None
