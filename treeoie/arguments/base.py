"""Base types for second-argument candidates.

Every typed dependency that can introduce a second argument (objects,
predicatives, prepositional phrases, comparatives) is wrapped in a subclass
of ``Argument2``, which decides the role the subtree can play for the
relation.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from ..config import NOUN_GROUP, RELATIVE_CLAUSE_LABEL
from ..extraction.tree_extraction import ArgumentExtraction, TreeExtraction
from ..tree.node import Node


class Role(Enum):
    """Role an argument can play for a relation."""

    NONE = "none"  # not usable, may void the whole relation
    COMPLEMENT = "complement"  # folds into the relation phrase
    OBJECT = "object"  # becomes the second argument
    BOTH = "both"  # complement or object, decided by position


class Argument2(ABC):
    """A candidate second argument of a relation.

    Parameters
    ----------
    root_node : Node
        Root of the argument subtree
    relation : TreeExtraction
        The relation the argument belongs to
    """

    name: str = ""

    def __init__(self, root_node: Node, relation: TreeExtraction):
        self._root_node = root_node
        self.relation = relation

    @property
    def root_node(self) -> Node:
        return self._root_node

    @property
    def preposition(self) -> Optional[Node]:
        """Preposition stored apart from the argument root, if any."""
        return None

    @property
    @abstractmethod
    def role(self) -> Role:
        """Compute the role of this argument.

        Returns
        -------
        Role
            The role, computed from the argument subtree only
        """
        pass

    def ids(self, include_relation: bool = False) -> List[int]:
        """Return the ids of the argument subtree in ascending order.

        Parameters
        ----------
        include_relation : bool
            Add the ids of the relation phrase to the argument ids
        """
        ids = self.root_node.subtree_ids()
        if include_relation:
            return sorted(set(ids) | set(self.relation.node_ids))
        return [i for i in ids if not self.relation.contains(i)]

    def distance_to_relation(self) -> int:
        """Return the token distance between the argument root and the closest relation node."""
        if not self.relation.node_ids:
            return 0
        return min(abs(self.root_node.id - i) for i in self.relation.node_ids)

    def has_relative_clause(self) -> bool:
        return bool(self.root_node.get_descendants_of_type(RELATIVE_CLAUSE_LABEL))

    def contains_noun(self) -> bool:
        return self.root_node.contains_pos_group(NOUN_GROUP)

    def create_tree_extractions(self) -> List[ArgumentExtraction]:
        """Create one extraction per coordinated conjunct of the argument.

        "Mike besucht Paris und Rom" yields one extraction for "Paris" and
        one for "Rom". The spans are disjoint: every conjunct keeps its own
        subtree without the coordination branch hanging below it. The
        preposition, if any, is added to every span.
        """
        extractions = []
        for node in [self.root_node] + self.root_node.conjuncts():
            excluded = node.coordination_ids()
            ids = [
                n.id for n in node.subtree()
                if n.id not in excluded and not self.relation.contains(n.id)
            ]
            if not ids:
                continue
            if self.preposition is not None:
                ids.append(self.preposition.id)
            extractions.append(ArgumentExtraction(
                relation=self.relation,
                argument_type=self.name,
                root_node=node,
                node_ids=tuple(sorted(set(ids))),
            ))
        return extractions

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.root_node.word!r}, id={self.root_node.id})"
