"""The typed dependency 'prepositional phrase'."""

from typing import Optional

from ..config import PP_LABEL, PREPOSITION_NOUN_LABEL
from ..extraction.tree_extraction import TreeExtraction
from ..tree.node import Node
from .base import Argument2, Role


class Pp(Argument2):
    """Prepositional phrase attached to the relation ("in Seattle").

    The noun of the phrase hangs off the preposition by a "pn" edge. If it
    exists, the noun becomes the argument root, because coordinated nouns
    attach to it. The preposition is kept apart and added to whichever side
    finally claims the argument.
    """

    name = "PP"

    def __init__(self, root_node: Node, relation: TreeExtraction):
        preposition = None
        pn = root_node.children_with_relation_mediator(PREPOSITION_NOUN_LABEL, PP_LABEL)
        if len(pn) == 1:
            preposition = root_node
            root_node = pn[0]

        super().__init__(root_node, relation)
        self._preposition = preposition

    @property
    def preposition(self) -> Optional[Node]:
        return self._preposition

    @property
    def role(self) -> Role:
        # Without a preposition the node is a bare adverbial
        if self._preposition is None or self.has_relative_clause() or not self.contains_noun():
            return Role.NONE

        return Role.COMPLEMENT
