"""Validation of trees and relation candidates handed to the extractor."""

import logging
from typing import Dict, List

from ..errors import InvalidInputError
from ..extraction.tree_extraction import TreeExtraction
from ..tree.node import Node

logger = logging.getLogger(__name__)


def _sentence_root(node: Node) -> Node:
    while node.parent is not None:
        node = node.parent
    return node


class CandidateValidator:
    """Check the caller contract of relation candidates.

    A candidate must only reference ids of its own tree, and every node it
    touches must carry a proper dependency label.
    """

    def find_issues(self, relation: TreeExtraction) -> List[str]:
        """Collect contract violations of a relation candidate."""
        issues = []

        if not isinstance(relation.root_node, Node):
            return [f"Relation root must be a Node, got {type(relation.root_node).__name__}"]

        issues.extend(self.find_tree_issues(relation.root_node))

        known = {n.id for n in relation.root_node.subtree()}
        missing = [i for i in relation.node_ids if i not in known]
        if missing:
            issues.append(f"Relation references unknown node ids {missing}")

        sentence_ids = {n.id for n in _sentence_root(relation.root_node).subtree()}
        missing_kon = [i for i in relation.kon_node_ids if i not in sentence_ids]
        if missing_kon:
            issues.append(f"Relation references unknown conjunct ids {missing_kon}")

        return issues

    def find_tree_issues(self, root: Node) -> List[str]:
        """Check id uniqueness and label types of a (sub)tree."""
        issues = []
        seen: Dict[int, Node] = {}
        for node in root.subtree():
            if not isinstance(node.id, int):
                issues.append(f"Node id {node.id!r} is not an integer")
            elif node.id in seen:
                issues.append(f"Duplicate node id {node.id}")
            seen[node.id] = node

            if not isinstance(node.label_to_parent, str):
                issues.append(f"Node {node.id} has a non-string label {node.label_to_parent!r}")
            elif node.parent is not None and not node.label_to_parent:
                issues.append(f"Node {node.id} ('{node.word}') has no label to its parent")
        return issues

    def validate(self, relation: TreeExtraction) -> None:
        """Raise ``InvalidInputError`` if the candidate violates the contract."""
        issues = self.find_issues(relation)
        if issues:
            logger.error(f"Invalid relation candidate: {'; '.join(issues)}")
            raise InvalidInputError("; ".join(issues))


def validate_tree(root: Node) -> None:
    """Raise ``InvalidInputError`` if the tree has duplicate ids or malformed labels."""
    issues = CandidateValidator().find_tree_issues(root)
    if issues:
        raise InvalidInputError("; ".join(issues))
