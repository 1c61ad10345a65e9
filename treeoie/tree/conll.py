"""Read dependency trees from CoNLL-U / CoNLL-X files.

ParZu writes CoNLL-X with the coarse tag in the fourth column and the STTS
tag in the fifth; CoNLL-U puts UPOS and XPOS in the same positions, so both
formats map onto ``Node`` identically:

    FORM -> word, UPOS/CPOSTAG -> pos_group, XPOS/POSTAG -> pos, DEPREL -> label_to_parent
"""

import logging
from pathlib import Path
from typing import Dict, List, Union

import conllu
from conllu.models import Token, TokenList

from ..errors import InvalidInputError
from .node import Node

logger = logging.getLogger(__name__)

VIRTUAL_ROOT_ID = 0
VIRTUAL_ROOT_WORD = "<ROOT>"


def _token_to_node(token: Token) -> Node:
    return Node(
        id=int(token["id"]),
        word=token["form"] or "",
        pos=token["xpos"] or "",
        pos_group=token["upos"] or "",
        label_to_parent=token["deprel"] or "",
    )


def sentence_to_tree(sent: TokenList) -> Node:
    """Build a tree from one parsed sentence and return its root.

    ParZu attaches punctuation to the artificial head 0, so a sentence can
    have several tokens with head 0. In that case a virtual root with id 0
    is created and all of them become its children, keeping their labels.
    A single head-0 token becomes the root itself and loses its label.

    Raises
    ------
    InvalidInputError
        If the sentence is empty, a head references an unknown token, or
        the heads contain a cycle.
    """
    nodes: Dict[int, Node] = {}
    heads: Dict[int, int] = {}

    for token in sent:
        # Skip multi-word token ranges and empty nodes
        if not isinstance(token["id"], int):
            continue
        node = _token_to_node(token)
        if node.id in nodes:
            raise InvalidInputError(f"Duplicate token id {node.id} in sentence")
        nodes[node.id] = node
        head = token["head"]
        if head is None:
            raise InvalidInputError(f"Token {node.id} ('{node.word}') has no head")
        heads[node.id] = int(head)

    if not nodes:
        raise InvalidInputError("Cannot build a tree from an empty sentence")

    roots = [i for i, h in heads.items() if h == VIRTUAL_ROOT_ID]
    if not roots:
        raise InvalidInputError("Sentence has no root token (cyclic heads)")

    for node_id, head in heads.items():
        if head == VIRTUAL_ROOT_ID:
            continue
        if head not in nodes:
            raise InvalidInputError(f"Token {node_id} points to unknown head {head}")
        nodes[head].add_child(nodes[node_id])

    if len(roots) == 1:
        root = nodes[roots[0]]
        root.label_to_parent = ""
    else:
        root = Node(id=VIRTUAL_ROOT_ID, word=VIRTUAL_ROOT_WORD)
        for node_id in roots:
            root.add_child(nodes[node_id])

    reachable = {n.id for n in root.subtree()}
    missing = sorted(set(nodes) - reachable)
    if missing:
        raise InvalidInputError(f"Tokens {missing} are not connected to the root (cyclic heads)")

    return root


def read_conll(text: str) -> List[Node]:
    """Parse CoNLL text into a list of sentence trees."""
    return [sentence_to_tree(sent) for sent in conllu.parse(text)]


def load_conll(filepath: Union[str, Path]) -> List[Node]:
    """Load and parse a CoNLL file.

    Parameters
    ----------
    filepath : str or Path
        Path to the CoNLL-U or CoNLL-X file

    Returns
    -------
    List[Node]
        One root node per sentence
    """
    with open(filepath, "r", encoding="utf-8") as f:
        trees = read_conll(f.read())

    logger.info(f"Loaded {len(trees)} sentences from {filepath}")
    return trees
