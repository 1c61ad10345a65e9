"""Convert spaCy German parses into dependency trees.

spaCy's German pipelines use the TIGER label set. The labels relevant for
argument resolution are mapped onto their ParZu counterparts so that the
same extractor runs on both parsers.
"""

from typing import Dict, Iterable, Optional

from spacy.tokens import Span, Token

from ..config import (
    COMPARATIVE_LABEL,
    COMPARATIVE_WORD,
    CONJUNCT_LABEL,
    PP_LABEL,
    PREPOSITION_NOUN_LABEL,
)
from .node import Node

# TIGER attaches the comparative particle below the compared noun
COMPARATIVE_PARTICLE_LABEL = "cm"

TIGER_TO_PARZU: Dict[str, str] = {
    "oa": "obja",
    "oa2": "obja2",
    "da": "objd",
    "og": "objg",
    "op": "objp",
    "pd": "pred",
    "cc": "kom",
    "rc": "rel",
    "cd": "kon",
    "cj": "cj",
    "sb": "subj",
    "ng": "adv",
    "mo": "adv",
}

UPOS_TO_GROUP: Dict[str, str] = {
    "NOUN": "N",
    "PROPN": "N",
    "PRON": "PRO",
    "VERB": "V",
    "AUX": "V",
    "ADV": "ADV",
    "ADJ": "ADJ",
    "ADP": "PREP",
    "DET": "ART",
    "CCONJ": "KON",
    "SCONJ": "KOUS",
    "NUM": "CARD",
    "PART": "PTKVZ",
    "PUNCT": "$",
}


def map_label(token: Token) -> str:
    """Return the ParZu label for a spaCy token's TIGER label."""
    dep = token.dep_
    head = token.head

    # Prepositional phrases: the adposition modifies the verb ...
    if token.pos_ == "ADP" and dep in ("mo", "mnr", "op") and head.i != token.i:
        return "objp" if dep == "op" else PP_LABEL
    # ... and governs its noun
    if dep == "nk" and head.i != token.i and head.pos_ == "ADP" and token.pos_ in ("NOUN", "PROPN", "PRON"):
        return PREPOSITION_NOUN_LABEL

    return TIGER_TO_PARZU.get(dep, dep)


def _raise_comparative_particles(nodes: Iterable[Node]) -> None:
    """Re-hang "als X" comparatives the way ParZu attaches them.

    TIGER labels the compared noun ``cc`` and puts "als" below it as ``cm``;
    ParZu labels "als" with ``kom`` and puts the noun below it as ``cj``.
    """
    for node in list(nodes):
        if node.label_to_parent != COMPARATIVE_LABEL or node.parent is None:
            continue
        particle = next(
            (c for c in node.children
             if c.label_to_parent == COMPARATIVE_PARTICLE_LABEL and c.word.lower() == COMPARATIVE_WORD),
            None,
        )
        if particle is None:
            continue

        parent = node.parent
        parent.children.remove(node)
        node.children.remove(particle)
        particle.label_to_parent = COMPARATIVE_LABEL
        node.label_to_parent = CONJUNCT_LABEL
        parent.add_child(particle)
        particle.add_child(node)


def map_pos_group(token: Token) -> str:
    return UPOS_TO_GROUP.get(token.pos_, token.pos_)


def from_spacy(sent: Span) -> Node:
    """Build a tree from a spaCy sentence span.

    Token ids are renumbered from 1 relative to the start of the sentence.

    Parameters
    ----------
    sent : Span
        A sentence of a parsed spaCy Doc (``doc.sents``)

    Returns
    -------
    Node
        The root of the sentence tree
    """
    offset = sent.start
    nodes: Dict[int, Node] = {}
    root: Optional[Node] = None

    for token in sent:
        nodes[token.i] = Node(
            id=token.i - offset + 1,
            word=token.text,
            pos=token.tag_,
            pos_group=map_pos_group(token),
            label_to_parent=map_label(token),
        )

    for token in sent:
        node = nodes[token.i]
        if token.head.i == token.i or token.head.i not in nodes:
            node.label_to_parent = ""
            root = node
        else:
            nodes[token.head.i].add_child(node)

    _raise_comparative_particles(nodes.values())
    return root
