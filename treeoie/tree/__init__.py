"""Dependency tree representation and readers."""

from .conll import load_conll, read_conll, sentence_to_tree
from .node import Node
from .spacy_adapter import from_spacy

__all__ = [
    "Node",
    "load_conll",
    "read_conll",
    "sentence_to_tree",
    "from_spacy",
]
