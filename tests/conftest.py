import sys
from pathlib import Path

import pytest

# Ensure the repository root is importable as a package during tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from treeoie.tree.node import Node  # noqa: E402


def _build_tree(rows):
    """Build a tree from (id, word, pos, pos_group, head, label) rows; head 0 marks the root."""
    nodes = {i: Node(id=i, word=w, pos=p, pos_group=g, label_to_parent=l) for i, w, p, g, _, l in rows}
    root = None
    for i, _, _, _, head, _ in rows:
        if head == 0:
            nodes[i].label_to_parent = ""
            root = nodes[i]
        else:
            nodes[head].add_child(nodes[i])
    return root, nodes


@pytest.fixture
def build_tree():
    return _build_tree


@pytest.fixture
def mayor_sentence():
    # Mike ist der Bürgermeister von Seattle
    return _build_tree([
        (1, "Mike", "NE", "N", 2, "subj"),
        (2, "ist", "VAFIN", "V", 0, "root"),
        (3, "der", "ART", "ART", 4, "det"),
        (4, "Bürgermeister", "NN", "N", 2, "pred"),
        (5, "von", "APPR", "PREP", 4, "pp"),
        (6, "Seattle", "NE", "N", 5, "pn"),
    ])


@pytest.fixture
def give_sentence():
    # Er gibt dem Mann das Buch in Berlin
    return _build_tree([
        (1, "Er", "PPER", "PRO", 2, "subj"),
        (2, "gibt", "VVFIN", "V", 0, "root"),
        (3, "dem", "ART", "ART", 4, "det"),
        (4, "Mann", "NN", "N", 2, "objd"),
        (5, "das", "ART", "ART", 6, "det"),
        (6, "Buch", "NN", "N", 2, "obja"),
        (7, "in", "APPR", "PREP", 2, "pp"),
        (8, "Berlin", "NE", "N", 7, "pn"),
    ])


@pytest.fixture
def coordination_sentence():
    # Er wohnt in Berlin und Paris
    return _build_tree([
        (1, "Er", "PPER", "PRO", 2, "subj"),
        (2, "wohnt", "VVFIN", "V", 0, "root"),
        (3, "in", "APPR", "PREP", 2, "pp"),
        (4, "Berlin", "NE", "N", 3, "pn"),
        (5, "und", "KON", "KON", 4, "kon"),
        (6, "Paris", "NE", "N", 5, "cj"),
    ])
