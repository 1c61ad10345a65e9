from types import SimpleNamespace

from treeoie.extraction.argument2_extractor import Argument2Extractor
from treeoie.extraction.tree_extraction import TreeExtraction
from treeoie.tree.spacy_adapter import from_spacy, map_label


class _Sent(list):
    """Minimal stand-in for a spaCy sentence span."""

    def __init__(self, tokens, start=0):
        super().__init__(tokens)
        self.start = start


def _tokens(rows, offset=0):
    # rows: (text, tag, pos, dep, head_index_within_sentence)
    tokens = [
        SimpleNamespace(i=offset + k, text=text, tag_=tag, pos_=pos, dep_=dep)
        for k, (text, tag, pos, dep, _) in enumerate(rows)
    ]
    for token, (_, _, _, _, head) in zip(tokens, rows):
        token.head = tokens[head]
    return tokens


ROWS = [
    ("Mike", "NE", "PROPN", "sb", 1),
    ("wohnt", "VVFIN", "VERB", "ROOT", 1),
    ("in", "APPR", "ADP", "mo", 1),
    ("Seattle", "NE", "PROPN", "nk", 2),
]


def test_from_spacy_builds_parzu_style_tree():
    sent = _Sent(_tokens(ROWS))

    root = from_spacy(sent)

    assert root.word == "wohnt"
    assert root.id == 2
    assert root.label_to_parent == ""
    pp = root.get_children_of_type("pp")
    assert [n.word for n in pp] == ["in"]
    assert pp[0].children_with_relation_mediator("pn", "pp")[0].word == "Seattle"
    assert root.get_children_of_type("subj")[0].pos_group == "N"


def test_ids_are_relative_to_the_sentence():
    sent = _Sent(_tokens(ROWS, offset=10), start=10)

    root = from_spacy(sent)

    assert sorted(n.id for n in root.subtree()) == [1, 2, 3, 4]


def test_label_mapping():
    tokens = _tokens([
        ("kauft", "VVFIN", "VERB", "ROOT", 0),
        ("Auto", "NN", "NOUN", "oa", 0),
        ("auf", "APPR", "ADP", "op", 0),
        ("Bus", "NN", "NOUN", "nk", 2),
        ("dem", "ART", "DET", "nk", 1),
    ])

    assert [map_label(t) for t in tokens[1:]] == ["obja", "objp", "pn", "nk"]


def test_comparative_particle_heads_the_compared_noun():
    # Er arbeitet als Lehrer
    sent = _Sent(_tokens([
        ("Er", "PPER", "PRON", "sb", 1),
        ("arbeitet", "VVFIN", "VERB", "ROOT", 1),
        ("als", "KOKOM", "ADP", "cm", 3),
        ("Lehrer", "NN", "NOUN", "cc", 1),
    ]))

    root = from_spacy(sent)

    kom = root.get_children_of_type("kom")
    assert [n.word for n in kom] == ["als"]
    assert [(n.word, n.label_to_parent) for n in kom[0].children] == [("Lehrer", "cj")]

    extrs = Argument2Extractor().extract(TreeExtraction(root_node=root, node_ids=[2]))
    assert [(e.argument_type, e.text()) for e in extrs] == [("KOM", "als Lehrer")]
