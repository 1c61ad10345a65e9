from treeoie.extraction.argument2_extractor import Argument2Extractor
from treeoie.extraction.tree_extraction import TreeExtraction


def test_ids_are_deduplicated_in_order(mayor_sentence):
    root, _ = mayor_sentence

    rel = TreeExtraction(root_node=root, node_ids=[4, 2, 4])

    assert rel.node_ids == [4, 2]
    assert len(rel) == 2
    assert [n.word for n in rel.nodes()] == ["ist", "Bürgermeister"]


def test_prepend_ids_only_grows(mayor_sentence):
    root, _ = mayor_sentence
    rel = TreeExtraction(root_node=root, node_ids=[2])

    rel.prepend_ids([3, 4, 2])

    assert rel.node_ids == [3, 4, 2]
    assert rel.contains(3)
    assert rel.text() == "ist der Bürgermeister"


def test_argument_extraction_to_dict(mayor_sentence):
    root, _ = mayor_sentence
    rel = TreeExtraction(root_node=root, node_ids=[2, 3, 4, 5])

    extr = Argument2Extractor().extract(rel)[0]

    assert extr.to_dict() == {
        "relation": {"ids": [2, 3, 4, 5], "text": "ist der Bürgermeister von"},
        "argument": {"type": "PRED", "ids": [6], "text": "Seattle"},
    }
