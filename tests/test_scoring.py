import numpy as np
import pytest

from treeoie.extraction.argument2_extractor import Argument2Extractor
from treeoie.extraction.tree_extraction import TreeExtraction
from treeoie.scoring import ConfidenceFunction, FeatureSet, TreeExtractionFeatureSet


class _Lengths(FeatureSet):
    def featurize(self, feature_name, obj):
        return float(len(obj)) if feature_name == "len" else float(obj.count("a"))


def test_feature_names_are_sorted_and_unique():
    features = _Lengths(["len", "a_count", "len"])

    assert features.feature_names == ["a_count", "len"]
    assert features.num_features == 2
    np.testing.assert_array_equal(features.featurize_to_array("banana"), [3.0, 6.0])


def test_tree_extraction_features(build_tree):
    # Mike ist gern in Seattle
    root, _ = build_tree([
        (1, "Mike", "NE", "N", 2, "subj"),
        (2, "ist", "VAFIN", "V", 0, "root"),
        (3, "gern", "ADV", "ADV", 2, "pred"),
        (4, "in", "APPR", "PREP", 2, "pp"),
        (5, "Seattle", "NE", "N", 4, "pn"),
    ])
    extr = Argument2Extractor().extract(TreeExtraction(root_node=root, node_ids=[2]))[0]
    features = TreeExtractionFeatureSet()

    assert features.featurize("arg_length", extr) == 2.0
    assert features.featurize("rel_length", extr) == 2.0
    assert features.featurize("arg_distance", extr) == 2.0
    assert features.featurize("arg_has_preposition", extr) == 1.0
    assert features.featurize("arg_type_pp", extr) == 1.0
    assert features.featurize("arg_type_obja", extr) == 0.0

    vector = features.featurize_to_array(extr)
    assert vector.shape == (features.num_features,)
    assert vector.sum() == pytest.approx(2.0 + 2.0 + 2.0 + 1.0 + 1.0)


def test_unknown_feature():
    with pytest.raises(KeyError):
        TreeExtractionFeatureSet().featurize("nope", None)


def test_confidence_function_is_abstract():
    with pytest.raises(TypeError):
        ConfidenceFunction()
