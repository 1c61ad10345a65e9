"""Interface to confidence scoring of finished extractions.

Scoring itself (training and applying a classifier) happens outside this
package. Consumers implement ``ConfidenceFunction``; ``FeatureSet`` turns an
extraction into the feature vector such a function consumes.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, Iterable, List, TypeVar

import numpy as np

from .arguments import ARGUMENT_TYPES
from .extraction.tree_extraction import ArgumentExtraction

T = TypeVar("T")


class ConfidenceFunctionError(Exception):
    """Raised when a confidence function cannot score an extraction."""


class ConfidenceFunction(ABC):
    """Assigns a confidence score to an extraction."""

    @abstractmethod
    def get_conf(self, extraction: ArgumentExtraction) -> float:
        """Return the confidence of ``extraction``.

        Raises
        ------
        ConfidenceFunctionError
            If the extraction cannot be scored
        """
        pass


class FeatureSet(ABC, Generic[T]):
    """A named set of numeric features over objects of type ``T``.

    Parameters
    ----------
    feature_names : Iterable[str]
        Names of the features; stored sorted and de-duplicated so that
        vectors have a stable column order
    """

    def __init__(self, feature_names: Iterable[str]):
        self._feature_names = tuple(sorted(set(feature_names)))

    @abstractmethod
    def featurize(self, feature_name: str, obj: T) -> float:
        pass

    def featurize_to_array(self, obj: T) -> np.ndarray:
        """Return all features of ``obj`` in name order."""
        return np.array([self.featurize(name, obj) for name in self._feature_names], dtype=float)

    @property
    def num_features(self) -> int:
        return len(self._feature_names)

    @property
    def feature_names(self) -> List[str]:
        return list(self._feature_names)


def _has_preposition(extr: ArgumentExtraction) -> float:
    return float(any(i not in {n.id for n in extr.root_node.subtree()} for i in extr.node_ids))


def _distance(extr: ArgumentExtraction) -> float:
    if not extr.relation.node_ids:
        return 0.0
    return float(min(abs(extr.root_node.id - i) for i in extr.relation.node_ids))


class TreeExtractionFeatureSet(FeatureSet[ArgumentExtraction]):
    """Structural features of argument extractions.

    Features: argument and relation length in tokens, token distance of the
    argument root to the relation, whether a preposition was attached to the
    argument, and one indicator per argument type.
    """

    def __init__(self):
        self._features: Dict[str, Callable[[ArgumentExtraction], float]] = {
            "arg_length": lambda e: float(len(e.node_ids)),
            "rel_length": lambda e: float(len(e.relation.node_ids)),
            "arg_distance": _distance,
            "arg_has_preposition": _has_preposition,
        }
        for cls in ARGUMENT_TYPES.values():
            self._features[f"arg_type_{cls.name.lower()}"] = (
                lambda e, name=cls.name: float(e.argument_type == name)
            )
        super().__init__(self._features)

    def featurize(self, feature_name: str, obj: ArgumentExtraction) -> float:
        if feature_name not in self._features:
            raise KeyError(f"Unknown feature: {feature_name}")
        return self._features[feature_name](obj)
