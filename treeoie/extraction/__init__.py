"""Relation candidates, extractions and the extractor base class.

The second-argument extractor lives in ``treeoie.extraction.argument2_extractor``;
it is not imported here because the argument classes depend on this package.
"""

from .extractor import Extractor
from .tree_extraction import ArgumentExtraction, TreeExtraction

__all__ = [
    "Extractor",
    "ArgumentExtraction",
    "TreeExtraction",
]
