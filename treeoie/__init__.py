"""Open relation extraction over German dependency trees.

This package resolves the second argument of relation phrases found in
dependency-parsed sentences (ParZu or spaCy/TIGER label sets).

The pipeline:
1. Read parsed sentences into ``Node`` trees (CoNLL or spaCy)
2. Hand a relation candidate (``TreeExtraction``) to ``Argument2Extractor``
3. Arguments attached to the relation's verbs are classified by role
4. Complements are folded into the relation, the object is extracted
"""

__version__ = "1.0.0"

from .config import ExtractorConfig, configure_logging, load_config
from .errors import ExtractorError, InvalidInputError
from .tree import Node, from_spacy, load_conll, read_conll
from .extraction import ArgumentExtraction, Extractor, TreeExtraction
from .arguments import Argument2, Role, create_argument
from .extraction.argument2_extractor import Argument2Extractor
from .pipeline import ExtractionPipeline, PipelineResult

__all__ = [
    # Configuration
    "ExtractorConfig",
    "configure_logging",
    "load_config",
    # Errors
    "ExtractorError",
    "InvalidInputError",
    # Trees
    "Node",
    "from_spacy",
    "load_conll",
    "read_conll",
    # Extraction
    "ArgumentExtraction",
    "Extractor",
    "TreeExtraction",
    "Argument2",
    "Role",
    "create_argument",
    "Argument2Extractor",
    # Batch processing
    "ExtractionPipeline",
    "PipelineResult",
]
