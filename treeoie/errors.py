"""Exceptions raised by the extraction package."""


class ExtractorError(Exception):
    """Raised when an extractor fails while processing a source."""


class InvalidInputError(ExtractorError, ValueError):
    """Raised when a tree, relation candidate or configuration violates the caller contract.

    Examples are a relation candidate that references node ids missing from
    its tree, a non-root node without a dependency label, or a CoNLL sentence
    whose heads do not form a single tree.
    """
