"""Base class for extractors."""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, TypeVar

from ..errors import ExtractorError, InvalidInputError

S = TypeVar("S")
T = TypeVar("T")


class Extractor(ABC, Generic[S, T]):
    """Turn a source object into zero or more extractions."""

    @abstractmethod
    def extract_candidates(self, source: S) -> Iterable[T]:
        """Produce the extractions for one source.

        Parameters
        ----------
        source : S
            The object to extract from

        Returns
        -------
        Iterable[T]
            Extractions, possibly empty
        """
        pass

    def extract(self, source: S) -> List[T]:
        """Run the extractor on ``source``.

        Caller contract violations propagate as ``InvalidInputError``; any
        other failure is wrapped in ``ExtractorError``.
        """
        try:
            return list(self.extract_candidates(source))
        except InvalidInputError:
            raise
        except Exception as e:
            raise ExtractorError(f"{type(self).__name__} failed: {type(e).__name__}: {e}") from e
