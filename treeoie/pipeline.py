"""Batch resolution of relation candidates."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from tqdm.auto import tqdm

from .config import ExtractorConfig
from .errors import InvalidInputError
from .extraction.argument2_extractor import Argument2Extractor
from .extraction.tree_extraction import ArgumentExtraction, TreeExtraction
from .utils.statistics import ExtractionStatistics

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Result of a pipeline run.

    Attributes
    ----------
    extractions : List[List[ArgumentExtraction]]
        Extractions per input relation, in input order
    failures : List[Tuple[int, str]]
        (input index, error message) of rejected relation candidates
    statistics : ExtractionStatistics
        Counts over the run
    """

    extractions: List[List[ArgumentExtraction]] = field(default_factory=list)
    failures: List[Tuple[int, str]] = field(default_factory=list)
    statistics: ExtractionStatistics = field(default_factory=ExtractionStatistics)

    def all_extractions(self) -> List[ArgumentExtraction]:
        return [e for extrs in self.extractions for e in extrs]


class ExtractionPipeline:
    """Resolve the second arguments of many relation candidates.

    Every candidate is resolved independently. Invalid candidates are
    logged and recorded as failures without stopping the run.

    Parameters
    ----------
    config : Optional[ExtractorConfig]
        Extractor settings (defaults if None)
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        self.config = config or ExtractorConfig()
        self.extractor = Argument2Extractor.from_config(self.config)

    def run(self, relations: Iterable[TreeExtraction]) -> PipelineResult:
        result = PipelineResult()

        for idx, rel in enumerate(tqdm(relations, desc="Resolving arguments", disable=not self.config.show_progress)):
            try:
                extrs = self.extractor.extract(rel)
            except InvalidInputError as e:
                logger.warning(f"Skipping relation candidate {idx}: {e}")
                result.failures.append((idx, str(e)))
                result.extractions.append([])
                result.statistics.record_failure()
                continue

            result.extractions.append(extrs)
            result.statistics.record(extrs)

        logger.info(
            f"Resolved {result.statistics.relations} relation candidates: "
            f"{result.statistics.extractions} extractions, {len(result.failures)} failures"
        )
        return result
