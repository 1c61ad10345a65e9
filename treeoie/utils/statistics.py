"""Statistics over batches of second-argument resolutions."""

import json
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from ..extraction.tree_extraction import ArgumentExtraction


@dataclass
class ExtractionStatistics:
    """Counts collected while resolving relation candidates."""

    relations: int = 0
    relations_with_output: int = 0
    failures: int = 0
    extractions: int = 0
    argument_types: Counter = field(default_factory=Counter)

    def record(self, extractions: List[ArgumentExtraction]) -> None:
        """Record the result of one resolution."""
        self.relations += 1
        if extractions:
            self.relations_with_output += 1
        self.extractions += len(extractions)
        self.argument_types.update(e.argument_type for e in extractions)

    def record_failure(self) -> None:
        self.relations += 1
        self.failures += 1

    @property
    def yield_rate(self) -> float:
        return self.relations_with_output / self.relations if self.relations else 0.0

    def to_dict(self) -> Dict:
        return {
            "relations": self.relations,
            "relations_with_output": self.relations_with_output,
            "failures": self.failures,
            "extractions": self.extractions,
            "yield_rate": self.yield_rate,
            "argument_types": dict(self.argument_types),
        }

    def save(self, output_path: str) -> None:
        """Save statistics to a JSON file."""
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def summary(self) -> str:
        """Return a formatted summary."""
        lines = [
            f"Relations processed: {self.relations}",
            f"Relations with output: {self.relations_with_output} ({self.yield_rate:.1%})",
            f"Failures: {self.failures}",
            f"Extractions: {self.extractions}",
        ]
        for arg_type, count in self.argument_types.most_common():
            lines.append(f"  {arg_type}: {count}")
        return "\n".join(lines)
