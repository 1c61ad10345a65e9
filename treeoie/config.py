"""Configuration for second-argument extraction over dependency trees."""

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import InvalidInputError


# Base directories
BASE_DIR = Path(__file__).parent.parent
DEFAULT_CONFIG_FILE = BASE_DIR / "config" / "extractor.yaml"

# Typed dependency labels (ParZu label set) that can introduce a second argument
OBJECT_LABELS = ("obja", "obja2", "objd", "objg", "objp")
PREDICATIVE_LABEL = "pred"
PP_LABEL = "pp"
COMPARATIVE_LABEL = "kom"
ARGUMENT_LABELS = OBJECT_LABELS + (PREDICATIVE_LABEL, PP_LABEL, COMPARATIVE_LABEL)

# Structural labels
RELATIVE_CLAUSE_LABEL = "rel"
PREPOSITION_NOUN_LABEL = "pn"
COORDINATION_LABEL = "kon"
CONJUNCT_LABEL = "cj"

# STTS part-of-speech tags
FULL_VERB_PREFIX = "VV"
FINITE_AUXILIARY = "VAFIN"
REFLEXIVE_PRONOUN = "PRF"
PRONOMINAL_ADVERB = "PROAV"
COORDINATING_CONJUNCTION = "KON"

# Coarse part-of-speech groups
NOUN_GROUP = "N"
PRONOUN_GROUP = "PRO"

# The only comparative particle that introduces an argument
COMPARATIVE_WORD = "als"


@dataclass
class ExtractorConfig:
    """Settings for the second-argument extractor.

    Attributes
    ----------
    child_arguments : bool
        Also search coordinated verbs and the bare relation root for arguments
    progressive_extraction : bool
        Emit a best-guess object when more than two arguments were found
    show_progress : bool
        Show a progress bar when running the batch pipeline
    log_level : str
        Level used by ``configure_logging``
    """

    child_arguments: bool = False
    progressive_extraction: bool = False
    show_progress: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "ExtractorConfig":
        """Create a configuration from a dictionary, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise InvalidInputError(f"Unknown extractor settings: {', '.join(unknown)}")

        for name in ("child_arguments", "progressive_extraction", "show_progress"):
            if name in config and not isinstance(config[name], bool):
                raise InvalidInputError(f"Setting '{name}' must be a boolean, got {config[name]!r}")

        return cls(**config)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "ExtractorConfig":
        """Load a configuration from a YAML file.

        Parameters
        ----------
        yaml_path : str or Path
            Path to the YAML file. Settings may live at the top level or
            under an ``extractor`` section.

        Returns
        -------
        ExtractorConfig
            The loaded configuration
        """
        with open(yaml_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise InvalidInputError(f"Expected a mapping in {yaml_path}")

        section = config.get("extractor", config)
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise InvalidInputError(f"Expected a mapping for the extractor section in {yaml_path}")

        return cls.from_dict(section)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(yaml_path: Optional[Union[str, Path]] = None) -> ExtractorConfig:
    """Load the given config file, the default file if it exists, or defaults."""
    if yaml_path is not None:
        return ExtractorConfig.from_yaml(yaml_path)
    if DEFAULT_CONFIG_FILE.exists():
        return ExtractorConfig.from_yaml(DEFAULT_CONFIG_FILE)
    return ExtractorConfig()


def configure_logging(level: Union[str, int] = "WARNING") -> None:
    """Configure root logging for scripts using the package."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
