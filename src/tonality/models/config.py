"""
Spelling configuration.

Holds the context a Speller needs: the key signature, which side of the
line of fifths to prefer for chromatic notes, and whether accidentals
are rendered with Unicode symbols.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from tonality.constants import Prefer
from tonality.core.key import Key

logger = logging.getLogger(__name__)


class SpellingConfig(BaseModel):
    """
    Context for turning pitch classes into notated spellings.

    Examples:
        SpellingConfig(key="Bb")
        SpellingConfig(key="F#", prefer=Prefer.SHARPS)
    """

    key: str = Field("C", description="Major key tonic (e.g., 'C', 'Bb', 'F#')")
    prefer: Prefer = Field(
        Prefer.NEAREST,
        description="Spelling preference for notes outside the key",
    )
    unicode_symbols: bool = Field(
        False,
        description="Render accidentals with Unicode music symbols",
    )

    model_config = {"frozen": True}

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Validate the key has a major key signature."""
        Key.parse(v)
        return v

    def get_key(self) -> Key:
        """Get parsed Key object."""
        return Key.parse(self.key)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpellingConfig:
        """Build a config from a mapping, e.g. one section of a larger file."""
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, path: Path) -> SpellingConfig:
        """
        Load a config from a YAML file.

        An empty file yields the defaults.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        config = cls.from_dict(data)
        logger.debug(f"Loaded spelling config from {path}: key={config.key}, prefer={config.prefer.value}")
        return config
