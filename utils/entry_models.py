#!/usr/bin/env python3
"""Pydantic models for changelog entries and validator settings."""

import re
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SKIP_PREFIX = "skip"

# prefix -> formatted entry text
EntryMap = Dict[str, str]


class CreationMode(str, Enum):
    """How the changeset for a pull request is being created."""
    MANUAL = "manual"
    AUTOMATIC = "automatic"

    @classmethod
    def parse(cls, value: Optional[str]) -> "CreationMode":
        """Anything other than "manual" is the automatic (default) mode."""
        if value and value.strip().lower() == cls.MANUAL.value:
            return cls.MANUAL
        return cls.AUTOMATIC


class ParsedEntry(BaseModel):
    """A changelog line decomposed by the entry grammar."""

    marker: str = Field("", description="Leading list marker, expected to be '-'")
    prefix: str = Field(..., description="Category prefix as written")
    description: Optional[str] = Field(None, description="Raw description text")

    model_config = ConfigDict(frozen=True)


class ValidatedEntry(BaseModel):
    """A changelog line that passed validation."""

    prefix: str = Field(..., description="Lowercase category prefix")
    trimmed_description: str = Field("", description="Trimmed description, empty for skip")

    model_config = ConfigDict(frozen=True)

    @property
    def is_skip(self) -> bool:
        return self.prefix == SKIP_PREFIX


class ValidatorConfig(BaseModel):
    """Settings for one validator instance.

    Build it from the environment with ``ValidatorConfig(**Config.get_validator_config())``
    or pass explicit values in tests.
    """

    max_entry_length: int = Field(100, gt=0)
    prefixes: List[str] = Field(..., min_length=1)
    entry_pattern: str

    model_config = ConfigDict(frozen=True)

    @field_validator("prefixes")
    @classmethod
    def _normalize_prefixes(cls, value: List[str]) -> List[str]:
        prefixes = list(dict.fromkeys(p.strip().lower() for p in value if p and p.strip()))
        if SKIP_PREFIX not in prefixes:
            raise ValueError(f"prefix taxonomy must include '{SKIP_PREFIX}'")
        return prefixes

    @field_validator("entry_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            compiled = re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid entry pattern: {e}") from e
        if compiled.groups < 3:
            raise ValueError("entry pattern must capture marker, prefix and description")
        return value
