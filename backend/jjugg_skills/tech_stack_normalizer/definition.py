"""
Tech Stack Normalizer - Data Definitions

Pydantic models for parsing raw LLM output and for the limits applied
while canonicalizing technology names.
"""

from enum import Enum
from typing import Any, List

from pydantic import BaseModel, Field


class ParseSource(str, Enum):
    """
    Where the candidate list came from.

    - STRICT: the whole response was a JSON array
    - EXTRACTED: a bracketed array was found inside surrounding prose
    - EMPTY: nothing usable, treated as an empty list
    """
    STRICT = "strict"
    EXTRACTED = "extracted"
    EMPTY = "empty"


class ParsedCandidates(BaseModel):
    """
    Result of parsing the provider text.

    Always returned, never raised: an unusable response is an EMPTY
    result with no items.
    """

    items: List[Any] = Field(
        default_factory=list,
        description="Raw values of the parsed JSON array, in response order."
    )

    source: ParseSource = Field(
        default=ParseSource.EMPTY,
        description="Parsing stage that produced the items."
    )

    @property
    def is_empty(self) -> bool:
        return self.source == ParseSource.EMPTY or not self.items

    @classmethod
    def empty(cls) -> "ParsedCandidates":
        return cls(items=[], source=ParseSource.EMPTY)


class NormalizerLimits(BaseModel):
    """Bounds applied to the canonicalized stack."""

    max_items: int = Field(
        default=20,
        ge=1,
        description="Maximum number of technologies returned."
    )

    max_name_length: int = Field(
        default=64,
        ge=1,
        description="Longer canonical names are discarded as degenerate output."
    )
