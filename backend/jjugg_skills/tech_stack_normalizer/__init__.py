"""
Tech Stack Normalizer Skill

Parsing and canonicalization of LLM-extracted technology names.
Maps spelling variations to canonical names, dedupes and caps the list.
"""

from .definition import (
    NormalizerLimits,
    ParseSource,
    ParsedCandidates,
)

from .impl import (
    CANONICAL_RULES,
    TechStackNormalizer,
    normalize_stack,
    parse_candidate_list,
)

__all__ = [
    # Classes
    "TechStackNormalizer",
    # Models
    "NormalizerLimits",
    "ParseSource",
    "ParsedCandidates",
    # Functions
    "normalize_stack",
    "parse_candidate_list",
    # Constants
    "CANONICAL_RULES",
]
