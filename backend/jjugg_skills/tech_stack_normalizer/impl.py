"""
Tech Stack Normalizer - Implementation

Turns the raw list an LLM returns for a job description into a short,
presentable stack.
Features:
- Two-stage parsing of untrusted provider text (strict JSON, then the
  first bracketed array found in the text)
- Ordered synonym table mapping spellings to canonical names
- Case-insensitive deduplication preserving first-seen order
- Length and item-count limits
"""

import json
import logging
import re
from typing import Any, Iterable, List, Optional, Pattern, Set, Tuple

from .definition import NormalizerLimits, ParsedCandidates, ParseSource

logger = logging.getLogger(__name__)


# ============================================================================
# CANONICAL RULES
# ============================================================================

# Evaluated top to bottom against the lower-cased candidate; the first match
# wins. Order is significant: "node.js" must resolve before anything matching
# a bare "js", and "javascript" must never reach the Java rule.
CANONICAL_RULES: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"nodejs|node\.js|node"), "Node.js"),
    (re.compile(r"nextjs|next\.js"), "Next.js"),
    (re.compile(r"reactjs|react\.js|react"), "React"),
    (re.compile(r"typescript"), "TypeScript"),
    (re.compile(r"javascript"), "JavaScript"),
    (re.compile(r"postgresql|postgres"), "PostgreSQL"),
    (re.compile(r"mysql"), "MySQL"),
    (re.compile(r"sqlite"), "SQLite"),
    (re.compile(r"mongodb"), "MongoDB"),
    (re.compile(r"graphql"), "GraphQL"),
    (re.compile(r"docker"), "Docker"),
    (re.compile(r"kubernetes|k8s"), "Kubernetes"),
    (re.compile(r"aws"), "AWS"),
    (re.compile(r"azure"), "Azure"),
    (re.compile(r"gcp|google cloud"), "GCP"),
    (re.compile(r"python"), "Python"),
    (re.compile(r"\bjava\b"), "Java"),
    (re.compile(r"spring"), "Spring"),
    (re.compile(r"c#|\.net|dotnet"), ".NET/C#"),
    (re.compile(r"\bgo\b|golang"), "Go"),
    (re.compile(r"rust"), "Rust"),
    (re.compile(r"tailwind"), "Tailwind CSS"),
    (re.compile(r"redux|zustand|mobx"), "State Management"),
    (re.compile(r"jest|vitest|cypress|storybook"), "Testing"),
]

_BULLET_PREFIX = re.compile(r"^[-•\s]+")
_WHITESPACE_RUN = re.compile(r"\s+")
_BRACKETED_ARRAY = re.compile(r"\[[\s\S]*\]")


# ============================================================================
# PARSING
# ============================================================================

def _load_json(text: str) -> Optional[Any]:
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        return None


def parse_candidate_list(text: Optional[str]) -> ParsedCandidates:
    """
    Parse provider text into a candidate list without ever raising.

    Tries a strict parse of the whole text first, then the first
    ``[ ... ]`` span. Anything that is not a JSON array ends up EMPTY.
    """
    if not text or not text.strip():
        return ParsedCandidates.empty()

    value = _load_json(text)
    if isinstance(value, list):
        return ParsedCandidates(items=value, source=ParseSource.STRICT)

    if value is None:
        match = _BRACKETED_ARRAY.search(text)
        if match:
            value = _load_json(match.group(0))
            if isinstance(value, list):
                logger.debug("Candidate array extracted from surrounding text")
                return ParsedCandidates(items=value, source=ParseSource.EXTRACTED)

    logger.debug(f"No JSON array in provider text ({len(text)} chars)")
    return ParsedCandidates.empty()


# ============================================================================
# TECH STACK NORMALIZER CLASS
# ============================================================================

class TechStackNormalizer:
    """
    Canonicalizer for LLM-extracted technology names.

    Usage:
        normalizer = TechStackNormalizer()
        normalizer.normalize(["nodejs", "Node.JS", "react"])
        # ['Node.js', 'React']
    """

    def __init__(
        self,
        limits: Optional[NormalizerLimits] = None,
        rules: Optional[List[Tuple[Pattern[str], str]]] = None,
    ):
        self.limits = limits or NormalizerLimits()
        self.rules = rules if rules is not None else CANONICAL_RULES

    @staticmethod
    def clean(raw: str) -> str:
        """Trim, drop a leading bullet/dash marker and collapse whitespace."""
        text = _BULLET_PREFIX.sub("", raw.strip())
        return _WHITESPACE_RUN.sub(" ", text)

    def canonicalize(self, raw: str) -> str:
        """Map one raw name to its canonical form (may return '')."""
        cleaned = self.clean(raw)
        lowered = cleaned.lower()
        for pattern, canonical in self.rules:
            if pattern.search(lowered):
                return canonical
        # Only the first character changes; "machine learning ops" stays lower.
        return cleaned[:1].upper() + cleaned[1:]

    def normalize(self, items: Iterable[Any]) -> List[str]:
        """
        Canonicalize, filter, dedupe and cap a raw candidate list.

        Args:
            items: Raw values as parsed from the provider response.

        Returns:
            Canonical names in first-seen order, at most ``max_items`` long.
        """
        seen: Set[str] = set()
        out: List[str] = []

        for raw in items:
            text = _coerce(raw)
            if text is None:
                continue

            name = self.canonicalize(text)
            if not name or len(name) > self.limits.max_name_length:
                continue

            key = name.lower()
            if key in seen:
                continue
            seen.add(key)
            out.append(name)

        return out[: self.limits.max_items]


def _coerce(raw: Any) -> Optional[str]:
    """Strings and numbers become text; null, booleans and containers are dropped."""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return str(raw)
    return None


# Convenience function
def normalize_stack(
    items: Iterable[Any],
    max_items: int = 20,
    max_name_length: int = 64,
) -> List[str]:
    """Normalize a raw candidate list with the default rule table."""
    limits = NormalizerLimits(max_items=max_items, max_name_length=max_name_length)
    return TechStackNormalizer(limits).normalize(items)
