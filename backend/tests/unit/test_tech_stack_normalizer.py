"""
Unit tests for the Tech Stack Normalizer skill.

Tests cover:
- Synonym resolution and rule order (first match wins)
- Cleaning of bullets and whitespace
- Case-insensitive deduplication and order preservation
- Length and item-count limits
- Idempotence over its own output
"""

import re

import pytest

from jjugg_skills.tech_stack_normalizer import (
    CANONICAL_RULES,
    NormalizerLimits,
    TechStackNormalizer,
    normalize_stack,
)


@pytest.fixture
def normalizer():
    return TechStackNormalizer()


class TestSynonymResolution:
    """Spelling variants collapse into one canonical name."""

    def test_node_variants_collapse(self):
        assert normalize_stack(["nodejs", "Node.JS", "node"]) == ["Node.js"]

    def test_react_case_variants_collapse(self):
        assert normalize_stack(["React", "react", "REACT"]) == ["React"]

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("next.js", "Next.js"),
            ("NextJS", "Next.js"),
            ("ReactJS", "React"),
            ("Postgres", "PostgreSQL"),
            ("K8s", "Kubernetes"),
            ("Google Cloud Platform", "GCP"),
            ("C#", ".NET/C#"),
            ("ASP.NET Core", ".NET/C#"),
            ("golang", "Go"),
            ("Go", "Go"),
            ("Tailwind", "Tailwind CSS"),
            ("Redux Toolkit", "State Management"),
            ("Zustand", "State Management"),
            ("Vitest", "Testing"),
            ("Storybook", "Testing"),
            ("Amazon AWS", "AWS"),
        ],
    )
    def test_table_entries(self, normalizer, raw, expected):
        assert normalizer.canonicalize(raw) == expected


class TestRuleOrder:
    """The first matching rule wins, so table order decides ambiguous names."""

    def test_javascript_never_maps_to_java(self, normalizer):
        assert normalizer.canonicalize("JavaScript") == "JavaScript"

    def test_java_checked_before_spring(self, normalizer):
        assert normalizer.canonicalize("Spring Boot (Java)") == "Java"

    def test_react_checked_before_typescript(self, normalizer):
        assert normalizer.canonicalize("React with TypeScript") == "React"

    def test_node_checked_before_next(self, normalizer):
        assert normalizer.canonicalize("next.js on node") == "Node.js"

    def test_go_needs_word_boundary(self, normalizer):
        assert normalizer.canonicalize("django") == "Django"
        assert normalizer.canonicalize("MongoDB") == "MongoDB"

    @pytest.mark.parametrize("raw", ["RxJava", "cargo", "django"])
    def test_embedded_java_and_go_stay_unmapped(self, normalizer, raw):
        assert normalizer.canonicalize(raw) == raw[:1].upper() + raw[1:]

    def test_custom_rules_replace_table(self):
        rules = [(re.compile(r"vue"), "Vue.js")]
        normalizer = TechStackNormalizer(rules=rules)

        assert normalizer.normalize(["vue 3", "react"]) == ["Vue.js", "React"]

    def test_table_canonical_names_are_fixed_points(self, normalizer):
        for _, canonical in CANONICAL_RULES:
            assert normalizer.canonicalize(canonical) == canonical


class TestCleaning:
    """Unmapped names are cleaned and get a capital first letter only."""

    def test_bullet_and_whitespace_removed(self, normalizer):
        assert normalizer.canonicalize("  - svelte   kit  ") == "Svelte kit"

    def test_unicode_bullet_removed(self, normalizer):
        assert normalizer.canonicalize("• Terraform") == "Terraform"

    def test_only_first_character_capitalized(self, normalizer):
        assert normalizer.canonicalize("machine learning ops") == "Machine learning ops"
        assert normalizer.canonicalize("gRPC") == "GRPC"

    def test_empty_candidates_dropped(self):
        assert normalize_stack(["", "   ", "-", "• ", "Docker"]) == ["Docker"]

    def test_non_string_items(self):
        items = [None, True, {"name": "React"}, ["Vue"], 3, "Docker"]

        assert normalize_stack(items) == ["3", "Docker"]


class TestDedupeAndOrder:
    """Output keeps first-seen order and case-insensitive uniqueness."""

    def test_order_preserved(self):
        assert normalize_stack(["Docker", "Kubernetes", "AWS"]) == ["Docker", "Kubernetes", "AWS"]

    def test_first_casing_kept_for_unmapped(self):
        assert normalize_stack(["svelte", "SVELTE", "Svelte"]) == ["Svelte"]

    def test_synonyms_dedupe_across_positions(self):
        result = normalize_stack(["React", "Docker", "react.js", "node", "Node.js"])

        assert result == ["React", "Docker", "Node.js"]


class TestLimits:
    """Degenerate entries are dropped and the list is capped."""

    def test_cap_at_twenty(self):
        items = [f"Tool{i:02d}" for i in range(30)]

        result = normalize_stack(items)

        assert len(result) == 20
        assert result == items[:20]

    def test_cap_applies_after_dedupe(self):
        items = ["React", "react"] + [f"Tool{i:02d}" for i in range(25)]

        result = normalize_stack(items)

        assert len(result) == 20
        assert result[0] == "React"
        assert result[1] == "Tool00"

    def test_long_entry_dropped(self):
        result = normalize_stack(["Docker", "x" * 200, "Python"])

        assert result == ["Docker", "Python"]

    def test_length_boundary(self):
        assert normalize_stack(["a" * 64]) == ["A" + "a" * 63]
        assert normalize_stack(["a" * 65]) == []

    def test_custom_limits(self):
        result = normalize_stack(
            ["Docker", "Elixir phoenix", "AWS", "Rust", "Kafka"],
            max_items=3,
            max_name_length=6,
        )

        assert result == ["Docker", "AWS", "Rust"]

    def test_limits_reject_non_positive(self):
        with pytest.raises(ValueError):
            NormalizerLimits(max_items=0)


class TestIdempotence:
    """Running the normalizer on its own output changes nothing."""

    @pytest.mark.parametrize(
        "items",
        [
            ["nodejs", "React", "  - machine   learning ops", "C#", "Spring Boot (Java)"],
            ["redux", "jest", "tailwindcss", "Google Cloud", "Django", "gRPC"],
            [f"lib {i}" for i in range(25)],
        ],
    )
    def test_normalize_twice_is_stable(self, items):
        once = normalize_stack(items)

        assert normalize_stack(once) == once
