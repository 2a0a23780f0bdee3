"""Tests for the rule-based narrative detector"""
import pytest

from engine.models import Signal
from engine.narrative_detector import (
    DEFAULT_NARRATIVES, KNOWN_NARRATIVES, MIN_NARRATIVES, detect_narratives, signal_text,
)


def _signals(*snippets, source="GitHub"):
    return [Signal(source=source, type="Developer Activity", data=tuple(snippets))]


def _names(narratives):
    return [n.name for n in narratives]


class TestDetectNarratives:
    def test_empty_returns_full_default_set(self):
        narratives = detect_narratives([])
        assert _names(narratives) == ["AI Agent Tooling", "Simplified DeFi UX", "On-chain Gaming"]
        assert narratives == list(DEFAULT_NARRATIVES)

    def test_nft_repo_scenario(self):
        narratives = detect_narratives(_signals("cool-nft-marketplace: 500 stars"))
        assert narratives[0].name == "NFT Innovation"
        assert narratives[0].confidence == "Medium"
        assert narratives[0].keywords == ("nft",)
        # single match is topped up with defaults
        assert len(narratives) >= MIN_NARRATIVES
        assert _names(narratives)[1:] == ["AI Agent Tooling", "Simplified DeFi UX", "On-chain Gaming"]

    def test_case_insensitive(self):
        upper = detect_narratives(_signals("AI AGENT PROJECT"))
        lower = detect_narratives(_signals("ai agent project"))
        assert upper == lower
        assert "AI Agents on Solana" in _names(upper)

    def test_all_matching_rules_emit_in_rule_order(self):
        narratives = detect_narratives(_signals("defi vault", "nft drop", "agent kit"))
        assert _names(narratives) == ["AI Agents on Solana", "NFT Innovation", "DeFi Protocol Development"]

    def test_no_defaults_once_floor_met(self):
        narratives = detect_narratives(_signals("dex aggregator", "meme launchpad"))
        assert _names(narratives) == ["DeFi Protocol Development", "Meme Coin Infrastructure"]

    def test_text_spans_signals(self):
        signals = _signals("new nft collection") + _signals("BONK trending", source="CoinGecko")
        narratives = detect_narratives(signals)
        assert _names(narratives) == ["NFT Innovation", "Meme Coin Infrastructure"]

    def test_records_matched_keywords(self):
        narratives = detect_narratives(_signals("dex and meme and pump"))
        by_name = {n.name: n for n in narratives}
        assert by_name["DeFi Protocol Development"].keywords == ("dex",)
        assert by_name["Meme Coin Infrastructure"].keywords == ("meme", "pump")

    def test_substring_matching_is_not_word_aware(self):
        # "ai" inside "blockchain", "dog" inside "dogwifhat"
        narratives = detect_narratives(_signals("blockchain dogwifhat"))
        assert _names(narratives)[:2] == ["AI Agents on Solana", "Meme Coin Infrastructure"]

    def test_detected_default_is_not_duplicated(self):
        narratives = detect_narratives(_signals("new game studio"))
        names = _names(narratives)
        assert names == ["On-chain Gaming", "AI Agent Tooling", "Simplified DeFi UX"]
        assert len(names) == len(set(names))

    def test_idempotent(self):
        signals = _signals("agent", "nft", "unrelated text")
        assert detect_narratives(signals) == detect_narratives(signals)

    @pytest.mark.parametrize("snippets", [
        (),
        ("",),
        ("nothing relevant here",),
        ("AI agent", "NFT", "DeFi", "DEX", "meme", "game"),
        ("xyz",) * 50,
    ])
    def test_floor_and_closed_names(self, snippets):
        narratives = detect_narratives(_signals(*snippets))
        assert len(narratives) >= MIN_NARRATIVES
        assert all(n.name in KNOWN_NARRATIVES for n in narratives)


class TestSignalText:
    def test_lowercases_and_joins(self):
        signals = _signals("Foo", "BAR") + _signals("Baz", source="News")
        assert signal_text(signals) == "foo bar baz"


class TestRuleTables:
    def test_levels_are_valid(self):
        from engine.idea_generator import FILLER_IDEAS, IDEA_TEMPLATES
        from engine.models import CONFIDENCE_LEVELS, DIFFICULTY_LEVELS
        from engine.narrative_detector import NARRATIVE_RULES

        assert all(r.confidence in CONFIDENCE_LEVELS for r in NARRATIVE_RULES)
        assert all(n.confidence in CONFIDENCE_LEVELS for n in DEFAULT_NARRATIVES)
        templates = [t for group in IDEA_TEMPLATES.values() for t in group] + list(FILLER_IDEAS)
        assert all(t.difficulty in DIFFICULTY_LEVELS for t in templates)

    def test_rule_names_are_unique(self):
        from engine.narrative_detector import NARRATIVE_RULES

        names = [r.name for r in NARRATIVE_RULES]
        assert len(names) == len(set(names))
