"""Tests for the build idea generator"""
import pytest

from engine.idea_generator import (
    FILLER_IDEAS, GENERAL, IDEA_TEMPLATES, MAX_IDEAS, MIN_IDEAS, IdeaTemplate, generate_build_ideas,
)
from engine.models import Narrative
from engine.narrative_detector import DEFAULT_NARRATIVES, NARRATIVE_RULES


def _narrative(name):
    return Narrative(name=name, confidence="Medium", evidence="test", timeframe="Steady")


class TestGenerateBuildIdeas:
    def test_meme_scenario(self):
        ideas = generate_build_ideas([_narrative("Meme Coin Infrastructure")])
        assert [i.title for i in ideas] == [
            "Meme Coin Scanner", "Meme Coin Portfolio Tracker", "Solana Wallet Analyzer",
        ]
        assert [i.narrative_ref for i in ideas] == [
            "Meme Coin Infrastructure", "Meme Coin Infrastructure", GENERAL,
        ]

    def test_empty_is_all_filler(self):
        ideas = generate_build_ideas([])
        assert len(ideas) == MIN_IDEAS
        assert [i.title for i in ideas] == [f.title for f in FILLER_IDEAS[:MIN_IDEAS]]
        assert all(i.narrative_ref == GENERAL for i in ideas)

    def test_default_narratives(self):
        ideas = generate_build_ideas(list(DEFAULT_NARRATIVES))
        assert [i.title for i in ideas] == [
            "AI Agent Tooling Dashboard",
            "One-Click DeFi Aggregator",
            "DeFi Strategy Templates",
            "Game Asset Marketplace",
        ]

    def test_cap_stops_later_narratives(self):
        narratives = [
            _narrative("AI Agents on Solana"),
            _narrative("Meme Coin Infrastructure"),
            _narrative("Simplified DeFi UX"),
            _narrative("On-chain Gaming"),
        ]
        ideas = generate_build_ideas(narratives)
        assert len(ideas) == MAX_IDEAS
        assert ideas[-1].title == "One-Click DeFi Aggregator"
        assert "Game Asset Marketplace" not in [i.title for i in ideas]

    def test_unknown_narrative_gets_generic_idea(self):
        ideas = generate_build_ideas([_narrative("NFT Innovation")])
        assert ideas[0].title == "NFT Innovation Dashboard"
        assert ideas[0].narrative_ref == "NFT Innovation"
        assert ideas[0].target_market == "General users"
        assert len(ideas) == MIN_IDEAS

    def test_custom_templates(self):
        templates = {"NFT Innovation": (IdeaTemplate("Mint Bot", "Mints things", "Collectors", "High"),)}
        ideas = generate_build_ideas([_narrative("NFT Innovation")], templates=templates)
        assert ideas[0].title == "Mint Bot"
        assert ideas[0].difficulty == "High"

    def test_template_table_is_read_only(self):
        with pytest.raises(TypeError):
            IDEA_TEMPLATES["NFT Innovation"] = ()

    def test_deterministic(self):
        narratives = [_narrative("AI Agents on Solana"), _narrative("On-chain Gaming")]
        assert generate_build_ideas(narratives) == generate_build_ideas(narratives)

    @pytest.mark.parametrize("names", [
        [],
        [r.name for r in NARRATIVE_RULES],
        [n.name for n in DEFAULT_NARRATIVES],
        ["On-chain Gaming"],
        ["AI Agents on Solana"] * 4,
    ])
    def test_bounds_and_refs(self, names):
        ideas = generate_build_ideas([_narrative(n) for n in names])
        assert MIN_IDEAS <= len(ideas) <= MAX_IDEAS
        assert all(i.narrative_ref in set(names) | {GENERAL} for i in ideas)
