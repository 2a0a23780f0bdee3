"""Map detected narratives to templated build ideas"""
import logging
from types import MappingProxyType
from typing import List, Mapping, NamedTuple, Sequence, Tuple

from engine.models import BuildIdea, Narrative

logger = logging.getLogger(__name__)

MIN_IDEAS = 3
MAX_IDEAS = 5
GENERAL = "General"


class IdeaTemplate(NamedTuple):
    title: str
    description: str
    target_market: str
    difficulty: str

    def bind(self, narrative_ref: str) -> BuildIdea:
        return BuildIdea(
            title=self.title,
            description=self.description,
            narrative_ref=narrative_ref,
            target_market=self.target_market,
            difficulty=self.difficulty,
        )


IDEA_TEMPLATES: Mapping[str, Tuple[IdeaTemplate, ...]] = MappingProxyType({
    "AI Agents on Solana": (
        IdeaTemplate(
            "Agent SDK for Solana",
            "A software development kit that makes it easy for AI agents to interact with Solana programs",
            "Developers building AI agents",
            "Medium",
        ),
        IdeaTemplate(
            "Agent Marketplace",
            "A marketplace where users can hire AI agents for on-chain tasks (trading, staking, governance)",
            "Crypto-native users wanting automation",
            "High",
        ),
    ),
    "Meme Coin Infrastructure": (
        IdeaTemplate(
            "Meme Coin Scanner",
            "Real-time scanner for new meme coin launches with analytics on holder distribution and liquidity",
            "Traders looking for early opportunities",
            "Medium",
        ),
        IdeaTemplate(
            "Meme Coin Portfolio Tracker",
            "Portfolio management tool specifically for meme coin traders with P&L and tax features",
            "Meme coin traders",
            "Low",
        ),
    ),
    "Simplified DeFi UX": (
        IdeaTemplate(
            "One-Click DeFi Aggregator",
            "Simplified interface that lets users execute complex DeFi strategies with one click",
            "New DeFi users",
            "Medium",
        ),
        IdeaTemplate(
            "DeFi Strategy Templates",
            "Pre-built strategy templates for common DeFi operations (yield farming, staking, lending)",
            "DeFi beginners",
            "Low",
        ),
    ),
    "On-chain Gaming": (
        IdeaTemplate(
            "Game Asset Marketplace",
            "Marketplace for trading in-game assets across multiple Solana games",
            "Solana gamers",
            "Medium",
        ),
    ),
})

FILLER_IDEAS: Tuple[IdeaTemplate, ...] = (
    IdeaTemplate(
        "Solana Wallet Analyzer",
        "Tool to analyze wallet behavior and generate insights",
        "Traders and investors",
        "Low",
    ),
    IdeaTemplate(
        "Solana Event Tracker",
        "Calendar and notifications for Solana ecosystem events (airdrops, launches, governance)",
        "Active Solana users",
        "Low",
    ),
    IdeaTemplate(
        "Solana RPC Benchmark",
        "Continuous latency and reliability comparison across Solana RPC providers",
        "Solana developers",
        "Low",
    ),
)


def generic_template(narrative_name: str) -> IdeaTemplate:
    """Single fallback idea for a narrative without its own templates"""
    return IdeaTemplate(
        f"{narrative_name} Dashboard",
        f"Analytics dashboard for {narrative_name} on Solana",
        "General users",
        "Low",
    )


def templates_for(
    narrative_name: str,
    templates: Mapping[str, Tuple[IdeaTemplate, ...]] = IDEA_TEMPLATES,
) -> Tuple[IdeaTemplate, ...]:
    if narrative_name in templates:
        return templates[narrative_name]
    return (generic_template(narrative_name),)


def generate_build_ideas(
    narratives: Sequence[Narrative],
    templates: Mapping[str, Tuple[IdeaTemplate, ...]] = IDEA_TEMPLATES,
) -> List[BuildIdea]:
    """Turn narratives into between MIN_IDEAS and MAX_IDEAS build ideas.

    Narratives are consumed in order until MAX_IDEAS ideas exist; later
    narratives contribute nothing. Short lists are padded with filler ideas
    tagged GENERAL.
    """
    ideas: List[BuildIdea] = []
    for narrative in narratives:
        for template in templates_for(narrative.name, templates):
            if len(ideas) >= MAX_IDEAS:
                break
            ideas.append(template.bind(narrative.name))
        if len(ideas) >= MAX_IDEAS:
            logger.debug("Idea cap reached at narrative %s", narrative.name)
            break

    for filler in FILLER_IDEAS:
        if len(ideas) >= MIN_IDEAS:
            break
        ideas.append(filler.bind(GENERAL))

    return ideas[:MAX_IDEAS]
