"""Rule-based narrative detection over aggregated signal text"""
import logging
from typing import List, NamedTuple, Sequence, Tuple

from engine.models import Narrative, Signal

logger = logging.getLogger(__name__)

MIN_NARRATIVES = 2


class NarrativeRule(NamedTuple):
    name: str
    keywords: Tuple[str, ...]
    confidence: str
    evidence: str
    timeframe: str


# Evaluated in order; every matching rule emits its narrative.
# Matching is raw substring containment on lowercased text, so short
# keywords hit inside longer words ("ai" in "chain", "dog" in "dogwifhat").
NARRATIVE_RULES: Tuple[NarrativeRule, ...] = (
    NarrativeRule(
        "AI Agents on Solana", ("agent", "ai"), "High",
        "Multiple AI agent projects gaining traction across developer and community signals",
        "Emerging",
    ),
    NarrativeRule(
        "NFT Innovation", ("nft",), "Medium",
        "NFT-related projects trending",
        "Growing",
    ),
    NarrativeRule(
        "DeFi Protocol Development", ("defi", "dex"), "Medium",
        "DeFi projects gaining developer interest",
        "Steady",
    ),
    NarrativeRule(
        "Meme Coin Infrastructure", ("meme", "bonk", "dog", "pump"), "High",
        "High meme coin activity across market and community signals",
        "Peak",
    ),
    NarrativeRule(
        "On-chain Gaming", ("game", "gaming"), "Medium",
        "Gaming projects appearing in ecosystem signals",
        "Steady",
    ),
)

DEFAULT_NARRATIVES: Tuple[Narrative, ...] = (
    Narrative(
        name="AI Agent Tooling",
        confidence="High",
        evidence="Growing interest in AI agents across crypto ecosystem",
        timeframe="Emerging",
    ),
    Narrative(
        name="Simplified DeFi UX",
        confidence="Medium",
        evidence="User experience remains pain point in DeFi",
        timeframe="Ongoing",
    ),
    Narrative(
        name="On-chain Gaming",
        confidence="Medium",
        evidence="Gaming projects continuing to build on Solana",
        timeframe="Steady",
    ),
)

KNOWN_NARRATIVES = frozenset(
    [r.name for r in NARRATIVE_RULES] + [n.name for n in DEFAULT_NARRATIVES]
)


def signal_text(signals: Sequence[Signal]) -> str:
    """All snippets of all signals as one lowercased blob"""
    return " ".join(snippet for s in signals for snippet in s.data).lower()


def match_rule(rule: NarrativeRule, text: str) -> Tuple[str, ...]:
    """Keywords of the rule found in already-lowercased text"""
    return tuple(kw for kw in rule.keywords if kw in text)


def detect_narratives(
    signals: Sequence[Signal],
    rules: Sequence[NarrativeRule] = NARRATIVE_RULES,
) -> List[Narrative]:
    """Detect narratives from signals, topping up with defaults below the floor.

    When fewer than MIN_NARRATIVES rules match, every default narrative not
    already detected is appended, so empty input yields the full default set.
    """
    text = signal_text(signals)
    narratives = []
    for rule in rules:
        matched = match_rule(rule, text)
        if matched:
            narratives.append(Narrative(
                name=rule.name,
                confidence=rule.confidence,
                evidence=rule.evidence,
                timeframe=rule.timeframe,
                keywords=matched,
            ))

    logger.debug("Rule matches: %s", [n.name for n in narratives])

    if len(narratives) < MIN_NARRATIVES:
        present = {n.name for n in narratives}
        defaults = [d for d in DEFAULT_NARRATIVES if d.name not in present]
        logger.info("Only %d narratives detected, adding %d defaults", len(narratives), len(defaults))
        narratives.extend(defaults)

    return narratives
