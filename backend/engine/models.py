"""Records passed between the aggregator, detector, idea generator and report"""
from dataclasses import dataclass, field
from typing import Dict, Tuple

CONFIDENCE_LEVELS = ("Low", "Medium", "High")
DIFFICULTY_LEVELS = ("Low", "Medium", "High")


@dataclass(frozen=True)
class Signal:
    """A source-tagged batch of short text observations"""
    source: str
    type: str
    data: Tuple[str, ...] = ()

    def to_dict(self) -> Dict:
        return {"source": self.source, "type": self.type, "data": list(self.data)}


@dataclass(frozen=True)
class Narrative:
    name: str
    confidence: str
    evidence: str
    timeframe: str
    keywords: Tuple[str, ...] = ()

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "confidence": self.confidence,
            "evidence": self.evidence,
            "timeframe": self.timeframe,
            "keywords": list(self.keywords),
        }


@dataclass(frozen=True)
class BuildIdea:
    title: str
    description: str
    narrative_ref: str
    target_market: str
    difficulty: str

    def to_dict(self) -> Dict:
        return {
            "title": self.title,
            "description": self.description,
            "narrativeRef": self.narrative_ref,
            "targetMarket": self.target_market,
            "difficulty": self.difficulty,
        }


@dataclass(frozen=True)
class Report:
    timestamp: str
    signals: Tuple[Signal, ...] = ()
    narratives: Tuple[Narrative, ...] = ()
    build_ideas: Tuple[BuildIdea, ...] = ()
    summary: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            "timestamp": self.timestamp,
            "signals": [s.to_dict() for s in self.signals],
            "narratives": [n.to_dict() for n in self.narratives],
            "buildIdeas": [i.to_dict() for i in self.build_ideas],
            "summary": dict(self.summary),
        }
