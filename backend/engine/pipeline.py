"""Main pipeline: collect → detect narratives → generate ideas → assemble report"""
import glob
import json
import logging
import os
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from config import DATA_DIR
from engine.aggregator import collect_signals
from engine.idea_generator import generate_build_ideas
from engine.models import BuildIdea, Narrative, Report, Signal
from engine.narrative_detector import detect_narratives

logger = logging.getLogger(__name__)

REPORT_PREFIX = "report_"


def build_report(
    signals: Sequence[Signal],
    narratives: Sequence[Narrative],
    ideas: Sequence[BuildIdea],
    now: Optional[datetime] = None,
) -> Report:
    now = now or datetime.now(timezone.utc)
    return Report(
        timestamp=now.isoformat(),
        signals=tuple(signals),
        narratives=tuple(narratives),
        build_ideas=tuple(ideas),
        summary={
            "totalSignals": len(signals),
            "totalNarratives": len(narratives),
            "totalIdeas": len(ideas),
        },
    )


def report_path(report: Report, data_dir: str = DATA_DIR) -> str:
    """report_YYYY-MM-DD.json for the report's own date"""
    day = datetime.fromisoformat(report.timestamp).strftime("%Y-%m-%d")
    return os.path.join(data_dir, f"{REPORT_PREFIX}{day}.json")


def save_report(report: Report, data_dir: str = DATA_DIR) -> str:
    """Write the report as JSON, replacing any earlier report from the same day.

    Write errors are not caught.
    """
    os.makedirs(data_dir, exist_ok=True)
    path = report_path(report, data_dir)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
    logger.info("Report saved to %s", path)
    return path


def load_latest_report(data_dir: str = DATA_DIR) -> Optional[Dict]:
    """Most recent persisted report, or None if there is none"""
    # Date-named files only
    paths = sorted(glob.glob(os.path.join(data_dir, f"{REPORT_PREFIX}????-??-??.json")))
    if not paths:
        return None
    with open(paths[-1], encoding="utf-8") as f:
        return json.load(f)


async def detect_and_generate(save: bool = False, data_dir: str = DATA_DIR) -> Report:
    """Run the full narrative detection pipeline"""
    logger.info("Starting narrative detection pipeline")

    signals = await collect_signals()
    logger.info("Found %d signal sources", len(signals))

    narratives = detect_narratives(signals)
    logger.info("Detected %d narratives", len(narratives))

    ideas = generate_build_ideas(narratives)
    logger.info("Generated %d build ideas", len(ideas))

    report = build_report(signals, narratives, ideas)
    if save:
        save_report(report, data_dir)
    return report


def format_report(report: Report, verbose: bool = False) -> str:
    """Human-readable console view of a report"""
    lines: List[str] = []
    summary = report.summary
    lines.append("📊 Summary:")
    lines.append(f"  Signals: {summary.get('totalSignals', 0)}")
    lines.append(f"  Narratives: {summary.get('totalNarratives', 0)}")
    lines.append(f"  Ideas: {summary.get('totalIdeas', 0)}")

    if verbose:
        lines.append("")
        lines.append("📡 SIGNALS:")
        for s in report.signals:
            lines.append(f"\n[{s.source}] {s.type}")
            lines.extend(f"  - {item}" for item in s.data)

    lines.append("")
    lines.append("📋 NARRATIVES DETECTED:")
    for i, n in enumerate(report.narratives, 1):
        lines.append(f"\n{i}. {n.name}")
        lines.append(f"   Confidence: {n.confidence}")
        lines.append(f"   Evidence: {n.evidence}")
        if verbose:
            lines.append(f"   Timeframe: {n.timeframe}")
            if n.keywords:
                lines.append(f"   Keywords: {', '.join(n.keywords)}")

    lines.append("")
    lines.append("💡 BUILD IDEAS:")
    for i, idea in enumerate(report.build_ideas, 1):
        lines.append(f"\n{i}. {idea.title}")
        lines.append(f"   {idea.description}")
        lines.append(f"   For: {idea.target_market}")
        if verbose:
            lines.append(f"   Narrative: {idea.narrative_ref} | Difficulty: {idea.difficulty}")

    return "\n".join(lines)
