"""CLI runner for the narrative detection pipeline"""
import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

# Add parent dir to path
sys.path.insert(0, os.path.dirname(__file__))

from dotenv import load_dotenv
load_dotenv()

from logging_config import setup_logging
from engine.pipeline import detect_and_generate, format_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="narrative-detector",
        description="Detect emerging Solana narratives and generate build ideas.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show per-signal data and narrative details, and debug logging.",
    )
    parser.add_argument(
        "-s", "--save",
        action="store_true",
        help="Save the report as report_YYYY-MM-DD.json in the data directory.",
    )
    return parser


async def main(verbose: bool = False, save: bool = False) -> None:
    logger.info("Solana Narrative Detector - Running Pipeline")
    report = await detect_and_generate(save=save)
    print(format_report(report, verbose=verbose))
    print("\n✅ Analysis complete!")


def cli(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)
    try:
        asyncio.run(main(verbose=args.verbose, save=args.save))
    except Exception as e:
        logger.error("Pipeline failed: %s", e, exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
