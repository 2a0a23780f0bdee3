"""Run every collector and wrap non-empty results as Signals"""
import logging
from typing import Awaitable, Callable, List, Sequence, Tuple

from collectors.coingecko_collector import collect as collect_coingecko
from collectors.defillama_collector import collect as collect_defillama
from collectors.github_collector import collect as collect_github
from collectors.news_collector import collect as collect_news
from collectors.reddit_collector import collect as collect_reddit
from engine.models import Signal

logger = logging.getLogger(__name__)

Collector = Callable[[], Awaitable[List[str]]]

# (source, type, collector) in collection order
SIGNAL_SOURCES: Tuple[Tuple[str, str, Collector], ...] = (
    ("GitHub", "Developer Activity", collect_github),
    ("Reddit", "Community", collect_reddit),
    ("News", "Headlines", collect_news),
    ("DeFiLlama", "Protocol TVL", collect_defillama),
    ("CoinGecko", "Market Trends", collect_coingecko),
)


async def collect_signals(sources: Sequence[Tuple[str, str, Collector]] = SIGNAL_SOURCES) -> List[Signal]:
    """Collect from each source in order; sources that return nothing are omitted.

    Collectors are fail-soft, so a broken source simply contributes no Signal.
    """
    signals = []
    for i, (source, signal_type, collector) in enumerate(sources, 1):
        logger.info("[%d/%d] Collecting %s signals", i, len(sources), source)
        data = await collector()
        if not data:
            logger.info("%s returned no data, skipping", source)
            continue
        signals.append(Signal(source=source, type=signal_type, data=tuple(data)))
    logger.info("Collected %d signal sources", len(signals))
    return signals
