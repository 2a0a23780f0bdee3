"""Collect trending coins from CoinGecko (no API key needed)"""
import logging
from typing import Dict, List

from collectors.http_utils import fail_soft, fetch_json, make_client

logger = logging.getLogger(__name__)

TRENDING_URL = "https://api.coingecko.com/api/v3/search/trending"
TOP_N = 7


def _format_coin(coin: Dict) -> str:
    name = coin.get("name", "Unknown")
    symbol = (coin.get("symbol") or "").upper()
    rank = coin.get("market_cap_rank")
    line = f"{name} ({symbol})"
    if rank:
        line += f" #{rank}"
    return line


@fail_soft
async def collect() -> List[str]:
    """Currently trending coins across all chains"""
    async with make_client() as client:
        data = await fetch_json(client, TRENDING_URL)
    coins = data.get("coins", []) if isinstance(data, dict) else []
    items = [entry.get("item") for entry in coins if isinstance(entry, dict)]
    lines = [_format_coin(item) for item in items if isinstance(item, dict)][:TOP_N]
    logger.info("CoinGecko collector: %d trending coins", len(lines))
    return lines
