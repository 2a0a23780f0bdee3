"""Collect Solana news headlines from the CryptoCompare news API"""
import logging
from typing import Dict, List

from collectors.http_utils import fail_soft, fetch_json, make_client

logger = logging.getLogger(__name__)

NEWS_URL = "https://min-api.cryptocompare.com/data/v2/news/"
TOP_N = 10


def _format_article(article: Dict) -> str:
    title = (article.get("title") or "").strip()
    source = (article.get("source_info") or {}).get("name") or article.get("source") or ""
    return f"{title} [{source}]" if source else title


@fail_soft
async def collect() -> List[str]:
    """Latest headlines tagged SOL"""
    async with make_client() as client:
        data = await fetch_json(client, NEWS_URL, params={"lang": "EN", "categories": "SOL"})
    articles = data.get("Data", []) if isinstance(data, dict) else []
    # The API reports errors in-band with a 200 status
    if not isinstance(articles, list):
        logger.warning("News API error: %s", data.get("Message", "unexpected payload"))
        return []
    headlines = [_format_article(a) for a in articles if isinstance(a, dict) and a.get("title")]
    logger.info("News collector: %d headlines", len(headlines[:TOP_N]))
    return headlines[:TOP_N]
