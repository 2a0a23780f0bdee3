"""Collect developer activity signals from GitHub"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List

from config import GITHUB_DAYS_BACK, GITHUB_TOKEN
from collectors.http_utils import fail_soft, fetch_json, make_client

logger = logging.getLogger(__name__)

SEARCH_URL = "https://api.github.com/search/repositories"
HEADERS = {"Authorization": f"token {GITHUB_TOKEN}"} if GITHUB_TOKEN else {}
TOP_N = 10


def _format_repo(item: Dict) -> str:
    name = item.get("full_name") or item.get("name") or "unknown"
    stars = item.get("stargazers_count", 0) or 0
    language = item.get("language") or "n/a"
    line = f"{name}: {stars} ⭐ ({language})"
    description = (item.get("description") or "").strip()
    if description:
        line += f" - {description[:120]}"
    return line


@fail_soft
async def collect(days_back: int = GITHUB_DAYS_BACK) -> List[str]:
    """Most-starred Solana repos created in the last N days"""
    since = (datetime.now(timezone.utc) - timedelta(days=days_back)).strftime("%Y-%m-%d")
    async with make_client(headers=HEADERS) as client:
        data = await fetch_json(
            client,
            SEARCH_URL,
            params={"q": f"solana created:>{since}", "sort": "stars", "order": "desc", "per_page": TOP_N},
        )
    items = data.get("items", []) if isinstance(data, dict) else []
    repos = [_format_repo(item) for item in items if isinstance(item, dict)][:TOP_N]
    logger.info("GitHub collector: %d repos since %s", len(repos), since)
    return repos
