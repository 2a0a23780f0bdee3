"""Collect community discussion signals from r/solana"""
import logging
from typing import Dict, List

from collectors.http_utils import fail_soft, fetch_json, make_client

logger = logging.getLogger(__name__)

SUBREDDIT = "solana"
TOP_N = 10


def _format_post(post: Dict) -> str:
    title = (post.get("title") or "").strip()
    score = post.get("score", 0) or 0
    flair = post.get("link_flair_text")
    line = f"{title} (↑{score})"
    if flair:
        line += f" [{flair}]"
    return line


@fail_soft
async def collect(subreddit: str = SUBREDDIT) -> List[str]:
    """Hot posts from a Solana subreddit, stickied posts excluded"""
    async with make_client() as client:
        data = await fetch_json(
            client,
            f"https://www.reddit.com/r/{subreddit}/hot.json",
            params={"limit": TOP_N + 5, "raw_json": 1},
        )
    children = ((data.get("data") or {}).get("children") or []) if isinstance(data, dict) else []
    posts = [c.get("data") for c in children if isinstance(c, dict)]
    posts = [p for p in posts if isinstance(p, dict)]
    lines = [_format_post(p) for p in posts if p.get("title") and not p.get("stickied")]
    logger.info("Reddit collector: %d posts from r/%s", len(lines[:TOP_N]), subreddit)
    return lines[:TOP_N]
