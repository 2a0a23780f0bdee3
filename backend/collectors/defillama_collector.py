"""Collect DeFi TVL data for Solana protocols from DeFiLlama"""
import logging
from typing import Dict, List

from collectors.http_utils import fail_soft, fetch_json, make_client

logger = logging.getLogger(__name__)

PROTOCOLS_URL = "https://api.llama.fi/protocols"
TOP_N = 10


def _format_usd(value: float) -> str:
    if value >= 1_000_000_000:
        return f"${value / 1_000_000_000:.2f}B"
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    return f"${value:,.0f}"


def _solana_tvl(protocol: Dict) -> float:
    """Solana share of TVL when DeFiLlama breaks it out, else the total"""
    chain_tvls = protocol.get("chainTvls") or {}
    return chain_tvls.get("Solana") or protocol.get("tvl") or 0


def _format_protocol(protocol: Dict) -> str:
    name = protocol.get("name", "")
    category = protocol.get("category") or "Other"
    change_7d = protocol.get("change_7d") or 0
    return f"{name} ({category}): {_format_usd(_solana_tvl(protocol))} TVL, 7d {change_7d:+.1f}%"


@fail_soft
async def collect() -> List[str]:
    """Largest Solana protocols by TVL"""
    async with make_client() as client:
        protocols = await fetch_json(client, PROTOCOLS_URL)
    if not isinstance(protocols, list):
        return []

    solana_protocols = [
        p for p in protocols
        if isinstance(p, dict) and "Solana" in (p.get("chains") or [])
    ]
    solana_protocols.sort(key=_solana_tvl, reverse=True)
    lines = [_format_protocol(p) for p in solana_protocols[:TOP_N]]
    logger.info("DeFiLlama collector: %d of %d Solana protocols", len(lines), len(solana_protocols))
    return lines
