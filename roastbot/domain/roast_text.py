# roastbot/domain/roast_text.py
"""Roasts pré-écrits (aucun appel IA), mis en cache par (adresse, type)."""
from __future__ import annotations
import random
from typing import Callable, Sequence

from ..core.cache import TTLCache

ROAST_TYPES = ("free", "premium", "friend")

TOKEN_WALLET_ROASTS = [
    "Your wallet is a museum of poor decisions. Every token tells a story of FOMO, regret, and questionable life choices.",
    "Looking at your portfolio is like watching a slow-motion car crash - you know it's bad but you can't look away.",
    "Your token selection strategy appears to be 'buy high, hold forever, cry daily.' Bold move, cotton.",
    "This wallet screams 'I bought the top and held through the dump.' Your bags are heavier than your regrets.",
    "Your portfolio diversity is impressive - impressively bad. It's like you collected every red flag token on Base.",
    "Ah yes, the classic 'buy every dog coin' strategy. How's that working out for you? Don't answer, I can see.",
    "Your token holdings look like you threw darts at CoinGecko while blindfolded. Actually, that would've been more successful.",
    "This wallet is proof that having more tokens doesn't mean having more value. Quality over quantity, anon.",
]


class RoastWriter:
    def __init__(self, cache: TTLCache[str], choose: Callable[[Sequence[str]], str] = random.choice):
        self.cache = cache
        self._choose = choose

    def write(self, address: str, roast_type: str = "free") -> str:
        if roast_type not in ROAST_TYPES:
            raise ValueError(f"unknown roast type: {roast_type}")
        key = (address, roast_type)
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        roast = self._choose(TOKEN_WALLET_ROASTS)
        self.cache.set(key, roast)
        return roast
