# roastbot/core/cache.py
"""Cache clé → valeur borné, avec expiration vérifiée à la lecture."""
from __future__ import annotations
import time
from collections import OrderedDict
from typing import Callable, Generic, Hashable, Optional, TypeVar

V = TypeVar("V")


class TTLCache(Generic[V]):
    __slots__ = ("ttl", "maxsize", "_clock", "_data")

    def __init__(self, ttl: float, maxsize: int = 512, clock: Callable[[], float] = time.time):
        if maxsize <= 0:
            raise ValueError("maxsize must be > 0")
        self.ttl = float(ttl)
        self.maxsize = int(maxsize)
        self._clock = clock
        self._data: OrderedDict[Hashable, tuple[V, float]] = OrderedDict()

    def get(self, key: Hashable) -> Optional[V]:
        hit = self._data.get(key)
        if hit is None:
            return None
        value, stored_at = hit
        if self._clock() - stored_at >= self.ttl:
            del self._data[key]
            return None
        return value

    def set(self, key: Hashable, value: V) -> None:
        if key in self._data:
            del self._data[key]
        self._data[key] = (value, self._clock())
        # plus ancienne insertion d'abord
        while len(self._data) > self.maxsize:
            self._data.popitem(last=False)

    def invalidate(self, key: Hashable | None = None) -> None:
        if key is None:
            self._data.clear()
        else:
            self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)
