"""Memoization of loop layouts."""

from collections import OrderedDict
from collections.abc import Hashable

from drumjot.models.jot import LoopSpec
from drumjot.models.layout import RenderedLoop

# (loop, declared track names, layout config)
CacheKey = tuple[LoopSpec, tuple[str, ...], Hashable]


class LayoutCache:
    """Least-recently-used table of rendered loops.

    Keys are structural, so an edited loop (which is a new value) misses
    the cache on its own. ``invalidate`` drops a loop explicitly.
    """

    def __init__(self, max_entries: int = 128) -> None:
        """Initialize the cache.

        Args:
            max_entries: Number of layouts to keep. 0 disables caching.
        """
        self.max_entries = max_entries
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[CacheKey, RenderedLoop] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: CacheKey) -> RenderedLoop | None:
        rendered = self._entries.get(key)
        if rendered is None:
            self.misses += 1
            return None
        self._entries.move_to_end(key)
        self.hits += 1
        return rendered

    def put(self, key: CacheKey, rendered: RenderedLoop) -> None:
        if self.max_entries <= 0:
            return
        self._entries[key] = rendered
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def invalidate(self, loop: LoopSpec) -> int:
        """Drop every cached layout of ``loop``. Returns the number dropped."""
        stale = [key for key in self._entries if key[0] == loop]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0
