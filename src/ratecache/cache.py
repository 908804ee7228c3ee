from collections import OrderedDict, defaultdict
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Hashable, Optional, Tuple
import threading

from loguru import logger

from ratecache.clock import default_clock

MIN_CAPACITY = 1
MIN_TTL = 0.001 # 1ms

_MISSING = object()

def _clamp_capacity(cls_name: str, capacity: int) -> int:
    if capacity < MIN_CAPACITY:
        logger.debug("{} capacity {} clamped to {}", cls_name, capacity, MIN_CAPACITY)
    return max(MIN_CAPACITY, int(capacity))

# Evicts the least recently used entry once a new key pushes it over capacity.
# Both get and put move the key to the newest end of the OrderedDict.
class LRUCache:
    def __init__(self, capacity: int = 1000):
        self.capacity = _clamp_capacity("LRUCache", capacity)
        self.cache: OrderedDict = OrderedDict()
        self._lock = threading.Lock()

    def lookup(self, key: Hashable) -> Tuple[Any, bool]:
        with self._lock:
            if key not in self.cache:
                return None, False
            self.cache.move_to_end(key)
            return self.cache[key], True

    def get(self, key: Hashable, default: Any = None) -> Any:
        value, found = self.lookup(key)
        return value if found else default

    def put(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self.cache[key] = value
            self.cache.move_to_end(key)
            if len(self.cache) > self.capacity:
                evicted, _ = self.cache.popitem(last=False)
                logger.debug("LRUCache evicted {!r}", evicted)

    __setitem__ = put

    def clear(self):
        with self._lock:
            self.cache.clear()

    def size(self) -> int:
        with self._lock:
            return len(self.cache)

    def __len__(self):
        return self.size()

# Entries expire ttl seconds after their last write. Expiry is lazy: an entry is only
# dropped when a read finds it stale. Overflow on put evicts in LRU order,
# expired or not.
class TTLCache:
    def __init__(self, capacity: int = 128, ttl: float | timedelta = 60.0, clock=None):
        if isinstance(ttl, timedelta):
            ttl = ttl.total_seconds()
        if ttl < MIN_TTL:
            logger.debug("TTLCache ttl {} clamped to {}", ttl, MIN_TTL)

        self.capacity = _clamp_capacity("TTLCache", capacity)
        self.ttl = max(MIN_TTL, float(ttl))
        self._clock = clock or default_clock
        self._store: OrderedDict = OrderedDict() # key -> (value, written_at)
        self._lock = threading.Lock()

    def lookup(self, key: Hashable) -> Tuple[Any, bool]:
        with self._lock:
            item = self._store.get(key, _MISSING)
            if item is _MISSING:
                return None, False

            value, written_at = item
            if self._clock.now() - written_at > self.ttl:
                del self._store[key]
                logger.debug("TTLCache expired {!r}", key)
                return None, False

            self._store.move_to_end(key)
            return value, True

    def get(self, key: Hashable, default: Any = None) -> Any:
        value, found = self.lookup(key)
        return value if found else default

    def put(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._store[key] = (value, self._clock.now())
            self._store.move_to_end(key)
            if len(self._store) > self.capacity:
                evicted, _ = self._store.popitem(last=False)
                logger.debug("TTLCache evicted {!r}", evicted)

    __setitem__ = put

    def clear(self):
        with self._lock:
            self._store.clear()

    # Counts stored entries, including expired ones nobody has read yet.
    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def __len__(self):
        return self.size()

@dataclass
class LFUEntry:
    value: Any
    frequency: int
    last_access: float

# Evicts the least frequently used key; among equal frequencies the one accessed longest ago.
#
# Keys are bucketed by frequency, each bucket an OrderedDict in access order. A key enters
# the tail of a bucket exactly when it is accessed, so the head of the min_freq bucket is
# always the entry with the oldest last_access at the lowest frequency.
class LFUCache:
    def __init__(self, capacity: int = 1000, clock=None):
        self.capacity = _clamp_capacity("LFUCache", capacity)
        self._clock = clock or default_clock
        self.entries: dict = {} # key -> LFUEntry
        self.freq_to_keys = defaultdict(OrderedDict) # freq -> OrderedDict of keys
        self.min_freq = 0
        self._lock = threading.Lock()

    def lookup(self, key: Hashable) -> Tuple[Any, bool]:
        with self._lock:
            entry = self.entries.get(key)
            if entry is None:
                return None, False

            self._touch(key, entry)
            return entry.value, True

    def get(self, key: Hashable, default: Any = None) -> Any:
        value, found = self.lookup(key)
        return value if found else default

    def put(self, key: Hashable, value: Any) -> None:
        with self._lock:
            entry = self.entries.get(key)
            if entry is not None:
                entry.value = value
                self._touch(key, entry)
                return

            if len(self.entries) >= self.capacity:
                self._evict()

            self.entries[key] = LFUEntry(value, 1, self._clock.now())
            self.freq_to_keys[1][key] = None
            self.min_freq = 1

    __setitem__ = put

    def frequency(self, key: Hashable) -> Optional[int]:
        with self._lock:
            entry = self.entries.get(key)
            return entry.frequency if entry else None

    def clear(self):
        with self._lock:
            self.entries.clear()
            self.freq_to_keys.clear()
            self.min_freq = 0

    def size(self) -> int:
        with self._lock:
            return len(self.entries)

    def __len__(self):
        return self.size()

    def _touch(self, key, entry: LFUEntry):
        freq = entry.frequency
        del self.freq_to_keys[freq][key]
        if not self.freq_to_keys[freq]:
            del self.freq_to_keys[freq]
            if freq == self.min_freq:
                self.min_freq += 1

        entry.frequency = freq + 1
        entry.last_access = self._clock.now()
        self.freq_to_keys[freq + 1][key] = None

    def _evict(self):
        key, _ = self.freq_to_keys[self.min_freq].popitem(last=False)
        if not self.freq_to_keys[self.min_freq]:
            del self.freq_to_keys[self.min_freq]

        victim = self.entries.pop(key)
        logger.debug("LFUCache evicted {!r} (frequency={})", key, victim.frequency)
