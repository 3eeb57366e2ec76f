"""
Memoization of parse and organize results.

The engine itself keeps no state between calls. Hosts that reorganize the
same document repeatedly (format-on-save, now-marker refreshes) can own a
DocumentCache and route calls through it. Entries are keyed by the SHA-256
of the document text, so an edited document never hits a stale entry;
invalidate() and clear() evict explicitly.
"""

import hashlib
import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional

from .config import FormatterConfig
from .organizer import OrganizeResult, organize_parsed
from .parser import ParsedDocument, parse_document

logger = logging.getLogger(__name__)


def content_hash(text: str) -> str:
    """Return the SHA-256 hex digest of the document text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


@dataclass
class CacheEntry:
    """Cached results for one document text."""

    parsed: Optional[ParsedDocument] = None
    organized: dict[bool, OrganizeResult] = field(default_factory=dict)


@dataclass
class CacheStats:
    """Hit and miss counters for a DocumentCache."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0


class DocumentCache:
    """
    Least-recently-used cache of parse and organize results.

    Returned objects are shared between callers and must be treated as
    read-only.

    Usage:
        cache = DocumentCache(max_entries=10)
        result = cache.get_formatted(text, sort=False)
        ...
        cache.invalidate(text)
    """

    def __init__(self, max_entries: int = 10, config: Optional[FormatterConfig] = None):
        """
        Initialize the cache.

        Args:
            max_entries: Maximum number of distinct documents kept.
            config: Formatting configuration used for organize results.

        Raises:
            ValueError: If max_entries is not positive.
        """
        if max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")

        self.max_entries = max_entries
        self.config = config
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, text: str) -> bool:
        return content_hash(text) in self._entries

    def _entry(self, key: str) -> CacheEntry:
        """Fetch or create the entry for key and mark it most recently used."""
        entry = self._entries.get(key)
        if entry is None:
            entry = CacheEntry()
            self._entries[key] = entry
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                self._evictions += 1
                logger.debug(f"Evicted cache entry {evicted[:12]}")
        else:
            self._entries.move_to_end(key)
        return entry

    def get_parsed(self, text: str) -> ParsedDocument:
        """
        Parse a document, reusing a cached result for identical text.

        Args:
            text: Full document text.

        Returns:
            ParsedDocument for text.
        """
        entry = self._entry(content_hash(text))
        if entry.parsed is not None:
            self._hits += 1
            return entry.parsed

        self._misses += 1
        entry.parsed = parse_document(text)
        return entry.parsed

    def get_formatted(self, text: str, sort: bool = False) -> OrganizeResult:
        """
        Reorganize a document, reusing a cached result for identical text.

        Args:
            text: Full document text.
            sort: Whether to sort transactions by date.

        Returns:
            OrganizeResult for text.

        Raises:
            ContentPreservationError: If reorganization fails its content
                check. Failures are not cached.
        """
        entry = self._entry(content_hash(text))
        cached = entry.organized.get(sort)
        if cached is not None:
            self._hits += 1
            return cached

        self._misses += 1
        if entry.parsed is None:
            entry.parsed = parse_document(text)
        result = organize_parsed(text, entry.parsed, sort=sort, config=self.config)
        entry.organized[sort] = result
        return result

    def invalidate(self, text: str) -> bool:
        """
        Drop cached results for a document text.

        Args:
            text: Document text whose entry should be removed.

        Returns:
            True if an entry was removed.
        """
        return self._entries.pop(content_hash(text), None) is not None

    def clear(self) -> None:
        """Drop every cached entry."""
        self._entries.clear()

    def stats(self) -> CacheStats:
        """Return current hit, miss and eviction counts."""
        return CacheStats(
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
            size=len(self._entries),
        )
