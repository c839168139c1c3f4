"""
Specification Search Index

Fuzzy index over chunk content and section titles, answering two
query modes:

1. search()       - ranked free-text fuzzy search, top-K
2. get_section()  - exact, case-sensitive section lookup

Matching is delegated to rapidfuzz. Each chunk is scored against the
query on both indexed fields (partial_ratio, or ratio for fields shorter
than the query); the better field wins.
A chunk matches when its distance (1 - ratio/100) is within threshold.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path

from rapidfuzz import fuzz, process, utils

from .chunker import DEFAULT_MAX_CHUNK_LINES, HeadingMode, chunk_markdown
from .config import (
    CACHE_INDEX,
    DEFAULT_SEARCH_LIMIT,
    HEADING_MODE,
    MAX_CHUNK_LINES_RAW,
    SEARCH_THRESHOLD_RAW,
    SPEC_DOCUMENT_PATH,
    parse_max_chunk_lines,
    parse_search_threshold,
)
from .errors import (
    DocumentUnreadable,
    IndexUnavailable,
    SearchExecutionFault,
    SectionNotFound,
)
from .models import DocumentChunk, SearchHit, SearchResults

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.3


class SpecIndex:
    """Immutable search index built from a list of chunks."""

    def __init__(
        self, chunks: list[DocumentChunk], threshold: float = DEFAULT_THRESHOLD
    ) -> None:
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {threshold}")
        self.chunks: tuple[DocumentChunk, ...] = tuple(chunks)
        self.threshold = threshold
        self._contents = {
            chunk.id: utils.default_process(chunk.content) for chunk in self.chunks
        }
        self._sections = {
            chunk.id: utils.default_process(chunk.section) for chunk in self.chunks
        }
        self._by_id = {chunk.id: chunk for chunk in self.chunks}

    def __len__(self) -> int:
        return len(self.chunks)

    def sections(self) -> list[str]:
        """Distinct section labels in document order."""
        return list(dict.fromkeys(chunk.section for chunk in self.chunks))

    @property
    def score_cutoff(self) -> float:
        """Lowest accepted ratio (0-100); distance <= threshold, without float drift."""
        return round((1.0 - self.threshold) * 100, 6)

    def match(self, query: str) -> list[SearchHit]:
        """
        Score every chunk against the query.

        A field at least as long as the query is searched for the query's
        best alignment (partial_ratio). A shorter field is compared whole
        (ratio), so a query that merely contains a short label is not a
        perfect match.

        Returns:
            All matching chunks, best first (ties broken by chunk id)

        Raises:
            SearchExecutionFault: If the matcher fails unexpectedly
        """
        score_cutoff = self.score_cutoff
        processed = utils.default_process(query)
        best: dict[int, float] = {}

        try:
            for field in (self._contents, self._sections):
                longer = {k: v for k, v in field.items() if len(v) >= len(processed)}
                shorter = {k: v for k, v in field.items() if len(v) < len(processed)}
                for choices, scorer in ((longer, fuzz.partial_ratio), (shorter, fuzz.ratio)):
                    for _, ratio, chunk_id in process.extract(
                        processed,
                        choices,
                        scorer=scorer,
                        processor=None,
                        score_cutoff=score_cutoff,
                        limit=None,
                    ):
                        best[chunk_id] = max(ratio, best.get(chunk_id, 0.0))
        except Exception as e:
            raise SearchExecutionFault(f"Fuzzy matching failed: {e}", cause=e)

        ranked = sorted(best.items(), key=lambda item: (-item[1], item[0]))
        hits = []
        for chunk_id, ratio in ranked:
            chunk = self._by_id[chunk_id]
            hits.append(
                SearchHit(
                    section=chunk.section,
                    line=chunk.line,
                    content=chunk.content,
                    score=round(ratio / 100, 4),
                )
            )
        return hits

    def search(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> SearchResults:
        """
        Top-K fuzzy search.

        total_results counts every match; results holds the best limit of
        them. An empty results list means no chunk matched.
        """
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        matches = self.match(query)
        return SearchResults(
            query=query, total_results=len(matches), results=matches[:limit]
        )

    def get_section(self, name: str) -> DocumentChunk:
        """
        First chunk whose section equals name exactly.

        Raises:
            SectionNotFound: If no chunk carries that section label
        """
        for chunk in self.chunks:
            if chunk.section == name:
                return chunk
        raise SectionNotFound(name)


# -----------------------------------------------------------------------------
# Document Loading
# -----------------------------------------------------------------------------


def read_document(path: Path) -> str:
    """
    Read the whole document into memory.

    Raises:
        DocumentUnreadable: If the file is missing or cannot be decoded
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentUnreadable(path, cause=e)


@dataclass(frozen=True)
class _CachedIndex:
    fingerprint: tuple[int, int]
    index: SpecIndex


class SpecIndexProvider:
    """
    Loads the document and builds a SpecIndex for each search call.

    By default every call re-reads and re-chunks the document. With
    cache_enabled, the last index is reused while the file's
    (mtime, size) fingerprint is unchanged. A rebuild is completed
    before the cached reference is swapped, so readers only ever see
    a whole index.
    """

    def __init__(
        self,
        document_path: Path,
        heading_mode: HeadingMode = HeadingMode.ANY,
        max_chunk_lines: int = DEFAULT_MAX_CHUNK_LINES,
        threshold: float = DEFAULT_THRESHOLD,
        cache_enabled: bool = False,
    ) -> None:
        self.document_path = Path(document_path)
        self.heading_mode = HeadingMode(heading_mode)
        self.max_chunk_lines = max_chunk_lines
        self.threshold = threshold
        self.cache_enabled = cache_enabled
        self._cached: _CachedIndex | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls) -> "SpecIndexProvider":
        """Build the provider described by environment configuration."""
        return cls(
            document_path=SPEC_DOCUMENT_PATH,
            heading_mode=HeadingMode(HEADING_MODE),
            max_chunk_lines=parse_max_chunk_lines(MAX_CHUNK_LINES_RAW),
            threshold=parse_search_threshold(SEARCH_THRESHOLD_RAW),
            cache_enabled=CACHE_INDEX,
        )

    def build(self, text: str) -> SpecIndex:
        chunks = chunk_markdown(text, self.heading_mode, self.max_chunk_lines)
        logger.debug(
            "Indexed %d chunks from %s (heading mode: %s)",
            len(chunks),
            self.document_path,
            self.heading_mode.value,
        )
        return SpecIndex(chunks, threshold=self.threshold)

    def load(self) -> SpecIndex | None:
        """Return a fresh (or still valid cached) index, or None if unreadable."""
        try:
            if self.cache_enabled:
                return self._load_cached()
            return self.build(read_document(self.document_path))
        except DocumentUnreadable as e:
            logger.warning("%s (%s)", e, e.cause)
            return None

    def require(self) -> SpecIndex:
        """
        Like load(), but signals a missing index.

        Raises:
            IndexUnavailable: If the document could not be loaded
        """
        index = self.load()
        if index is None:
            raise IndexUnavailable(
                "Specification index not initialized. "
                "The specification document could not be loaded."
            )
        return index

    def _fingerprint(self) -> tuple[int, int]:
        try:
            stat = self.document_path.stat()
        except OSError as e:
            raise DocumentUnreadable(self.document_path, cause=e)
        return stat.st_mtime_ns, stat.st_size

    def _load_cached(self) -> SpecIndex:
        fingerprint = self._fingerprint()
        cached = self._cached
        if cached is not None and cached.fingerprint == fingerprint:
            return cached.index

        with self._lock:
            cached = self._cached
            if cached is not None and cached.fingerprint == fingerprint:
                return cached.index
            index = self.build(read_document(self.document_path))
            self._cached = _CachedIndex(fingerprint, index)
            return index

    def invalidate(self) -> None:
        """Drop any cached index."""
        with self._lock:
            self._cached = None
