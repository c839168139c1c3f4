"""
Markdown Chunker

Splits a markdown document into an ordered sequence of DocumentChunks.

Algorithm:
  - Scan line by line, accumulating a buffer under the current section label
  - A heading line closes the buffer and opens a new one starting at the heading
  - A buffer that reaches max_lines is flushed without a heading boundary;
    the next buffer keeps the same section label
  - Whitespace-only buffers never become chunks

Which lines count as headings is controlled by HeadingMode.
"""

from __future__ import annotations

import re
from enum import Enum

from .config import DEFAULT_SECTION
from .models import DocumentChunk

DEFAULT_MAX_CHUNK_LINES = 500


class HeadingMode(str, Enum):
    """Which markdown headings close a chunk."""

    ANY = "any"  # "#", "##", "###", ...
    H1 = "h1"  # "#" only

    @property
    def pattern(self) -> re.Pattern[str]:
        return _HEADING_PATTERNS[self]


_HEADING_PATTERNS: dict[HeadingMode, re.Pattern[str]] = {
    HeadingMode.ANY: re.compile(r"^#+ (.*)$"),
    HeadingMode.H1: re.compile(r"^# (.*)$"),
}


def chunk_markdown(
    text: str,
    heading_mode: HeadingMode = HeadingMode.ANY,
    max_lines: int = DEFAULT_MAX_CHUNK_LINES,
) -> list[DocumentChunk]:
    """
    Convert raw markdown into ordered chunks.

    Args:
        text: Full document text
        heading_mode: Heading rule for chunk boundaries
        max_lines: Upper bound on lines per chunk

    Returns:
        Chunks with contiguous zero-based ids, ordered by line

    Raises:
        ValueError: If max_lines is not positive
    """
    if max_lines < 1:
        raise ValueError(f"max_lines must be positive, got {max_lines}")

    pattern = HeadingMode(heading_mode).pattern
    chunks: list[DocumentChunk] = []
    section = DEFAULT_SECTION
    buffer: list[tuple[int, str]] = []

    def flush() -> None:
        content = "\n".join(line for _, line in buffer).strip()
        if content:
            first_line = next(number for number, line in buffer if line.strip())
            chunks.append(
                DocumentChunk(
                    id=len(chunks),
                    section=section,
                    line=first_line,
                    content=content,
                )
            )
        buffer.clear()

    # Only "\n" ends a line; other separators str.splitlines() knows stay in content
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    for number, raw_line in enumerate(lines, start=1):
        line = raw_line[:-1] if raw_line.endswith("\r") else raw_line
        match = pattern.match(line)
        if match:
            flush()
            section = match.group(1).strip() or section

        buffer.append((number, line))

        if len(buffer) >= max_lines:
            flush()

    flush()
    return chunks
