"""Selenium trace reading and filtering.

Traces are NDJSON: one JSON object per line with ``evt``, ``kind``,
``target`` and ``durationMs`` fields. Noisy or truncated lines are common
in recorded traces, so lines that fail to decode are dropped without
error. Only ``step.ok`` events reach the translator.
"""

import asyncio
import json
import os
from pathlib import Path
from typing import Iterator, Union

import structlog

from .models import TraceEvent

logger = structlog.get_logger()

TraceSource = Union[str, os.PathLike, bytes]


class TraceReadError(Exception):
    """Exception raised when a trace source cannot be read as text."""

    pass


def iter_trace_events(text: str) -> Iterator[TraceEvent]:
    """Lazily decode ``step.ok`` events from trace text.

    Calling again with the same text restarts the iteration.

    Args:
        text: Full trace content

    Yields:
        TraceEvent for every decodable ``step.ok`` line, in order
    """
    for line in text.splitlines():
        if not line.strip():
            continue
        try:
            record = json.loads(line)
        except ValueError:
            continue
        if not isinstance(record, dict):
            continue

        event = TraceEvent.from_dict(record)
        if event.is_step_ok:
            yield event


def read_trace_events(text: str) -> list[TraceEvent]:
    """Decode all ``step.ok`` events from trace text."""
    return list(iter_trace_events(text))


def _read_source(source: TraceSource, encoding: str) -> str:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode(encoding)
    return Path(source).read_text(encoding=encoding)


async def load_trace(source: TraceSource, encoding: str = "utf-8") -> str:
    """Read a trace source to completion.

    Args:
        source: Path to a trace file, or the raw trace bytes
        encoding: Text encoding of the trace

    Returns:
        Decoded trace text

    Raises:
        TraceReadError: If the source cannot be opened or decoded
    """
    try:
        text = await asyncio.to_thread(_read_source, source, encoding)
    except (OSError, ValueError, LookupError, TypeError) as e:
        description = "<bytes>" if isinstance(source, (bytes, bytearray)) else str(source)
        raise TraceReadError(f"Cannot read trace {description}: {e}") from e

    logger.debug("Trace loaded", size_bytes=len(text.encode(encoding)))
    return text
