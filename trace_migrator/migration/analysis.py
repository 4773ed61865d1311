"""Pre-conversion trace analysis."""

import math
from typing import Optional

import structlog

from .capabilities import BASE_SUPPORTED_ACTIONS, get_capabilities
from .models import TargetFramework, TraceAnalysis
from .trace_reader import iter_trace_events

logger = structlog.get_logger()


def analyze_trace(
    text: str,
    file_name: str = "",
    framework: Optional[str | TargetFramework] = None,
) -> TraceAnalysis:
    """Summarize how much of a trace can be converted.

    Args:
        text: NDJSON trace content
        file_name: Original name of the uploaded trace
        framework: Measure support against this framework; the actions all
            frameworks share are used when omitted

    Returns:
        TraceAnalysis with step counts and per-action totals
    """
    supported = (
        get_capabilities(framework).supported_actions if framework else BASE_SUPPORTED_ACTIONS
    )

    total_steps = 0
    supported_steps = 0
    action_types: dict[str, int] = {}

    for event in iter_trace_events(text):
        total_steps += 1
        action_types[event.action_kind] = action_types.get(event.action_kind, 0) + 1
        if event.action_kind in supported:
            supported_steps += 1

    # Half-up rounding, so 12.5% reports as 13
    conversion_rate = math.floor(supported_steps / total_steps * 100 + 0.5) if total_steps else 0

    analysis = TraceAnalysis(
        total_steps=total_steps,
        supported_steps=supported_steps,
        unsupported_steps=total_steps - supported_steps,
        conversion_rate=conversion_rate,
        action_types=action_types,
        file_size=len(text.encode("utf-8")),
        file_name=file_name,
    )

    logger.info(
        "Trace analyzed",
        file_name=file_name,
        total_steps=total_steps,
        conversion_rate=conversion_rate,
    )
    return analysis
