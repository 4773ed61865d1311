"""Selenium trace migration module.

Converts recorded Selenium WebDriver traces (NDJSON, one event per line)
into runnable tests for modern end-to-end frameworks.

Supported combinations:
- Playwright: JavaScript, TypeScript, Python
- Cypress: JavaScript, TypeScript

Example:
    from trace_migrator.migration import TraceConverter

    converter = TraceConverter("playwright")
    result = await converter.convert("session.ndjson", language="python")
    print(result.filename)
    print(result.source)
"""

from .analysis import analyze_trace
from .capabilities import (
    CYPRESS,
    PLAYWRIGHT,
    FrameworkCapabilities,
    UnsupportedFrameworkError,
    get_capabilities,
)
from .converter import TraceConverter, convert_trace, get_converter, get_supported_frameworks
from .locator import extract_origin, parse_locator, render_selector
from .models import (
    ConversionResult,
    GeneratedFragment,
    Locator,
    LocatorKind,
    TargetFramework,
    TargetLanguage,
    TraceAnalysis,
    TraceEvent,
    TranslationState,
    TranslationStats,
)
from .scaffold import build_scaffold
from .trace_reader import TraceReadError, iter_trace_events, load_trace, read_trace_events

__all__ = [
    # Converter
    "TraceConverter",
    "convert_trace",
    "get_converter",
    "get_supported_frameworks",
    # Capabilities
    "FrameworkCapabilities",
    "PLAYWRIGHT",
    "CYPRESS",
    "get_capabilities",
    "UnsupportedFrameworkError",
    # Reading
    "iter_trace_events",
    "read_trace_events",
    "load_trace",
    "TraceReadError",
    # Locators
    "parse_locator",
    "render_selector",
    "extract_origin",
    # Analysis and scaffold
    "analyze_trace",
    "build_scaffold",
    # Models
    "ConversionResult",
    "GeneratedFragment",
    "Locator",
    "LocatorKind",
    "TargetFramework",
    "TargetLanguage",
    "TraceAnalysis",
    "TraceEvent",
    "TranslationState",
    "TranslationStats",
]
