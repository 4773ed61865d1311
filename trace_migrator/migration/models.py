"""Data models for Selenium trace migration."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


STEP_OK = "step.ok"


class TargetFramework(str, Enum):
    """Supported target test frameworks."""

    PLAYWRIGHT = "playwright"
    CYPRESS = "cypress"


class TargetLanguage(str, Enum):
    """Languages generated test files can be written in."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    PYTHON = "python"


class LocatorKind(str, Enum):
    """Variants of a parsed WebDriver locator."""

    BY_NAME = "by_name"
    BY_CSS = "by_css"
    BY_XPATH = "by_xpath"
    BY_TAG_NAME = "by_tag_name"
    BY_ID = "by_id"
    BY_CLASS = "by_class"
    RAW_URL = "raw_url"
    OPAQUE = "opaque"


@dataclass(frozen=True)
class TraceEvent:
    """A single decoded trace line."""

    event_type: str
    action_kind: str
    target: Optional[str] = None
    duration_ms: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict) -> "TraceEvent":
        """Create TraceEvent from a decoded JSON record."""
        target = data.get("target")
        duration = data.get("durationMs")
        return cls(
            event_type=str(data.get("evt", "")),
            action_kind=str(data.get("kind", "")),
            target=str(target) if target is not None else None,
            duration_ms=duration if isinstance(duration, (int, float)) and not isinstance(duration, bool) else None,
        )

    @property
    def is_step_ok(self) -> bool:
        return self.event_type == STEP_OK


@dataclass(frozen=True)
class Locator:
    """A parsed locator: exactly one kind plus its value."""

    kind: LocatorKind
    value: str

    def render(self) -> str:
        """Render the locator as a selector in the target framework dialect."""
        if self.kind == LocatorKind.BY_NAME:
            return f'[name="{self.value}"]'
        if self.kind == LocatorKind.BY_XPATH:
            return f"xpath={self.value}"
        if self.kind == LocatorKind.BY_ID:
            return f"#{self.value}"
        if self.kind == LocatorKind.BY_CLASS:
            return f".{self.value}"
        # css, tag name, url and opaque values are used as-is
        return self.value


@dataclass(frozen=True)
class GeneratedFragment:
    """One generated statement plus the comment placed above it."""

    code_line: str
    comment: str


@dataclass
class TranslationStats:
    """Running statistics for one conversion."""

    total_actions: int = 0
    converted_actions: int = 0
    skipped_actions: int = 0
    action_breakdown: dict[str, int] = field(default_factory=dict)

    def record(self, action_kind: str, counted: bool = True) -> None:
        """Record a step.ok event of the given kind."""
        self.action_breakdown[action_kind] = self.action_breakdown.get(action_kind, 0) + 1
        if counted:
            self.total_actions += 1

    def to_dict(self) -> dict:
        """Convert to the external statistics record."""
        return {
            "totalActions": self.total_actions,
            "convertedActions": self.converted_actions,
            "skippedActions": self.skipped_actions,
            "actionBreakdown": dict(self.action_breakdown),
        }


@dataclass
class TranslationState:
    """Cross-event context for a single conversion run.

    Attributes:
        current_origin: Origin of the most recent ``get`` navigation
        navigation_history: Origins of every ``get`` navigation, in order
        stats: Running conversion statistics
    """

    current_origin: Optional[str] = None
    navigation_history: list[Optional[str]] = field(default_factory=list)
    stats: TranslationStats = field(default_factory=TranslationStats)

    def record_navigation(self, origin: Optional[str]) -> None:
        """Track a ``get`` navigation to the given origin."""
        self.navigation_history.append(origin)
        self.current_origin = origin

    @property
    def previous_origin(self) -> Optional[str]:
        """Origin visited before the current one, if any."""
        if len(self.navigation_history) > 1:
            return self.navigation_history[-2]
        return None


@dataclass(frozen=True)
class ConversionResult:
    """Result of converting one trace.

    Attributes:
        source: Generated test source document
        filename: Suggested file name for the document
        stats: Conversion statistics
        framework: Framework the code was generated for
        language: Language the code was generated in (after fallback)
    """

    source: str
    filename: str
    stats: TranslationStats
    framework: TargetFramework
    language: TargetLanguage

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "content": self.source,
            "filename": self.filename,
            "framework": self.framework.value,
            "language": self.language.value,
            "stats": self.stats.to_dict(),
        }


@dataclass(frozen=True)
class TraceAnalysis:
    """Summary of a trace before conversion."""

    total_steps: int = 0
    supported_steps: int = 0
    unsupported_steps: int = 0
    conversion_rate: int = 0
    action_types: dict[str, int] = field(default_factory=dict)
    file_size: int = 0
    file_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API response."""
        return {
            "totalSteps": self.total_steps,
            "supportedSteps": self.supported_steps,
            "unsupportedSteps": self.unsupported_steps,
            "conversionRate": self.conversion_rate,
            "actionTypes": dict(self.action_types),
            "fileSize": self.file_size,
            "fileName": self.file_name,
        }
