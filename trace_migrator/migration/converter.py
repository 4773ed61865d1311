"""Trace converter - main entry point for trace migration."""

from typing import Optional

import structlog

from ..config import get_settings
from ..utils.logging import log_operation
from .action_mapper import ActionMapper
from .capabilities import (
    FRAMEWORK_CAPABILITIES,
    FrameworkCapabilities,
    get_capabilities,
)
from .formatters import CodeFormatter
from .models import (
    ConversionResult,
    GeneratedFragment,
    TargetFramework,
    TargetLanguage,
    TranslationState,
)
from .templates import (
    BaseTemplate,
    JavaScriptCypressTemplate,
    JavaScriptPlaywrightTemplate,
    PythonPlaywrightTemplate,
    TypeScriptCypressTemplate,
    TypeScriptPlaywrightTemplate,
)
from .trace_reader import TraceSource, iter_trace_events, load_trace

logger = structlog.get_logger()


def _language_name(language) -> str:
    return str(getattr(language, "value", language))


# Template registry mapping (framework, language) to template class
TEMPLATE_REGISTRY: dict[tuple[TargetFramework, TargetLanguage], type[BaseTemplate]] = {
    (template.framework, template.language): template
    for template in (
        JavaScriptPlaywrightTemplate,
        TypeScriptPlaywrightTemplate,
        PythonPlaywrightTemplate,
        JavaScriptCypressTemplate,
        TypeScriptCypressTemplate,
    )
}


class TraceConverter:
    """Converts Selenium traces into tests for one target framework.

    The conversion is a single pass:
    1. Read the trace and keep decodable ``step.ok`` events
    2. Map each event to a fragment, tracking navigation and statistics
    3. Assemble the fragments into a test document
    4. Format the output

    Each call owns a fresh ``TranslationState``, so one converter can
    serve concurrent conversions.

    Example:
        converter = TraceConverter("cypress")
        result = await converter.convert("trace.ndjson", language="typescript")
        print(result.filename)
        print(result.stats.to_dict())
    """

    def __init__(
        self,
        framework: str | TargetFramework = TargetFramework.PLAYWRIGHT,
        smoke_test_url: Optional[str] = None,
        encoding: Optional[str] = None,
    ):
        """Initialize the converter.

        Args:
            framework: Target framework name
            smoke_test_url: Page used by the appended smoke tests (settings default)
            encoding: Trace text encoding (settings default)

        Raises:
            UnsupportedFrameworkError: If the framework is unknown
        """
        self.capabilities: FrameworkCapabilities = get_capabilities(framework)
        settings = get_settings()
        self.smoke_test_url = smoke_test_url or settings.smoke_test_url
        self.encoding = encoding or settings.trace_encoding
        self.log = logger.bind(
            component="trace_converter",
            framework=self.capabilities.framework.value,
        )

    @property
    def framework(self) -> TargetFramework:
        return self.capabilities.framework

    def create_template(self, language: TargetLanguage) -> BaseTemplate:
        """Create the template for a resolved language."""
        template_class = TEMPLATE_REGISTRY[(self.framework, language)]
        return template_class(config={"smoke_test_url": self.smoke_test_url})

    async def convert(
        self,
        source: TraceSource,
        language: Optional[str | TargetLanguage] = None,
    ) -> ConversionResult:
        """Read a trace source and convert it.

        Args:
            source: Path to an NDJSON trace, or its raw bytes
            language: Target language (falls back to the framework default)

        Returns:
            ConversionResult with source, filename and statistics

        Raises:
            TraceReadError: If the trace cannot be read as text
        """
        with log_operation(
            "convert_trace",
            logger=self.log,
            language=self.capabilities.resolve_language(language).value,
        ) as op:
            text = await load_trace(source, encoding=self.encoding)
            result = self.convert_text(text, language)
            op["filename"] = result.filename
            op["stats"] = result.stats.to_dict()
        return result

    def convert_text(
        self,
        text: str,
        language: Optional[str | TargetLanguage] = None,
    ) -> ConversionResult:
        """Convert already-loaded trace text.

        Args:
            text: NDJSON trace content
            language: Target language (falls back to the framework default)

        Returns:
            ConversionResult with source, filename and statistics
        """
        resolved = self.capabilities.resolve_language(language)
        if language is not None and resolved.value != _language_name(language).lower():
            self.log.info(
                "Language not supported, using default",
                requested=_language_name(language),
                language=resolved.value,
            )

        template = self.create_template(resolved)
        mapper = ActionMapper(self.capabilities, template)
        state = TranslationState()

        fragments: list[GeneratedFragment] = []
        for event in iter_trace_events(text):
            fragment = mapper.map_event(event, state)
            if fragment:
                fragments.append(fragment)

        code = template.generate(fragments)
        code = CodeFormatter().format_code(code)

        return ConversionResult(
            source=code,
            filename=self.capabilities.filename_for(resolved),
            stats=state.stats,
            framework=self.framework,
            language=resolved,
        )


def get_converter(framework: str | TargetFramework, **converter_kwargs) -> TraceConverter:
    """Create a converter for a framework.

    Raises:
        UnsupportedFrameworkError: If the framework is unknown
    """
    return TraceConverter(framework, **converter_kwargs)


async def convert_trace(
    source: TraceSource,
    framework: Optional[str] = None,
    language: Optional[str] = None,
    **converter_kwargs,
) -> ConversionResult:
    """Quick conversion function.

    Args:
        source: Path to an NDJSON trace, or its raw bytes
        framework: Target framework (settings default when omitted)
        language: Target language (settings default when omitted)
        **converter_kwargs: Additional TraceConverter options

    Returns:
        ConversionResult
    """
    settings = get_settings()
    converter = get_converter(framework or settings.default_framework, **converter_kwargs)
    return await converter.convert(source, language or settings.default_language)


def get_supported_frameworks() -> dict[str, dict]:
    """Describe every supported framework and its languages.

    Returns:
        Dict mapping framework names to catalog entries
    """
    return {
        framework.value: capabilities.to_catalog_entry()
        for framework, capabilities in FRAMEWORK_CAPABILITIES.items()
    }
