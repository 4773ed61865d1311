"""Action mapping - translate trace events into test statements.

One mapper serves every framework. What differs between frameworks
(navigation guards, waiting, counting policy) comes from the
``FrameworkCapabilities`` descriptor, and how a statement is spelled comes
from the template.
"""

import re
from typing import Optional

import structlog

from .capabilities import WAIT_ACTION, FrameworkCapabilities
from .locator import extract_origin, render_selector
from .models import GeneratedFragment, TraceEvent, TranslationState
from .templates import BaseTemplate

logger = structlog.get_logger()

OPTION_PARENT_PATTERN = re.compile(r"^(.+?) option")
HAS_TEXT_PATTERN = re.compile(r':has-text\("(.+?)"\)')

# Substring of the selector -> value typed into the field. Order matters:
# the first matching substring wins.
INPUT_VALUE_GUESSES: tuple[tuple[str, str], ...] = (
    ("password", "testPassword123"),
    ("email", "test@example.com"),
    ("text", "Sample text input"),
    ("textarea", "This is sample textarea content"),
    ("name", "John Doe"),
)
DEFAULT_INPUT_VALUE = "test-value"


def guess_input_value(selector: str) -> str:
    """Fabricate a value for a ``sendKeys`` step.

    Selenium traces do not record the typed text, so this is a heuristic
    based on the selector alone, not a replay of the session.
    """
    for needle, value in INPUT_VALUE_GUESSES:
        if needle in selector:
            return value
    return DEFAULT_INPUT_VALUE


class ActionMapper:
    """Maps ``step.ok`` events to generated fragments.

    Example:
        mapper = ActionMapper(PLAYWRIGHT, JavaScriptPlaywrightTemplate())
        state = TranslationState()
        fragment = mapper.map_event(event, state)
    """

    def __init__(self, capabilities: FrameworkCapabilities, template: BaseTemplate):
        """Initialize mapper.

        Args:
            capabilities: Descriptor of the target framework
            template: Template that renders statements for the target language
        """
        self.capabilities = capabilities
        self.template = template
        self.log = logger.bind(
            component="action_mapper",
            framework=capabilities.framework.value,
        )

    def map_event(self, event: TraceEvent, state: TranslationState) -> Optional[GeneratedFragment]:
        """Translate one event, updating statistics and navigation state.

        Args:
            event: A ``step.ok`` trace event
            state: Translation state of the running conversion

        Returns:
            The generated fragment, or None for auto-handled actions
        """
        kind = event.action_kind
        auto_handled = kind in self.capabilities.auto_handled_actions
        state.stats.record(kind, counted=not auto_handled)

        if kind in self.capabilities.supported_actions:
            fragment = self._translate(event, state)
            state.stats.converted_actions += 1
            return fragment

        if auto_handled:
            self.log.debug("Auto-handled action omitted", action=kind)
            return None

        state.stats.skipped_actions += 1
        self.log.debug("Unsupported action", action=kind)
        return GeneratedFragment(
            code_line=self.template.render_comment(f"Unsupported action: {kind}"),
            comment=f"Original target: {event.target or 'N/A'}",
        )

    def _translate(self, event: TraceEvent, state: TranslationState) -> GeneratedFragment:
        """Translate a supported action."""
        kind = event.action_kind
        selector = render_selector(event.target)
        template = self.template

        if kind == "get":
            # Navigations without a URL leave the history untouched
            if selector:
                state.record_navigation(extract_origin(selector))
            return GeneratedFragment(
                code_line=template.render_navigate(selector),
                comment=f"Navigate to {selector}",
            )

        if kind == "click":
            return self._translate_click(event, selector)

        if kind == "sendKeys":
            return GeneratedFragment(
                code_line=template.render_fill(selector, guess_input_value(selector)),
                comment="Fill input field",
            )

        if kind == "clear":
            return GeneratedFragment(
                code_line=template.render_clear(selector),
                comment="Clear input field",
            )

        if kind == "getTagName":
            return GeneratedFragment(
                code_line=template.render_assert_visible(selector),
                comment="Verify element is visible",
            )

        if kind == "Navigation.refresh":
            return GeneratedFragment(
                code_line=template.render_reload(),
                comment="Refresh page",
            )

        if kind == "Navigation.back":
            return self._translate_back(state)

        if kind == "Navigation.forward":
            if not self.capabilities.supports_forward_nav:
                return GeneratedFragment(
                    code_line=template.render_disabled(
                        template.render_go_forward(),
                        "Skipped due to potential cross-origin navigation",
                    ),
                    comment="Navigate forward (skipped - cross-origin)",
                )
            return GeneratedFragment(
                code_line=template.render_go_forward(),
                comment="Navigate forward",
            )

        # Wait.until, only supported by auto-waiting frameworks
        return GeneratedFragment(
            code_line=template.render_comment(
                f"{WAIT_ACTION} handled by {self.capabilities.display_name} auto-waiting"
            ),
            comment="Wait for condition",
        )

    def _translate_click(self, event: TraceEvent, selector: str) -> GeneratedFragment:
        """Translate a click, turning clicks on dropdown options into selections."""
        if "option" in selector:
            parent_match = OPTION_PARENT_PATTERN.match(selector)
            text_match = HAS_TEXT_PATTERN.search(selector)
            if parent_match and text_match:
                return GeneratedFragment(
                    code_line=self.template.render_select_option(
                        parent_match.group(1), text_match.group(1)
                    ),
                    comment="Select option by text",
                )

        comment = "Click element"
        if event.duration_ms is not None:
            duration = event.duration_ms
            # Large JSON integers do not fit in a float
            if isinstance(duration, float) and duration.is_integer():
                duration = int(duration)
            comment = f"Click element ({duration}ms)"
        return GeneratedFragment(
            code_line=self.template.render_click(selector),
            comment=comment,
        )

    def _translate_back(self, state: TranslationState) -> GeneratedFragment:
        """Translate back navigation, guarding cross-origin history where needed."""
        if not self.capabilities.supports_reliable_back_nav:
            previous_origin = state.previous_origin
            if previous_origin and previous_origin != state.current_origin:
                self.log.debug(
                    "Cross-origin back navigation disabled",
                    previous_origin=previous_origin,
                    current_origin=state.current_origin,
                )
                return GeneratedFragment(
                    code_line=self.template.render_disabled(
                        self.template.render_go_back(),
                        "Skipped due to cross-origin navigation",
                    ),
                    comment="Navigate back (skipped - cross-origin)",
                )

        return GeneratedFragment(
            code_line=self.template.render_go_back(),
            comment="Navigate back",
        )
