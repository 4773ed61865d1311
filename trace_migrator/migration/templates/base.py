"""Base template class for generated test documents."""

import re
from abc import ABC, abstractmethod
from typing import Any

from ..locator import escape_double_quotes
from ..models import GeneratedFragment, TargetFramework, TargetLanguage

DEFAULT_SMOKE_TEST_URL = "https://www.selenium.dev/selenium/web/web-form.html"

MIGRATED_TEST_NOTE = "This test was automatically migrated from Selenium trace"


class BaseTemplate(ABC):
    """Base class for framework/language templates.

    A template renders single statements for the action mapper and
    assembles the translated fragments into a complete test document,
    including the fixed smoke tests appended to every conversion.
    """

    # Override these in subclasses
    language: TargetLanguage
    framework: TargetFramework
    body_indent: str = "    "
    comment_prefix: str = "//"

    def __init__(self, config: Any = None):
        """Initialize template with optional config."""
        self.config = config or {}

    @property
    def smoke_test_url(self) -> str:
        return self.config.get("smoke_test_url") or DEFAULT_SMOKE_TEST_URL

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    @abstractmethod
    def render_navigate(self, url: str) -> str:
        """Navigate to a URL."""

    @abstractmethod
    def render_click(self, selector: str) -> str:
        """Click an element."""

    @abstractmethod
    def render_select_option(self, selector: str, label: str) -> str:
        """Select a dropdown option by its visible label."""

    @abstractmethod
    def render_fill(self, selector: str, value: str) -> str:
        """Type a value into an input."""

    @abstractmethod
    def render_clear(self, selector: str) -> str:
        """Clear an input."""

    @abstractmethod
    def render_assert_visible(self, selector: str) -> str:
        """Assert an element is visible."""

    @abstractmethod
    def render_reload(self) -> str:
        """Reload the page."""

    @abstractmethod
    def render_go_back(self) -> str:
        """Navigate back in history."""

    @abstractmethod
    def render_go_forward(self) -> str:
        """Navigate forward in history."""

    def render_comment(self, text: str) -> str:
        """Render a comment-only statement."""
        return f"{self.comment_prefix} {self._single_line(text)}"

    def render_disabled(self, statement: str, reason: str) -> str:
        """Render a statement commented out, with the reason it was disabled."""
        return f"{self.comment_prefix} {statement} - {reason}"

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    @abstractmethod
    def generate_imports(self) -> str:
        """Generate the header/import block."""

    @abstractmethod
    def generate_test_header(self) -> str:
        """Open the migrated test case."""

    @abstractmethod
    def generate_test_footer(self) -> str:
        """Close the migrated test case, including its final check."""

    @abstractmethod
    def generate_smoke_tests(self) -> str:
        """Generate the fixed form-interaction and navigation smoke tests."""

    def generate(self, fragments: list[GeneratedFragment]) -> str:
        """Generate the complete test document.

        Args:
            fragments: Translated fragments, in trace order

        Returns:
            Test source document
        """
        parts = []

        imports = self.generate_imports()
        if imports:
            parts.append(imports)
            parts.append("")

        parts.append(self.generate_test_header())
        parts.append("\n\n".join(self.format_fragment(f) for f in fragments))
        parts.append(self.generate_test_footer())
        parts.append("")
        parts.append(self.generate_smoke_tests())

        return "\n".join(parts)

    def format_fragment(self, fragment: GeneratedFragment) -> str:
        """Format one fragment as a comment line followed by its statement."""
        return (
            f"{self.body_indent}{self.comment_prefix} {self._single_line(fragment.comment)}\n"
            f"{self.body_indent}{fragment.code_line}"
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def escape_string(self, value: str) -> str:
        """Escape a value for a double-quoted string literal.

        Only ``"`` is escaped; other characters pass through unchanged.
        """
        return escape_double_quotes(value)

    def quote(self, value: str) -> str:
        """Wrap a value in a double-quoted string literal."""
        return f'"{self.escape_string(value)}"'

    def quote_single(self, value: str) -> str:
        """Wrap a value in a single-quoted JavaScript string literal."""
        escaped = (value or "").replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"

    def _single_line(self, text: str) -> str:
        """Collapse line breaks so comments stay on one line."""
        return re.sub(r"\s*[\r\n]+\s*", " ", text or "")
