"""TypeScript Playwright test template."""

from ..models import TargetLanguage
from .javascript_playwright import JavaScriptPlaywrightTemplate


class TypeScriptPlaywrightTemplate(JavaScriptPlaywrightTemplate):
    """Template for TypeScript Playwright Test specs.

    Statements are identical to JavaScript; only the module syntax differs.
    """

    language = TargetLanguage.TYPESCRIPT

    def generate_imports(self) -> str:
        """Generate ES module imports."""
        return "import { test, expect } from '@playwright/test';"
