"""JavaScript Playwright test template."""

from ..models import TargetFramework, TargetLanguage
from .base import BaseTemplate, MIGRATED_TEST_NOTE


class JavaScriptPlaywrightTemplate(BaseTemplate):
    """Template for JavaScript Playwright Test specs."""

    language = TargetLanguage.JAVASCRIPT
    framework = TargetFramework.PLAYWRIGHT
    body_indent = "    "

    def render_navigate(self, url: str) -> str:
        return f"await page.goto({self.quote(url)});"

    def render_click(self, selector: str) -> str:
        return f"await page.click({self.quote(selector)});"

    def render_select_option(self, selector: str, label: str) -> str:
        return f"await page.selectOption({self.quote(selector)}, {{ label: {self.quote(label)} }});"

    def render_fill(self, selector: str, value: str) -> str:
        return f"await page.fill({self.quote(selector)}, {self.quote(value)});"

    def render_clear(self, selector: str) -> str:
        return self.render_fill(selector, "")

    def render_assert_visible(self, selector: str) -> str:
        return f"await expect(page.locator({self.quote(selector)})).toBeVisible();"

    def render_reload(self) -> str:
        return "await page.reload();"

    def render_go_back(self) -> str:
        return "await page.goBack();"

    def render_go_forward(self) -> str:
        return "await page.goForward();"

    def generate_imports(self) -> str:
        """Generate CommonJS imports."""
        return "const { test, expect } = require('@playwright/test');"

    def generate_test_header(self) -> str:
        return "\n".join([
            "test('Migrated Selenium Test', async ({ page }) => {",
            f"    // {MIGRATED_TEST_NOTE}",
            "",
        ])

    def generate_test_footer(self) -> str:
        return "\n".join([
            "",
            "    // Add final verification",
            "    await expect(page).toHaveURL(/.+/);",
            "});",
        ])

    def generate_smoke_tests(self) -> str:
        url = self.quote_single(self.smoke_test_url)
        return f"""test.describe('Additional Test Scenarios', () => {{
    test('Form Interaction Test', async ({{ page }}) => {{
        // Simplified form interaction test
        await page.goto({url});

        await page.fill('[name="my-text"]', 'Sample text input');
        await page.fill('[name="my-password"]', 'testPassword123');
        await page.selectOption('[name="my-select"]', {{ label: 'Two' }});
        await page.check('input[type="checkbox"]');

        await expect(page.locator('[name="my-text"]')).toHaveValue('Sample text input');
        await expect(page.locator('input[type="checkbox"]')).toBeChecked();
    }});

    test('Same-Origin Navigation Test', async ({{ page }}) => {{
        // Navigation within a single origin
        await page.goto({url});
        await expect(page.locator('[name="my-text"]')).toBeVisible();

        await expect(page).toHaveURL(/selenium\\.dev/);
        await expect(page).toHaveTitle(/Web form/);
    }});
}});"""
