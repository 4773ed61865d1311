"""Python Playwright test template."""

from ..models import TargetFramework, TargetLanguage
from .base import BaseTemplate, MIGRATED_TEST_NOTE


class PythonPlaywrightTemplate(BaseTemplate):
    """Template for pytest + async Playwright tests.

    Each test launches its own browser inside ``async_playwright()`` and
    closes it explicitly, so the generated file runs without the
    pytest-playwright page fixture.
    """

    language = TargetLanguage.PYTHON
    framework = TargetFramework.PLAYWRIGHT
    body_indent = "        "
    comment_prefix = "#"

    def render_navigate(self, url: str) -> str:
        return f"await page.goto({self.quote(url)})"

    def render_click(self, selector: str) -> str:
        return f"await page.click({self.quote(selector)})"

    def render_select_option(self, selector: str, label: str) -> str:
        return f"await page.select_option({self.quote(selector)}, label={self.quote(label)})"

    def render_fill(self, selector: str, value: str) -> str:
        return f"await page.fill({self.quote(selector)}, {self.quote(value)})"

    def render_clear(self, selector: str) -> str:
        return self.render_fill(selector, "")

    def render_assert_visible(self, selector: str) -> str:
        return f"await expect(page.locator({self.quote(selector)})).to_be_visible()"

    def render_reload(self) -> str:
        return "await page.reload()"

    def render_go_back(self) -> str:
        return "await page.go_back()"

    def render_go_forward(self) -> str:
        return "await page.go_forward()"

    def generate_imports(self) -> str:
        """Generate Python imports."""
        return "\n".join([
            "import re",
            "",
            "import pytest",
            "from playwright.async_api import async_playwright, expect",
            "",
        ])

    def generate_test_header(self) -> str:
        return "\n".join([
            "@pytest.mark.asyncio",
            "async def test_migrated_selenium_test():",
            f'    """{MIGRATED_TEST_NOTE}"""',
            "    async with async_playwright() as p:",
            "        browser = await p.chromium.launch()",
            "        page = await browser.new_page()",
            "",
        ])

    def generate_test_footer(self) -> str:
        return "\n".join([
            "",
            "        # Add final verification",
            '        await expect(page).to_have_url(re.compile(r".+"))',
            "",
            "        await browser.close()",
        ])

    def generate_smoke_tests(self) -> str:
        url = self.escape_string(self.smoke_test_url)
        return f"""
@pytest.mark.asyncio
async def test_form_interaction():
    \"\"\"Simplified form interaction test\"\"\"
    async with async_playwright() as p:
        browser = await p.chromium.launch()
        page = await browser.new_page()

        await page.goto("{url}")

        await page.fill('[name="my-text"]', "Sample text input")
        await page.fill('[name="my-password"]', "testPassword123")
        await page.select_option('[name="my-select"]', label="Two")
        await page.check('input[type="checkbox"]')

        await expect(page.locator('[name="my-text"]')).to_have_value("Sample text input")
        await expect(page.locator('input[type="checkbox"]')).to_be_checked()

        await browser.close()


@pytest.mark.asyncio
async def test_same_origin_navigation():
    \"\"\"Navigation within a single origin\"\"\"
    async with async_playwright() as p:
        browser = await p.chromium.launch()
        page = await browser.new_page()

        await page.goto("{url}")
        await expect(page.locator('[name="my-text"]')).to_be_visible()

        await expect(page).to_have_url(re.compile(r"selenium\\.dev"))
        await expect(page).to_have_title(re.compile(r"Web form"))

        await browser.close()"""
