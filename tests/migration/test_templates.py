"""Tests for test document templates and the code formatter."""

import pytest

from trace_migrator.migration.formatters import CodeFormatter
from trace_migrator.migration.models import GeneratedFragment, TargetFramework, TargetLanguage
from trace_migrator.migration.templates import (
    BaseTemplate,
    JavaScriptCypressTemplate,
    JavaScriptPlaywrightTemplate,
    PythonPlaywrightTemplate,
    TypeScriptCypressTemplate,
    TypeScriptPlaywrightTemplate,
)

ALL_TEMPLATES = [
    JavaScriptPlaywrightTemplate,
    TypeScriptPlaywrightTemplate,
    PythonPlaywrightTemplate,
    JavaScriptCypressTemplate,
    TypeScriptCypressTemplate,
]


# =============================================================================
# Base Template Tests
# =============================================================================


class TestBaseTemplate:
    """Tests for shared template behaviour."""

    def test_is_abstract(self):
        with pytest.raises(TypeError):
            BaseTemplate()

    def test_escape_string(self):
        template = JavaScriptPlaywrightTemplate()
        assert template.escape_string('a"b') == 'a\\"b'
        assert template.escape_string("") == ""
        assert template.quote('x"y') == '"x\\"y"'

    def test_comment_collapses_newlines(self):
        """Test comments stay on a single line."""
        template = JavaScriptCypressTemplate()
        assert template.render_comment("Unsupported action: a\nb") == "// Unsupported action: a b"

    def test_format_fragment(self):
        template = PythonPlaywrightTemplate()
        fragment = GeneratedFragment(code_line="await page.reload()", comment="Refresh page")
        assert template.format_fragment(fragment) == (
            "        # Refresh page\n"
            "        await page.reload()"
        )

    def test_fragment_comment_with_newline(self):
        template = JavaScriptPlaywrightTemplate()
        fragment = GeneratedFragment(code_line="await page.reload();", comment="Original target: a\r\nb")
        assert template.format_fragment(fragment).splitlines()[0] == "    // Original target: a b"

    def test_default_smoke_url(self):
        assert "selenium.dev" in JavaScriptPlaywrightTemplate().smoke_test_url

    def test_custom_smoke_url(self):
        template = JavaScriptCypressTemplate(config={"smoke_test_url": "https://forms.test/page"})
        assert "cy.visit('https://forms.test/page');" in template.generate_smoke_tests()

    @pytest.mark.parametrize("template_class", [JavaScriptPlaywrightTemplate, JavaScriptCypressTemplate])
    def test_smoke_url_escaped_for_single_quotes(self, template_class):
        """Test a configured URL cannot terminate the JavaScript literal."""
        template = template_class(config={"smoke_test_url": "https://forms.test/it's\\here"})
        smoke = template.generate_smoke_tests()
        assert "'https://forms.test/it\\'s\\\\here'" in smoke
        assert "it's" not in smoke

    def test_quote_single(self):
        template = JavaScriptCypressTemplate()
        assert template.quote_single("a'b") == "'a\\'b'"
        assert template.quote_single("") == "''"

    @pytest.mark.parametrize("template_class,framework,language", [
        (JavaScriptPlaywrightTemplate, TargetFramework.PLAYWRIGHT, TargetLanguage.JAVASCRIPT),
        (TypeScriptPlaywrightTemplate, TargetFramework.PLAYWRIGHT, TargetLanguage.TYPESCRIPT),
        (PythonPlaywrightTemplate, TargetFramework.PLAYWRIGHT, TargetLanguage.PYTHON),
        (JavaScriptCypressTemplate, TargetFramework.CYPRESS, TargetLanguage.JAVASCRIPT),
        (TypeScriptCypressTemplate, TargetFramework.CYPRESS, TargetLanguage.TYPESCRIPT),
    ])
    def test_template_identity(self, template_class, framework, language):
        assert template_class.framework == framework
        assert template_class.language == language

    @pytest.mark.parametrize("template_class", ALL_TEMPLATES)
    def test_generate_keeps_fragment_order(self, template_class):
        template = template_class()
        fragments = [
            GeneratedFragment(code_line=template.render_navigate("https://a.test"), comment="first"),
            GeneratedFragment(code_line=template.render_reload(), comment="second"),
        ]
        document = template.generate(fragments)
        assert document.index("first") < document.index("second")
        assert document.index(template.render_reload()) < document.index("Add final verification")


# =============================================================================
# Playwright Template Tests
# =============================================================================


class TestPlaywrightTemplates:
    """Tests for Playwright templates."""

    def test_javascript_imports(self):
        document = JavaScriptPlaywrightTemplate().generate([])
        assert document.startswith("const { test, expect } = require('@playwright/test');")
        assert "test('Migrated Selenium Test', async ({ page }) => {" in document
        assert "await expect(page).toHaveURL(/.+/);" in document

    def test_typescript_imports(self):
        document = TypeScriptPlaywrightTemplate().generate([])
        assert document.startswith("import { test, expect } from '@playwright/test';")
        assert "require(" not in document

    def test_javascript_statements(self):
        template = JavaScriptPlaywrightTemplate()
        assert template.render_clear("#q") == 'await page.fill("#q", "");'
        assert template.render_assert_visible("h1") == 'await expect(page.locator("h1")).toBeVisible();'
        assert template.render_select_option("#s", "Two") == 'await page.selectOption("#s", { label: "Two" });'

    def test_javascript_smoke_tests(self):
        smoke = JavaScriptPlaywrightTemplate().generate_smoke_tests()
        assert "test.describe('Additional Test Scenarios', () => {" in smoke
        assert "Form Interaction Test" in smoke
        assert "Same-Origin Navigation Test" in smoke
        assert "await expect(page).toHaveURL(/selenium\\.dev/);" in smoke

    def test_python_document(self):
        document = PythonPlaywrightTemplate().generate([])
        assert document.startswith("import re\n")
        assert "from playwright.async_api import async_playwright, expect" in document
        assert "async def test_migrated_selenium_test():" in document
        assert 'await expect(page).to_have_url(re.compile(r".+"))' in document
        assert "async def test_form_interaction():" in document
        assert "async def test_same_origin_navigation():" in document
        assert 're.compile(r"selenium\\.dev")' in document

    def test_python_statements(self):
        template = PythonPlaywrightTemplate()
        assert template.render_select_option("#s", "Two") == 'await page.select_option("#s", label="Two")'
        assert template.render_assert_visible("h1") == 'await expect(page.locator("h1")).to_be_visible()'
        assert template.render_disabled("await page.go_back()", "why") == "# await page.go_back() - why"


# =============================================================================
# Cypress Template Tests
# =============================================================================


class TestCypressTemplates:
    """Tests for Cypress templates."""

    def test_javascript_has_no_imports(self):
        document = JavaScriptCypressTemplate().generate([])
        assert document.startswith("describe('Migrated Selenium Test', () => {")

    def test_typescript_reference(self):
        document = TypeScriptCypressTemplate().generate([])
        assert document.startswith('/// <reference types="cypress" />\n')

    def test_statements(self):
        template = JavaScriptCypressTemplate()
        assert template.render_navigate("https://a.test") == 'cy.visit("https://a.test");'
        assert template.render_fill("#q", "x") == 'cy.get("#q").type("x");'
        assert template.render_select_option("#s", "Two") == 'cy.get("#s").select("Two");'

    def test_smoke_tests_close_describe(self):
        document = JavaScriptCypressTemplate().generate([])
        assert "it('should handle form interactions', () => {" in document
        assert "it('should handle single-origin navigation', () => {" in document
        assert document.rstrip().endswith("});")
        assert document.count("describe(") == 1


# =============================================================================
# Formatter Tests
# =============================================================================


class TestCodeFormatter:
    """Tests for CodeFormatter."""

    def test_strips_trailing_whitespace(self):
        formatter = CodeFormatter()
        assert formatter.format_code("a;   \nb;\t") == "a;\nb;\n"

    def test_collapses_blank_runs(self):
        formatter = CodeFormatter()
        assert formatter.format_code("a\n\n\n\n\nb") == "a\n\n\nb\n"

    def test_custom_blank_limit(self):
        formatter = CodeFormatter(max_blank_lines=1)
        assert formatter.format_code("a\n\n\nb") == "a\n\nb\n"

    def test_leading_and_trailing_blank_lines(self):
        formatter = CodeFormatter()
        assert formatter.format_code("\n\na\n\n\n") == "a\n"
