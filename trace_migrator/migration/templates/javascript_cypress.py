"""JavaScript Cypress test template."""

from ..models import TargetFramework, TargetLanguage
from .base import BaseTemplate, MIGRATED_TEST_NOTE


class JavaScriptCypressTemplate(BaseTemplate):
    """Template for JavaScript Cypress specs.

    Cypress globals (``describe``, ``it``, ``cy``) need no imports.
    """

    language = TargetLanguage.JAVASCRIPT
    framework = TargetFramework.CYPRESS
    body_indent = "    "

    def render_navigate(self, url: str) -> str:
        return f"cy.visit({self.quote(url)});"

    def render_click(self, selector: str) -> str:
        return f"cy.get({self.quote(selector)}).click();"

    def render_select_option(self, selector: str, label: str) -> str:
        return f"cy.get({self.quote(selector)}).select({self.quote(label)});"

    def render_fill(self, selector: str, value: str) -> str:
        return f"cy.get({self.quote(selector)}).type({self.quote(value)});"

    def render_clear(self, selector: str) -> str:
        return f"cy.get({self.quote(selector)}).clear();"

    def render_assert_visible(self, selector: str) -> str:
        return f"cy.get({self.quote(selector)}).should('be.visible');"

    def render_reload(self) -> str:
        return "cy.reload();"

    def render_go_back(self) -> str:
        return "cy.go('back');"

    def render_go_forward(self) -> str:
        return "cy.go('forward');"

    def generate_imports(self) -> str:
        return ""

    def generate_test_header(self) -> str:
        return "\n".join([
            "describe('Migrated Selenium Test', () => {",
            "  it('should execute migrated test steps', () => {",
            f"    // {MIGRATED_TEST_NOTE}",
            "",
        ])

    def generate_test_footer(self) -> str:
        return "\n".join([
            "",
            "    // Add final verification",
            "    cy.url().should('match', /.+/);",
            "  });",
        ])

    def generate_smoke_tests(self) -> str:
        url = self.quote_single(self.smoke_test_url)
        return f"""  it('should handle form interactions', () => {{
    // Simplified form interaction test
    cy.visit({url});

    cy.get('[name="my-text"]').type('Sample text input');
    cy.get('[name="my-password"]').type('testPassword123');
    cy.get('[name="my-select"]').select('Two');
    cy.get('input[type="checkbox"]').check();

    // Verify form state
    cy.get('[name="my-text"]').should('have.value', 'Sample text input');
    cy.get('[name="my-select"]').should('have.value', '2');
    cy.get('input[type="checkbox"]').should('be.checked');
  }});

  it('should handle single-origin navigation', () => {{
    // Test navigation within the same origin to avoid cross-origin issues
    cy.visit({url});
    cy.get('[name="my-text"]').should('be.visible');

    // Verify we're on the correct page
    cy.url().should('include', 'selenium.dev');
    cy.title().should('contain', 'Web form');
  }});
}});"""
