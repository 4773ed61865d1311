"""TypeScript Cypress test template."""

from ..models import TargetLanguage
from .javascript_cypress import JavaScriptCypressTemplate


class TypeScriptCypressTemplate(JavaScriptCypressTemplate):
    """Template for TypeScript Cypress specs."""

    language = TargetLanguage.TYPESCRIPT

    def generate_imports(self) -> str:
        """Generate the Cypress type reference directive."""
        return '/// <reference types="cypress" />'
