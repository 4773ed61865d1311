"""Test document templates for each framework and language."""

from .base import BaseTemplate
from .javascript_cypress import JavaScriptCypressTemplate
from .javascript_playwright import JavaScriptPlaywrightTemplate
from .python_playwright import PythonPlaywrightTemplate
from .typescript_cypress import TypeScriptCypressTemplate
from .typescript_playwright import TypeScriptPlaywrightTemplate

__all__ = [
    "BaseTemplate",
    "JavaScriptPlaywrightTemplate",
    "TypeScriptPlaywrightTemplate",
    "PythonPlaywrightTemplate",
    "JavaScriptCypressTemplate",
    "TypeScriptCypressTemplate",
]
