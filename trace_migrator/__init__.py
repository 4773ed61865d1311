"""Selenium trace migrator.

Turns recorded Selenium WebDriver traces into Playwright and Cypress tests.
"""

__version__ = "1.0.0"
