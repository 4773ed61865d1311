"""Project scaffold for running a generated test.

Produces the package manifest and framework config that sit next to the
generated test file. Contents only; writing them to disk is left to the
caller.
"""

import json
from typing import Optional

from .capabilities import get_capabilities
from .models import TargetFramework, TargetLanguage

PLAYWRIGHT_CONFIG = """module.exports = {
  testDir: './',
  timeout: 30000,
  expect: {
    timeout: 5000
  },
  fullyParallel: true,
  forbidOnly: !!process.env.CI,
  retries: process.env.CI ? 2 : 0,
  workers: process.env.CI ? 1 : undefined,
  reporter: 'html',
  use: {
    baseURL: 'https://www.selenium.dev/selenium/web/',
    trace: 'on-first-retry',
    screenshot: 'only-on-failure'
  },
  projects: [
    {
      name: 'chromium',
      use: { ...require('@playwright/test').devices['Desktop Chrome'] }
    }
  ]
};
"""

CYPRESS_CONFIG = """const {{ defineConfig }} = require('cypress');

module.exports = defineConfig({{
  e2e: {{
    baseUrl: 'https://www.selenium.dev/selenium/web/',
    supportFile: false,
    specPattern: '*{suffix}',
    video: false,
    screenshotOnRunFailure: false
  }}
}});
"""


def _package_json(manifest: dict) -> str:
    return json.dumps(manifest, indent=2) + "\n"


def build_scaffold(
    framework: str | TargetFramework,
    language: Optional[str | TargetLanguage] = None,
) -> dict[str, str]:
    """Build the support files needed to run a generated test.

    Args:
        framework: Target framework
        language: Target language (falls back to the framework default)

    Returns:
        Dict mapping file names to file contents

    Raises:
        UnsupportedFrameworkError: If the framework is unknown
    """
    capabilities = get_capabilities(framework)
    language = capabilities.resolve_language(language)
    dependencies = capabilities.dependencies.get(language, ())

    if capabilities.framework == TargetFramework.CYPRESS:
        manifest = {
            "name": "migrated-cypress-test",
            "version": "1.0.0",
            "description": "Migrated Selenium test for Cypress",
            "scripts": {
                "test": "cypress run",
                "test:headed": "cypress open",
            },
            "devDependencies": {name: "latest" for name in dependencies},
        }
        return {
            "package.json": _package_json(manifest),
            "cypress.config.js": CYPRESS_CONFIG.format(
                suffix=capabilities.supported_languages[language]
            ),
        }

    if language == TargetLanguage.PYTHON:
        manifest = {
            "name": "migrated-playwright-test",
            "version": "1.0.0",
            "description": "Migrated Selenium test for Playwright",
            "scripts": {
                "test": "python -m pytest -v",
                "install": "pip install -r requirements.txt && python -m playwright install",
            },
            "devDependencies": {},
        }
        return {
            "package.json": _package_json(manifest),
            "requirements.txt": "\n".join(dependencies) + "\n",
        }

    manifest = {
        "name": "migrated-playwright-test",
        "version": "1.0.0",
        "description": "Migrated Selenium test for Playwright",
        "scripts": {
            "test": "playwright test",
            "test:headed": "playwright test --headed",
            "test:debug": "playwright test --debug",
        },
        "devDependencies": {name: "latest" for name in dependencies},
    }
    return {
        "package.json": _package_json(manifest),
        "playwright.config.js": PLAYWRIGHT_CONFIG,
    }
