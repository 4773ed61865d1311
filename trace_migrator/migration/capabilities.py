"""Framework capability descriptors.

Differences between target frameworks (navigation reliability, waiting
model, counting policy, languages) are data here rather than separate
converter classes. Adding a framework means adding a descriptor and a
template.
"""

from dataclasses import dataclass, field
from typing import Optional

from .models import TargetFramework, TargetLanguage


class UnsupportedFrameworkError(Exception):
    """Exception raised when a conversion targets an unknown framework."""

    pass


# Actions every framework translates
BASE_SUPPORTED_ACTIONS = frozenset({
    "get",
    "click",
    "sendKeys",
    "clear",
    "getTagName",
    "Navigation.refresh",
    "Navigation.back",
    "Navigation.forward",
})

WAIT_ACTION = "Wait.until"

# Actions modern frameworks perform implicitly
AUTO_HANDLED_ACTIONS = frozenset({
    "findElement",
    "findElements",
    "ImplicitWait.set",
    "Navigation.to",
})


@dataclass(frozen=True)
class FrameworkCapabilities:
    """What a target framework can express.

    Attributes:
        framework: Framework identifier
        display_name: Human readable name
        description: One-line description
        supported_languages: Languages a test can be generated in, with filename suffixes
        default_language: Language used when the requested one is unsupported
        supports_reliable_back_nav: Back navigation works across origins
        supports_forward_nav: Forward navigation can be emitted at all
        auto_waits: Framework waits for elements implicitly (acknowledges Wait.until)
        auto_handled_actions: Kinds neither counted in totals nor reported as skipped
        features: Marketing feature list for the framework catalog
        dependencies: Packages the generated test needs
    """

    framework: TargetFramework
    display_name: str
    description: str
    supported_languages: dict[TargetLanguage, str]
    default_language: TargetLanguage = TargetLanguage.JAVASCRIPT
    supports_reliable_back_nav: bool = True
    supports_forward_nav: bool = True
    auto_waits: bool = False
    auto_handled_actions: frozenset[str] = frozenset()
    features: tuple[str, ...] = ()
    dependencies: dict[TargetLanguage, tuple[str, ...]] = field(default_factory=dict)

    @property
    def supported_actions(self) -> frozenset[str]:
        """Trace action kinds this framework translates."""
        if self.auto_waits:
            return BASE_SUPPORTED_ACTIONS | {WAIT_ACTION}
        return BASE_SUPPORTED_ACTIONS

    def resolve_language(self, language: Optional[str | TargetLanguage]) -> TargetLanguage:
        """Resolve a requested language, falling back to the default."""
        if language is None:
            return self.default_language
        try:
            resolved = TargetLanguage(str(getattr(language, "value", language)).lower())
        except ValueError:
            return self.default_language
        if resolved not in self.supported_languages:
            return self.default_language
        return resolved

    def filename_for(self, language: TargetLanguage) -> str:
        """Generated test file name for a (resolved) language."""
        if language == TargetLanguage.PYTHON:
            # pytest only collects test_*.py, so the catalog suffix is not used here
            return "test_migrated_selenium.py"
        return f"migrated-selenium{self.supported_languages[language]}"

    def to_catalog_entry(self) -> dict:
        """Describe the framework for a frameworks listing."""
        return {
            "name": self.display_name,
            "description": self.description,
            "languages": [
                {
                    "code": language.value,
                    "name": LANGUAGE_NAMES[language],
                    "extension": suffix,
                }
                for language, suffix in self.supported_languages.items()
            ],
            "features": list(self.features),
        }


LANGUAGE_NAMES = {
    TargetLanguage.JAVASCRIPT: "JavaScript",
    TargetLanguage.TYPESCRIPT: "TypeScript",
    TargetLanguage.PYTHON: "Python",
}


PLAYWRIGHT = FrameworkCapabilities(
    framework=TargetFramework.PLAYWRIGHT,
    display_name="Playwright",
    description="Modern end-to-end testing framework",
    supported_languages={
        TargetLanguage.JAVASCRIPT: ".spec.js",
        TargetLanguage.TYPESCRIPT: ".spec.ts",
        TargetLanguage.PYTHON: "_test.py",
    },
    supports_reliable_back_nav=True,
    supports_forward_nav=True,
    auto_waits=True,
    # Playwright counts every step.ok event, auto-handled kinds included
    auto_handled_actions=frozenset(),
    features=("Cross-browser", "Auto-wait", "Network interception", "Mobile testing"),
    dependencies={
        TargetLanguage.JAVASCRIPT: ("@playwright/test",),
        TargetLanguage.TYPESCRIPT: ("@playwright/test",),
        TargetLanguage.PYTHON: ("playwright", "pytest", "pytest-playwright", "pytest-asyncio"),
    },
)

CYPRESS = FrameworkCapabilities(
    framework=TargetFramework.CYPRESS,
    display_name="Cypress",
    description="Fast, easy and reliable testing for anything that runs in a browser",
    supported_languages={
        TargetLanguage.JAVASCRIPT: ".cy.js",
        TargetLanguage.TYPESCRIPT: ".cy.ts",
    },
    supports_reliable_back_nav=False,
    supports_forward_nav=False,
    auto_waits=False,
    auto_handled_actions=AUTO_HANDLED_ACTIONS,
    features=("Real-time reloads", "Time travel", "Network stubbing", "Visual testing"),
    dependencies={
        TargetLanguage.JAVASCRIPT: ("cypress",),
        TargetLanguage.TYPESCRIPT: ("cypress", "typescript"),
    },
)


FRAMEWORK_CAPABILITIES: dict[TargetFramework, FrameworkCapabilities] = {
    TargetFramework.PLAYWRIGHT: PLAYWRIGHT,
    TargetFramework.CYPRESS: CYPRESS,
}


def get_capabilities(framework: str | TargetFramework) -> FrameworkCapabilities:
    """Look up the capability descriptor for a framework.

    Raises:
        UnsupportedFrameworkError: If the framework is unknown
    """
    try:
        key = TargetFramework(str(getattr(framework, "value", framework)).lower())
    except ValueError:
        valid = [f.value for f in TargetFramework]
        raise UnsupportedFrameworkError(
            f"Unsupported framework '{framework}'. Valid options: {valid}"
        ) from None
    return FRAMEWORK_CAPABILITIES[key]
