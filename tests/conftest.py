"""Shared fixtures for trace migrator tests."""

import json
import os

import pytest


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "smoke: mark test as smoke test (fast, critical path - included in CI)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


def make_trace(*events: dict, extra_lines: tuple[str, ...] = ()) -> str:
    """Build NDJSON trace text from event dicts."""
    lines = [json.dumps(event) for event in events]
    lines.extend(extra_lines)
    return "\n".join(lines) + "\n"


def step(kind: str, target: str | None = None, duration_ms: float | None = None) -> dict:
    """Build a step.ok event dict."""
    event = {"evt": "step.ok", "kind": kind}
    if target is not None:
        event["target"] = target
    if duration_ms is not None:
        event["durationMs"] = duration_ms
    return event


DRIVER = "[[ChromeDriver: chrome on linux (9f2c1e)]"


def driver_target(locator: str) -> str:
    """Wrap a locator in Selenium's diagnostic target format."""
    return f"{DRIVER} -> {locator}]"


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep TRACE_MIGRATOR_* variables from the host out of tests."""
    for key in list(os.environ):
        if key.startswith("TRACE_MIGRATOR_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def login_trace():
    """Typical login session trace with noise lines."""
    return make_trace(
        {"evt": "session.start", "browser": "chrome"},
        step("get", "https://selenium.dev/page"),
        step("ImplicitWait.set"),
        step("findElement", driver_target("id: submit")),
        step("click", driver_target("id: submit"), duration_ms=120),
        step("sendKeys", driver_target("name: email")),
        {"evt": "step.fail", "kind": "click", "target": driver_target("id: missing")},
        extra_lines=("{not json", "", "   "),
    )


@pytest.fixture
def navigation_trace():
    """Trace that leaves the first origin and navigates back."""
    return make_trace(
        step("get", "https://a.test/x"),
        step("get", "https://b.test/y"),
        step("Navigation.back"),
    )


@pytest.fixture
def trace_file(tmp_path, login_trace):
    """Login trace written to disk."""
    path = tmp_path / "login.ndjson"
    path.write_text(login_trace, encoding="utf-8")
    return path


@pytest.fixture
def build_trace():
    """Factory fixture: build NDJSON trace text from event dicts."""
    return make_trace


@pytest.fixture
def ok_step():
    """Factory fixture: build a step.ok event dict."""
    return step


@pytest.fixture
def locate():
    """Factory fixture: wrap a locator in Selenium's target format."""
    return driver_target
