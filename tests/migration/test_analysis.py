"""Tests for trace analysis."""

from trace_migrator.migration.analysis import analyze_trace


class TestAnalyzeTrace:
    """Tests for analyze_trace."""

    def test_login_trace(self, login_trace):
        analysis = analyze_trace(login_trace, file_name="login.ndjson")
        assert analysis.total_steps == 5
        assert analysis.supported_steps == 3
        assert analysis.unsupported_steps == 2
        assert analysis.conversion_rate == 60
        assert analysis.action_types["findElement"] == 1
        assert analysis.file_name == "login.ndjson"

    def test_file_size_in_bytes(self, build_trace, ok_step):
        text = build_trace(ok_step("get", "https://a.test/café"))
        assert analyze_trace(text).file_size == len(text.encode("utf-8"))
        assert analyze_trace(text).file_size > len(text)

    def test_rate_rounds_half_up(self, build_trace, ok_step):
        """Test 1 of 8 supported reports 13 percent."""
        events = [ok_step("get", "https://a.test")] + [ok_step("executeScript")] * 7
        assert analyze_trace(build_trace(*events)).conversion_rate == 13

    def test_empty_trace(self):
        analysis = analyze_trace("")
        assert analysis.total_steps == 0
        assert analysis.conversion_rate == 0
        assert analysis.action_types == {}

    def test_framework_specific_support(self, build_trace, ok_step):
        """Test Wait.until only counts as supported for auto-waiting frameworks."""
        text = build_trace(ok_step("Wait.until"), ok_step("click", "#a"))
        assert analyze_trace(text).supported_steps == 1
        assert analyze_trace(text, framework="playwright").supported_steps == 2
        assert analyze_trace(text, framework="cypress").supported_steps == 1

    def test_to_dict(self, login_trace):
        data = analyze_trace(login_trace, file_name="login.ndjson").to_dict()
        assert data["totalSteps"] == 5
        assert data["supportedSteps"] == 3
        assert data["unsupportedSteps"] == 2
        assert data["conversionRate"] == 60
        assert data["fileName"] == "login.ndjson"
