"""
Tests for mcp/tools.py
"""

import pytest

from quick_capture.mcp.tools import setup_tools


class FakeMCP:
    """Collects the functions registered with @mcp.tool()."""

    def __init__(self):
        self.tools = {}

    def tool(self):
        def register(func):
            self.tools[func.__name__] = func
            return func
        return register


@pytest.fixture
def tools():
    mcp = FakeMCP()
    setup_tools(mcp)
    return mcp.tools


REFERENCE_TIME = "2025-01-15T10:00:00"


class TestSetupTools:
    """Tests for tool registration."""

    def test_registers_tools(self, tools):
        assert set(tools) == {"parse_task_title", "preview_date"}


class TestParseTaskTitle:
    """Tests for the parse_task_title tool."""

    def test_parsed_title(self, tools):
        result = tools["parse_task_title"]("Dentist tomorrow 3pm", reference_time=REFERENCE_TIME)
        assert result["success"] is True
        assert result["parsed"] is True
        assert result["cleaned_title"] == "Dentist"
        assert result["scheduled_for"] == "2025-01-16T15:00:00"
        assert result["preview"] == "Tomorrow 3pm"

    def test_plain_title(self, tools):
        result = tools["parse_task_title"]("Buy groceries", reference_time=REFERENCE_TIME)
        assert result == {"success": True, "parsed": False, "cleaned_title": "Buy groceries"}

    def test_utc_suffix(self, tools):
        result = tools["parse_task_title"]("Call 3pm", reference_time="2025-01-15T10:00:00Z")
        assert result["scheduled_for"] == "2025-01-15T15:00:00+00:00"
        assert result["preview"] == "Today 3pm"

    def test_invalid_reference_time(self, tools):
        result = tools["parse_task_title"]("Call 3pm", reference_time="not a time")
        assert result["success"] is False
        assert "Invalid reference_time" in result["error"]

    def test_defaults_to_now(self, tools):
        result = tools["parse_task_title"]("Meeting tomorrow")
        assert result["parsed"] is True
        assert result["preview"].startswith("Tomorrow")


class TestPreviewDate:
    """Tests for the preview_date tool."""

    def test_weekday_preview(self, tools):
        result = tools["preview_date"]("2025-01-17T14:00:00", reference_time=REFERENCE_TIME)
        assert result == {"success": True, "preview": "Friday 2pm"}

    def test_month_day_preview(self, tools):
        result = tools["preview_date"]("2025-02-01T10:00:00", reference_time=REFERENCE_TIME)
        assert result["preview"] == "Feb 1 10am"

    def test_invalid_date(self, tools):
        result = tools["preview_date"]("someday", reference_time=REFERENCE_TIME)
        assert result["success"] is False
        assert "Invalid date" in result["error"]
