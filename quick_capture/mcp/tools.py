"""
MCP Tools Module

This module defines the tools available in the Quick Capture MCP server.
Tools wrap the task date parser and the preview formatter.
"""

from datetime import datetime
from typing import Dict, Any, Optional

from mcp.server.fastmcp import FastMCP

from quick_capture.utils.date_parser import parse_natural_date
from quick_capture.utils.date_preview import format_date_preview
from quick_capture.utils.logger import get_logger

logger = get_logger(__name__)


def _parse_reference_time(reference_time: Optional[str]) -> Optional[datetime]:
    """
    Parse an optional ISO 8601 reference time.

    Raises:
        ValueError: If the string is not ISO 8601
    """
    if not reference_time:
        return None
    return datetime.fromisoformat(reference_time.replace('Z', '+00:00'))


def setup_tools(mcp: FastMCP) -> None:
    """
    Set up all MCP tools on the FastMCP application.

    Args:
        mcp (FastMCP): The FastMCP application.
    """
    @mcp.tool()
    def parse_task_title(title: str, reference_time: Optional[str] = None) -> Dict[str, Any]:
        """
        Extract a date/time phrase from a task title.

        Recognizes phrases like "tomorrow 3pm", "next Monday", "in 2 days" and
        returns the title with the phrase removed.

        Args:
            title (str): The task title as typed by the user.
            reference_time (str, optional): ISO 8601 time to resolve relative
                phrases against. Defaults to now.

        Returns:
            Dict[str, Any]: The result of the operation, including:
                - success: Whether the operation was successful
                - parsed: Whether a date/time phrase was found
                - cleaned_title: The title without the phrase
                - scheduled_for: ISO 8601 schedule (if parsed)
                - preview: Short label such as "Tomorrow 3pm" (if parsed)
        """
        try:
            now = _parse_reference_time(reference_time)
        except ValueError as e:
            logger.warning(f"Invalid reference_time '{reference_time}': {e}")
            return {"success": False, "error": f"Invalid reference_time: {e}"}

        result = parse_natural_date(title, now=now)
        if result is None:
            return {
                "success": True,
                "parsed": False,
                "cleaned_title": title,
            }

        return {
            "success": True,
            "parsed": True,
            **result.model_dump(),
            "preview": format_date_preview(result.scheduled_for, now=now),
        }

    @mcp.tool()
    def preview_date(date: str, reference_time: Optional[str] = None) -> Dict[str, Any]:
        """
        Render a schedule as a short preview label.

        Args:
            date (str): ISO 8601 datetime to describe.
            reference_time (str, optional): ISO 8601 time treated as now.

        Returns:
            Dict[str, Any]: success and preview (e.g. "Friday 2pm"), or error.
        """
        try:
            scheduled = datetime.fromisoformat(date.replace('Z', '+00:00'))
            now = _parse_reference_time(reference_time)
        except ValueError as e:
            logger.warning(f"Invalid date for preview: {e}")
            return {"success": False, "error": f"Invalid date: {e}"}

        return {"success": True, "preview": format_date_preview(scheduled, now=now)}
