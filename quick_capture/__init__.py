"""
Quick Capture

Natural language date parsing for quick task entry.
"""

from quick_capture.mcp.schemas import ParseResult
from quick_capture.utils.date_parser import parse_natural_date
from quick_capture.utils.date_preview import format_date_preview

__version__ = "0.1.0"

__all__ = [
    'ParseResult',
    'parse_natural_date',
    'format_date_preview',
]
