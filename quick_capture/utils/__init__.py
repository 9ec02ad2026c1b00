"""
Quick Capture Utilities Module

Provides the task date parser, the preview formatter, configuration and logging.
"""

from quick_capture.utils.date_parser import (
    parse_natural_date,
    resolve_schedule,
    clean_title,
)
from quick_capture.utils.date_preview import (
    format_date_preview,
    format_time,
)

__all__ = [
    'parse_natural_date',
    'resolve_schedule',
    'clean_title',
    'format_date_preview',
    'format_time',
]
