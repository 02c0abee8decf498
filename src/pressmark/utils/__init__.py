"""Utility modules for pressmark.

Provides:
- text: escape_ps_string, format_number, is_ps_name, clean_ps_name for
  PostScript output
- logger: get_logger, configure_logging for logging
"""

from pressmark.utils.logger import configure_logging, get_logger
from pressmark.utils.text import clean_ps_name, escape_ps_string, format_number, is_ps_name

__all__ = [
    "clean_ps_name",
    "configure_logging",
    "escape_ps_string",
    "format_number",
    "get_logger",
    "is_ps_name",
]
