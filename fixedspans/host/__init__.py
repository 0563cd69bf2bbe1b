"""Host-side paragraph driver and configuration."""

from .config import load_paragraph_config, parse_justify_table
from .paragraph import JustifiedParagraph, LineLayout, ParagraphLayout, break_lines

__all__ = [
    "JustifiedParagraph",
    "LineLayout",
    "ParagraphLayout",
    "break_lines",
    "load_paragraph_config",
    "parse_justify_table",
]
