"""Span adapters exposing measure+draw over the layout engine."""

from .base import ReplacementSpan, span_text
from .justify import JustifySpan
from .monospace import REFERENCE_CHARACTERS, MonospaceSpan
from .tabular import TabularSpan

__all__ = [
    "JustifySpan",
    "MonospaceSpan",
    "REFERENCE_CHARACTERS",
    "ReplacementSpan",
    "TabularSpan",
    "span_text",
]
