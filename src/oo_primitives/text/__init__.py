"""Text primitives."""

from .formatted import FormattedText, Text

__all__ = ["FormattedText", "Text"]
