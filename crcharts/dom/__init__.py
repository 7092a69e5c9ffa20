"""
In-memory page model the charts are drawn into.
"""

from .document import Document, Element, parse_px, SVG_NAMESPACE

__all__ = ['Document', 'Element', 'parse_px', 'SVG_NAMESPACE']
