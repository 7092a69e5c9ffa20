"""
Minimal element tree standing in for the browser DOM.

Elements carry attributes, inline styles, CSS classes, text, a bound
datum and event listeners. Listeners are called with the element's datum
when the host dispatches an event, mirroring how the page wires pointer
events to bound data.
"""

import math
import re
import xml.etree.ElementTree as ET
from html import escape
from typing import Any, Callable, Dict, Iterator, List, Optional

from crcharts.utils.helpers import number_to_str

SVG_NAMESPACE = 'http://www.w3.org/2000/svg'

_MISSING = object()
_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_px(value: Any) -> float:
    """
    Read the leading integer of a CSS length, like ``parseInt(value, 10)``.

    Parameters
    ----------
    value : Any
        CSS value such as ``'250px'`` or a number

    Returns
    -------
    float
        Parsed integer as float, NaN when there is none
    """
    if value is None:
        return float('nan')
    match = _LEADING_INT.match(number_to_str(value))
    if match is None:
        return float('nan')
    return float(int(match.group(1)))


def _to_attr(value: Any) -> str:
    return number_to_str(value)


class Element:
    """
    A node in the page model.

    Parameters
    ----------
    tag : str
        Tag name
    document : Document, optional
        Owning document
    namespace : str, optional
        ``SVG_NAMESPACE`` for SVG content, None for HTML
    """

    def __init__(self, tag: str, document: Optional['Document'] = None, namespace: Optional[str] = None):
        self.tag = tag
        self.document = document
        self.namespace = namespace
        self.parent: Optional['Element'] = None
        self.children: List['Element'] = []
        self.attributes: Dict[str, str] = {}
        self.styles: Dict[str, str] = {}
        self.classes: List[str] = []
        self.datum: Any = None
        self._text: Optional[str] = None
        self._listeners: Dict[str, List[Callable]] = {}

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ''
        classes = ''.join(f".{c}" for c in self.classes)
        return f"<Element {self.tag}{ident}{classes}>"

    @property
    def id(self) -> Optional[str]:
        return self.attributes.get('id')

    @property
    def is_svg(self) -> bool:
        return self.namespace == SVG_NAMESPACE

    def append(self, tag: str) -> 'Element':
        """Create a child element and return it."""
        namespace = SVG_NAMESPACE if (tag == 'svg' or self.is_svg) else None
        child = Element(tag, self.document, namespace)
        child.parent = self
        self.children.append(child)
        return child

    def remove(self) -> None:
        if self.parent is not None:
            self.parent.children.remove(self)
            self.parent = None

    def attr(self, name: str, value: Any = _MISSING):
        """Get an attribute, or set it and return the element."""
        if value is _MISSING:
            if name == 'class':
                return ' '.join(self.classes)
            return self.attributes.get(name)

        if name == 'class':
            self.classes = []
            self.classed(str(value))
        elif value is None:
            self.attributes.pop(name, None)
        else:
            self.attributes[name] = _to_attr(value)
        return self

    def style(self, name: str, value: Any = _MISSING):
        """Get an inline style, or set it and return the element."""
        if value is _MISSING:
            return self.styles.get(name)
        if value is None:
            self.styles.pop(name, None)
        else:
            self.styles[name] = _to_attr(value)
        return self

    def classed(self, names: str, on: bool = True) -> 'Element':
        """Add or remove whitespace-separated class names."""
        for name in names.split():
            if on and name not in self.classes:
                self.classes.append(name)
            elif not on and name in self.classes:
                self.classes.remove(name)
        return self

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def text(self, value: Any = _MISSING):
        """Get the text content, or set it and return the element."""
        if value is _MISSING:
            return self._text
        self._text = None if value is None else number_to_str(value)
        return self

    def on(self, event: str, handler: Callable[[Any], Any]) -> 'Element':
        """Register a listener called with this element's datum."""
        self._listeners.setdefault(event, []).append(handler)
        return self

    def listeners(self, event: str) -> List[Callable]:
        return list(self._listeners.get(event, []))

    def dispatch(self, event: str) -> 'Element':
        """Deliver an event to this element's listeners."""
        for handler in self.listeners(event):
            handler(self.datum)
        return self

    # Measurement

    def measure_width(self) -> float:
        """Rendered width in px; block elements take their parent's width."""
        node = self
        while node is not None:
            width = parse_px(node.style('width'))
            if not math.isnan(width):
                return width
            node = node.parent
        return float('nan')

    def measure_height(self) -> float:
        """Rendered height in px from the element's own height style."""
        return parse_px(self.style('height'))

    # Traversal

    def iter(self) -> Iterator['Element']:
        """Depth-first iteration over this element and its descendants."""
        yield self
        for child in self.children:
            yield from child.iter()

    def find_all(self, tag: Optional[str] = None, class_: Optional[str] = None) -> List['Element']:
        """Descendants matching the tag and/or class, in document order."""
        found = []
        for node in self.iter():
            if node is self:
                continue
            if tag is not None and node.tag != tag:
                continue
            if class_ is not None and not all(c in node.classes for c in class_.split()):
                continue
            found.append(node)
        return found

    def find(self, tag: Optional[str] = None, class_: Optional[str] = None) -> Optional['Element']:
        found = self.find_all(tag, class_)
        return found[0] if found else None

    # Serialization

    def to_etree(self) -> ET.Element:
        attrib = dict(self.attributes)
        if self.tag == 'svg' and (self.parent is None or not self.parent.is_svg):
            attrib['xmlns'] = SVG_NAMESPACE
        if self.classes:
            attrib['class'] = ' '.join(self.classes)
        if self.styles:
            attrib['style'] = '; '.join(f"{k}: {v}" for k, v in self.styles.items())

        node = ET.Element(self.tag, attrib)
        node.text = self._text
        for child in self.children:
            node.append(child.to_etree())
        return node

    def to_html(self) -> str:
        return ET.tostring(self.to_etree(), encoding='unicode', method='html')


class Document:
    """
    A page holding elements addressable by ID.
    """

    def __init__(self):
        self.body = Element('body', self)

    def create_element(
        self,
        tag: str = 'div',
        id: Optional[str] = None,
        parent: Optional[Element] = None,
        style: Optional[Dict[str, Any]] = None
    ) -> Element:
        """
        Append a new element to ``parent`` (the body by default).

        Parameters
        ----------
        tag : str
            Tag name
        id : str, optional
            Element ID
        parent : Element, optional
            Parent element
        style : dict, optional
            Inline styles, e.g. ``{'width': '600px'}``

        Returns
        -------
        Element
            The new element
        """
        element = (parent or self.body).append(tag)
        if id is not None:
            element.attr('id', id)
        for name, value in (style or {}).items():
            element.style(name, value)
        return element

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        for node in self.body.iter():
            if node.id == element_id:
                return node
        return None

    def to_html(self, title: str = '', stylesheet: str = '') -> str:
        """Serialize as a standalone HTML page."""
        head = f"<meta charset=\"utf-8\">\n<title>{escape(title)}</title>\n"
        if stylesheet:
            head += f"<style>\n{stylesheet}\n</style>\n"
        return f"<!DOCTYPE html>\n<html>\n<head>\n{head}</head>\n{self.body.to_html()}\n</html>\n"
