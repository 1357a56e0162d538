"""Helpers over lxml.html trees: parsing, role lookup, class marking.

All lookups return live element references in document order. Callers keep
those references rather than re-querying, so later tree mutation cannot
rebind a role to a different node.
"""

from typing import Any

import lxml.html
from lxml import etree

from swiper_attrs.constants import ROLE_ATTR, ROLE_COMPONENT, role_xpath

HtmlElement = lxml.html.HtmlElement

# Identifier strings starting with these are treated as XPath
_XPATH_PREFIXES = ("/", "./", "(")


def parse_document(markup: str | bytes) -> HtmlElement:
    """Parse a full HTML document and return its root element."""
    return lxml.html.document_fromstring(markup)


def parse_fragment(markup: str | bytes) -> HtmlElement:
    """Parse markup holding a single top-level element."""
    return lxml.html.fragment_fromstring(markup)


def is_element(node: Any) -> bool:
    """True for element nodes; False for comments, processing instructions and text."""
    return isinstance(node, etree._Element) and isinstance(node.tag, str)


def has_role(element: Any, role: str) -> bool:
    return is_element(element) and element.get(ROLE_ATTR) == role


def find_first(root: HtmlElement, role: str) -> HtmlElement | None:
    """First descendant of ``root`` carrying ``role``, or None."""
    matches = root.xpath(role_xpath(role))
    return matches[0] if matches else None


def find_all(root: HtmlElement, role: str) -> list[HtmlElement]:
    """All descendants of ``root`` carrying ``role``, in document order."""
    return list(root.xpath(role_xpath(role)))


def find_components(root: HtmlElement) -> list[HtmlElement]:
    """Components at or below ``root``, in document order."""
    found = [root] if has_role(root, ROLE_COMPONENT) else []
    return found + find_all(root, ROLE_COMPONENT)


def add_class(element: HtmlElement, class_name: str) -> None:
    """Add a class name; no-op when already present."""
    element.classes.add(class_name)


def body_of(document: HtmlElement) -> HtmlElement:
    """The <body> of a document, or the root itself for bare fragments."""
    if document.tag == "html":
        body = document.find("body")
        if body is not None:
            return body
    return document


def resolve_target(document: HtmlElement, target: Any) -> HtmlElement | None:
    """Resolve an element reference or identifier string to an element.

    Identifiers are element ids (an optional leading ``#`` is stripped), or
    XPath expressions when they start with ``/``, ``./`` or ``(``.

    Args:
        document: Document to search.
        target: An element, or an identifier string.

    Returns:
        The element, or None if nothing matches.
    """
    if not isinstance(target, str):
        return target if is_element(target) else None

    identifier = target.strip()
    if not identifier:
        return None

    if identifier.startswith(_XPATH_PREFIXES):
        try:
            matches = document.xpath(identifier)
        except etree.XPathError:
            return None
        elements = [m for m in matches if is_element(m)] if isinstance(matches, list) else []
        return elements[0] if elements else None

    element_id = identifier[1:] if identifier.startswith("#") else identifier
    matches = document.xpath(".//*[@id=$element_id]", element_id=element_id)
    if not matches and document.get("id") == element_id:
        return document
    return matches[0] if matches else None


def describe(element: HtmlElement) -> str:
    """Short human-readable tag for logs and reports."""
    parts = [element.tag]
    if element.get("id"):
        parts.append(f'id="{element.get("id")}"')
    if element.get(ROLE_ATTR):
        parts.append(f'{ROLE_ATTR}="{element.get(ROLE_ATTR)}"')
    return f"<{' '.join(parts)}>"
