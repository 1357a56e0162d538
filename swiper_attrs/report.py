"""Dry-run resolution of every component in a document.

Produces the configuration each component would hand to the slider library,
without constructing anything. Locating the elements still adds the library
class names to the tree being inspected.
"""

import logging
from typing import Any

from swiper_attrs.dom import HtmlElement, describe, find_components, is_element
from swiper_attrs.elements import build_swiper_config, locate_elements
from swiper_attrs.errors import StructuralError
from swiper_attrs.parser import parse_configuration
from swiper_attrs.schema import ComponentReport

logger = logging.getLogger(__name__)


def _printable(value: Any) -> Any:
    """Replace element references with descriptors, recursively."""
    if is_element(value):
        return describe(value)
    if isinstance(value, dict):
        return {key: _printable(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_printable(item) for item in value]
    return value


def _breakpoints_of(config: dict[str, Any]) -> dict[Any, Any] | None:
    breakpoints = config.get("breakpoints")
    return _printable(breakpoints) if isinstance(breakpoints, dict) else None


def inspect_component(component: HtmlElement, index: int = 0) -> ComponentReport:
    """Resolve one component into a report.

    Args:
        component: The component root element.
        index: Position of the component in document order.

    Returns:
        ComponentReport; ``error`` is set when a required role is missing.
    """
    element_id = component.get("id")
    parsed_config = parse_configuration(component)

    try:
        elements = locate_elements(component)
    except StructuralError as e:
        logger.error(f"Component {index} {describe(component)}: {e}")
        return ComponentReport(
            index=index,
            element_id=element_id,
            config=_printable(parsed_config),
            breakpoints=_breakpoints_of(parsed_config),
            error=str(e),
        )

    config = build_swiper_config(parsed_config, elements)
    return ComponentReport(
        index=index,
        element_id=element_id,
        slide_count=elements.slide_count,
        config=_printable(config),
        breakpoints=_breakpoints_of(config),
        roles=elements.roles(),
    )


def build_report(document: HtmlElement) -> list[ComponentReport]:
    """Inspect every component under ``document`` in document order."""
    return [
        inspect_component(component, index)
        for index, component in enumerate(find_components(document))
    ]
