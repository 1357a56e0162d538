"""Join the attribute configuration with the located elements."""

from typing import Any

from swiper_attrs.elements.locator import ElementGraph
from swiper_attrs.parser.merge import deep_merge
from swiper_attrs.schema import DEFAULT_AUTOPLAY, DEFAULT_PAGINATION


def build_swiper_config(parsed_config: dict[str, Any], elements: ElementGraph) -> dict[str, Any]:
    """Build the final configuration handed to the slider library.

    Pagination and navigation are bound by element reference, never by
    selector, so either placement of those elements works. Sub-options set
    by attributes (e.g. ``data-swiper-pagination='{"type": "fraction"}'``)
    win over the bindings.

    Args:
        parsed_config: Output of ``parse_configuration``. Not mutated.
        elements: Graph from ``locate_elements``.

    Returns:
        New configuration dict.
    """
    config = dict(parsed_config)

    if elements.pagination is not None:
        binding = {"el": elements.pagination, **DEFAULT_PAGINATION.to_config()}
        config["pagination"] = deep_merge(binding, config.get("pagination"))

    if elements.has_navigation:
        binding = {"prevEl": elements.nav_prev, "nextEl": elements.nav_next}
        config["navigation"] = deep_merge(binding, config.get("navigation"))

    # Object-valued autoplay passes through untouched
    if config.get("autoplay") is True:
        config["autoplay"] = DEFAULT_AUTOPLAY.to_config()

    return config
