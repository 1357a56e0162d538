"""Resolve a component's attributes into the slider configuration."""

import logging
from typing import Any, Iterable, Mapping

from swiper_attrs.parser.breakpoints import BreakpointMap, build_breakpoints_from_entries
from swiper_attrs.parser.classify import AttributeEntry, classify_attributes
from swiper_attrs.parser.merge import deep_merge
from swiper_attrs.parser.values import kebab_to_camel, parse_value
from swiper_attrs.schema import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


def normalize_breakpoint_keys(breakpoints: Mapping[Any, Any]) -> dict[Any, Any]:
    """Turn digit-only string keys into ints so they line up with tier thresholds.

    Other keys (``"@0.75"``, ``"1024.5"``) are kept as given.
    """
    normalized: dict[Any, Any] = {}
    for key, value in breakpoints.items():
        if isinstance(key, str) and key.isascii() and key.isdigit():
            key = int(key)
        normalized[key] = value
    return normalized


def merge_breakpoints(existing: Any, built: BreakpointMap) -> dict[Any, Any]:
    """Merge the built cascade into a ``breakpoints`` option set elsewhere.

    Existing tiers survive, new tiers are added and colliding tiers are merged
    with the built values winning on scalars.
    """
    if isinstance(existing, Mapping):
        existing = normalize_breakpoint_keys(existing)
    elif existing is not None:
        logger.warning(f"Discarding non-object breakpoints option: {existing!r}")
        existing = None

    if not existing:
        return dict(built)
    return deep_merge(existing, built)


def resolve_entries(entries: Iterable[AttributeEntry]) -> dict[str, Any]:
    """Resolve classified entries on top of the defaults."""
    entries = list(entries)
    config = DEFAULT_CONFIG.to_config()

    for entry in entries:
        if entry.is_tiered:
            continue
        config[kebab_to_camel(entry.option)] = parse_value(entry.value)

    breakpoints = build_breakpoints_from_entries(entries)
    if breakpoints:
        config["breakpoints"] = merge_breakpoints(config.get("breakpoints"), breakpoints)

    return config


def parse_configuration(component: Any) -> dict[str, Any]:
    """Parse the slider configuration from a component's attributes.

    Any library option can be set with a kebab-case attribute, e.g.
    ``data-swiper-slides-per-view="3"`` sets ``slidesPerView``. Tier-suffixed
    attributes are folded into ``breakpoints``.

    Args:
        component: The component root element.

    Returns:
        A fresh configuration dict. Resolving the same attributes twice
        yields equal results.
    """
    return resolve_entries(classify_attributes(component))
