"""Build the per-tier breakpoint map from tier-suffixed attributes.

Example:
    data-swiper-slides-per-view="1"
    data-swiper-slides-per-view-tablet="2"
    data-swiper-slides-per-view-desktop="4"

produces ``{768: {"slidesPerView": 2}, 992: {"slidesPerView": 4}}``.

Only directly-set options appear in a tier; inheritance from lower tiers is
left to the slider library's mobile-first breakpoint handling.
"""

from typing import Any, Iterable

from swiper_attrs.parser.classify import AttributeEntry, classify_attributes
from swiper_attrs.parser.values import kebab_to_camel, parse_value
from swiper_attrs.schema import TIER_THRESHOLDS, Tier

BreakpointMap = dict[int, dict[str, Any]]


def build_breakpoints_from_entries(entries: Iterable[AttributeEntry]) -> BreakpointMap | None:
    """Group tiered entries by tier threshold.

    Args:
        entries: Classified attribute entries. Plain entries are ignored.

    Returns:
        Map of threshold to options overridden at that tier, in ascending
        threshold order, or None when no tier has an override.
    """
    per_tier: dict[Tier, dict[str, Any]] = {tier: {} for tier in TIER_THRESHOLDS}

    for entry in entries:
        # The base tier is carried by the plain attribute
        if entry.tier is None or entry.tier.is_base:
            continue
        per_tier[entry.tier][kebab_to_camel(entry.option)] = parse_value(entry.value)

    breakpoints: BreakpointMap = {
        TIER_THRESHOLDS[tier]: options for tier, options in per_tier.items() if options
    }
    return breakpoints or None


def build_breakpoints(component: Any) -> BreakpointMap | None:
    """Build the breakpoint map for a component's attributes."""
    return build_breakpoints_from_entries(classify_attributes(component))
