"""First pass over a component's attributes: split plain and tiered options."""

import logging
from dataclasses import dataclass
from typing import Any, Iterator

from swiper_attrs.constants import CONFIG_ATTR_PREFIX, INITIALIZED_ATTR
from swiper_attrs.schema import Tier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttributeEntry:
    """One configuration attribute on a component.

    Attributes:
        name: Full attribute name, e.g. ``data-swiper-slides-per-view-tablet``.
        value: Raw attribute string.
        option: Kebab-case option name without prefix or tier suffix.
        tier: Tier named by the suffix, or None for a plain option.
    """

    name: str
    value: str
    option: str
    tier: Tier | None = None

    @property
    def is_tiered(self) -> bool:
        return self.tier is not None


def match_tier(name: str) -> Tier | None:
    """Return the tier whose suffix ends ``name``, if any."""
    for tier in Tier:
        if name.endswith(tier.suffix):
            return tier
    return None


def iter_config_attributes(component: Any) -> Iterator[tuple[str, str]]:
    """Yield ``(name, value)`` for prefixed attributes, in attribute order.

    The initialized marker is never part of the configuration.
    """
    for name, value in component.attrib.items():
        if not name.startswith(CONFIG_ATTR_PREFIX) or name == INITIALIZED_ATTR:
            continue
        yield name, value


def classify_attributes(component: Any) -> list[AttributeEntry]:
    """Classify every configuration attribute on ``component``.

    Args:
        component: Element whose ``attrib`` holds the configuration.

    Returns:
        Entries in attribute order. Tiered attributes with no option name in
        front of the suffix are dropped.
    """
    entries: list[AttributeEntry] = []

    for name, value in iter_config_attributes(component):
        option = name[len(CONFIG_ATTR_PREFIX):]
        tier = match_tier(name)

        if tier is not None:
            option = option[: -len(tier.suffix)] if option.endswith(tier.suffix) else ""
            if not option:
                logger.warning(f"Ignoring attribute {name!r}: no option before tier suffix")
                continue

        entries.append(AttributeEntry(name=name, value=value, option=option, tier=tier))

    return entries
