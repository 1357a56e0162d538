"""Pydantic models for defaults, tiers and inspection reports."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from swiper_attrs.constants import (
    BREAKPOINT_DESKTOP,
    BREAKPOINT_MOBILE_LANDSCAPE,
    BREAKPOINT_TABLET,
)


class Tier(str, Enum):
    """Named responsive tiers, in ascending width order."""

    MOBILE_PORTRAIT = "mobile-portrait"
    MOBILE_LANDSCAPE = "mobile-landscape"
    TABLET = "tablet"
    DESKTOP = "desktop"

    @property
    def suffix(self) -> str:
        """Attribute name suffix, including the leading dash."""
        return f"-{self.value}"

    @property
    def threshold(self) -> int | None:
        """Pixel threshold, or None for the base tier."""
        return TIER_THRESHOLDS.get(self)

    @property
    def is_base(self) -> bool:
        return self is Tier.MOBILE_PORTRAIT


TIER_THRESHOLDS: dict[Tier, int] = {
    Tier.MOBILE_LANDSCAPE: BREAKPOINT_MOBILE_LANDSCAPE,
    Tier.TABLET: BREAKPOINT_TABLET,
    Tier.DESKTOP: BREAKPOINT_DESKTOP,
}


# ============================================================================
# Defaults
# ============================================================================


class _LibraryOptions(BaseModel):
    """Options dumped in the slider library's camelCase naming."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_config(self) -> dict[str, Any]:
        """Dump as a fresh configuration dict keyed by library option names."""
        return self.model_dump(by_alias=True)


class SliderDefaults(_LibraryOptions):
    """Base configuration applied before any attribute."""

    slides_per_view: int = Field(default=1, ge=1, description="Slides visible per view")
    space_between: int = Field(default=16, ge=0, description="Gap between slides in px")
    loop: bool = Field(default=False, description="Continuous loop mode")
    speed: int = Field(default=400, ge=0, description="Transition duration in ms")


class AutoplayDefaults(_LibraryOptions):
    """Expansion of the ``autoplay="true"`` shorthand."""

    delay: int = Field(default=3000, ge=0, description="Delay between transitions in ms")
    disable_on_interaction: bool = Field(default=False)


class PaginationDefaults(_LibraryOptions):
    """Pagination sub-options set when a pagination element is bound."""

    clickable: bool = Field(default=True)


DEFAULT_CONFIG = SliderDefaults()
DEFAULT_AUTOPLAY = AutoplayDefaults()
DEFAULT_PAGINATION = PaginationDefaults()


# ============================================================================
# Reports
# ============================================================================


class ComponentReport(BaseModel):
    """Resolution outcome for one component, as produced by ``build_report``."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="Position in document order")
    element_id: str | None = Field(default=None, description="The component's id attribute")
    slide_count: int = Field(default=0, ge=0)
    config: dict[str, Any] = Field(default_factory=dict)
    breakpoints: dict[int | str, Any] | None = Field(default=None)
    roles: list[str] = Field(default_factory=list, description="Roles found under the component")
    error: str | None = Field(default=None)

    @property
    def ok(self) -> bool:
        return self.error is None
