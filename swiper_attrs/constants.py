"""
constants.py — Attribute vocabulary, library class names and tier thresholds.

Every selector, attribute name and pixel threshold used by the engine lives here.
Never hardcode these strings anywhere else in the codebase.
"""

# =============================================================================
# ROLE ATTRIBUTE
# =============================================================================

ROLE_ATTR = "data-swiper"

ROLE_COMPONENT = "component"
ROLE_CONTAINER = "container"
ROLE_WRAPPER = "wrapper"
ROLE_SLIDE = "slide"
ROLE_PAGINATION = "pagination"
ROLE_NAV_PREV = "nav-prev"
ROLE_NAV_NEXT = "nav-next"

# =============================================================================
# CONFIGURATION ATTRIBUTES
# =============================================================================

CONFIG_ATTR_PREFIX = "data-swiper-"

# Set by the controller only. Authors must never write it by hand.
INITIALIZED_ATTR = "data-swiper-initialized"
INITIALIZED_VALUE = "true"

# =============================================================================
# LIBRARY CLASS NAMES
# =============================================================================

SWIPER_CLASSES = {
    ROLE_CONTAINER: "swiper",
    ROLE_WRAPPER: "swiper-wrapper",
    ROLE_SLIDE: "swiper-slide",
    ROLE_PAGINATION: "swiper-pagination",
    ROLE_NAV_PREV: "swiper-button-prev",
    ROLE_NAV_NEXT: "swiper-button-next",
}

# =============================================================================
# RESPONSIVE TIERS (mobile-first)
# =============================================================================

# Mobile portrait is 0-479px and is carried by the plain attribute.
BREAKPOINT_MOBILE_LANDSCAPE = 480
BREAKPOINT_TABLET = 768
BREAKPOINT_DESKTOP = 992


def role_xpath(role: str) -> str:
    """Descendant XPath for an element carrying the given role."""
    return f'.//*[@{ROLE_ATTR}="{role}"]'
