"""Element graph module - role lookup and final configuration assembly."""

from swiper_attrs.elements.assembler import build_swiper_config
from swiper_attrs.elements.locator import ElementGraph, locate_elements, mark_elements

__all__ = [
    "ElementGraph",
    "build_swiper_config",
    "locate_elements",
    "mark_elements",
]
