"""Attribute-driven slider configuration.

Turns declarative ``data-swiper-*`` markup into the configuration object of a
carousel library and binds it to the elements found under each component:

- parser   -> value coercion, breakpoint cascade, attribute resolution
- elements -> role lookup (nested or sibling placement) and final assembly
- runtime  -> lifecycle controller, instance registry, change watching
"""

from swiper_attrs.elements import ElementGraph, build_swiper_config, locate_elements
from swiper_attrs.errors import MissingDependencyError, StructuralError, SwiperAttributeError
from swiper_attrs.parser import build_breakpoints, deep_merge, parse_configuration, parse_value
from swiper_attrs.report import build_report
from swiper_attrs.runtime import DocumentMutations, InstanceRegistry, SwiperController
from swiper_attrs.schema import ComponentReport, Tier

__all__ = [
    # Resolution
    "parse_value",
    "build_breakpoints",
    "parse_configuration",
    "deep_merge",
    # Elements
    "ElementGraph",
    "locate_elements",
    "build_swiper_config",
    # Runtime
    "SwiperController",
    "InstanceRegistry",
    "DocumentMutations",
    # Reports
    "build_report",
    "ComponentReport",
    "Tier",
    # Errors
    "SwiperAttributeError",
    "StructuralError",
    "MissingDependencyError",
]
