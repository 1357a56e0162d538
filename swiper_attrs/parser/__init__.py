"""Attribute parser - turns data-swiper-* attributes into slider configuration.

This module provides:
- Value coercion (booleans, numbers, JSON, strings)
- Attribute classification into plain and tiered options
- The responsive breakpoint cascade
- The recursive configuration merge
"""

from swiper_attrs.parser.attributes import (
    merge_breakpoints,
    normalize_breakpoint_keys,
    parse_configuration,
    resolve_entries,
)
from swiper_attrs.parser.breakpoints import (
    BreakpointMap,
    build_breakpoints,
    build_breakpoints_from_entries,
)
from swiper_attrs.parser.classify import AttributeEntry, classify_attributes, match_tier
from swiper_attrs.parser.merge import deep_merge
from swiper_attrs.parser.values import kebab_to_camel, parse_value, safe_json_parse

__all__ = [
    "AttributeEntry",
    "BreakpointMap",
    "build_breakpoints",
    "build_breakpoints_from_entries",
    "classify_attributes",
    "deep_merge",
    "kebab_to_camel",
    "match_tier",
    "merge_breakpoints",
    "normalize_breakpoint_keys",
    "parse_configuration",
    "parse_value",
    "resolve_entries",
    "safe_json_parse",
]
