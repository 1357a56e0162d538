"""Convert raw attribute strings into typed option values."""

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

# ASCII digits only; a leading sign is deliberately not accepted.
_INTEGER_RE = re.compile(r"[0-9]+")
_DECIMAL_RE = re.compile(r"[0-9]+\.[0-9]+")
_KEBAB_RE = re.compile(r"-([a-z])")


def kebab_to_camel(name: str) -> str:
    """Convert a kebab-case option name to the library's camelCase.

    Example: ``"slides-per-view"`` -> ``"slidesPerView"``.
    """
    return _KEBAB_RE.sub(lambda match: match.group(1).upper(), name)


def _looks_like_json(value: str) -> bool:
    return (value.startswith("{") and value.endswith("}")) or (
        value.startswith("[") and value.endswith("]")
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} is not valid JSON")


def safe_json_parse(value: str, fallback: Any = None) -> Any:
    """Parse JSON, returning ``fallback`` and logging a warning on failure.

    ``NaN`` and ``Infinity`` are rejected, and nesting too deep for the
    decoder counts as a failure rather than an error.
    """
    try:
        return json.loads(value, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        shown = value if len(value) <= 80 else f"{value[:77]}..."
        logger.warning(f"Invalid JSON in attribute value {shown!r}: {type(e).__name__}: {e}")
        return fallback


def parse_value(value: str) -> Any:
    """Coerce a raw attribute string to a typed value.

    Rules, first match wins:
        - ``"true"`` / ``"false"`` -> bool
        - unsigned integer -> int
        - unsigned decimal -> float
        - ``{...}`` or ``[...]`` -> parsed JSON, or the original string if invalid
        - anything else -> the original string

    Negative numbers and the empty string pass through unchanged.
    """
    if value == "true":
        return True
    if value == "false":
        return False

    if _INTEGER_RE.fullmatch(value):
        return int(value)
    if _DECIMAL_RE.fullmatch(value):
        return float(value)

    if _looks_like_json(value):
        return safe_json_parse(value, fallback=value)
    if value.startswith(("{", "[")):
        logger.warning(f"Attribute value {value!r} opens like JSON but is not closed, kept as string")

    return value
