"""Recursive configuration merge.

Mapping values merge key by key; any other value from the source overwrites.
Inputs are never mutated. Only mappings are copied, so element references
carried as leaf values keep their identity.
"""

from typing import Any, Mapping


def deep_merge(target: Any, source: Any) -> dict[str, Any]:
    """Merge ``source`` into a copy of ``target``.

    Args:
        target: Base mapping. Anything that is not a mapping counts as empty.
        source: Overriding mapping. Anything that is not a mapping is ignored.

    Returns:
        A new dict. Source scalars win over target scalars; nested mappings
        keep target keys the source does not mention.
    """
    output: dict[str, Any] = dict(target) if isinstance(target, Mapping) else {}
    if not isinstance(source, Mapping):
        return output

    for key, value in source.items():
        if isinstance(value, Mapping):
            output[key] = deep_merge(output.get(key), value)
        else:
            output[key] = value

    return output
