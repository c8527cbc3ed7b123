from dataclasses import dataclass, field
from typing import Any, List

from jsondiffreport.differ import ARRAY_MARKER


@dataclass
class TopLevelStats:
    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)


def _is_zero(value: Any) -> bool:
    return value == 0 and not isinstance(value, bool)


def stat_top_level_diff(delta: Any) -> TopLevelStats:
    """Bucket the first-level keys of a delta into added / removed / updated.

    Keys keep the delta's own order. Values matching no known shape are
    skipped rather than reported.
    """
    result = TopLevelStats()

    if not delta or not isinstance(delta, dict):
        return result

    for key, value in delta.items():
        if key == ARRAY_MARKER:
            continue

        if isinstance(value, list):
            # [new]
            if len(value) == 1:
                result.added.append(key)
                continue
            # [old, 0, 0]
            if len(value) == 3 and _is_zero(value[1]) and _is_zero(value[2]):
                result.removed.append(key)
                continue
            # [old, new]
            if len(value) == 2:
                result.updated.append(key)
                continue

        # Nested sub-diff, or another array encoding such as a text diff
        if isinstance(value, (dict, list)):
            result.updated.append(key)

    return result
