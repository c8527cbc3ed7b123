"""
Structural JSON delta in the jsondiffpatch encoding.

DeepDiff does the comparison. Its tree view is folded into the delta
shape the jsondiffpatch HTML formatter and the classifier consume:

    [new]            added
    [old, new]       replaced
    [old, 0, 0]      removed
    {...}            nested changes, "_t": "a" marks an array node

Array entries are keyed by the new index, removals by "_" + old index.
"""

from typing import Any, Dict, List, Optional

from deepdiff import DeepDiff

from jsondiffreport.log import log

ARRAY_MARKER = "_t"
ARRAY_TYPE = "a"

ADDED_TYPES = ("dictionary_item_added", "iterable_item_added")
REMOVED_TYPES = ("dictionary_item_removed", "iterable_item_removed")
CHANGED_TYPES = ("values_changed", "type_changes")


class JsonBool(str):
    """A JSON boolean that never equals 0, 1 or a string.

    DeepDiff groups bool with int, so booleans are swapped for this type
    before comparing and restored afterwards.
    """

    __slots__ = ()

    def __new__(cls, value: bool):
        return super().__new__(cls, "true" if value else "false")

    def __eq__(self, other):
        return type(other) is JsonBool and str.__eq__(self, other)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((JsonBool, str.__str__(self)))

    @property
    def value(self) -> bool:
        return str.__eq__(self, "true")


def tag_booleans(value: Any) -> Any:
    if type(value) is bool:
        return JsonBool(value)
    if isinstance(value, dict):
        return {key: tag_booleans(item) for key, item in value.items()}
    if isinstance(value, list):
        return [tag_booleans(item) for item in value]
    return value


def untag_booleans(value: Any) -> Any:
    if isinstance(value, JsonBool):
        return value.value
    if isinstance(value, dict):
        return {key: untag_booleans(item) for key, item in value.items()}
    if isinstance(value, list):
        return [untag_booleans(item) for item in value]
    return value


def compute_delta(left: Any, right: Any) -> Optional[Any]:
    """Return the delta between two JSON values, or None when they are equal."""
    tree = DeepDiff(
        tag_booleans(left),
        tag_booleans(right),
        view="tree",
        ignore_numeric_type_changes=True,
        threshold_to_diff_deeper=0,
    )
    if not tree:
        return None

    delta: Dict[str, Any] = {}
    changes = 0
    for report_type, levels in tree.items():
        for level in levels:
            if report_type in ADDED_TYPES:
                path = level.path(output_format="list", use_t2=True)
                descriptor = untag_booleans([level.t2])
                removal = False
            elif report_type in REMOVED_TYPES:
                path = level.path(output_format="list")
                descriptor = untag_booleans([level.t1]) + [0, 0]
                removal = True
            elif report_type in CHANGED_TYPES:
                path = level.path(output_format="list", use_t2=True)
                descriptor = untag_booleans([level.t1, level.t2])
                removal = False
            else:
                log.warning(f"Ignoring unsupported change type {report_type}")
                continue

            changes += 1
            if not path:
                # The documents differ at the root.
                log.debug(f"Root level {report_type}")
                return descriptor
            _place(delta, path, descriptor, removal)

    log.debug(f"Collected {changes} changes")
    return _reorder(delta, left, right)


def _place(delta: Dict[str, Any], path: List[Any], descriptor: List[Any], removal: bool) -> None:
    node = delta
    for segment in path[:-1]:
        if isinstance(segment, int):
            node.setdefault(ARRAY_MARKER, ARRAY_TYPE)
        node = node.setdefault(str(segment), {})

    last = path[-1]
    key = str(last)
    if isinstance(last, int):
        node.setdefault(ARRAY_MARKER, ARRAY_TYPE)
        if removal:
            key = "_" + key
    node[key] = descriptor


def _array_sort_key(key: str):
    return (int(key.lstrip("_")), key.startswith("_"))


def _item(value: Any, key: Any) -> Any:
    if isinstance(value, dict):
        return value.get(key)
    if isinstance(value, list) and isinstance(key, int) and 0 <= key < len(value):
        return value[key]
    return None


def _reorder(node: Any, left: Any, right: Any) -> Any:
    # Objects: left key order, then right-only keys. Arrays: marker, then index.
    if not isinstance(node, dict):
        return node

    if node.get(ARRAY_MARKER) == ARRAY_TYPE:
        ordered: Dict[str, Any] = {ARRAY_MARKER: ARRAY_TYPE}
        for key in sorted((k for k in node if k != ARRAY_MARKER), key=_array_sort_key):
            if key.startswith("_"):
                ordered[key] = node[key]
            else:
                index = int(key)
                ordered[key] = _reorder(node[key], _item(left, index), _item(right, index))
        return ordered

    order: List[str] = []
    for side in (left, right):
        if isinstance(side, dict):
            order.extend(k for k in side if k in node and k not in order)
    order.extend(k for k in node if k not in order)
    return {key: _reorder(node[key], _item(left, key), _item(right, key)) for key in order}
