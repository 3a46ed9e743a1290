"""Allow-list driven label composition.

Object labels and annotations are arbitrary maps. Only keys on an
operator-configured allow-list may be exposed, and the output order follows
the allow-list so that series stay stable across processes and scrapes.
"""

from collections.abc import Iterable, Mapping

# Label names every StatefulSet record starts with.
IDENTITY_LABEL_KEYS: tuple[str, ...] = ("namespace", "name")


def create_label_keys_values(
    labels: Mapping[str, str] | None,
    allow_list: Iterable[str],
) -> tuple[list[str], list[str]]:
    """Select allow-listed labels as parallel key and value lists.

    Args:
        labels: The object's label map. None is treated as empty.
        allow_list: Keys permitted in the output, in output order.

    Returns:
        (keys, values) where keys is exactly the allow-list and each value is
        the label's value, or "" when the object does not carry that key.
    """
    source = labels or {}
    keys = list(allow_list)
    values = [source.get(key, "") for key in keys]
    return keys, values


def create_annotation_keys_values(
    annotations: Mapping[str, str] | None,
    allow_list: Iterable[str],
) -> tuple[list[str], list[str]]:
    """Select allow-listed annotations as parallel key and value lists."""
    return create_label_keys_values(annotations, allow_list)


def parse_allow_list(value: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize a configured allow-list.

    Accepts a comma separated string or an iterable of keys. Surrounding
    whitespace and empty entries are dropped; order is kept.
    """
    if value is None:
        return ()
    items = value.split(",") if isinstance(value, str) else value
    return tuple(item.strip() for item in items if item and item.strip())


def validate_allow_list(
    allow_list: Iterable[str],
    kind: str,
    reserved: Iterable[str] = IDENTITY_LABEL_KEYS,
) -> tuple[str, ...]:
    """Reject duplicate keys and keys that shadow reserved label names.

    Args:
        allow_list: Keys to check.
        kind: Human readable name of the list for error messages.
        reserved: Label names no allow-listed key may reuse.

    Returns:
        The allow-list as a tuple.

    Raises:
        ValueError: If a key repeats or collides with a reserved name.
    """
    keys = tuple(allow_list)
    reserved_keys = frozenset(reserved)
    seen: set[str] = set()
    for key in keys:
        if key in reserved_keys:
            raise ValueError(f"{kind} key {key!r} is a reserved label name")
        if key in seen:
            raise ValueError(f"{kind} key {key!r} is listed more than once")
        seen.add(key)
    return keys
