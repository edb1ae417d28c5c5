"""Dot-segmented wildcard matching shared by Action and Resource.

A pattern and a concrete value are both split on ``.``. Matching then walks
the segments left to right:

    ``*``           matches any value (universal pattern)
    ``security.*``  trailing ``*`` consumes one or more remaining segments
                    (matches ``security.x`` and ``security.admin.manage``)
    ``*.create``    non-terminal ``*`` matches exactly one segment, so the
                    segment counts must agree (matches ``service.create``,
                    not ``service.sub.create``)

Literal segments compare case-sensitively. The rule is intentionally narrow:
``*.create`` does not reach into nested services.

Usage:
    from src.domain.value_objects.pattern import matches_pattern

    matches_pattern("security.*", "security.admin.manage")  # True
    matches_pattern("*.create", "service.sub.create")      # False
"""

WILDCARD = "*"
SEGMENT_SEPARATOR = "."


def split_segments(value: str) -> list[str]:
    """Split a pattern or value into its dot-separated segments.

    Args:
        value: Pattern or concrete value.

    Returns:
        list[str]: Ordered segments (a value without dots is one segment).
    """
    return value.split(SEGMENT_SEPARATOR)


def matches_pattern(pattern: str, value: str) -> bool:
    """Check whether a policy pattern matches a concrete value.

    Args:
        pattern: Policy pattern (may contain ``*`` segments).
        value: Concrete value from the request.

    Returns:
        bool: True if the pattern matches the value.

    Example:
        >>> matches_pattern("*", "anything.at.all")
        True
        >>> matches_pattern("security.*", "security")
        False
    """
    if pattern == WILDCARD:
        return True

    pattern_segments = split_segments(pattern)
    value_segments = split_segments(value)
    last_index = len(pattern_segments) - 1

    for index, segment in enumerate(pattern_segments):
        if segment == WILDCARD and index == last_index:
            # Trailing wildcard: at least one value segment must remain
            return len(value_segments) > index

        if index >= len(value_segments):
            return False

        if segment != WILDCARD and segment != value_segments[index]:
            return False

    return len(pattern_segments) == len(value_segments)
