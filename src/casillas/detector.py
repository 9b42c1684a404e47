"""Checkbox markup detection for task list items.

A task list item starts with exactly one of three four-character sequences:

    [ ]   unchecked
    [x]   checked
    [X]   checked (uppercase)

followed by a literal space, which is part of the markup. Padding variants
such as ``[  ]``, ``[ x]``, ``[x ]`` and ``[]`` are ordinary list text.

Thread Safety:
    Pure functions over immutable values. Safe to call from any thread.

"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CHECKBOX_MARKUP_LENGTH", "CheckboxMatch", "detect"]

# "[", interior char, "]", trailing space
CHECKBOX_MARKUP_LENGTH = 4

_UNCHECKED = frozenset(" ")
_CHECKED = frozenset("xX")


@dataclass(frozen=True, slots=True)
class CheckboxMatch:
    """Result of a successful checkbox detection.

    Attributes:
        checked: True for ``[x]``/``[X]``, False for ``[ ]``
        markup_length: Number of leading characters to strip from the content

    """

    checked: bool
    markup_length: int = CHECKBOX_MARKUP_LENGTH


def detect(content: str) -> CheckboxMatch | None:
    """Detect checkbox markup at the very start of ``content``.

    Args:
        content: First line of a list item's inline content

    Returns:
        CheckboxMatch when the content starts with valid markup, else None

    Example:
        >>> detect("[x] Done")
        CheckboxMatch(checked=True, markup_length=4)
        >>> detect("[ x] Nope") is None
        True

    """
    if len(content) < CHECKBOX_MARKUP_LENGTH:
        return None
    if content[0] != "[" or content[2] != "]" or content[3] != " ":
        return None

    interior = content[1]
    if interior in _CHECKED:
        return CheckboxMatch(checked=True)
    if interior in _UNCHECKED:
        return CheckboxMatch(checked=False)
    return None
