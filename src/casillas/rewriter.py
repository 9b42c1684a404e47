"""Task list rewrite over a markdown-it token stream.

Single left-to-right pass over the block token stream produced by
markdown-it. For every list item whose first inline text starts with
checkbox markup, the markup is stripped and a checkbox token is inserted
into the item's inline children (optionally wrapped in a label). List items
and lists receive the classes the HTML renderer emits:

    <ul class="contains-task-list">
    <li class="task-list-item enabled">
    <input type="checkbox" class="task-list-item-checkbox" checked="" disabled="" />

Only the innermost list that directly holds a task item is marked
``contains-task-list``. An outer list whose own items are plain, but which
wraps a nested task list, stays unmarked.

Thread Safety:
    All pass state (frame stack, id counter) is local to one rewrite()
    call. Independent token streams can be rewritten concurrently.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from markdown_it.token import Token

from casillas.config import DEFAULT_CONFIG, TaskListsConfig, as_id_prefix
from casillas.detector import CheckboxMatch, detect
from casillas.utils.logger import get_logger

logger = get_logger(__name__)

LIST_OPEN_TYPES = frozenset({"bullet_list_open", "ordered_list_open"})
LIST_CLOSE_TYPES = frozenset({"bullet_list_close", "ordered_list_close"})

CHECKBOX_TYPE = "task_list_checkbox"
LABEL_OPEN_TYPE = "task_list_label_open"
LABEL_CLOSE_TYPE = "task_list_label_close"

ITEM_CLASS = "task-list-item"
ENABLED_CLASS = "enabled"
CHECKBOX_CLASS = "task-list-item-checkbox"
LABEL_CLASS = "task-list-item-label"
CONTAINER_CLASS = "contains-task-list"

# markdown-it env key overriding TaskListsConfig.id_prefix for one document
ENV_ID_PREFIX = "task_lists_id_prefix"


@dataclass(slots=True)
class NestingFrame:
    """Bookkeeping for one currently open list.

    Attributes:
        opener: The list's ``*_list_open`` token
        has_task_item: An item of this list (not of a nested list) is a task
        annotated: ``contains-task-list`` has been added to the opener

    """

    opener: Token
    has_task_item: bool = False
    annotated: bool = False


def rewrite(
    tokens: list[Token],
    config: TaskListsConfig | None = None,
    env: Mapping[str, Any] | None = None,
) -> list[Token]:
    """Rewrite task list items in a markdown-it block token stream.

    Mutates ``tokens`` in place and returns the same list. The number of
    block tokens never changes; only inline children and attributes do.

    Args:
        tokens: Block-level tokens with inline children already parsed
        config: Task list options (defaults: disabled checkboxes, no label)
        env: markdown-it render environment. A ``task_lists_id_prefix``
            entry replaces ``config.id_prefix`` for this document, so pages
            combining several documents can keep label ids unique.

    Returns:
        The mutated token list

    Example:
        >>> from markdown_it import MarkdownIt
        >>> tokens = rewrite(MarkdownIt().parse("- [x] Done"))
        >>> tokens[1].attrGet("class")
        'task-list-item'

    """
    if config is None:
        config = DEFAULT_CONFIG
    id_prefix = config.id_prefix
    if env is not None and ENV_ID_PREFIX in env:
        id_prefix = as_id_prefix(env[ENV_ID_PREFIX])

    frames: list[NestingFrame] = []
    task_items = 0
    annotated = 0

    for index, token in enumerate(tokens):
        kind = token.type
        if kind in LIST_OPEN_TYPES:
            frames.append(NestingFrame(opener=token))
        elif kind == "list_item_open":
            inline = _first_inline(tokens, index)
            if inline is None:
                continue
            match = _match_inline(inline)
            if match is None:
                continue
            task_items += 1
            _todoify(token, inline, match, config, f"{id_prefix}{task_items}")
            if frames:
                frames[-1].has_task_item = True
        elif kind in LIST_CLOSE_TYPES:
            if not frames:
                continue
            frame = frames[-1]
            if frame.has_task_item and not frame.annotated:
                frame.opener.attrJoin("class", CONTAINER_CLASS)
                frame.annotated = True
                annotated += 1
            frames.pop()

    if task_items:
        logger.debug("Rewrote %d task list item(s) in %d list(s)", task_items, annotated)
    return tokens


def _first_inline(tokens: list[Token], index: int) -> Token | None:
    """Return the inline token of the paragraph opening the item at ``index``.

    Items that start with anything but a paragraph (code block, heading,
    nothing at all) have no candidate text.
    """
    if index + 2 >= len(tokens):
        return None
    if tokens[index + 1].type != "paragraph_open":
        return None
    inline = tokens[index + 2]
    return inline if inline.type == "inline" else None


def _match_inline(inline: Token) -> CheckboxMatch | None:
    """Detect checkbox markup that is the first text child of ``inline``."""
    match = detect(inline.content)
    if match is None:
        return None

    children = inline.children
    if not children or children[0].type != "text":
        return None
    markup = inline.content[: match.markup_length]
    if not children[0].content.startswith(markup):
        return None
    return match


def _todoify(
    item: Token,
    inline: Token,
    match: CheckboxMatch,
    config: TaskListsConfig,
    item_id: str,
) -> None:
    """Turn one list item into a task list item."""
    enabled = config.enabled.resolve()

    item.attrJoin("class", ITEM_CLASS)
    if enabled:
        item.attrJoin("class", ENABLED_CLASS)

    children = inline.children or []
    first = children[0]
    level = first.level
    inline.content = inline.content[match.markup_length :]
    first.content = first.content[match.markup_length :]
    rest = children if first.content else children[1:]

    checkbox = make_checkbox(checked=match.checked, enabled=enabled, level=level)

    if not config.label:
        inline.children = [checkbox, *rest]
    elif config.label_after:
        checkbox.attrSet("id", item_id)
        inline.children = [
            checkbox,
            make_label_open(level=level, html_for=item_id),
            *rest,
            make_label_close(level=level),
        ]
    else:
        inline.children = [
            make_label_open(level=level),
            checkbox,
            *rest,
            make_label_close(level=level),
        ]


def make_checkbox(*, checked: bool, enabled: bool, level: int = 0) -> Token:
    """Build the checkbox input token.

    Rendered by markdown-it's default renderToken() as
    ``<input type="checkbox" class="task-list-item-checkbox" ...>``.
    """
    token = Token(CHECKBOX_TYPE, "input", 0, level=level)
    token.attrSet("type", "checkbox")
    token.attrSet("class", CHECKBOX_CLASS)
    if checked:
        token.attrSet("checked", "")
    if not enabled:
        token.attrSet("disabled", "")
    return token


def make_label_open(*, level: int = 0, html_for: str | None = None) -> Token:
    token = Token(LABEL_OPEN_TYPE, "label", 1, level=level)
    token.attrSet("class", LABEL_CLASS)
    if html_for is not None:
        token.attrSet("for", html_for)
    return token


def make_label_close(*, level: int = 0) -> Token:
    return Token(LABEL_CLOSE_TYPE, "label", -1, level=level)


__all__ = [
    "ENV_ID_PREFIX",
    "NestingFrame",
    "make_checkbox",
    "make_label_close",
    "make_label_open",
    "rewrite",
]
