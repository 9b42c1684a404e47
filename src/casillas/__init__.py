"""
Casillas — GitHub-style task list checkboxes for markdown-it-py

Recognizes list items that start with ``[ ]``, ``[x]`` or ``[X]`` and rewrites
the markdown-it token stream so the stock HTML renderer emits checkboxes.

Quick Start:
    >>> from casillas import render
    >>> print(render("- [x] Done\\n- [ ] Todo"))
    <ul class="contains-task-list">
    <li class="task-list-item"><input type="checkbox" class="task-list-item-checkbox" checked="" disabled="" />Done</li>
    <li class="task-list-item"><input type="checkbox" class="task-list-item-checkbox" disabled="" />Todo</li>
    </ul>

    >>> # As a plugin on your own pipeline
    >>> from markdown_it import MarkdownIt
    >>> from casillas import tasklists_plugin
    >>> md = MarkdownIt("commonmark").enable("table").use(tasklists_plugin, enabled=True)

    >>> # Or the high-level Markdown class
    >>> from casillas import Markdown
    >>> md = Markdown(label=True)
    >>> html = md("1. [ ] Write tests")

Installation:
    pip install casillas
"""

from typing import Any

from markdown_it import MarkdownIt
from markdown_it.token import Token

from casillas.config import (
    ITEM_ID_PREFIX,
    Computed,
    Constant,
    Enabled,
    TaskListsConfig,
    as_enabled,
)
from casillas.detector import CheckboxMatch, detect
from casillas.errors import CasillasError, PluginError
from casillas.plugin import install, tasklists_plugin
from casillas.rewriter import ENV_ID_PREFIX, NestingFrame, rewrite

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    enabled: object = False,
    label: bool = False,
    label_after: bool = False,
) -> list[Token]:
    """Parse Markdown source into a rewritten markdown-it token stream.

    Args:
        source: Markdown source text
        enabled: bool or zero-argument predicate for interactive checkboxes
        label: Wrap checkbox and text in a label
        label_after: Place the label after the checkbox

    Returns:
        Block-level token list

    Example:
        >>> tokens = parse("- [ ] Todo")
        >>> tokens[0].attrGet("class")
        'contains-task-list'
    """
    return Markdown(enabled=enabled, label=label, label_after=label_after).parse(source)


def render(
    source: str,
    *,
    enabled: object = False,
    label: bool = False,
    label_after: bool = False,
) -> str:
    """Render Markdown source to HTML with task list support.

    Args:
        source: Markdown source text
        enabled: bool or zero-argument predicate for interactive checkboxes
        label: Wrap checkbox and text in a label
        label_after: Place the label after the checkbox

    Returns:
        HTML string
    """
    return Markdown(enabled=enabled, label=label, label_after=label_after)(source)


class Markdown:
    """High-level Markdown processor with task lists installed.

    Usage:
        >>> md = Markdown(enabled=True)
        >>> html = md("- [x] Ship it")

        >>> # Access the token stream
        >>> tokens = md.parse("- [ ] Todo")
        >>> tokens[1].attrGet("class")
        'task-list-item enabled'

    Thread Safety:
        The underlying MarkdownIt instance is configured once in __init__.
        Safe to call concurrently from different threads.

    """

    __slots__ = ("_config", "_md")

    def __init__(
        self,
        *,
        enabled: object = False,
        label: bool = False,
        label_after: bool = False,
        id_prefix: str = ITEM_ID_PREFIX,
        preset: str = "commonmark",
    ) -> None:
        """Initialize Markdown processor.

        Args:
            enabled: bool or zero-argument predicate for interactive checkboxes
            label: Wrap checkbox and text in a label
            label_after: Place the label after the checkbox
            id_prefix: Prefix of label-after checkbox ids
            preset: markdown-it preset name (e.g. "commonmark", "zero")
        """
        self._config = TaskListsConfig.create(
            enabled=enabled, label=label, label_after=label_after, id_prefix=id_prefix
        )
        self._md = MarkdownIt(preset)
        install(self._md, self._config)

    @property
    def config(self) -> TaskListsConfig:
        """The resolved options every document is rewritten with."""
        return self._config

    def __call__(self, source: str, env: dict[str, Any] | None = None) -> str:
        """Parse and render Markdown in one call.

        Args:
            source: Markdown source text
            env: markdown-it environment for this document, e.g.
                ``{"task_lists_id_prefix": "doc-2-task-"}`` to keep label ids
                unique when several documents share a page
        """
        return self._md.render(source, env)

    def parse(self, source: str, env: dict[str, Any] | None = None) -> list[Token]:
        """Parse Markdown source into a rewritten token stream."""
        return self._md.parse(source, env)

    def render(self, tokens: list[Token]) -> str:
        """Render a token stream produced by parse() to HTML."""
        return self._md.renderer.render(tokens, self._md.options, {})


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "detect",
    "rewrite",
    # markdown-it integration
    "tasklists_plugin",
    "install",
    "ENV_ID_PREFIX",
    # Configuration
    "TaskListsConfig",
    "ITEM_ID_PREFIX",
    "Enabled",
    "Constant",
    "Computed",
    "as_enabled",
    # Values
    "CheckboxMatch",
    "NestingFrame",
    # Errors
    "CasillasError",
    "PluginError",
    # High-level
    "Markdown",
]
