"""markdown-it plugin installing the task list rewrite.

Usage:
    >>> from markdown_it import MarkdownIt
    >>> from casillas import tasklists_plugin
    >>> md = MarkdownIt().use(tasklists_plugin, enabled=True, label=True)
    >>> md.render("- [ ] Unchecked\\n- [x] Checked")
    '<ul class="contains-task-list">\\n<li class="task-list-item enabled"><label ...'

The rewrite runs as a core rule right after markdown-it's ``inline`` rule,
when every inline token already has its children but before the
typographic replacements touch the text.

In label-after mode each checkbox gets an id linking it to its label.
When several documents end up on one page, give each its own prefix:

    >>> md.render(source, {"task_lists_id_prefix": "post-42-task-"})

Thread Safety:
    The installed rule closes over a frozen TaskListsConfig and keeps no
    state between documents. A configured MarkdownIt instance can render
    from multiple threads.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from casillas.config import ITEM_ID_PREFIX, TaskListsConfig
from casillas.errors import PluginError
from casillas.rewriter import rewrite

if TYPE_CHECKING:
    from markdown_it import MarkdownIt
    from markdown_it.rules_core import StateCore

PLUGIN_NAME = "task_lists"
ANCHOR_RULE = "inline"


def tasklists_plugin(
    md: MarkdownIt,
    enabled: object = False,
    label: object = False,
    label_after: object = False,
    id_prefix: object = ITEM_ID_PREFIX,
) -> None:
    """Install task list support on a MarkdownIt instance.

    Args:
        md: Host pipeline
        enabled: bool or zero-argument predicate; truthy results render
            interactive checkboxes and add the ``enabled`` item class
        label: Wrap checkbox and text in a ``<label>``
        label_after: With ``label``, put the label after the checkbox
        id_prefix: Prefix of label-after checkbox ids; a document's
            ``env["task_lists_id_prefix"]`` takes precedence

    Raises:
        PluginError: If the host has no ``inline`` core rule to anchor to

    """
    install(
        md,
        TaskListsConfig.create(
            enabled=enabled, label=label, label_after=label_after, id_prefix=id_prefix
        ),
    )


def install(md: MarkdownIt, config: TaskListsConfig) -> None:
    """Install the rewrite with an already resolved configuration.

    Args:
        md: Host pipeline
        config: Task list options

    Raises:
        PluginError: If the host has no ``inline`` core rule to anchor to

    """

    def task_lists(state: StateCore) -> None:
        rewrite(state.tokens, config, state.env)

    try:
        md.core.ruler.after(ANCHOR_RULE, PLUGIN_NAME, task_lists)
    except KeyError as e:
        raise PluginError(PLUGIN_NAME, f"core rule {ANCHOR_RULE!r} not found") from e


__all__ = ["PLUGIN_NAME", "install", "tasklists_plugin"]
