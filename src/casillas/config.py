"""Task list configuration for Casillas.

Configuration is resolved once, when the plugin is installed on a
markdown-it instance, and passed explicitly to every rewrite pass.

The ``enabled`` option is either a constant or a zero-argument predicate.
Both are normalized into a small tagged variant so the rewriter never has
to sniff types per item:

    Enabled = Constant(bool) | Computed(() -> bool)

A Computed predicate is evaluated fresh for every task item, so callers can
enable some checkboxes and not others (e.g. based on the current user).

Usage:
    >>> config = TaskListsConfig(enabled=as_enabled(True), label=True)
    >>> config.enabled.resolve()
    True

    >>> TaskListsConfig.from_dict({"label": True, "labelAfter": True})
    TaskListsConfig(enabled=Constant(value=False), label=True, label_after=True, id_prefix='task-item-')

Thread Safety:
    All config objects are frozen. A Computed predicate is only as
    thread-safe as the callable it wraps.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from casillas.utils.logger import get_logger

logger = get_logger(__name__)

# Checkbox ids in label-after mode are f"{prefix}{n}", n counting task items per document
ITEM_ID_PREFIX = "task-item-"


@dataclass(frozen=True, slots=True)
class Constant:
    """Enablement fixed for every item of every pass."""

    value: bool = False

    def resolve(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class Computed:
    """Enablement decided per item by a zero-argument predicate."""

    predicate: Callable[[], Any]

    def resolve(self) -> bool:
        """Evaluate the predicate for one item.

        A predicate that raises is treated as "disabled" for that item;
        the failure is logged at DEBUG level.
        """
        try:
            return bool(self.predicate())
        except Exception:
            logger.debug("Task list 'enabled' predicate %r failed", self.predicate, exc_info=True)
            return False


Enabled = Constant | Computed

DISABLED = Constant(False)


def as_enabled(value: object) -> Enabled:
    """Normalize a user-facing ``enabled`` option into the Enabled variant.

    Args:
        value: bool, zero-argument callable, or an existing Enabled value.
            Anything else resolves to disabled.

    Returns:
        Constant or Computed

    Example:
        >>> as_enabled(True)
        Constant(value=True)
        >>> as_enabled("yes")
        Constant(value=False)

    """
    if isinstance(value, (Constant, Computed)):
        return value
    if isinstance(value, bool):
        return Constant(value)
    if callable(value):
        return Computed(value)
    return DISABLED


def as_id_prefix(value: object) -> str:
    """Return ``value`` when it is a non-empty string, else ITEM_ID_PREFIX."""
    if isinstance(value, str) and value:
        return value
    return ITEM_ID_PREFIX


@dataclass(frozen=True, slots=True)
class TaskListsConfig:
    """Immutable task list configuration.

    Attributes:
        enabled: Whether rendered checkboxes are interactive (no ``disabled``
            attribute, ``enabled`` class on the item)
        label: Wrap checkbox and item text in a ``<label>``
        label_after: With ``label``, place the label after the checkbox
            instead of around it
        id_prefix: Prefix of the checkbox ids that link a detached label
            (``label_after``) to its checkbox. Give each document rendered
            onto the same page its own prefix.

    """

    enabled: Enabled = field(default=DISABLED)
    label: bool = False
    label_after: bool = False
    id_prefix: str = ITEM_ID_PREFIX

    @classmethod
    def create(
        cls,
        *,
        enabled: object = False,
        label: object = False,
        label_after: object = False,
        id_prefix: object = ITEM_ID_PREFIX,
    ) -> TaskListsConfig:
        """Build a config from loosely typed option values.

        ``enabled`` goes through as_enabled(); ``label`` and ``label_after``
        use plain truthiness. A non-string or empty ``id_prefix`` falls back
        to the default. Never raises.
        """
        return cls(
            enabled=as_enabled(enabled),
            label=bool(label),
            label_after=bool(label_after),
            id_prefix=as_id_prefix(id_prefix),
        )

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> TaskListsConfig:
        """Create TaskListsConfig from a mapping.

        Accepts the snake_case field names as well as the camelCase
        ``labelAfter`` and ``idPrefix`` spellings.
        Unknown keys are silently ignored.

        Args:
            config_dict: Mapping with option values

        Returns:
            New TaskListsConfig instance

        Example:
            >>> config = TaskListsConfig.from_dict({
            ...     "enabled": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.enabled
            Constant(value=True)

        """
        options: dict[str, Any] = {}
        for key, value in config_dict.items():
            key = _ALIASES.get(key, key)
            if key in _OPTION_NAMES:
                options[key] = value
        return cls.create(**options)


_OPTION_NAMES = frozenset({"enabled", "label", "label_after", "id_prefix"})
_ALIASES = {"labelAfter": "label_after", "idPrefix": "id_prefix"}

DEFAULT_CONFIG = TaskListsConfig()


__all__ = [
    "Constant",
    "Computed",
    "Enabled",
    "DISABLED",
    "DEFAULT_CONFIG",
    "ITEM_ID_PREFIX",
    "TaskListsConfig",
    "as_enabled",
    "as_id_prefix",
]
