"""Row selection for the issue table.

Only open issues can be selected. The select-all control is tri-state and
is derived from two counts rather than stored.
"""

import logging
from enum import Enum
from typing import Iterable, Optional
from pydantic import BaseModel, ConfigDict

from models.data_models import Issue

logger = logging.getLogger(__name__)


class CheckboxState(str, Enum):
    CHECKED = "checked"
    UNCHECKED = "unchecked"
    INDETERMINATE = "indeterminate"


def all_selected(selected_count: int, open_count: int) -> bool:
    return selected_count == open_count and open_count > 0


def some_selected(selected_count: int, open_count: int) -> bool:
    return 0 < selected_count < open_count


def checkbox_state(selected_count: int, open_count: int) -> CheckboxState:
    """State of the select-all checkbox for the given counts."""
    if all_selected(selected_count, open_count):
        return CheckboxState.CHECKED
    if some_selected(selected_count, open_count):
        return CheckboxState.INDETERMINATE
    return CheckboxState.UNCHECKED


def selection_label(selected_count: int) -> str:
    return f"Selected {selected_count}" if selected_count > 0 else "None selected"


class SelectionSnapshot(BaseModel):
    """Immutable view of the current selection."""
    model_config = ConfigDict(frozen=True)

    selected_ids: tuple[str, ...]
    total_selected: int
    open_count: int
    all_open_selected: bool
    some_selected: bool
    checkbox_state: CheckboxState
    label: str


class SelectionController:
    """Track which open issues are selected."""

    def __init__(self, issues: Iterable[Issue]):
        self.issues = list(issues)
        self._open_ids = [issue.id for issue in self.issues if issue.is_open]
        self._selected: frozenset[str] = frozenset()

    @classmethod
    def from_selected(cls, issues: Iterable[Issue], selected_ids: Optional[Iterable[str]]) -> "SelectionController":
        """Rebuild a controller from ids held by a client.

        Ids that are unknown or belong to a non-open issue are dropped.
        """
        controller = cls(issues)
        requested = set(selected_ids or ())
        allowed = requested & set(controller._open_ids)
        dropped = requested - allowed
        if dropped:
            logger.warning(f"Ignoring {len(dropped)} unselectable issue id(s): {sorted(dropped)}")
        controller._selected = frozenset(allowed)
        return controller

    @property
    def selected(self) -> frozenset[str]:
        return self._selected

    @property
    def open_count(self) -> int:
        return len(self._open_ids)

    @property
    def total_selected(self) -> int:
        return len(self._selected)

    @property
    def all_open_selected(self) -> bool:
        return all_selected(self.total_selected, self.open_count)

    @property
    def some_selected(self) -> bool:
        return some_selected(self.total_selected, self.open_count)

    def is_selected(self, issue_id: str) -> bool:
        return issue_id in self._selected

    def is_selectable(self, issue_id: str) -> bool:
        return issue_id in self._open_ids

    def toggle(self, issue_id: str) -> SelectionSnapshot:
        # Callers only offer this for open issues
        if issue_id in self._selected:
            self._selected = self._selected - {issue_id}
        else:
            self._selected = self._selected | {issue_id}
        return self.snapshot()

    def select_all(self, checked: bool) -> SelectionSnapshot:
        self._selected = frozenset(self._open_ids) if checked else frozenset()
        return self.snapshot()

    def snapshot(self) -> SelectionSnapshot:
        selected_count = self.total_selected
        open_count = self.open_count
        return SelectionSnapshot(
            selected_ids=tuple(issue.id for issue in self.issues if issue.id in self._selected),
            total_selected=selected_count,
            open_count=open_count,
            all_open_selected=all_selected(selected_count, open_count),
            some_selected=some_selected(selected_count, open_count),
            checkbox_state=checkbox_state(selected_count, open_count),
            label=selection_label(selected_count),
        )
