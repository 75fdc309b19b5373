"""Row view models and text rendering for the issue table."""

from pydantic import BaseModel

from issues.selection import CheckboxState, SelectionController, SelectionSnapshot
from models.data_models import Issue

STATUS_LABELS = {"open": "Open", "resolved": "Resolved"}

CHECKBOX_MARKERS = {
    CheckboxState.CHECKED: "[x]",
    CheckboxState.UNCHECKED: "[ ]",
    CheckboxState.INDETERMINATE: "[-]",
}


class IssueRow(BaseModel):
    """One table row: the issue plus its selection state."""
    id: str
    name: str
    message: str
    status: str
    status_label: str
    num_events: int
    num_users: int
    selectable: bool
    selected: bool


class IssueTableResponse(BaseModel):
    """Response model for the issue table endpoints."""
    rows: list[IssueRow]
    selection: SelectionSnapshot


def build_issue_row(issue: Issue, selected: bool) -> IssueRow:
    return IssueRow(
        id=issue.id,
        name=issue.name,
        message=issue.message,
        status=issue.status,
        status_label=STATUS_LABELS[issue.status],
        num_events=issue.num_events,
        num_users=issue.num_users,
        selectable=issue.is_open,
        selected=selected,
    )


def build_issue_table(controller: SelectionController) -> IssueTableResponse:
    return IssueTableResponse(
        rows=[build_issue_row(issue, controller.is_selected(issue.id)) for issue in controller.issues],
        selection=controller.snapshot(),
    )


def render_issue_table(table: IssueTableResponse) -> str:
    """Render the table as plain text; resolved rows show an empty marker."""
    header = f"{CHECKBOX_MARKERS[table.selection.checkbox_state]} {table.selection.label}"
    name_width = max([len("Name")] + [len(row.name) for row in table.rows])
    message_width = max([len("Message")] + [len(row.message) for row in table.rows])

    lines = [
        header,
        "",
        f"    {'Name':<{name_width}}  {'Message':<{message_width}}  Status",
    ]
    for row in table.rows:
        if not row.selectable:
            marker = "   "
        else:
            marker = "[x]" if row.selected else "[ ]"
        lines.append(
            f"{marker} {row.name:<{name_width}}  {row.message:<{message_width}}  {row.status_label}"
        )
    return "\n".join(lines)
