# ============================================
# board/workflow.py
# ============================================
"""
Board views over the issue status enumeration.

Both views project the same issue list into columns. A column's forward
action advances an issue to the next column; the last column wraps around.
Drops are not restricted by this graph: any column accepts any issue.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from board.models import Issue

Status = Issue.Status


@dataclass(frozen=True)
class BoardColumn:
    status: str
    title: str
    move_to: str
    move_label: str
    empty_text: str
    accent: bool = False


@dataclass(frozen=True)
class BoardView:
    name: str
    label: str
    columns: Sequence[BoardColumn]

    @property
    def statuses(self) -> List[str]:
        return [c.status for c in self.columns]

    def column_for(self, status: str) -> Optional[BoardColumn]:
        for column in self.columns:
            if column.status == status:
                return column
        return None


@dataclass
class ColumnSlice:
    column: BoardColumn
    issues: List[Issue] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.issues)


STANDARD_BOARD = BoardView(
    name='standard',
    label='Board',
    columns=(
        BoardColumn(Status.BACKLOG.value, 'Backlog', Status.SPRINT.value, 'Move to Sprint',
                    'Backlog is clear. Add new issues to get started.'),
        BoardColumn(Status.SPRINT.value, 'Sprint', Status.IN_PROGRESS.value, 'Move to In progress',
                    'Sprint is empty. Pull issues from backlog.', accent=True),
        BoardColumn(Status.IN_PROGRESS.value, 'In progress', Status.DONE.value, 'Move to Done',
                    'In progress work shows here.', accent=True),
        BoardColumn(Status.DONE.value, 'Done', Status.BACKLOG.value, 'Recycle to Backlog',
                    'No completed issues yet.'),
    ),
)

SPRINT_BOARD = BoardView(
    name='sprint',
    label='Current Sprint',
    columns=(
        BoardColumn(Status.SPRINT.value, 'Sprint Backlog', Status.IN_PROGRESS.value, 'Move to In progress',
                    'Sprint backlog is empty.'),
        BoardColumn(Status.IN_PROGRESS.value, 'In progress', Status.DONE.value, 'Move to Done',
                    'No in-progress issues yet.', accent=True),
        BoardColumn(Status.DONE.value, 'Done', Status.RELEASED.value, 'Move to Released',
                    'No done issues yet.'),
        BoardColumn(Status.RELEASED.value, 'Released', Status.SPRINT.value, 'Recycle to Sprint Backlog',
                    'No released issues yet.'),
    ),
)

BOARD_VIEWS: Dict[str, BoardView] = {
    STANDARD_BOARD.name: STANDARD_BOARD,
    SPRINT_BOARD.name: SPRINT_BOARD,
}

# Header metrics, in display order
METRIC_STATUSES = (
    ('Backlog', Status.BACKLOG),
    ('In progress', Status.IN_PROGRESS),
    ('Sprint', Status.SPRINT),
    ('Done', Status.DONE),
)


def get_view(name: str) -> BoardView:
    try:
        return BOARD_VIEWS[name]
    except KeyError:
        raise ValueError(f"Unknown board view: {name!r}")


def forward_status(view: BoardView, status: str) -> Optional[str]:
    """Status the column's forward action moves to, or None off this board."""
    column = view.column_for(status)
    return column.move_to if column else None


def filter_issues(issues: Iterable[Issue], search: Optional[str]) -> List[Issue]:
    """Case-insensitive substring match on summary; blank search keeps all."""
    term = (search or '').strip().lower()
    issues = list(issues)
    if not term:
        return issues
    return [i for i in issues if term in str(i.summary or '').lower()]


def partition_issues(issues: Iterable[Issue], view: BoardView) -> List[ColumnSlice]:
    slices = [ColumnSlice(column=c) for c in view.columns]
    by_status = {s.column.status: s for s in slices}
    for issue in issues:
        target = by_status.get(str(issue.status))
        if target is not None:
            target.issues.append(issue)
    return slices


def count_by_status(issues: Iterable[Issue]) -> Dict[str, int]:
    counts = {value: 0 for value in Status.values}
    for issue in issues:
        status = str(issue.status)
        if status in counts:
            counts[status] += 1
    return counts


def board_metrics(all_issues: Sequence[Issue], filtered: Sequence[Issue]) -> List[Dict]:
    """
    Header metrics: the total is over every issue, the per-status
    counts follow the current search.
    """
    counts = count_by_status(filtered)
    metrics = [{'label': 'Total Issues', 'status': None, 'count': len(all_issues)}]
    for label, status in METRIC_STATUSES:
        metrics.append({'label': label, 'status': status.value, 'count': counts[status.value]})
    return metrics
