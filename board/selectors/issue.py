# ============================================
# board/selectors/issue.py
# ============================================
from dataclasses import dataclass
from typing import Dict, List, Optional

from board.models import Issue
from board.repositories import issue as repo
from board.workflow import (
    BoardView,
    ColumnSlice,
    board_metrics,
    filter_issues,
    get_view,
    partition_issues,
)


@dataclass
class BoardSnapshot:
    view: BoardView
    search: str
    total: int
    metrics: List[Dict]
    columns: List[ColumnSlice]


class IssueSelector:

    @staticmethod
    def get_issue_by_id(issue_id: int) -> Optional[Issue]:
        """Get single issue"""
        return repo.get(issue_id)

    @staticmethod
    def get_issues_list(search: str = None) -> List[Issue]:
        """All issues, newest first, narrowed by summary search"""
        return filter_issues(repo.list_all(), search)

    @staticmethod
    def get_board(view_name: str, search: str = None) -> BoardSnapshot:
        """
        Project every issue onto a board view.

        Search is applied before partitioning so column counts follow it;
        the total stays unfiltered.
        """
        view = get_view(view_name)
        all_issues = repo.list_all()
        filtered = filter_issues(all_issues, search)
        return BoardSnapshot(
            view=view,
            search=(search or '').strip(),
            total=len(all_issues),
            metrics=board_metrics(all_issues, filtered),
            columns=partition_issues(filtered, view),
        )
