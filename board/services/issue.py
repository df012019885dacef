# ============================================
# board/services/issue.py
# ============================================
import logging
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction

from board.exceptions import IssueStoreError
from board.keys import next_issue_key
from board.models import Issue
from board.repositories import issue as repo

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill all required fields."

# Fields an edit may touch; status only changes through move_issue
EDITABLE_FIELDS = (
    'summary',
    'description',
    'acceptance_criteria',
    'issue_type',
    'priority',
    'story_points',
    'start_date',
    'due_date',
    'sprint',
)


class IssueService:

    @staticmethod
    def _key_prefix() -> str:
        return getattr(settings, 'ISSUE_KEY_PREFIX', 'APP')

    @staticmethod
    def _clean_fields(
        *,
        summary: Optional[str],
        description: Optional[str],
        acceptance_criteria: Optional[str],
        issue_type: Optional[str],
        priority: Optional[str],
        story_points: Optional[Decimal] = None,
        start_date: Optional[date] = None,
        due_date: Optional[date] = None,
        sprint: Optional[str] = None
    ) -> Dict[str, Any]:
        """Trim text, reject missing required fields, normalise optionals"""
        summary = (summary or '').strip()
        description = (description or '').strip()
        acceptance_criteria = (acceptance_criteria or '').strip()

        if not (summary and description and acceptance_criteria and issue_type and priority):
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        if issue_type not in Issue.IssueType.values:
            raise ValidationError(f"Unknown issue type: {issue_type}")
        if priority not in Issue.Priority.values:
            raise ValidationError(f"Unknown priority: {priority}")
        if story_points is not None and story_points < 0:
            raise ValidationError("Story points must be zero or greater.")

        return {
            'summary': summary,
            'description': description,
            'acceptance_criteria': acceptance_criteria,
            'issue_type': issue_type,
            'priority': priority,
            'story_points': story_points,
            'start_date': start_date or None,
            'due_date': due_date or None,
            'sprint': (sprint or '').strip() or None,
        }

    @staticmethod
    def _insert_with_next_key(data: Dict[str, Any]) -> Issue:
        last_key = repo.last_issue_key()
        key = next_issue_key(last_key, IssueService._key_prefix())
        return repo.insert({'issue_key': key, **data})

    @staticmethod
    @transaction.atomic
    def create_issue(**fields) -> Issue:
        """Create a new issue in the backlog with the next sequential key"""

        data = IssueService._clean_fields(**fields)
        data['status'] = Issue.Status.BACKLOG.value

        try:
            issue = IssueService._insert_with_next_key(data)
        except IssueStoreError as exc:
            logger.warning("[issue] create failed: %s", exc.message)
            raise

        logger.info("[issue] created key=%s id=%s", issue.issue_key, issue.id)
        return issue

    @staticmethod
    def update_issue(*, issue_id: int, **fields) -> Issue:
        """Overwrite the editable fields; key, status and timestamps are kept"""

        data = IssueService._clean_fields(**fields)

        try:
            issue = repo.update(issue_id, data)
        except IssueStoreError as exc:
            logger.warning("[issue] update id=%s failed: %s", issue_id, exc.message)
            raise

        logger.info("[issue] updated key=%s id=%s", issue.issue_key, issue.id)
        return issue

    @staticmethod
    def move_issue(*, issue_id: int, status: str) -> Issue:
        """
        Set status unconditionally. Any status is reachable from any other;
        the board's forward actions are only shortcuts.
        """
        if status not in Issue.Status.values:
            raise ValidationError(f"Unknown status: {status}")

        try:
            issue = repo.update(issue_id, {'status': status})
        except IssueStoreError as exc:
            logger.warning("[issue] move id=%s to %s failed: %s", issue_id, status, exc.message)
            raise

        logger.info("[issue] moved key=%s to %s", issue.issue_key, issue.status)
        return issue

    @staticmethod
    @transaction.atomic
    def duplicate_issue(*, issue: Issue) -> Issue:
        """Copy an issue under a fresh key, keeping its status"""

        data = {field: getattr(issue, field) for field in EDITABLE_FIELDS}
        data['status'] = issue.status or Issue.Status.BACKLOG.value

        try:
            copy = IssueService._insert_with_next_key(data)
        except IssueStoreError as exc:
            logger.warning("[issue] duplicate of %s failed: %s", issue.issue_key, exc.message)
            raise

        logger.info("[issue] duplicated %s as %s", issue.issue_key, copy.issue_key)
        return copy

    @staticmethod
    def delete_issue(*, issue_id: int) -> None:
        """Delete issue"""

        try:
            repo.delete(issue_id)
        except IssueStoreError as exc:
            logger.warning("[issue] delete id=%s failed: %s", issue_id, exc.message)
            raise

        logger.info("[issue] deleted id=%s", issue_id)
