import logging
from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.core.exceptions import ValidationError
from django.db import DatabaseError

from board.exceptions import IssueStoreError
from board.models import Issue
from board.services.issue import REQUIRED_FIELDS_MESSAGE, IssueService


@pytest.mark.django_db
def test_first_issue_gets_first_key_and_backlog(issue_payload):
    issue = IssueService.create_issue(**issue_payload)
    assert issue.issue_key == "APP-0001"
    assert issue.status == "backlog"
    assert issue.issue_type == "Bug"
    assert issue.priority == "P0"
    assert issue.story_points is None
    assert issue.sprint is None


@pytest.mark.django_db
def test_keys_follow_most_recent_issue(issue_payload):
    keys = [IssueService.create_issue(**issue_payload).issue_key for _ in range(3)]
    assert keys == ["APP-0001", "APP-0002", "APP-0003"]


@pytest.mark.django_db
def test_key_prefix_from_settings(settings, issue_payload):
    settings.ISSUE_KEY_PREFIX = "OPS"
    assert IssueService.create_issue(**issue_payload).issue_key == "OPS-0001"


@pytest.mark.django_db
def test_foreign_last_key_restarts_sequence(make_issue, issue_payload):
    make_issue(issue_key="LEGACY-17")
    assert IssueService.create_issue(**issue_payload).issue_key == "APP-0001"


@pytest.mark.django_db
def test_deleted_keys_are_not_reused(issue_payload):
    IssueService.create_issue(**issue_payload)
    second = IssueService.create_issue(**issue_payload)
    third = IssueService.create_issue(**issue_payload)
    IssueService.delete_issue(issue_id=second.id)
    assert IssueService.create_issue(**issue_payload).issue_key == "APP-0004"
    assert third.issue_key == "APP-0003"


@pytest.mark.django_db
def test_key_collision_surfaces_as_store_error(make_issue, issue_payload):
    # newest row carries an older key, so the derived key already exists
    make_issue(issue_key="APP-0003")
    make_issue(issue_key="APP-0002")
    with pytest.raises(IssueStoreError):
        IssueService.create_issue(**issue_payload)
    assert Issue.objects.filter(issue_key="APP-0003").count() == 1


@pytest.mark.django_db
@pytest.mark.parametrize("missing", ["summary", "description", "acceptance_criteria", "issue_type", "priority"])
def test_missing_required_field_fails_without_write(issue_payload, missing):
    issue_payload[missing] = "   " if missing in ("summary", "description", "acceptance_criteria") else ""
    with pytest.raises(ValidationError) as exc:
        IssueService.create_issue(**issue_payload)
    assert exc.value.messages == [REQUIRED_FIELDS_MESSAGE]
    assert Issue.objects.count() == 0


@pytest.mark.django_db
def test_text_is_trimmed_and_optionals_normalised(issue_payload):
    issue_payload.update(
        summary="  Fix crash on save  ",
        story_points=Decimal("3"),
        start_date=date(2025, 3, 1),
        due_date=date(2025, 2, 1),
        sprint="   ",
    )
    issue = IssueService.create_issue(**issue_payload)
    assert issue.summary == "Fix crash on save"
    assert issue.story_points == Decimal("3")
    # no ordering constraint between the dates
    assert issue.due_date < issue.start_date
    assert issue.sprint is None


@pytest.mark.django_db
def test_negative_story_points_rejected(issue_payload):
    with pytest.raises(ValidationError):
        IssueService.create_issue(story_points=Decimal("-1"), **issue_payload)
    assert Issue.objects.count() == 0


@pytest.mark.django_db
def test_update_keeps_key_status_and_created_at(make_issue, issue_payload):
    original = make_issue(status=Issue.Status.IN_PROGRESS)
    updated = IssueService.update_issue(issue_id=original.id, sprint="Sprint 12", **issue_payload)
    assert updated.summary == "Fix crash on save"
    assert updated.sprint == "Sprint 12"
    assert updated.issue_key == original.issue_key
    assert updated.status == "in_progress"
    assert updated.created_at == original.created_at


@pytest.mark.django_db
def test_update_validates_required_fields(make_issue, issue_payload):
    original = make_issue()
    issue_payload["acceptance_criteria"] = ""
    with pytest.raises(ValidationError):
        IssueService.update_issue(issue_id=original.id, **issue_payload)
    original.refresh_from_db()
    assert original.summary.startswith("Issue ")


@pytest.mark.django_db
def test_move_changes_only_status(make_issue):
    issue = make_issue(story_points=Decimal("5"), sprint="S1")
    before = {f: getattr(issue, f) for f in ("issue_key", "summary", "description", "priority", "story_points", "sprint")}

    moved = IssueService.move_issue(issue_id=issue.id, status="done")

    assert moved.status == "done"
    assert {f: getattr(moved, f) for f in before} == before


@pytest.mark.django_db
@pytest.mark.parametrize("src, dst", [
    ("backlog", "released"),
    ("released", "sprint"),
    ("done", "backlog"),
    ("in_progress", "in_progress"),
])
def test_any_status_reachable_from_any_other(make_issue, src, dst):
    issue = make_issue(status=src)
    assert IssueService.move_issue(issue_id=issue.id, status=dst).status == dst


@pytest.mark.django_db
def test_move_rejects_unknown_status(make_issue):
    issue = make_issue()
    with pytest.raises(ValidationError):
        IssueService.move_issue(issue_id=issue.id, status="archived")


@pytest.mark.django_db
def test_move_missing_issue_is_store_error():
    with pytest.raises(IssueStoreError) as exc:
        IssueService.move_issue(issue_id=999, status="done")
    assert exc.value.message == "Issue not found"


@pytest.mark.django_db
def test_duplicate_copies_fields_and_status(make_issue):
    source = make_issue(status=Issue.Status.DONE, story_points=Decimal("2"), sprint="Sprint 4")
    copy = IssueService.duplicate_issue(issue=source)

    assert copy.id != source.id
    assert copy.issue_key == "APP-0002"
    assert copy.status == "done"
    for field in ("summary", "description", "acceptance_criteria", "issue_type", "priority", "story_points", "sprint"):
        assert getattr(copy, field) == getattr(source, field)


@pytest.mark.django_db
def test_duplicate_without_status_falls_back_to_backlog(make_issue):
    source = make_issue()
    source.status = ""
    assert IssueService.duplicate_issue(issue=source).status == "backlog"


@pytest.mark.django_db
def test_delete_removes_row(make_issue):
    issue = make_issue()
    IssueService.delete_issue(issue_id=issue.id)
    assert not Issue.objects.filter(id=issue.id).exists()


@pytest.mark.django_db
def test_delete_missing_issue_is_store_error():
    with pytest.raises(IssueStoreError):
        IssueService.delete_issue(issue_id=12345)


@pytest.mark.django_db
def test_store_failure_carries_backend_message(issue_payload, caplog):
    with patch("board.repositories.issue.Issue.objects.create", side_effect=DatabaseError("connection refused")):
        with caplog.at_level(logging.WARNING, logger="board"):
            with pytest.raises(IssueStoreError) as exc:
                IssueService.create_issue(**issue_payload)

    assert exc.value.message == "connection refused"
    assert "create failed: connection refused" in caplog.text
    assert Issue.objects.count() == 0
