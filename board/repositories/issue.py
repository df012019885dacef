# -*- coding: utf-8 -*-
"""
Repository layer for Issue (pure DB access).

Every database failure surfaces as IssueStoreError carrying the backend's
message; callers never see DatabaseError directly.
"""
from __future__ import annotations
from typing import Optional, Dict, Any, List
from django.db import transaction, DatabaseError

from board.exceptions import IssueStoreError
from board.models import Issue


# ============== Queries ==============
def get(issue_id: int) -> Optional[Issue]:
    try:
        return Issue.objects.filter(id=issue_id).first()
    except DatabaseError as exc:
        raise IssueStoreError(str(exc)) from exc

def list_all() -> List[Issue]:
    try:
        return list(Issue.objects.all().order_by("-created_at", "-id"))
    except DatabaseError as exc:
        raise IssueStoreError(str(exc)) from exc

def last_issue_key() -> str:
    """issue_key of the most recently created row, or "" on an empty table."""
    try:
        row = (
            Issue.objects.order_by("-created_at", "-id")
            .values_list("issue_key", flat=True)[:1]
        )
        return next(iter(row), "") or ""
    except DatabaseError as exc:
        raise IssueStoreError(str(exc)) from exc


# ============== Mutations ==============
def insert(data: Dict[str, Any]) -> Issue:
    try:
        with transaction.atomic():
            obj = Issue.objects.create(**data)
            obj.refresh_from_db()
            return obj
    except DatabaseError as exc:
        raise IssueStoreError(str(exc)) from exc

def update(issue_id: int, patch: Dict[str, Any]) -> Issue:
    try:
        with transaction.atomic():
            obj = Issue.objects.select_for_update().filter(id=issue_id).first()
            if obj is None:
                raise IssueStoreError("Issue not found")
            for k, v in patch.items():
                setattr(obj, k, v)
            obj.save(update_fields=list(patch.keys()) + ["updated_at"])
            obj.refresh_from_db()
            return obj
    except DatabaseError as exc:
        raise IssueStoreError(str(exc)) from exc

def delete(issue_id: int) -> None:
    try:
        with transaction.atomic():
            deleted, _ = Issue.objects.filter(id=issue_id).delete()
    except DatabaseError as exc:
        raise IssueStoreError(str(exc)) from exc
    if not deleted:
        raise IssueStoreError("Issue not found")
