import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from board.models import Issue


@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def issue_payload():
    return {
        "summary": "Fix crash on save",
        "description": "App crashes when saving a draft",
        "acceptance_criteria": "Saving a draft never crashes",
        "issue_type": "Bug",
        "priority": "P0",
    }


@pytest.fixture
def make_issue(db):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "issue_key": f"APP-{counter['n']:04d}",
            "summary": f"Issue {counter['n']}",
            "description": "Some description",
            "acceptance_criteria": "Some criteria",
            "issue_type": Issue.IssueType.TASK,
            "priority": Issue.Priority.P2,
            "status": Issue.Status.BACKLOG,
        }
        data.update(overrides)
        return Issue.objects.create(**data)

    return _make
