import pytest

from board.models import Issue
from board.state import BoardState


def test_defaults():
    state = BoardState()
    assert state.tab == "standard"
    assert state.view.name == "standard"
    assert state.form_visible is False
    assert state.error == ""


def test_switch_tab_rejects_unknown():
    state = BoardState()
    state.switch_tab("sprint")
    assert state.view.label == "Current Sprint"
    with pytest.raises(ValueError):
        state.switch_tab("roadmap")
    assert state.tab == "sprint"


def test_toggle_form_only_on_standard_board():
    state = BoardState()
    state.toggle_form()
    assert state.form_visible
    state.toggle_form()
    assert not state.form_visible

    state.switch_tab("sprint")
    state.toggle_form()
    assert not state.show_form


def test_form_hidden_on_sprint_tab_while_editing():
    state = BoardState()
    state.start_edit(Issue(id=3))
    assert state.form_visible
    state.switch_tab("sprint")
    assert not state.form_visible


def test_deleting_edited_issue_resets_form():
    state = BoardState()
    state.start_edit(Issue(id=3))
    state.issue_deleted(4)
    assert state.editing_id == 3
    state.issue_deleted(3)
    assert state.editing_id is None
    assert not state.show_form


def test_error_banner():
    state = BoardState()
    state.fail("network down")
    assert state.error == "network down"
    state.clear_error()
    assert state.error == ""


def test_search_none_becomes_empty():
    state = BoardState()
    state.set_search(None)
    assert state.search == ""
