# ============================================
# board/views/page.py
# ============================================
"""
Server-rendered board page.

Every action posts, writes through the service, then redirects back to the
board so the page is rebuilt from what the store returned. A failed create or
edit renders the board in place instead, keeping what the user typed.
"""
from urllib.parse import urlencode

from django.contrib import messages
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_POST

from board.exceptions import IssueStoreError
from board.forms import IssueForm, MoveForm
from board.selectors.issue import BoardSnapshot, IssueSelector
from board.services.guard import CreateGuard, client_id_for
from board.services.issue import IssueService
from board.state import BoardState
from board.workflow import board_metrics, partition_issues
from .utils import SERVICE_ERRORS


def _as_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _state_from(params) -> BoardState:
    """Rebuild page state from query (GET) or hidden inputs (POST)"""
    state = BoardState()
    try:
        state.switch_tab(params.get("tab") or state.tab)
    except ValueError:
        pass
    state.set_search(params.get("search"))
    if params.get("form") == "1":
        state.toggle_form()
    editing_id = _as_int(params.get("edit"))
    if editing_id is not None:
        state.editing_id = editing_id
        state.show_form = True
    return state


def _board_url(state: BoardState) -> str:
    query = {"tab": state.tab}
    if state.search:
        query["search"] = state.search
    if state.editing_id is not None:
        query["edit"] = state.editing_id
    elif state.show_form:
        query["form"] = "1"
    return f"{reverse('board:index')}?{urlencode(query)}"


def _error_text(exc) -> str:
    return getattr(exc, "message", None) or exc.messages[0]


def _render_board(request, state: BoardState, form=None, notices=()):
    editing = None
    if state.editing_id is not None:
        try:
            editing = IssueSelector.get_issue_by_id(state.editing_id)
        except IssueStoreError as exc:
            state.fail(exc.message)
        if editing is None:
            state.reset_form()
        else:
            state.start_edit(editing)

    try:
        snapshot = IssueSelector.get_board(state.tab, state.search)
    except IssueStoreError as exc:
        state.fail(exc.message)
        snapshot = BoardSnapshot(
            view=state.view,
            search=state.search,
            total=0,
            metrics=board_metrics([], []),
            columns=partition_issues([], state.view),
        )

    if form is None:
        form = IssueForm.for_issue(editing) if editing else IssueForm()

    return render(request, "board/index.html", {
        "state": state,
        "board": snapshot,
        "form": form,
        "editing": editing,
        "notices": list(notices),
        "tabs": [("standard", "Board"), ("sprint", "Current Sprint")],
    })


@require_GET
def board_index(request):
    state = _state_from(request.GET)

    notices = []
    for message in messages.get_messages(request):
        if message.level == messages.ERROR:
            state.fail(str(message))
        else:
            notices.append(str(message))

    return _render_board(request, state, notices=notices)


@require_POST
def issue_create(request):
    state = _state_from(request.POST)
    form = IssueForm(request.POST)
    if not form.is_valid():
        state.fail(form.error_message())
        return _render_board(request, state, form=form)

    try:
        with CreateGuard(client_id_for(request, create_session=True)):
            issue = IssueService.create_issue(**form.cleaned_data)
    except SERVICE_ERRORS as exc:
        state.fail(_error_text(exc))
        return _render_board(request, state, form=form)

    messages.success(request, f"Created {issue.issue_key}.")
    state.reset_form()
    return redirect(_board_url(state))


@require_POST
def issue_update(request, issue_id: int):
    state = _state_from(request.POST)
    state.editing_id = issue_id
    state.show_form = True
    form = IssueForm(request.POST)
    if not form.is_valid():
        state.fail(form.error_message())
        return _render_board(request, state, form=form)

    try:
        IssueService.update_issue(issue_id=issue_id, **form.cleaned_data)
    except SERVICE_ERRORS as exc:
        state.fail(_error_text(exc))
        return _render_board(request, state, form=form)

    state.reset_form()
    return redirect(_board_url(state))


@require_POST
def issue_move(request, issue_id: int):
    state = _state_from(request.POST)
    form = MoveForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Unknown status.")
        return redirect(_board_url(state))

    try:
        IssueService.move_issue(issue_id=issue_id, status=form.cleaned_data["status"])
    except SERVICE_ERRORS as exc:
        messages.error(request, _error_text(exc))

    return redirect(_board_url(state))


@require_POST
def issue_delete(request, issue_id: int):
    state = _state_from(request.POST)
    try:
        IssueService.delete_issue(issue_id=issue_id)
    except SERVICE_ERRORS as exc:
        messages.error(request, _error_text(exc))
        return redirect(_board_url(state))

    state.issue_deleted(issue_id)
    return redirect(_board_url(state))


@require_POST
def issue_duplicate(request, issue_id: int):
    state = _state_from(request.POST)
    try:
        source = IssueSelector.get_issue_by_id(issue_id)
        if source is None:
            raise IssueStoreError("Issue not found")
        IssueService.duplicate_issue(issue=source)
    except SERVICE_ERRORS as exc:
        messages.error(request, _error_text(exc))

    return redirect(_board_url(state))
