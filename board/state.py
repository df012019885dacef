# ============================================
# board/state.py
# ============================================
from dataclasses import dataclass
from typing import Optional

from board.workflow import BOARD_VIEWS, STANDARD_BOARD, BoardView, get_view


@dataclass
class BoardState:
    """
    Page state for the board: active tab, search, form and error banner.

    Only the transition methods below change it.
    """
    tab: str = STANDARD_BOARD.name
    search: str = ''
    show_form: bool = False
    editing_id: Optional[int] = None
    error: str = ''

    @property
    def view(self) -> BoardView:
        return get_view(self.tab)

    @property
    def form_visible(self) -> bool:
        return self.tab == STANDARD_BOARD.name and (self.show_form or self.editing_id is not None)

    def switch_tab(self, tab: str) -> None:
        if tab not in BOARD_VIEWS:
            raise ValueError(f"Unknown board view: {tab!r}")
        self.tab = tab

    def set_search(self, term: Optional[str]) -> None:
        self.search = term or ''

    def toggle_form(self) -> None:
        if self.tab != STANDARD_BOARD.name:
            return
        if self.show_form or self.editing_id is not None:
            self.reset_form()
        else:
            self.show_form = True

    def start_edit(self, issue) -> None:
        self.editing_id = issue.id
        self.show_form = True

    def reset_form(self) -> None:
        self.editing_id = None
        self.show_form = False

    def fail(self, message: str) -> None:
        self.error = message

    def clear_error(self) -> None:
        self.error = ''

    def issue_deleted(self, issue_id: int) -> None:
        if self.editing_id == issue_id:
            self.reset_form()
